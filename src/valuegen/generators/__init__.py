"""Generators module - the generator abstraction and its combinator library.

- base: the immutable Generator type and its entry points
- combinators: fmap, bind, tuples, sized, resize, scale, such_that, ...
- builders: array, set_of, record, hash_map
- scalars: numbers, characters, strings, symbols, UUIDs
- fakes: Faker-backed realistic values
"""

from valuegen.generators.base import Generator, is_generator
from valuegen.generators.combinators import (
    bind,
    choose,
    constant,
    elements,
    fmap,
    frequency,
    not_empty,
    one_of,
    resize,
    return_,
    scale,
    shuffle,
    sized,
    some_of,
    such_that,
    tuples,
)
from valuegen.generators.builders import array, hash_map, record, set_of
from valuegen.generators.scalars import (
    boolean,
    byte_list,
    byte_string,
    char,
    char_alpha,
    char_alphanumeric,
    char_ascii,
    char_numeric,
    fixnum,
    fixnum_neg,
    fixnum_pos,
    floating,
    natural,
    rational,
    simple_printable,
    simple_type,
    string,
    string_alpha,
    string_alphanumeric,
    string_ascii,
    string_numeric,
    symbol,
    uuid,
)
from valuegen.generators.fakes import (
    fake,
    fake_address,
    fake_company,
    fake_email,
    fake_name,
    fake_sentence,
)
from valuegen.generators.registry import GeneratorRegistry, get_global_generator_registry

__all__ = [
    "Generator",
    "is_generator",
    "bind",
    "choose",
    "constant",
    "elements",
    "fmap",
    "frequency",
    "not_empty",
    "one_of",
    "resize",
    "return_",
    "scale",
    "shuffle",
    "sized",
    "some_of",
    "such_that",
    "tuples",
    "array",
    "hash_map",
    "record",
    "set_of",
    "boolean",
    "byte_list",
    "byte_string",
    "char",
    "char_alpha",
    "char_alphanumeric",
    "char_ascii",
    "char_numeric",
    "fixnum",
    "fixnum_neg",
    "fixnum_pos",
    "floating",
    "natural",
    "rational",
    "simple_printable",
    "simple_type",
    "string",
    "string_alpha",
    "string_alphanumeric",
    "string_ascii",
    "string_numeric",
    "symbol",
    "uuid",
    "fake",
    "fake_address",
    "fake_company",
    "fake_email",
    "fake_name",
    "fake_sentence",
    "GeneratorRegistry",
    "get_global_generator_registry",
]
