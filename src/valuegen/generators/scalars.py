"""Scalar generators: numbers, characters, strings, symbols and UUIDs.

Everything here is built from ``choose`` and the structural combinators.
Characters come from fixed codepoint ranges and are decoded with ``chr``.
"""

import sys
from fractions import Fraction

from valuegen.generators.base import Generator
from valuegen.generators.builders import array
from valuegen.generators.combinators import (
    choose,
    elements,
    fmap,
    not_empty,
    one_of,
    sized,
    such_that,
    tuples,
)

# Codepoint ranges (inclusive)
FULL_RANGE = (0, 255)
ASCII_RANGE = (32, 126)
DIGIT_RANGE = (48, 57)
UPPER_RANGE = (65, 90)
LOWER_RANGE = (97, 122)

UUID_NIBBLES = 31


def _codepoints(*ranges: tuple[int, int]) -> Generator[int]:
    if len(ranges) == 1:
        return choose(*ranges[0])
    return one_of(*(choose(low, high) for low, high in ranges))


def _char_from(*ranges: tuple[int, int]) -> Generator[str]:
    return fmap(_codepoints(*ranges), chr)


def _join(chars: list[str]) -> str:
    return "".join(chars)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

fixnum = sized(lambda size: choose(-size, size)).named("fixnum")
"""Integers in ``[-size, size]``."""

natural = fmap(fixnum, abs).named("natural")
"""Integers in ``[0, size]``."""

fixnum_pos = such_that(natural, lambda n: n > 0).named("fixnum_pos")
"""Positive integers (0 excluded)."""

fixnum_neg = fmap(fixnum_pos, lambda n: -n).named("fixnum_neg")
"""Negative integers (0 excluded)."""

floating = sized(lambda size: choose(-float(size), float(size))).named("floating")
"""Floats in ``[-size, size]``."""


def _to_fraction(pair: tuple[int, int]) -> Fraction:
    numerator, denominator = pair
    return Fraction(numerator, denominator)


rational = fmap(
    tuples(fixnum, such_that(fixnum, lambda d: d != 0)),
    _to_fraction,
).named("rational")
"""Fractions with numerator and denominator in ``[-size, size]``."""

boolean = elements([False, True]).named("boolean")


# ---------------------------------------------------------------------------
# Characters and strings
# ---------------------------------------------------------------------------

char = _char_from(FULL_RANGE).named("char")
char_ascii = _char_from(ASCII_RANGE).named("char_ascii")
char_alphanumeric = _char_from(DIGIT_RANGE, UPPER_RANGE, LOWER_RANGE).named("char_alphanumeric")
char_alpha = _char_from(UPPER_RANGE, LOWER_RANGE).named("char_alpha")
char_numeric = _char_from(DIGIT_RANGE).named("char_numeric")

string = fmap(array(char), _join).named("string")
string_ascii = fmap(array(char_ascii), _join).named("string_ascii")
string_alphanumeric = fmap(array(char_alphanumeric), _join).named("string_alphanumeric")
string_alpha = fmap(array(char_alpha), _join).named("string_alpha")
string_numeric = fmap(array(char_numeric), _join).named("string_numeric")

symbol = fmap(
    not_empty(array(char_alphanumeric)),
    lambda chars: sys.intern(_join(chars)),
).named("symbol")
"""Non-empty interned alphanumeric identifiers."""

byte_list = fmap(not_empty(string), lambda s: list(s.encode("utf-8"))).named("byte_list")
"""UTF-8 byte values (ints) of a non-empty string."""

byte_string = fmap(not_empty(string), lambda s: s.encode("utf-8")).named("byte_string")
"""UTF-8 encoding of a non-empty string as ``bytes``."""


# ---------------------------------------------------------------------------
# UUIDs
# ---------------------------------------------------------------------------


def _format_uuid(nibbles: list[int]) -> str:
    # Version nibble is fixed; the variant nibble keeps two random bits.
    digits = [format(n, "x") for n in nibbles]
    variant = format(8 + (nibbles[15] & 3), "x")
    return "-".join([
        "".join(digits[0:8]),
        "".join(digits[8:12]),
        "4" + "".join(digits[12:15]),
        variant + "".join(digits[16:19]),
        "".join(digits[19:31]),
    ])


uuid = fmap(
    array(choose(0, 15), min_size=UUID_NIBBLES, max_size=UUID_NIBBLES),
    _format_uuid,
).named("uuid")
"""Random version 4 UUID strings; the size has no effect."""


# ---------------------------------------------------------------------------
# Palettes
# ---------------------------------------------------------------------------

simple_type = one_of(
    fixnum,
    rational,
    byte_list,
    floating,
    boolean,
    symbol,
    char,
    string,
    uuid,
).named("simple_type")

simple_printable = one_of(
    fixnum,
    rational,
    floating,
    boolean,
    symbol,
    char_ascii,
    string_ascii,
    char_alphanumeric,
    string_alphanumeric,
    uuid,
).named("simple_printable")
