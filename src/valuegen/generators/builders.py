"""Collection and record builders: arrays, sets, records and hash maps."""

from collections.abc import Hashable, Mapping
from typing import Any, TypeVar

from valuegen.errors import ContractViolation
from valuegen.generators.base import Generator, require_generator
from valuegen.generators.combinators import bind, choose, fmap, sized, tuples

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def array(
    gen: Generator[T],
    min_size: int = 0,
    max_size: int | None = None,
) -> Generator[list[T]]:
    """Lists of values drawn from ``gen``.

    The length is chosen uniformly in ``[min_size, max_size]``; ``max_size``
    defaults to the size bound at invocation time. When passing a
    ``min_size`` it is safest to pass a ``max_size`` too, since the size
    bound may be smaller than ``min_size``.

    Raises:
        ContractViolation: If a bound is not a non-negative integer, or when
            invoked with a maximum below ``min_size``
    """
    require_generator(gen)
    _check_bound("min_size", min_size)
    if max_size is not None:
        _check_bound("max_size", max_size)

    def count_for(size: int) -> Generator[int]:
        upper = size if max_size is None else max_size
        if upper < min_size:
            raise ContractViolation(
                f"max size ({upper}) needs to be larger than or equal to "
                f"min size ({min_size}), perhaps provide a max_size?"
            )
        return choose(min_size, upper)

    def repeat(count: int) -> Generator[list[T]]:
        return Generator(lambda stream, size: [gen.invoke(stream, size) for _ in range(count)])

    return bind(sized(count_for), repeat)


def _check_bound(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ContractViolation(f"{name} must be a non-negative integer, got {value!r}")


def set_of(
    gen: Generator[T],
    min_size: int = 0,
    max_size: int | None = None,
) -> Generator[set[T]]:
    """Sets of values drawn from ``gen``.

    Bounds apply to the number of draws, before duplicates collapse, so a
    set may end up smaller than ``min_size``.
    """
    return fmap(array(gen, min_size, max_size), set)


def record(model: Mapping[Any, Generator]) -> Generator[dict]:
    """Dicts with the keys of ``model`` and values drawn from its generators.

    Values are drawn in the model's key order.

    Example:
        record({"name": not_empty(string_alpha), "age": natural})
    """
    keys = list(model.keys())
    gens = list(model.values())
    for key, gen in zip(keys, gens):
        require_generator(gen, f"record field {key!r}")

    return fmap(tuples(*gens), lambda values: dict(zip(keys, values)))


def hash_map(key_gen: Generator[K], value_gen: Generator[V]) -> Generator[dict[K, V]]:
    """Dicts of varying size with keys from ``key_gen`` and values from ``value_gen``.

    Later pairs overwrite earlier ones with the same key, so a dict can hold
    fewer entries than pairs drawn.
    """
    return fmap(array(tuples(key_gen, value_gen)), dict)
