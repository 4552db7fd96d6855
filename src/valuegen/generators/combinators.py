"""Structural combinators.

Every combinator is a pure function from generators (and plain values) to a
new generator. Nothing is drawn until the result is invoked; at that point
the stream and size are threaded through the constituents in a fixed order,
so changing the order of arguments changes the values produced.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, TypeVar

from valuegen.config.base import DEFAULT_TRIES
from valuegen.errors import ContractViolation, SuchThatExhausted
from valuegen.generators.base import Generator, require_generator
from valuegen.prng import RandomStream

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def choose(lower: int | float, upper: int | float) -> Generator:
    """Uniformly choose a number in ``[lower, upper]`` (inclusive).

    Integer bounds give an integer; if either bound is a float the result is
    a float. This is the primitive most other generators are built from.

    Raises:
        ContractViolation: If a bound is not a number or ``upper < lower``
    """
    for bound in (lower, upper):
        if isinstance(bound, bool) or not isinstance(bound, (int, float)):
            raise ContractViolation(f"choose bounds must be numbers, got {bound!r}")
    if upper < lower:
        raise ContractViolation(
            f"upper ({upper}) needs to be greater than or equal to lower ({lower})"
        )

    if isinstance(lower, float) or isinstance(upper, float):
        low, high = float(lower), float(upper)
        return Generator(lambda stream, _: stream.uniform_real(low, high))

    return Generator(lambda stream, _: stream.uniform_int(lower, upper))


def constant(value: T) -> Generator[T]:
    """Generator that ignores its inputs and always returns ``value``."""
    return Generator(lambda _stream, _size: value)


return_ = constant


def sized(builder: Callable[[int], Generator[T]]) -> Generator[T]:
    """Expose the size to ``builder`` and invoke the generator it returns.

    Example:
        cubed = sized(lambda size: choose(0, size ** 3))
    """

    def run(stream: RandomStream, size: int) -> T:
        inner = require_generator(builder(size), "sized builder result")
        return inner.invoke(stream, size)

    return Generator(run)


def resize(gen: Generator[T], size: int) -> Generator[T]:
    """Pin the size passed to ``gen`` to ``size``, ignoring the session's."""
    require_generator(gen)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ContractViolation(f"size must be a non-negative integer, got {size!r}")
    return Generator(lambda stream, _: gen.invoke(stream, size))


def scale(gen: Generator[T], fn: Callable[[int], int]) -> Generator[T]:
    """Re-map the size passed to ``gen`` through ``fn``.

    Example:
        scale(string_numeric, lambda size: size ** 3)
    """
    require_generator(gen)
    return sized(lambda size: resize(gen, fn(size)))


def fmap(gen: Generator[T], fn: Callable[[T], U]) -> Generator[U]:
    """Transform each realized value with ``fn``.

    ``fn`` must return a plain value; use :func:`bind` to return a generator.
    """
    require_generator(gen)
    return Generator(lambda stream, size: fn(gen.invoke(stream, size)))


def bind(gen: Generator[T], fn: Callable[[T], Generator[U]]) -> Generator[U]:
    """Feed a realized value into ``fn`` and invoke the generator it returns.

    The returned generator runs against the same stream and size, which lets
    later steps depend on earlier values.

    Example:
        bind(natural, lambda n: array(string_numeric, max_size=n))
    """
    require_generator(gen)

    def run(stream: RandomStream, size: int) -> U:
        inner = require_generator(fn(gen.invoke(stream, size)), "bind function result")
        return inner.invoke(stream, size)

    return Generator(run)


def tuples(*gens: Generator) -> Generator[tuple]:
    """Invoke each generator in argument order and return the values as a tuple."""
    for gen in gens:
        require_generator(gen, "tuples argument")
    return Generator(lambda stream, size: tuple(g.invoke(stream, size) for g in gens))


def such_that(
    gen: Generator[T],
    pred: Callable[[T], Any],
    tries: int = DEFAULT_TRIES,
) -> Generator[T]:
    """Only return values of ``gen`` satisfying ``pred``.

    Each failed attempt retries with the size increased by one, which helps
    size-sensitive predicates (non-emptiness, positivity) succeed.

    Args:
        gen: Generator whose values are filtered
        pred: Predicate applied to each realized value
        tries: Maximum number of attempts

    Raises:
        SuchThatExhausted: When invoked and no attempt satisfies ``pred``
    """
    require_generator(gen)

    def run(stream: RandomStream, size: int) -> T:
        for attempt in range(tries):
            value = gen.invoke(stream, size + attempt)
            if pred(value):
                return value
        logger.debug("such_that exhausted after %d tries (size=%d)", tries, size)
        raise SuchThatExhausted(tries)

    return Generator(run)


def not_empty(gen: Generator[T], tries: int = DEFAULT_TRIES) -> Generator[T]:
    """Discard empty strings and collections produced by ``gen``."""
    return such_that(gen, lambda value: len(value) > 0, tries)


def one_of(*gens: Generator) -> Generator:
    """Uniformly pick one of ``gens`` and return its value."""
    if not gens:
        raise ContractViolation("one_of needs at least one generator")
    for gen in gens:
        require_generator(gen, "one_of argument")
    return bind(choose(0, len(gens) - 1), lambda i: gens[i])


def some_of(*gens: Generator) -> Generator[list]:
    """Return the values of a random, non-empty subset of ``gens``.

    Every generator is invoked (the stream advances for all of them); the
    results are shuffled and the first ``k`` kept, ``k`` in ``[1, n]``.
    """
    if not gens:
        raise ContractViolation("some_of needs at least one generator")

    def pick(values: tuple) -> Generator[list]:
        return bind(
            choose(1, len(values)),
            lambda count: fmap(shuffle(values), lambda shuffled: shuffled[:count]),
        )

    return bind(tuples(*gens), pick)


def elements(collection: Iterable[T]) -> Generator[T]:
    """Uniformly select one element of ``collection`` (with replacement).

    Mappings contribute their ``(key, value)`` pairs. Sets are sorted first,
    since their iteration order changes between processes; a set whose
    elements cannot be sorted raises ``ContractViolation``.
    """
    items = _as_list(collection)
    if not items:
        raise ContractViolation("elements needs a non-empty collection")
    return fmap(choose(0, len(items) - 1), lambda i: items[i])


def shuffle(collection: Iterable[T]) -> Generator[list[T]]:
    """Reorder ``collection`` by a bounded run of random swaps.

    Draws up to ``3 * len(collection)`` index pairs and applies each as a
    transposition to a copy. This is an approximation, not a uniform
    permutation. Sets are sorted before shuffling, as in :func:`elements`.
    """
    items = _as_list(collection)
    if not items:
        raise ContractViolation("shuffle needs a non-empty collection")

    index = choose(0, len(items) - 1)
    swap = tuples(index, index)

    def apply_swaps(pairs: tuple[tuple[int, int], ...]) -> list[T]:
        result = list(items)
        for i, j in pairs:
            result[i], result[j] = result[j], result[i]
        return result

    swap_count = choose(0, len(items) * 3)
    return fmap(bind(swap_count, lambda count: tuples(*[swap] * count)), apply_swaps)


def frequency(
    weighted: Mapping[Generator, int] | Iterable[tuple[Generator, int]],
) -> Generator:
    """Pick a generator with probability proportional to its weight.

    Args:
        weighted: Mapping (or sequence of pairs) from generator to positive
            integer weight; order defines the bucket order

    Example:
        frequency({uuid: 3, string_ascii: 1})
    """
    pairs = list(weighted.items()) if isinstance(weighted, Mapping) else list(weighted)
    if not pairs:
        raise ContractViolation("frequency needs at least one weighted generator")

    for gen, weight in pairs:
        require_generator(gen, "frequency key")
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
            raise ContractViolation(f"frequency weights must be positive integers, got {weight!r}")

    total = sum(weight for _, weight in pairs)

    def pick(r: int) -> Generator:
        cumulative = 0
        for gen, weight in pairs:
            cumulative += weight
            if r < cumulative:
                return gen
        raise AssertionError(f"draw {r} outside total weight {total}")

    return bind(choose(0, total - 1), pick)


def _as_list(collection: Iterable[T]) -> list:
    if isinstance(collection, Mapping):
        return list(collection.items())
    if isinstance(collection, (set, frozenset)):
        try:
            return sorted(collection)
        except TypeError as e:
            raise ContractViolation(
                f"set elements must be sortable to be picked reproducibly: {e}"
            ) from e
    return list(collection)
