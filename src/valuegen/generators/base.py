"""The Generator abstraction - the core of valuegen.

A Generator is an immutable value wrapping a deferred computation
``(stream, size) -> value``. Building generators never draws anything;
values are realized only through one of the entry points:

- ``gen``: a single value from a fresh, seeded stream
- ``sample``: a handful of values for interactive exploration
- ``to_enum``: a lazy, unbounded sequence with a cycling size schedule

The ``size`` passed to a generator is an upper bound on the magnitude or
length it may choose, not the value it produces.
"""

import itertools
from typing import Any, Callable, Generic, Iterator, TypeVar

from pydantic import ValidationError

from valuegen.config.base import DEFAULT_SIZE, DEFAULT_SAMPLE_COUNT, SessionConfig
from valuegen.engine.session import Session
from valuegen.errors import ContractViolation
from valuegen.prng import RandomStream

T = TypeVar("T")

GenFunction = Callable[[RandomStream, int], T]


class Generator(Generic[T]):
    """An immutable, composable source of pseudo-random values.

    Generators are pure values: safe to share, reuse and call many times.
    Invoking one twice with the same stream state and size yields the same
    value.
    """

    __slots__ = ("_fn", "_name")

    def __init__(self, fn: GenFunction, name: str | None = None):
        """Initialize the generator.

        Args:
            fn: Function of ``(stream, size)`` realizing a value
            name: Optional label used in reprs, registries and logs
        """
        if not callable(fn):
            raise ContractViolation(f"Generator function must be callable, got {fn!r}")
        object.__setattr__(self, "_fn", fn)
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError("Generator instances are immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError("Generator instances are immutable")

    @property
    def name(self) -> str | None:
        return self._name

    def named(self, name: str) -> "Generator[T]":
        """Return the same generator under a new label."""
        return Generator(self._fn, name=name)

    def invoke(self, stream: RandomStream, size: int) -> T:
        """Realize a value from ``stream`` with size bound ``size``.

        This is the low-level operation every combinator is built on. The
        stream is shared by reference with all nested generators.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ContractViolation(f"size must be a non-negative integer, got {size!r}")
        return self._fn(stream, size)

    __call__ = invoke

    def gen(self, size: int = DEFAULT_SIZE, seed: int | None = None) -> T:
        """Generate a single value.

        Args:
            size: Size bound passed to the generator
            seed: Seed for the stream (fresh entropy if None)

        Returns:
            The realized value; identical (size, seed) pairs always give
            identical values
        """
        session = Session(SessionConfig(seed=seed))
        return session.generate(self, size)

    def sample(self, n: int = DEFAULT_SAMPLE_COUNT, seed: int | None = None) -> list[T]:
        """Generate ``n`` values for exploration.

        Sizes grow linearly from 0, so early values are small. Unless a seed
        is given the result is not reproducible.
        """
        return list(itertools.islice(self.to_enum(seed=seed), n))

    def to_enum(
        self,
        size_min: int = 0,
        size_max: int = 300,
        seed: int | None = None,
    ) -> Iterator[T]:
        """Create a lazy, unbounded sequence of values.

        The i-th value is generated with size ``size_min + i % (size_max -
        size_min)``; the single stream keeps advancing across wraps.

        Args:
            size_min: First size of the cycle
            size_max: Exclusive upper bound of the cycle
            seed: Seed for the stream (fresh entropy if None)

        Returns:
            An iterator; restart by calling ``to_enum`` again
        """
        try:
            config = SessionConfig(size_min=size_min, size_max=size_max, seed=seed)
        except ValidationError as e:
            raise ContractViolation(f"Invalid size cycle: {e}") from e
        return self.stream(config)

    def stream(self, config: SessionConfig) -> Iterator[T]:
        """Create a lazy, unbounded sequence driven by ``config``."""
        return Session(config).run(self)

    def __repr__(self) -> str:
        return f"<Generator {self._name}>" if self._name else "<Generator>"


def is_generator(obj: Any) -> bool:
    """Check whether ``obj`` is a Generator."""
    return isinstance(obj, Generator)


def require_generator(obj: Any, what: str = "argument") -> Generator:
    """Return ``obj`` if it is a Generator, raise ContractViolation otherwise."""
    if not isinstance(obj, Generator):
        raise ContractViolation(f"{what} must be a Generator, got {type(obj).__name__}")
    return obj
