"""Pseudo-random streams consumed by generators.

A stream is the only mutable object in an evaluation session. It is created
once from a seed and passed by reference through every nested generator call,
so the sequence of draws depends only on the seed and the order in which the
combinators make their calls.
"""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomStream(Protocol):
    """The draws a generator may ask of a stream."""

    def uniform_int(self, lower: int, upper: int) -> int:
        """Return an integer in ``[lower, upper]``."""
        ...

    def uniform_real(self, lower: float, upper: float) -> float:
        """Return a float in ``[lower, upper]``."""
        ...


class MersenneStream:
    """Stream backed by :class:`random.Random` (Mersenne Twister)."""

    def __init__(self, seed: int):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def uniform_int(self, lower: int, upper: int) -> int:
        return self._rng.randint(lower, upper)

    def uniform_real(self, lower: float, upper: float) -> float:
        return self._rng.uniform(lower, upper)

    def __repr__(self) -> str:
        return f"MersenneStream(seed={self._seed})"


def new_stream(seed: int) -> RandomStream:
    """Create a fresh stream for one evaluation session."""
    return MersenneStream(seed)
