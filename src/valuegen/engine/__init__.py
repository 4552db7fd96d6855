"""Engine module - evaluation of generators against seeded sessions."""

from valuegen.engine.session import Session

__all__ = [
    "Session",
]
