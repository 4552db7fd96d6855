"""
valuegen - A composable pseudo-random value generator engine.

Build generators of numbers, strings, collections and records by composing
small generators, then realize them deterministically from a seed and a size
bound for test-data generation, fuzzing and property-based testing.
"""

__version__ = "0.1.0"

from valuegen.errors import (
    GeneratorError,
    ContractViolation,
    SuchThatExhausted,
    ConfigError,
    ModelError,
)
from valuegen.config.base import SessionConfig
from valuegen.engine.session import Session
from valuegen.generators import *  # noqa: F401,F403
from valuegen.generators import __all__ as _generators_all
from valuegen.models.base import RecordModel
from valuegen.models.loader import load_model

__all__ = [
    "GeneratorError",
    "ContractViolation",
    "SuchThatExhausted",
    "ConfigError",
    "ModelError",
    "SessionConfig",
    "Session",
    "RecordModel",
    "load_model",
    *_generators_all,
]
