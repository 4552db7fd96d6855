"""Config module - session settings for generator evaluation.

A session config declares:
- The cycling size schedule (size_min, size_max)
- The random seed
- Defaults for single-shot generation and sampling

It contains no generation logic.
"""

from valuegen.config.base import SessionConfig, DEFAULT_SIZE, DEFAULT_TRIES
from valuegen.config.loader import ConfigLoader, load_config

__all__ = [
    "SessionConfig",
    "DEFAULT_SIZE",
    "DEFAULT_TRIES",
    "ConfigLoader",
    "load_config",
]
