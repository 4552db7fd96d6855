"""Utility functions for valuegen."""

from valuegen.utils.helpers import (
    generate_seed,
    merge_dicts,
)

__all__ = [
    "generate_seed",
    "merge_dicts",
]
