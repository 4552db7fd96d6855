"""Utility helper functions."""

import random
from typing import Any

SEED_BITS = 64

_entropy = random.SystemRandom()


def generate_seed() -> int:
    """Generate a fresh 64-bit seed from system entropy."""
    return _entropy.getrandbits(SEED_BITS)


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values in override take precedence over base.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
