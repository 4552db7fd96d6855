"""Session configuration.

A session is one evaluation context: a single random stream plus the size
schedule generators are fed with. The settings declare intent only; the
evaluation itself lives in :mod:`valuegen.engine`.
"""

import os
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from valuegen.errors import ConfigError
from valuegen.utils.helpers import merge_dicts

DEFAULT_SIZE = 30
DEFAULT_SIZE_MAX = 300
DEFAULT_TRIES = 10
DEFAULT_SAMPLE_COUNT = 10

ENV_PREFIX = "VALUEGEN_"


class SessionConfig(BaseModel):
    """Settings for an evaluation session."""

    size_min: int = Field(default=0, ge=0, description="First size of the size cycle")
    size_max: int = Field(
        default=DEFAULT_SIZE_MAX,
        ge=1,
        description="Exclusive upper bound of the size cycle",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random stream (fresh entropy if unset)",
    )
    default_size: int = Field(
        default=DEFAULT_SIZE,
        ge=0,
        description="Size used for single-shot generation",
    )
    default_tries: int = Field(
        default=DEFAULT_TRIES,
        ge=1,
        description="Tries allowed to predicate filters built from this config",
    )
    sample_count: int = Field(
        default=DEFAULT_SAMPLE_COUNT,
        ge=1,
        description="Number of values drawn by exploratory sampling",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_size_cycle(self) -> "SessionConfig":
        if self.size_max <= self.size_min:
            raise ValueError(
                f"size_max ({self.size_max}) must be greater than size_min ({self.size_min})"
            )
        return self

    @property
    def cycle_length(self) -> int:
        return self.size_max - self.size_min

    def with_overrides(self, **overrides: Any) -> "SessionConfig":
        """Return a copy with the non-None overrides applied."""
        values = merge_dicts(
            self.model_dump(),
            {k: v for k, v in overrides.items() if v is not None},
        )
        try:
            return SessionConfig(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid session configuration: {e}") from e

    @classmethod
    def from_env(
        cls,
        environ: dict[str, str] | None = None,
        base: "SessionConfig | None" = None,
    ) -> "SessionConfig":
        """Build a config from ``VALUEGEN_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            base: Config the variables are layered on

        Returns:
            The resulting SessionConfig
        """
        environ = os.environ if environ is None else environ
        base = base or cls()

        overrides: dict[str, int] = {}
        for field_name in ("seed", "size_min", "size_max", "default_size"):
            raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[field_name] = int(raw)
            except ValueError as e:
                raise ConfigError(
                    f"{ENV_PREFIX}{field_name.upper()} must be an integer, got {raw!r}"
                ) from e

        return base.with_overrides(**overrides)
