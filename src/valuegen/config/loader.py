"""Config Loader for loading session settings from YAML files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from valuegen.config.base import SessionConfig
from valuegen.errors import ConfigError


class ConfigLoader:
    """Loads session configs from YAML files.

    A config file either holds the settings at the top level or under a
    ``session`` key, so the same section can be embedded in model documents.
    """

    def load_file(self, path: Path | str) -> SessionConfig:
        """Load a session config from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded SessionConfig instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self.parse_config(data)

    def load_from_string(self, content: str) -> SessionConfig:
        """Load a session config from a YAML string."""
        data = yaml.safe_load(content)
        return self.parse_config(data)

    def parse_config(self, data: Any) -> SessionConfig:
        """Parse a session config from a loaded YAML structure."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Session config must be a YAML mapping")

        section = data.get("session", data)
        if not isinstance(section, dict):
            raise ConfigError("'session' must be a mapping")

        try:
            return SessionConfig(**section)
        except ValidationError as e:
            raise ConfigError(f"Invalid session configuration: {e}") from e

    def save_file(self, config: SessionConfig, path: Path | str) -> None:
        """Save a session config to a YAML file.

        Args:
            config: The config to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {"session": config.model_dump(exclude_none=True)}

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_config(path: Path | str) -> SessionConfig:
    """Convenience function to load a session config from a file."""
    loader = ConfigLoader()
    return loader.load_file(path)
