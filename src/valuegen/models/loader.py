"""Model Loader for loading record models from YAML files."""

from pathlib import Path
from typing import Any

import jsonschema
import yaml
from pydantic import ValidationError

from valuegen.config.loader import ConfigLoader
from valuegen.errors import ConfigError, ModelError
from valuegen.models.base import RecordModel

MODEL_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "fields"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "fields": {
            "type": "object",
            "minProperties": 1,
            "additionalProperties": {"$ref": "#/$defs/field"},
        },
        "session": {
            "type": "object",
            "properties": {
                "size_min": {"type": "integer", "minimum": 0},
                "size_max": {"type": "integer", "minimum": 1},
                "seed": {"type": ["integer", "null"]},
                "default_size": {"type": "integer", "minimum": 0},
                "default_tries": {"type": "integer", "minimum": 1},
                "sample_count": {"type": "integer", "minimum": 1},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
    "$defs": {
        "field": {
            "oneOf": [
                {"type": "string", "minLength": 1},
                {"type": "object", "minProperties": 1},
            ],
        },
    },
}


class ModelLoader:
    """Loads record models from YAML files."""

    def __init__(self):
        self._validator = jsonschema.Draft202012Validator(MODEL_SCHEMA)
        self._config_loader = ConfigLoader()

    def load_file(self, path: Path | str) -> RecordModel:
        """Load a model from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded RecordModel instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Model file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_model(data)

    def load_from_string(self, content: str) -> RecordModel:
        """Load a model from a YAML string."""
        data = yaml.safe_load(content)
        return self._parse_model(data)

    def validate(self, data: Any) -> None:
        """Validate a raw model document.

        Raises:
            ModelError: Describing the first problem found, with its path
        """
        errors = sorted(self._validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        if errors:
            error = errors[0]
            path = ".".join(str(part) for part in error.absolute_path)
            raise ModelError(error.message, path)

    def _parse_model(self, data: Any) -> RecordModel:
        """Parse model data from YAML structure."""
        self.validate(data)

        try:
            session = self._config_loader.parse_config(data.get("session", {}))
        except ConfigError as e:
            raise ModelError(str(e), "session") from e

        try:
            return RecordModel(
                name=data["name"],
                description=data.get("description", ""),
                fields=data["fields"],
                session=session,
            )
        except ValidationError as e:
            raise ModelError(f"Invalid model: {e}") from e


def load_model(path: Path | str) -> RecordModel:
    """Convenience function to load a model from a file."""
    loader = ModelLoader()
    return loader.load_file(path)
