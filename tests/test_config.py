"""Tests for session configuration."""

import pytest
from pydantic import ValidationError

from valuegen.config.base import SessionConfig
from valuegen.config.loader import ConfigLoader, load_config
from valuegen.errors import ConfigError


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_defaults(self):
        config = SessionConfig()

        assert config.size_min == 0
        assert config.size_max == 300
        assert config.seed is None
        assert config.default_size == 30
        assert config.default_tries == 10
        assert config.sample_count == 10
        assert config.cycle_length == 300

    @pytest.mark.parametrize("values", [
        {"size_min": 5, "size_max": 5},
        {"size_min": -1},
        {"size_max": 0},
        {"sample_count": 0},
        {"unknown": 1},
    ])
    def test_invalid(self, values):
        with pytest.raises(ValidationError):
            SessionConfig(**values)

    def test_frozen(self):
        config = SessionConfig()
        with pytest.raises(ValidationError):
            config.seed = 3

    def test_with_overrides_skips_none(self):
        config = SessionConfig(seed=5).with_overrides(seed=None, size_max=50)

        assert config.seed == 5
        assert config.size_max == 50

    def test_with_overrides_invalid(self):
        with pytest.raises(ConfigError):
            SessionConfig().with_overrides(size_min=400)

    def test_from_env(self):
        environ = {"VALUEGEN_SEED": "42", "VALUEGEN_SIZE_MAX": "50", "VALUEGEN_SIZE_MIN": ""}
        config = SessionConfig.from_env(environ)

        assert config.seed == 42
        assert config.size_max == 50
        assert config.size_min == 0

    def test_from_env_layers_on_base(self):
        base = SessionConfig(seed=1, sample_count=3)
        config = SessionConfig.from_env({"VALUEGEN_SEED": "2"}, base=base)

        assert config.seed == 2
        assert config.sample_count == 3

    def test_from_env_invalid(self):
        with pytest.raises(ConfigError, match="VALUEGEN_SEED"):
            SessionConfig.from_env({"VALUEGEN_SEED": "abc"})


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_from_string(self):
        config = ConfigLoader().load_from_string("seed: 7\nsize_max: 40\n")

        assert config.seed == 7
        assert config.size_max == 40

    def test_load_session_section(self):
        content = """
session:
  seed: 9
  sample_count: 4
"""
        config = ConfigLoader().load_from_string(content)

        assert config.seed == 9
        assert config.sample_count == 4

    def test_empty_document(self):
        assert ConfigLoader().load_from_string("") == SessionConfig()

    @pytest.mark.parametrize("content", [
        "- 1\n- 2\n",
        "session: 3\n",
        "size_min: 10\nsize_max: 5\n",
        "colour: blue\n",
    ])
    def test_invalid(self, content):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_string(content)

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "session.yaml"
        config = SessionConfig(seed=123, size_min=2, size_max=20)

        ConfigLoader().save_file(config, path)

        assert path.exists()
        assert load_config(path) == config

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")
