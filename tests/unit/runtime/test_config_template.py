"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from code_verifier.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            text = "Server running at http://${HOST}:${PORT}/"
            assert substitute_env_vars(text) == "Server running at http://localhost:8080/"

    def test_default_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_custom_error_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR: needed for the database"):
                substitute_env_vars("${MISSING_VAR:?needed for the database}")

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("plain: value") == "plain: value"


class TestEnvironmentOverrides:
    def test_prefixed_variables_are_copied(self):
        with patch.dict(
            os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://db/products"}, clear=True
        ):
            apply_environment_overrides("production")
            assert os.environ["DATABASE_URL"] == "postgresql://db/products"

    def test_other_environments_are_ignored(self):
        with patch.dict(os.environ, {"PRODUCTION_LOG_LEVEL": "ERROR"}, clear=True):
            apply_environment_overrides("development")
            assert "LOG_LEVEL" not in os.environ


class TestLoadTemplatedYaml:
    def _write(self, tmp_path: Path, body: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(body)
        return path

    def test_loads_config_section(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            """
config:
  app:
    environment: test
    port: ${APP_PORT:-9000}
  database:
    url: "sqlite://"
    pool_size: 3
  logging:
    level: DEBUG
""",
        )
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path, env_mode="test")

        assert config.app.environment == "test"
        assert config.app.port == 9000
        assert config.database.url == "sqlite://"
        assert config.database.pool_size == 3
        assert config.logging.level == "DEBUG"

    def test_missing_sections_use_defaults(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  app:\n    title: Demo\n")

        config = load_templated_yaml(path)

        assert config.app.title == "Demo"
        assert config.database.pool_size == 10
        assert config.database.pool_timeout == 30

    def test_environment_override_is_applied(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  database:\n    url: ${DATABASE_URL:-sqlite://}\n")
        with patch.dict(
            os.environ, {"PRODUCTION_DATABASE_URL": "sqlite:///./prod.db"}, clear=True
        ):
            config = load_templated_yaml(path, env_mode="production")

        assert config.database.url == "sqlite:///./prod.db"

    def test_empty_file_is_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(self._write(tmp_path, ""))

    def test_invalid_yaml_is_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(self._write(tmp_path, "config: [unclosed"))

    def test_invalid_values_are_rejected(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  app:\n    port: not-a-port\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "nope.yaml")
