"""Tests for the environment config provider."""

import pytest

from adfbridge.adapters.config import EnvironmentConfigProvider
from adfbridge.core.exceptions import ConfigurationError


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "# adfbridge settings\n"
        "ADFBRIDGE_DATE_FORMAT='%d/%m/%Y'\n"
        "ADFBRIDGE_HARD_BREAKS=true\n"
        "not a setting\n"
    )
    return path


@pytest.fixture
def missing_env(tmp_path):
    return tmp_path / "missing.env"


class TestEnvironmentConfigProvider:
    """Tests for EnvironmentConfigProvider."""

    def test_defaults(self, missing_env):
        config = EnvironmentConfigProvider(env_file=missing_env, environ={}).load()

        assert config.conversion.markdown_preset == "commonmark"
        assert config.conversion.hard_breaks is False
        assert config.render.date_format == "%Y-%m-%d %H:%M"
        assert config.render.local_time is True
        assert config.render.extra_noise_fields == []
        assert config.verbose is False
        assert config.color is True

    def test_env_file(self, env_file):
        config = EnvironmentConfigProvider(env_file=env_file, environ={}).load()

        assert config.render.date_format == "%d/%m/%Y"
        assert config.conversion.hard_breaks is True

    def test_environment_overrides_env_file(self, env_file):
        environ = {"ADFBRIDGE_DATE_FORMAT": "%Y"}
        config = EnvironmentConfigProvider(env_file=env_file, environ=environ).load()

        assert config.render.date_format == "%Y"

    def test_cli_overrides_environment(self, env_file):
        provider = EnvironmentConfigProvider(
            env_file=env_file,
            environ={"ADFBRIDGE_DATE_FORMAT": "%Y"},
            cli_overrides={"date_format": "%H:%M", "verbose": None, "no_color": True},
        )
        config = provider.load()

        assert config.render.date_format == "%H:%M"
        assert config.verbose is False
        assert config.color is False

    def test_cli_input_paths(self, missing_env):
        provider = EnvironmentConfigProvider(
            env_file=missing_env,
            environ={},
            cli_overrides={"markdown": "notes.md", "adf": None, "report": None},
        )
        config = provider.load()

        assert config.markdown_path == "notes.md"
        assert config.adf_path is None

    def test_extra_noise_fields(self, missing_env):
        environ = {"ADFBRIDGE_EXTRA_NOISE_FIELDS": "customfield_10020, rank ,"}
        config = EnvironmentConfigProvider(env_file=missing_env, environ=environ).load()

        assert config.render.extra_noise_fields == ["customfield_10020", "rank"]

    @pytest.mark.parametrize("raw, expected", [("yes", True), ("0", False), ("OFF", False)])
    def test_boolean_values(self, missing_env, raw, expected):
        environ = {"ADFBRIDGE_LOCAL_TIME": raw}
        config = EnvironmentConfigProvider(env_file=missing_env, environ=environ).load()

        assert config.render.local_time is expected

    def test_invalid_boolean(self, missing_env):
        provider = EnvironmentConfigProvider(
            env_file=missing_env, environ={"ADFBRIDGE_LOCAL_TIME": "maybe"}
        )

        assert any("ADFBRIDGE_LOCAL_TIME" in e for e in provider.validate())
        with pytest.raises(ConfigurationError):
            provider.load()

    def test_invalid_preset(self, missing_env):
        provider = EnvironmentConfigProvider(
            env_file=missing_env, environ={"ADFBRIDGE_MARKDOWN_PRESET": "gfm"}
        )

        errors = provider.validate()
        assert len(errors) == 1
        assert "gfm" in errors[0]

    def test_valid_config(self, missing_env):
        assert EnvironmentConfigProvider(env_file=missing_env, environ={}).validate() == []

    def test_get_and_set(self, missing_env):
        provider = EnvironmentConfigProvider(env_file=missing_env, environ={})
        provider.set("Date-Format", "%m")

        assert provider.get("date_format") == "%m"
        assert provider.get("unknown", "fallback") == "fallback"
