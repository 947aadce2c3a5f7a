"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (ADFBRIDGE_DATE_FORMAT, ADFBRIDGE_LOCAL_TIME, ...)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.exceptions import ConfigurationError
from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    ConversionConfig,
    RenderConfig,
    MARKDOWN_PRESETS,
)


TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence (highest first): CLI overrides, environment, .env file.
    """

    ENV_PREFIX = "ADFBRIDGE_"

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
            environ: Environment mapping (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}
        self._environ = environ if environ is not None else os.environ

        # Load configuration
        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Load complete configuration."""
        conversion = ConversionConfig(
            markdown_preset=self.get("markdown_preset", "commonmark"),
            hard_breaks=self._get_bool("hard_breaks", False),
        )

        render = RenderConfig(
            date_format=self.get("date_format", "%Y-%m-%d %H:%M"),
            local_time=self._get_bool("local_time", True),
            extra_noise_fields=self._get_list("extra_noise_fields"),
        )

        return AppConfig(
            conversion=conversion,
            render=render,
            verbose=self._get_bool("verbose", False),
            color=self._get_bool("color", True),
            markdown_path=self.get("markdown_path"),
            adf_path=self.get("adf_path"),
            report_path=self.get("report_path"),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        # Normalize key
        key = key.lower().replace("-", "_")

        # Check CLI overrides first
        if key in self._cli_overrides and self._cli_overrides[key] is not None:
            return self._cli_overrides[key]

        # Check loaded values
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        preset = self.get("markdown_preset", "commonmark")
        if preset not in MARKDOWN_PRESETS:
            errors.append(
                f"Unknown ADFBRIDGE_MARKDOWN_PRESET '{preset}' - expected one of {', '.join(MARKDOWN_PRESETS)}"
            )
        if not str(self.get("date_format", "%Y-%m-%d %H:%M")).strip():
            errors.append("ADFBRIDGE_DATE_FORMAT must not be empty")

        for key in ("hard_breaks", "local_time", "verbose", "color"):
            try:
                self._get_bool(key, False)
            except ConfigurationError as e:
                errors.append(e.message)

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            # Parse key=value
            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip().lower()
            if key.startswith(self.ENV_PREFIX.lower()):
                key = key[len(self.ENV_PREFIX):]
            value = value.strip().strip('"').strip("'")

            self._values[key] = value

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file:
            return self._env_file if self._env_file.exists() else None

        # Check current directory
        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        env_mapping = {
            "ADFBRIDGE_MARKDOWN_PRESET": "markdown_preset",
            "ADFBRIDGE_HARD_BREAKS": "hard_breaks",
            "ADFBRIDGE_DATE_FORMAT": "date_format",
            "ADFBRIDGE_LOCAL_TIME": "local_time",
            "ADFBRIDGE_EXTRA_NOISE_FIELDS": "extra_noise_fields",
            "ADFBRIDGE_VERBOSE": "verbose",
        }

        for env_key, config_key in env_mapping.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = raw_value

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        # Map CLI args to config keys
        cli_mapping = {
            "markdown": "markdown_path",
            "adf": "adf_path",
            "report": "report_path",
            "date_format": "date_format",
            "preset": "markdown_preset",
            "hard_breaks": "hard_breaks",
            "verbose": "verbose",
            "no_color": "no_color",
        }

        for cli_key, config_key in cli_mapping.items():
            if cli_key in self._cli_overrides and self._cli_overrides[cli_key] is not None:
                self._values[config_key] = self._cli_overrides[cli_key]

        if self._values.get("no_color"):
            self._values["color"] = False

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value

        lowered = str(value).strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False

        raise ConfigurationError(
            f"Invalid boolean for {self.ENV_PREFIX}{key.upper()}: '{value}'",
            key=key,
        )

    def _get_list(self, key: str) -> list[str]:
        value = self.get(key)
        if not value:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v).strip() for v in value if str(v).strip()]
        return [part.strip() for part in str(value).split(",") if part.strip()]
