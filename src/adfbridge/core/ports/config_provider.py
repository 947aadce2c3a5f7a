"""
Config Provider Port - Abstract interface for configuration loading.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


MARKDOWN_PRESETS = ("commonmark", "default", "zero")


@dataclass
class ConversionConfig:
    """Markdown to ADF conversion settings."""

    markdown_preset: str = "commonmark"
    hard_breaks: bool = False


@dataclass
class RenderConfig:
    """Plain-text rendering settings for Jira field values."""

    date_format: str = "%Y-%m-%d %H:%M"
    local_time: bool = True
    extra_noise_fields: list[str] = field(default_factory=list)


@dataclass
class AppConfig:
    """Complete application configuration."""

    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    verbose: bool = False
    color: bool = True

    # Input selection (CLI)
    markdown_path: Optional[str] = None
    adf_path: Optional[str] = None
    report_path: Optional[str] = None


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.

    Implementations can load config from:
    - Environment variables
    - .env files
    - Command line arguments
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load configuration.

        Returns:
            Complete AppConfig

        Raises:
            ConfigurationError: If a value cannot be interpreted
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value (in-memory only)."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        ...
