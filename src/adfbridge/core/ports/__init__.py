"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .token_source import TokenSourcePort, MarkupToken
from .document_formatter import DocumentFormatterPort
from .config_provider import (
    ConfigProviderPort,
    AppConfig,
    ConversionConfig,
    RenderConfig,
    MARKDOWN_PRESETS,
)

__all__ = [
    "TokenSourcePort",
    "MarkupToken",
    "DocumentFormatterPort",
    "ConfigProviderPort",
    "AppConfig",
    "ConversionConfig",
    "RenderConfig",
    "MARKDOWN_PRESETS",
]
