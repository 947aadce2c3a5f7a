"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Token sources: Markdown (markdown-it-py)
- Formatters: ADF (Atlassian Document Format), field values, field reports
- Config: Environment variables
"""

from .parsers import MarkdownTokenSource
from .formatters import (
    ADFFormatter,
    ADFDocumentBuilder,
    NoiseClassifier,
    FieldValueFormatter,
    FieldReportRenderer,
)
from .config import EnvironmentConfigProvider

__all__ = [
    "MarkdownTokenSource",
    "ADFFormatter",
    "ADFDocumentBuilder",
    "NoiseClassifier",
    "FieldValueFormatter",
    "FieldReportRenderer",
    "EnvironmentConfigProvider",
]
