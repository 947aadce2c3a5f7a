"""
adfbridge - Rich-text interchange between markdown, Jira ADF and plain text.

Converts markdown into Atlassian Document Format trees, flattens ADF and
arbitrary Jira field payloads back into readable text, and filters out
machine noise (system fields, signatures, tracking URLs).

Architecture:
- core/: ADF vocabulary, noise rule tables, ports (interfaces)
- adapters/: markdown-it token source, ADF/field formatters, config
- cli/: Command line interface
"""

__version__ = "1.0.0"

from .adapters import (
    ADFFormatter,
    ADFDocumentBuilder,
    EnvironmentConfigProvider,
    FieldReportRenderer,
    FieldValueFormatter,
    MarkdownTokenSource,
    NoiseClassifier,
)
from .adapters.formatters import extract_text

__all__ = [
    "__version__",
    "ADFFormatter",
    "ADFDocumentBuilder",
    "EnvironmentConfigProvider",
    "FieldReportRenderer",
    "FieldValueFormatter",
    "MarkdownTokenSource",
    "NoiseClassifier",
    "extract_text",
]
