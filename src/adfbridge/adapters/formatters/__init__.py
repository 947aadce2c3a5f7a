"""
Formatters - Convert between markdown, ADF and plain text.
"""

from .adf import ADFFormatter, ADFDocumentBuilder, extract_text
from .noise import NoiseClassifier
from .fields import FieldValueFormatter
from .report import FieldReportRenderer

__all__ = [
    "ADFFormatter",
    "ADFDocumentBuilder",
    "extract_text",
    "NoiseClassifier",
    "FieldValueFormatter",
    "FieldReportRenderer",
]
