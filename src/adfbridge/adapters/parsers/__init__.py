"""
Token Sources - Convert markup into token streams.
"""

from .markdown import MarkdownTokenSource

__all__ = ["MarkdownTokenSource"]
