"""
Document Formatter Port - Abstract interface for rich-text conversion.
"""

from abc import ABC, abstractmethod
from typing import Any


class DocumentFormatterPort(ABC):
    """
    Abstract interface for converting between markup and a rich-text
    document format (e.g., Jira's ADF).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the formatter name."""
        ...

    @abstractmethod
    def format_text(self, text: str) -> dict[str, Any]:
        """
        Convert markup text to a rich-text document.

        Args:
            text: Markup source

        Returns:
            Document tree ready to send to the tracker
        """
        ...

    @abstractmethod
    def extract_text(self, document: Any) -> str:
        """
        Flatten a rich-text document to plain text.

        Args:
            document: Document tree (built locally or received from the tracker)

        Returns:
            Plain text, styling discarded
        """
        ...
