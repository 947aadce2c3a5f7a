"""
Token Source Port - Abstract interface for markup tokenizers.

A token source turns a markup string into a flat, ordered token stream
(block open/close events, inline runs, rules and breaks). The document
builder only depends on this contract, not on a particular parser.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Sequence


class MarkupToken(Protocol):
    """Shape of a token as consumed by the document builder."""

    type: str
    tag: str
    content: str
    attrs: dict[str, Any]
    children: Optional[Sequence["MarkupToken"]]


class TokenSourcePort(ABC):
    """
    Abstract interface for markup-to-token parsers.

    Implementations must not keep parser state between calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the token source name (e.g., 'markdown-it')."""
        ...

    @abstractmethod
    def tokenize(self, text: str) -> list[MarkupToken]:
        """
        Convert markup text into an ordered token stream.

        Args:
            text: Markup source

        Returns:
            Tokens in document order
        """
        ...
