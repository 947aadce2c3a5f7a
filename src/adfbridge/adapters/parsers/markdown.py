"""
Markdown Token Source - Tokenize markdown with markdown-it-py.

Implements the TokenSourcePort interface.
"""

import logging

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ...core.ports.token_source import TokenSourcePort
from ...core.ports.config_provider import MARKDOWN_PRESETS
from ...core.exceptions import ConfigurationError


class MarkdownTokenSource(TokenSourcePort):
    """
    Token source for markdown text.

    A fresh MarkdownIt parser is created for every tokenize() call, so one
    MarkdownTokenSource can be shared between threads.

    Emits markdown-it block tokens (heading_open, paragraph_open,
    bullet_list_open, list_item_open, inline, hr, ...). Inline tokens carry
    their children (text, strong_open, em_open, link_open, code_inline, ...).
    """

    def __init__(self, preset: str = "commonmark", hard_breaks: bool = False):
        """
        Initialize token source.

        Args:
            preset: markdown-it preset name
            hard_breaks: Treat single newlines inside a paragraph as hard breaks
        """
        if preset not in MARKDOWN_PRESETS:
            raise ConfigurationError(
                f"Unknown markdown preset '{preset}' (expected one of {', '.join(MARKDOWN_PRESETS)})",
                key="markdown_preset",
            )
        self.preset = preset
        self.hard_breaks = hard_breaks
        self.logger = logging.getLogger("MarkdownTokenSource")

    # -------------------------------------------------------------------------
    # TokenSourcePort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "markdown-it"

    def tokenize(self, text: str) -> list[Token]:
        parser = MarkdownIt(self.preset, {"breaks": self.hard_breaks})
        tokens = parser.parse(text or "")
        self.logger.debug(f"Tokenized {len(text or '')} chars into {len(tokens)} tokens")
        return tokens
