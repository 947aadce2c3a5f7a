"""
ADF Formatter - Atlassian Document Format for Jira.

Converts markdown to Jira's ADF tree and flattens ADF back to plain text.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from ...core.domain import nodes
from ...core.domain.nodes import AdfNode, NodeType, MarkType, ListKind
from ...core.ports.document_formatter import DocumentFormatterPort
from ...core.ports.token_source import TokenSourcePort, MarkupToken
from ..parsers.markdown import MarkdownTokenSource


_EXCESS_NEWLINES = re.compile(r"\n{3,}")

# Block tokens with nothing to do on close
_NOOP_TOKENS = frozenset({
    "heading_close",
    "paragraph_close",
    "list_item_close",
})

_STYLE_MARKS = {
    "strong_open": MarkType.STRONG,
    "em_open": MarkType.EM,
}

_CLOSING_MARKS = {
    "strong_close": MarkType.STRONG,
    "em_close": MarkType.EM,
    "link_close": MarkType.LINK,
}


# -----------------------------------------------------------------------------
# Markdown -> ADF
# -----------------------------------------------------------------------------

@dataclass
class _BuildState:
    """Transient state of one build() call."""

    content: list[AdfNode] = field(default_factory=list)
    in_list: bool = False
    list_kind: ListKind = ListKind.BULLET
    items: list[AdfNode] = field(default_factory=list)
    current: Optional[AdfNode] = None


class _InlineRun:
    """Text accumulator and open-marks stack for a single inline token."""

    def __init__(self, content: list[AdfNode]):
        self.content = content
        self.pending: Optional[str] = None
        self.marks: list[AdfNode] = []

    def add_text(self, value: str) -> None:
        if self.marks and self.pending:
            self.flush()
        self.pending = (self.pending or "") + value

    def add_softbreak(self) -> None:
        self.pending = (self.pending or "") + "\n"

    def open_mark(self, mark: AdfNode) -> None:
        self.flush()
        self.marks.append(mark)

    def close_mark(self, mark_type: MarkType) -> None:
        self.flush()
        for i in range(len(self.marks) - 1, -1, -1):
            if self.marks[i]["type"] == mark_type.value:
                del self.marks[i]
                break

    def append(self, node: AdfNode) -> None:
        self.flush()
        self.content.append(node)

    def flush(self) -> None:
        if self.pending:
            self.content.append(nodes.text(self.pending, self.marks))
        self.pending = None


class ADFDocumentBuilder:
    """
    Builds an ADF document from a markdown-it style token stream.

    Single forward pass over the tokens. Unknown or out-of-order tokens are
    skipped, so malformed input yields a partial document instead of an error.

    Lists do not nest: every list-open token resets the item buffer.
    """

    def __init__(self):
        self.logger = logging.getLogger("ADFDocumentBuilder")

    def build(self, tokens: Iterable[MarkupToken]) -> AdfNode:
        """Build an ADF ``doc`` node from tokens."""
        state = _BuildState()

        for token in tokens:
            self._handle_token(state, token)

        return nodes.doc(state.content)

    # -------------------------------------------------------------------------
    # Block Tokens
    # -------------------------------------------------------------------------

    def _handle_token(self, state: _BuildState, token: MarkupToken) -> None:
        kind = getattr(token, "type", None)

        if kind == "heading_open":
            node = nodes.heading(self._heading_level(token))
            state.content.append(node)
            state.current = node

        elif kind == "paragraph_open":
            if state.in_list:
                state.current = self._list_item_paragraph(state)
            else:
                node = nodes.paragraph()
                state.content.append(node)
                state.current = node

        elif kind in ("bullet_list_open", "ordered_list_open"):
            state.in_list = True
            state.list_kind = ListKind.BULLET if kind == "bullet_list_open" else ListKind.ORDERED
            state.items = []

        elif kind == "list_item_open":
            state.items.append(nodes.list_item())

        elif kind in ("bullet_list_close", "ordered_list_close"):
            if state.items:
                state.content.append(nodes.list_node(state.list_kind, state.items))
            state.in_list = False
            state.items = []
            state.current = None

        elif kind == "inline":
            block = self._active_block(state)
            if block is None:
                self.logger.debug("Dropping inline token with no open block")
                return
            self._build_inline(getattr(token, "children", None) or [], block["content"])

        elif kind == "hr":
            state.content.append(nodes.rule())

        elif kind == "hardbreak":
            target = state.content[-1] if state.content else None
            if target is not None and target["type"] in (
                NodeType.HEADING.value,
                NodeType.PARAGRAPH.value,
            ):
                target["content"].append(nodes.hard_break())

        elif kind not in _NOOP_TOKENS:
            self.logger.debug(f"Skipping unsupported token: {kind}")

    def _active_block(self, state: _BuildState) -> Optional[AdfNode]:
        if state.in_list:
            return self._list_item_paragraph(state)
        return state.current

    def _list_item_paragraph(self, state: _BuildState) -> Optional[AdfNode]:
        if not state.items:
            return None
        return state.items[-1]["content"][0]

    def _heading_level(self, token: MarkupToken) -> int:
        tag = getattr(token, "tag", "") or ""
        try:
            level = int(tag[1:])
        except ValueError:
            return 1
        return min(max(level, 1), 6)

    # -------------------------------------------------------------------------
    # Inline Tokens
    # -------------------------------------------------------------------------

    def _build_inline(self, children: Iterable[MarkupToken], content: list[AdfNode]) -> None:
        run = _InlineRun(content)

        for child in children:
            kind = getattr(child, "type", None)

            if kind == "text":
                run.add_text(getattr(child, "content", "") or "")
            elif kind in _STYLE_MARKS:
                run.open_mark(nodes.mark(_STYLE_MARKS[kind]))
            elif kind == "link_open":
                run.open_mark(nodes.mark(MarkType.LINK, href=self._link_target(child)))
            elif kind in _CLOSING_MARKS:
                run.close_mark(_CLOSING_MARKS[kind])
            elif kind == "code_inline":
                code = getattr(child, "content", "") or ""
                if code:
                    run.append(nodes.text(code, [nodes.mark(MarkType.CODE)]))
            elif kind == "softbreak":
                run.add_softbreak()
            elif kind == "hardbreak":
                run.append(nodes.hard_break())
            else:
                self.logger.debug(f"Skipping unsupported inline token: {kind}")

        run.flush()

    def _link_target(self, token: MarkupToken) -> str:
        """Read the link target from the token's first attribute pair."""
        attrs = getattr(token, "attrs", None)
        if not attrs:
            return ""
        if isinstance(attrs, dict):
            return str(next(iter(attrs.values())))
        try:
            return str(attrs[0][1])
        except (IndexError, KeyError, TypeError):
            return ""


# -----------------------------------------------------------------------------
# ADF -> Text
# -----------------------------------------------------------------------------

def extract_text(node: Any) -> str:
    """
    Flatten an ADF node to plain text.

    Styling is discarded. Paragraphs and hard breaks become newlines, and runs
    of three or more newlines collapse to a blank line. Works on any ADF
    received from Jira, not only on trees built here.
    """
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")

    if node_type == NodeType.TEXT.value:
        return str(node.get("text") or "")

    if node_type == NodeType.MENTION.value:
        attrs = node.get("attrs")
        handle = str(attrs.get("text") or "") if isinstance(attrs, dict) else ""
        return "@" + handle.removeprefix("@")

    if node_type == NodeType.HARD_BREAK.value:
        return "\n"

    if node_type == NodeType.PARAGRAPH.value:
        return _extract_children(node.get("content")) + "\n"

    if isinstance(node.get("content"), list):
        return _extract_children(node["content"])

    return ""


def _extract_children(children: Any) -> str:
    if not isinstance(children, list):
        return ""
    text = "".join(extract_text(child) for child in children)
    return _EXCESS_NEWLINES.sub("\n\n", text)


class ADFFormatter(DocumentFormatterPort):
    """
    Atlassian Document Format formatter.

    Converts markdown to ADF for the Jira API and ADF back to text.
    Reference: https://developer.atlassian.com/cloud/jira/platform/apis/document/structure/
    """

    def __init__(
        self,
        token_source: Optional[TokenSourcePort] = None,
        builder: Optional[ADFDocumentBuilder] = None,
    ):
        self.token_source = token_source or MarkdownTokenSource()
        self.builder = builder or ADFDocumentBuilder()

    @property
    def name(self) -> str:
        return "ADF"

    # -------------------------------------------------------------------------
    # DocumentFormatterPort Implementation
    # -------------------------------------------------------------------------

    def format_text(self, text: str) -> dict[str, Any]:
        """Convert markdown text to ADF."""
        return self.builder.build(self.token_source.tokenize(text))

    def extract_text(self, document: Any) -> str:
        """Convert ADF to plain text."""
        return extract_text(document)
