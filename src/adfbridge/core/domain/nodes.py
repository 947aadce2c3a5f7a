"""
Document Nodes - Atlassian Document Format (ADF) vocabulary.

ADF nodes are plain dicts so they serialize straight to the Jira wire format.
The type and mark names below are fixed by Jira and must not change.
Reference: https://developer.atlassian.com/cloud/jira/platform/apis/document/structure/
"""

from enum import Enum
from typing import Any, Optional


ADF_VERSION = 1

AdfNode = dict[str, Any]


class NodeType(str, Enum):
    """ADF node types produced or understood by adfbridge."""

    DOC = "doc"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    RULE = "rule"
    HARD_BREAK = "hardBreak"
    TEXT = "text"
    MENTION = "mention"


class MarkType(str, Enum):
    """ADF inline mark types."""

    STRONG = "strong"
    EM = "em"
    CODE = "code"
    LINK = "link"


class ListKind(Enum):
    """Kind of list currently being built."""

    BULLET = NodeType.BULLET_LIST.value
    ORDERED = NodeType.ORDERED_LIST.value


# -----------------------------------------------------------------------------
# Node factories
# -----------------------------------------------------------------------------

def doc(content: Optional[list[AdfNode]] = None) -> AdfNode:
    """Create the ADF document root."""
    return {
        "type": NodeType.DOC.value,
        "version": ADF_VERSION,
        "content": content if content is not None else [],
    }


def heading(level: int) -> AdfNode:
    return {
        "type": NodeType.HEADING.value,
        "attrs": {"level": level},
        "content": [],
    }


def paragraph() -> AdfNode:
    return {"type": NodeType.PARAGRAPH.value, "content": []}


def list_node(kind: ListKind, items: list[AdfNode]) -> AdfNode:
    """Create a bulletList/orderedList node holding list items."""
    return {"type": kind.value, "content": items}


def list_item() -> AdfNode:
    """Create a list item owning exactly one (empty) paragraph."""
    return {"type": NodeType.LIST_ITEM.value, "content": [paragraph()]}


def rule() -> AdfNode:
    return {"type": NodeType.RULE.value}


def hard_break() -> AdfNode:
    return {"type": NodeType.HARD_BREAK.value}


def text(value: str, marks: Optional[list[AdfNode]] = None) -> AdfNode:
    """Create a text node; ``marks`` is omitted when empty."""
    node: AdfNode = {"type": NodeType.TEXT.value, "text": value}
    if marks:
        node["marks"] = [_copy_mark(m) for m in marks]
    return node


def _copy_mark(m: AdfNode) -> AdfNode:
    copied = dict(m)
    if "attrs" in copied:
        copied["attrs"] = dict(copied["attrs"])
    return copied


def mark(mark_type: MarkType, href: Optional[str] = None) -> AdfNode:
    """Create a mark; links carry ``attrs.href``."""
    if mark_type is MarkType.LINK:
        return {"type": mark_type.value, "attrs": {"href": href or ""}}
    return {"type": mark_type.value}

