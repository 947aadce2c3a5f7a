"""
Domain - ADF vocabulary and the noise/cleanup rule tables.
"""

from .nodes import ADF_VERSION, AdfNode, NodeType, MarkType, ListKind
from .rules import (
    MatchKind,
    NoisePattern,
    CleanupRule,
    NOISE_FIELD_FRAGMENTS,
    BOILERPLATE_PATTERNS,
    MEANINGLESS_VALUES,
    COMMENT_CLEANUP_RULES,
    TEMPORAL_FIELD_FRAGMENTS,
    COMMENT_FIELD_NAMES,
)

__all__ = [
    "ADF_VERSION",
    "AdfNode",
    "NodeType",
    "MarkType",
    "ListKind",
    "MatchKind",
    "NoisePattern",
    "CleanupRule",
    "NOISE_FIELD_FRAGMENTS",
    "BOILERPLATE_PATTERNS",
    "MEANINGLESS_VALUES",
    "COMMENT_CLEANUP_RULES",
    "TEMPORAL_FIELD_FRAGMENTS",
    "COMMENT_FIELD_NAMES",
]
