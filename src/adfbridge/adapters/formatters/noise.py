"""
Noise Classifier - Decide which Jira fields are worth showing.

The classifier is a generic matcher over the rule tables in
``adfbridge.core.domain.rules``.
"""

import re
from typing import Any, Iterable, Optional

from ...core.domain.rules import (
    MatchKind,
    NoisePattern,
    NOISE_FIELD_FRAGMENTS,
    BOILERPLATE_PATTERNS,
    MEANINGLESS_VALUES,
)


class NoiseClassifier:
    """
    Classifies field values as populated and/or noise.

    A field is noise when its id contains a denylisted fragment, or when its
    value is boilerplate (signatures, contact details, URLs), a meaningless
    literal, or a string of at most one character.
    """

    def __init__(
        self,
        field_fragments: Iterable[str] = NOISE_FIELD_FRAGMENTS,
        patterns: Iterable[NoisePattern] = BOILERPLATE_PATTERNS,
        meaningless: Iterable[str] = MEANINGLESS_VALUES,
        extra_field_fragments: Optional[Iterable[str]] = None,
    ):
        fragments = list(field_fragments) + list(extra_field_fragments or [])
        self._fragments = tuple(f.lower() for f in fragments if f)
        self._patterns = tuple(patterns)
        self._regexes = {
            p.pattern: re.compile(p.pattern)
            for p in self._patterns
            if p.kind is MatchKind.REGEX
        }
        self._meaningless = frozenset(meaningless)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    @staticmethod
    def is_populated(value: Any) -> bool:
        """False for None, blank strings, empty lists and empty dicts."""
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        if isinstance(value, (list, tuple, dict)):
            return len(value) > 0
        return True

    def is_noise(self, field_id: str, value: Any) -> bool:
        """Whether the field should be dropped from rendered output."""
        if isinstance(value, str) and self._is_noise_value(value):
            return True
        return self.is_noise_field(field_id)

    def is_noise_field(self, field_id: str) -> bool:
        """Whether the field id contains a denylisted fragment."""
        lowered = (field_id or "").lower()
        return any(fragment in lowered for fragment in self._fragments)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _is_noise_value(self, value: str) -> bool:
        if any(self._matches(p, value) for p in self._patterns):
            return True
        if value in self._meaningless or value.strip() == "":
            return True
        return len(value.strip()) <= 1

    def _matches(self, pattern: NoisePattern, value: str) -> bool:
        if pattern.kind is MatchKind.REGEX:
            return self._regexes[pattern.pattern].search(value) is not None
        return pattern.pattern in value
