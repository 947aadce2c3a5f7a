"""
Field Formatter - Render Jira field values as readable text.

Field values arrive as whatever JSON Jira sends: scalars, lists, or nested
objects. Objects are recognized by shape (users, statuses, request types,
rich text) through an ordered chain of recognizers.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from ...core.domain.rules import (
    CleanupRule,
    COMMENT_CLEANUP_RULES,
    COMMENT_FIELD_NAMES,
    TEMPORAL_FIELD_FRAGMENTS,
)
from .adf import extract_text
from .noise import NoiseClassifier


Recognizer = Callable[[dict[str, Any]], Optional[str]]

# Jira sends offsets without a colon (2024-01-15T10:30:00.000+0000)
_OFFSET_WITHOUT_COLON = re.compile(r"([+-]\d{2})(\d{2})$")


class FieldValueFormatter:
    """
    Formats Jira field values to plain text.

    Usage:
        formatter = FieldValueFormatter()
        formatter.format({"displayName": "Ada"}, "Assignee")   # "Ada"
        formatter.format(issue["fields"]["comment"]["comments"], "comments")
    """

    def __init__(
        self,
        classifier: Optional[NoiseClassifier] = None,
        date_format: str = "%Y-%m-%d %H:%M",
        local_time: bool = True,
        cleanup_rules: tuple[CleanupRule, ...] = COMMENT_CLEANUP_RULES,
    ):
        self.classifier = classifier or NoiseClassifier()
        self.date_format = date_format
        self.local_time = local_time
        self.logger = logging.getLogger("FieldValueFormatter")

        self._cleanup = [
            (re.compile(rule.pattern, self._flags(rule)), rule.replacement)
            for rule in cleanup_rules
        ]

        # Tried in order, first match wins
        self.recognizers: list[Recognizer] = [
            self._recognize_user,
            self._recognize_request_type,
            self._recognize_status,
            self._recognize_rich_text,
            self._recognize_name_or_value,
        ]

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def format(self, value: Any, field_name: Optional[str] = None) -> str:
        """Format any field value."""
        if value is None:
            return ""

        if isinstance(value, (list, tuple)):
            if self._is_comment_field(field_name):
                return self.format_comments(value)
            formatted = (self.format(item) for item in value)
            return ", ".join(item for item in formatted if item)

        if isinstance(value, dict):
            return self._format_mapping(value)

        if field_name and self._is_temporal_field(field_name):
            return self.format_datetime(value)

        return self._scalar(value)

    def format_comments(self, comments: Any) -> str:
        """Render a comment thread, dropping comments that clean to nothing."""
        if not isinstance(comments, (list, tuple)):
            return ""

        rendered = []
        for comment in comments:
            entry = self._format_comment(comment)
            if entry:
                rendered.append(entry)

        return "\n\n".join(rendered)

    def format_datetime(self, value: Any) -> str:
        """
        Render a timestamp with the configured format.

        Accepts ISO-8601 strings (including Jira's +0000 offsets) and epoch
        milliseconds. Anything unparseable is returned as-is.
        """
        parsed = self._parse_datetime(value)
        if parsed is None:
            self.logger.debug(f"Could not parse date value: {value!r}")
            return self._scalar(value)

        try:
            if self.local_time and parsed.tzinfo is not None:
                parsed = parsed.astimezone()
            return parsed.strftime(self.date_format)
        except (OverflowError, OSError, ValueError) as e:
            self.logger.debug(f"Could not render date value {value!r}: {e}")
            return self._scalar(value)

    def clean_comment_body(self, body: str) -> str:
        """Strip reply headers, quotes, URLs, emails and signatures."""
        for pattern, replacement in self._cleanup:
            body = pattern.sub(replacement, body)
        return body.strip()

    # -------------------------------------------------------------------------
    # Recognizers
    # -------------------------------------------------------------------------

    def _recognize_user(self, value: dict[str, Any]) -> Optional[str]:
        if value.get("displayName"):
            return self._scalar(value["displayName"])
        return None

    def _recognize_request_type(self, value: dict[str, Any]) -> Optional[str]:
        request_type = value.get("requestType")
        if not isinstance(request_type, dict) or not request_type.get("name"):
            return None

        name = self._scalar(request_type["name"])
        description = request_type.get("description")
        if description:
            first_sentence = str(description).split(".")[0]
            return f"{name}: {first_sentence}."
        return name

    def _recognize_status(self, value: dict[str, Any]) -> Optional[str]:
        if value.get("status") and value.get("statusCategory"):
            return f"{self._scalar(value['status'])} ({self._scalar(value['statusCategory'])})"
        return None

    def _recognize_rich_text(self, value: dict[str, Any]) -> Optional[str]:
        if value.get("content"):
            return extract_text(value)
        return None

    def _recognize_name_or_value(self, value: dict[str, Any]) -> Optional[str]:
        if value.get("name"):
            return self._scalar(value["name"])
        if value.get("value"):
            return self._scalar(value["value"])
        return None

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _format_mapping(self, value: dict[str, Any]) -> str:
        for recognizer in self.recognizers:
            result = recognizer(value)
            if result is not None:
                return result

        parts = []
        for key, item in value.items():
            if str(key).startswith("_"):
                continue
            if not self.classifier.is_populated(item):
                continue
            if self.classifier.is_noise(str(key), item):
                continue
            formatted = self.format(item)
            if formatted:
                parts.append(formatted)

        return " ".join(parts)

    def _format_comment(self, comment: Any) -> str:
        if not isinstance(comment, dict):
            comment = {"body": comment}

        author_info = comment.get("author")
        author = "Unknown"
        if isinstance(author_info, dict) and author_info.get("displayName"):
            author = self._scalar(author_info["displayName"])

        body = comment.get("body")
        if isinstance(body, dict) and body.get("content"):
            text = extract_text(body)
        else:
            text = self._scalar(body) if body is not None else ""

        text = self.clean_comment_body(text)
        if not text:
            return ""

        created = comment.get("created")
        when = self.format_datetime(created) if created is not None else "Unknown date"
        return f"{author} ({when}):\n{text}"

    def _parse_datetime(self, value: Any) -> Optional[datetime]:
        if isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                return None

        if not isinstance(value, str) or not value.strip():
            return None

        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        raw = _OFFSET_WITHOUT_COLON.sub(r"\1:\2", raw)

        try:
            return datetime.fromisoformat(raw)
        except ValueError:
            return None

    def _is_comment_field(self, field_name: Optional[str]) -> bool:
        return bool(field_name) and field_name.lower() in COMMENT_FIELD_NAMES

    def _is_temporal_field(self, field_name: str) -> bool:
        lowered = field_name.lower()
        return any(fragment in lowered for fragment in TEMPORAL_FIELD_FRAGMENTS)

    @staticmethod
    def _scalar(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def _flags(rule: CleanupRule) -> int:
        flags = 0
        if rule.multiline:
            flags |= re.MULTILINE
        if rule.dotall:
            flags |= re.DOTALL
        return flags
