"""
Field Report - Categorized plain-text report of an issue's populated fields.

Input is the JSON of ``GET /rest/api/3/issue/{key}?expand=names``: ``key``,
``fields`` (field id -> value) and ``names`` (field id -> display name).
"""

import logging
from typing import Any, Optional

from .fields import FieldValueFormatter
from .noise import NoiseClassifier


KEY_DETAIL_FIELDS = (
    "Description",
    "Status",
    "Assignee",
    "Reporter",
    "Priority",
    "Created",
    "Updated",
)

# Section name -> field-name fragments (case-insensitive). Order matters.
REPORT_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Project Info": ("Project", "Issue Type", "Request Type", "Rank"),
    "Links": ("Link", "URL"),
    "Dates & Times": ("Last Viewed", "Status Category Changed", "Date of First Response", "Due"),
    "Request Details": ("Request participants", "Request language", "Escalated", "Next Steps"),
}

OTHER_FIELDS = "Other Fields"

# Rendered in their own section
_SPECIAL_FIELD_IDS = frozenset({"summary", "comment"})


class FieldReportRenderer:
    """
    Renders an issue as a sectioned text report.

    Populated, non-noise fields are listed under "Key Details" first, then
    grouped by category; comments come last.
    """

    def __init__(
        self,
        formatter: Optional[FieldValueFormatter] = None,
        classifier: Optional[NoiseClassifier] = None,
        categories: Optional[dict[str, tuple[str, ...]]] = None,
    ):
        self.classifier = classifier or (formatter.classifier if formatter else NoiseClassifier())
        self.formatter = formatter or FieldValueFormatter(classifier=self.classifier)
        self.categories = categories if categories is not None else REPORT_CATEGORIES
        self.logger = logging.getLogger("FieldReportRenderer")

    def render(self, issue: dict[str, Any]) -> str:
        """Render the report for an issue payload."""
        fields = issue.get("fields") or {}
        names = issue.get("names") or {}

        lines = [f"Issue: {issue.get('key', '')}"]
        if fields.get("summary"):
            lines.append(f"Summary: {fields['summary']}")
        lines.append("")

        rendered = self._render_fields(fields, names)

        lines.append("=== Key Details ===")
        for field_name in KEY_DETAIL_FIELDS:
            if field_name in rendered:
                lines.append(f"{field_name}: {rendered.pop(field_name)}")

        for section, entries in self._group(rendered).items():
            if not entries:
                continue
            lines.append("")
            lines.append(f"=== {section} ===")
            for field_name, text in entries:
                lines.append(f"{field_name}: {text}")

        comment = fields.get("comment")
        comments = comment.get("comments") if isinstance(comment, dict) else None
        if comments:
            text = self.formatter.format(comments, "comments")
            lines.append("")
            lines.append("=== Comments ===")
            if text.strip():
                lines.append(text)

        return "\n".join(lines)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _render_fields(self, fields: dict[str, Any], names: dict[str, Any]) -> dict[str, str]:
        """Map display name -> formatted value for every field worth showing."""
        rendered: dict[str, str] = {}

        for field_id, value in fields.items():
            if field_id in _SPECIAL_FIELD_IDS:
                continue

            field_name = str(names.get(field_id) or field_id)
            if field_name in rendered:
                continue

            if not self.classifier.is_populated(value):
                continue
            if self.classifier.is_noise(field_id, value):
                self.logger.debug(f"Suppressed noise field: {field_id}")
                continue

            text = self.formatter.format(value, field_name).strip()
            if text:
                rendered[field_name] = text

        return rendered

    def _group(self, rendered: dict[str, str]) -> dict[str, list[tuple[str, str]]]:
        sections: dict[str, list[tuple[str, str]]] = {name: [] for name in self.categories}
        sections[OTHER_FIELDS] = []

        for field_name, text in rendered.items():
            lowered = field_name.lower()
            section = next(
                (
                    name
                    for name, fragments in self.categories.items()
                    if any(fragment.lower() in lowered for fragment in fragments)
                ),
                OTHER_FIELDS,
            )
            sections[section].append((field_name, text))

        return sections
