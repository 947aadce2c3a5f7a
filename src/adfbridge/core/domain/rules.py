"""
Noise Rules - Data tables for noise suppression and comment cleanup.

These tables grew organically from real Jira / Jira Service Management
payloads. They are plain data: the matching engine lives in
``adfbridge.adapters.formatters.noise`` and never needs to change when a
pattern is added here.
"""

from dataclasses import dataclass
from enum import Enum


class MatchKind(Enum):
    """How a pattern is applied to a string value."""

    CONTAINS = "contains"   # plain substring test
    REGEX = "regex"         # re.search


@dataclass(frozen=True)
class NoisePattern:
    """A single boilerplate pattern."""

    pattern: str
    kind: MatchKind = MatchKind.CONTAINS


@dataclass(frozen=True)
class CleanupRule:
    """A regex substitution applied to comment bodies, in table order."""

    pattern: str
    replacement: str = ""
    multiline: bool = False
    dotall: bool = False


# Field-id fragments (case-insensitive substring) for system metadata,
# UI-only values and internal schema.
NOISE_FIELD_FRAGMENTS: tuple[str, ...] = (
    "avatar", "icon", "self", "thumbnail", "timetracking", "worklog",
    "watches", "subtasks", "attachment", "aggregateprogress", "progress",
    "votes", "_links", "accountId", "emailAddress", "active", "timeZone",
    "accountType", "_expands", "groupIds", "portalId", "serviceDeskId",
    "issueTypeId", "renderedFields", "names", "id", "expand", "schema",
    "operations", "editmeta", "changelog", "versionedRepresentations",
    "fieldsToInclude", "properties", "updateAuthor", "jsdPublic", "mediaType",
    "maxResults", "total", "startAt", "iconUrls", "issuerestrictions",
    "shouldDisplay", "nonEditableReason", "hasEpicLinkFieldDependency",
    "showField", "statusDate", "statusCategory", "collection", "localId",
    "attrs", "marks", "layout", "version", "type", "content", "table",
    "tableRow", "tableCell", "mediaSingle", "media", "heading", "paragraph",
    "bulletList", "listItem", "orderedList", "rule", "inlineCard", "hardBreak",
    "workRatio", "parentLink", "restrictTo", "timeToResolution",
    "timeToFirstResponse", "slaForInitialResponse",
)

# String values that are e-mail headers, signatures or contact details.
BOILERPLATE_PATTERNS: tuple[NoisePattern, ...] = (
    NoisePattern("CAUTION:"),
    NoisePattern("From:"),
    NoisePattern("Sent:"),
    NoisePattern("To:"),
    NoisePattern("Subject:"),
    NoisePattern("Book time to meet with me"),
    NoisePattern("Best-"),
    NoisePattern("Best regards"),
    NoisePattern("Kind regards"),
    NoisePattern("Regards,"),
    NoisePattern("Mobile"),
    NoisePattern("Phone"),
    NoisePattern("Tel:"),
    NoisePattern("www."),
    NoisePattern("http://"),
    NoisePattern("https://"),
    NoisePattern(r"@.*\.com$", MatchKind.REGEX),
    NoisePattern(r"^M:", MatchKind.REGEX),
    NoisePattern("LLC"),
    NoisePattern("Inc."),
    NoisePattern("Ltd."),
    NoisePattern("Office:"),
    NoisePattern("Direct:"),
)

# Literal values that carry no information.
MEANINGLESS_VALUES: frozenset[str] = frozenset({
    "-1",
    "0",
    "false false",
    "true, ",
    ".",
    "-",
    "_",
})

# Applied in order to comment bodies before rendering.
COMMENT_CLEANUP_RULES: tuple[CleanupRule, ...] = (
    # Quoted reply headers (Outlook style)
    CleanupRule(
        r"^[\s\S]*?From:[\s\S]*?Sent:[\s\S]*?To:[\s\S]*?Subject:[\s\S]*?\n",
        multiline=True,
    ),
    # Quote-marker lines
    CleanupRule(r"^>.*$", multiline=True),
    # Long rules of repeated punctuation
    CleanupRule(r"_{3,}|-{3,}|={3,}"),
    # URLs
    CleanupRule(r"(?:(?:https?|ftp)://|\bwww\.)[^\s<>()]+"),
    # E-mail addresses
    CleanupRule(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"),
    # Sign-offs through end of text
    CleanupRule(
        r"(?:^|\s)(?:Best regards|Kind regards|Regards|Best|Thanks|Thank you|Cheers),.*",
        dotall=True,
    ),
    # Phone number label lines
    CleanupRule(r"(?:Mobile|Tel|Phone|Office|Direct):\s*[\d\s.+-]+"),
    # Excess blank lines
    CleanupRule(r"\n{3,}", "\n\n"),
)

# Field names that are temporal (case-insensitive substring).
TEMPORAL_FIELD_FRAGMENTS: tuple[str, ...] = ("date", "created", "updated")

# Field names whose list values are rendered as a comment thread.
COMMENT_FIELD_NAMES: frozenset[str] = frozenset({"comment", "comments"})
