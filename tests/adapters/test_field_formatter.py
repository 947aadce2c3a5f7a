"""Tests for the Jira field value formatter."""

import time

import pytest

from adfbridge.adapters.formatters import FieldValueFormatter, NoiseClassifier


def adf(*paragraphs):
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {"type": "paragraph", "content": [{"type": "text", "text": p}]}
            for p in paragraphs
        ],
    }


@pytest.fixture
def formatter():
    return FieldValueFormatter(date_format="%Y-%m-%d %H:%M", local_time=False)


@pytest.fixture
def utc_plus_three(monkeypatch):
    """Pin the process time zone to UTC+3 (POSIX TZ offsets are inverted)."""
    monkeypatch.setenv("TZ", "XYZ-3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestScalars:
    """Tests for scalar values."""

    def test_none(self, formatter):
        assert formatter.format(None) == ""

    def test_string(self, formatter):
        assert formatter.format("Fix login bug", "Summary") == "Fix login bug"

    @pytest.mark.parametrize("value, expected", [
        (True, "true"),
        (False, "false"),
        (5, "5"),
        (3.0, "3"),
        (2.5, "2.5"),
    ])
    def test_numbers_and_booleans(self, formatter, value, expected):
        assert formatter.format(value, "Story Points") == expected

    @pytest.mark.parametrize("field_name", ["Created", "updated", "Due date", "startDate"])
    def test_temporal_field(self, formatter, field_name):
        assert formatter.format("2024-01-15T10:30:00.000+0000", field_name) == "2024-01-15 10:30"

    def test_date_only(self, formatter):
        assert formatter.format("2024-03-01", "Due date") == "2024-03-01 00:00"

    def test_zulu_time(self, formatter):
        assert formatter.format("2024-01-15T10:30:00Z", "created") == "2024-01-15 10:30"

    def test_epoch_milliseconds(self, formatter):
        assert formatter.format(1705314600000, "created") == "2024-01-15 10:30"

    def test_unparseable_date_falls_back(self, formatter):
        assert formatter.format("not a date", "Updated") == "not a date"

    def test_non_temporal_field_keeps_literal(self, formatter):
        value = "2024-01-15T10:30:00.000+0000"
        assert formatter.format(value, "Summary") == value

    def test_custom_date_format(self):
        formatter = FieldValueFormatter(date_format="%d/%m/%Y", local_time=False)
        assert formatter.format("2024-01-15T10:30:00.000+0000", "Created") == "15/01/2024"

    @pytest.mark.parametrize("value", [
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
        253402300799000,
    ])
    def test_out_of_range_date_falls_back(self, utc_plus_three, value):
        formatter = FieldValueFormatter()
        assert formatter.format(value, "Created") == str(value)


class TestMappings:
    """Tests for the recognizer chain on objects."""

    def test_user(self, formatter):
        user = {"displayName": "Ada Lovelace", "accountId": "5b10", "avatarUrls": {}}
        assert formatter.format(user, "Assignee") == "Ada Lovelace"

    def test_request_type_with_description(self, formatter):
        value = {"requestType": {"name": "Get IT help", "description": "Ask for help. We respond fast."}}
        assert formatter.format(value) == "Get IT help: Ask for help."

    def test_request_type_without_description(self, formatter):
        assert formatter.format({"requestType": {"name": "Get IT help"}}) == "Get IT help"

    def test_status_pair(self, formatter):
        value = {"status": "Waiting for support", "statusCategory": "In Progress"}
        assert formatter.format(value) == "Waiting for support (In Progress)"

    def test_rich_text(self, formatter):
        assert formatter.format(adf("Hello"), "Description") == "Hello\n"

    def test_name(self, formatter):
        assert formatter.format({"name": "High", "id": "2", "iconUrl": "x"}) == "High"

    def test_value(self, formatter):
        assert formatter.format({"value": "Option A", "id": "10001"}) == "Option A"

    def test_display_name_wins_over_name(self, formatter):
        assert formatter.format({"displayName": "Ada", "name": "ada"}) == "Ada"

    def test_fallback_formats_meaningful_entries(self, formatter):
        value = {
            "team": "Platform",
            "region": "EMEA",
            "_internal": "hidden",
            "iconUrl": "https://x.test/icon.png",
            "empty": "",
            "signature": "Best regards, Bob",
        }
        assert formatter.format(value) == "Platform EMEA"

    def test_fallback_recurses(self, formatter):
        value = {"lead": {"displayName": "Ada"}, "tier": {"value": "Gold"}}
        assert formatter.format(value) == "Ada Gold"

    def test_fallback_nothing_meaningful(self, formatter):
        assert formatter.format({"self": "https://x.test", "id": "1"}) == ""

    def test_recognizer_chain_is_ordered(self, formatter):
        names = [r.__name__ for r in formatter.recognizers]
        assert names == [
            "_recognize_user",
            "_recognize_request_type",
            "_recognize_status",
            "_recognize_rich_text",
            "_recognize_name_or_value",
        ]


class TestSequences:
    """Tests for list values."""

    def test_join(self, formatter):
        assert formatter.format(["backend", "", "api"], "Labels") == "backend, api"

    def test_objects(self, formatter):
        value = [{"name": "Backend"}, {"name": "API"}]
        assert formatter.format(value, "Components") == "Backend, API"

    def test_empty(self, formatter):
        assert formatter.format([], "Labels") == ""


class TestComments:
    """Tests for the comment renderer."""

    def test_empty_list(self, formatter):
        assert formatter.format([], "comments") == ""

    def test_all_bodies_clean_to_nothing(self, formatter):
        comments = [
            {"author": {"displayName": "A"}, "body": "> quoted only", "created": "2024-01-15T10:30:00.000+0000"},
            {"author": {"displayName": "B"}, "body": "https://example.com/x"},
            {"author": {"displayName": "C"}, "body": "------"},
        ]
        assert formatter.format(comments, "comments") == ""

    def test_reply_header_removed(self, formatter):
        comments = [{
            "author": {"displayName": "Ada"},
            "body": "From: a@b.com\nSent: today\nTo: c@d.com\nSubject: x\nHi there",
            "created": "2024-01-15T10:30:00.000+0000",
        }]
        assert formatter.format(comments, "comments") == "Ada (2024-01-15 10:30):\nHi there"

    def test_signature_removed(self, formatter):
        comments = [{
            "author": {"displayName": "Bob"},
            "body": "Fixed in build 42.\n\nThanks,\nBob\nMobile: 555 1234",
            "created": "2024-01-15T10:30:00.000+0000",
        }]
        assert formatter.format(comments, "Comment") == "Bob (2024-01-15 10:30):\nFixed in build 42."

    def test_rich_text_body(self, formatter):
        comments = [{
            "author": {"displayName": "Ada"},
            "body": adf("Looks good", "Ship it"),
            "created": "2024-01-15T10:30:00.000+0000",
        }]
        assert formatter.format(comments, "comments") == "Ada (2024-01-15 10:30):\nLooks good\nShip it"

    def test_unknown_author_and_date(self, formatter):
        comments = [{"body": "No author here"}]
        assert formatter.format(comments, "comments") == "Unknown (Unknown date):\nNo author here"

    def test_multiple_comments_blank_line_between(self, formatter):
        comments = [
            {"author": {"displayName": "A"}, "body": "first", "created": "2024-01-15T10:30:00.000+0000"},
            {"author": {"displayName": "B"}, "body": "> dropped"},
            {"author": {"displayName": "C"}, "body": "second", "created": "2024-01-16T08:00:00.000+0000"},
        ]
        assert formatter.format(comments, "comments") == (
            "A (2024-01-15 10:30):\nfirst\n\nC (2024-01-16 08:00):\nsecond"
        )

    def test_emails_and_urls_stripped(self, formatter):
        body = "Ping ops@example.com or see www.example.org/status for details"
        cleaned = formatter.clean_comment_body(body)

        assert "@" not in cleaned
        assert "www." not in cleaned
        assert cleaned.startswith("Ping")

    def test_blank_lines_collapsed(self, formatter):
        assert formatter.clean_comment_body("a\n\n\n\n\nb") == "a\n\nb"

    def test_phone_label_removed(self, formatter):
        assert formatter.clean_comment_body("Call me\nTel: +1 555 1234\nok") == "Call me\nok"


class TestCustomClassifier:
    """The formatter consults its classifier for fallback objects."""

    def test_extra_noise_field_hidden(self):
        classifier = NoiseClassifier(extra_field_fragments=["region"])
        formatter = FieldValueFormatter(classifier=classifier)

        assert formatter.format({"team": "Platform", "region": "EMEA"}) == "Platform"


class TestLocalTime:
    """Tests for the default local-time rendering."""

    def test_converts_to_local_zone(self, utc_plus_three):
        formatter = FieldValueFormatter()
        assert formatter.format("2024-01-15T10:30:00.000+0000", "Created") == "2024-01-15 13:30"

    def test_epoch_converted(self, utc_plus_three):
        formatter = FieldValueFormatter()
        assert formatter.format(1705314600000, "updated") == "2024-01-15 13:30"

    def test_naive_value_not_shifted(self, utc_plus_three):
        formatter = FieldValueFormatter()
        assert formatter.format("2024-03-01T09:00:00", "Due date") == "2024-03-01 09:00"

    def test_bad_comment_date_keeps_thread(self, utc_plus_three):
        formatter = FieldValueFormatter()
        comments = [
            {"author": {"displayName": "A"}, "body": "ancient", "created": "0001-01-01T00:00:00+01:00"},
            {"author": {"displayName": "B"}, "body": "recent", "created": "2024-01-15T10:30:00.000+0000"},
        ]
        assert formatter.format(comments, "comments") == (
            "A (0001-01-01T00:00:00+01:00):\nancient\n\nB (2024-01-15 13:30):\nrecent"
        )
