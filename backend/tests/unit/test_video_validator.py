"""Unit tests for video payload validation."""

import pytest

from video_api.application.validators import (
    ValidationMode,
    parse_timestamp,
    validate_video_input,
)
from video_api.domain.exceptions import FieldError

CREATE = ValidationMode.CREATE
UPDATE = ValidationMode.UPDATE


def _fields(errors: list[FieldError]) -> list[str]:
    return [e.field for e in errors]


def _valid(**extra) -> dict:
    return {"title": "A title", "author": "An author", **extra}


# ── title / author ───────────────────────────────────────────────────


def test_minimal_create_payload_is_accepted():
    assert validate_video_input({"title": "A", "author": "B"}, CREATE) == []


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": None}, {"title": 0}])
def test_create_requires_title(payload):
    errors = validate_video_input({**payload, "author": "B"}, CREATE)
    assert errors == [FieldError(message="Title is required", field="title")]


def test_create_requires_author():
    errors = validate_video_input({"title": "A"}, CREATE)
    assert errors == [FieldError(message="Author is required", field="author")]


def test_create_reports_both_missing_fields():
    assert _fields(validate_video_input({}, CREATE)) == ["title", "author"]


def test_title_of_exactly_40_characters_passes():
    assert validate_video_input(_valid(title="x" * 40), CREATE) == []


def test_title_of_41_characters_fails():
    assert _fields(validate_video_input(_valid(title="x" * 41), CREATE)) == ["title"]


def test_title_length_is_measured_after_trimming():
    assert validate_video_input(_valid(title="  " + "x" * 40 + "  "), CREATE) == []


def test_whitespace_only_title_is_an_error_not_absent():
    errors = validate_video_input(_valid(title="   "), CREATE)
    assert _fields(errors) == ["title"]
    assert errors[0].message != "Title is required"


def test_author_limit_is_20():
    assert validate_video_input(_valid(author="a" * 20), CREATE) == []
    assert _fields(validate_video_input(_valid(author="a" * 21), CREATE)) == ["author"]


def test_non_string_title_fails():
    assert _fields(validate_video_input(_valid(title=123), CREATE)) == ["title"]


def test_update_does_not_require_title_or_author():
    assert validate_video_input({}, UPDATE) == []


def test_update_rejects_empty_title_when_present():
    assert _fields(validate_video_input({"title": ""}, UPDATE)) == ["title"]


def test_update_rejects_null_author_when_present():
    assert _fields(validate_video_input({"author": None}, UPDATE)) == ["author"]


# ── availableResolutions ─────────────────────────────────────────────


def test_empty_resolution_list_passes():
    assert validate_video_input(_valid(availableResolutions=[]), CREATE) == []


def test_every_known_resolution_passes():
    all_labels = ["P144", "P240", "P360", "P480", "P720", "P1080", "P1440", "P2160"]
    assert validate_video_input(_valid(availableResolutions=all_labels), CREATE) == []


@pytest.mark.parametrize(
    "value",
    [["P720", "P4320"], ["p720"], "P720", None, {"P720": True}, [720]],
)
def test_invalid_resolutions_produce_one_aggregated_error(value):
    errors = validate_video_input(_valid(availableResolutions=value), CREATE)
    assert len(errors) == 1
    assert errors[0].field == "availableResolutions"
    assert "P144, P240, P360, P480, P720, P1080, P1440, P2160" in errors[0].message


# ── canBeDownloaded ──────────────────────────────────────────────────


@pytest.mark.parametrize("value", [True, False])
def test_boolean_can_be_downloaded_passes(value):
    assert validate_video_input(_valid(canBeDownloaded=value), CREATE) == []


@pytest.mark.parametrize("value", ["true", 1, 0, None])
def test_non_boolean_can_be_downloaded_fails(value):
    errors = validate_video_input(_valid(canBeDownloaded=value), CREATE)
    assert _fields(errors) == ["canBeDownloaded"]


# ── minAgeRestriction ────────────────────────────────────────────────


@pytest.mark.parametrize("value", [None, 1, 12, 18, 12.0])
def test_min_age_restriction_accepted(value):
    assert validate_video_input(_valid(minAgeRestriction=value), CREATE) == []


@pytest.mark.parametrize("value", [0, 19, 21, -1, 5.5, "12", True])
def test_min_age_restriction_rejected(value):
    errors = validate_video_input(_valid(minAgeRestriction=value), UPDATE)
    assert _fields(errors) == ["minAgeRestriction"]


# ── publicationDate ──────────────────────────────────────────────────


@pytest.mark.parametrize(
    "value",
    ["2026-10-19T12:00:00.000Z", "2026-10-19", "2026-10-19T12:00:00+03:00"],
)
def test_valid_publication_date_passes_on_update(value):
    assert validate_video_input({"publicationDate": value}, UPDATE) == []


@pytest.mark.parametrize(
    "value",
    [
        "not a date",
        "2026-13-40",
        "",
        12345,
        None,
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
    ],
)
def test_invalid_publication_date_fails_on_update(value):
    errors = validate_video_input({"publicationDate": value}, UPDATE)
    assert _fields(errors) == ["publicationDate"]


def test_publication_date_is_ignored_on_create():
    assert validate_video_input(_valid(publicationDate="garbage"), CREATE) == []


def test_parse_timestamp_normalizes_to_utc():
    parsed = parse_timestamp("2026-10-19T15:00:00+03:00")
    assert parsed.utcoffset().total_seconds() == 0
    assert parsed.hour == 12


@pytest.mark.parametrize(
    "value", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"]
)
def test_parse_timestamp_out_of_range_raises_value_error(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_snake_case_keys_are_not_validated_fields():
    payload = _valid(min_age_restriction=99, can_be_downloaded="yes", available_resolutions=["BAD"])
    assert validate_video_input(payload, CREATE) == []


# ── aggregation ──────────────────────────────────────────────────────


def test_all_violations_are_collected_in_field_order():
    payload = {
        "title": "x" * 41,
        "author": "",
        "availableResolutions": ["P9000"],
        "canBeDownloaded": "yes",
        "minAgeRestriction": 0,
        "publicationDate": "never",
    }
    assert _fields(validate_video_input(payload, UPDATE)) == [
        "title",
        "author",
        "availableResolutions",
        "canBeDownloaded",
        "minAgeRestriction",
        "publicationDate",
    ]


def test_unknown_keys_are_ignored():
    assert validate_video_input(_valid(id=5, createdAt="x", extra=[1]), CREATE) == []
