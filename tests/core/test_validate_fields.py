"""Field Validation — tests for pure name/date/depth normalization.

Tests cover:
    - normalize_text trims and rejects empty / whitespace-only / over-long values
    - the 200-character limit is inclusive and measured after trimming
    - parse_hire_date accepts YYYY-MM-DD and rejects everything else
    - clamp_depth bounds depth to 1..5
    - parse_delete_mode accepts enum members and their string values only
"""

from datetime import date

import pytest

from org_structure.core.domain_types import DeleteMode, MAX_NAME_LENGTH, MAX_TREE_DEPTH
from org_structure.core.errors import InvalidInputError
from org_structure.core.validate_fields import (
    clamp_depth, normalize_text, parse_delete_mode, parse_hire_date,
)


# ─── normalize_text ──────────────────────────────────────────────

def test_normalize_text_trims_surrounding_whitespace():
    assert normalize_text("  TrimmedName  ", "name") == "TrimmedName"


def test_normalize_text_keeps_inner_whitespace():
    assert normalize_text(" Research  and Development ", "name") == "Research  and Development"


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_normalize_text_rejects_blank(value):
    with pytest.raises(InvalidInputError) as exc_info:
        normalize_text(value, "name")
    assert exc_info.value.field == "name"
    assert exc_info.value.http_status == 400


def test_normalize_text_accepts_exactly_max_length():
    value = "x" * MAX_NAME_LENGTH
    assert normalize_text(value, "name") == value


def test_normalize_text_rejects_over_max_length():
    with pytest.raises(InvalidInputError) as exc_info:
        normalize_text("x" * (MAX_NAME_LENGTH + 1), "position")
    assert exc_info.value.field == "position"


def test_normalize_text_measures_length_after_trim():
    value = "  " + "x" * MAX_NAME_LENGTH + "  "
    assert len(normalize_text(value, "name")) == MAX_NAME_LENGTH


def test_normalize_text_counts_characters_not_bytes():
    value = "ж" * MAX_NAME_LENGTH
    assert normalize_text(value, "full_name") == value


# ─── parse_hire_date ─────────────────────────────────────────────

def test_parse_hire_date_accepts_iso_calendar_date():
    assert parse_hire_date("2024-03-15") == date(2024, 3, 15)


@pytest.mark.parametrize(
    "value",
    [
        "15.03.2024", "2024/03/15", "2024-02-30", "yesterday", "",
        "2024-1-5", "2024-01-5", "2024-1-05", "20240105", " 2024-01-05",
    ],
)
def test_parse_hire_date_rejects_other_formats(value):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_hire_date(value)
    assert exc_info.value.field == "hired_at"


# ─── clamp_depth ─────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("requested", "expected"),
    [(-3, 1), (0, 1), (1, 1), (3, 3), (5, 5), (10, MAX_TREE_DEPTH)],
)
def test_clamp_depth_bounds(requested, expected):
    assert clamp_depth(requested) == expected


# ─── parse_delete_mode ───────────────────────────────────────────

@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (DeleteMode.CASCADE, DeleteMode.CASCADE),
        ("cascade", DeleteMode.CASCADE),
        ("reassign", DeleteMode.REASSIGN),
    ],
)
def test_parse_delete_mode_accepts_known_modes(raw, expected):
    assert parse_delete_mode(raw) is expected


@pytest.mark.parametrize("raw", ["shred", "CASCADE", ""])
def test_parse_delete_mode_rejects_unknown(raw):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_delete_mode(raw)
    assert exc_info.value.field == "mode"
