"""Field Validation — pure normalization of names, dates, delete modes and tree depth.

Invariants:
    - normalize_text strips surrounding whitespace BEFORE measuring length
    - Length is counted in characters, not bytes
    - clamp_depth never raises: out-of-range depth is corrected, not rejected
    - Hire dates are zero-padded YYYY-MM-DD; delete modes are DeleteMode values only

Design Decisions:
    - Validation lives in core (not in Pydantic schemas): the engine contract holds
      for every caller, HTTP or not (ADR: functional core)
"""

import re
from datetime import date, datetime

from org_structure.core.domain_types import (
    MAX_NAME_LENGTH, MIN_TREE_DEPTH, MAX_TREE_DEPTH, HIRE_DATE_FORMAT, DeleteMode,
)
from org_structure.core.errors import InvalidInputError


def normalize_text(value: str, field: str) -> str:
    """Trim and validate a required text field (names, positions)."""
    normalized = value.strip()
    if not normalized:
        raise InvalidInputError(f"{field} cannot be empty or whitespace", field)
    if len(normalized) > MAX_NAME_LENGTH:
        raise InvalidInputError(
            f"{field} exceeds {MAX_NAME_LENGTH} characters ({len(normalized)})",
            field,
        )
    return normalized


_HIRE_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_hire_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD calendar date (2024-1-5 is rejected)."""
    message = f"hired_at must be a date in YYYY-MM-DD format, got '{value}'"
    if not _HIRE_DATE_SHAPE.fullmatch(value):
        raise InvalidInputError(message, "hired_at")
    try:
        return datetime.strptime(value, HIRE_DATE_FORMAT).date()
    except ValueError:
        raise InvalidInputError(message, "hired_at")


def clamp_depth(depth: int) -> int:
    return max(MIN_TREE_DEPTH, min(depth, MAX_TREE_DEPTH))


def parse_delete_mode(mode: DeleteMode | str) -> DeleteMode:
    """Accept a DeleteMode or its string value; anything else is InvalidInput."""
    try:
        return DeleteMode(mode)
    except ValueError:
        allowed = ", ".join(m.value for m in DeleteMode)
        raise InvalidInputError(
            f"mode must be one of: {allowed}, got '{mode}'", "mode",
        )
