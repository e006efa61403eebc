"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DepartmentId, EmployeeId wrap ints — never use bare int ids in domain logic
    - Tree depth is bounded MIN_TREE_DEPTH..MAX_TREE_DEPTH
    - All valid delete modes encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for DeleteMode: FastAPI validates the query parameter natively
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DepartmentId = NewType("DepartmentId", int)
EmployeeId = NewType("EmployeeId", int)


# ─── Limits ──────────────────────────────────────────────────────

MAX_NAME_LENGTH: int = 200
MIN_TREE_DEPTH: int = 1
MAX_TREE_DEPTH: int = 5
HIRE_DATE_FORMAT: str = "%Y-%m-%d"


# ─── Enums ───────────────────────────────────────────────────────

class DeleteMode(str, Enum):
    """Department deletion strategy."""
    CASCADE = "cascade"
    REASSIGN = "reassign"
