"""Department Schemas — Pydantic models for the department API boundary.

Invariants:
    - Request bodies carry raw values; trimming/length rules live in the engine
    - parent_id on the wire: 0 means "no parent"; on PATCH, null/absent means "unchanged"
    - DepartmentTreeResponse omits "employees" when employees were not requested
    - Tree query parameters never fail a read: a non-integer depth falls back to 1,
      and only include_employees=false turns employees off

Design Decisions:
    - Schemas validate types only (int, str): the engine's InvalidInputError is the
      single source of field rules, so HTTP and non-HTTP callers see the same errors
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from org_structure.schemas.employee import EmployeeResponse

NO_PARENT_SENTINEL = 0
DEFAULT_TREE_DEPTH = 1


def parse_depth_param(raw: str | None) -> int:
    """Query depth: an integer, else the default (the engine clamps the range)."""
    if raw is None:
        return DEFAULT_TREE_DEPTH
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_TREE_DEPTH


def parse_include_employees_param(raw: str | None) -> bool:
    """Employees are included unless the query says exactly "false"."""
    return raw != "false"


class DepartmentCreate(BaseModel):
    """Department creation payload."""
    name: str
    parent_id: int | None = None

    def resolved_parent_id(self) -> int | None:
        return None if self.parent_id == NO_PARENT_SENTINEL else self.parent_id


class DepartmentUpdate(BaseModel):
    """Partial department update — rename and/or move."""
    name: str | None = None
    parent_id: int | None = None

    @property
    def reparent(self) -> bool:
        return self.parent_id is not None

    def resolved_parent_id(self) -> int | None:
        return None if self.parent_id == NO_PARENT_SENTINEL else self.parent_id


class DepartmentResponse(BaseModel):
    """Department without nested data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    parent_id: int | None
    created_at: datetime


class DepartmentTreeResponse(DepartmentResponse):
    """Department with its included employees and nested children."""
    employees: list[EmployeeResponse] | None = None
    children: list["DepartmentTreeResponse"] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _omit_unrequested_employees(self, handler):
        data = handler(self)
        if self.employees is None:
            data.pop("employees", None)
        return data


DepartmentTreeResponse.model_rebuild()
