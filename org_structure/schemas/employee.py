"""Employee Schemas — Pydantic models for the employee API boundary.

Invariants:
    - hired_at arrives as a string and is parsed by the engine (YYYY-MM-DD)
    - department_id comes from the URL path, never from the body
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class EmployeeCreate(BaseModel):
    """Employee creation payload."""
    full_name: str
    position: str
    hired_at: str | None = None


class EmployeeResponse(BaseModel):
    """Employee as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    department_id: int
    full_name: str
    position: str
    hired_at: date | None = None
    created_at: datetime
