"""Employee Attachment — validates and attaches employees to departments.

Invariants:
    - An employee is created only under an existing department
    - full_name and position are trimmed, non-empty, at most 200 characters
    - hired_at is either absent or a valid YYYY-MM-DD calendar date
    - reassign_employees runs inside the CALLER's transaction (never commits itself)

Design Decisions:
    - Department existence is checked before field validation: a missing department
      is reported as NotFound even when the payload is also invalid
"""

from datetime import date
from typing import Sequence

from org_structure.core.domain_types import DepartmentId, EmployeeId
from org_structure.core.errors import ResourceNotFoundError
from org_structure.core.repository_protocols import EmployeeLike, EmployeeRepository
from org_structure.core.validate_fields import normalize_text, parse_hire_date


class EmployeeAttachment:
    """Employee creation, lookup and bulk reassignment."""

    def __init__(self, store: EmployeeRepository):
        self.store = store

    async def create_employee(
        self,
        department_id: DepartmentId,
        full_name: str,
        position: str,
        hired_at: str | None = None,
    ) -> EmployeeLike:
        async with self.store.transaction():
            if await self.store.get_department(department_id) is None:
                raise ResourceNotFoundError("Department", department_id)
            name = normalize_text(full_name, "full_name")
            title = normalize_text(position, "position")
            hire_date: date | None = (
                parse_hire_date(hired_at) if hired_at is not None else None
            )
            employee = await self.store.add_employee(
                department_id, name, title, hire_date,
            )
        return employee

    async def get_employee(self, employee_id: EmployeeId) -> EmployeeLike:
        employee = await self.store.get_employee(employee_id)
        if employee is None:
            raise ResourceNotFoundError("Employee", employee_id)
        return employee

    async def list_employees(
        self, department_id: DepartmentId,
    ) -> Sequence[EmployeeLike]:
        """Direct employees of a department, oldest first."""
        return await self.store.list_employees(department_id)

    async def reassign_employees(
        self, from_department_id: DepartmentId, to_department_id: DepartmentId,
    ) -> int:
        """Move every direct employee; returns how many moved."""
        return await self.store.reassign_employees(
            from_department_id, to_department_id,
        )
