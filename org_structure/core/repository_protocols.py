"""Boundary Protocols — contracts between the hierarchy engine and the tree store.

Invariants:
    - Core NEVER imports from services, api, infrastructure, or db
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell (services/department_store.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake store
    - Async in Protocol: implementations do IO; the pure rules in core that judge
      the fetched data are never async themselves
"""

from contextlib import AbstractAsyncContextManager
from datetime import date
from typing import Protocol, Sequence

from org_structure.core.domain_types import DepartmentId, EmployeeId


class DepartmentLike(Protocol):
    """Structural contract for department rows returned by the store."""
    id: int
    name: str
    parent_id: int | None


class EmployeeLike(Protocol):
    """Structural contract for employee rows returned by the store."""
    id: int
    department_id: int
    full_name: str
    position: str
    hired_at: date | None


class DepartmentRepository(Protocol):
    """Contract for department persistence — implemented by shell."""
    def transaction(self) -> AbstractAsyncContextManager: ...
    async def get_department(
        self, department_id: DepartmentId, refresh: bool = False,
    ) -> DepartmentLike | None: ...
    async def list_children(
        self, parent_id: DepartmentId,
    ) -> Sequence[DepartmentLike]: ...
    async def name_taken(
        self, parent_id: DepartmentId | None, name: str,
        exclude_id: DepartmentId | None = None,
    ) -> bool: ...
    async def ancestor_chain(
        self, department_id: DepartmentId,
    ) -> list[DepartmentId]: ...
    async def descendant_ids(
        self, department_id: DepartmentId,
    ) -> list[DepartmentId]: ...
    async def add_department(
        self, name: str, parent_id: DepartmentId | None,
    ) -> DepartmentLike: ...
    async def save_department(self, department: DepartmentLike) -> DepartmentLike: ...
    async def delete_departments(
        self, department_ids: Sequence[DepartmentId],
    ) -> None: ...
    async def reparent_children(
        self, old_parent_id: DepartmentId, new_parent_id: DepartmentId,
    ) -> int: ...


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by shell."""
    def transaction(self) -> AbstractAsyncContextManager: ...
    async def get_department(
        self, department_id: DepartmentId,
    ) -> DepartmentLike | None: ...
    async def get_employee(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def list_employees(
        self, department_id: DepartmentId,
    ) -> Sequence[EmployeeLike]: ...
    async def add_employee(
        self, department_id: DepartmentId, full_name: str, position: str,
        hired_at: date | None,
    ) -> EmployeeLike: ...
    async def reassign_employees(
        self, old_department_id: DepartmentId, new_department_id: DepartmentId,
    ) -> int: ...
