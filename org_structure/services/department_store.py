"""Tree Store Adapter — department/employee persistence over one AsyncSession.

Invariants:
    - Implements DepartmentRepository and EmployeeRepository (core/repository_protocols.py)
    - Never commits on its own: only transaction() commits, and it rolls back on ANY error
    - ancestor_chain stops silently at a root or a dangling parent reference
    - Children and employees always come back ordered by (created_at, id)

Design Decisions:
    - Ancestor/descendant walks are explicit worklists of single-level queries, not
      recursive CTEs: portable across PostgreSQL and SQLite (ADR: test parity)
    - delete_departments removes employees explicitly before departments: the
      ON DELETE CASCADE foreign keys are a backstop, not the only guarantee
"""

from collections import deque
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from org_structure.core.domain_types import DepartmentId, EmployeeId
from org_structure.models.department import Department
from org_structure.models.employee import Employee


class DepartmentStore:
    """Async persistence for the department forest and its employees."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["DepartmentStore"]:
        """All-or-nothing unit of work: commit on success, rollback on any exception."""
        try:
            yield self
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    # ─── Departments ─────────────────────────────────────────────

    async def get_department(
        self, department_id: DepartmentId, refresh: bool = False,
    ) -> Department | None:
        """Fetch by id; refresh=True bypasses the identity map and re-reads the row."""
        return await self.db.get(
            Department, department_id, populate_existing=refresh,
        )

    async def list_children(self, parent_id: DepartmentId) -> Sequence[Department]:
        result = await self.db.execute(
            select(Department)
            .where(Department.parent_id == parent_id)
            .order_by(Department.created_at.asc(), Department.id.asc())
        )
        return result.scalars().all()

    async def name_taken(
        self,
        parent_id: DepartmentId | None,
        name: str,
        exclude_id: DepartmentId | None = None,
    ) -> bool:
        """True if a sibling under parent_id (or a root, if None) already uses name."""
        query = select(func.count()).select_from(Department).where(
            Department.name == name,
        )
        if parent_id is None:
            query = query.where(Department.parent_id.is_(None))
        else:
            query = query.where(Department.parent_id == parent_id)
        if exclude_id is not None:
            query = query.where(Department.id != exclude_id)
        result = await self.db.execute(query)
        return result.scalar_one() > 0

    async def ancestor_chain(self, department_id: DepartmentId) -> list[DepartmentId]:
        """Ancestor ids of department_id, nearest parent first."""
        ancestors: list[DepartmentId] = []
        seen = {department_id}
        current = department_id
        while True:
            result = await self.db.execute(
                select(Department.parent_id).where(Department.id == current),
            )
            row = result.one_or_none()
            if row is None or row.parent_id is None:
                break
            parent_id = DepartmentId(row.parent_id)
            ancestors.append(parent_id)
            if parent_id in seen:
                # corrupted chain; the repeated id is already recorded
                break
            seen.add(parent_id)
            current = parent_id
        return ancestors

    async def descendant_ids(self, department_id: DepartmentId) -> list[DepartmentId]:
        """Every descendant id (breadth-first), excluding department_id itself."""
        found: list[DepartmentId] = []
        seen = {department_id}
        queue = deque([department_id])
        while queue:
            parent_id = queue.popleft()
            result = await self.db.execute(
                select(Department.id).where(Department.parent_id == parent_id),
            )
            for child_id in result.scalars().all():
                if child_id in seen:
                    continue
                seen.add(child_id)
                found.append(DepartmentId(child_id))
                queue.append(DepartmentId(child_id))
        return found

    async def add_department(
        self, name: str, parent_id: DepartmentId | None,
    ) -> Department:
        department = Department(name=name, parent_id=parent_id)
        self.db.add(department)
        await self.db.flush()
        return department

    async def save_department(self, department: Department) -> Department:
        self.db.add(department)
        await self.db.flush()
        return department

    async def delete_departments(self, department_ids: Sequence[DepartmentId]) -> None:
        """Delete departments and every employee attached to them."""
        if not department_ids:
            return
        ids = list(department_ids)
        await self.db.execute(
            delete(Employee).where(Employee.department_id.in_(ids)),
        )
        await self.db.execute(
            delete(Department).where(Department.id.in_(ids)),
        )

    async def reparent_children(
        self, old_parent_id: DepartmentId, new_parent_id: DepartmentId,
    ) -> int:
        """Move every direct child of old_parent_id under new_parent_id."""
        result = await self.db.execute(
            update(Department)
            .where(Department.parent_id == old_parent_id)
            .values(parent_id=new_parent_id)
        )
        return result.rowcount

    # ─── Employees ───────────────────────────────────────────────

    async def get_employee(self, employee_id: EmployeeId) -> Employee | None:
        return await self.db.get(Employee, employee_id)

    async def list_employees(self, department_id: DepartmentId) -> Sequence[Employee]:
        result = await self.db.execute(
            select(Employee)
            .where(Employee.department_id == department_id)
            .order_by(Employee.created_at.asc(), Employee.id.asc())
        )
        return result.scalars().all()

    async def add_employee(
        self,
        department_id: DepartmentId,
        full_name: str,
        position: str,
        hired_at: date | None,
    ) -> Employee:
        employee = Employee(
            department_id=department_id,
            full_name=full_name,
            position=position,
            hired_at=hired_at,
        )
        self.db.add(employee)
        await self.db.flush()
        return employee

    async def reassign_employees(
        self, old_department_id: DepartmentId, new_department_id: DepartmentId,
    ) -> int:
        """Move every employee of old_department_id to new_department_id."""
        result = await self.db.execute(
            update(Employee)
            .where(Employee.department_id == old_department_id)
            .values(department_id=new_department_id)
        )
        return result.rowcount
