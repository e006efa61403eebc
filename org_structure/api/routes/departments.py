"""Department Routes — HTTP surface of the hierarchy engine.

Invariants:
    - Routes never contain hierarchy rules: they translate wire values and delegate
    - Wire sentinel parent_id=0 is translated to None HERE, never inside the engine
    - Engine errors propagate to the global OrgStructureError handler (api/error_handlers.py)

Design Decisions:
    - One HierarchyEngine per request, bound to the request's AsyncSession
      (ADR: engine is stateless, the session is the unit of work)
    - Employee creation nested under /departments/{id}/employees: the owning
      department comes from the path
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from org_structure.core.domain_types import DepartmentId, DeleteMode
from org_structure.infrastructure.database import get_db
from org_structure.schemas.department import (
    DepartmentCreate, DepartmentResponse, DepartmentTreeResponse, DepartmentUpdate,
    parse_depth_param, parse_include_employees_param,
)
from org_structure.schemas.employee import EmployeeCreate, EmployeeResponse
from org_structure.services.department_store import DepartmentStore
from org_structure.services.employee_attachment import EmployeeAttachment
from org_structure.services.hierarchy_engine import HierarchyEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/departments", tags=["departments"])


def get_employee_attachment(
    db: AsyncSession = Depends(get_db),
) -> EmployeeAttachment:
    return EmployeeAttachment(DepartmentStore(db))


def get_hierarchy_engine(
    employees: EmployeeAttachment = Depends(get_employee_attachment),
) -> HierarchyEngine:
    return HierarchyEngine(employees.store, employees)


@router.post(
    "", response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_department(
    body: DepartmentCreate,
    engine: HierarchyEngine = Depends(get_hierarchy_engine),
):
    """Create a department, optionally under a parent."""
    department = await engine.create_department(
        body.name, body.resolved_parent_id(),
    )
    logger.info(
        f"Department created: {department.name}",
        extra={"department_id": department.id},
    )
    return department


@router.get("/{department_id}", response_model=DepartmentTreeResponse)
async def get_department(
    department_id: int,
    depth: str | None = Query(None),
    include_employees: str | None = Query(None),
    engine: HierarchyEngine = Depends(get_hierarchy_engine),
):
    """Get a department with nested children (depth clamped to 1..5)."""
    tree = await engine.get_department_tree(
        DepartmentId(department_id),
        parse_depth_param(depth),
        parse_include_employees_param(include_employees),
    )
    logger.debug(
        "Department tree assembled",
        extra={"department_id": department_id, "node_count": tree.count_nodes()},
    )
    return DepartmentTreeResponse.model_validate(tree)


@router.patch("/{department_id}", response_model=DepartmentResponse)
async def update_department(
    department_id: int,
    body: DepartmentUpdate,
    engine: HierarchyEngine = Depends(get_hierarchy_engine),
):
    """Rename and/or move a department. parent_id=0 detaches it to the root level."""
    department = await engine.update_department(
        DepartmentId(department_id),
        name=body.name,
        parent_id=body.resolved_parent_id(),
        reparent=body.reparent,
    )
    logger.info(
        "Department updated",
        extra={"department_id": department.id},
    )
    return department


@router.delete(
    "/{department_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_department(
    department_id: int,
    mode: DeleteMode = Query(DeleteMode.CASCADE),
    reassign_to_department_id: int | None = Query(None),
    engine: HierarchyEngine = Depends(get_hierarchy_engine),
):
    """Delete a department: cascade (default) or reassign its contents first."""
    await engine.delete_department(
        DepartmentId(department_id),
        mode,
        DepartmentId(reassign_to_department_id)
        if reassign_to_department_id is not None else None,
    )
    logger.info(
        f"Department deleted (mode={mode.value})",
        extra={"department_id": department_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{department_id}/employees", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    department_id: int,
    body: EmployeeCreate,
    employees: EmployeeAttachment = Depends(get_employee_attachment),
):
    """Attach a new employee to a department."""
    employee = await employees.create_employee(
        DepartmentId(department_id),
        body.full_name,
        body.position,
        body.hired_at,
    )
    logger.info(
        "Employee created",
        extra={"department_id": department_id, "employee_id": employee.id},
    )
    return employee
