"""Employee Routes — read access to individual employees.

Invariants:
    - Employees are created under their department (see departments.py)
    - Unknown employee id → ResourceNotFoundError → 404
"""

from fastapi import APIRouter, Depends

from org_structure.api.routes.departments import get_employee_attachment
from org_structure.core.domain_types import EmployeeId
from org_structure.schemas.employee import EmployeeResponse
from org_structure.services.employee_attachment import EmployeeAttachment

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    employees: EmployeeAttachment = Depends(get_employee_attachment),
):
    """Get a single employee (shows its current department)."""
    return await employees.get_employee(EmployeeId(employee_id))
