"""Employee Attachment — creation, validation and lookup of employees.

Tests cover:
    - fields are trimmed and hired_at parsed to a date
    - missing department wins over invalid fields (NotFound first)
    - empty / over-long full_name and position rejected
    - malformed hired_at rejected
    - list_employees ordering and get_employee NotFound
"""

from datetime import date

import pytest

from org_structure.core.errors import InvalidInputError, ResourceNotFoundError


async def test_create_employee_trims_and_parses(engine, employees):
    dept = await engine.create_department("Engineering")
    emp = await employees.create_employee(
        dept.id, "  Jane Roe ", " Staff Engineer ", "2023-04-01",
    )
    assert emp.full_name == "Jane Roe"
    assert emp.position == "Staff Engineer"
    assert emp.hired_at == date(2023, 4, 1)
    assert emp.department_id == dept.id
    assert emp.created_at is not None


async def test_create_employee_without_hire_date(engine, employees):
    dept = await engine.create_department("Engineering")
    emp = await employees.create_employee(dept.id, "Jane Roe", "Engineer")
    assert emp.hired_at is None


async def test_missing_department_reported_before_field_errors(employees):
    with pytest.raises(ResourceNotFoundError):
        await employees.create_employee(999, "", "", "not-a-date")


@pytest.mark.parametrize(
    "full_name,position",
    [("", "Engineer"), ("   ", "Engineer"), ("Jane", ""), ("x" * 201, "Engineer")],
)
async def test_invalid_text_fields(engine, employees, full_name, position):
    dept = await engine.create_department("Engineering")
    with pytest.raises(InvalidInputError):
        await employees.create_employee(dept.id, full_name, position)


@pytest.mark.parametrize(
    "hired_at", ["2023/04/01", "01-04-2023", "2023-02-30", "", "2024-1-5", "2024-01-5"],
)
async def test_invalid_hire_date(engine, employees, hired_at):
    dept = await engine.create_department("Engineering")
    with pytest.raises(InvalidInputError) as exc_info:
        await employees.create_employee(dept.id, "Jane Roe", "Engineer", hired_at)
    assert exc_info.value.field == "hired_at"


async def test_invalid_employee_not_persisted(engine, employees):
    dept_id = (await engine.create_department("Engineering")).id
    with pytest.raises(InvalidInputError):
        await employees.create_employee(dept_id, "Jane Roe", "")
    assert list(await employees.list_employees(dept_id)) == []


async def test_list_employees_creation_order(engine, employees):
    dept = await engine.create_department("Engineering")
    for name in ("Charlie", "Alice", "Bob"):
        await employees.create_employee(dept.id, name, "Engineer")
    listed = await employees.list_employees(dept.id)
    assert [e.full_name for e in listed] == ["Charlie", "Alice", "Bob"]


async def test_get_employee_not_found(employees):
    with pytest.raises(ResourceNotFoundError):
        await employees.get_employee(4242)
