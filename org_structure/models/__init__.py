"""ORM Models — SQLAlchemy declarative models for departments and employees.

Invariants:
    - All models inherit from Base (db/base.py)
    - Department is the aggregate root; employees are scoped by department_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from org_structure.models.department import Department  # noqa: F401
from org_structure.models.employee import Employee  # noqa: F401
