"""Employee ORM — a person owned by exactly one department.

Invariants:
    - department_id is required and references an existing department
    - full_name and position stored trimmed, 1-200 chars
    - Ownership changes only through explicit reassignment

Design Decisions:
    - department_id ON DELETE CASCADE: deleting a department removes its employees
    - hired_at is a DATE (calendar day, no timezone)
"""

from datetime import date, datetime, timezone

from sqlalchemy import Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from org_structure.db.base import Base


class Employee(Base):
    """Employee entity — attached to a single department."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(200), nullable=False)
    hired_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
