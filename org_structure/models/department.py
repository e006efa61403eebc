"""Department ORM — a node in the organizational hierarchy.

Invariants:
    - id is an integer primary key (stable, never reused by the engine)
    - name is stored trimmed, 1-200 chars (enforced by core/validate_fields.py)
    - parent_id references departments.id; NULL means root
    - Sibling-scoped name uniqueness is enforced by the engine, not a DB constraint

Design Decisions:
    - No UNIQUE(parent_id, name): NULL parent_id would exempt roots from the
      constraint, so the engine checks both scopes uniformly inside the transaction
    - parent_id ON DELETE CASCADE: storage-level backstop matching cascade-delete
    - No ORM relationships: tree reads go through explicit queries, never lazy loads
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from org_structure.db.base import Base


class Department(Base):
    """Department entity — optionally nested under a parent department."""
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("departments.id", ondelete="CASCADE"),
        nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
