"""Department Tree — in-memory nodes assembled for bounded-depth tree reads.

Invariants:
    - employees is None when employees were not requested (distinct from "has none")
    - children preserve the order the store returned them in (created_at, id)

Design Decisions:
    - Plain dataclass, not an ORM object: assembling a tree must never trigger
      lazy loads or mark rows dirty (ADR: async-safe reads)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class DepartmentNode:
    """One department plus its included employees and children."""
    id: int
    name: str
    parent_id: int | None
    created_at: datetime
    employees: list[Any] | None = None
    children: list["DepartmentNode"] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Any) -> "DepartmentNode":
        return cls(
            id=record.id,
            name=record.name,
            parent_id=record.parent_id,
            created_at=record.created_at,
        )

    def count_nodes(self) -> int:
        """Total departments in this subtree, including self."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total
