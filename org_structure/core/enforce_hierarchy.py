"""Hierarchy Enforcement — pure structural rules for reparenting and deletion.

Invariants:
    - The parent relation is a forest: a department never becomes its own ancestor
    - Self-parent is rejected BEFORE the ancestor chain is consulted
    - Every function here is PURE: callers fetch the chain, rules only judge it
    - Rules raise typed OrgStructureError subclasses; they never return error dicts

Design Decisions:
    - Cycle test walks UP from the proposed parent (ancestor chain) instead of DOWN
      from the subject (subtree): the chain is bounded by tree height, the subtree
      by tree size
    - Reassign-delete re-attaches direct children to the target (no dangling parent_id),
      so the target must lie outside the doomed department's subtree; that is the
      same ancestor-chain test as a reparent (ADR: close the orphaned-children gap
      instead of forbidding the operation)
"""

from collections.abc import Iterable, Sequence

from org_structure.core.domain_types import DepartmentId
from org_structure.core.errors import (
    CycleDetectedError, InvalidInputError, SelfParentError,
)


def check_self_parent(
    department_id: DepartmentId, new_parent_id: DepartmentId | None,
) -> None:
    if new_parent_id is not None and new_parent_id == department_id:
        raise SelfParentError(department_id)


def check_parent_assignment(
    department_id: DepartmentId,
    new_parent_id: DepartmentId | None,
    parent_ancestors: Sequence[DepartmentId],
) -> None:
    """Reject a reparent that would point a department at itself or into its subtree.

    parent_ancestors is the ancestor chain of new_parent_id (nearest first).
    Detaching to root (new_parent_id is None) is always structurally safe.
    """
    if new_parent_id is None:
        return
    check_self_parent(department_id, new_parent_id)
    if department_id in parent_ancestors:
        raise CycleDetectedError(department_id, new_parent_id)


def require_reassign_target(
    department_id: DepartmentId, reassign_to_id: DepartmentId | None,
) -> DepartmentId:
    """Reassign mode needs a target other than the department being deleted."""
    if reassign_to_id is None:
        raise InvalidInputError(
            "reassign_to_department_id is required when mode=reassign",
            "reassign_to_department_id",
        )
    if reassign_to_id == department_id:
        raise InvalidInputError(
            "Cannot reassign a department's contents to itself",
            "reassign_to_department_id",
        )
    return reassign_to_id


def check_target_outside_subtree(
    department_id: DepartmentId,
    target_id: DepartmentId,
    target_ancestors: Sequence[DepartmentId],
) -> None:
    """Children moved to target_id must not end up beneath themselves."""
    if department_id in target_ancestors:
        raise CycleDetectedError(department_id, target_id)


def find_name_collisions(
    incoming_names: Iterable[str], existing_names: Iterable[str],
) -> list[str]:
    """Names that would clash when incoming siblings join an existing sibling scope."""
    existing = set(existing_names)
    return sorted({name for name in incoming_names if name in existing})
