"""Hierarchy Enforcement — tests for pure reparent and delete rules.

Tests cover:
    - self-parent is rejected even when the ancestor chain is empty
    - a proposed parent whose chain contains the subject is a cycle
    - detaching to root is always accepted
    - reassign target must be present and different from the deleted department
    - reassign target inside the deleted subtree is a cycle
    - sibling name collisions are reported sorted and de-duplicated
"""

import pytest

from org_structure.core.domain_types import DepartmentId
from org_structure.core.enforce_hierarchy import (
    check_parent_assignment,
    check_self_parent,
    check_target_outside_subtree,
    find_name_collisions,
    require_reassign_target,
)
from org_structure.core.errors import (
    CycleDetectedError, InvalidInputError, SelfParentError,
)


# ─── reparent ────────────────────────────────────────────────────

def test_self_parent_rejected():
    with pytest.raises(SelfParentError) as exc_info:
        check_self_parent(DepartmentId(7), DepartmentId(7))
    assert exc_info.value.http_status == 409


def test_self_parent_allows_detach():
    check_self_parent(DepartmentId(7), None)


def test_parent_assignment_self_parent_wins_over_cycle():
    # chain would also contain 7, but the self check must fire first
    with pytest.raises(SelfParentError):
        check_parent_assignment(DepartmentId(7), DepartmentId(7), [DepartmentId(7)])


def test_parent_assignment_detects_cycle():
    # 1 -> 2 -> 3 ; moving 1 under 3 (ancestors of 3 are [2, 1])
    with pytest.raises(CycleDetectedError) as exc_info:
        check_parent_assignment(
            DepartmentId(1), DepartmentId(3), [DepartmentId(2), DepartmentId(1)],
        )
    assert exc_info.value.code == "CYCLE_DETECTED"
    assert exc_info.value.http_status == 409


def test_parent_assignment_accepts_unrelated_parent():
    check_parent_assignment(DepartmentId(1), DepartmentId(9), [DepartmentId(8)])


def test_parent_assignment_accepts_detach_to_root():
    check_parent_assignment(DepartmentId(1), None, [])


# ─── reassign-delete ─────────────────────────────────────────────

def test_reassign_target_required():
    with pytest.raises(InvalidInputError) as exc_info:
        require_reassign_target(DepartmentId(1), None)
    assert exc_info.value.field == "reassign_to_department_id"


def test_reassign_target_cannot_be_self():
    with pytest.raises(InvalidInputError):
        require_reassign_target(DepartmentId(1), DepartmentId(1))


def test_reassign_target_returned_when_valid():
    assert require_reassign_target(DepartmentId(1), DepartmentId(2)) == 2


def test_reassign_target_inside_subtree_is_cycle():
    with pytest.raises(CycleDetectedError):
        check_target_outside_subtree(
            DepartmentId(1), DepartmentId(4), [DepartmentId(3), DepartmentId(1)],
        )


def test_reassign_target_outside_subtree_accepted():
    check_target_outside_subtree(DepartmentId(1), DepartmentId(4), [])


# ─── name collisions ─────────────────────────────────────────────

def test_find_name_collisions_reports_shared_names():
    assert find_name_collisions(
        ["QA", "Ops", "Dev"], ["Dev", "QA", "Sales"],
    ) == ["Dev", "QA"]


def test_find_name_collisions_is_case_sensitive():
    assert find_name_collisions(["qa"], ["QA"]) == []


def test_find_name_collisions_empty_when_disjoint():
    assert find_name_collisions(["A"], []) == []
