"""Department Tree — tests for in-memory tree nodes."""

from datetime import datetime, timezone
from types import SimpleNamespace

from org_structure.core.department_tree import DepartmentNode

_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _node(node_id, *children):
    node = DepartmentNode(id=node_id, name=f"D{node_id}", parent_id=None, created_at=_NOW)
    node.children.extend(children)
    return node


def test_from_record_copies_columns_only():
    record = SimpleNamespace(id=3, name="Ops", parent_id=1, created_at=_NOW)
    node = DepartmentNode.from_record(record)
    assert (node.id, node.name, node.parent_id, node.created_at) == (3, "Ops", 1, _NOW)
    assert node.employees is None
    assert node.children == []


def test_count_nodes_single():
    assert _node(1).count_nodes() == 1


def test_count_nodes_nested():
    tree = _node(1, _node(2, _node(4), _node(5)), _node(3))
    assert tree.count_nodes() == 5
