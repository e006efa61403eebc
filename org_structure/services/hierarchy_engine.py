"""Hierarchy Engine — create, update, delete and read the department forest.

Invariants:
    - Every mutation runs in ONE store transaction: any error rolls back everything
    - Acyclicity: a reparent is accepted only if the subject is absent from the
      proposed parent's ancestor chain
    - Sibling scope: the final (name, parent) pair is unique among siblings, excluding self
    - Tree reads clamp depth to 1..5 and always include the requested department
    - The engine does not log; routes and middleware own observability

Design Decisions:
    - Pure rules (core/enforce_hierarchy.py, core/validate_fields.py) judge data the
      engine fetched: impureim sandwich, rules unit-tested without a database
    - Tree assembly is a FIFO worklist of (node, remaining depth); a child
      deleted between listing and re-fetching is skipped by `continue`, not by catching
    - Reassign-delete moves direct employees AND re-attaches direct children to the
      target, so no department is left pointing at a deleted parent
"""

from collections import deque

from org_structure.core.department_tree import DepartmentNode
from org_structure.core.domain_types import DepartmentId, DeleteMode
from org_structure.core.enforce_hierarchy import (
    check_parent_assignment,
    check_self_parent,
    check_target_outside_subtree,
    find_name_collisions,
    require_reassign_target,
)
from org_structure.core.errors import DuplicateNameError, ResourceNotFoundError
from org_structure.core.repository_protocols import DepartmentLike, DepartmentRepository
from org_structure.core.validate_fields import (
    clamp_depth, normalize_text, parse_delete_mode,
)
from org_structure.services.employee_attachment import EmployeeAttachment


class HierarchyEngine:
    """Structural mutations and bounded-depth reads over the department forest."""

    def __init__(self, store: DepartmentRepository, employees: EmployeeAttachment):
        self.store = store
        self.employees = employees

    async def _require_department(self, department_id: DepartmentId) -> DepartmentLike:
        department = await self.store.get_department(department_id)
        if department is None:
            raise ResourceNotFoundError("Department", department_id)
        return department

    # ─── Create / Update ─────────────────────────────────────────

    async def create_department(
        self, name: str, parent_id: DepartmentId | None = None,
    ) -> DepartmentLike:
        normalized = normalize_text(name, "name")
        async with self.store.transaction():
            if parent_id is not None:
                await self._require_department(parent_id)
            if await self.store.name_taken(parent_id, normalized):
                raise DuplicateNameError(normalized, parent_id)
            department = await self.store.add_department(normalized, parent_id)
        return department

    async def update_department(
        self,
        department_id: DepartmentId,
        name: str | None = None,
        parent_id: DepartmentId | None = None,
        reparent: bool = False,
    ) -> DepartmentLike:
        """Rename and/or move a department.

        name: applied only when non-empty (whitespace-only is rejected).
        reparent: when True, parent_id is the new parent (None detaches to root);
        when False, parent_id is ignored and the parent stays as is.
        """
        async with self.store.transaction():
            department = await self._require_department(department_id)

            new_name = department.name
            if name:
                new_name = normalize_text(name, "name")

            new_parent_id = department.parent_id
            if reparent:
                check_self_parent(department_id, parent_id)
                if parent_id is not None:
                    ancestors = await self.store.ancestor_chain(parent_id)
                    check_parent_assignment(department_id, parent_id, ancestors)
                    await self._require_department(parent_id)
                new_parent_id = parent_id

            if (name or reparent) and await self.store.name_taken(
                new_parent_id, new_name, exclude_id=department_id,
            ):
                raise DuplicateNameError(new_name, new_parent_id)

            department.name = new_name
            department.parent_id = new_parent_id
            department = await self.store.save_department(department)
        return department

    # ─── Delete ──────────────────────────────────────────────────

    async def delete_department(
        self,
        department_id: DepartmentId,
        mode: DeleteMode | str = DeleteMode.CASCADE,
        reassign_to_id: DepartmentId | None = None,
    ) -> None:
        mode = parse_delete_mode(mode)
        await self._require_department(department_id)

        async with self.store.transaction():
            if mode == DeleteMode.CASCADE:
                doomed = [department_id]
                doomed.extend(await self.store.descendant_ids(department_id))
                await self.store.delete_departments(doomed)
                return

            target_id = require_reassign_target(department_id, reassign_to_id)
            await self._require_department(target_id)
            target_ancestors = await self.store.ancestor_chain(target_id)
            check_target_outside_subtree(department_id, target_id, target_ancestors)

            children = await self.store.list_children(department_id)
            if children:
                existing = await self.store.list_children(target_id)
                collisions = find_name_collisions(
                    (child.name for child in children),
                    (sibling.name for sibling in existing),
                )
                if collisions:
                    raise DuplicateNameError(collisions[0], target_id)
                await self.store.reparent_children(department_id, target_id)

            await self.employees.reassign_employees(department_id, target_id)
            await self.store.delete_departments([department_id])

    # ─── Read ────────────────────────────────────────────────────

    async def get_department_tree(
        self,
        department_id: DepartmentId,
        depth: int = 1,
        include_employees: bool = True,
    ) -> DepartmentNode:
        depth = clamp_depth(depth)
        root = DepartmentNode.from_record(await self._require_department(department_id))

        queue: deque[tuple[DepartmentNode, int]] = deque([(root, depth)])
        while queue:
            node, remaining = queue.popleft()
            if include_employees:
                node.employees = list(
                    await self.employees.list_employees(DepartmentId(node.id)),
                )
            if remaining <= 1:
                continue
            for child in await self.store.list_children(DepartmentId(node.id)):
                current = await self.store.get_department(
                    DepartmentId(child.id), refresh=True,
                )
                if current is None:
                    # deleted concurrently; drop the subtree
                    continue
                child_node = DepartmentNode.from_record(current)
                node.children.append(child_node)
                queue.append((child_node, remaining - 1))
        return root
