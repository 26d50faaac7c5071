"""
Module: layout.tree

Purpose:
    Lookup, invariant checking, and boundary counting over a page tree.
    Everything here is read-only except normalize_sizes().

Key Functions:
    - find_node_by_id(root, node_id): DFS lookup
    - find_parent_node(root, node_id): DFS lookup of the containing node
    - find_divider_toward(root, node_id, direction): Adjacent divider in a direction
    - count_nodes_along_boundary(node, orientation, edge): Leaves touching a divider
    - count_parallel_leaves(node, orientation): Leaf columns/rows along an axis
    - normalize_sizes(node): Renormalize a sibling pair to exactly 100
    - check_invariants(root): List of structural violations

Dependencies:
    - core.models.nodes

Used By:
    - layout.split, layout.delete, layout.merge_analyzer, layout.merge
    - layout.resize, layout.navigation
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from mosaic_toolkit.core.models.geometry import DEFAULT_SIZE_PERCENT, child_percent
from mosaic_toolkit.core.models.nodes import BoundaryEdge, Direction, LayoutNode, Orientation

logger = logging.getLogger(__name__)

# Tolerance for the sibling-sum invariant
SIZE_EPSILON = 0.01


# ─────────────────────────────────────────────────────────────────────────────
# Lookup
# ─────────────────────────────────────────────────────────────────────────────

def find_node_by_id(root: LayoutNode, node_id: str) -> Optional[LayoutNode]:
    """
    Find a node by id in this subtree.

    Returns:
        Matching node or None if not found
    """
    if root.id == node_id:
        return root
    for child in root.children or ():
        found = find_node_by_id(child, node_id)
        if found is not None:
            return found
    return None


def find_parent_node(root: LayoutNode, node_id: str) -> Optional[LayoutNode]:
    """
    Find the node whose children include ``node_id``.

    Returns:
        The parent, or None when ``node_id`` is the root or absent
    """
    if not root.children:
        return None
    if any(child.id == node_id for child in root.children):
        return root
    for child in root.children:
        found = find_parent_node(child, node_id)
        if found is not None:
            return found
    return None


def contains_node(root: LayoutNode, node_id: str) -> bool:
    return find_node_by_id(root, node_id) is not None


def iter_split_nodes(root: LayoutNode) -> Iterator[LayoutNode]:
    """All containers in pre-order (each one owns exactly one divider)."""
    for node in root.iter_all():
        if node.is_split:
            yield node


def iter_ancestors(root: LayoutNode, node_id: str) -> Iterator[LayoutNode]:
    """Ancestors of ``node_id`` from its parent up to the root."""
    current = node_id
    while True:
        parent = find_parent_node(root, current)
        if parent is None:
            return
        yield parent
        current = parent.id


def find_divider_toward(
    root: LayoutNode,
    node_id: str,
    direction: Direction,
) -> Optional[LayoutNode]:
    """
    Find the nearest divider bordering ``node_id`` in ``direction``.

    Walks up from ``node_id`` to the first ancestor split along the
    direction's axis in which the branch holding ``node_id`` sits on the
    side facing ``direction`` (leading child for right/down, trailing
    child for left/up).

    Returns:
        The container owning that divider, or None at the page edge
    """
    orientation = direction.orientation
    branch_id = node_id
    for parent in iter_ancestors(root, node_id):
        if parent.orientation == orientation:
            on_leading_side = parent.child_a.id == branch_id
            if on_leading_side == direction.is_forward:
                return parent
        branch_id = parent.id
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Boundary counting
# ─────────────────────────────────────────────────────────────────────────────

def count_nodes_along_boundary(
    node: LayoutNode,
    orientation: Orientation,
    edge: BoundaryEdge,
) -> int:
    """
    Count the leaves of ``node`` that touch one of its edges.

    ``orientation`` is that of the divider the edge faces. A parallel split
    only exposes the child on that edge; an orthogonal split exposes both
    children along the whole boundary.

    Example:
        [B / C] facing a vertical divider on its leading edge -> 2
        [B | C] facing a vertical divider on its leading edge -> 1 (just B)
    """
    if node.is_leaf:
        return 1
    if node.orientation == orientation:
        return count_nodes_along_boundary(node.children[edge.child_index], orientation, edge)
    return (
        count_nodes_along_boundary(node.child_a, orientation, edge)
        + count_nodes_along_boundary(node.child_b, orientation, edge)
    )


def count_parallel_leaves(node: Optional[LayoutNode], orientation: Orientation) -> int:
    """
    Count the slots ``node`` occupies along the ``orientation`` axis.

    Same-orientation splits add up their children; an orthogonally split
    subtree is one block along this axis and counts as 1.
    """
    if node is None or node.is_leaf:
        return 1
    if node.orientation == orientation:
        return sum(count_parallel_leaves(child, orientation) for child in node.children or ())
    return 1


# ─────────────────────────────────────────────────────────────────────────────
# Size normalization and invariants
# ─────────────────────────────────────────────────────────────────────────────

def normalize_sizes(node: LayoutNode) -> None:
    """
    Rescale ``node``'s two children so their sizes sum to exactly 100.

    Missing sizes count as 50. A pair that sums to zero becomes 50/50.
    No-op on a leaf.
    """
    if not node.is_split or not node.children:
        return
    a = child_percent(node.child_a)
    b = child_percent(node.child_b)
    total = a + b
    if total <= 0:
        node.child_a.size = DEFAULT_SIZE_PERCENT
        node.child_b.size = DEFAULT_SIZE_PERCENT
        return
    node.child_a.size = a / total * 100
    node.child_b.size = 100 - node.child_a.size


def normalize_tree(root: LayoutNode) -> None:
    """normalize_sizes() on every container."""
    for node in iter_split_nodes(root):
        normalize_sizes(node)


def check_invariants(root: LayoutNode, epsilon: float = SIZE_EPSILON) -> List[str]:
    """
    Collect structural violations in ``root``.

    Returns:
        Human-readable problems; empty when the tree is well-formed
    """
    problems: List[str] = []
    seen: set[str] = set()
    for node in root.iter_all():
        if node.id in seen:
            problems.append(f"duplicate id {node.id!r}")
        seen.add(node.id)

        if node.is_split:
            if node.orientation is None:
                problems.append(f"{node.id}: split node without orientation")
            if node.children is None or len(node.children) != 2:
                problems.append(f"{node.id}: split node must have exactly two children")
                continue
            if node.content is not None:
                problems.append(f"{node.id}: split node carries content")
            total = child_percent(node.child_a) + child_percent(node.child_b)
            if abs(total - 100) > epsilon:
                problems.append(f"{node.id}: child sizes sum to {total:.4f}, not 100")
        else:
            if node.children:
                problems.append(f"{node.id}: leaf has children")
            if node.orientation is not None:
                problems.append(f"{node.id}: leaf has orientation")

    if problems:
        logger.debug(f"Invariant check on {root.id} found {len(problems)} problem(s)")
    return problems
