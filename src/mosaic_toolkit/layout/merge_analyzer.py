"""
Module: layout.merge_analyzer

Purpose:
    Decide whether a divider may be collapsed. A divider is mergeable when
    exactly one leaf touches it from each side, so that removing it joins
    two rectangles into one rectangle.

Key Functions:
    - is_divider_mergeable(parent): The check itself
    - get_touching_leaf(node, orientation, edge): The single leaf on one side
    - iter_mergeable_dividers(root): Every container whose divider qualifies

Dependencies:
    - layout.tree: count_nodes_along_boundary

Used By:
    - layout.merge: Precondition of the merge executor
    - Host rendering of a "merge available" affordance
"""

from __future__ import annotations

from typing import Iterator, Optional

from mosaic_toolkit.core.models.nodes import BoundaryEdge, LayoutNode, Orientation

from .tree import count_nodes_along_boundary, iter_split_nodes


def boundary_counts(parent: LayoutNode) -> tuple[int, int]:
    """Leaves touching the divider of ``parent`` from the leading and trailing side."""
    orientation = parent.orientation
    count_a = count_nodes_along_boundary(parent.child_a, orientation, BoundaryEdge.TRAILING)
    count_b = count_nodes_along_boundary(parent.child_b, orientation, BoundaryEdge.LEADING)
    return count_a, count_b


def is_divider_mergeable(parent: Optional[LayoutNode]) -> bool:
    """
    Check whether the divider between ``parent``'s children can be merged.

    Returns:
        False for leaves and None, else True iff one leaf touches each side

    Example:
        >>> # [A | [B | C]]  -> True  (A meets B only)
        >>> # [A | [B / C]]  -> False (A meets both B and C)
    """
    if parent is None or not parent.is_split or not parent.children:
        return False
    return boundary_counts(parent) == (1, 1)


def get_touching_leaf(
    node: LayoutNode,
    orientation: Orientation,
    edge: BoundaryEdge,
) -> LayoutNode:
    """
    Return the leaf of ``node`` on ``edge``.

    Only meaningful when count_nodes_along_boundary() is 1 for the same
    arguments; an orthogonal split on the way is descended through its
    ``edge``-side child without complaint.
    """
    while node.is_split:
        node = node.children[edge.child_index]
    return node


def iter_mergeable_dividers(root: LayoutNode) -> Iterator[LayoutNode]:
    """Containers in ``root`` whose divider can be merged."""
    for node in iter_split_nodes(root):
        if is_divider_mergeable(node):
            yield node
