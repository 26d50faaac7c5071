"""
Module: layout.merge

Purpose:
    Collapse a mergeable divider: the two leaves touching it become one
    region while every other region keeps its exact on-screen rectangle.

Key Functions:
    - merge_nodes_in_tree(parent, focused_node_id, ids): Merge executor
    - merge_divider(root, parent_id, focused_node_id, ids): Lookup + merge
    - merge_toward(root, focused_node_id, direction, ids): Merge with the
      neighbour across the adjacent divider

Algorithm:
    1. Find the touching leaves (leaf_a trailing in A, leaf_b leading in B)
    2. Pick the content: focused leaf with content, else leaf_a's, else leaf_b's
    3. Write the merged content into both touching leaves
    4. Reshape. With both children leaves, the parent itself becomes the
       merged leaf. Otherwise a parallel child is re-associated:

           P[ A[a0 | t] | B ]      ->  P[ a0 | Q[t | B] ]
           P[ A | B[u | b1] ]      ->  P[ Q[A | u] | b1 ]

       Sizes are converted to absolute shares of P before regrouping, so
       the rotation does not move any region. Q is then merged the same
       way until the touching leaves are siblings; that last pair is
       replaced by one leaf occupying their combined share.

    For one level of parallel nesting this gives
        [A(40) | [B1(30) | B2(70)](60)]  ->  [A'(58) | B2(42)]
        [[A1|A2](40) | [B1(30)|B2(70)](60)] -> [A1(20) | Q(80)[merged | B2]]
    with merged at 38% and B2 at 42% of P.

Dependencies:
    - layout.merge_analyzer: Mergeability and touching leaves
    - layout.tree: Size normalization

Used By:
    - Host merge gesture handlers
"""

from __future__ import annotations

import logging
from typing import Optional

from mosaic_toolkit.core.models.geometry import child_percent, leading_percent
from mosaic_toolkit.core.models.nodes import (
    BoundaryEdge,
    Direction,
    IdAllocator,
    LayoutNode,
    Orientation,
)

from .errors import NotMergeableError
from .merge_analyzer import boundary_counts, get_touching_leaf, is_divider_mergeable
from .tree import find_divider_toward, find_node_by_id, normalize_sizes

logger = logging.getLogger(__name__)


def _pick_winner(
    leaf_a: LayoutNode,
    leaf_b: LayoutNode,
    focused_node_id: Optional[str],
) -> Optional[LayoutNode]:
    """Leaf whose content survives the merge; None when both are empty."""
    if leaf_a.id == focused_node_id and leaf_a.has_content:
        return leaf_a
    if leaf_b.id == focused_node_id and leaf_b.has_content:
        return leaf_b
    if leaf_a.has_content:
        return leaf_a
    if leaf_b.has_content:
        return leaf_b
    return None


def _contract(
    node: LayoutNode,
    orientation: Orientation,
    survivor: LayoutNode,
    ids: IdAllocator,
) -> LayoutNode:
    """
    Merge the touching leaves below ``node`` and return what fills its slot.

    Returns ``survivor`` (resized to ``node``'s share) once the touching
    leaves are direct children of ``node``, otherwise ``node`` itself with
    its children regrouped.
    """
    normalize_sizes(node)
    a, b = node.children

    if a.is_leaf and b.is_leaf:
        survivor.size = node.size
        return survivor

    a_share = child_percent(a)
    b_share = child_percent(b)

    if a.is_split:
        lead, touching = a.children
        lead_abs = a_share * leading_percent(a) / 100
        touching_abs = a_share - lead_abs

        lead.size = lead_abs
        touching.size = touching_abs
        b.size = b_share
        inner = LayoutNode.container("", orientation, touching, b, size=touching_abs + b_share)
        normalize_sizes(inner)

        replacement = _contract(inner, orientation, survivor, ids)
        node.children = [lead, replacement]
    else:
        touching, trail = b.children
        touching_abs = b_share * leading_percent(b) / 100
        trail_abs = b_share - touching_abs

        a.size = a_share
        touching.size = touching_abs
        trail.size = trail_abs
        inner = LayoutNode.container("", orientation, a, touching, size=a_share + touching_abs)
        normalize_sizes(inner)

        replacement = _contract(inner, orientation, survivor, ids)
        node.children = [replacement, trail]

    if replacement is inner:
        inner.id = ids.allocate()
    normalize_sizes(node)
    return node


def merge_nodes_in_tree(
    parent: LayoutNode,
    focused_node_id: Optional[str],
    ids: IdAllocator,
) -> LayoutNode:
    """
    Merge the two regions meeting at ``parent``'s divider.

    Args:
        parent: Container whose divider is mergeable
        focused_node_id: Leaf that initiated the merge; its content wins
            when it has any
        ids: Allocator for a regrouping container that outlives the merge

    Returns:
        ``parent`` (same object), restructured

    Raises:
        NotMergeableError: If more than one leaf touches either side
    """
    if not is_divider_mergeable(parent):
        count_a, count_b = boundary_counts(parent) if parent.is_split else (0, 0)
        raise NotMergeableError(parent.id, count_a, count_b)

    orientation = parent.orientation
    leaf_a = get_touching_leaf(parent.child_a, orientation, BoundaryEdge.TRAILING)
    leaf_b = get_touching_leaf(parent.child_b, orientation, BoundaryEdge.LEADING)

    winner = _pick_winner(leaf_a, leaf_b, focused_node_id)
    merged_content = winner.content if winner is not None else None
    leaf_a.content = merged_content
    leaf_b.content = merged_content

    if winner is not None:
        survivor = winner
    else:
        survivor = leaf_b if focused_node_id == leaf_b.id else leaf_a

    if parent.child_a.is_leaf and parent.child_b.is_leaf:
        parent.become_leaf(merged_content)
    else:
        _contract(parent, orientation, survivor, ids)

    logger.debug(
        f"Merged {leaf_a.id} + {leaf_b.id} under {parent.id} "
        f"(content from {winner.id if winner is not None else 'neither'})"
    )
    return parent


def merge_divider(
    root: LayoutNode,
    parent_id: str,
    focused_node_id: Optional[str],
    ids: IdAllocator,
) -> Optional[LayoutNode]:
    """
    Merge across the divider owned by ``parent_id``.

    Returns:
        The restructured parent, or None for a stale id or a divider that
        is not mergeable (the tree is left untouched)
    """
    parent = find_node_by_id(root, parent_id)
    if not is_divider_mergeable(parent):
        logger.debug(f"Merge ignored: divider of {parent_id} is not mergeable")
        return None
    return merge_nodes_in_tree(parent, focused_node_id, ids)


def merge_toward(
    root: LayoutNode,
    focused_node_id: str,
    direction: Direction,
    ids: IdAllocator,
) -> Optional[LayoutNode]:
    """
    Merge the focused leaf with its neighbour across the next divider in
    ``direction``.

    Returns:
        The restructured parent, or None when there is no such divider or
        it is not mergeable
    """
    parent = find_divider_toward(root, focused_node_id, direction)
    if parent is None:
        return None
    return merge_divider(root, parent.id, focused_node_id, ids)
