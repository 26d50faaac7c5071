"""
Module: layout.navigation

Purpose:
    Directional focus movement between leaf regions, and content
    swapping with the region found that way.

Key Functions:
    - find_closest_leaf(root, focused_id, direction, ...): Nearest leaf in a direction
    - move_content(root, focused_id, direction, ...): Swap content with that leaf

Algorithm:
    Only leaves whose center lies strictly on the requested side of the
    focused leaf's center are considered. Each is scored

        distance along the direction + 2 * distance across it

    and the lowest score wins, so a leaf lined up with the focused one is
    preferred over one that is merely close.

Dependencies:
    - core.models.geometry: Leaf rectangles
    - layout.content: swap_node_contents

Used By:
    - Host arrow-key handlers
"""

from __future__ import annotations

import logging
from typing import Optional

from mosaic_toolkit.core.models.geometry import compute_node_rects
from mosaic_toolkit.core.models.nodes import Direction, LayoutNode

from .content import swap_node_contents
from .tree import find_node_by_id

logger = logging.getLogger(__name__)

# Weight of the off-axis distance in the score
SECONDARY_AXIS_WEIGHT = 2.0


def find_closest_leaf(
    root: LayoutNode,
    focused_id: str,
    direction: Direction,
    page_width: float = 1.0,
    page_height: float = 1.0,
) -> Optional[LayoutNode]:
    """
    Find the leaf to move focus to from ``focused_id``.

    Args:
        root: Page root
        focused_id: Currently focused leaf
        direction: Arrow key pressed
        page_width, page_height: Page size, so distances match what the
            user sees on a non-square page

    Returns:
        Best leaf, or None when nothing lies in that direction
    """
    rects = compute_node_rects(root, page_width, page_height)
    current = rects.get(focused_id)
    if current is None:
        return None
    cx, cy = current.center

    best: Optional[LayoutNode] = None
    best_score = float("inf")
    for leaf in root.iter_leaves():
        if leaf.id == focused_id:
            continue
        x, y = rects[leaf.id].center

        if direction == Direction.UP:
            valid, primary, secondary = y < cy, cy - y, abs(cx - x)
        elif direction == Direction.DOWN:
            valid, primary, secondary = y > cy, y - cy, abs(cx - x)
        elif direction == Direction.LEFT:
            valid, primary, secondary = x < cx, cx - x, abs(cy - y)
        else:
            valid, primary, secondary = x > cx, x - cx, abs(cy - y)

        if not valid:
            continue
        score = primary + SECONDARY_AXIS_WEIGHT * secondary
        if score < best_score:
            best, best_score = leaf, score
    return best


def move_content(
    root: LayoutNode,
    focused_id: str,
    direction: Direction,
    page_width: float = 1.0,
    page_height: float = 1.0,
) -> Optional[str]:
    """
    Swap the focused leaf's content with the closest leaf in ``direction``.

    Returns:
        Id of the target leaf (the new focus), or None when there is none
    """
    source = find_node_by_id(root, focused_id)
    if source is None or not source.is_leaf:
        return None
    target = find_closest_leaf(root, focused_id, direction, page_width, page_height)
    if target is None:
        return None
    swap_node_contents(source, target)
    logger.debug(f"Moved content {focused_id} -> {target.id}")
    return target.id
