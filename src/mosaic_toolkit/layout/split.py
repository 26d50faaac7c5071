"""
Module: layout.split

Purpose:
    Turn one leaf into a container holding two fresh leaves.

Key Functions:
    - infer_split_orientation(width, height, invert): Orientation from aspect ratio
    - split_node(node, ids, orientation, content_to_trailing): The split itself
    - split_node_by_id(root, node_id, ids, ...): Lookup + split for UI handlers
    - split_by_shape(root, node_id, ids, page_width, page_height): Split along
      the axis inferred from the region's shape

Algorithm:
    1. Mark the leaf SPLIT with the chosen orientation
    2. Create two UNSPLIT children with fresh ids, 50% each
    3. Move any content into the leading child, or the trailing one if
       content_to_trailing is set

Dependencies:
    - core.models.nodes
    - layout.tree, layout.errors

Used By:
    - Host click / keyboard handlers
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mosaic_toolkit.core.models.geometry import compute_node_rects
from mosaic_toolkit.core.models.nodes import IdAllocator, LayoutNode, Orientation

from .errors import NotALeafError
from .tree import find_node_by_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitResult:
    """
    Ids produced by a split.

    Attributes:
        child_a_id: New leading child
        child_b_id: New trailing child
        content_child_id: Child that received the old content, or None
            when the leaf was empty
    """

    child_a_id: str
    child_b_id: str
    content_child_id: Optional[str] = None

    def focus_id(self, prefer_content: bool = False) -> str:
        """
        Child that should receive focus.

        By default the child left without content (ready for new content);
        with ``prefer_content`` the one holding the moved content. An empty
        split focuses the leading child either way.
        """
        if self.content_child_id is None:
            return self.child_a_id
        if prefer_content:
            return self.content_child_id
        if self.content_child_id == self.child_a_id:
            return self.child_b_id
        return self.child_a_id


def infer_split_orientation(width: float, height: float, invert: bool = False) -> Orientation:
    """
    Choose the split axis from a region's on-screen shape.

    Wide regions (width >= height) split side by side, tall ones stack.
    ``invert`` (the modifier key) picks the other axis.
    """
    orientation = Orientation.VERTICAL if width >= height else Orientation.HORIZONTAL
    return orientation.opposite if invert else orientation


def split_node(
    node: LayoutNode,
    ids: IdAllocator,
    orientation: Orientation,
    content_to_trailing: bool = False,
) -> SplitResult:
    """
    Split leaf ``node`` in place into two halves.

    Args:
        node: Leaf to split; keeps its id and size
        ids: Document id allocator
        orientation: Axis of the new divider
        content_to_trailing: Move existing content into the trailing child
            instead of the leading one

    Returns:
        SplitResult with the two new child ids

    Raises:
        NotALeafError: If ``node`` is already split
    """
    if not node.is_leaf:
        raise NotALeafError(node.id)

    child_a = LayoutNode.leaf(ids.allocate(), size=50.0)
    child_b = LayoutNode.leaf(ids.allocate(), size=50.0)

    content = node.content
    receiver = None
    if content is not None:
        receiver = child_b if content_to_trailing else child_a
        receiver.content = content

    node.become_split(orientation, [child_a, child_b])

    logger.debug(f"Split {node.id} {orientation} into {child_a.id} | {child_b.id}")
    return SplitResult(
        child_a_id=child_a.id,
        child_b_id=child_b.id,
        content_child_id=receiver.id if receiver is not None else None,
    )


def split_node_by_id(
    root: LayoutNode,
    node_id: str,
    ids: IdAllocator,
    orientation: Orientation,
    content_to_trailing: bool = False,
) -> Optional[SplitResult]:
    """
    Split the leaf ``node_id`` of ``root``.

    Returns:
        SplitResult, or None when the id is stale or names a container
    """
    node = find_node_by_id(root, node_id)
    if node is None or not node.is_leaf:
        logger.debug(f"Split ignored: {node_id} is not a leaf of {root.id}")
        return None
    return split_node(node, ids, orientation, content_to_trailing)


def split_by_shape(
    root: LayoutNode,
    node_id: str,
    ids: IdAllocator,
    page_width: float,
    page_height: float,
    invert: bool = False,
    content_to_trailing: bool = False,
) -> Optional[SplitResult]:
    """
    Split ``node_id`` along the axis its on-page shape suggests.

    Returns:
        SplitResult, or None when the id is stale or names a container
    """
    rect = compute_node_rects(root, page_width, page_height).get(node_id)
    if rect is None:
        return None
    orientation = infer_split_orientation(rect.width, rect.height, invert)
    return split_node_by_id(root, node_id, ids, orientation, content_to_trailing)
