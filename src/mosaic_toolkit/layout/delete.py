"""
Module: layout.delete

Purpose:
    Remove a region by contracting its parent: the parent takes over
    whatever the surviving sibling was (leaf content or sub-tree).

Key Functions:
    - delete_node(root, node_id, protected_ids): Contract and return the parent

Dependencies:
    - core.models.nodes
    - layout.tree

Used By:
    - layout.resize: Auto-collapse of slivers
    - Host delete handlers

Note:
    The deleted node's size and the sibling's size are both discarded; the
    parent keeps its own size and the sibling's inner proportions are taken
    as they were. Ancestors are not renormalized.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from mosaic_toolkit.core.models.nodes import LayoutNode

from .tree import find_parent_node

logger = logging.getLogger(__name__)


def delete_node(
    root: LayoutNode,
    node_id: str,
    protected_ids: Iterable[str] = (),
) -> Optional[LayoutNode]:
    """
    Delete ``node_id`` from ``root``; its parent becomes its sibling.

    Args:
        root: Page root (never deleted)
        node_id: Node to remove, normally a leaf
        protected_ids: Further ids that must never be deleted

    Returns:
        The mutated parent (new focus target), or None when nothing changed

    Example:
        >>> # P[A | B] -> delete A -> P is now a leaf holding B's content
    """
    if node_id == root.id or node_id in set(protected_ids):
        logger.debug(f"Delete ignored: {node_id} is protected")
        return None

    parent = find_parent_node(root, node_id)
    if parent is None or not parent.children:
        logger.debug(f"Delete ignored: {node_id} not found under {root.id}")
        return None

    sibling = next((c for c in parent.children if c.id != node_id), None)
    if sibling is None:
        return None

    if sibling.is_split:
        parent.become_split(sibling.orientation, sibling.children)
    else:
        parent.become_leaf(sibling.content)

    logger.debug(f"Deleted {node_id}; {parent.id} absorbed {sibling.id}")
    return parent
