"""
Module: layout.errors

Purpose:
    Exceptions for precondition violations in the layout algebra.
    Stale ids coming from UI events are NOT errors (operations return
    None); these are raised only when a caller hands an operation a node
    it can never apply to.
"""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for layout algebra precondition violations."""


class NotALeafError(LayoutError):
    """Raised when splitting a node that is already split."""

    def __init__(self, node_id: str):
        super().__init__(f"Node {node_id!r} is already split")
        self.node_id = node_id


class NotMergeableError(LayoutError):
    """Raised when merging across a divider touched by more than one leaf per side."""

    def __init__(self, parent_id: str, count_a: int, count_b: int):
        super().__init__(
            f"Divider of {parent_id!r} is not mergeable "
            f"({count_a} leaves on the leading side, {count_b} on the trailing side)"
        )
        self.parent_id = parent_id
        self.count_a = count_a
        self.count_b = count_b


class SessionClosedError(LayoutError):
    """Raised when a resize session is used after commit or abandon."""
