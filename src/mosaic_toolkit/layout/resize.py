"""
Module: layout.resize

Purpose:
    Move a divider, either continuously (pointer drag session) or in one
    discrete step (keyboard nudge), with optional snapping and automatic
    collapse of a side that becomes a sliver.

Key Functions:
    - compute_snap_candidates(parent, current_percent, config, alignment): Snap targets
    - alignment_percents(root, parent, page_width, page_height): Other dividers
      projected into this divider's span
    - nudge_divider(root, focused_node_id, direction, config, ...): Keyboard resize

Key Classes:
    - ResizeSession: One drag of one divider, committed or abandoned

Snap sources (all in percent of the parent span, rounded to 0.1):
    1. Equal fractions 1/N .. (N-1)/N, N = parallel leaf count of both sides
    2. Boundary snaps (near-collapse / near-expand)
    3. Fractions of the gap ahead of and behind the current position
    4. Every other divider with the same orientation on the page

Dependencies:
    - numpy: Candidate rounding, dedupe, and nearest lookup
    - core.models.geometry: Page coordinates of parents and dividers
    - layout.delete: Auto-collapse
    - layout.config: Thresholds and tables

Used By:
    - Host pointer and keyboard handlers
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np

from mosaic_toolkit.core.models.geometry import (
    compute_dividers,
    compute_node_rects,
    leading_percent,
)
from mosaic_toolkit.core.models.nodes import Direction, LayoutNode

from .config import LayoutConfig
from .delete import delete_node
from .errors import SessionClosedError
from .tree import count_parallel_leaves, find_divider_toward, find_node_by_id

logger = logging.getLogger(__name__)

# Candidates are kept strictly inside the parent
_MIN_CANDIDATE = 1.0
_MAX_CANDIDATE = 99.0


# ─────────────────────────────────────────────────────────────────────────────
# Snap candidates
# ─────────────────────────────────────────────────────────────────────────────

def alignment_percents(
    root: LayoutNode,
    parent: LayoutNode,
    page_width: float,
    page_height: float,
) -> List[float]:
    """
    Positions of every other same-orientation divider, as percents of
    ``parent``'s span.

    Dividers outside the span project below 0 or above 100; they are
    dropped later by compute_snap_candidates().
    """
    rects = compute_node_rects(root, page_width, page_height)
    parent_rect = rects.get(parent.id)
    if parent_rect is None:
        return []
    span = parent_rect.extent(parent.orientation)
    if span <= 0:
        return []
    start = parent_rect.start(parent.orientation)

    return [
        (divider.position - start) / span * 100
        for divider in compute_dividers(root, page_width, page_height)
        if divider.orientation == parent.orientation and divider.parent_id != parent.id
    ]


def compute_snap_candidates(
    parent: LayoutNode,
    current_percent: float,
    config: LayoutConfig,
    alignment: Iterable[float] = (),
) -> np.ndarray:
    """
    Collect snap targets for the divider of ``parent``.

    Args:
        parent: Container whose divider moves
        current_percent: Divider position the gap fractions are measured from
        config: Snap tables and thresholds
        alignment: Extra targets, normally from alignment_percents()

    Returns:
        Sorted, deduplicated percents within [1, 99]
    """
    orientation = parent.orientation
    values: List[float] = [50.0]

    total = (
        count_parallel_leaves(parent.child_a, orientation)
        + count_parallel_leaves(parent.child_b, orientation)
    )
    values.extend(i / total * 100 for i in range(1, total))

    values.extend(config.boundary_snaps)

    remaining_forward = 100 - current_percent
    if remaining_forward > config.min_gap_for_recursion:
        values.extend(current_percent + remaining_forward * p / 100 for p in config.snap_fractions)
    remaining_backward = current_percent
    if remaining_backward > config.min_gap_for_recursion:
        values.extend(remaining_backward * p / 100 for p in config.snap_fractions)

    values.extend(alignment)

    candidates = np.round(np.asarray(values, dtype=float), 1)
    candidates = candidates[(candidates >= _MIN_CANDIDATE) & (candidates <= _MAX_CANDIDATE)]
    return np.unique(candidates)


def nearest_candidate(
    candidates: np.ndarray,
    percent: float,
    threshold_percent: float,
) -> Optional[float]:
    """Closest candidate within ``threshold_percent`` of ``percent``, or None."""
    if candidates.size == 0:
        return None
    distances = np.abs(candidates - percent)
    best = int(np.argmin(distances))
    if distances[best] > threshold_percent:
        return None
    return float(candidates[best])


# ─────────────────────────────────────────────────────────────────────────────
# Commit (shared by drag and keyboard)
# ─────────────────────────────────────────────────────────────────────────────

def _apply_position(
    root: LayoutNode,
    parent: LayoutNode,
    percent_a: float,
    config: LayoutConfig,
) -> Optional[LayoutNode]:
    """
    Set the divider of ``parent`` to ``percent_a`` and collapse slivers.

    Returns:
        The contracted parent when a side was deleted, else None
    """
    node_a, node_b = parent.children
    percent_a = min(max(percent_a, 0.0), 100.0)

    if percent_a <= config.min_area_percent:
        logger.debug(f"Resize collapsed {node_a.id} ({percent_a:.2f}%)")
        return delete_node(root, node_a.id)
    if 100 - percent_a <= config.min_area_percent:
        logger.debug(f"Resize collapsed {node_b.id} ({100 - percent_a:.2f}%)")
        return delete_node(root, node_b.id)

    node_a.size = percent_a
    node_b.size = 100 - percent_a
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Drag session
# ─────────────────────────────────────────────────────────────────────────────

class ResizeSession:
    """
    One pointer drag of one divider.

    Captures the two sides' sizes and the parent's span at construction;
    update() only computes positions, nothing touches the tree until
    commit(). An abandoned session leaves the tree as it was.

    Example:
        >>> session = ResizeSession(root, parent, 1000, 800)
        >>> session.update(+120)           # pixels along the split axis
        62.0
        >>> session.commit()               # focus target id
        'rect-1'
    """

    def __init__(
        self,
        root: LayoutNode,
        parent: LayoutNode,
        page_width: float,
        page_height: float,
        config: Optional[LayoutConfig] = None,
        focused_node_id: Optional[str] = None,
    ):
        if not parent.is_split or not parent.children:
            raise ValueError(f"Cannot resize {parent.id}: it has no divider")

        self.root = root
        self.parent = parent
        self.config = config or LayoutConfig()
        self.focused_node_id = focused_node_id

        rect = compute_node_rects(root, page_width, page_height)[parent.id]
        self.origin = rect.start(parent.orientation)
        self.available = rect.extent(parent.orientation)
        self.start_percent = leading_percent(parent)
        self.start_size_a = self.available * self.start_percent / 100
        self.start_size_b = self.available - self.start_size_a
        self.current_percent = self.start_percent
        self.closed = False

        self._candidates = compute_snap_candidates(
            parent,
            self.start_percent,
            self.config,
            alignment_percents(root, parent, page_width, page_height),
        )
        logger.debug(
            f"Resize session on {parent.id}: {self.start_percent:.1f}% of {self.available:g}"
        )

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosedError(f"Resize session on {self.parent.id} is closed")

    @property
    def candidates(self) -> np.ndarray:
        return self._candidates

    def update(self, delta: float, snap: bool = False) -> float:
        """
        Move the divider ``delta`` page units from where the drag started.

        Args:
            delta: Pointer movement along the split axis since the start
            snap: Precision modifier held; snap to the nearest candidate
                within ``snap_threshold_px``

        Returns:
            The new leading-side percent (not yet written to the tree)
        """
        self._ensure_open()
        if self.available <= 0:
            return self.current_percent

        size_a = min(max(self.start_size_a + delta, 0.0), self.available)
        percent = size_a / self.available * 100

        if snap:
            threshold = self.config.snap_threshold_px / self.available * 100
            snapped = nearest_candidate(self._candidates, percent, threshold)
            if snapped is not None:
                percent = snapped

        self.current_percent = percent
        return percent

    def commit(self) -> str:
        """
        Write the current position, collapsing a side at or below
        ``min_area_percent``.

        Returns:
            Focus target: the contracted parent after a collapse, else the
            focused node (or the parent when none was given)
        """
        self._ensure_open()
        self.closed = True
        collapsed = _apply_position(self.root, self.parent, self.current_percent, self.config)
        if collapsed is not None:
            return collapsed.id
        return self.focused_node_id or self.parent.id

    def abandon(self) -> None:
        """End the session without touching the tree."""
        self.closed = True


def begin_resize(
    root: LayoutNode,
    parent_id: str,
    page_width: float,
    page_height: float,
    config: Optional[LayoutConfig] = None,
    focused_node_id: Optional[str] = None,
) -> Optional[ResizeSession]:
    """Open a ResizeSession on ``parent_id``; None for a stale id or a leaf."""
    parent = find_node_by_id(root, parent_id)
    if parent is None or not parent.is_split:
        logger.debug(f"Resize ignored: {parent_id} has no divider")
        return None
    return ResizeSession(root, parent, page_width, page_height, config, focused_node_id)


# ─────────────────────────────────────────────────────────────────────────────
# Keyboard nudge
# ─────────────────────────────────────────────────────────────────────────────

def nudge_divider(
    root: LayoutNode,
    focused_node_id: str,
    direction: Direction,
    config: Optional[LayoutConfig] = None,
    page_width: float = 1.0,
    page_height: float = 1.0,
) -> Optional[str]:
    """
    Step the divider next to ``focused_node_id`` toward ``direction``.

    The divider jumps to the nearest snap candidate at least
    ``keyboard_min_step`` beyond its position, or to the 1%/99% boundary
    when none is left, and the move is committed immediately.

    Returns:
        Focus target id, or None when no divider borders the node in that
        direction or it is already at the boundary
    """
    config = config or LayoutConfig()
    parent = find_divider_toward(root, focused_node_id, direction)
    if parent is None:
        return None

    current = leading_percent(parent)
    candidates = compute_snap_candidates(
        parent,
        current,
        config,
        alignment_percents(root, parent, page_width, page_height),
    )

    target: Optional[float] = None
    if direction.is_forward:
        ahead = candidates[candidates >= current + config.keyboard_min_step]
        if ahead.size:
            target = float(ahead[0])
        elif current < config.max_boundary_snap:
            target = config.max_boundary_snap
    else:
        behind = candidates[candidates <= current - config.keyboard_min_step]
        if behind.size:
            target = float(behind[-1])
        elif current > config.min_boundary_snap:
            target = config.min_boundary_snap

    if target is None:
        return None

    logger.debug(f"Nudged divider of {parent.id} {direction}: {current:.1f}% -> {target:.1f}%")
    collapsed = _apply_position(root, parent, target, config)
    if collapsed is not None:
        return collapsed.id
    return focused_node_id
