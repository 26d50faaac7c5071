"""
Module: geometry

Purpose:
    Resolves a layout tree into page coordinates. The tree stores only
    relative percentages; navigation, orientation inference, and snap
    alignment need absolute rectangles, which this module derives for a
    page of any size (pixels, points, or the unit square).

Key Functions:
    - compute_node_rects(root, width, height): Rect for every node
    - compute_dividers(root, width, height): Position of every divider

Key Classes:
    - Rect: Axis-aligned rectangle (immutable)
    - DividerGeometry: One divider line on the page

Dependencies:
    - dataclasses (std)
    - .nodes: LayoutNode, Orientation

Used By:
    - layout.resize: Drag spans and global alignment snaps
    - layout.navigation: Directional nearest-leaf search
    - layout.split: Orientation inference from on-screen aspect ratio
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .nodes import LayoutNode, Orientation

# Size used for a child whose size was never set
DEFAULT_SIZE_PERCENT = 50.0


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Page region in page units.

    Attributes:
        left: X of the left edge
        top: Y of the top edge
        width: Horizontal extent (>= 0)
        height: Vertical extent (>= 0)

    Example:
        >>> r = Rect(0, 0, 200, 100)
        >>> r.center
        (100.0, 50.0)
        >>> r.extent(Orientation.VERTICAL)
        200
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    @property
    def is_wide(self) -> bool:
        """True when at least as wide as tall."""
        return self.width >= self.height

    def start(self, orientation: Orientation) -> float:
        """Coordinate where children of a split with ``orientation`` begin."""
        return self.left if orientation == Orientation.VERTICAL else self.top

    def extent(self, orientation: Orientation) -> float:
        """Length along the axis children of ``orientation`` are laid out on."""
        return self.width if orientation == Orientation.VERTICAL else self.height

    def split(self, orientation: Orientation, percent: float) -> Tuple[Rect, Rect]:
        """Cut into leading/trailing parts at ``percent`` of the axis."""
        if orientation == Orientation.VERTICAL:
            lead_w = self.width * percent / 100
            return (
                Rect(self.left, self.top, lead_w, self.height),
                Rect(self.left + lead_w, self.top, self.width - lead_w, self.height),
            )
        lead_h = self.height * percent / 100
        return (
            Rect(self.left, self.top, self.width, lead_h),
            Rect(self.left, self.top + lead_h, self.width, self.height - lead_h),
        )


@dataclass(frozen=True, slots=True)
class DividerGeometry:
    """
    A divider line between the two children of ``parent_id``.

    ``position`` is the page coordinate of the line along the split axis
    (x for vertical dividers, y for horizontal ones).
    """

    parent_id: str
    orientation: Orientation
    position: float
    parent_rect: Rect


def child_percent(node: LayoutNode) -> float:
    """Node's share of its parent, tolerating an unset size."""
    if node.size is None:
        return DEFAULT_SIZE_PERCENT
    return node.size


def leading_percent(parent: LayoutNode) -> float:
    """Divider position of a split node as a percent of its own span."""
    a = child_percent(parent.child_a)
    b = child_percent(parent.child_b)
    total = a + b
    if total <= 0:
        return DEFAULT_SIZE_PERCENT
    return a / total * 100


def compute_node_rects(
    root: LayoutNode,
    width: float = 1.0,
    height: float = 1.0,
) -> Dict[str, Rect]:
    """
    Lay out ``root`` on a ``width`` x ``height`` page.

    Sibling sizes are read proportionally, so a pair that has drifted off
    100 still tiles its parent exactly.

    Returns:
        Mapping of node id to Rect, for containers and leaves alike
    """
    rects: Dict[str, Rect] = {}
    stack = [(root, Rect(0.0, 0.0, width, height))]
    while stack:
        node, rect = stack.pop()
        rects[node.id] = rect
        if node.is_split and node.children:
            lead, trail = rect.split(node.orientation, leading_percent(node))
            stack.append((node.child_b, trail))
            stack.append((node.child_a, lead))
    return rects


def compute_dividers(
    root: LayoutNode,
    width: float = 1.0,
    height: float = 1.0,
) -> List[DividerGeometry]:
    """Every divider on the page, in pre-order of their parent nodes."""
    rects = compute_node_rects(root, width, height)
    dividers = []
    for node in root.iter_all():
        if not node.is_split or not node.children:
            continue
        parent_rect = rects[node.id]
        position = (
            parent_rect.start(node.orientation)
            + parent_rect.extent(node.orientation) * leading_percent(node) / 100
        )
        dividers.append(DividerGeometry(node.id, node.orientation, position, parent_rect))
    return dividers
