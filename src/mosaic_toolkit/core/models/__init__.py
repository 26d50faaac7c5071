"""
Core Models Package

Layout tree nodes, leaf content and page geometry.

| Model | Kind | Notes |
|-------|------|-------|
| `LayoutNode` | mutable | Leaf or container in a page tree |
| `ImageContent` / `TextContent` | frozen | What a leaf holds |
| `Rect` / `DividerGeometry` | frozen | Page coordinates derived from a tree |
| `IdAllocator` | mutable | Monotonic ``rect-N`` ids |
"""

from .content import Content, ImageContent, ImageFit, TextAlign, TextContent
from .geometry import (
    DEFAULT_SIZE_PERCENT,
    DividerGeometry,
    Rect,
    child_percent,
    compute_dividers,
    compute_node_rects,
    leading_percent,
)
from .nodes import (
    BoundaryEdge,
    Direction,
    IdAllocator,
    LayoutNode,
    Orientation,
    PageEdge,
    SplitState,
)

__all__ = [
    # Content
    "Content",
    "ImageContent",
    "ImageFit",
    "TextAlign",
    "TextContent",
    # Nodes
    "BoundaryEdge",
    "Direction",
    "IdAllocator",
    "LayoutNode",
    "Orientation",
    "PageEdge",
    "SplitState",
    # Geometry
    "DEFAULT_SIZE_PERCENT",
    "DividerGeometry",
    "Rect",
    "child_percent",
    "compute_dividers",
    "compute_node_rects",
    "leading_percent",
]
