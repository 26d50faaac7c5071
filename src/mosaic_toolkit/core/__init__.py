"""
Mosaic Toolkit Core Package

Data models shared by every layout operation, plus the persistence
boundary.

**DESIGN NOTES:**

1. **Mutable Tree, Immutable Leaves**
   - LayoutNode is mutated in place by the layout algebra
   - Content (ImageContent, TextContent), Rect and config are frozen

2. **Typed Sizes**
   - A size is a float percent of the parent (None for a page root)
   - The ``"NN%"`` string form exists only in core.utils.serialization
"""

from .models import (
    ImageContent,
    LayoutNode,
    Orientation,
    Rect,
    SplitState,
    TextContent,
)

__all__ = [
    "ImageContent",
    "LayoutNode",
    "Orientation",
    "Rect",
    "SplitState",
    "TextContent",
]
