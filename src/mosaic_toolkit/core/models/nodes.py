"""
Module: nodes

Purpose:
    Provides the LayoutNode dataclass - one region of a page in a binary
    space-partition tree. A node is either a leaf (UNSPLIT, optionally
    holding content) or a container (SPLIT, exactly two ordered children
    arranged along its orientation).

Key Classes:
    - LayoutNode: Mutable tree node
    - SplitState, Orientation, BoundaryEdge, Direction, PageEdge: Enums
    - IdAllocator: Monotonic document-wide id source

Dependencies:
    - dataclasses (std)
    - .content: ImageContent, TextContent

Used By:
    - layout.* (every structural operation)
    - core.models.geometry, layout.document
    - core.utils.serialization

Design Deviation from the other core models:
    Nodes are NOT frozen. The host owns the page root and the layout
    operations mutate it in place, returning a focus-target id. Content
    objects hanging off the nodes stay immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from .content import Content


class SplitState(str, Enum):
    """Whether a node is a container or a leaf."""
    SPLIT = "split"
    UNSPLIT = "unsplit"

    def __str__(self) -> str:
        return self.value


class Orientation(str, Enum):
    """
    Axis along which a split node arranges its children.

    VERTICAL children sit side by side (the divider is a vertical line);
    HORIZONTAL children are stacked.
    """
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    def __str__(self) -> str:
        return self.value

    @property
    def opposite(self) -> Orientation:
        if self is Orientation.VERTICAL:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL


class BoundaryEdge(str, Enum):
    """Side of a subtree facing a divider: top/left or bottom/right."""
    LEADING = "leading"
    TRAILING = "trailing"

    def __str__(self) -> str:
        return self.value

    @property
    def child_index(self) -> int:
        """Index of the child adjacent to this edge in a parallel split."""
        return 0 if self is BoundaryEdge.LEADING else 1


class Direction(str, Enum):
    """Compass direction for keyboard navigation and nudging."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    @property
    def orientation(self) -> Orientation:
        """Orientation of the dividers that move along this direction."""
        if self in (Direction.LEFT, Direction.RIGHT):
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    @property
    def is_forward(self) -> bool:
        """True for right/down (increasing coordinate)."""
        return self in (Direction.RIGHT, Direction.DOWN)


class PageEdge(str, Enum):
    """Outer edge of a page, used when dragging a new region in from the edge."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value

    @property
    def orientation(self) -> Orientation:
        if self in (PageEdge.LEFT, PageEdge.RIGHT):
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    @property
    def is_leading(self) -> bool:
        return self in (PageEdge.LEFT, PageEdge.TOP)


@dataclass(eq=False)
class LayoutNode:
    """
    Region node in a page layout tree.

    The tree structure is:
        root (SPLIT, vertical)
        ├── "rect-2" (UNSPLIT, size=40) [image]
        └── "rect-3" (SPLIT, horizontal, size=60)
            ├── "rect-4" (UNSPLIT, size=50) [text]
            └── "rect-5" (UNSPLIT, size=50)

    Attributes:
        id: Document-wide unique id
        split_state: SPLIT or UNSPLIT
        orientation: Set iff SPLIT
        children: Exactly two nodes iff SPLIT, leading child first
        size: Percent of the parent's extent along the parent's axis
            (None for a page root)
        content: Image or text for a leaf; always None on a SPLIT node

    Invariants:
        - children[0].size + children[1].size == 100 (within epsilon)
        - content is None whenever split_state is SPLIT

    Equality is identity: two nodes are the same region only if they are
    the same object.
    """

    id: str
    split_state: SplitState = SplitState.UNSPLIT
    orientation: Optional[Orientation] = None
    children: Optional[List[LayoutNode]] = None
    size: Optional[float] = None
    content: Optional[Content] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def leaf(
        cls,
        node_id: str,
        size: Optional[float] = None,
        content: Optional[Content] = None,
    ) -> LayoutNode:
        return cls(id=node_id, split_state=SplitState.UNSPLIT, size=size, content=content)

    @classmethod
    def container(
        cls,
        node_id: str,
        orientation: Orientation,
        child_a: LayoutNode,
        child_b: LayoutNode,
        size: Optional[float] = None,
    ) -> LayoutNode:
        return cls(
            id=node_id,
            split_state=SplitState.SPLIT,
            orientation=orientation,
            children=[child_a, child_b],
            size=size,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_leaf(self) -> bool:
        return self.split_state == SplitState.UNSPLIT

    @property
    def is_split(self) -> bool:
        return self.split_state == SplitState.SPLIT

    @property
    def has_content(self) -> bool:
        return self.content is not None

    @property
    def child_a(self) -> LayoutNode:
        """Leading child (left or top)."""
        assert self.children is not None, f"{self.id} has no children"
        return self.children[0]

    @property
    def child_b(self) -> LayoutNode:
        """Trailing child (right or bottom)."""
        assert self.children is not None, f"{self.id} has no children"
        return self.children[1]

    @property
    def leaf_count(self) -> int:
        if self.is_leaf:
            return 1
        return sum(child.leaf_count for child in self.children or ())

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation helpers
    # ─────────────────────────────────────────────────────────────────────────

    def become_leaf(self, content: Optional[Content]) -> None:
        """Turn this node into a leaf holding ``content``; keeps id and size."""
        self.split_state = SplitState.UNSPLIT
        self.orientation = None
        self.children = None
        self.content = content

    def become_split(
        self,
        orientation: Orientation,
        children: List[LayoutNode],
    ) -> None:
        """Turn this node into a container; keeps id and size."""
        self.split_state = SplitState.SPLIT
        self.orientation = orientation
        self.children = children
        self.content = None

    # ─────────────────────────────────────────────────────────────────────────
    # Iteration
    # ─────────────────────────────────────────────────────────────────────────

    def iter_all(self) -> Iterator[LayoutNode]:
        """This node then all descendants (pre-order)."""
        yield self
        for child in self.children or ():
            yield from child.iter_all()

    def iter_leaves(self) -> Iterator[LayoutNode]:
        """Leaves in leading-to-trailing order."""
        if self.is_leaf:
            yield self
            return
        for child in self.children or ():
            yield from child.iter_leaves()

    def __repr__(self) -> str:
        size_str = f", size={self.size:g}" if self.size is not None else ""
        if self.is_leaf:
            kind = type(self.content).__name__ if self.content is not None else "empty"
            return f"LayoutNode({self.id!r}, leaf, {kind}{size_str})"
        return (
            f"LayoutNode({self.id!r}, {self.orientation.value}{size_str}, "
            f"children={[c.id for c in self.children or ()]})"
        )


@dataclass
class IdAllocator:
    """
    Monotonic id source shared by every page of a document.

    Ids are ``rect-N`` and are never handed out twice, even after the node
    carrying one has been contracted away.

    Example:
        >>> ids = IdAllocator(current=1)
        >>> ids.allocate()
        'rect-2'
    """

    current: int = 0
    prefix: str = "rect-"

    def __post_init__(self) -> None:
        if self.current < 0:
            raise ValueError(f"current must be >= 0: {self.current}")

    def allocate(self) -> str:
        self.current += 1
        return f"{self.prefix}{self.current}"

    def observe(self, node_id: str) -> None:
        """Advance past an externally created ``<prefix>N`` id."""
        suffix = node_id[len(self.prefix):] if node_id.startswith(self.prefix) else ""
        if suffix.isdigit() and int(suffix) > self.current:
            self.current = int(suffix)
