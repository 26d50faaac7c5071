"""
Module: layout.document

Purpose:
    Multi-page document: the store that owns each page's root node and the
    single id allocator shared by all pages.

Key Classes:
    - LayoutDocument: Pages, current page, and id allocation

Key Functions:
    - LayoutDocument.new(): One empty page
    - LayoutDocument.wrap_page_with_edge_region(index, edge): Edge drag
    - LayoutDocument.duplicate_page(index): Deep copy with fresh ids

Dependencies:
    - copy (std)
    - core.models.nodes
    - layout.config

Used By:
    - layout.persistence: document_to_dict / document_from_dict
    - Host page list and edge-drag handlers
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from mosaic_toolkit.core.models.nodes import IdAllocator, LayoutNode, PageEdge

from .config import LayoutConfig
from .tree import find_node_by_id

logger = logging.getLogger(__name__)


@dataclass
class LayoutDocument:
    """
    Ordered pages plus the document-wide id allocator.

    Attributes:
        pages: Root node of each page
        current_page_index: Page being edited
        ids: Allocator; every node id in every page came from here
        focused_id: Region holding keyboard focus, if any

    Invariants:
        - At least one page
        - Node ids are unique across all pages

    Example:
        >>> doc = LayoutDocument.new()
        >>> doc.current_page.id
        'rect-1'
        >>> doc.add_page()
        1
    """

    pages: List[LayoutNode]
    current_page_index: int = 0
    ids: IdAllocator = field(default_factory=IdAllocator)
    focused_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.pages:
            raise ValueError("A document needs at least one page")
        if not 0 <= self.current_page_index < len(self.pages):
            raise ValueError(
                f"current_page_index out of range: {self.current_page_index} "
                f"(pages={len(self.pages)})"
            )
        for page in self.pages:
            for node in page.iter_all():
                self.ids.observe(node.id)

    @classmethod
    def new(cls) -> LayoutDocument:
        ids = IdAllocator()
        return cls(pages=[LayoutNode.leaf(ids.allocate())], ids=ids)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def current_page(self) -> LayoutNode:
        return self.pages[self.current_page_index]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def protected_ids(self) -> frozenset[str]:
        """Page roots; delete never removes these."""
        return frozenset(page.id for page in self.pages)

    def find_node(self, node_id: str) -> Optional[LayoutNode]:
        """Find ``node_id`` on any page."""
        for page in self.pages:
            found = find_node_by_id(page, node_id)
            if found is not None:
                return found
        return None

    def page_index_of(self, node_id: str) -> Optional[int]:
        for index, page in enumerate(self.pages):
            if find_node_by_id(page, node_id) is not None:
                return index
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Page management
    # ─────────────────────────────────────────────────────────────────────────

    def add_page(self) -> int:
        """Append an empty page, make it current, and return its index."""
        self.pages.append(LayoutNode.leaf(self.ids.allocate()))
        self.current_page_index = len(self.pages) - 1
        self.focused_id = None
        return self.current_page_index

    def switch_page(self, index: int) -> bool:
        if not 0 <= index < len(self.pages):
            return False
        self.current_page_index = index
        self.focused_id = None
        return True

    def delete_page(self, index: int) -> bool:
        """Remove a page; the last remaining page cannot be deleted."""
        if len(self.pages) <= 1 or not 0 <= index < len(self.pages):
            return False
        del self.pages[index]
        if self.current_page_index >= len(self.pages):
            self.current_page_index = len(self.pages) - 1
        if self.focused_id is not None and self.find_node(self.focused_id) is None:
            self.focused_id = None
        return True

    def duplicate_page(self, index: int) -> Optional[int]:
        """
        Insert a deep copy of page ``index`` after it, with fresh ids.

        Returns:
            Index of the copy (now current), or None for a bad index
        """
        if not 0 <= index < len(self.pages):
            return None
        clone = copy.deepcopy(self.pages[index])
        for node in clone.iter_all():
            node.id = self.ids.allocate()
        self.pages.insert(index + 1, clone)
        self.current_page_index = index + 1
        logger.debug(f"Duplicated page {index} as {clone.id}")
        return self.current_page_index

    def reorder_page(self, from_index: int, to_index: int) -> bool:
        """Move a page, keeping the current page selected."""
        count = len(self.pages)
        if from_index == to_index or not (0 <= from_index < count and 0 <= to_index < count):
            return False
        current = self.current_page
        page = self.pages.pop(from_index)
        self.pages.insert(to_index, page)
        self.current_page_index = self.pages.index(current)
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Edge drag
    # ─────────────────────────────────────────────────────────────────────────

    def wrap_page_with_edge_region(
        self,
        index: int,
        edge: PageEdge,
        config: Optional[LayoutConfig] = None,
    ) -> Optional[str]:
        """
        Add a thin empty region along ``edge`` of page ``index``.

        The page gets a new root split along the edge's axis; the old root
        becomes one child with the remaining share. A drag session on the
        new root's divider normally follows.

        Returns:
            Id of the new edge region, or None if index is out of range
        """
        if not 0 <= index < len(self.pages):
            return None
        config = config or LayoutConfig()
        old_root = self.pages[index]
        edge_size = config.edge_region_percent

        region = LayoutNode.leaf(self.ids.allocate(), size=edge_size)
        old_root.size = 100 - edge_size
        children = [region, old_root] if edge.is_leading else [old_root, region]
        new_root = LayoutNode.container(
            self.ids.allocate(), edge.orientation, children[0], children[1]
        )
        self.pages[index] = new_root

        logger.debug(f"Wrapped page {index} with {edge} region {region.id}")
        return region.id
