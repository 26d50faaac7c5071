"""
Module: layout

Purpose:
    The layout algebra: structural edits over a page's binary
    space-partition tree. Every operation mutates the tree in place and
    hands back what the host should focus next; stale ids are no-ops.

Key Functions:
    - split_node(), split_by_shape(): Divide a leaf in two
    - delete_node(): Remove a region, its sibling takes over the parent
    - is_divider_mergeable(), merge_nodes_in_tree(): Collapse a divider
    - ResizeSession, nudge_divider(): Move a divider by drag or keyboard
    - find_closest_leaf(), move_content(): Directional navigation
    - document_to_dict(), load_document_json(): Document persistence

Key Classes:
    - LayoutConfig: Thresholds and snap tables
    - LayoutDocument: Pages plus the shared id allocator

Dependencies:
    - numpy: Snap candidate arithmetic
    - mosaic_toolkit.core.models: LayoutNode, Rect, geometry

Used By:
    - Host editors (pointer and keyboard handlers)
"""

from .config import LayoutConfig, load_layout_config
from .errors import LayoutError, NotALeafError, NotMergeableError, SessionClosedError
from .tree import (
    check_invariants,
    contains_node,
    count_nodes_along_boundary,
    count_parallel_leaves,
    find_divider_toward,
    find_node_by_id,
    find_parent_node,
    iter_ancestors,
    iter_split_nodes,
    normalize_sizes,
    normalize_tree,
)
from .split import SplitResult, infer_split_orientation, split_by_shape, split_node, split_node_by_id
from .delete import delete_node
from .merge_analyzer import (
    boundary_counts,
    get_touching_leaf,
    is_divider_mergeable,
    iter_mergeable_dividers,
)
from .merge import merge_divider, merge_nodes_in_tree, merge_toward
from .resize import (
    ResizeSession,
    alignment_percents,
    begin_resize,
    compute_snap_candidates,
    nearest_candidate,
    nudge_divider,
)
from .navigation import find_closest_leaf, move_content
from .content import (
    clear_content,
    set_image,
    set_text,
    swap_node_contents,
    toggle_image_fit,
    toggle_image_flip,
    toggle_text_align,
)
from .document import LayoutDocument
from .persistence import document_from_dict, document_to_dict, load_document_json, save_document_json

__all__ = [
    # Config
    "LayoutConfig",
    "load_layout_config",
    # Errors
    "LayoutError",
    "NotALeafError",
    "NotMergeableError",
    "SessionClosedError",
    # Tree
    "check_invariants",
    "contains_node",
    "count_nodes_along_boundary",
    "count_parallel_leaves",
    "find_divider_toward",
    "find_node_by_id",
    "find_parent_node",
    "iter_ancestors",
    "iter_split_nodes",
    "normalize_sizes",
    "normalize_tree",
    # Split / delete
    "SplitResult",
    "infer_split_orientation",
    "split_by_shape",
    "split_node",
    "split_node_by_id",
    "delete_node",
    # Merge
    "boundary_counts",
    "get_touching_leaf",
    "is_divider_mergeable",
    "iter_mergeable_dividers",
    "merge_divider",
    "merge_nodes_in_tree",
    "merge_toward",
    # Resize
    "ResizeSession",
    "alignment_percents",
    "begin_resize",
    "compute_snap_candidates",
    "nearest_candidate",
    "nudge_divider",
    # Navigation
    "find_closest_leaf",
    "move_content",
    # Content
    "clear_content",
    "set_image",
    "set_text",
    "swap_node_contents",
    "toggle_image_fit",
    "toggle_image_flip",
    "toggle_text_align",
    # Document
    "LayoutDocument",
    "document_from_dict",
    "document_to_dict",
    "load_document_json",
    "save_document_json",
]
