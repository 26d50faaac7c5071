"""
Module: layout.content

Purpose:
    Small edits to what a leaf region holds. Each returns True when the
    tree changed, so the host knows whether to snapshot and re-render.

Key Functions:
    - swap_node_contents(a, b): Exchange content between two leaves
    - clear_content(node): Empty a leaf
    - set_text(node, body): Put a leaf into text mode
    - set_image(node, asset_ref): Place an image in a leaf
    - toggle_image_fit / toggle_image_flip / toggle_text_align

Dependencies:
    - core.models.content, core.models.nodes
"""

from __future__ import annotations

from typing import Optional

from mosaic_toolkit.core.models.content import ImageContent, TextContent
from mosaic_toolkit.core.models.nodes import LayoutNode


def swap_node_contents(source: Optional[LayoutNode], target: Optional[LayoutNode]) -> bool:
    if source is None or target is None or not source.is_leaf or not target.is_leaf:
        return False
    source.content, target.content = target.content, source.content
    return True


def clear_content(node: LayoutNode) -> bool:
    if not node.is_leaf or node.content is None:
        return False
    node.content = None
    return True


def set_text(node: LayoutNode, body: Optional[str] = None) -> bool:
    """
    Put ``node`` into text mode.

    An image leaf is left alone. Without ``body`` an existing text is kept
    and an empty leaf gets an empty text.
    """
    if not node.is_leaf or isinstance(node.content, ImageContent):
        return False
    if body is None:
        if isinstance(node.content, TextContent):
            return False
        node.content = TextContent("")
        return True
    align = node.content.align if isinstance(node.content, TextContent) else TextContent().align
    node.content = TextContent(body, align)
    return True


def set_image(node: LayoutNode, asset_ref: str) -> bool:
    """Place an image in ``node``, replacing whatever it held."""
    if not node.is_leaf:
        return False
    node.content = ImageContent(asset_ref)
    return True


def toggle_image_fit(node: LayoutNode) -> bool:
    if not isinstance(node.content, ImageContent):
        return False
    node.content = node.content.toggled_fit()
    return True


def toggle_image_flip(node: LayoutNode) -> bool:
    if not isinstance(node.content, ImageContent):
        return False
    node.content = node.content.toggled_flip()
    return True


def toggle_text_align(node: LayoutNode) -> bool:
    if not isinstance(node.content, TextContent):
        return False
    node.content = node.content.toggled_align()
    return True
