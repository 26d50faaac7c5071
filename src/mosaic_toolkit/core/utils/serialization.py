"""
Serialization Utilities

Provides to/from dict (JSON-ready) conversion for layout trees.

Sizes cross this boundary as percentage strings (``"40%"``) and nowhere
else: parse_percent() and format_percent() are the only places that deal
with the suffix. Inside the library a size is always a float (or None for
a page root).

Field names follow the persisted format:
    id, splitState, orientation, size, children,
    image {assetRef, fit, flip}, text, textAlign
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..models.content import ImageContent, TextContent
from ..models.geometry import DEFAULT_SIZE_PERCENT
from ..models.nodes import LayoutNode, Orientation, SplitState
from ..schemas.validator import validate_node

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Percent boundary
# ─────────────────────────────────────────────────────────────────────────────

def parse_percent(value: Any, default: float = DEFAULT_SIZE_PERCENT) -> float:
    """
    Parse a persisted size into a float percent.

    Accepts ``"40%"``, ``"40"``, ``40`` and ``40.0``. Anything missing,
    unparsable, negative or not finite gives ``default``.

    Example:
        >>> parse_percent("37.5%")
        37.5
        >>> parse_percent(None)
        50.0
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().removesuffix("%").strip()
        try:
            number = float(text)
        except ValueError:
            logger.debug(f"Unparsable size {value!r}, using {default}")
            return default
    else:
        return default

    if number != number or number in (float("inf"), float("-inf")) or number < 0:
        return default
    return number


def format_percent(value: float) -> str:
    """Format a float percent for persistence (``40.0`` -> ``"40%"``)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return f"{text}%"


# ─────────────────────────────────────────────────────────────────────────────
# Node Serialization
# ─────────────────────────────────────────────────────────────────────────────

def node_to_dict(node: LayoutNode) -> dict[str, Any]:
    """
    Serialize a node and its subtree.

    A root without a size is written without a ``size`` key.
    """
    data: dict[str, Any] = {
        "id": node.id,
        "splitState": node.split_state.value,
    }
    if node.size is not None:
        data["size"] = format_percent(node.size)

    if node.is_split:
        data["orientation"] = node.orientation.value
        data["children"] = [node_to_dict(child) for child in node.children or ()]
        return data

    content = node.content
    if isinstance(content, ImageContent):
        data["image"] = {
            "assetRef": content.asset_ref,
            "fit": content.fit.value,
            "flip": content.flip,
        }
    elif isinstance(content, TextContent):
        data["text"] = content.body
        data["textAlign"] = content.align.value
    return data


def node_from_dict(data: dict[str, Any], *, validate: bool = False) -> LayoutNode:
    """
    Deserialize a node and its subtree.

    Args:
        data: Dictionary from JSON
        validate: Run the basic shape check first

    Returns:
        LayoutNode

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If an enum value cannot be parsed
    """
    if validate:
        validate_node(data)

    size = parse_percent(data["size"]) if "size" in data else None
    state = SplitState(data.get("splitState", SplitState.UNSPLIT.value))

    if state == SplitState.SPLIT:
        child_a, child_b = (node_from_dict(child) for child in data["children"])
        return LayoutNode.container(
            data["id"],
            Orientation(data["orientation"]),
            child_a,
            child_b,
            size=size,
        )

    return LayoutNode.leaf(data["id"], size=size, content=_content_from_dict(data))


def _content_from_dict(data: dict[str, Any]) -> Optional[ImageContent | TextContent]:
    """Leaf content; an image wins over text when both are present."""
    image = data.get("image")
    if image:
        if data.get("text") is not None:
            logger.debug(f"Node {data['id']!r} has image and text; keeping the image")
        return ImageContent(
            asset_ref=image["assetRef"],
            fit=image.get("fit", "cover"),
            flip=bool(image.get("flip", False)),
        )
    if data.get("text") is not None:
        return TextContent(data["text"], data.get("textAlign") or "left")
    return None
