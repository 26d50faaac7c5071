"""
Module: content

Purpose:
    Leaf content value objects. A leaf region holds at most one of these:
    an image reference or a block of text. Both are frozen, so the same
    instance may be shared by several nodes (merge, delete) without
    aliasing bugs.

Key Classes:
    - ImageContent: Reference to a stored asset plus fit/flip display flags
    - TextContent: Text body plus alignment
    - ImageFit, TextAlign: Display enums

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.nodes.LayoutNode
    - layout.split, layout.delete, layout.merge, layout.content
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


class ImageFit(str, Enum):
    """How an image fills its region."""
    COVER = "cover"
    CONTAIN = "contain"

    def __str__(self) -> str:
        return self.value


class TextAlign(str, Enum):
    """Horizontal alignment of a text region."""
    LEFT = "left"
    CENTER = "center"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ImageContent:
    """
    Image placed in a leaf region (immutable).

    Attributes:
        asset_ref: Key of the asset in the external asset store
        fit: COVER crops to fill, CONTAIN letterboxes
        flip: Mirror horizontally

    Example:
        >>> img = ImageContent("asset-7")
        >>> img.toggled_fit().fit
        <ImageFit.CONTAIN: 'contain'>
    """

    asset_ref: str
    fit: ImageFit = ImageFit.COVER
    flip: bool = False

    def __post_init__(self) -> None:
        if not self.asset_ref:
            raise ValueError(f"asset_ref must be non-empty: {self.asset_ref!r}")
        if not isinstance(self.fit, ImageFit):
            object.__setattr__(self, "fit", ImageFit(self.fit))

    def toggled_fit(self) -> ImageContent:
        new_fit = ImageFit.CONTAIN if self.fit == ImageFit.COVER else ImageFit.COVER
        return replace(self, fit=new_fit)

    def toggled_flip(self) -> ImageContent:
        return replace(self, flip=not self.flip)


@dataclass(frozen=True, slots=True)
class TextContent:
    """
    Text placed in a leaf region (immutable).

    An empty body is still text content: the region is in text mode.
    """

    body: str = ""
    align: TextAlign = TextAlign.LEFT

    def __post_init__(self) -> None:
        if not isinstance(self.align, TextAlign):
            object.__setattr__(self, "align", TextAlign(self.align))

    def toggled_align(self) -> TextContent:
        new_align = TextAlign.LEFT if self.align == TextAlign.CENTER else TextAlign.CENTER
        return replace(self, align=new_align)


Content = Union[ImageContent, TextContent]
