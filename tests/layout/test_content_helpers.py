"""
Unit tests for leaf content helpers.
"""

from mosaic_toolkit.core.models.content import ImageContent, ImageFit, TextAlign, TextContent
from mosaic_toolkit.core.models.nodes import LayoutNode, Orientation
from mosaic_toolkit.layout.content import (
    clear_content,
    set_image,
    set_text,
    swap_node_contents,
    toggle_image_fit,
    toggle_image_flip,
    toggle_text_align,
)


def _container():
    return LayoutNode.container(
        "p", Orientation.VERTICAL, LayoutNode.leaf("a"), LayoutNode.leaf("b")
    )


class TestSwapAndClear:
    """Tests for swap_node_contents() and clear_content()."""

    def test_swap_when_two_leaves_then_exchanged(self):
        a = LayoutNode.leaf("a", content=TextContent("a"))
        b = LayoutNode.leaf("b", content=ImageContent("asset-b"))

        assert swap_node_contents(a, b) is True
        assert a.content == ImageContent("asset-b")
        assert b.content == TextContent("a")

    def test_swap_when_container_or_none_then_false(self):
        leaf = LayoutNode.leaf("a", content=TextContent("a"))
        assert swap_node_contents(leaf, _container()) is False
        assert swap_node_contents(None, leaf) is False
        assert leaf.content == TextContent("a")

    def test_clear_when_has_content_then_emptied(self):
        leaf = LayoutNode.leaf("a", content=ImageContent("asset-a"))
        assert clear_content(leaf) is True
        assert leaf.content is None
        assert clear_content(leaf) is False


class TestTextAndImage:
    """Tests for set_text() and set_image()."""

    def test_set_text_when_empty_leaf_then_text_mode(self):
        leaf = LayoutNode.leaf("a")
        assert set_text(leaf) is True
        assert leaf.content == TextContent("")

    def test_set_text_when_already_text_and_no_body_then_unchanged(self):
        leaf = LayoutNode.leaf("a", content=TextContent("keep"))
        assert set_text(leaf) is False
        assert leaf.content == TextContent("keep")

    def test_set_text_when_body_given_then_alignment_kept(self):
        leaf = LayoutNode.leaf("a", content=TextContent("old", TextAlign.CENTER))
        assert set_text(leaf, "new") is True
        assert leaf.content == TextContent("new", TextAlign.CENTER)

    def test_set_text_when_image_leaf_then_refused(self):
        leaf = LayoutNode.leaf("a", content=ImageContent("asset-a"))
        assert set_text(leaf, "text") is False
        assert leaf.content == ImageContent("asset-a")

    def test_set_image_when_text_leaf_then_replaced(self):
        leaf = LayoutNode.leaf("a", content=TextContent("t"))
        assert set_image(leaf, "asset-9") is True
        assert leaf.content == ImageContent("asset-9")

    def test_set_when_container_then_false(self):
        node = _container()
        assert set_text(node, "x") is False
        assert set_image(node, "asset-1") is False
        assert node.content is None


class TestToggles:
    """Tests for the display toggles."""

    def test_toggle_fit_when_image_then_flips_between_cover_and_contain(self):
        leaf = LayoutNode.leaf("a", content=ImageContent("asset-a"))
        assert toggle_image_fit(leaf) is True
        assert leaf.content.fit == ImageFit.CONTAIN
        toggle_image_fit(leaf)
        assert leaf.content.fit == ImageFit.COVER

    def test_toggle_flip_when_image_then_mirrored(self):
        leaf = LayoutNode.leaf("a", content=ImageContent("asset-a"))
        assert toggle_image_flip(leaf) is True
        assert leaf.content.flip is True

    def test_toggle_align_when_text_then_centered(self):
        leaf = LayoutNode.leaf("a", content=TextContent("t"))
        assert toggle_text_align(leaf) is True
        assert leaf.content.align == TextAlign.CENTER

    def test_toggles_when_wrong_content_then_false(self):
        text_leaf = LayoutNode.leaf("a", content=TextContent("t"))
        image_leaf = LayoutNode.leaf("b", content=ImageContent("asset-b"))
        empty = LayoutNode.leaf("c")

        assert toggle_image_fit(text_leaf) is False
        assert toggle_image_flip(empty) is False
        assert toggle_text_align(image_leaf) is False
