"""
Unit tests for the delete operation, including the split/delete round trip.
"""

import copy

import pytest

from mosaic_toolkit.core.models.content import ImageContent, TextContent
from mosaic_toolkit.core.models.nodes import LayoutNode, Orientation
from mosaic_toolkit.core.utils.serialization import node_to_dict
from mosaic_toolkit.layout.delete import delete_node
from mosaic_toolkit.layout.split import split_node
from mosaic_toolkit.layout.tree import check_invariants

V = Orientation.VERTICAL
H = Orientation.HORIZONTAL


class TestDeleteNode:
    """Tests for delete_node()."""

    def test_delete_when_sibling_is_leaf_then_parent_becomes_leaf_with_its_content(self, scenario_one):
        # Act
        parent = delete_node(scenario_one, "B1")

        # Assert
        b = scenario_one.child_b
        assert parent is b
        assert b.is_leaf
        assert b.children is None
        assert b.orientation is None
        assert b.content == TextContent("b2")
        assert b.size == 60

    def test_delete_when_sibling_is_split_then_parent_adopts_subtree(self, scenario_one):
        """Parent keeps its own id and size; the sibling's inner sizes are kept as-is."""
        parent = delete_node(scenario_one, "A")

        assert parent is scenario_one
        assert scenario_one.orientation == V
        assert [c.id for c in scenario_one.children] == ["B1", "B2"]
        assert [c.size for c in scenario_one.children] == [30, 70]
        assert scenario_one.size is None
        assert check_invariants(scenario_one) == []

    def test_delete_when_sibling_orientation_differs_then_parent_takes_it(self):
        inner = LayoutNode.container("i", H, LayoutNode.leaf("c"), LayoutNode.leaf("d"), size=70)
        root = LayoutNode.container("r", V, LayoutNode.leaf("a", size=30), inner)

        delete_node(root, "a")

        assert root.orientation == H
        assert [c.id for c in root.children] == ["c", "d"]

    def test_delete_when_ancestors_exist_then_not_renormalized(self, scenario_two):
        """Only the parent changes; P's split stays 40/60."""
        delete_node(scenario_two, "A2")

        assert scenario_two.child_a.is_leaf
        assert scenario_two.child_a.size == 40
        assert scenario_two.child_b.size == 60

    def test_delete_when_root_then_noop_and_tree_unchanged(self, scenario_two):
        before = node_to_dict(scenario_two)

        assert delete_node(scenario_two, "P") is None
        assert node_to_dict(scenario_two) == before

    def test_delete_when_protected_then_noop_and_tree_unchanged(self, scenario_two):
        before = node_to_dict(scenario_two)

        assert delete_node(scenario_two, "B", protected_ids={"B"}) is None
        assert node_to_dict(scenario_two) == before

    def test_delete_when_stale_id_then_none(self, scenario_two):
        before = copy.deepcopy(node_to_dict(scenario_two))
        assert delete_node(scenario_two, "nope") is None
        assert node_to_dict(scenario_two) == before


class TestSplitDeleteRoundTrip:
    """Split a leaf, delete one half, and get the original leaf back."""

    @pytest.mark.parametrize("content", [None, ImageContent("asset-1"), TextContent("t", "center")])
    @pytest.mark.parametrize("content_to_trailing", [False, True])
    def test_round_trip_when_empty_half_deleted_then_leaf_restored(self, ids, content, content_to_trailing):
        # Arrange
        leaf = LayoutNode.leaf("L", size=35, content=content)
        root = LayoutNode.container("root", V, LayoutNode.leaf("other", size=65), leaf)

        # Act
        result = split_node(leaf, ids, H, content_to_trailing=content_to_trailing)
        empty_half = result.child_a_id if content_to_trailing else result.child_b_id
        restored = delete_node(root, empty_half)

        # Assert
        assert restored is leaf
        assert leaf.is_leaf
        assert leaf.id == "L"
        assert leaf.size == 35
        assert leaf.content == content
        assert check_invariants(root) == []

    def test_round_trip_when_content_half_deleted_then_leaf_is_empty(self, ids):
        """The parent takes the remaining half's content, which is empty."""
        leaf = LayoutNode.leaf("L", content=ImageContent("asset-1"))
        root = LayoutNode.container("root", V, leaf, LayoutNode.leaf("other"))

        result = split_node(leaf, ids, V)
        delete_node(root, result.content_child_id)

        assert leaf.is_leaf
        assert leaf.content is None
