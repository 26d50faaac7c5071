"""
Unit tests for directional navigation and content moves.
"""

import pytest

from mosaic_toolkit.core.models.content import ImageContent, TextContent
from mosaic_toolkit.core.models.nodes import Direction, LayoutNode, Orientation
from mosaic_toolkit.layout.navigation import find_closest_leaf, move_content

V = Orientation.VERTICAL
H = Orientation.HORIZONTAL


class TestFindClosestLeaf:
    """Tests for find_closest_leaf()."""

    @pytest.mark.parametrize(
        "start, direction, expected",
        [
            ("L1", Direction.RIGHT, "R1"),
            ("L1", Direction.DOWN, "L2"),
            ("L2", Direction.UP, "L1"),
            ("R2", Direction.LEFT, "L2"),
            ("R2", Direction.UP, "R1"),
        ],
    )
    def test_find_when_grid_then_aligned_neighbour(self, grid, start, direction, expected):
        assert find_closest_leaf(grid, start, direction).id == expected

    @pytest.mark.parametrize("direction", [Direction.UP, Direction.LEFT])
    def test_find_when_nothing_on_that_side_then_none(self, grid, direction):
        assert find_closest_leaf(grid, "L1", direction) is None

    def test_find_when_stale_focus_then_none(self, grid):
        assert find_closest_leaf(grid, "gone", Direction.RIGHT) is None

    def test_find_when_aligned_leaf_farther_then_still_preferred(self):
        """Off-axis distance weighs double, so the lined-up leaf wins."""
        # Arrange: F | [M / M2] | A, with F and A centred at y=0.5
        middle = LayoutNode.container(
            "mid", H, LayoutNode.leaf("M", size=50), LayoutNode.leaf("M2", size=50), size=25
        )
        rest = LayoutNode.container("rest", V, middle, LayoutNode.leaf("A", size=75), size=80)
        root = LayoutNode.container("root", V, LayoutNode.leaf("F", size=20), rest)

        # Act
        result = find_closest_leaf(root, "F", Direction.RIGHT)

        # Assert: M scores 0.2 + 2 * 0.25 = 0.7, A scores 0.6 + 0
        assert result.id == "A"

    def test_find_when_page_size_given_then_same_choice_on_grid(self, grid):
        assert find_closest_leaf(grid, "L1", Direction.RIGHT, 1600, 900).id == "R1"


class TestMoveContent:
    """Tests for move_content()."""

    def test_move_when_target_found_then_contents_swapped(self, grid):
        target = move_content(grid, "L1", Direction.RIGHT)

        assert target == "R1"
        assert grid.child_a.child_a.content == ImageContent("asset-r1")
        assert grid.child_b.child_a.content == TextContent("l1")

    def test_move_when_target_empty_then_source_emptied(self, grid):
        assert move_content(grid, "L1", Direction.DOWN) == "L2"
        assert grid.child_a.child_a.content is None
        assert grid.child_a.child_b.content == TextContent("l1")

    def test_move_when_no_target_then_none_and_unchanged(self, grid):
        assert move_content(grid, "L1", Direction.LEFT) is None
        assert grid.child_a.child_a.content == TextContent("l1")

    def test_move_when_focus_is_container_then_none(self, grid):
        assert move_content(grid, "L", Direction.RIGHT) is None
