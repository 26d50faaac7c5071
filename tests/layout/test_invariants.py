"""
Property tests: random sequences of edits keep every tree well-formed.
"""

import random

import pytest

from mosaic_toolkit.core.models.nodes import Direction, Orientation
from mosaic_toolkit.layout.delete import delete_node
from mosaic_toolkit.layout.merge import merge_nodes_in_tree
from mosaic_toolkit.layout.merge_analyzer import iter_mergeable_dividers
from mosaic_toolkit.layout.resize import ResizeSession, nudge_divider
from mosaic_toolkit.layout.split import split_node
from mosaic_toolkit.layout.tree import check_invariants, iter_split_nodes

PAGE_WIDTH = 800
PAGE_HEIGHT = 1100


def _random_edit(rng, root, ids):
    """Apply one random structural edit to ``root``."""
    leaves = list(root.iter_leaves())
    containers = list(iter_split_nodes(root))
    op = rng.choice(["split", "split", "delete", "merge", "nudge", "drag"])

    if op == "split" or not containers:
        split_node(rng.choice(leaves), ids, rng.choice(list(Orientation)), rng.random() < 0.5)
    elif op == "delete":
        delete_node(root, rng.choice(leaves).id)
    elif op == "merge":
        mergeable = list(iter_mergeable_dividers(root))
        if mergeable:
            merge_nodes_in_tree(rng.choice(mergeable), rng.choice(leaves).id, ids)
    elif op == "nudge":
        nudge_divider(root, rng.choice(leaves).id, rng.choice(list(Direction)), None, PAGE_WIDTH, PAGE_HEIGHT)
    else:
        session = ResizeSession(root, rng.choice(containers), PAGE_WIDTH, PAGE_HEIGHT)
        session.update(rng.uniform(-400, 400), snap=rng.random() < 0.5)
        session.commit()


class TestSumInvariant:
    """Sibling sizes sum to 100 after any operation."""

    @pytest.mark.parametrize("seed", range(20))
    def test_invariants_when_random_edits_then_tree_stays_well_formed(self, seed, random_tree_factory):
        rng = random.Random(seed)
        root, ids = random_tree_factory(seed, leaf_count=6)

        for step in range(60):
            _random_edit(rng, root, ids)
            assert check_invariants(root) == [], (seed, step)
