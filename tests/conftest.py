import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import mosaic_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mosaic_toolkit.core.models.content import ImageContent, TextContent  # noqa: E402
from mosaic_toolkit.core.models.nodes import IdAllocator, LayoutNode, Orientation  # noqa: E402

V = Orientation.VERTICAL
H = Orientation.HORIZONTAL


# Common test fixtures
@pytest.fixture
def ids():
    """Allocator that cannot collide with the hand-written ids used in tests."""
    return IdAllocator(current=100)


@pytest.fixture
def scenario_one():
    """P[A(40, image) | B(60)[B1(30) | B2(70)]], all vertical."""
    a = LayoutNode.leaf("A", size=40, content=ImageContent("asset-a"))
    b1 = LayoutNode.leaf("B1", size=30)
    b2 = LayoutNode.leaf("B2", size=70, content=TextContent("b2"))
    b = LayoutNode.container("B", V, b1, b2, size=60)
    return LayoutNode.container("P", V, a, b)


@pytest.fixture
def scenario_two():
    """P[A(40)[A1(50) | A2(50)] | B(60)[B1(30) | B2(70)]], all vertical."""
    a1 = LayoutNode.leaf("A1", size=50, content=TextContent("a1"))
    a2 = LayoutNode.leaf("A2", size=50)
    b1 = LayoutNode.leaf("B1", size=30)
    b2 = LayoutNode.leaf("B2", size=70, content=TextContent("b2"))
    a = LayoutNode.container("A", V, a1, a2, size=40)
    b = LayoutNode.container("B", V, b1, b2, size=60)
    return LayoutNode.container("P", V, a, b)


@pytest.fixture
def grid():
    """2x2 grid: root[L(50)[L1 / L2] | R(50)[R1 / R2]]."""
    l1 = LayoutNode.leaf("L1", size=50, content=TextContent("l1"))
    l2 = LayoutNode.leaf("L2", size=50)
    r1 = LayoutNode.leaf("R1", size=50, content=ImageContent("asset-r1"))
    r2 = LayoutNode.leaf("R2", size=50)
    left = LayoutNode.container("L", H, l1, l2, size=50)
    right = LayoutNode.container("R", H, r1, r2, size=50)
    return LayoutNode.container("root", V, left, right)


@pytest.fixture
def random_tree_factory():
    """Factory for reproducible random trees with random sizes and content."""
    def _create(seed: int, leaf_count: int = 8):
        rng = random.Random(seed)
        ids = IdAllocator()
        root = LayoutNode.leaf(ids.allocate())
        while root.leaf_count < leaf_count:
            target = rng.choice(list(root.iter_leaves()))
            child_a = LayoutNode.leaf(ids.allocate(), size=round(rng.uniform(15, 85), 2))
            child_b = LayoutNode.leaf(ids.allocate(), size=100 - child_a.size)
            target.become_split(rng.choice([V, H]), [child_a, child_b])
        for leaf in root.iter_leaves():
            roll = rng.random()
            if roll < 0.3:
                leaf.content = ImageContent(f"asset-{leaf.id}")
            elif roll < 0.5:
                leaf.content = TextContent(f"text {leaf.id}")
        return root, ids
    return _create
