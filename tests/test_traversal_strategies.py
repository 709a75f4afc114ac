"""Unit tests for traversal strategies and walk buffers.

Tests every walk order in both walk modes, depth limiting, the composable
two-argument walk form and the recursion ceiling.
"""

import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BinarySearchTree,
    TreeConfig,
    WalkMode,
    WalkOrder,
    TreeDepthError,
    WalkBuffer,
    create_traverser,
)
from bstreelib.core.traverser import (
    InorderTraverser,
    PreorderTraverser,
    PostorderTraverser,
    LevelOrderTraverser,
    parse_order,
)


def build_tree(values, config=None):
    tree = BinarySearchTree(config)
    for value in values:
        tree.insert(value)
    return tree


SAMPLE = [5, 3, 8, 1, 4, 7, 9]

EXPECTED = {
    WalkOrder.INORDER: [1, 3, 4, 5, 7, 8, 9],
    WalkOrder.PREORDER: [5, 3, 1, 4, 8, 7, 9],
    WalkOrder.POSTORDER: [1, 4, 3, 7, 9, 8, 5],
    WalkOrder.LEVEL_ORDER: [5, 3, 8, 1, 4, 7, 9],
}


class TestTreeWalks(unittest.TestCase):
    """Test the tree's own walk methods."""

    def setUp(self):
        self.tree = build_tree(SAMPLE)

    def test_sorted_data(self):
        self.assertEqual(self.tree.get_sorted_data(), [1, 3, 4, 5, 7, 8, 9])

    def test_preorder_result(self):
        self.assertEqual(self.tree.get_preorder_walk_result(), [5, 3, 1, 4, 8, 7, 9])

    def test_postorder_result(self):
        self.assertEqual(self.tree.get_postorder_walk_result(), [1, 4, 3, 7, 9, 8, 5])

    def test_results_are_fresh_lists(self):
        first = self.tree.get_sorted_data()
        first.append(100)
        second = self.tree.get_sorted_data()
        self.assertEqual(second, [1, 3, 4, 5, 7, 8, 9])
        self.assertIsNot(first, second)

    def test_earlier_result_survives_later_walk(self):
        before = self.tree.get_sorted_data()
        self.tree.insert(6)
        after = self.tree.get_sorted_data()
        self.assertEqual(before, [1, 3, 4, 5, 7, 8, 9])
        self.assertEqual(after, [1, 3, 4, 5, 6, 7, 8, 9])

    def test_subtree_walks_compose(self):
        left, right = self.tree.find(3), self.tree.find(8)
        self.assertEqual(self.tree.inorder_tree_walk(left, True), [1, 3, 4])
        self.assertEqual(self.tree.inorder_tree_walk(right, False), [1, 3, 4, 7, 8, 9])
        self.assertEqual(self.tree.get_inorder_walk_result(), [1, 3, 4, 7, 8, 9])

    def test_should_clear_resets_buffer(self):
        self.tree.preorder_tree_walk(self.tree.find(3), True)
        self.assertEqual(self.tree.preorder_tree_walk(self.tree.find(8), True), [8, 7, 9])

    def test_postorder_subtree_append(self):
        self.tree.postorder_tree_walk(self.tree.find(8), True)
        result = self.tree.postorder_tree_walk(self.tree.find(3), False)
        self.assertEqual(result, [7, 9, 8, 1, 4, 3])

    def test_walk_from_none_appends_nothing(self):
        self.tree.inorder_tree_walk(self.tree.find(3), True)
        self.assertEqual(self.tree.inorder_tree_walk(None, False), [1, 3, 4])
        self.assertEqual(self.tree.inorder_tree_walk(None, True), [])

    def test_inorder_result_before_any_walk(self):
        self.assertEqual(self.tree.get_inorder_walk_result(), [])

    def test_empty_tree_walks(self):
        tree = BinarySearchTree()
        self.assertEqual(tree.get_sorted_data(), [])
        self.assertEqual(tree.get_preorder_walk_result(), [])
        self.assertEqual(tree.get_postorder_walk_result(), [])

    def test_recursive_mode_matches_iterative(self):
        tree = build_tree(SAMPLE, TreeConfig.fast())
        self.assertEqual(tree.get_sorted_data(), self.tree.get_sorted_data())
        self.assertEqual(tree.get_preorder_walk_result(), self.tree.get_preorder_walk_result())
        self.assertEqual(tree.get_postorder_walk_result(), self.tree.get_postorder_walk_result())


class TestTraversers(unittest.TestCase):
    """Test traverser classes directly."""

    def setUp(self):
        self.tree = build_tree(SAMPLE)

    def test_every_order_in_every_mode(self):
        for order, expected in EXPECTED.items():
            for mode in WalkMode:
                with self.subTest(order=order, mode=mode):
                    traverser = create_traverser(order, mode)
                    self.assertEqual(list(traverser.values(self.tree.root)), expected)

    def test_depths_are_relative_to_start(self):
        traverser = PreorderTraverser()
        pairs = [(node.data, depth) for node, depth in traverser.traverse(self.tree.find(8))]
        self.assertEqual(pairs, [(8, 0), (7, 1), (9, 1)])

    def test_inorder_depths(self):
        for mode in WalkMode:
            traverser = InorderTraverser(mode)
            pairs = [(node.data, depth) for node, depth in traverser.traverse(self.tree.root)]
            self.assertEqual(pairs, [(1, 2), (3, 1), (4, 2), (5, 0), (7, 2), (8, 1), (9, 2)])

    def test_max_depth_prunes(self):
        expected = {
            InorderTraverser: [3, 5, 8],
            PreorderTraverser: [5, 3, 8],
            PostorderTraverser: [3, 8, 5],
            LevelOrderTraverser: [5, 3, 8],
        }
        for cls, values in expected.items():
            for mode in WalkMode:
                with self.subTest(cls=cls.__name__, mode=mode):
                    traverser = cls(mode)
                    nodes = traverser.traverse(self.tree.root, max_depth=1)
                    self.assertEqual([node.data for node, _ in nodes], values)

    def test_max_depth_zero_is_root_only(self):
        traverser = PostorderTraverser()
        nodes = list(traverser.traverse(self.tree.root, max_depth=0))
        self.assertEqual([node.data for node, _ in nodes], [5])

    def test_none_root_yields_nothing(self):
        for order in WalkOrder:
            self.assertEqual(list(create_traverser(order).traverse(None)), [])

    def test_unknown_order_name(self):
        with self.assertRaises(ValueError):
            create_traverser("zigzag")

    def test_order_names(self):
        self.assertEqual(parse_order("PRE"), WalkOrder.PREORDER)
        self.assertEqual(parse_order("sorted"), WalkOrder.INORDER)
        self.assertEqual(parse_order("bfs"), WalkOrder.LEVEL_ORDER)
        self.assertIs(parse_order(WalkOrder.POSTORDER), WalkOrder.POSTORDER)


class TestDeepTrees(unittest.TestCase):
    """Degenerate trees are as deep as they are large."""

    def test_iterative_walks_handle_deep_chain(self):
        tree = build_tree(range(2000))
        self.assertEqual(tree.get_sorted_data(), list(range(2000)))
        self.assertEqual(tree.get_preorder_walk_result(), list(range(2000)))
        self.assertEqual(tree.get_postorder_walk_result(), list(reversed(range(2000))))

    def test_recursive_walk_stops_at_ceiling(self):
        config = TreeConfig(walk_mode=WalkMode.RECURSIVE, max_recursion_depth=5)
        tree = build_tree(range(10), config)
        with self.assertRaises(TreeDepthError):
            tree.get_sorted_data()

    def test_recursive_walk_within_ceiling(self):
        config = TreeConfig(walk_mode=WalkMode.RECURSIVE, max_recursion_depth=9)
        tree = build_tree(range(10), config)
        self.assertEqual(tree.get_sorted_data(), list(range(10)))

    def test_ceiling_above_interpreter_limit_still_raises_depth_error(self):
        limit = sys.getrecursionlimit()
        config = TreeConfig(walk_mode=WalkMode.RECURSIVE, max_recursion_depth=100000)
        tree = build_tree(range(limit + 200), config)
        with self.assertRaises(TreeDepthError) as ctx:
            tree.get_sorted_data()
        self.assertLess(ctx.exception.limit, limit)

    def test_effective_depth_never_exceeds_configured_ceiling(self):
        traverser = InorderTraverser(WalkMode.RECURSIVE, max_recursion_depth=10)
        self.assertEqual(traverser.effective_recursion_depth(), 10)
        huge = InorderTraverser(WalkMode.RECURSIVE, max_recursion_depth=10 ** 6)
        self.assertLess(huge.effective_recursion_depth(), sys.getrecursionlimit())


class TestWalkBuffer:
    """Test the accumulation buffer on its own."""

    def test_fill_and_clear(self):
        buffer = WalkBuffer("inorder")
        assert buffer.fill([1, 2], should_clear=True) == [1, 2]
        assert buffer.fill([3], should_clear=False) == [1, 2, 3]
        assert buffer.fill([4], should_clear=True) == [4]
        assert len(buffer) == 1

    def test_snapshot_is_a_copy(self):
        buffer = WalkBuffer()
        buffer.extend([1, 2, 3])
        snapshot = buffer.snapshot()
        snapshot.clear()
        assert list(buffer) == [1, 2, 3]

    def test_repr(self):
        buffer = WalkBuffer("preorder")
        buffer.extend("ab")
        assert repr(buffer) == "WalkBuffer('preorder', size=2)"


def test_depth_error_is_recursion_error():
    traverser = InorderTraverser(WalkMode.RECURSIVE, max_recursion_depth=1)
    tree = build_tree([1, 2, 3])
    with pytest.raises(RecursionError):
        list(traverser.traverse(tree.root))
