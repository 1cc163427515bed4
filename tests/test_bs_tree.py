"""Tests for the unbalanced baseline tree"""
# pylint: skip-file

import unittest

from avl_trees.bs_tree import BSTree, BSTNode
from tests.tree_base import TreeTestCase, OrderedTreeContract


class TestBSTreeContract(OrderedTreeContract, TreeTestCase):
    KIND = "bst"
    BALANCED = False

    def test_factory_returns_bs_tree(self):
        self.assertIsInstance(self.tree, BSTree)


class TestBSTreeShape(TreeTestCase):
    KIND = "bst"
    BALANCED = False

    def test_no_rotation_on_ascending_insert(self):
        self.insert_all([10, 20, 30])
        self.assertEqual(self.tree.level_order(), [10, None, 20, None, 30])
        self.assertEqual(self.tree.height(), 2)
        self.expected_values = [10, 20, 30]

    def test_no_rotation_on_zig_zag_insert(self):
        self.insert_all([30, 10, 20])
        self.assertEqual(self.tree.level_order(), [30, 10, None, None, 20])
        self.expected_values = [10, 20, 30]

    def test_long_sorted_chain_does_not_recurse(self):
        n = 3000
        self.insert_all(range(n))
        self.assertEqual(self.tree.height(), n - 1)
        self.assertTrue(self.tree.contains(n - 1))
        self.assertTrue(self.tree.remove(0))
        self.assertEqual(self.tree.find_min(), 1)
        self.assertEqual(sum(1 for _ in self.tree.traverse()), n - 1)
        self.expected_values = range(1, n)

    def test_remove_root_with_two_children_deep_successor(self):
        self.insert_all([50, 30, 80, 60, 90, 55, 65, 57])
        self.assertTrue(self.tree.remove(50))
        # 55 is the leftmost node of the right subtree; its right child 57 moves up
        self.assertEqual(self.tree.level_order()[0], 55)
        self.assertEqual(self.tree._root.right.left.left.value, 57)
        self.expected_values = [30, 55, 57, 60, 65, 80, 90]

    def test_remove_root_with_single_child(self):
        self.insert_all([1, 2, 3])
        self.assertTrue(self.tree.remove(1))
        self.assertEqual(self.tree.level_order(), [2, None, 3])
        self.expected_values = [2, 3]


class TestBSTNode(unittest.TestCase):

    def test_node_has_no_height(self):
        node = BSTNode(3)
        self.assertFalse(hasattr(node, "height"))
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)


if __name__ == "__main__":
    unittest.main()
