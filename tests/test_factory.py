"""Tests for the tree factory"""
# pylint: skip-file

import unittest

from avl_trees.factory import make_tree_class, create_tree, TREE_KINDS
from avl_trees.avl_tree import AVLTree
from avl_trees.bs_tree import BSTree


class TestFactory(unittest.TestCase):

    def test_kinds(self):
        self.assertEqual(set(TREE_KINDS), {"avl", "bst"})

    def test_make_tree_class(self):
        self.assertIs(make_tree_class("avl"), AVLTree)
        self.assertIs(make_tree_class("bst"), BSTree)

    def test_unknown_kind(self):
        with self.assertRaises(ValueError) as cm:
            make_tree_class("red-black")
        self.assertIn("red-black", str(cm.exception))

    def test_create_tree_default_is_avl(self):
        tree = create_tree()
        self.assertIsInstance(tree, AVLTree)
        self.assertTrue(tree.is_empty())

    def test_create_tree_returns_fresh_instances(self):
        a = create_tree("bst")
        b = create_tree("bst")
        a.insert(1)
        self.assertIsNot(a, b)
        self.assertTrue(b.is_empty())


if __name__ == "__main__":
    unittest.main()
