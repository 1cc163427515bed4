"""
Ordered binary search trees: a height-balanced AVL tree and the unbalanced
binary search tree it is benchmarked against.
"""

from avl_trees.base import (
    AbstractOrderedTree,
    UnderflowError,
)
from avl_trees.avl_tree import AVLNode, AVLTree
from avl_trees.bs_tree import BSTNode, BSTree
from avl_trees.factory import create_tree, make_tree_class
from avl_trees.tree_stats import Stats, tree_stats_

__all__ = [
    'AbstractOrderedTree',
    'UnderflowError',
    'AVLNode',
    'AVLTree',
    'BSTNode',
    'BSTree',
    'create_tree',
    'make_tree_class',
    'Stats',
    'tree_stats_',
]
