# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""Unbalanced binary search tree, used as the baseline for AVL comparisons"""

from __future__ import annotations
import logging
from typing import Optional

from avl_trees.base import AbstractOrderedTree, T

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


class BSTNode:
    """A node of the unbalanced tree: a value and two optional children."""
    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value,
        left: Optional[BSTNode] = None,
        right: Optional[BSTNode] = None
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self):
        return f"BSTNode(value={self.value!r})"


class BSTree(AbstractOrderedTree[T]):
    """
    A plain binary search tree without any rebalancing.

    It shares the public contract of AVLTree (duplicate-ignoring insert,
    silent removal of absent elements, UnderflowError on find_min/find_max of
    an empty tree) so both trees can be timed against the same workload.
    Depth is O(n) in the worst case, so insert and remove walk the tree
    iteratively.
    """
    __slots__ = ()

    NodeClass = BSTNode

    def insert(self, x: T) -> bool:
        if self._root is None:
            self._root = self.NodeClass(x)
            self._size += 1
            return True

        node = self._root
        while True:
            if x < node.value:
                if node.left is None:
                    node.left = self.NodeClass(x)
                    break
                node = node.left
            elif node.value < x:
                if node.right is None:
                    node.right = self.NodeClass(x)
                    break
                node = node.right
            else:
                logger.debug(f"insert(): {x!r} already in tree, ignored")
                return False

        self._size += 1
        return True

    def remove(self, x: T) -> bool:
        parent: Optional[BSTNode] = None
        node = self._root
        while node is not None:
            if x < node.value:
                parent, node = node, node.left
            elif node.value < x:
                parent, node = node, node.right
            else:
                break

        if node is None:
            logger.debug(f"remove(): {x!r} not in tree, ignored")
            return False

        if node.left is not None and node.right is not None:
            # two children: copy the in-order successor up, then splice the
            # successor (which has no left child) out of the right subtree
            parent = node
            successor = node.right
            while successor.left is not None:
                parent, successor = successor, successor.left
            node.value = successor.value
            node = successor

        replacement = node.left if node.left is not None else node.right
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

        self._size -= 1
        return True
