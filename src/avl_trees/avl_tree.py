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

"""AVL tree implementation"""

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


class AVLNode:
    """
    A node of an AVL tree.

    Attributes:
        value: The stored element.
        left (Optional[AVLNode]): Root of the left subtree, None if empty.
        right (Optional[AVLNode]): Root of the right subtree, None if empty.
        height (int): Longest path to an empty subtree; a leaf has height 0.
    """
    __slots__ = ("value", "left", "right", "height")

    def __init__(
        self,
        value,
        left: Optional[AVLNode] = None,
        right: Optional[AVLNode] = None
    ) -> None:
        self.value = value
        self.left = left
        self.right = right
        self.height = 0

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        return f"AVLNode(value={self.value!r}, height={self.height})"


def _height(node: Optional[AVLNode]) -> int:
    """Height of a subtree; -1 for an empty subtree."""
    return -1 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _swap_values(a: AVLNode, b: AVLNode) -> None:
    a.value, b.value = b.value, a.value


class AVLTree(AbstractOrderedTree[T]):
    """
    A height-balanced binary search tree.

    After every structural change each node on the path back to the root
    recomputes its height and is rebalanced, so that for every node the
    heights of its two subtrees differ by at most ALLOWED_IMBALANCE.

    Rotations relink the existing node shells and then swap the values of
    the two shells that changed depth. The shell at the top of the rotated
    subtree therefore stays the same object, and the parent's child
    reference never has to change.
    """
    __slots__ = ()

    NodeClass = AVLNode
    ALLOWED_IMBALANCE = 1

    # Public API
    def insert(self, x: T) -> bool:
        """
        Public method (O(log n)): Insert x into the tree; duplicates are ignored.

        Args:
            x: The element to insert.
        Returns:
            bool: True if x was inserted, False if an equal element exists.
        """
        if self.contains(x):
            logger.debug(f"insert(): {x!r} already in tree, ignored")
            return False
        self._root = self._insert(x, self._root)
        self._size += 1
        return True

    def remove(self, x: T) -> bool:
        """
        Public method (O(log n)): Remove x from the tree.

        Args:
            x: The element to remove.
        Returns:
            bool: True if x was removed, False if it was not in the tree.
        """
        if not self.contains(x):
            logger.debug(f"remove(): {x!r} not in tree, ignored")
            return False
        self._root = self._remove(x, self._root)
        self._size -= 1
        return True

    def height(self) -> int:
        return _height(self._root)

    # Private Methods
    def _insert(self, x: T, t: Optional[AVLNode]) -> AVLNode:
        """Insert x into the subtree rooted at t and return its new root."""
        if t is None:
            return self.NodeClass(x)

        if x < t.value:
            t.left = self._insert(x, t.left)
        elif t.value < x:
            t.right = self._insert(x, t.right)
        return self._balance(t)

    def _remove(self, x: T, t: Optional[AVLNode]) -> Optional[AVLNode]:
        """Remove x from the subtree rooted at t and return its new root."""
        if t is None:
            return None

        if x < t.value:
            t.left = self._remove(x, t.left)
        elif t.value < x:
            t.right = self._remove(x, t.right)
        else:
            # leaf or one child: splice out
            if t.left is None:
                return t.right
            if t.right is None:
                return t.left
            # two children: take over the in-order successor's value, then
            # remove that value from the right subtree
            successor = self._find_min(t.right)
            t.value = successor.value
            t.right = self._remove(successor.value, t.right)

        _update_height(t)
        if t.is_leaf():
            return t
        return self._balance(t)

    def _balance(self, t: Optional[AVLNode]) -> Optional[AVLNode]:
        """
        Restore the height invariant at t, assuming its subtrees differ in
        height by at most ALLOWED_IMBALANCE + 1.

        On a tie between the outer and inner grandchild the single rotation
        is chosen.
        """
        if t is None:
            return t

        if _height(t.left) - _height(t.right) > self.ALLOWED_IMBALANCE:
            if _height(t.left.left) >= _height(t.left.right):
                t = self._rotate_with_left_child(t)
            else:
                t = self._double_with_left_child(t)
        elif _height(t.right) - _height(t.left) > self.ALLOWED_IMBALANCE:
            if _height(t.right.right) >= _height(t.right.left):
                t = self._rotate_with_right_child(t)
            else:
                t = self._double_with_right_child(t)

        _update_height(t)
        return t

    def _rotate_with_left_child(self, k2: AVLNode) -> AVLNode:
        """
        Single rotation for a left-left imbalance.

                k2               k2 (k1's value)
              k1   Z    ->     X     k1 (k2's value)
             X  Y                  Y     Z
        """
        k1 = k2.left
        x, y, z = k1.left, k1.right, k2.right

        k2.left = x
        k2.right = k1
        k1.left = y
        k1.right = z

        _update_height(k1)
        _update_height(k2)

        _swap_values(k1, k2)
        return k2

    def _rotate_with_right_child(self, k1: AVLNode) -> AVLNode:
        """
        Single rotation for a right-right imbalance.

              k1                    k1 (k2's value)
            X    k2      ->    k2 (k1's value)   Z
               Y    Z        X    Y
        """
        k2 = k1.right
        x, y, z = k1.left, k2.left, k2.right

        k1.left = k2
        k1.right = z
        k2.left = x
        k2.right = y

        _update_height(k2)
        _update_height(k1)

        _swap_values(k1, k2)
        return k1

    def _double_with_left_child(self, k3: AVLNode) -> AVLNode:
        """
        Double rotation for a left-right imbalance.

                 k3                    k3 (k2's value)
              k1     D      ->     k1       k2 (k3's value)
             A  k2                A  B     C  D
               B  C
        """
        k1 = k3.left
        k2 = k1.right
        a, b, c, d = k1.left, k2.left, k2.right, k3.right

        k3.left = k1
        k3.right = k2
        k1.left = a
        k1.right = b
        k2.left = c
        k2.right = d

        _update_height(k1)
        _update_height(k2)
        _update_height(k3)

        _swap_values(k2, k3)
        return k3

    def _double_with_right_child(self, k1: AVLNode) -> AVLNode:
        """
        Double rotation for a right-left imbalance.

              k1                         k1 (k2's value)
            A     k3        ->     k2 (k1's value)   k3
                k2   D            A  B             C  D
               B  C
        """
        k3 = k1.right
        k2 = k3.left
        a, b, c, d = k1.left, k2.left, k2.right, k3.right

        k1.left = k2
        k1.right = k3
        k2.left = a
        k2.right = b
        k3.left = c
        k3.right = d

        _update_height(k2)
        _update_height(k3)
        _update_height(k1)

        _swap_values(k1, k2)
        return k1
