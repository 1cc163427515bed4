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

"""Shared contract for the ordered binary search trees."""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class UnderflowError(LookupError):
    """Raised when an extremal element is requested from an empty tree."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}(): tree is empty")
        self.operation = operation


class AbstractOrderedTree(ABC, Generic[T]):
    """
    Abstract base class for an ordered binary search tree over elements of a
    strictly totally ordered type.

    Elements are compared with ``<`` only; two elements are considered equal
    when neither is less than the other. Subclasses set ``NodeClass`` and
    implement the two mutating operations, everything that only reads the
    node graph lives here.

    Attributes:
        _root: The root node, or None if the tree is empty.
        _size: Number of elements currently stored.
    """
    __slots__ = ("_root", "_size")

    # set by subclasses
    NodeClass: type

    def __init__(self) -> None:
        self._root = None
        self._size: int = 0

    # Mutating API
    @abstractmethod
    def insert(self, x: T) -> bool:
        """
        Insert x into the tree. Duplicates are ignored.

        Parameters:
            x: The element to insert.

        Returns:
            bool: True if x was added, False if an equal element was present.
        """
        pass

    @abstractmethod
    def remove(self, x: T) -> bool:
        """
        Remove x from the tree. Nothing is done if x is not found.

        Parameters:
            x: The element to remove.

        Returns:
            bool: True if x was removed, False if it was not present.
        """
        pass

    # Read-only API
    def contains(self, x: T) -> bool:
        """Return True if an element equal to x is stored in the tree."""
        node = self._root
        while node is not None:
            if x < node.value:
                node = node.left
            elif node.value < x:
                node = node.right
            else:
                return True
        return False

    def find_min(self) -> T:
        """
        Return the smallest element.

        Raises:
            UnderflowError: If the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_min")
        return self._find_min(self._root).value

    def find_max(self) -> T:
        """
        Return the largest element.

        Raises:
            UnderflowError: If the tree is empty.
        """
        if self.is_empty():
            raise UnderflowError("find_max")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def is_empty(self) -> bool:
        return self._root is None

    def make_empty(self) -> None:
        """Release the whole node graph."""
        self._root = None
        self._size = 0

    def traverse(self) -> Iterator[T]:
        """
        Lazily yield all elements in ascending order (in-order walk).

        The walk uses an explicit stack, so it does not depend on the
        recursion limit for degenerate trees. Mutating the tree while the
        generator is suspended is not supported; call traverse() again to
        restart from the smallest element.
        """
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def height(self) -> int:
        """
        Height of the tree: -1 for an empty tree, 0 for a single leaf.
        Computed level by level.
        """
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def level_order(self) -> List[Optional[T]]:
        """
        Return the breadth-first sequence of values, using None for missing
        children. Trailing None placeholders are trimmed.
        """
        if self._root is None:
            return []
        result: List[Optional[T]] = []
        queue: Deque = deque([self._root])
        while queue:
            node = queue.popleft()
            if node is None:
                result.append(None)
                continue
            result.append(node.value)
            queue.append(node.left)
            queue.append(node.right)
        while result and result[-1] is None:
            result.pop()
        return result

    def print_structure(self, indent: int = 0, max_depth: Optional[int] = None) -> str:
        """
        Render the tree sideways as an indented string, right subtree on top,
        so that reading the lines bottom-up gives ascending order.
        """
        prefix = ' ' * indent
        if self.is_empty():
            return f"{prefix}Empty {self.__class__.__name__}"

        lines = []
        stack = [(self._root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if node is None:
                continue
            if max_depth is not None and depth > max_depth:
                lines.append(f"{prefix}{'    ' * depth}... (max depth reached)")
                continue
            if expanded:
                label = repr(node.value)
                if hasattr(node, "height"):
                    label += f" (h={node.height})"
                lines.append(f"{prefix}{'    ' * depth}{label}")
                continue
            # right subtree first, then the node, then the left subtree
            stack.append((node.left, depth + 1, False))
            stack.append((node, depth, True))
            stack.append((node.right, depth + 1, False))
        return "\n".join(lines)

    def print_tree(self) -> str:
        """Return the elements in ascending order, one per line, or "Empty tree"."""
        if self.is_empty():
            return "Empty tree"
        return "\n".join(str(x) for x in self.traverse())

    # Private Methods
    def _find_min(self, node):
        """Return the leftmost node of the subtree rooted at node."""
        while node.left is not None:
            node = node.left
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, x: object) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterator[T]:
        return self.traverse()

    def __str__(self):
        if self.is_empty():
            return f"Empty {self.__class__.__name__}"
        return f"{self.__class__.__name__}(size={self._size}, height={self.height()})"

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self.traverse())!r})"
