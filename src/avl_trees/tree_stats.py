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

"""Aggregated structural statistics and invariant checks for ordered trees."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from avl_trees.base import AbstractOrderedTree


@dataclass
class Stats:
    node_count: int
    height: int
    least_item: Optional[Any]
    greatest_item: Optional[Any]
    is_search_tree: bool
    is_balanced: bool
    max_imbalance: int
    heights_consistent: bool


def tree_stats_(t: AbstractOrderedTree) -> Stats:
    """
    Returns aggregated statistics for an ordered tree in **O(n)** time.

    Heights are recomputed from the structure (empty subtree = -1) with an
    iterative post-order walk, so degenerate chains are fine. Nodes that
    carry a ``height`` slot are checked against the recomputed value.
    """
    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        return Stats(node_count         = 0,
                     height             = -1,
                     least_item         = None,
                     greatest_item      = None,
                     is_search_tree     = True,
                     is_balanced        = True,
                     max_imbalance      = 0,
                     heights_consistent = True)

    heights: Dict[int, int] = {}

    def height_of(node) -> int:
        return -1 if node is None else heights[id(node)]

    node_count = 0
    max_imbalance = 0
    heights_consistent = True

    stack = [(t._root, False)]
    while stack:
        node, children_done = stack.pop()
        if node is None:
            continue
        if not children_done:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
            continue

        hl = height_of(node.left)
        hr = height_of(node.right)
        h = 1 + max(hl, hr)
        heights[id(node)] = h

        node_count += 1
        max_imbalance = max(max_imbalance, abs(hl - hr))
        if hasattr(node, "height") and node.height != h:
            heights_consistent = False

    # ---------- order check on the in-order sequence ---------------
    is_search_tree = True
    least = greatest = None
    first = True
    for value in t.traverse():
        if first:
            least = value
            first = False
        elif not greatest < value:
            is_search_tree = False
        greatest = value

    return Stats(node_count         = node_count,
                 height             = height_of(t._root),
                 least_item         = least,
                 greatest_item      = greatest,
                 is_search_tree     = is_search_tree,
                 is_balanced        = max_imbalance <= 1,
                 max_imbalance      = max_imbalance,
                 heights_consistent = heights_consistent)
