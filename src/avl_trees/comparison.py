"""
Timed comparison of the AVL tree against the unbalanced baseline.

One comparison run measures, for a randomized and for a sorted insertion
order, how long it takes to insert all elements into each tree and then to
look every element up again. Timings are integer nanoseconds.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from typing import Callable, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from avl_trees.base import AbstractOrderedTree
from avl_trees.factory import create_tree
from avl_trees.profiling import measure

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 91


@dataclass
class ComparisonResult:
    """Timings of a single comparison run, in nanoseconds."""
    num_lines: int
    bst_rand_insert: int
    avl_rand_insert: int
    bst_rand_search: int
    avl_rand_search: int
    bst_sort_insert: int
    avl_sort_insert: int
    bst_sort_search: int
    avl_sort_search: int

    def csv_line(self) -> str:
        """All fields, comma separated, in declaration order."""
        return ",".join(str(getattr(self, f.name)) for f in fields(self))

    def report(self, dataset_size: Optional[int] = None) -> str:
        read = f"{self.num_lines}/{dataset_size}" if dataset_size else f"{self.num_lines}"
        return "\n".join([
            SEPARATOR,
            f"Number of lines read from dataset: {read}",
            f"Randomized dataset (insertion): BST ({self.bst_rand_insert} nsec) "
            f"vs AVL ({self.avl_rand_insert} nsec)",
            f"Randomized dataset (search): BST ({self.bst_rand_search} nsec) "
            f"vs AVL ({self.avl_rand_search} nsec)",
            f"Sorted dataset (insertion): BST ({self.bst_sort_insert} nsec) "
            f"vs AVL ({self.avl_sort_insert} nsec)",
            f"Sorted dataset (search): BST ({self.bst_sort_search} nsec) "
            f"vs AVL ({self.avl_sort_search} nsec)",
            SEPARATOR,
        ])


def time_batch(tag: str, op: Callable[[object], object], elements: Sequence) -> int:
    """Apply op to every element and return the elapsed nanoseconds."""
    with measure(tag) as m:
        for x in elements:
            op(x)
    return m.elapsed_ns


def _time_scenario(scenario: str, elements: Sequence) -> List[int]:
    """
    Build a fresh BST and AVL tree from elements in the given order.

    Returns:
        [bst_insert, avl_insert, bst_search, avl_search] in nanoseconds.
    """
    bst: AbstractOrderedTree = create_tree("bst")
    avl: AbstractOrderedTree = create_tree("avl")

    bst_insert = time_batch(f"bst/{scenario}/insert", bst.insert, elements)
    avl_insert = time_batch(f"avl/{scenario}/insert", avl.insert, elements)
    bst_search = time_batch(f"bst/{scenario}/search", bst.contains, elements)
    avl_search = time_batch(f"avl/{scenario}/search", avl.contains, elements)

    logger.debug(
        f"{scenario}: bst height={bst.height()}, avl height={avl.height()}, n={len(avl)}"
    )
    return [bst_insert, avl_insert, bst_search, avl_search]


def run_comparison(
    elements: Sequence,
    num_lines: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> ComparisonResult:
    """
    Time insert and search on both trees for a shuffled and a sorted input.

    Parameters:
        elements: The elements to insert; any mutually comparable values.
        num_lines: Value reported in the first CSV column. Defaults to
            len(elements) + 1 (the element rows plus a header line).
        rng: Source of randomness for the shuffle.

    Returns:
        ComparisonResult: The eight timings.
    """
    if rng is None:
        rng = np.random.default_rng()
    if num_lines is None:
        num_lines = len(elements) + 1

    shuffled = [elements[i] for i in rng.permutation(len(elements))]
    rand_timings = _time_scenario("random", shuffled)
    sort_timings = _time_scenario("sorted", sorted(elements))

    return ComparisonResult(num_lines, *rand_timings, *sort_timings)


def run_trials(
    elements: Sequence,
    num_lines: Optional[int] = None,
    trials: int = 1,
    seed: Optional[int] = None,
    progress: bool = True,
) -> List[ComparisonResult]:
    """Repeat run_comparison trials times with one seeded generator."""
    if trials < 1:
        raise ValueError(f"run_trials(): trials must be >= 1, got {trials}")
    rng = np.random.default_rng(seed)
    return [
        run_comparison(elements, num_lines, rng)
        for _ in tqdm(range(trials), desc="comparison runs", disable=not progress)
    ]


def append_results(path: str, result: ComparisonResult) -> None:
    """Append the result as one CSV line to path."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(result.csv_line() + "\n")
    logger.info(f"Appended results to {path}")
