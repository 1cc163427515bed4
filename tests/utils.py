"""Utility functions for testing tree invariants."""

from avl_trees.base import AbstractOrderedTree
from avl_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "heights_consistent",
)

BALANCED_TREE_FLAGS = TREE_FLAGS + ("is_balanced",)


def assert_tree_invariants_tc(tc, t: AbstractOrderedTree, stats: Stats, balanced: bool = True) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in (BALANCED_TREE_FLAGS if balanced else TREE_FLAGS):
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False\n{t.print_structure()}"
        )

    tc.assertEqual(
        stats.node_count, len(t),
        f"Invariant failed: node_count={stats.node_count} ≠ len(tree)={len(t)}"
    )

    if t.is_empty():
        tc.assertEqual(stats.height, -1, "Empty tree must have height -1")
        tc.assertIsNone(stats.least_item)
        tc.assertIsNone(stats.greatest_item)
    else:
        tc.assertEqual(
            stats.height, t.height(),
            f"Invariant failed: recomputed height {stats.height} ≠ t.height()={t.height()}"
        )
        tc.assertEqual(stats.least_item, t.find_min(),
                       "Invariant failed: least item differs from find_min()")
        tc.assertEqual(stats.greatest_item, t.find_max(),
                       "Invariant failed: greatest item differs from find_max()")
