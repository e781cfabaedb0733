"""Utility functions for testing AVL tree invariants."""

from typing import Optional

from avl_trees.avl_tree_base import AVLTree
from avl_trees.invariants import TREE_FLAGS, max_avl_height
from avl_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: AVLTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    tc.assertTrue(t.rep_ok(), f"Invariant failed: rep_ok() is False\n\n{err_msg}")

    tc.assertEqual(
        t.size(), stats.node_count,
        f"Invariant failed: size()={t.size()} ≠ node_count={stats.node_count}\n\n{err_msg}"
    )
    tc.assertEqual(
        t.height(), stats.height,
        f"Invariant failed: height()={t.height()} ≠ height={stats.height}\n\n{err_msg}"
    )
    tc.assertLessEqual(
        stats.height, max_avl_height(stats.node_count),
        f"Invariant failed: height={stats.height} above AVL bound for n={stats.node_count}\n\n{err_msg}"
    )

    if not t.is_empty():
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertEqual(stats.least_key, t.min_key(), err_msg)
        tc.assertEqual(stats.greatest_key, t.max_key(), err_msg)
        tc.assertLessEqual(stats.max_abs_balance, 1, err_msg)
