"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from avl_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTree
    from avl_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "is_balanced",
    "heights_consistent",
    "sizes_consistent",
    "keys_in_order",
)


class InvariantError(Exception):
    """Raised when an AVL tree invariant is violated."""


def max_avl_height(n: int) -> int:
    """Largest height an AVL tree with n nodes can have (a single node has height 1)."""
    if n < 0:
        raise ValueError(f"max_avl_height(): n must be >= 0, got {n}")
    # fewest nodes for height h: N(h) = N(h-1) + N(h-2) + 1, N(0) = 0, N(1) = 1
    height, prev_minimal, minimal = 0, 0, 1
    while minimal <= n:
        height += 1
        prev_minimal, minimal = minimal, minimal + prev_minimal + 1
    return height


def perfect_height(n: int) -> int:
    """Height of a perfectly balanced binary tree with n nodes."""
    return math.ceil(math.log2(n + 1)) if n > 0 else 0


def assert_tree_invariants_raise(
    t: AVLTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if stats.node_count != t.size():
        raise InvariantError(
            f"Invariant failed: t.size()={t.size()} ≠ stats.node_count={stats.node_count}"
        )

    if stats.height != t.height():
        raise InvariantError(
            f"Invariant failed: t.height()={t.height()} ≠ stats.height={stats.height}"
        )

    bound = max_avl_height(stats.node_count)
    if stats.height > bound:
        raise InvariantError(
            f"Invariant failed: height={stats.height} exceeds AVL bound {bound} for n={stats.node_count}"
        )

    if not t.is_empty():
        if stats.least_key is None:
            raise InvariantError("Invariant failed: least_key is None for non-empty tree")
        if stats.greatest_key is None:
            raise InvariantError("Invariant failed: greatest_key is None for non-empty tree")


def check_keys_and_values(
    tree: AVLTree,
    expected_keys: list | None = None,
) -> tuple[list, bool, bool, bool]:
    """Walk the tree in order and validate keys / values.

    Returns
    -------
    (keys, presence_ok, all_have_values, order_ok)
    """
    keys: list = []
    all_have_values = True
    order_ok = True

    prev_key = None
    for key, value in tree.items():
        if value is None:
            all_have_values = False
        if prev_key is not None and not prev_key < key:
            order_ok = False
        keys.append(key)
        prev_key = key

    presence_ok = True
    if expected_keys is not None:
        if len(keys) != len(expected_keys):
            presence_ok = False
        else:
            presence_ok = set(keys) == set(expected_keys)

    if not (presence_ok and order_ok):
        logger.debug("check_keys_and_values: presence_ok=%s order_ok=%s", presence_ok, order_ok)

    return keys, presence_ok, all_have_values, order_ok
