"""Statistics and invariant checking for AVL tree structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from avl_trees.logging_config import get_logger

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLNode, AVLTree

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for an AVL tree (or subtree)."""

    node_count: int
    height: int
    least_key: Any | None
    greatest_key: Any | None
    max_abs_balance: int
    is_search_tree: bool
    is_balanced: bool
    heights_consistent: bool
    sizes_consistent: bool
    keys_in_order: bool = True


def _empty_stats() -> Stats:
    return Stats(
        node_count=0,
        height=0,
        least_key=None,
        greatest_key=None,
        max_abs_balance=0,
        is_search_tree=True,
        is_balanced=True,
        heights_consistent=True,
        sizes_consistent=True,
        keys_in_order=True,
    )


def _node_stats(node: AVLNode | None) -> Stats:
    # ---------- empty subtree ---------------------------------
    if node is None:
        return _empty_stats()

    left = _node_stats(node.left)
    right = _node_stats(node.right)

    # ---------- aggregate from children -----------------------
    # Heights and counts are recomputed from the structure, never read from
    # the cached fields, so stale caches show up as inconsistencies.
    height = 1 + max(left.height, right.height)
    node_count = 1 + left.node_count + right.node_count
    balance = left.height - right.height

    stats = Stats(
        node_count=node_count,
        height=height,
        least_key=left.least_key if left.node_count else node.key,
        greatest_key=right.greatest_key if right.node_count else node.key,
        max_abs_balance=max(abs(balance), left.max_abs_balance, right.max_abs_balance),
        is_search_tree=left.is_search_tree and right.is_search_tree,
        is_balanced=left.is_balanced and right.is_balanced and abs(balance) <= 1,
        heights_consistent=(
            left.heights_consistent and right.heights_consistent and node.height == height
        ),
        sizes_consistent=(
            left.sizes_consistent and right.sizes_consistent and node.size == node_count
        ),
    )

    # Search tree property: greatest key on the left and least key on the
    # right must be strictly on either side of this node's key.
    if stats.is_search_tree:
        if left.node_count and not left.greatest_key < node.key:
            stats.is_search_tree = False
        elif right.node_count and not node.key < right.least_key:
            stats.is_search_tree = False

    return stats


def avl_stats_(t: AVLTree | None) -> Stats:
    """
    Returns aggregated statistics for an AVL tree in **O(n)** time.

    Every derived quantity is computed from the link structure, so the result
    can be compared against the tree's cached ``height`` and ``size`` fields.
    """
    if t is None or t.is_empty():
        return _empty_stats()

    stats = _node_stats(t.root)

    # ---------- in-order walk ONCE at the root ----------------
    prev_key = None
    for key in t.keys():
        if prev_key is not None and not prev_key < key:
            stats.keys_in_order = False
            break
        prev_key = key

    if not (stats.is_search_tree and stats.is_balanced):
        logger.debug(
            "avl_stats_: structural violation (search_tree=%s, balanced=%s, max_abs_balance=%d)",
            stats.is_search_tree, stats.is_balanced, stats.max_abs_balance,
        )

    return stats
