"""
avl_trees — Ordered maps on size-augmented AVL trees.

Quick-start imports::

    from avl_trees import AVLTree

    tree = AVLTree()
    tree.put(5, "five")
    assert tree.get(5) == "five" and tree.rep_ok()
"""

from avl_trees.avl_tree_base import AVLNode, AVLTree
from avl_trees.base import AbstractMapDataStructure
from avl_trees.display import print_pretty
from avl_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_and_values,
    max_avl_height,
)
from avl_trees.logging_config import get_logger, setup_logging
from avl_trees.tree_stats import Stats, avl_stats_

__all__ = [
    # Core
    "AVLNode",
    "AVLTree",
    "AbstractMapDataStructure",
    # Stats & invariants
    "InvariantError",
    "Stats",
    "assert_tree_invariants_raise",
    "avl_stats_",
    "check_keys_and_values",
    "max_avl_height",
    # Display & logging
    "get_logger",
    "print_pretty",
    "setup_logging",
]
