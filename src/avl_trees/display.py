"""Pretty-printing and display utilities for AVL tree structures."""

from __future__ import annotations

import collections
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from avl_trees.avl_tree_base import AVLTree


# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'


def print_pretty(tree: Optional[AVLTree], color: bool = False) -> str:
    """
    Renders an AVL tree so:
      • Lines go from the root (depth 0) down to the deepest level.
      • Within a line, keys appear left→right in in-order position.
      • Every key gets its own column, so a parent sits exactly above
        the column of its in-order position between its children.
    With ``color`` set, nodes whose balance factor is non-zero are
    highlighted.
    """
    from avl_trees.avl_tree_base import AVLTree

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, AVLTree):
        raise TypeError(f"print_pretty() expects AVLTree, got {type(tree).__name__}")

    if tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    # 1) First pass: assign every node its in-order column and depth
    layers = collections.defaultdict(list)  # depth -> list of (column, text, raw_len)
    max_len = 0
    column = 0

    def collect(node, depth):
        nonlocal column, max_len
        if node is None:
            return
        collect(node.left, depth + 1)

        text = str(node.key)
        raw_len = len(text)
        if color:
            lh = node.left.height if node.left else 0
            rh = node.right.height if node.right else 0
            if lh > rh:
                text = f"{SECONDARY}{text}{RESET}"
            elif rh > lh:
                text = f"{PRIMARY}{text}{RESET}"
        layers[depth].append((column, text, raw_len))
        max_len = max(max_len, raw_len)
        column += 1

        collect(node.right, depth + 1)

    collect(tree.root, 0)

    # 2) Second pass: place each text in its fixed-width column
    width = max_len + 1
    lines = []
    for depth in sorted(layers):
        line = ""
        cursor = 0
        for col, text, raw_len in layers[depth]:
            line += " " * ((col - cursor) * width)
            line += text + " " * (width - raw_len)
            cursor = col + 1
        lines.append(line.rstrip())

    return f"{type(tree).__name__} (size={tree.size()}, height={tree.height()}):\n" + "\n".join(lines)
