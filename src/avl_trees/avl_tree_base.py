"""AVL tree base implementation"""

from __future__ import annotations
from typing import Any, Iterator, List, Optional, Tuple

from avl_trees.base import (
    AbstractMapDataStructure,
    _require_not_none,
    debug_log,
)


class AVLNode:
    """
    A node of an AVL tree.

    Besides key, value and the two child links, every node caches the height
    and the number of nodes of the subtree rooted at it. Both are derived from
    the children and must be refreshed with ``update()`` whenever a child link
    changes.
    """
    __slots__ = ("key", "value", "left", "right", "height", "size")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[AVLNode] = None
        self.right: Optional[AVLNode] = None
        self.height = 1
        self.size = 1

    def update(self) -> None:
        """Recompute height and size from the current children."""
        self.height = 1 + max(_height(self.left), _height(self.right))
        self.size = 1 + _size(self.left) + _size(self.right)

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return (f"{cls}(key={self.key!r}, value={self.value!r}, "
                f"height={self.height}, size={self.size})")


def _height(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.height


def _size(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.size


def _balance_factor(node: Optional[AVLNode]) -> int:
    """height(left) - height(right); 0 for an empty subtree."""
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: AVLNode) -> AVLNode:
    while node.right is not None:
        node = node.right
    return node


def _rotate_right(x: AVLNode) -> AVLNode:
    """
    Lift x.left above x and return it as the new subtree root.

            x                y
           / \\             / \\
          y   c    ->      a   x
         / \\                  / \\
        a   b                 b   c
    """
    debug_log("rotate_right at key=%r", x.key)
    y = x.left
    x.left = y.right
    y.right = x
    # x is now below y, so it must be refreshed first
    x.update()
    y.update()
    return y


def _rotate_left(x: AVLNode) -> AVLNode:
    """Mirror image of ``_rotate_right``: lift x.right above x."""
    debug_log("rotate_left at key=%r", x.key)
    y = x.right
    x.right = y.left
    y.left = x
    x.update()
    y.update()
    return y


def _rebalance(node: AVLNode) -> AVLNode:
    """
    Restore the AVL balance condition at node and return the subtree root.

    Both children of node must already be balanced, so the balance factor of
    node is at most ±2 here. Left-right and right-left cases are reduced to
    the outer cases by first rotating the heavy child.
    """
    balance = _balance_factor(node)
    if balance > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree(AbstractMapDataStructure):
    """
    An ordered map backed by an AVL tree augmented with subtree sizes.

    Keys must share a total order (``<`` and ``>``); two keys that compare
    equal are the same key, so the last ``put`` wins. ``None`` is reserved as
    the absence sentinel and is accepted neither as key nor as value.

    Attributes:
        root (Optional[AVLNode]): The root node. If None, the tree is empty.
    """
    __slots__ = ("root",)

    def __init__(self, items=None):
        self.root: Optional[AVLNode] = None
        if items is not None:
            for key, value in items:
                self.put(key, value)

    def is_empty(self) -> bool:
        return self.root is None

    def size(self) -> int:
        """Number of stored keys in O(1), read from the root's cached size."""
        return _size(self.root)

    def height(self) -> int:
        """Height of the tree in O(1); 0 when empty."""
        return _height(self.root)

    def __len__(self) -> int:
        return _size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def __str__(self):
        if self.is_empty():
            return "Empty AVLTree"
        return f"AVLTree(size={self.size()}, height={self.height()})"

    __repr__ = __str__

    # Public API
    def get(self, key: Any, default: Any = None) -> Any:
        """
        Look up the value stored under key.

        Iterative descent from the root in O(log n). A missing key is not an
        error.

        Args:
            key: The key to search for.
            default: Returned if key is not present.

        Returns:
            The stored value, or default.

        Raises:
            TypeError: If key is None.
        """
        _require_not_none("get", key=key)
        node = self._find_node(key)
        if node is None:
            return default
        return node.value

    def contains(self, key: Any) -> bool:
        _require_not_none("contains", key=key)
        return self._find_node(key) is not None

    def put(self, key: Any, value: Any) -> None:
        """
        Insert key with value, or replace the value if key is present.

        Args:
            key: The key to insert.
            value: The value to associate with key.

        Raises:
            TypeError: If key or value is None. The tree is left untouched.
        """
        _require_not_none("put", key=key, value=value)
        self.root = self._put(self.root, key, value)

    def remove(self, key: Any) -> None:
        """
        Remove key from the tree. Removing a missing key is a no-op.

        Raises:
            TypeError: If key is None.
        """
        _require_not_none("remove", key=key)
        self.root = self._remove(self.root, key)

    def clear(self) -> None:
        debug_log("clear: dropping %d nodes", self.size())
        self.root = None

    def keys(self) -> List[Any]:
        """Snapshot of all keys in ascending order."""
        return [node.key for node in self._iter_inorder(self.root)]

    def values(self) -> List[Any]:
        """Snapshot of all values, ordered by key."""
        return [node.value for node in self._iter_inorder(self.root)]

    def items(self) -> List[Tuple[Any, Any]]:
        """Snapshot of all (key, value) pairs in ascending key order."""
        return [(node.key, node.value) for node in self._iter_inorder(self.root)]

    # Mapping protocol
    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Any) -> Any:
        _require_not_none("__getitem__", key=key)
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        _require_not_none("__delitem__", key=key)
        if self._find_node(key) is None:
            raise KeyError(key)
        self.root = self._remove(self.root, key)

    def __iter__(self) -> Iterator[Any]:
        # iterate a snapshot so that mutation cannot disturb the walk
        return iter(self.keys())

    # Order statistics
    def select(self, i: int) -> Any:
        """
        Return the i-th smallest key (0-based) in O(log n).

        Negative indices count from the largest key, as for lists.

        Raises:
            IndexError: If the tree is empty or i is out of range.
        """
        if not isinstance(i, int):
            raise TypeError(f"select(): index must be an int, got {type(i).__name__}")
        n = self.size()
        if i < 0:
            i += n
        if i < 0 or i >= n:
            raise IndexError(f"select(): index out of range for tree of size {n}")

        node = self.root
        while True:
            left_size = _size(node.left)
            if i < left_size:
                node = node.left
            elif i > left_size:
                i -= left_size + 1
                node = node.right
            else:
                return node.key

    def rank(self, key: Any) -> int:
        """Number of stored keys strictly less than key. key need not be present."""
        _require_not_none("rank", key=key)
        r = 0
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                r += _size(node.left) + 1
                node = node.right
            else:
                return r + _size(node.left)
        return r

    def min_key(self) -> Any:
        """Smallest key. Raises IndexError if the tree is empty."""
        if self.root is None:
            raise IndexError("min_key(): tree is empty")
        return _min_node(self.root).key

    def max_key(self) -> Any:
        """Largest key. Raises IndexError if the tree is empty."""
        if self.root is None:
            raise IndexError("max_key(): tree is empty")
        return _max_node(self.root).key

    # Diagnostics
    def rep_ok(self) -> bool:
        """
        Check the representation invariants of the whole tree.

        Verifies strict BST ordering (bounds tightened at each descent), the
        AVL balance condition and that every cached height and size matches a
        recomputation from the node's children. Intended as a test oracle;
        never called by the mutating operations.
        """
        return self._check_invariants(self.root, None, None)

    repOK = rep_ok

    def print_structure(self, indent: int = 0, depth: int = 0, max_depth: Optional[int] = None):
        """
        Returns a string representation of the tree for debugging.

        Parameters:
            indent (int): Number of spaces for indentation.
            depth (int): Depth at which the dump starts.
            max_depth (Optional[int]): Maximum depth to print, unlimited if None.
        """
        prefix = ' ' * indent
        if self.is_empty():
            return f"{prefix}Empty {self.__class__.__name__}"

        result = [f"{prefix}{self}"]
        self._structure_lines(self.root, "Root", indent + 2, depth, max_depth, result)
        return "\n".join(result)

    # Private Methods
    def _find_node(self, key: Any) -> Optional[AVLNode]:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def _put(self, node: Optional[AVLNode], key: Any, value: Any) -> AVLNode:
        if node is None:
            return AVLNode(key, value)

        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif key > node.key:
            node.right = self._put(node.right, key, value)
        else:
            # value-only change, shape and derived fields are unaffected
            node.value = value
            return node

        node.update()
        return _rebalance(node)

    def _remove(self, node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        else:
            if node.left is None:
                debug_log("remove: splicing out key=%r", node.key)
                return node.right
            if node.right is None:
                debug_log("remove: splicing out key=%r", node.key)
                return node.left

            # Two children: take over the in-order successor's entry, then
            # delete the successor, which has no left child.
            successor = _min_node(node.right)
            debug_log("remove: replacing key=%r with successor key=%r", node.key, successor.key)
            node.key = successor.key
            node.value = successor.value
            node.right = self._remove(node.right, successor.key)

        node.update()
        return _rebalance(node)

    def _iter_inorder(self, node: Optional[AVLNode]) -> Iterator[AVLNode]:
        stack: List[AVLNode] = []
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _check_invariants(self, node: Optional[AVLNode], low: Any, high: Any) -> bool:
        if node is None:
            return True

        # 1. BST property with open bounds
        if low is not None and not low < node.key:
            return False
        if high is not None and not node.key < high:
            return False

        # 2. AVL balance condition
        if abs(_balance_factor(node)) > 1:
            return False

        # 3. Cached height and size
        if node.height != 1 + max(_height(node.left), _height(node.right)):
            return False
        if node.size != 1 + _size(node.left) + _size(node.right):
            return False

        return (self._check_invariants(node.left, low, node.key)
                and self._check_invariants(node.right, node.key, high))

    def _structure_lines(self, node, label, indent, depth, max_depth, result):
        prefix = ' ' * indent
        if node is None:
            result.append(f"{prefix}{label}: Empty")
            return
        if max_depth is not None and depth > max_depth:
            result.append(f"{prefix}{label}: ... (max depth reached)")
            return
        result.append(f"{prefix}{label}: {node!r}")
        if node.left is None and node.right is None:
            return
        self._structure_lines(node.left, "Left", indent + 4, depth + 1, max_depth, result)
        self._structure_lines(node.right, "Right", indent + 4, depth + 1, max_depth, result)
