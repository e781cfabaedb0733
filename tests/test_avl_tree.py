"""Tests for the public AVLTree map operations."""

import random
import unittest
from unittest import mock

from avl_trees.avl_tree_base import AVLTree
from tests.test_base import AVLTreeTestCase


class TestEmptyTree(AVLTreeTestCase):

    def test_is_empty(self):
        self.assertTrue(self.tree.is_empty())
        self.assertFalse(self.tree)
        self.assertEqual(self.tree.size(), 0)
        self.assertEqual(len(self.tree), 0)
        self.assertEqual(self.tree.height(), 0)
        self.expected_keys = []

    def test_lookup_on_empty(self):
        self.assertIsNone(self.tree.get(1))
        self.assertEqual(self.tree.get(1, "missing"), "missing")
        self.assertFalse(self.tree.contains(1))
        self.assertNotIn(1, self.tree)

    def test_keys_on_empty(self):
        self.assertEqual(self.tree.keys(), [])
        self.assertEqual(self.tree.values(), [])
        self.assertEqual(self.tree.items(), [])
        self.assertEqual(list(self.tree), [])

    def test_remove_on_empty_is_noop(self):
        self.tree.remove(42)
        self.assertTrue(self.tree.is_empty())

    def test_rep_ok_on_empty(self):
        self.assertTrue(self.tree.rep_ok())
        self.assertTrue(self.tree.repOK())

    def test_str(self):
        self.assertEqual(str(self.tree), "Empty AVLTree")
        self.assertEqual(self.tree.print_structure(), "Empty AVLTree")


class TestPut(AVLTreeTestCase):

    def test_single_put(self):
        self.tree.put(7, "seven")
        self.assertFalse(self.tree.is_empty())
        self.assertEqual(self.tree.size(), 1)
        self.assertEqual(self.tree.height(), 1)
        self.assertEqual(self.tree.get(7), "seven")
        self.assertTrue(self.tree.contains(7))
        self.expected_keys = [7]

    def test_put_new_key_grows_size_by_one(self):
        for i, key in enumerate([10, 20, 5, 15, 25], start=1):
            self.tree.put(key, str(key))
            self.assertEqual(self.tree.size(), i)
            self.assertTrue(self.tree.rep_ok())
        self.expected_keys = [5, 10, 15, 20, 25]

    def test_put_existing_key_replaces_value(self):
        for key in [4, 2, 6]:
            self.tree.put(key, f"v{key}")
        root_before = self.tree.root
        self.tree.put(2, "replaced")
        self.assertEqual(self.tree.size(), 3)
        self.assertEqual(self.tree.get(2), "replaced")
        self.assertIs(self.tree.root, root_before, "Value replacement must not reshape the tree")
        self.expected_keys = [2, 4, 6]

    def test_round_trip(self):
        data = {k: f"value-{k}" for k in [50, 17, 72, 12, 23, 54, 76, 9, 14, 19]}
        for k, v in data.items():
            self.tree.put(k, v)
        for k, v in data.items():
            self.assertEqual(self.tree.get(k), v)
            self.assertTrue(self.tree.contains(k))
        self.expected_keys = sorted(data)

    def test_ascending_inserts_stay_balanced(self):
        for k in range(1, 128):
            self.tree.put(k, k)
        self.assertEqual(self.tree.size(), 127)
        # 127 = 2^7 - 1 ascending inserts build a perfect tree
        self.assertEqual(self.tree.height(), 7)
        self.expected_keys = list(range(1, 128))

    def test_descending_inserts_stay_balanced(self):
        for k in range(100, 0, -1):
            self.tree.put(k, k)
        self.assertLessEqual(self.tree.height(), 8)
        self.expected_keys = list(range(1, 101))

    def test_string_keys(self):
        words = ["pear", "apple", "fig", "kiwi", "banana", "cherry"]
        for w in words:
            self.tree.put(w, len(w))
        self.assertEqual(self.tree.keys(), sorted(words))
        self.assertEqual(self.tree.get("kiwi"), 4)

    def test_tuple_keys(self):
        for k in [(2, "b"), (1, "z"), (2, "a"), (1, "a")]:
            self.tree.put(k, True)
        self.assertEqual(self.tree.keys(), [(1, "a"), (1, "z"), (2, "a"), (2, "b")])

    def test_falsy_values_are_stored(self):
        self.tree.put(1, 0)
        self.tree.put(2, "")
        self.tree.put(3, False)
        self.assertEqual(self.tree.get(1), 0)
        self.assertEqual(self.tree.get(2), "")
        self.assertIs(self.tree.get(3), False)
        self.assertTrue(self.tree.contains(3))

    def test_equal_comparing_keys_are_one_key(self):
        self.tree.put(1, "int")
        self.tree.put(1.0, "float")
        self.assertEqual(self.tree.size(), 1)
        self.assertEqual(self.tree.get(1), "float")


class TestPutInvalidArguments(AVLTreeTestCase):

    def setUp(self):
        super().setUp()
        for key in [3, 1, 5]:
            self.tree.put(key, f"v{key}")
        self.expected_keys = [1, 3, 5]

    def test_none_key_rejected(self):
        with self.assertRaises(TypeError):
            self.tree.put(None, "x")
        self.assertEqual(self.tree.size(), 3)

    def test_none_value_rejected(self):
        with self.assertRaises(TypeError):
            self.tree.put(4, None)
        self.assertFalse(self.tree.contains(4))
        self.assertEqual(self.tree.size(), 3)

    def test_none_value_does_not_erase_existing(self):
        with self.assertRaises(TypeError):
            self.tree.put(3, None)
        self.assertEqual(self.tree.get(3), "v3")

    def test_none_key_rejected_by_lookups(self):
        with self.assertRaises(TypeError):
            self.tree.get(None)
        with self.assertRaises(TypeError):
            self.tree.contains(None)
        with self.assertRaises(TypeError):
            self.tree.remove(None)

    def test_incomparable_key_leaves_tree_valid(self):
        with self.assertRaises(TypeError):
            self.tree.put("three", "x")
        self.assertEqual(self.tree.size(), 3)
        self.assertTrue(self.tree.rep_ok())


class TestRemove(AVLTreeTestCase):

    def setUp(self):
        super().setUp()
        self.keys = [50, 30, 70, 20, 40, 60, 80, 10, 35, 45, 65]
        for key in self.keys:
            self.tree.put(key, f"v{key}")

    def test_remove_leaf(self):
        self.tree.remove(10)
        self.assertFalse(self.tree.contains(10))
        self.assertEqual(self.tree.size(), len(self.keys) - 1)
        self.expected_keys = sorted(set(self.keys) - {10})

    def test_remove_node_with_one_child(self):
        self.tree.remove(60)
        self.assertFalse(self.tree.contains(60))
        self.assertEqual(self.tree.get(65), "v65")
        self.expected_keys = sorted(set(self.keys) - {60})

    def test_remove_node_with_two_children(self):
        self.tree.remove(30)
        self.assertFalse(self.tree.contains(30))
        self.assertEqual(self.tree.get(35), "v35")
        self.expected_keys = sorted(set(self.keys) - {30})

    def test_remove_root(self):
        root_key = self.tree.root.key
        self.tree.remove(root_key)
        self.assertFalse(self.tree.contains(root_key))
        self.assertEqual(self.tree.size(), len(self.keys) - 1)
        self.expected_keys = sorted(set(self.keys) - {root_key})

    def test_remove_missing_key_is_noop(self):
        before = self.tree.items()
        height_before = self.tree.height()
        root_before = self.tree.root
        self.tree.remove(999)
        self.tree.remove(33)
        self.assertEqual(self.tree.items(), before)
        self.assertEqual(self.tree.height(), height_before)
        self.assertIs(self.tree.root, root_before)
        self.expected_keys = sorted(self.keys)

    def test_remove_twice(self):
        self.tree.remove(45)
        self.tree.remove(45)
        self.assertEqual(self.tree.size(), len(self.keys) - 1)
        self.expected_keys = sorted(set(self.keys) - {45})

    def test_put_then_remove_is_inverse(self):
        size_before = self.tree.size()
        self.tree.put(55, "v55")
        self.tree.remove(55)
        self.assertFalse(self.tree.contains(55))
        self.assertEqual(self.tree.size(), size_before)
        self.expected_keys = sorted(self.keys)

    def test_remove_everything(self):
        for key in self.keys:
            self.tree.remove(key)
            self.assertTrue(self.tree.rep_ok(), f"rep_ok failed after removing {key}")
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(self.tree.size(), 0)
        self.assertIsNone(self.tree.root)
        self.expected_keys = []

    def test_clear(self):
        self.tree.clear()
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(self.tree.keys(), [])
        self.expected_keys = []


class TestMappingProtocol(AVLTreeTestCase):

    def test_setitem_getitem(self):
        self.tree["b"] = 2
        self.tree["a"] = 1
        self.assertEqual(self.tree["a"], 1)
        self.assertEqual(self.tree["b"], 2)
        self.assertIn("a", self.tree)
        self.expected_keys = ["a", "b"]

    def test_getitem_missing_raises_key_error(self):
        self.tree[1] = "one"
        with self.assertRaises(KeyError):
            self.tree[2]

    def test_delitem(self):
        self.tree[1] = "one"
        self.tree[2] = "two"
        del self.tree[1]
        self.assertNotIn(1, self.tree)
        with self.assertRaises(KeyError):
            del self.tree[1]
        self.expected_keys = [2]

    def test_iteration_is_a_snapshot(self):
        for k in range(10):
            self.tree[k] = k
        for k in self.tree:
            if k % 2 == 0:
                self.tree.remove(k)
        self.assertEqual(self.tree.keys(), [1, 3, 5, 7, 9])
        self.expected_keys = [1, 3, 5, 7, 9]

    def test_construct_from_items(self):
        self.tree = AVLTree([(3, "c"), (1, "a"), (2, "b")])
        self.assertEqual(self.tree.items(), [(1, "a"), (2, "b"), (3, "c")])
        self.assertEqual(self.tree.values(), ["a", "b", "c"])
        self.expected_keys = [1, 2, 3]

    def test_str_and_repr(self):
        for k in [2, 1, 3]:
            self.tree[k] = k
        self.assertEqual(str(self.tree), "AVLTree(size=3, height=2)")
        self.assertEqual(repr(self.tree), str(self.tree))

    def test_no_instance_dict(self):
        self.assertFalse(hasattr(self.tree, "__dict__"))
        with self.assertRaises(AttributeError):
            self.tree.extra = 1

    def test_traversal_is_a_single_walk(self):
        keys = list(range(0, 2000, 7))
        random.Random(3).shuffle(keys)
        for k in keys:
            self.tree[k] = k
        with mock.patch.object(
            AVLTree, "_iter_inorder", autospec=True, side_effect=AVLTree._iter_inorder
        ) as walk:
            result = self.tree.items()
        self.assertEqual(walk.call_count, 1)
        self.assertEqual(result, [(k, k) for k in sorted(keys)])
        self.expected_keys = sorted(keys)


class TestExampleScenario(AVLTreeTestCase):
    """Insert 5,3,8,1,4,7,9,2,6,0, then remove 5."""

    def test_scenario(self):
        for key in [5, 3, 8, 1, 4, 7, 9, 2, 6, 0]:
            self.tree.put(key, f"v{key}")

        self.assertEqual(self.tree.size(), 10)
        self.assertEqual(self.tree.keys(), list(range(10)))
        self.assertTrue(self.tree.rep_ok())

        self.tree.remove(5)
        self.assertEqual(self.tree.size(), 9)
        self.assertFalse(self.tree.contains(5))
        self.assertTrue(self.tree.rep_ok())
        self.expected_keys = [0, 1, 2, 3, 4, 6, 7, 8, 9]


if __name__ == "__main__":
    unittest.main()
