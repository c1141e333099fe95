import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from demo import build, layout_tree, sorted_insertion_height


class TestDemoLayoutTree(unittest.TestCase):

    def test_empty_tree_has_no_positions(self):
        self.assertEqual(layout_tree(build([])), {})

    def test_x_is_in_order_rank_and_y_is_negative_depth(self):
        bst = build([5, 3, 8, 1, 4, 7, 9])
        positions = layout_tree(bst)
        self.assertEqual(len(positions), 7)
        self.assertEqual(positions[id(bst.root)], (3, 0))
        self.assertEqual(positions[id(bst.find(1))], (0, -2))
        self.assertEqual(positions[id(bst.find(8))], (5, -1))
        self.assertEqual(positions[id(bst.find(9))], (6, -2))

    def test_chain_descends_one_level_per_node(self):
        bst = build([1, 2, 3])
        positions = layout_tree(bst)
        self.assertEqual(sorted(positions.values()), [(0, 0), (1, -1), (2, -2)])


class TestDemoSortedInsertionHeight(unittest.TestCase):

    def test_sorted_insertion_builds_a_chain(self):
        self.assertEqual(sorted_insertion_height(0), 0)
        self.assertEqual(sorted_insertion_height(63), 63)

    def test_long_chain_is_measured(self):
        self.assertEqual(sorted_insertion_height(2500), 2500)


if __name__ == "__main__":
    unittest.main()
