import sys
import os
import random
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import traversal
from array_binary_tree import ArrayBinaryTree
from avl_tree import AVLTree
from binary_tree import BinaryTree


def build_avl(values):
    tree = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


class TestTraversalFunctions(unittest.TestCase):
    def test_empty_root(self):
        for walk in (traversal.level_order, traversal.pre_order,
                     traversal.in_order, traversal.post_order):
            self.assertEqual(walk(None), [])
        self.assertEqual(traversal.count_nodes(None), 0)
        self.assertEqual(traversal.subtree_height(None), -1)

    def test_lopsided_tree(self):
        root = BinaryTree.from_level_order([1, 2, None, 3, 4]).root
        self.assertEqual(traversal.level_order(root), [1, 2, 3, 4])
        self.assertEqual(traversal.pre_order(root), [1, 2, 3, 4])
        self.assertEqual(traversal.in_order(root), [3, 2, 4, 1])
        self.assertEqual(traversal.post_order(root), [3, 4, 2, 1])
        self.assertEqual(traversal.count_nodes(root), 4)
        self.assertEqual(traversal.subtree_height(root), 2)

    def test_subtree_height_agrees_with_cached_height(self):
        tree = build_avl(range(100))
        self.assertEqual(traversal.subtree_height(tree.root), tree.height())


class TestCrossRepresentationAgreement(unittest.TestCase):
    def test_insertion_mirror_when_no_rotation_occurs(self):
        order = [8, 4, 12, 2, 6, 10, 14, 1, 3, 5, 7]
        avl = build_avl(order)
        mirror = ArrayBinaryTree.from_insertions(order)
        self.assertEqual(mirror.level_order(), avl.level_order())
        self.assertEqual(mirror.pre_order(), avl.pre_order())
        self.assertEqual(mirror.in_order(), avl.in_order())
        self.assertEqual(mirror.post_order(), avl.post_order())

    def test_insertion_mirror_diverges_in_shape_after_rotation(self):
        order = [1, 2, 3]
        avl = build_avl(order)
        mirror = ArrayBinaryTree.from_insertions(order)
        self.assertEqual(mirror.in_order(), avl.in_order())
        self.assertNotEqual(mirror.pre_order(), avl.pre_order())

    def test_snapshot_agrees_for_random_trees(self):
        rng = random.Random(11)
        for _ in range(20):
            values = rng.sample(range(1000), rng.randint(1, 60))
            avl = build_avl(values)
            for value in values[: len(values) // 3]:
                avl.remove(value)
            mirror = ArrayBinaryTree.from_root(avl.root)
            self.assertEqual(mirror.level_order(), avl.level_order())
            self.assertEqual(mirror.pre_order(), avl.pre_order())
            self.assertEqual(mirror.in_order(), avl.in_order())
            self.assertEqual(mirror.post_order(), avl.post_order())

    def test_all_walks_visit_same_multiset(self):
        avl = build_avl(random.Random(5).sample(range(500), 200))
        expected = avl.in_order()
        for result in (avl.level_order(), avl.pre_order(), avl.post_order()):
            self.assertEqual(sorted(result), expected)


if __name__ == "__main__":
    unittest.main()
