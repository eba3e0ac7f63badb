import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_tree import BinaryTree, TreeNode


class TestBinaryTreeConstruction(unittest.TestCase):
    def test_empty_tree(self):
        tree = BinaryTree()
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.size(), 0)
        self.assertEqual(tree.height(), -1)

    def test_from_empty_level_order(self):
        self.assertTrue(BinaryTree.from_level_order([]).is_empty())
        self.assertTrue(BinaryTree.from_level_order([None]).is_empty())

    def test_from_level_order_links_children(self):
        tree = BinaryTree.from_level_order([1, 2, 3, 4, 5, 6, 7])
        root = tree.root
        self.assertEqual(root.value, 1)
        self.assertEqual((root.left.value, root.right.value), (2, 3))
        self.assertEqual((root.left.left.value, root.left.right.value), (4, 5))
        self.assertEqual((root.right.left.value, root.right.right.value), (6, 7))
        self.assertEqual(tree.size(), 7)
        self.assertEqual(tree.height(), 2)

    def test_missing_children_are_not_listed(self):
        tree = BinaryTree.from_level_order([1, None, 2, 3])
        self.assertIsNone(tree.root.left)
        self.assertEqual(tree.root.right.value, 2)
        self.assertEqual(tree.root.right.left.value, 3)
        self.assertIsNone(tree.root.right.right)

    def test_manual_linking(self):
        root = TreeNode(10)
        root.right = TreeNode(20)
        tree = BinaryTree(root)
        self.assertEqual(len(tree), 2)
        self.assertEqual(repr(tree), "BinaryTree([10, 20])")


class TestBinaryTreeTraversals(unittest.TestCase):
    def setUp(self):
        self.tree = BinaryTree.from_level_order([1, 2, 3, 4, 5, 6, 7])

    def test_level_order(self):
        self.assertEqual(self.tree.level_order(), [1, 2, 3, 4, 5, 6, 7])

    def test_pre_order(self):
        self.assertEqual(self.tree.pre_order(), [1, 2, 4, 5, 3, 6, 7])

    def test_in_order(self):
        self.assertEqual(self.tree.in_order(), [4, 2, 5, 1, 6, 3, 7])

    def test_post_order(self):
        self.assertEqual(self.tree.post_order(), [4, 5, 2, 6, 7, 3, 1])

    def test_degenerate_chain_does_not_recurse(self):
        root = TreeNode(0)
        node = root
        for i in range(1, 5000):
            node.right = TreeNode(i)
            node = node.right
        tree = BinaryTree(root)
        self.assertEqual(tree.in_order(), list(range(5000)))
        self.assertEqual(tree.post_order(), list(range(4999, -1, -1)))
        self.assertEqual(tree.height(), 4999)


class TestBinaryTreeDescribe(unittest.TestCase):
    def test_describe_empty(self):
        self.assertEqual(BinaryTree().describe(), "(empty)")

    def test_describe_small_tree(self):
        tree = BinaryTree.from_level_order([2, 1, 3])
        self.assertEqual(tree.describe(), "  2\n/   \\\n1   3")


if __name__ == "__main__":
    unittest.main()
