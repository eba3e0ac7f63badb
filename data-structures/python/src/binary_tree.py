from typing import List, Optional, Sequence

import traversal
import tree_render
from circular_queue import CircularQueue


class TreeNode:
    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: int) -> None:
        self.value: int = value
        self.left: Optional[TreeNode] = None
        self.right: Optional[TreeNode] = None


class BinaryTree:
    """Plain linked binary tree; no ordering or balancing is imposed."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root: Optional[TreeNode] = root

    @classmethod
    def from_level_order(cls, values: Sequence[Optional[int]]) -> 'BinaryTree':
        """Build from a breadth-first listing where None marks a missing child.

        Children of a missing node are not listed, so ``[1, None, 2, 3]``
        gives 1 with right child 2, and 3 as the left child of 2.
        """
        if not values or values[0] is None:
            return cls()

        root = TreeNode(values[0])
        pending: CircularQueue[TreeNode] = CircularQueue()
        pending.enqueue(root)
        i = 1
        while pending and i < len(values):
            node = pending.dequeue()
            if values[i] is not None:
                node.left = TreeNode(values[i])
                pending.enqueue(node.left)
            i += 1
            if i < len(values) and values[i] is not None:
                node.right = TreeNode(values[i])
                pending.enqueue(node.right)
            i += 1
        return cls(root)

    def size(self) -> int:
        return traversal.count_nodes(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        return traversal.subtree_height(self.root)

    def level_order(self) -> List[int]:
        return traversal.level_order(self.root)

    def pre_order(self) -> List[int]:
        return traversal.pre_order(self.root)

    def in_order(self) -> List[int]:
        return traversal.in_order(self.root)

    def post_order(self) -> List[int]:
        return traversal.post_order(self.root)

    def describe(self) -> str:
        return tree_render.render(self.root)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"BinaryTree({self.level_order()})"
