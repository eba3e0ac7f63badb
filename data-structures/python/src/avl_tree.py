"""AVL tree over unique integers.

Heights follow the edge-count convention: an empty subtree has height -1
and a leaf has height 0. Nodes carry no parent pointer; insert and remove
rebuild the path bottom-up from the return values of the recursive calls,
updating the cached height and rebalancing at every ancestor on the way
back up.
"""

import operator
from typing import Iterator, List, Optional

import traversal
import tree_render


class Node:
    __slots__ = ('value', 'height', 'left', 'right')

    def __init__(self, value: int) -> None:
        self.value: int = value
        self.height: int = 0
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value}, height={self.height})"


def height(node: Optional[Node]) -> int:
    return node.height if node is not None else -1


def update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[Node]) -> int:
    """Positive when left-heavy, negative when right-heavy."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(node: Node) -> Node:
    child = node.left
    assert child is not None
    grandchild = child.right

    child.right = node
    node.left = grandchild

    # node is now below child, so it must be updated first
    update_height(node)
    update_height(child)
    return child


def rotate_left(node: Node) -> Node:
    child = node.right
    assert child is not None
    grandchild = child.left

    child.left = node
    node.right = grandchild

    update_height(node)
    update_height(child)
    return child


def rebalance(node: Node) -> Node:
    """Restore the AVL property at ``node`` and return the subtree's new root.

    A child balance of zero takes the single-rotation branch. That case only
    arises after a removal, and a double rotation there would leave the
    subtree unbalanced.
    """
    balance = balance_factor(node)

    if balance > 1:
        if balance_factor(node.left) < 0:
            assert node.left is not None
            node.left = rotate_left(node.left)
        return rotate_right(node)

    if balance < -1:
        if balance_factor(node.right) > 0:
            assert node.right is not None
            node.right = rotate_right(node.right)
        return rotate_left(node)

    return node


def _as_key(value: int) -> int:
    """Normalize any integral value (numpy integers included) to a plain int."""
    if isinstance(value, bool):
        raise TypeError("AVLTree stores integers, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"AVLTree stores integers, got {type(value).__name__}") from None


class AVLTree:
    Node = Node

    def __init__(self) -> None:
        self._root: Optional[Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def _insert(self, node: Optional[Node], value: int) -> Node:
        if node is None:
            self._size += 1
            return Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        update_height(node)
        return rebalance(node)

    def insert(self, value: int) -> None:
        self._root = self._insert(self._root, _as_key(value))

    def _remove(self, node: Optional[Node], value: int) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is None or node.right is None:
            self._size -= 1
            return node.left if node.left is not None else node.right
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.right = self._remove(node.right, successor.value)
            node.value = successor.value

        update_height(node)
        return rebalance(node)

    def remove(self, value: int) -> None:
        self._root = self._remove(self._root, _as_key(value))

    def contains(self, value: int) -> bool:
        value = _as_key(value)
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def min(self) -> int:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> int:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        return height(self._root)

    def level_order(self) -> List[int]:
        return traversal.level_order(self._root)

    def pre_order(self) -> List[int]:
        return traversal.pre_order(self._root)

    def in_order(self) -> List[int]:
        return traversal.in_order(self._root)

    def post_order(self) -> List[int]:
        return traversal.post_order(self._root)

    def copy(self) -> 'AVLTree':
        clone = AVLTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(balance_factor(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def _check(self, node: Optional[Node], low: Optional[int], high: Optional[int]) -> Optional[int]:
        """Return the recomputed height of ``node``'s subtree, or None if any
        invariant fails inside it."""
        if node is None:
            return -1
        if (low is not None and node.value <= low) or (high is not None and node.value >= high):
            return None
        left = self._check(node.left, low, node.value)
        if left is None:
            return None
        right = self._check(node.right, node.value, high)
        if right is None:
            return None
        if abs(left - right) > 1 or node.height != 1 + max(left, right):
            return None
        return node.height

    def is_valid(self) -> bool:
        """Check ordering, balance, cached heights and the element count."""
        if self._check(self._root, None, None) is None:
            return False
        return traversal.count_nodes(self._root) == self._size

    def describe(self) -> str:
        return tree_render.render(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
