"""Classical traversals over linked binary trees.

Works on any node exposing ``value``, ``left`` and ``right``. All four
walks are iterative so that degenerate (list-shaped) trees do not run into
the interpreter's recursion limit. Each call builds a fresh list.
"""

from typing import Any, List, Optional, Protocol

from circular_queue import CircularQueue


class LinkedNode(Protocol):
    value: Any
    left: Optional['LinkedNode']
    right: Optional['LinkedNode']


def level_order(root: Optional[LinkedNode]) -> List[Any]:
    result: List[Any] = []
    if root is None:
        return result
    queue: CircularQueue[LinkedNode] = CircularQueue()
    queue.enqueue(root)
    while queue:
        node = queue.dequeue()
        result.append(node.value)
        if node.left is not None:
            queue.enqueue(node.left)
        if node.right is not None:
            queue.enqueue(node.right)
    return result


def pre_order(root: Optional[LinkedNode]) -> List[Any]:
    result: List[Any] = []
    stack: List[LinkedNode] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        # right goes on first so left is visited first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def in_order(root: Optional[LinkedNode]) -> List[Any]:
    result: List[Any] = []
    stack: List[LinkedNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def post_order(root: Optional[LinkedNode]) -> List[Any]:
    """Left, right, node.

    Runs a node-right-left pre-order and reverses it, which is the
    post-order sequence.
    """
    result: List[Any] = []
    stack: List[LinkedNode] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def count_nodes(root: Optional[LinkedNode]) -> int:
    return len(pre_order(root))


def subtree_height(root: Optional[LinkedNode]) -> int:
    """Height by walking the subtree: -1 for empty, 0 for a single node."""
    if root is None:
        return -1
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return deepest
