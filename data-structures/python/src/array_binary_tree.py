"""Binary tree stored in a flat list with heap indexing.

Slot ``i`` has children at ``2i + 1`` and ``2i + 2`` and its parent at
``(i - 1) // 2``. ``None`` marks an empty slot. The array can mirror any
linked tree, which makes it a cross-check for the linked traversals: both
representations of one logical tree must visit values in the same order.
"""

from typing import Iterable, List, Optional, Sequence

import tree_render

MAX_SLOTS = 2 ** 20


def _reserve(slots: List[Optional[int]], i: int) -> None:
    if i >= MAX_SLOTS:
        depth = (i + 1).bit_length() - 1
        raise ValueError(f"tree depth {depth} needs more than {MAX_SLOTS} slots")
    if i >= len(slots):
        slots.extend([None] * (i + 1 - len(slots)))


class ArrayBinaryTree:
    def __init__(self, values: Sequence[Optional[int]] = ()) -> None:
        self._slots: List[Optional[int]] = list(values)
        for i in range(1, len(self._slots)):
            if self._slots[i] is not None and self._slots[self.parent(i)] is None:
                raise ValueError(f"value {self._slots[i]} at index {i} has no parent")

    @classmethod
    def from_insertions(cls, values: Iterable[int]) -> 'ArrayBinaryTree':
        """Mirror a sequence of plain BST inserts, without any rebalancing.

        Duplicates are ignored. A skewed insertion order needs 2**depth
        slots; ValueError is raised once that passes MAX_SLOTS.
        """
        slots: List[Optional[int]] = []
        for value in values:
            i = 0
            while i < len(slots) and slots[i] is not None and slots[i] != value:
                i = 2 * i + 1 if value < slots[i] else 2 * i + 2
            if i < len(slots) and slots[i] == value:
                continue
            _reserve(slots, i)
            slots[i] = value
        return cls(slots)

    @classmethod
    def from_root(cls, root) -> 'ArrayBinaryTree':
        """Snapshot any linked tree whose nodes expose value/left/right."""
        slots: List[Optional[int]] = []
        stack = [(root, 0)] if root is not None else []
        while stack:
            node, i = stack.pop()
            _reserve(slots, i)
            slots[i] = node.value
            if node.left is not None:
                stack.append((node.left, 2 * i + 1))
            if node.right is not None:
                stack.append((node.right, 2 * i + 2))
        return cls(slots)

    def size(self) -> int:
        """Number of slots, empty ones included."""
        return len(self._slots)

    def value(self, i: int) -> Optional[int]:
        if i < 0 or i >= len(self._slots):
            return None
        return self._slots[i]

    def left(self, i: int) -> int:
        return 2 * i + 1

    def right(self, i: int) -> int:
        return 2 * i + 2

    def parent(self, i: int) -> int:
        return (i - 1) // 2

    def level_order(self) -> List[int]:
        # slot order is breadth-first order
        return [value for value in self._slots if value is not None]

    def _walk(self, i: int, order: str, result: List[int]) -> None:
        value = self.value(i)
        if value is None:
            return
        if order == "pre":
            result.append(value)
        self._walk(self.left(i), order, result)
        if order == "in":
            result.append(value)
        self._walk(self.right(i), order, result)
        if order == "post":
            result.append(value)

    def pre_order(self) -> List[int]:
        result: List[int] = []
        self._walk(0, "pre", result)
        return result

    def in_order(self) -> List[int]:
        result: List[int] = []
        self._walk(0, "in", result)
        return result

    def post_order(self) -> List[int]:
        result: List[int] = []
        self._walk(0, "post", result)
        return result

    def to_list(self) -> List[Optional[int]]:
        return list(self._slots)

    def describe(self) -> str:
        return tree_render.render_array(self)

    def __repr__(self) -> str:
        return f"ArrayBinaryTree({self._slots})"
