"""Vertical text layout for binary trees.

Each subtree is laid out as a rectangular block of equal-width lines: the
node's label, a connector line, then the child blocks. Blocks are merged
bottom-up, so a parent only needs its children's block width and the
column of each child's label (its "center").

    render(root)         any linked node with value/left/right
    render_array(tree)   an ArrayBinaryTree, walked by index
"""

from typing import Any, Callable, List, Optional, Tuple

EMPTY = "(empty)"

_GAP = 3

Block = Tuple[List[str], int, int]


def _layout(
    handle: Any,
    label_of: Callable[[Any], str],
    children_of: Callable[[Any], Tuple[Optional[Any], Optional[Any]]],
) -> Block:
    label = label_of(handle)
    left, right = children_of(handle)

    if left is None and right is None:
        return [label], len(label), len(label) // 2

    if right is None:
        lines, width, center = _layout(left, label_of, children_of)
        top = " " * (center + 1) + label
        width = max(width, len(top))
        block = [top, " " * center + "/"] + lines
        return [line.ljust(width) for line in block], width, center + 1

    if left is None:
        lines, width, _ = _layout(right, label_of, children_of)
        indent = " " * (len(label) + 1)
        width += len(indent)
        block = [label, " " * len(label) + "\\"] + [indent + line for line in lines]
        return [line.ljust(width) for line in block], width, len(label) // 2

    left_lines, left_width, left_center = _layout(left, label_of, children_of)
    right_lines, right_width, right_center = _layout(right, label_of, children_of)
    right_start = left_width + _GAP
    width = right_start + right_width
    center = (left_center + right_start + right_center) // 2

    top = " " * max(0, center - len(label) // 2) + label
    connector = [" "] * width
    connector[left_center] = "/"
    connector[right_start + right_center] = "\\"

    block = [top, "".join(connector)]
    for row in range(max(len(left_lines), len(right_lines))):
        left_part = left_lines[row] if row < len(left_lines) else " " * left_width
        right_part = right_lines[row] if row < len(right_lines) else ""
        block.append(left_part + " " * _GAP + right_part)

    width = max(width, len(top))
    return [line.ljust(width) for line in block], width, center


def _join(lines: List[str]) -> str:
    return "\n".join(line.rstrip() for line in lines)


def render(root: Optional[Any]) -> str:
    if root is None:
        return EMPTY
    lines, _, _ = _layout(
        root,
        lambda node: str(node.value),
        lambda node: (node.left, node.right),
    )
    return _join(lines)


def render_array(tree: Any) -> str:
    if tree.value(0) is None:
        return EMPTY

    def children(index: int) -> Tuple[Optional[int], Optional[int]]:
        left, right = tree.left(index), tree.right(index)
        return (
            left if tree.value(left) is not None else None,
            right if tree.value(right) is not None else None,
        )

    lines, _, _ = _layout(0, lambda index: str(tree.value(index)), children)
    return _join(lines)
