"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from treekit.metrics import height
from treekit.node import Node


def _place(node: Optional[Node], offset: int, level: int, rows: list[dict[int, str]]) -> int:
    """Draw the subtree into rows and return the width it occupies."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _place(node.left, offset, level + 1, rows)
    right = _place(node.right, offset + left + width, level + 1, rows)
    start = offset + left
    for i, char in enumerate(label):
        rows[level][start + i] = char
    if level:
        above = rows[level - 1]
        if is_left:
            for i in range(width + right):
                above[start + width // 2 + i] = "-"
        else:
            for i in range(left + width):
                above[offset - width // 2 + i] = "-"
        above[start + width // 2] = "."
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[dict[int, str]] = [{} for _ in range(height(tree) + 1)]
    _place(tree, 0, 0, rows)
    lines = []
    for row in rows:
        last = max(max(row, default=0), 1)
        line = "".join(row.get(i, " ") for i in range(last + 1))
        stripped = line.rstrip(" ")
        lines.append(stripped if len(stripped) >= 2 else line[:2])
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))