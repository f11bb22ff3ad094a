"""Ancestry, completeness and rotations of binary tree nodes."""

from __future__ import annotations

from collections import deque
from typing import Optional

from treekit.node import Node


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the lowest node that has both nodes below or at it, or None."""
    while first is not None and second is not None:
        if first is second:
            return first
        up_first, up_second = first.parent, second.parent
        if (
            up_first is None
            or first is up_second
            or (up_first.parent is None and up_second is not None)
        ):
            second = up_second
        elif (
            up_second is None
            or up_first is second
            or (up_second.parent is None and up_first is not None)
        ):
            first = up_first
        else:
            first, second = up_first, up_second
    return None


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the subtree left and return its new top, or None if it cannot rotate.

    The former parent's child link is left for the caller to update.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the subtree right and return its new top, or None if it cannot rotate.

    The former parent's child link is left for the caller to update.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot