"""Max binary heap check for linked binary trees."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def _perfect_levels(tree: Node) -> int:
    """Return a nonzero level count when the shape passes the perfection test, else 0."""
    if tree.left is not None and tree.right is not None:
        left = 1 + _perfect_levels(tree.left)
        right = 1 + _perfect_levels(tree.right)
        return right if left == right else 0
    if tree.is_leaf():
        return 1
    return 0


def _looks_perfect(tree: Optional[Node]) -> bool:
    return tree is not None and _perfect_levels(tree) != 0


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is a valid max binary heap.

    Each node's children must not exceed it; a subtree of perfect shape is
    accepted once its top satisfies that, otherwise the left side must be
    perfect or one level taller than a perfect right side.
    """
    if tree is None:
        return False
    if tree.left is not None and tree.left.value > tree.value:
        return False
    if tree.right is not None and tree.right.value > tree.value:
        return False
    if _looks_perfect(tree):
        return True
    factor = _levels(tree.left) - _levels(tree.right)
    if factor == 0:
        return _looks_perfect(tree.left) and is_heap(tree.right)
    if factor == 1:
        return is_heap(tree.left) and _looks_perfect(tree.right)
    return False