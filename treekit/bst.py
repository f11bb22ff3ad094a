"""Binary search tree checks, insertion, lookup and removal."""

from __future__ import annotations

from contextlib import suppress
from typing import Iterable, Optional

from treekit.node import Node


def _all_below(node: Optional[Node], bound: int) -> bool:
    if node is None:
        return True
    return node.value < bound and _all_below(node.left, bound) and _all_below(node.right, bound)


def _all_above(node: Optional[Node], bound: int) -> bool:
    if node is None:
        return True
    return node.value > bound and _all_above(node.left, bound) and _all_above(node.right, bound)


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree.

    A child equal to its parent is accepted and its subtree is not examined.
    """
    if tree is None:
        return False
    left, right = tree.left, tree.right
    if left is not None and left.value > tree.value:
        return False
    if right is not None and right.value < tree.value:
        return False
    if left is not None and left.value < tree.value:
        if not _all_below(left, tree.value) or not is_bst(left):
            return False
    if right is not None and right.value > tree.value:
        if not _all_above(right, tree.value) or not is_bst(right):
            return False
    return True


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert value and return the new node; with no root the new node is the root.

    Raises ValueError if the value is already in the tree.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a search tree by inserting the values in order, skipping repeats."""
    root: Optional[Node] = None
    for value in values:
        if root is None:
            root = Node(value)
        else:
            with suppress(ValueError):
                bst_insert(root, value)
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding value, or None if it is absent."""
    node = tree
    while node is not None:
        if value < node.value:
            node = node.left
        elif value > node.value:
            node = node.right
        else:
            return node
    return None


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove the node holding value and return the root of the resulting tree.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. An absent value leaves the tree unchanged.
    """
    node = bst_search(root, value)
    if node is None:
        return root
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    node.left = node.right = node.parent = None
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root