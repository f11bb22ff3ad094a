"""Measurements and relations of nodes in a binary tree."""

from __future__ import annotations

from typing import Optional

from treekit.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + size(tree.right) + 1


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return size(tree) - leaves(tree)


def balance(tree: Optional[Node]) -> int:
    """Return the left height minus the right height, an absent side counting -1."""
    if tree is None:
        return 0
    left = height(tree.left) if tree.left is not None else -1
    right = height(tree.right) if tree.right is not None else -1
    return left - right


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of the tree is completely filled."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    return 2 ** (height(tree) + 1) - 1 == size(tree)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    if node is node.parent.left:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)