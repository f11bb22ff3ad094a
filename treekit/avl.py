"""AVL tree checks, insertion, removal and construction."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from treekit.bst import bst_remove, bst_search
from treekit.metrics import balance
from treekit.node import Node
from treekit.relations import rotate_left, rotate_right


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def _is_avl_within(tree: Optional[Node], low: float, high: float) -> bool:
    if tree is None:
        return True
    if tree.value > high or tree.value < low:
        return False
    if abs(_levels(tree.left) - _levels(tree.right)) > 1:
        return False
    return _is_avl_within(tree.left, low, tree.value - 1) and _is_avl_within(
        tree.right, tree.value + 1, high
    )


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a strict search tree with every node balanced."""
    if tree is None:
        return False
    return _is_avl_within(tree, -math.inf, math.inf)


def _insert(tree: Optional[Node], parent: Optional[Node], value: int) -> Node:
    """Insert value below tree and return the subtree's new top after rebalancing."""
    if tree is None:
        return Node(value, parent)
    if value < tree.value:
        tree.left = _insert(tree.left, tree, value)
    elif value > tree.value:
        tree.right = _insert(tree.right, tree, value)
    else:
        return tree
    factor = balance(tree)
    if factor > 1 and tree.left.value > value:
        return rotate_right(tree)
    if factor > 1 and tree.left.value < value:
        tree.left = rotate_left(tree.left)
        return rotate_right(tree)
    if factor < -1 and tree.right.value < value:
        return rotate_left(tree)
    if factor < -1 and tree.right.value > value:
        tree.right = rotate_right(tree.right)
        return rotate_left(tree)
    return tree


def avl_insert(root: Optional[Node], value: int) -> Node:
    """Insert value, rebalancing on the way up, and return the new node.

    With no root the new node is the root; otherwise the tree's root may
    change and is found by following parent links. Raises ValueError if the
    value is already in the tree.
    """
    if root is None:
        return Node(value)
    if bst_search(root, value) is not None:
        raise ValueError(f"value {value} is already in the tree")
    top = _insert(root, root.parent, value)
    return bst_search(top, value)


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree from the values, keeping the first of any repeats."""
    root: Optional[Node] = None
    for value in dict.fromkeys(values):
        root = _insert(root, None, value)
    return root


def _rebalance(tree: Optional[Node]) -> Optional[Node]:
    if tree is None or tree.is_leaf():
        return tree
    tree.left = _rebalance(tree.left)
    tree.right = _rebalance(tree.right)
    factor = balance(tree)
    if factor > 1:
        return rotate_right(tree)
    if factor < -1:
        return rotate_left(tree)
    return tree


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value, rebalance every subtree bottom up, and return the new root."""
    remaining = bst_remove(root, value)
    if remaining is None:
        return None
    return _rebalance(remaining)


def _build_sorted(parent: Optional[Node], values: Sequence[int], begin: int, last: int) -> Optional[Node]:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent)
    node.left = _build_sorted(node, values, begin, mid - 1)
    node.right = _build_sorted(node, values, mid + 1, last)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Optional[Node]:
    """Build an AVL tree from sorted values by taking middles as subtree tops."""
    if not values:
        return None
    return _build_sorted(None, values, 0, len(values) - 1)