"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent only records the parent link; the parent's
    child slots are left untouched.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        new = Node(value, self)
        new.left = self.left
        if new.left is not None:
            new.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        new = Node(value, self)
        new.right = self.right
        if new.right is not None:
            new.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def detach(self) -> Node:
        """Unlink this subtree from its parent and return it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None
        return self