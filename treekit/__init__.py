"""Binary trees with parent links: metrics, traversals, rotations, BST, AVL, heap check and text rendering."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "bst",
    "heap",
    "metrics",
    "node",
    "printing",
    "relations",
    "traversal",
]