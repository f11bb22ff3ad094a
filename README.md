# treekit

Binary trees built from `Node` objects that link to their parent and to
their left and right children. The package measures and walks such trees,
rotates them, builds and edits binary search trees and AVL trees, checks
for the max-heap property and draws trees as plain text.

Pure Python, no runtime dependencies, Python 3.10 or later.

## Modules

| Module              | What it offers                                                                                       |
|---------------------|------------------------------------------------------------------------------------------------------|
| `treekit.node`      | `Node(value, parent=None)` with `insert_left`, `insert_right`, `is_leaf`, `is_root`, `detach`        |
| `treekit.metrics`   | `height`, `depth`, `size`, `leaves`, `internal_nodes`, `balance`, `is_full`, `is_perfect`, `sibling`, `uncle` |
| `treekit.traversal` | `preorder`, `inorder`, `postorder`, `levelorder` (generators of values)                              |
| `treekit.printing`  | `render(tree)` returns the drawing as a string; `print_tree(tree, file=None)` writes it              |
| `treekit.relations` | `lowest_common_ancestor`, `is_complete`, `rotate_left`, `rotate_right`                               |
| `treekit.bst`       | `is_bst`, `bst_insert`, `array_to_bst`, `bst_search`, `bst_remove`                                   |
| `treekit.avl`       | `is_avl`, `avl_insert`, `array_to_avl`, `avl_remove`, `sorted_array_to_avl`                          |
| `treekit.heap`      | `is_heap`                                                                                            |

## Notes on behaviour

- `Node(value, parent)` only records the parent link; attach the node to
  the parent yourself, or use `insert_left` / `insert_right`, which push an
  existing child down one level below the new node.
- `height` counts edges (a single node has height 0, `None` gives 0);
  `depth` counts edges up to the root. `balance` is left height minus right
  height, with a missing side counting as -1.
- `is_full`, `is_perfect`, `is_complete`, `is_bst`, `is_avl` and `is_heap`
  all return `False` for `None`.
- `rotate_left` / `rotate_right` return the new top of the subtree, or
  `None` when there is nothing to rotate. The former parent's child link is
  not updated; that is left to the caller.
- `bst_insert(root, value)` and `avl_insert(root, value)` return the new
  node (with no root, the new node is the root) and raise `ValueError` if
  the value is already present. `avl_insert` may rotate the tree, so its root
  can change; follow `parent` links from any node to find it.
- `array_to_bst` and `array_to_avl` skip repeated values and return the root,
  or `None` for no values.
- `bst_remove` returns the root of the resulting tree; a node with two
  children takes its in-order successor's value. Removing a missing value
  leaves the tree unchanged. `avl_remove` does the same and then rebalances
  every subtree from the bottom up.
- `sorted_array_to_avl` builds a balanced tree from an already sorted
  sequence by making each middle element a subtree's top.
- `render` draws every value as a zero-padded, parenthesised number such as
  `(098)`, one line per level, with branches above each child connecting it
  to its parent. An empty tree renders as an empty string.

## Example

```python
import sys

from treekit.avl import array_to_avl, is_avl
from treekit.bst import array_to_bst, bst_remove, bst_search, is_bst
from treekit.metrics import height, size
from treekit.printing import print_tree, render
from treekit.traversal import inorder, levelorder

root = array_to_bst([98, 402, 12, 46, 128, 256, 512, 50])
assert is_bst(root)
print(list(inorder(root)))      # values in ascending order
print(size(root), height(root))

found = bst_search(root, 128)   # the node holding 128, or None
root = bst_remove(root, 402)

balanced = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
assert is_avl(balanced)
print(list(levelorder(balanced)))

print(render(balanced), end="")
print_tree(balanced, sys.stdout)
```

## What it does not do

treekit is a library only: it has no command-line tool. The `treekit.heap`
module checks whether a tree is a max binary heap but offers no heap
insertion, extraction or heap sort.

## Development

Install the test extra and run the suite:

```
pip install -e .[test]
pytest
```