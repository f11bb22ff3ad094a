from hypothesis import given, strategies as st

from treekit.metrics import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    sibling,
    size,
    uncle,
)
from treekit.node import Node
from treekit.traversal import preorder

_values = st.integers(min_value=-999, max_value=999)
_subtrees = st.recursive(
    st.none(),
    lambda children: st.tuples(_values, children, children),
    max_leaves=25,
)
_specs = st.tuples(_values, _subtrees, _subtrees)


def _build(spec, parent=None, collected=None):
    if spec is None:
        return None
    value, left, right = spec
    node = Node(value, parent)
    if collected is not None:
        collected.append(node)
    node.left = _build(left, node, collected)
    node.right = _build(right, node, collected)
    return node


def _perfect(levels, parent=None):
    node = Node(levels, parent)
    if levels > 0:
        node.left = _perfect(levels - 1, node)
        node.right = _perfect(levels - 1, node)
    return node


def _left_chain(length):
    root = Node(0)
    node = root
    for value in range(1, length + 1):
        node = node.insert_left(value)
    return root, node


def test_empty_tree_measures():
    assert height(None) == 0
    assert depth(None) == 0
    assert size(None) == 0
    assert leaves(None) == 0
    assert internal_nodes(None) == 0
    assert balance(None) == 0
    assert is_full(None) is False
    assert is_perfect(None) is False
    assert sibling(None) is None
    assert uncle(None) is None


def test_single_node():
    node = Node(98)
    assert height(node) == 0
    assert depth(node) == 0
    assert size(node) == 1
    assert leaves(node) == 1
    assert internal_nodes(node) == 0
    assert balance(node) == 0
    assert is_full(node) is True
    assert is_perfect(node) is True


@given(_specs)
def test_size_matches_traversal(spec):
    root = _build(spec)
    assert size(root) == len(list(preorder(root)))


@given(_specs)
def test_leaves_plus_internal_is_size(spec):
    root = _build(spec)
    if root.is_leaf():
        assert internal_nodes(root) == 0
    else:
        assert leaves(root) + internal_nodes(root) == size(root)


@given(_specs)
def test_height_is_deepest_depth(spec):
    nodes = []
    root = _build(spec, collected=nodes)
    assert height(root) == max(depth(node) for node in nodes)
    assert depth(root) == 0


@given(_specs)
def test_child_depth_is_parent_depth_plus_one(spec):
    nodes = []
    root = _build(spec, collected=nodes)
    pairs = [
        (node, child)
        for node in nodes
        for child in (node.left, node.right)
        if child is not None
    ]
    assert len(pairs) == size(root) - 1
    assert [depth(child) for _, child in pairs] == [
        depth(node) + 1 for node, _ in pairs
    ]


@given(st.integers(min_value=1, max_value=30))
def test_balance_of_chains(length):
    root, _ = _left_chain(length)
    assert height(root) == length
    assert balance(root) == height(root)
    right_root = Node(0)
    node = right_root
    for value in range(length):
        node = node.insert_right(value)
    assert balance(right_root) == -height(right_root)


@given(st.integers(min_value=0, max_value=6))
def test_perfect_trees(levels):
    root = _perfect(levels)
    assert is_perfect(root) is True
    assert is_full(root) is True
    assert height(root) == levels
    assert balance(root) == 0
    assert size(_perfect(levels + 1)) == 2 * size(root) + 1


@given(st.integers(min_value=1, max_value=6))
def test_removing_a_leaf_breaks_perfection(levels):
    root = _perfect(levels)
    node = root
    while node.right is not None:
        node = node.right
    node.detach()
    assert is_perfect(root) is False
    assert is_full(root) is False


def test_full_but_not_perfect():
    root = Node(98)
    left = root.insert_left(12)
    root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    assert is_full(root) is True
    assert is_perfect(root) is False


def test_single_child_is_not_full():
    root = Node(98)
    root.insert_left(12)
    assert is_full(root) is False
    assert is_perfect(root) is False


def test_sibling_and_uncle():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    grandchild = left.insert_left(6)
    lonely = right.insert_right(512)
    assert sibling(left) is right
    assert sibling(right) is left
    assert sibling(root) is None
    assert sibling(grandchild) is None
    assert uncle(grandchild) is right
    assert uncle(lonely) is left
    assert uncle(left) is None