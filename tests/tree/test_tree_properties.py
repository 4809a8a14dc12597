"""Property-based checks for the insertion invariants."""

from __future__ import annotations

from typing import Optional

from hypothesis import given, strategies as st

from search_tree.binary_search_tree import BinarySearchTree, Node, node_height

value_lists = st.lists(st.integers(-1000, 1000), max_size=200)


def _heights_consistent(node: Optional[Node[int]]) -> bool:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        expected = 1 + max(node_height(current.left), node_height(current.right))
        if current.height != expected:
            return False
        stack.extend(child for child in (current.left, current.right) if child is not None)
    return True


@given(value_lists)
def test_insertion_keeps_ordering(values: list[int]) -> None:
    tree = BinarySearchTree(values)
    assert tree.is_bst()
    assert tree.in_order() == sorted(set(values))
    assert len(tree) == len(set(values))


@given(value_lists)
def test_insertion_keeps_cached_heights(values: list[int]) -> None:
    tree = BinarySearchTree(values)
    assert _heights_consistent(tree.root)


@given(value_lists, st.data())
def test_duplicate_insert_is_idempotent(values: list[int], data: st.DataObject) -> None:
    tree = BinarySearchTree(values)
    before = (tree.in_order(), tree.height(), tree.sum_depths())
    if values:
        tree.insert(data.draw(st.sampled_from(values)))
    assert (tree.in_order(), tree.height(), tree.sum_depths()) == before


@given(value_lists)
def test_sum_depths_charges_absent_subtrees(values: list[int]) -> None:
    tree = BinarySearchTree(values)
    if not values:
        assert tree.sum_depths() == -1
        return
    depth_total = 0
    stack = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        depth_total += depth
        stack.extend((child, depth + 1) for child in (node.left, node.right) if child is not None)
    # A tree of n nodes has n + 1 empty child slots.
    assert tree.sum_depths() == depth_total - (len(tree) + 1)


@given(value_lists)
def test_two_level_nodes_are_left_heavy_by_two(values: list[int]) -> None:
    tree = BinarySearchTree(values)
    for value in tree.two_level_nodes():
        node = tree.find(value)
        assert node is not None
        assert node_height(node.left) - node_height(node.right) == 2
    if tree.two_level_nodes():
        assert not tree.is_avl()
