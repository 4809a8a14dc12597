from __future__ import annotations

import pytest

from search_tree.binary_search_tree import BinarySearchTree, InvalidValueError
from search_tree.level_order import (
    build_tree_from_level_order,
    level_order_traversal,
    render_tree,
)


REFERENCE_VALUES = [50, 30, 70, 20, 40, 60, 80, 10, 5]


def test_render_marks_two_level_nodes_on_reference_tree() -> None:
    tree = BinarySearchTree(REFERENCE_VALUES)
    assert render_tree(tree).splitlines() == [
        "50*",
        "30* 70",
        "20* 40 60 80",
        "10 · · · · · · ·",
        "5 · · · · · · · · · · · · · · ·",
    ]


def test_render_right_skew_has_no_marks() -> None:
    # Balance factor -2 does not count as a 2L node.
    tree = BinarySearchTree([1, 2, 3])
    assert render_tree(tree) == "\n".join(["1", "· 2", "· · · 3"])


def test_render_with_heights_shows_cached_bookkeeping() -> None:
    tree = BinarySearchTree([3, 2, 1])
    assert render_tree(tree, show_heights=True).splitlines() == [
        "3(h=3,bf=2)*",
        "2(h=2,bf=1) ·",
        "1(h=1,bf=0) · · ·",
    ]


def test_render_balanced_tree_stops_at_leaves() -> None:
    tree = BinarySearchTree([20, 10, 30])
    assert render_tree(tree, show_heights=True) == "\n".join(
        ["20(h=2,bf=0)", "10(h=1,bf=0) 30(h=1,bf=0)"]
    )


def test_render_empty_search_tree() -> None:
    assert render_tree(BinarySearchTree()) == "<empty>"


def test_level_order_encoding_rebuilds_reference_tree() -> None:
    tree = BinarySearchTree(REFERENCE_VALUES)
    encoded = level_order_traversal(tree)
    assert encoded == [50, 30, 70, 20, 40, 60, 80, 10] + [None] * 7 + [5]

    rebuilt = build_tree_from_level_order(encoded)
    assert rebuilt.in_order() == tree.in_order()
    assert rebuilt.pre_order() == tree.pre_order()
    assert rebuilt.height() == 5
    assert rebuilt.two_level_nodes() == [50, 30, 20]
    assert rebuilt.is_bst() is True


def test_build_tree_computes_heights_for_left_chain() -> None:
    tree = build_tree_from_level_order([5, 4, None, 3, None, 2])
    assert tree.height() == 4
    assert tree.height_of(4) == 3
    # The root leans by three levels, so only 4 qualifies.
    assert tree.two_level_nodes() == [4]
    assert tree.is_avl() is False


def test_build_tree_allows_ordering_violations() -> None:
    # 9 sits left of the root although it is greater than 5.
    tree = build_tree_from_level_order([5, 9, 8])
    assert tree.is_bst() is False
    assert tree.is_avl() is True
    assert level_order_traversal(tree) == [5, 9, 8]


def test_build_tree_empty_inputs() -> None:
    assert build_tree_from_level_order([]).root is None
    assert build_tree_from_level_order([None, 1]).root is None
    assert level_order_traversal(BinarySearchTree()) == []


def test_build_tree_ignores_values_without_parent_slot() -> None:
    tree = build_tree_from_level_order([1, None, None, 2])
    assert tree.in_order() == [1]


def test_hand_built_tree_still_rejects_none_insert() -> None:
    tree = build_tree_from_level_order([1])
    with pytest.raises(InvalidValueError):
        tree.insert(None)  # type: ignore[arg-type]
    assert tree.in_order() == [1]
