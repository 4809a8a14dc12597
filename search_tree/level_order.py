"""Level-order construction and rendering helpers for binary search trees.

``build_tree_from_level_order`` takes a breadth-first sequence literally and
therefore can assemble shapes that ``BinarySearchTree.insert`` would never
produce, including ordering violations.  That makes it the natural fixture
builder for the ``is_bst`` and ``is_avl`` diagnostics.

``render_tree`` draws one row per depth.  Missing positions show as ``·``
and 2L nodes (balance factor ``+2``) carry a trailing ``*``; with
``show_heights`` every node also reports its cached height and balance
factor, e.g. ``30(h=4,bf=2)*``.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional

from .binary_search_tree import BinarySearchTree, Node, balance_factor

PLACEHOLDER = "·"
TWO_LEVEL_MARK = "*"

__all__ = [
    "PLACEHOLDER",
    "TWO_LEVEL_MARK",
    "build_tree_from_level_order",
    "level_order_traversal",
    "render_tree",
]


def _padded_levels(root: Node[Any]) -> Iterator[List[Optional[Node[Any]]]]:
    # Absent positions are carried along so every row keeps its full width.
    level: List[Optional[Node[Any]]] = [root]
    while True:
        yield level
        if all(node is None or (node.left is None and node.right is None) for node in level):
            return
        level = [
            child
            for node in level
            for child in ((node.left, node.right) if node is not None else (None, None))
        ]


def _label(node: Optional[Node[Any]], show_heights: bool) -> str:
    if node is None:
        return PLACEHOLDER
    factor = balance_factor(node)
    label = str(node.value)
    if show_heights:
        label += f"(h={node.height},bf={factor})"
    if factor == 2:
        label += TWO_LEVEL_MARK
    return label


def render_tree(tree: BinarySearchTree[Any], *, show_heights: bool = False) -> str:
    """Render *tree* one depth per line.

    Rendering stops at the deepest level holding a real node, so no trailing
    placeholder-only rows appear.  An empty tree renders as ``<empty>``.
    """

    if tree.root is None:
        return "<empty>"
    return "\n".join(
        " ".join(_label(node, show_heights) for node in level)
        for level in _padded_levels(tree.root)
    )


def build_tree_from_level_order(values: Iterable[Optional[Any]]) -> BinarySearchTree[Any]:
    """Construct a tree whose shape follows a level-order sequence.

    ``None`` entries mark missing children.  No ordering is enforced, so the
    result may fail :meth:`BinarySearchTree.is_bst`.  Cached heights are
    computed once the shape is complete.  An empty sequence, or one starting
    with ``None``, gives an empty tree.
    """

    iterator = iter(values)
    first = next(iterator, None)
    if first is None:
        return BinarySearchTree()

    root: Node[Any] = Node(first)
    queue: Deque[Node[Any]] = deque([root])
    exhausted = False

    while queue and not exhausted:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(iterator)
            except StopIteration:
                exhausted = True
                break
            if value is None:
                continue
            child: Node[Any] = Node(value)
            setattr(node, side, child)
            queue.append(child)

    return BinarySearchTree.from_root(root)


def level_order_traversal(tree: BinarySearchTree[Any]) -> List[Optional[Any]]:
    """Return the compact level-order encoding read by
    :func:`build_tree_from_level_order`.

    Only real nodes contribute child slots; trailing ``None`` markers are
    dropped.
    """

    if tree.root is None:
        return []
    encoded: List[Optional[Any]] = [tree.root.value]
    level: List[Node[Any]] = [tree.root]
    while level:
        next_level: List[Node[Any]] = []
        for node in level:
            for child in (node.left, node.right):
                if child is None:
                    encoded.append(None)
                else:
                    encoded.append(child.value)
                    next_level.append(child)
        level = next_level
    while encoded and encoded[-1] is None:
        encoded.pop()
    return encoded
