"""Unbalanced binary search tree with cached subtree heights.

The module provides the ``BinarySearchTree`` container together with the
``Node`` storage unit and a pair of free helpers (``node_height`` and
``balance_factor``) that treat a missing child as a subtree of height ``0``.

The tree never rebalances itself.  It keeps each node's height up to date so
that the diagnostic queries can be answered without rescanning subtrees:

* ``sum_depths`` – total depth of every node with the historical ``-1`` charge
  for each absent subtree.
* ``two_level_nodes`` – values whose left subtree is exactly two levels taller
  than the right one, in pre-order.
* ``is_bst`` – global ordering check using inherited open bounds.
* ``is_avl`` – shape check requiring every balance factor in ``[-1, 1]``.

All walks use an explicit stack instead of recursion, so a degenerate tree
built from sorted input stays usable beyond the interpreter recursion limit.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional, Protocol, Tuple, TypeVar

logger = logging.getLogger(__name__)

__all__ = [
    "BinarySearchTree",
    "InvalidValueError",
    "Node",
    "balance_factor",
    "node_height",
    "refresh_heights",
]


class SupportsLessThan(Protocol):
    @abstractmethod
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


class InvalidValueError(ValueError):
    """Raised when ``None`` is offered as a tree value."""


@dataclass(slots=True, eq=False)
class Node(Generic[T]):
    """Single tree entry owning its left and right subtrees."""

    value: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None
    height: int = 1

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidValueError("Node value must not be None")
        if self.height < 1:
            raise ValueError("Node height must be at least 1")

    def update_height(self) -> None:
        """Recompute the cached height from the children's cached heights."""

        self.height = 1 + max(node_height(self.left), node_height(self.right))


def node_height(node: Optional[Node[Any]]) -> int:
    """Return the cached height of *node*, or ``0`` for a missing node."""

    if node is None:
        return 0
    return node.height


def balance_factor(node: Optional[Node[Any]]) -> int:
    """Return ``height(left) - height(right)`` for *node* (``0`` when missing)."""

    if node is None:
        return 0
    return node_height(node.left) - node_height(node.right)


def refresh_heights(root: Optional[Node[Any]]) -> None:
    """Recompute every cached height below *root* bottom-up.

    Needed for structures assembled by hand, where children were attached
    without going through :meth:`BinarySearchTree.insert`.
    """

    if root is None:
        return
    pending: List[Node[Any]] = [root]
    ordered: List[Node[Any]] = []
    while pending:
        node = pending.pop()
        ordered.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    # Every parent precedes its children in ``ordered``.
    for node in reversed(ordered):
        node.update_height()


class BinarySearchTree(Generic[T]):
    """Plain (non self-balancing) binary search tree without duplicates."""

    __slots__ = ("root", "_size")

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self.root: Optional[Node[T]] = None
        self._size = 0
        if values is not None:
            self.bulk_insert(values)

    @classmethod
    def from_root(cls, root: Optional[Node[T]]) -> "BinarySearchTree[T]":
        """Wrap an existing node structure without validating its ordering.

        Cached heights are recomputed so the shape queries stay truthful even
        when *root* was wired together by hand.
        """

        tree: BinarySearchTree[T] = cls()
        refresh_heights(root)
        tree.root = root
        tree._size = sum(1 for _ in tree._iter_pre_order())
        return tree

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def insert(self, value: T) -> None:
        """Insert *value*; inserting an existing value is a silent no-op.

        ``None`` raises :class:`InvalidValueError` and leaves the tree intact.
        """

        self._validate_value(value)
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return

        path: List[Node[T]] = []
        node = self.root
        while True:
            path.append(node)
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                logger.debug("Ignoring duplicate value %r", value)
                return

        self._size += 1
        for ancestor in reversed(path):
            ancestor.update_height()

    def bulk_insert(self, values: Iterable[T]) -> None:
        """Insert every item of *values* in order.

        The iterable is consumed up front and validated as a whole, so a
        ``None`` anywhere in it leaves the tree untouched.
        """

        items = list(values)
        for item in items:
            self._validate_value(item)
        for item in items:
            self.insert(item)

    def find(self, value: T) -> Optional[Node[T]]:
        """Return the node holding *value*, or ``None`` when it is absent."""

        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, value: object) -> bool:
        if value is None:
            return False
        return self.find(value) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self._iter_in_order()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.in_order()!r})"

    # ------------------------------------------------------------------
    # Height queries
    # ------------------------------------------------------------------
    def height(self) -> int:
        """Height of the whole tree; ``0`` when empty."""

        return node_height(self.root)

    def height_of(self, value: T) -> int:
        """Height of the subtree rooted at *value*; ``0`` when absent."""

        return node_height(self.find(value))

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def in_order(self) -> List[T]:
        """Return the stored values in ascending order."""

        return list(self._iter_in_order())

    def pre_order(self) -> List[T]:
        """Return the stored values in pre-order (node, left, right)."""

        return [node.value for node in self._iter_pre_order()]

    def _iter_in_order(self) -> Iterator[T]:
        stack: List[Node[T]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def _iter_pre_order(self) -> Iterator[Node[T]]:
        if self.root is None:
            return
        stack: List[Node[T]] = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    # ------------------------------------------------------------------
    # Analyses
    # ------------------------------------------------------------------
    def sum_depths(self) -> int:
        """Return the depth total where every absent subtree counts ``-1``.

        The root sits at depth ``0``.  An empty tree yields ``-1`` and a
        lone root yields ``-2`` (``0`` plus two absent children).
        """

        if self.root is None:
            return -1
        total = 0
        stack: List[Tuple[Node[T], int]] = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            total += depth
            for child in (node.left, node.right):
                if child is None:
                    total -= 1
                else:
                    stack.append((child, depth + 1))
        return total

    def two_level_nodes(self) -> List[T]:
        """Return the pre-order values of nodes whose balance factor is ``+2``."""

        return [
            node.value for node in self._iter_pre_order() if balance_factor(node) == 2
        ]

    def is_bst(self) -> bool:
        """Return ``True`` when every value lies within its ancestors' bounds."""

        if self.root is None:
            return True
        # (node, exclusive lower bound, exclusive upper bound)
        stack: List[Tuple[Node[T], Optional[T], Optional[T]]] = [
            (self.root, None, None)
        ]
        while stack:
            node, low, high = stack.pop()
            if high is not None and not node.value < high:
                return False
            if low is not None and not low < node.value:
                return False
            if node.right is not None:
                stack.append((node.right, node.value, high))
            if node.left is not None:
                stack.append((node.left, low, node.value))
        return True

    def is_avl(self) -> bool:
        """Return ``True`` when every balance factor lies within ``[-1, 1]``.

        Ordering is not inspected; combine with :meth:`is_bst` for a full
        AVL-tree check.
        """

        return all(-1 <= balance_factor(node) <= 1 for node in self._iter_pre_order())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _validate_value(value: object) -> None:
        if value is None:
            raise InvalidValueError("Cannot insert None into the tree")
