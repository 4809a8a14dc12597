"""Structured snapshot of every diagnostic a tree supports."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from .binary_search_tree import BinarySearchTree

logger = logging.getLogger(__name__)

__all__ = ["TreeReport", "analyse_tree"]


@dataclass(frozen=True)
class TreeReport:
    """Results of running each analysis against one tree."""

    size: int
    height: int
    sum_depths: int
    in_order: tuple[Any, ...]
    two_level_nodes: tuple[Any, ...]
    is_bst: bool
    is_avl: bool

    @property
    def is_avl_tree(self) -> bool:
        return self.is_bst and self.is_avl

    def to_dict(self) -> dict[str, object]:
        return {
            "size": self.size,
            "height": self.height,
            "sum_depths": self.sum_depths,
            "in_order": list(self.in_order),
            "two_level_nodes": list(self.two_level_nodes),
            "is_bst": self.is_bst,
            "is_avl": self.is_avl,
        }

    def summary(self) -> str:
        if self.size == 0:
            return "Empty tree."
        verdict = "is" if self.is_avl_tree else "is not"
        return (
            f"Tree with {self.size} values and height {self.height} "
            f"{verdict} a valid AVL tree (bst={self.is_bst}, avl={self.is_avl})."
        )


def analyse_tree(tree: BinarySearchTree[Any]) -> TreeReport:
    """Run every analysis on *tree* and collect the results."""

    report = TreeReport(
        size=len(tree),
        height=tree.height(),
        sum_depths=tree.sum_depths(),
        in_order=tuple(tree.in_order()),
        two_level_nodes=tuple(tree.two_level_nodes()),
        is_bst=tree.is_bst(),
        is_avl=tree.is_avl(),
    )
    logger.debug("Analysed tree: %s", report.summary())
    return report
