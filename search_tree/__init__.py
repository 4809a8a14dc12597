"""Binary search tree with height bookkeeping and shape diagnostics."""

from .binary_search_tree import (
    BinarySearchTree,
    InvalidValueError,
    Node,
    balance_factor,
    node_height,
    refresh_heights,
)
from .level_order import build_tree_from_level_order, level_order_traversal, render_tree
from .report import TreeReport, analyse_tree
from .scenarios import (
    DEFAULT_SCENARIOS,
    DemoScenario,
    ScenarioConfigError,
    ScenarioExpectationError,
    load_scenarios,
)

__all__ = [
    "BinarySearchTree",
    "DEFAULT_SCENARIOS",
    "DemoScenario",
    "InvalidValueError",
    "Node",
    "ScenarioConfigError",
    "ScenarioExpectationError",
    "TreeReport",
    "analyse_tree",
    "balance_factor",
    "build_tree_from_level_order",
    "level_order_traversal",
    "load_scenarios",
    "node_height",
    "refresh_heights",
    "render_tree",
]
