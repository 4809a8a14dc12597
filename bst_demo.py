"""Command line demonstration of the ``search_tree`` binary search tree.

Each scenario inserts a fixed sequence of values into a fresh
``BinarySearchTree`` and prints the in-order traversal, the heights of a few
probe values, the depth total, both validity checks, the 2L nodes and a
level-order rendering of the resulting shape.  Scenarios come from the
built-in defaults or from a JSON/YAML file passed with ``--config``.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, List, Sequence

from search_tree import (
    BinarySearchTree,
    DemoScenario,
    ScenarioConfigError,
    ScenarioExpectationError,
    TreeReport,
    analyse_tree,
    level_order_traversal,
    load_scenarios,
    render_tree,
)

logger = logging.getLogger(__name__)


def _format_values(values: Sequence[Any]) -> str:
    return " ".join(str(value) for value in values)


def _format_report(
    scenario: DemoScenario,
    tree: BinarySearchTree[Any],
    report: TreeReport,
    *,
    show_heights: bool = False,
) -> List[str]:
    """Return formatted output lines for *scenario* and its *tree*."""

    lines = [
        f"Scenario: {scenario.name}",
        "In-order Traversal:",
        _format_values(report.in_order),
    ]
    root_value = tree.root.value if tree.root is not None else None
    for probe in scenario.probes:
        label = f"root ({probe})" if probe == root_value else str(probe)
        lines.append(f"Height of {label}: {tree.height_of(probe)}")
    lines.extend(
        [
            f"Sum of Depths: {report.sum_depths}",
            f"Is BST: {report.is_bst}",
            f"Is AVL: {report.is_avl}",
            f"2L Nodes: {_format_values(report.two_level_nodes)}".rstrip(),
            render_tree(tree, show_heights=show_heights),
        ]
    )
    return lines


def _scenario_payload(
    scenario: DemoScenario, tree: BinarySearchTree[Any], report: TreeReport
) -> dict[str, object]:
    payload: dict[str, object] = {"name": scenario.name}
    payload.update(report.to_dict())
    payload["probe_heights"] = [
        {"value": probe, "height": tree.height_of(probe)} for probe in scenario.probes
    ]
    payload["level_order"] = level_order_traversal(tree)
    payload["summary"] = report.summary()
    return payload


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the demonstration flow for all configured scenarios."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        default=None,
        help="JSON or YAML file describing the scenarios. Defaults to the built-in set.",
    )
    parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format for the scenario reports.",
    )
    parser.add_argument(
        "--show-heights",
        action="store_true",
        help="Annotate rendered nodes with their height and balance factor.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        scenarios = load_scenarios(args.config)
    except ScenarioConfigError as exc:
        logger.error("Failed to load scenarios: %s", exc)
        return 1

    payloads: List[dict[str, object]] = []
    for scenario in scenarios:
        tree = scenario.build()
        report = analyse_tree(tree)
        try:
            scenario.check(report)
        except ScenarioExpectationError as exc:
            logger.error("%s", exc)
            return 1

        if args.format == "json":
            payloads.append(_scenario_payload(scenario, tree, report))
            continue
        for line in _format_report(
            scenario, tree, report, show_heights=args.show_heights
        ):
            print(line)
        print()  # Spacer between scenarios

    if args.format == "json":
        print(json.dumps({"scenarios": payloads}, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
