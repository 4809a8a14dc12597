"""Demonstration scenarios for the ``bst_demo`` command line tool.

A scenario is a named insertion sequence, a set of probe values whose subtree
heights should be reported, and optional expectations checked against the
resulting :class:`~search_tree.report.TreeReport`.  Scenarios can be supplied
as JSON or YAML::

    scenarios:
      - name: reference
        values: [50, 30, 70, 20, 40, 60, 80, 10, 5]
        probes: [50, 30, 80]
        expected:
          is_bst: true
          is_avl: false

A bare top-level list of scenario mappings is accepted as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
import math
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

from .binary_search_tree import BinarySearchTree
from .report import TreeReport

logger = logging.getLogger(__name__)

EXPECTATION_KEYS = frozenset(
    {"size", "height", "sum_depths", "in_order", "two_level_nodes", "is_bst", "is_avl"}
)

__all__ = [
    "DEFAULT_SCENARIOS",
    "DemoScenario",
    "ScenarioConfigError",
    "ScenarioExpectationError",
    "load_scenarios",
]


class ScenarioConfigError(ValueError):
    """Raised when a scenario configuration cannot be loaded or is malformed."""


class ScenarioExpectationError(RuntimeError):
    """Raised when a tree report disagrees with a scenario's expectations."""


@dataclass(frozen=True)
class DemoScenario:
    """Insertion sequence plus the values whose heights get reported."""

    name: str
    values: tuple[Any, ...]
    probes: tuple[Any, ...] = ()
    expected: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = sorted(set(self.expected) - EXPECTATION_KEYS)
        if unknown:
            raise ScenarioConfigError(
                f"Scenario {self.name!r} has unknown expectation keys: {', '.join(map(str, unknown))}"
            )

    def build(self) -> BinarySearchTree[Any]:
        """Materialise the tree associated with this scenario."""

        return BinarySearchTree(self.values)

    def check(self, report: TreeReport) -> None:
        """Raise :class:`ScenarioExpectationError` on the first mismatch."""

        actual = report.to_dict()
        for key, expected in self.expected.items():
            if actual[key] != expected:
                raise ScenarioExpectationError(
                    f"Scenario {self.name!r} expected {key}={expected!r}"
                    f" but received {actual[key]!r}"
                )


DEFAULT_SCENARIOS: tuple[DemoScenario, ...] = (
    DemoScenario(
        name="reference",
        values=(50, 30, 70, 20, 40, 60, 80, 10, 5),
        probes=(50, 30, 80),
        expected={
            "height": 5,
            "sum_depths": 7,
            "is_bst": True,
            "is_avl": False,
            "two_level_nodes": [50, 30, 20],
        },
    ),
    DemoScenario(
        name="ascending",
        values=(1, 2, 3, 4, 5),
        probes=(1, 5),
        expected={"height": 5, "is_bst": True, "is_avl": False},
    ),
)


def load_scenarios(path: Optional[str | Path]) -> tuple[DemoScenario, ...]:
    """Return the scenarios stored at *path*, or the defaults for ``None``."""

    if path is None:
        return DEFAULT_SCENARIOS

    config_path = Path(path)
    if not config_path.exists():
        raise ScenarioConfigError(f"Scenario config not found: {config_path}")
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScenarioConfigError(f"Cannot read scenario config {config_path}: {exc}") from exc
    suffix = config_path.suffix.lower()
    if suffix == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ScenarioConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    elif suffix in {".yaml", ".yml"}:
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ScenarioConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    else:
        raise ScenarioConfigError(
            f"Unsupported scenario config extension {suffix!r}; use .json, .yaml or .yml"
        )

    scenarios = _parse_scenarios(payload)
    logger.info("Loaded %d scenario(s) from %s", len(scenarios), config_path)
    return scenarios


def _parse_scenarios(payload: Any) -> tuple[DemoScenario, ...]:
    if isinstance(payload, Mapping):
        payload = payload.get("scenarios")
    if not isinstance(payload, list):
        raise ScenarioConfigError("Scenario config must provide a 'scenarios' list")
    if not payload:
        raise ScenarioConfigError("At least one scenario is required")
    return tuple(_parse_scenario(index, entry) for index, entry in enumerate(payload))


def _parse_scenario(index: int, entry: Any) -> DemoScenario:
    if not isinstance(entry, Mapping):
        raise ScenarioConfigError(f"Scenario #{index} must be a mapping")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ScenarioConfigError(f"Scenario #{index} requires a non-empty name")

    values = _parse_values(name, "values", entry.get("values"))
    probes = _parse_values(name, "probes", entry.get("probes", []))
    if values and probes and _value_kind(values[0]) != _value_kind(probes[0]):
        raise ScenarioConfigError(
            f"Scenario {name!r} probes must have the same type as its values"
        )

    expected = entry.get("expected", {})
    if expected is None:
        expected = {}
    if not isinstance(expected, Mapping):
        raise ScenarioConfigError(f"Scenario {name!r} expected must be a mapping")
    return DemoScenario(
        name=name,
        values=values,
        probes=probes,
        expected=dict(expected),
    )


def _value_kind(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return "invalid"
    if isinstance(value, float) and not math.isfinite(value):
        return "invalid"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "invalid"


def _parse_values(name: str, label: str, raw: Any) -> tuple[Any, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        raise ScenarioConfigError(f"Scenario {name!r} {label} must be a list")
    kinds = {_value_kind(item) for item in raw}
    if "invalid" in kinds:
        raise ScenarioConfigError(
            f"Scenario {name!r} {label} must contain finite numbers or strings"
        )
    if len(kinds) > 1:
        raise ScenarioConfigError(
            f"Scenario {name!r} {label} must not mix numbers and strings"
        )
    return tuple(raw)
