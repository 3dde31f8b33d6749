"""Stability instances with YAML support."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from corestab.checker import CoreStabilityChecker
from corestab.errors import InstanceLoadError
from corestab.types import StabilityResult



def _agent_id(value: Any) -> int:
    """Accept integral agent ids only; 2.0 is fine, 2.5 or True is not."""
    if isinstance(value, bool):
        raise InstanceLoadError(f"Agent id must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InstanceLoadError(f"Agent id must be an integer, got {value!r}")


@dataclass
class StabilityInstance:
    """A tiering and win matrix to check, with an optional expected outcome.

    YAML layout::

        name: scenario_a
        description: optional free text
        expected: false
        win_matrix:
          - [0, -1, 0.1]
          ...
        tiers:
          - [0, 1]
          - [2]
    """

    name: str
    tiers: list[list[int]]
    win_matrix: list[list[float]]
    expected: bool | None = None
    description: str = ""

    @property
    def n(self) -> int:
        """Number of agents."""
        return len(self.win_matrix)

    @property
    def k(self) -> int:
        """Number of tiers."""
        return len(self.tiers)

    def check(self, checker: CoreStabilityChecker | None = None) -> StabilityResult:
        """Run a stability check on this instance."""
        checker = checker or CoreStabilityChecker()
        return checker.check(self.tiers, self.win_matrix, self.n, self.k)

    def matches(self, result: StabilityResult) -> bool:
        """True if ``result`` agrees with the expected outcome (or none is set)."""
        return self.expected is None or result.stable == self.expected

    @classmethod
    def from_yaml(cls, path: str) -> StabilityInstance:
        """Load an instance from a YAML file.

        Args:
            path: Path to YAML file

        Returns:
            StabilityInstance instance

        Raises:
            ImportError: If pyyaml is not installed
            FileNotFoundError: If file doesn't exist
            InstanceLoadError: If the document is not a valid instance
        """
        try:
            import yaml  # type: ignore[import-untyped]
        except ImportError as err:
            raise ImportError(
                "pyyaml is required for YAML loading. Install with: pip install pyyaml"
            ) from err

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InstanceLoadError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise InstanceLoadError(f"{path}: expected a mapping at the top level")
        data.setdefault("name", str(path))
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StabilityInstance:
        """Build a StabilityInstance from a dictionary.

        Raises:
            InstanceLoadError: If required keys are missing or malformed
        """
        for key in ("tiers", "win_matrix"):
            if key not in data:
                raise InstanceLoadError(f"Instance is missing required key '{key}'")

        try:
            tiers = [[_agent_id(a) for a in tier] for tier in data["tiers"]]
            win_matrix = [[float(v) for v in row] for row in data["win_matrix"]]
        except (TypeError, ValueError) as e:
            raise InstanceLoadError(f"Malformed instance data: {e}") from e

        expected = data.get("expected")
        if expected is not None and not isinstance(expected, bool):
            raise InstanceLoadError(f"'expected' must be true or false, got {expected!r}")

        return cls(
            name=data.get("name", "unnamed"),
            tiers=tiers,
            win_matrix=win_matrix,
            expected=expected,
            description=data.get("description", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "expected": self.expected,
            "win_matrix": [list(row) for row in self.win_matrix],
            "tiers": [list(tier) for tier in self.tiers],
        }
