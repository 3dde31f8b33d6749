"""Reference tierings with known outcomes.

Two win matrices (5 and 10 agents) and five tierings over them, each with
the outcome a correct checker must report.
"""

from __future__ import annotations

from corestab.instance import StabilityInstance

FIVE_AGENT_WIN_MATRIX: list[list[float]] = [
    [0, -1, 0.1, -1, 0.1],
    [1, 0, -1, -1, -1],
    [-0.1, 1, 0, -1, 0.2],
    [1, 1, 1, 0, 0.1],
    [-0.1, 1, -0.2, -0.1, 0],
]

TEN_AGENT_WIN_MATRIX: list[list[float]] = [
    [0, -1, -1, -1, 1, 1, 1, 1, 1, 1],
    [1, 0, 1, -1, -1, -1, -1, 1, 1, -1],
    [1, -1, 0, 1, 1, 1, -1, -1, 1, -1],
    [1, 1, -1, 0, -1, -1, -1, -1, 1, 1],
    [-1, 1, -1, 1, 0, 1, -1, 1, 1, -1],
    [-1, 1, -1, 1, -1, 0, -1, 1, -1, 1],
    [-1, 1, 1, 1, 1, 1, 0, 1, 1, -1],
    [-1, -1, 1, 1, -1, -1, -1, 0, 1, 1],
    [-1, -1, -1, -1, -1, 1, -1, -1, 0, 1],
    [-1, 1, 1, -1, 1, -1, 1, -1, -1, 0],
]

SCENARIOS: dict[str, StabilityInstance] = {
    "A": StabilityInstance(
        name="A",
        description="5 agents, 3 tiers; {2, 4} gains by moving behind tier 0",
        win_matrix=FIVE_AGENT_WIN_MATRIX,
        tiers=[[0, 1], [2], [3, 4]],
        expected=False,
    ),
    "B": StabilityInstance(
        name="B",
        description="5 agents, 3 tiers",
        win_matrix=FIVE_AGENT_WIN_MATRIX,
        tiers=[[1], [0, 2, 4], [3]],
        expected=True,
    ),
    "C": StabilityInstance(
        name="C",
        description="5 agents, 3 tiers",
        win_matrix=FIVE_AGENT_WIN_MATRIX,
        tiers=[[0, 1], [2, 4], [3]],
        expected=True,
    ),
    "D": StabilityInstance(
        name="D",
        description="10 agents, 8 tiers",
        win_matrix=TEN_AGENT_WIN_MATRIX,
        tiers=[[3, 4, 8], [2], [9], [7], [5], [0], [1], [6]],
        expected=False,
    ),
    "E": StabilityInstance(
        name="E",
        description="10 agents, 8 tiers",
        win_matrix=TEN_AGENT_WIN_MATRIX,
        tiers=[[1, 8], [3, 4], [2], [9], [7], [5], [6], [0]],
        expected=True,
    ),
}


def get_scenario(name: str) -> StabilityInstance:
    """Look up a shipped scenario by name (case-insensitive).

    Raises:
        KeyError: If no scenario has that name
    """
    key = name.upper()
    if key not in SCENARIOS:
        raise KeyError(f"Unknown scenario '{name}'. Available: {', '.join(SCENARIOS)}")
    return SCENARIOS[key]
