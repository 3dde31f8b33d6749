"""Status-quo utilities under a tiering."""

from __future__ import annotations

from collections.abc import Sequence

from corestab.types import UtilityVector


def evaluate(tier_list: Sequence[Sequence[int]], win_matrix: Sequence[Sequence[float]]) -> UtilityVector:
    """Compute every agent's utility under the current tiering.

    An agent in tier ``i`` collects its win-values against every agent in
    tiers ``0..i``, its own tier included. Tiers behind it contribute
    nothing. Agents missing from the tier list keep utility 0.0.
    """
    utility = [0.0] * len(win_matrix)
    visible: list[int] = []

    for tier in tier_list:
        visible.extend(tier)
        for a in tier:
            row = win_matrix[a]
            utility[a] = sum(row[b] for b in visible)

    return UtilityVector(tuple(utility))
