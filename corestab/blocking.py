"""Strong blocking test for a single candidate coalition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from corestab.types import UtilityVector


def coalition_utility(agent: int, seen: Iterable[int], win_matrix: Sequence[Sequence[float]]) -> float:
    """Utility ``agent`` would collect if exposed to exactly ``seen``."""
    row = win_matrix[agent]
    return sum(row[b] for b in seen)


def strong_blocks(
    coalition: Iterable[int],
    seen: Sequence[int],
    win_matrix: Sequence[Sequence[float]],
    utility: UtilityVector,
) -> bool:
    """True if every member strictly improves on its status-quo utility.

    A single member that merely ties or loses vetoes the block.
    """
    for a in coalition:
        if coalition_utility(a, seen, win_matrix) <= utility[a]:
            return False
    return True
