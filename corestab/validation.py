"""Input checks run before a stability search.

The search itself assumes a well-formed instance. These checks fail fast
with a descriptive ValidationError instead of an IndexError deep inside
the enumeration.
"""

from __future__ import annotations

from collections.abc import Sequence

from corestab.errors import ValidationError


def validate_win_matrix(win_matrix: Sequence[Sequence[float]], n: int | None = None) -> int:
    """Check that the win matrix is square and return its size."""
    size = len(win_matrix)
    if n is not None and n != size:
        raise ValidationError(f"Agent count n={n} does not match win matrix with {size} rows")

    for i, row in enumerate(win_matrix):
        if len(row) != size:
            raise ValidationError(f"Win matrix row {i} has {len(row)} entries, expected {size}")
    return size


def validate_tier_list(tier_list: Sequence[Sequence[int]], n: int, k: int | None = None) -> None:
    """Check that the tiers partition ``{0, ..., n-1}`` exactly."""
    if k is not None and k != len(tier_list):
        raise ValidationError(f"Tier count k={k} does not match tier list with {len(tier_list)} tiers")

    placed: dict[int, int] = {}
    for i, tier in enumerate(tier_list):
        for a in tier:
            if not isinstance(a, int) or isinstance(a, bool):
                raise ValidationError(f"Tier {i} holds non-integer agent {a!r}")
            if not 0 <= a < n:
                raise ValidationError(f"Agent {a} in tier {i} is outside [0, {n})")
            if a in placed:
                raise ValidationError(f"Agent {a} appears in tier {placed[a]} and tier {i}")
            placed[a] = i

    missing = sorted(set(range(n)) - set(placed))
    if missing:
        raise ValidationError(f"Agents {missing} are not assigned to any tier")


def validate_instance(
    tier_list: Sequence[Sequence[int]],
    win_matrix: Sequence[Sequence[float]],
    n: int | None = None,
    k: int | None = None,
) -> None:
    """Validate a full (tier list, win matrix) instance."""
    size = validate_win_matrix(win_matrix, n)
    validate_tier_list(tier_list, size, k)
