"""Cartesian product over per-tier candidate lists.

The search picks exactly one subset index per tier. ``CombinationSpace``
enumerates those picks with the first list outermost and the last list
innermost, and exposes the total count up front since it is the cost of
the search.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence


class CombinationSpace:
    """Every combination choosing one element from each candidate list."""

    def __init__(self, candidate_lists: Sequence[Sequence[int]]):
        self._lists: tuple[tuple[int, ...], ...] = tuple(tuple(c) for c in candidate_lists)

    @property
    def width(self) -> int:
        """Length of each combination (one slot per list)."""
        return len(self._lists)

    def __len__(self) -> int:
        return math.prod(len(c) for c in self._lists)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return itertools.product(*self._lists)

    def __getitem__(self, position: int) -> tuple[int, ...]:
        """Combination at ``position`` in iteration order.

        Decodes ``position`` as a mixed-radix number whose most significant
        digit belongs to the first list.
        """
        total = len(self)
        if position < 0:
            position += total
        if not 0 <= position < total:
            raise IndexError(f"combination {position} out of range for {total}")

        picks: list[int] = []
        for candidates in reversed(self._lists):
            position, digit = divmod(position, len(candidates))
            picks.append(candidates[digit])
        return tuple(reversed(picks))


def product(candidate_lists: Sequence[Sequence[int]]) -> CombinationSpace | None:
    """Build the combination space, or None when there are no lists."""
    if not candidate_lists:
        return None
    return CombinationSpace(candidate_lists)
