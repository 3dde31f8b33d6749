"""Frozen result records for stability checks.

Every value here is owned by a single check call and never mutated after
construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from corestab.errors import InvalidSubsetIndex


@dataclass(frozen=True)
class UtilityVector:
    """Status-quo utility of every agent, indexed by agent."""

    values: tuple[float, ...]

    def __getitem__(self, agent: int) -> float:
        return self.values[agent]

    def __len__(self) -> int:
        return len(self.values)

    def as_dict(self) -> dict[int, float]:
        return dict(enumerate(self.values))


@dataclass(frozen=True)
class SubsetOutcome:
    """Result of decoding a subset index: either a subset or an error."""

    subset: tuple[int, ...] | None = None
    error: InvalidSubsetIndex | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[int, ...]:
        """Return the subset, re-raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        assert self.subset is not None
        return self.subset


@dataclass(frozen=True)
class BlockingWitness:
    """A coalition that strictly improves every member by repositioning.

    Attributes:
        coalition: Members in formation order (anchor tier first)
        anchor_tier: Tier whose full membership anchors the coalition
        target_tier: Position the coalition would move to (0 = front)
        seen: Agents the coalition is exposed to at the target position
    """

    coalition: tuple[int, ...]
    anchor_tier: int
    target_tier: int
    seen: tuple[int, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "coalition": list(self.coalition),
            "anchor_tier": self.anchor_tier,
            "target_tier": self.target_tier,
            "seen": list(self.seen),
        }


@dataclass(frozen=True)
class StabilityResult:
    """Outcome of one core stability check."""

    stable: bool
    witness: BlockingWitness | None = None
    candidates_checked: int = 0
    blocking_tests: int = 0

    def __bool__(self) -> bool:
        return self.stable

    def to_dict(self) -> dict:
        return {
            "stable": self.stable,
            "witness": self.witness.to_dict() if self.witness else None,
            "candidates_checked": self.candidates_checked,
            "blocking_tests": self.blocking_tests,
        }
