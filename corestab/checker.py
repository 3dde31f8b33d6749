"""Core stability verification for a fixed tiering.

A coalition anchored at tier ``i`` is the whole of tier ``i`` plus any
subset of every other tier. It may deviate either to the front of the
list, where it sees only itself, or to an intermediate position behind
tier ``j``, where it also sees every agent of tiers ``0..j``. The tiering
is blocked as soon as one such deviation strictly improves every member.

The search is exhaustive and exponential in the total size of the tiers
other than the anchor.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from corestab.blocking import strong_blocks
from corestab.combinations import product
from corestab.config import CheckerConfig
from corestab.subsets import subset_count, subset_for
from corestab.types import BlockingWitness, StabilityResult, UtilityVector
from corestab.utility import evaluate
from corestab.validation import validate_instance

logger = logging.getLogger(__name__)

TierList = Sequence[Sequence[int]]
WinMatrix = Sequence[Sequence[float]]


class CoreStabilityChecker:
    """Decides whether a tiering admits a strongly blocking coalition.

    Holds configuration only; every check recomputes utilities and keeps
    its scratch state local, so one checker can be reused freely.
    """

    def __init__(self, config: CheckerConfig | None = None):
        self.config = config or CheckerConfig()

    def check(
        self,
        tier_list: TierList,
        win_matrix: WinMatrix,
        n: int | None = None,
        k: int | None = None,
    ) -> StabilityResult:
        """Run the full search and return the outcome with its witness.

        Args:
            tier_list: Ordered tiers, tier 0 most favored
            win_matrix: n x n pairwise win-values
            n: Expected agent count (checked when validation is enabled)
            k: Expected tier count (checked when validation is enabled)

        Returns:
            StabilityResult, stable unless a blocking coalition was found

        Raises:
            ValidationError: If validation is enabled and the instance is malformed
        """
        if self.config.validate_inputs:
            validate_instance(tier_list, win_matrix, n, k)

        tiers = [tuple(tier) for tier in tier_list]
        if not tiers:
            # No tier to deviate from or to
            return StabilityResult(stable=True)
        utility = evaluate(tiers, win_matrix)

        candidates = 0
        tests = 0
        for anchor in range(len(tiers)):
            space = product(self._candidate_lists(tiers, anchor))
            assert space is not None
            logger.debug(f"Anchor tier {anchor}: {len(space)} candidate coalitions")

            already_seen = set().union(*tiers[: anchor + 1])
            for picks in space:
                candidates += 1
                coalition = self._form_coalition(tiers, anchor, picks)
                if not coalition:
                    # Only reachable when the anchor tier is empty; nobody to improve
                    continue

                for target, seen in self._deviations(tiers, coalition):
                    if set(seen) == already_seen:
                        continue
                    tests += 1
                    if strong_blocks(coalition, seen, win_matrix, utility):
                        witness = BlockingWitness(
                            coalition=tuple(coalition),
                            anchor_tier=anchor,
                            target_tier=target,
                            seen=tuple(seen),
                        )
                        self._report(witness)
                        return StabilityResult(
                            stable=False,
                            witness=witness,
                            candidates_checked=candidates,
                            blocking_tests=tests,
                        )

        return StabilityResult(stable=True, candidates_checked=candidates, blocking_tests=tests)

    def find_blocking_coalition(self, tier_list: TierList, win_matrix: WinMatrix) -> BlockingWitness | None:
        """Return the first blocking coalition found, or None if stable."""
        return self.check(tier_list, win_matrix).witness

    def utilities(self, tier_list: TierList, win_matrix: WinMatrix) -> UtilityVector:
        """Status-quo utilities the search compares against."""
        return evaluate(tier_list, win_matrix)

    @staticmethod
    def _candidate_lists(tiers: list[tuple[int, ...]], anchor: int) -> list[list[int]]:
        # The anchor tier joins in full, so its own pick is pinned to the empty subset
        return [[0] if j == anchor else list(range(subset_count(len(tier)))) for j, tier in enumerate(tiers)]

    @staticmethod
    def _form_coalition(tiers: list[tuple[int, ...]], anchor: int, picks: tuple[int, ...]) -> list[int]:
        coalition = list(tiers[anchor])
        for tier, index in zip(tiers, picks):
            coalition.extend(subset_for(tier, index).unwrap())
        return coalition

    @staticmethod
    def _deviations(tiers: list[tuple[int, ...]], coalition: list[int]) -> Iterator[tuple[int, list[int]]]:
        """Yield (target tier, seen set) for each position the coalition could move to.

        The first move is to the front, seeing only the coalition. Each later
        move folds one more tier into the seen set and is only yielded when
        that tier added someone new.
        """
        seen = dict.fromkeys(coalition)
        yield 0, list(seen)

        for j, tier in enumerate(tiers):
            changed = False
            for a in tier:
                if a not in seen:
                    seen[a] = None
                    changed = True
            if changed:
                yield j + 1, list(seen)

    def _report(self, witness: BlockingWitness) -> None:
        if self.config.log_blocks:
            logger.info(
                f"Blocked by {list(witness.coalition)}; "
                f"coalition wants to move to tier {witness.target_tier}"
            )


def is_core_stable(
    tier_list: TierList,
    win_matrix: WinMatrix,
    n: int | None = None,
    k: int | None = None,
    config: CheckerConfig | None = None,
) -> bool:
    """True if no coalition strongly blocks ``tier_list``."""
    return CoreStabilityChecker(config).check(tier_list, win_matrix, n, k).stable
