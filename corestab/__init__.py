"""Core stability verification for tiered coalitions.

Given agents ranked into ordered tiers and a pairwise win matrix, decide
whether some coalition could strictly improve every member by moving to
an earlier position:
- evaluate: status-quo utilities under the tiering
- strong_blocks: all-members-improve test for one coalition
- CoreStabilityChecker: exhaustive search returning a StabilityResult
- StabilityInstance: loadable (tiering, matrix, expected) bundles
"""

from __future__ import annotations

from corestab.blocking import coalition_utility, strong_blocks
from corestab.checker import CoreStabilityChecker, is_core_stable
from corestab.combinations import CombinationSpace, product
from corestab.config import CheckerConfig
from corestab.errors import CorestabError, InstanceLoadError, InvalidSubsetIndex, ValidationError
from corestab.instance import StabilityInstance
from corestab.subsets import bitfield, subset_for, subset_index
from corestab.types import BlockingWitness, StabilityResult, SubsetOutcome, UtilityVector
from corestab.utility import evaluate

__all__ = [
    "BlockingWitness",
    "CheckerConfig",
    "CombinationSpace",
    "CoreStabilityChecker",
    "CorestabError",
    "InstanceLoadError",
    "InvalidSubsetIndex",
    "StabilityInstance",
    "StabilityResult",
    "SubsetOutcome",
    "UtilityVector",
    "ValidationError",
    "bitfield",
    "coalition_utility",
    "evaluate",
    "is_core_stable",
    "product",
    "strong_blocks",
    "subset_for",
    "subset_index",
]
