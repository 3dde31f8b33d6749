"""Bijection between integer indices and subsets of an ordered set.

Bit ``p`` of an index selects the ``p``-th element of the set, so the
indices ``[0, 2**n)`` enumerate the power set of an ``n``-element ordered
set exactly once each.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from corestab.errors import InvalidSubsetIndex
from corestab.types import SubsetOutcome

logger = logging.getLogger(__name__)


def subset_count(size: int) -> int:
    """Number of subsets of a set with ``size`` elements."""
    return 1 << size


def bitfield(index: int, size: int) -> list[int]:
    """Expand ``index`` into ``size`` bits, least significant bit first.

    Raises:
        InvalidSubsetIndex: If ``index`` is negative or needs more than
            ``size`` bits.
    """
    if index < 0 or index >= subset_count(size):
        raise InvalidSubsetIndex(index, size)
    return [(index >> p) & 1 for p in range(size)]


def subset_for(ordered_set: Sequence[int], index: int) -> SubsetOutcome:
    """Return the elements of ``ordered_set`` selected by ``index``.

    An out-of-range index does not raise; the error is logged and carried
    in the returned outcome instead.
    """
    size = len(ordered_set)
    try:
        bits = bitfield(index, size)
    except InvalidSubsetIndex as e:
        logger.warning(f"Invalid subset index {e.index} for tier of size {e.size}")
        return SubsetOutcome(error=e)

    return SubsetOutcome(subset=tuple(x for x, bit in zip(ordered_set, bits) if bit))


def subset_index(ordered_set: Sequence[int], subset: Iterable[int]) -> int:
    """Encode ``subset`` of ``ordered_set`` back into its index.

    Raises:
        ValueError: If ``subset`` holds an element not in ``ordered_set``.
    """
    positions = {x: p for p, x in enumerate(ordered_set)}
    index = 0
    for x in subset:
        if x not in positions:
            raise ValueError(f"{x} is not an element of {list(ordered_set)}")
        index |= 1 << positions[x]
    return index
