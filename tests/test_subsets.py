"""Tests for the subset index bijection."""

from __future__ import annotations

import logging

import pytest

from corestab.errors import InvalidSubsetIndex
from corestab.subsets import bitfield, subset_count, subset_for, subset_index


class TestBitfield:
    """Test low-level index decoding."""

    def test_least_significant_bit_first(self):
        """Bit 0 comes first in the expansion."""
        assert bitfield(6, 4) == [0, 1, 1, 0]
        assert bitfield(1, 3) == [1, 0, 0]

    def test_zero_padded_to_size(self):
        """Small indices are padded with zeros up to size."""
        assert bitfield(0, 5) == [0, 0, 0, 0, 0]

    def test_empty_set(self):
        """Index 0 is the only valid index for size 0."""
        assert bitfield(0, 0) == []
        with pytest.raises(InvalidSubsetIndex):
            bitfield(1, 0)

    def test_largest_valid_index(self):
        """2**size - 1 selects every position."""
        assert bitfield(7, 3) == [1, 1, 1]

    @pytest.mark.parametrize("index,size", [(8, 3), (9, 3), (-1, 3), (4, 2)])
    def test_out_of_range_rejected(self, index, size):
        """Indices outside [0, 2**size) raise InvalidSubsetIndex."""
        with pytest.raises(InvalidSubsetIndex) as exc_info:
            bitfield(index, size)

        assert exc_info.value.index == index
        assert exc_info.value.size == size


class TestSubsetFor:
    """Test subset selection from an ordered set."""

    def test_selects_positions_with_set_bits(self):
        """Index 5 (0b101) picks the first and third elements."""
        outcome = subset_for([3, 4, 8], 5)

        assert outcome.ok
        assert outcome.unwrap() == (3, 8)

    def test_zero_is_empty_subset(self):
        """Index 0 always yields the empty subset."""
        assert subset_for([1, 2, 3], 0).unwrap() == ()

    def test_keeps_stored_order(self):
        """Selected elements follow the set's stored order, not sorted order."""
        assert subset_for([9, 2, 5], 7).unwrap() == (9, 2, 5)

    def test_invalid_index_returns_error_outcome(self, caplog):
        """Out-of-range index is reported as data and logged, not raised."""
        with caplog.at_level(logging.WARNING, logger="corestab.subsets"):
            outcome = subset_for([1, 2], 4)

        assert not outcome.ok
        assert outcome.subset is None
        assert isinstance(outcome.error, InvalidSubsetIndex)
        assert "Invalid subset index 4" in caplog.text
        assert "size 2" in caplog.text

    def test_unwrap_propagates_error(self):
        """unwrap() re-raises the carried error."""
        outcome = subset_for([1, 2], -3)

        with pytest.raises(InvalidSubsetIndex):
            outcome.unwrap()


class TestBijection:
    """Test that indices and subsets correspond one-to-one."""

    @pytest.mark.parametrize("size", [0, 1, 2, 3, 5])
    def test_round_trip(self, size):
        """Decoding then re-encoding recovers every index."""
        ordered = [10 * p + 1 for p in range(size)]

        for index in range(subset_count(size)):
            subset = subset_for(ordered, index).unwrap()
            assert subset_index(ordered, subset) == index

    def test_every_subset_appears_once(self):
        """The 2**n indices produce 2**n distinct subsets."""
        ordered = [4, 0, 7, 2]
        subsets = {frozenset(subset_for(ordered, i).unwrap()) for i in range(subset_count(4))}

        assert len(subsets) == 16

    def test_encode_rejects_foreign_element(self):
        """Encoding an element outside the set is an error."""
        with pytest.raises(ValueError):
            subset_index([1, 2], [3])
