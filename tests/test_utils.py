"""Tests for the integer helpers behind level handling and segmentation."""

from __future__ import annotations

import pytest

from fastwavelets.exceptions import PreconditionViolation
from fastwavelets.utils import (
    egyptian_segmentation,
    exponent,
    is_power_of_two,
    max_level,
    validate_level,
)


@pytest.mark.parametrize("n", [1, 2, 4, 1024, 2**20])
def test_powers_of_two(n):
    assert is_power_of_two(n)
    assert 2 ** exponent(n) == n


@pytest.mark.parametrize("n", [0, -4, 3, 6, 1000])
def test_not_powers_of_two(n):
    assert not is_power_of_two(n)


def test_exponent_rejects_non_powers():
    with pytest.raises(PreconditionViolation, match="not a power of two"):
        exponent(12)


@pytest.mark.parametrize(
    ("length", "min_length", "expected"),
    [(1, 2, 0), (2, 2, 1), (8, 2, 3), (1024, 2, 10), (1024, 4, 9), (2, 4, 0)],
)
def test_max_level(length, min_length, expected):
    assert max_level(length, min_length) == expected


class TestValidateLevel:
    """Resolution and range checks of decomposition levels."""

    def test_none_selects_deepest(self):
        assert validate_level(None, 5) == 5

    @pytest.mark.parametrize("level", [0, 3, 5])
    def test_valid_levels(self, level):
        assert validate_level(level, 5) == level

    @pytest.mark.parametrize("level", [-1, 6])
    def test_out_of_range(self, level):
        with pytest.raises(PreconditionViolation, match="outside of the valid range"):
            validate_level(level, 5)

    @pytest.mark.parametrize("level", [1.5, "2", True])
    def test_non_integer(self, level):
        with pytest.raises(PreconditionViolation, match="must be an integer"):
            validate_level(level, 5)


class TestEgyptianSegmentation:
    """Binary splitting of signal lengths."""

    def test_power_of_two_is_single_segment(self):
        assert egyptian_segmentation(64) == [(0, 6)]

    def test_segments_follow_set_bits(self):
        assert egyptian_segmentation(42) == [(0, 5), (32, 3), (40, 1)]

    @pytest.mark.parametrize("n", [1, 7, 1000, 5000, 100000])
    def test_segments_tile_the_length(self, n):
        segments = egyptian_segmentation(n)
        sizes = [1 << p for _, p in segments]
        assert sum(sizes) == n
        assert sizes == sorted(sizes, reverse=True)
        assert len(set(sizes)) == len(sizes)
        offset = 0
        for (start, _), size in zip(segments, sizes):
            assert start == offset
            offset += size

    @pytest.mark.parametrize("n", [0, -3])
    def test_empty_length(self, n):
        with pytest.raises(PreconditionViolation):
            egyptian_segmentation(n)
