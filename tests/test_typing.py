"""Simple tests for the array aliases used in signatures."""

from __future__ import annotations

import numpy as np

from fastwavelets import typing as fw_typing
from fastwavelets.numpy import deinterleave, interleave, upsample_filter


def test_aliases_are_exported():
    """Test every alias listed in __all__ exists."""
    for name in fw_typing.__all__:
        assert getattr(fw_typing, name) is not None


def test_interleave_returns_float64():
    """Test interleave output dtype."""
    assert interleave(np.array([1 + 2j])).dtype == np.float64


def test_deinterleave_returns_complex128():
    """Test deinterleave output dtype."""
    assert deinterleave(np.array([1.0, 2.0])).dtype == np.complex128


def test_upsample_filter_returns_float64():
    """Test upsample_filter output dtype for integer taps."""
    assert upsample_filter([1, 2], 2).dtype == np.float64
