"""Tests for arbitrary-length transforms by binary segmentation."""

from __future__ import annotations

import numpy as np
import pytest

from fastwavelets.exceptions import ConfigurationError, PreconditionViolation
from fastwavelets.numpy import (
    AncientEgyptianDecomposition,
    DiscreteFourierTransform,
    FastWaveletTransform,
    WaveletPacketTransform,
)
from fastwavelets.utils import egyptian_segmentation


@pytest.fixture(params=[FastWaveletTransform, WaveletPacketTransform])
def inner(request):
    return request.param("Daubechies 4")


def test_segments_transform_independently(rng, inner):
    signal = rng.normal(size=42)
    coeffs = AncientEgyptianDecomposition(inner).forward(signal)
    for offset, p in egyptian_segmentation(42):
        size = 1 << p
        np.testing.assert_allclose(
            coeffs[offset : offset + size], inner.forward(signal[offset : offset + size])
        )


def test_haar_seven_samples():
    aed = AncientEgyptianDecomposition(FastWaveletTransform("Haar"))
    coeffs = aed.forward(np.ones(7))
    np.testing.assert_allclose(coeffs, [2.0, 0, 0, 0, np.sqrt(2), 0, 1.0], atol=1e-12)


def test_single_sample_segment_is_copied():
    aed = AncientEgyptianDecomposition(FastWaveletTransform("Haar"))
    coeffs = aed.forward(np.array([1.0, 3.0, 7.5]))
    assert coeffs[2] == 7.5


def test_power_of_two_matches_wrapped_transform(rng, inner):
    signal = rng.normal(size=256)
    np.testing.assert_allclose(
        AncientEgyptianDecomposition(inner).forward(signal), inner.forward(signal)
    )


@pytest.mark.round_trip
@pytest.mark.parametrize("length", [1, 3, 7, 100, 1000, 5000, 100000])
def test_round_trip_any_length(rng, inner, length):
    aed = AncientEgyptianDecomposition(inner)
    signal = rng.normal(size=length)
    np.testing.assert_allclose(aed.reverse(aed.forward(signal)), signal, rtol=1e-8, atol=1e-10)


def test_energy_is_preserved(rng, inner):
    signal = rng.normal(size=1000)
    coeffs = AncientEgyptianDecomposition(inner).forward(signal)
    np.testing.assert_allclose(np.linalg.norm(coeffs), np.linalg.norm(signal), rtol=0, atol=1e-10)


@pytest.mark.round_trip
def test_round_trip_two_dimensional(rng, inner):
    aed = AncientEgyptianDecomposition(inner)
    image = rng.normal(size=(30, 45))
    np.testing.assert_allclose(aed.reverse(aed.forward(image)), image, atol=1e-10)


class TestPreconditions:
    """Inputs and wrappers the decomposition refuses."""

    def test_empty_signal(self, inner):
        with pytest.raises(PreconditionViolation, match="at least 1"):
            AncientEgyptianDecomposition(inner).forward(np.ones(0))

    def test_level_is_rejected(self, inner):
        with pytest.raises(PreconditionViolation, match="does not accept a level"):
            AncientEgyptianDecomposition(inner).forward(np.ones(12), level=1)

    def test_wraps_wavelet_transforms_only(self):
        with pytest.raises(ConfigurationError, match="wavelet transforms only"):
            AncientEgyptianDecomposition(DiscreteFourierTransform())
