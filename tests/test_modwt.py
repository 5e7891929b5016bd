"""Tests for the maximal overlap discrete wavelet transform."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from fastwavelets.exceptions import PreconditionViolation
from fastwavelets.numpy import MaximalOverlapTransform, upsample_filter
from fastwavelets.wavelets import Wavelet

ORTHONORMAL = ["Haar", "Daubechies 2", "Daubechies 4", "Symlet 5", "Coiflet 2"]


def test_upsample_filter():
    np.testing.assert_array_equal(upsample_filter([1.0, 2.0], 1), [1.0, 2.0])
    np.testing.assert_array_equal(upsample_filter([1.0, 2.0], 2), [1.0, 0.0, 2.0])
    np.testing.assert_array_equal(
        upsample_filter([1.0, 2.0, 3.0], 3), [1, 0, 0, 0, 2, 0, 0, 0, 3]
    )


def test_upsample_filter_rejects_level_zero():
    with pytest.raises(PreconditionViolation):
        upsample_filter([1.0, 2.0], 0)


def test_filters_are_scaled():
    modwt = MaximalOverlapTransform("Haar")
    np.testing.assert_allclose(modwt.lowpass, [0.5, 0.5])
    np.testing.assert_allclose(modwt.highpass, [0.5, -0.5])


def test_haar_first_level():
    coeffs = MaximalOverlapTransform("Haar").forward(np.array([1.0, 2.0, 3.0, 4.0]), level=1)
    np.testing.assert_allclose(coeffs[0], [-1.5, 0.5, 0.5, 0.5])
    np.testing.assert_allclose(coeffs[1], [2.5, 1.5, 2.5, 3.5])


def test_matches_explicit_upsampled_convolution(rng):
    """Level j convolves circularly with filters upsampled by 2**(j-1)."""
    modwt = MaximalOverlapTransform("Daubechies 2")
    signal = rng.normal(size=37)
    coeffs = modwt.forward(signal, level=3)

    def circular(s, f):
        n = s.size
        return np.array([sum(s[(t - m) % n] * f[m] for m in range(f.size)) for t in range(n)])

    approx = signal
    for j in range(1, 4):
        np.testing.assert_allclose(
            coeffs[j - 1], circular(approx, upsample_filter(modwt.highpass, j)), atol=1e-12
        )
        approx = circular(approx, upsample_filter(modwt.lowpass, j))
    np.testing.assert_allclose(coeffs[3], approx, atol=1e-12)


def test_shape(rng):
    coeffs = MaximalOverlapTransform("Daubechies 4").forward(rng.normal(size=100), level=4)
    assert coeffs.shape == (5, 100)


def test_level_zero_returns_signal(rng):
    signal = rng.normal(size=10)
    coeffs = MaximalOverlapTransform("Haar").forward(signal, level=0)
    np.testing.assert_array_equal(coeffs, signal[np.newaxis])


def test_shift_invariance(rng):
    modwt = MaximalOverlapTransform("Symlet 5")
    signal = rng.normal(size=128)
    shifted = modwt.forward(np.roll(signal, 5), level=4)
    np.testing.assert_allclose(shifted, np.roll(modwt.forward(signal, level=4), 5, axis=1), atol=1e-12)


@pytest.mark.round_trip
@pytest.mark.parametrize("name", ORTHONORMAL)
@pytest.mark.parametrize("length", [16, 100, 288, 500, 1000])
def test_round_trip_any_length(rng, name, length):
    modwt = MaximalOverlapTransform(name)
    signal = rng.normal(size=length)
    coeffs = modwt.forward(signal, level=4)
    reconstruction = modwt.reverse(coeffs)
    assert np.mean((reconstruction - signal) ** 2) < 1e-10
    np.testing.assert_allclose(reconstruction, signal, atol=1e-10)


@pytest.mark.parametrize("name", ORTHONORMAL)
def test_energy_is_split_across_levels(rng, name):
    signal = rng.normal(size=256)
    coeffs = MaximalOverlapTransform(name).forward(signal, level=5)
    np.testing.assert_allclose(np.sum(coeffs**2), np.sum(signal**2), rtol=1e-10)


def test_degenerate_filter_is_not_normalized(caplog):
    wavelet = Wavelet(
        name="degenerate",
        analysis_lowpass=[0.5**0.5, 0.5**0.5],
        analysis_highpass=[0.0, 0.0],
        synthesis_lowpass=[0.5**0.5, 0.5**0.5],
        synthesis_highpass=[0.0, 0.0],
    )
    with caplog.at_level(logging.WARNING):
        modwt = MaximalOverlapTransform(wavelet)
    assert "near-zero energy" in caplog.text
    np.testing.assert_array_equal(modwt.highpass, [0.0, 0.0])
    assert np.all(np.isfinite(modwt.forward(np.ones(8), level=2)))


class TestPreconditions:
    """Signals, levels and coefficient arrays the MODWT refuses."""

    @pytest.mark.parametrize("signal", [np.ones(0), np.ones((4, 4)), np.ones(4) * 1j])
    def test_bad_signal(self, signal):
        with pytest.raises(PreconditionViolation, match="non-empty real 1-D"):
            MaximalOverlapTransform("Haar").forward(signal, level=1)

    @pytest.mark.parametrize("level", [-1, 1.5, None])
    def test_bad_level(self, level):
        with pytest.raises(PreconditionViolation, match="non-negative integer"):
            MaximalOverlapTransform("Haar").forward(np.ones(8), level=level)

    def test_bad_coefficients(self):
        with pytest.raises(PreconditionViolation, match="shape"):
            MaximalOverlapTransform("Haar").reverse(np.ones(8))
