"""Tests for the PyTorch pyramid transforms and module."""

from __future__ import annotations

import warnings

import numpy as np
import pytest

torch = pytest.importorskip("torch")

import fastwavelets.numpy as np_wavelets  # noqa: E402
import fastwavelets.torch as torch_wavelets  # noqa: E402
from fastwavelets.exceptions import ConfigurationError, PreconditionViolation  # noqa: E402
from fastwavelets.wavelets import get_wavelet  # noqa: E402

TRANSFORMS = [
    (torch_wavelets.FastWaveletTransform, np_wavelets.FastWaveletTransform),
    (torch_wavelets.WaveletPacketTransform, np_wavelets.WaveletPacketTransform),
]


@pytest.mark.parametrize("name", ["Haar", "Daubechies 4", "BiOrthogonal 2/2"])
def test_pyramid_step_matches_numpy(rng, name):
    wavelet = get_wavelet(name)
    window = rng.normal(size=(3, 16))
    approx, detail = torch_wavelets.analyze(torch.from_numpy(window), wavelet)
    ref_approx, ref_detail = np_wavelets.analyze(window, wavelet)
    np.testing.assert_allclose(approx.numpy(), ref_approx, atol=1e-12)
    np.testing.assert_allclose(detail.numpy(), ref_detail, atol=1e-12)
    np.testing.assert_allclose(
        torch_wavelets.synthesize(approx, detail, wavelet).numpy(),
        np_wavelets.synthesize(ref_approx, ref_detail, wavelet),
        atol=1e-12,
    )


@pytest.mark.parametrize(("torch_cls", "numpy_cls"), TRANSFORMS)
@pytest.mark.parametrize("level", [None, 0, 2])
def test_matches_numpy(rng, torch_cls, numpy_cls, level):
    signal = rng.normal(size=64)
    coeffs = torch_cls("Coiflet 2").forward(torch.from_numpy(signal), level)
    expected = numpy_cls("Coiflet 2").forward(signal, level)
    torch.testing.assert_close(coeffs, torch.from_numpy(expected))


@pytest.mark.round_trip
@pytest.mark.parametrize(("torch_cls", "numpy_cls"), TRANSFORMS)
def test_batched_round_trip(torch_cls, numpy_cls):
    transform = torch_cls("Daubechies 3")
    x = torch.randn(4, 3, 128, dtype=torch.float64)
    coeffs = transform.forward(x, level=5)
    assert coeffs.shape == x.shape
    torch.testing.assert_close(transform.reverse(coeffs, level=5), x)


def test_level_zero_returns_copy():
    x = torch.ones(8, dtype=torch.float64)
    out = torch_wavelets.FastWaveletTransform("Haar").forward(x, level=0)
    torch.testing.assert_close(out, x)
    assert out.data_ptr() != x.data_ptr()


def test_float32_input():
    x = torch.ones(4, dtype=torch.float32)
    out = torch_wavelets.FastWaveletTransform("Haar").forward(x)
    assert out.dtype == torch.float32
    torch.testing.assert_close(out, torch.tensor([2.0, 0.0, 0.0, 0.0]))


def test_read_only_filters_are_copied(rng):
    wavelet = get_wavelet("Daubechies 2")
    assert not wavelet.analysis_lowpass.flags.writeable
    with warnings.catch_warnings():
        warnings.simplefilter("error", UserWarning)
        approx, _ = torch_wavelets.analyze(torch.from_numpy(rng.normal(size=8)), wavelet)
    assert approx.shape == (4,)


class TestPreconditions:
    """Tensors the torch transforms refuse."""

    def test_non_power_of_two(self):
        with pytest.raises(PreconditionViolation, match="not a power of two"):
            torch_wavelets.FastWaveletTransform("Haar").forward(torch.ones(12, dtype=torch.float64))

    def test_integer_tensor(self):
        with pytest.raises(PreconditionViolation, match="floating point"):
            torch_wavelets.FastWaveletTransform("Haar").forward(torch.ones(8, dtype=torch.int64))

    def test_level_out_of_range(self):
        with pytest.raises(PreconditionViolation, match="outside of the valid range"):
            torch_wavelets.WaveletPacketTransform("Haar").forward(torch.ones(8, dtype=torch.float64), 4)


class TestWaveletModule:
    """The transform as an nn.Module."""

    @pytest.mark.parametrize("transform_type", ["fast", "packet"])
    def test_inverse(self, transform_type):
        module = torch_wavelets.WaveletModule("Symlet 3", level=4, transform_type=transform_type)
        x = torch.randn(2, 64, dtype=torch.float64)
        torch.testing.assert_close(module.inverse(module(x)), x)

    def test_gradcheck(self):
        module = torch_wavelets.WaveletModule("Daubechies 2", level=3)
        x = torch.randn(2, 16, dtype=torch.float64, requires_grad=True)
        assert torch.autograd.gradcheck(module, (x,))

    def test_gradient_of_energy(self):
        """Orthonormal transforms preserve energy, so the gradient is 2 x."""
        module = torch_wavelets.WaveletModule("Daubechies 4")
        x = torch.randn(32, dtype=torch.float64, requires_grad=True)
        module(x).pow(2).sum().backward()
        torch.testing.assert_close(x.grad, 2 * x.detach())

    def test_unknown_transform_type(self):
        with pytest.raises(ConfigurationError, match="transform_type"):
            torch_wavelets.WaveletModule("Haar", transform_type="dual-tree")

    def test_repr(self):
        module = torch_wavelets.WaveletModule("Haar", level=2)
        assert "Haar" in repr(module)
