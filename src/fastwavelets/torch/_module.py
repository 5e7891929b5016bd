"""PyTorch nn.Module wrapper for the wavelet transforms."""

from __future__ import annotations

from typing import Literal

import torch
from torch import nn

from ..exceptions import ConfigurationError
from ..wavelets import Wavelet
from ._transforms import FastWaveletTransform, WaveletPacketTransform, WaveletTransform


class WaveletModule(nn.Module):
    """
    Wavelet transform as a differentiable layer.

    Calling the module returns the coefficients of the last dimension of
    its input; gradients flow through the pyramid steps. :meth:`inverse`
    reconstructs signals from coefficients.

    Parameters
    ----------
    wavelet : Wavelet or str
        Filter bank, or its name in the wavelet bank.
    level : int, optional
        Decomposition level. Defaults to the deepest level of each input.
    transform_type : {"fast", "packet"}, optional
        Cascade ("fast", default) or full packet tree ("packet").

    Examples
    --------
    >>> import torch
    >>> from fastwavelets.torch import WaveletModule
    >>> module = WaveletModule("Daubechies 2", level=3)
    >>> x = torch.randn(5, 64, dtype=torch.float64, requires_grad=True)
    >>> coefficients = module(x)
    >>> torch.allclose(module.inverse(coefficients), x)
    True
    >>> torch.autograd.gradcheck(module, x)
    True
    """

    def __init__(
        self,
        wavelet: Wavelet | str,
        level: int | None = None,
        transform_type: Literal["fast", "packet"] = "fast",
    ) -> None:
        super().__init__()
        if transform_type == "fast":
            self._transform: WaveletTransform = FastWaveletTransform(wavelet)
        elif transform_type == "packet":
            self._transform = WaveletPacketTransform(wavelet)
        else:
            msg = f"transform_type must be 'fast' or 'packet', got {transform_type!r}"
            raise ConfigurationError(msg)
        self.level = level

    @property
    def transform(self) -> WaveletTransform:
        return self._transform

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self._transform.forward(x, self.level)

    def inverse(self, coefficients: torch.Tensor) -> torch.Tensor:
        return self._transform.reverse(coefficients, self.level)

    def extra_repr(self) -> str:
        return (
            f"wavelet={self._transform.wavelet.name!r}, level={self.level}, "
            f"transform={self._transform.name!r}"
        )
