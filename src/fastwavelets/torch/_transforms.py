from __future__ import annotations

import torch

from ..exceptions import PreconditionViolation
from ..utils import is_power_of_two, max_level, validate_level
from ..wavelets import Wavelet, get_wavelet
from ._pyramid import analyze, synthesize


class WaveletTransform:
    """
    Pyramid transform of tensors along their last dimension.

    Leading dimensions are a batch of independent signals. Level handling
    follows :class:`fastwavelets.numpy.WaveletTransform`: the last dimension
    must be a power of two ``N``, levels range from 0 to
    ``log2(N) - log2(M) + 1`` and ``None`` selects the deepest one.

    Parameters
    ----------
    wavelet : Wavelet or str
        Filter bank, or its name in the wavelet bank.
    """

    name: str = "Wavelet Transform"

    def __init__(self, wavelet: Wavelet | str) -> None:
        self.wavelet = get_wavelet(wavelet) if isinstance(wavelet, str) else wavelet

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wavelet.name!r})"

    def _resolve(self, x: torch.Tensor, level: int | None) -> tuple[int, int]:
        if x.ndim == 0 or x.is_complex() or not x.is_floating_point():
            msg = "Input must be a real floating point tensor with at least one dimension"
            raise PreconditionViolation(msg)
        length = x.shape[-1]
        if not is_power_of_two(length):
            msg = f"Signal length {length} is not a power of two"
            raise PreconditionViolation(msg)
        deepest = max_level(length, self.wavelet.min_transform_length)
        return validate_level(level, deepest), deepest

    def _analysis_step(self, data: torch.Tensor, h: int) -> torch.Tensor:
        raise NotImplementedError

    def _synthesis_step(self, data: torch.Tensor, h: int) -> torch.Tensor:
        raise NotImplementedError

    def forward(self, x: torch.Tensor, level: int | None = None) -> torch.Tensor:
        """
        Transform along the last dimension.

        Parameters
        ----------
        x : torch.Tensor
            Real tensor of shape ``(..., N)``.
        level : int, optional
            Decomposition level. Defaults to the deepest level.

        Returns
        -------
        torch.Tensor
            Coefficients of shape ``(..., N)``.
        """
        level, _ = self._resolve(x, level)
        out = x
        h = x.shape[-1]
        for _ in range(level):
            out = self._analysis_step(out, h)
            h >>= 1
        return out.clone() if level == 0 else out

    def reverse(self, x: torch.Tensor, level: int | None = None) -> torch.Tensor:
        """Inverse of :meth:`forward` for the same ``level``."""
        level, deepest = self._resolve(x, level)
        out = x
        h = self.wavelet.min_transform_length << (deepest - level)
        for _ in range(level):
            out = self._synthesis_step(out, h)
            h <<= 1
        return out.clone() if level == 0 else out


class FastWaveletTransform(WaveletTransform):
    """
    Cascade wavelet transform of tensors.

    Examples
    --------
    >>> import torch
    >>> from fastwavelets.torch import FastWaveletTransform
    >>> coeffs = FastWaveletTransform("Haar").forward(torch.ones(4, dtype=torch.float64))
    >>> torch.allclose(coeffs, torch.tensor([2.0, 0.0, 0.0, 0.0], dtype=torch.float64))
    True
    """

    name = "Fast Wavelet Transform"

    def _analysis_step(self, data: torch.Tensor, h: int) -> torch.Tensor:
        approx, detail = analyze(data[..., :h], self.wavelet)
        return torch.cat([approx, detail, data[..., h:]], dim=-1)

    def _synthesis_step(self, data: torch.Tensor, h: int) -> torch.Tensor:
        window = synthesize(data[..., : h // 2], data[..., h // 2 : h], self.wavelet)
        return torch.cat([window, data[..., h:]], dim=-1)


class WaveletPacketTransform(WaveletTransform):
    """Full wavelet packet tree of tensors."""

    name = "Wavelet Packet Transform"

    def _analysis_step(self, data: torch.Tensor, h: int) -> torch.Tensor:
        length = data.shape[-1]
        blocks = data.reshape(*data.shape[:-1], length // h, h)
        approx, detail = analyze(blocks, self.wavelet)
        return torch.cat([approx, detail], dim=-1).reshape(data.shape)

    def _synthesis_step(self, data: torch.Tensor, h: int) -> torch.Tensor:
        length = data.shape[-1]
        blocks = data.reshape(*data.shape[:-1], length // h, h)
        window = synthesize(blocks[..., : h // 2], blocks[..., h // 2 :], self.wavelet)
        return window.reshape(data.shape)
