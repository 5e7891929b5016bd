from __future__ import annotations

import torch

from ..exceptions import PreconditionViolation
from ..wavelets import Wavelet


def _filters(
    wavelet: Wavelet, like: torch.Tensor, synthesis: bool
) -> tuple[torch.Tensor, torch.Tensor]:
    if synthesis:
        low, high = wavelet.synthesis_lowpass, wavelet.synthesis_highpass
    else:
        low, high = wavelet.analysis_lowpass, wavelet.analysis_highpass
    return (
        torch.tensor(low, dtype=like.dtype, device=like.device),
        torch.tensor(high, dtype=like.dtype, device=like.device),
    )


def _check_window(h: int, wavelet: Wavelet) -> None:
    if h < 2 or h % 2 != 0 or h < wavelet.min_transform_length:
        msg = (
            f"Window length must be even, at least 2 and at least "
            f"{wavelet.min_transform_length} for {wavelet.name!r}, got {h}"
        )
        raise PreconditionViolation(msg)


def analyze(window: torch.Tensor, wavelet: Wavelet) -> tuple[torch.Tensor, torch.Tensor]:
    """
    Split windows along the last dimension into approximation and detail.

    Tensor counterpart of :func:`fastwavelets.numpy.analyze`; differentiable
    with respect to ``window``.

    Parameters
    ----------
    window : torch.Tensor
        Real floating point tensor of shape ``(..., h)``.
    wavelet : Wavelet
        Filter bank.

    Returns
    -------
    tuple[torch.Tensor, torch.Tensor]
        Approximation and detail, each of shape ``(..., h // 2)``.
    """
    h = window.shape[-1] if window.ndim else 0
    _check_window(h, wavelet)
    lowpass, highpass = _filters(wavelet, window, synthesis=False)
    base = 2 * torch.arange(h // 2, device=window.device)

    approx = window.new_zeros((*window.shape[:-1], h // 2))
    detail = window.new_zeros((*window.shape[:-1], h // 2))
    for j in range(lowpass.shape[0]):
        samples = window[..., (base + j) % h]
        approx = approx + samples * lowpass[j]
        detail = detail + samples * highpass[j]
    return approx, detail


def synthesize(
    approx: torch.Tensor, detail: torch.Tensor, wavelet: Wavelet
) -> torch.Tensor:
    """
    Merge approximation and detail along the last dimension into windows.

    Tensor counterpart of :func:`fastwavelets.numpy.synthesize`.
    """
    if approx.shape != detail.shape or approx.ndim == 0:
        msg = (
            "Approximation and detail must be tensors of equal shape, "
            f"got {tuple(approx.shape)} and {tuple(detail.shape)}"
        )
        raise PreconditionViolation(msg)
    half = approx.shape[-1]
    h = 2 * half
    _check_window(h, wavelet)
    lowpass, highpass = _filters(wavelet, approx, synthesis=True)
    base = 2 * torch.arange(half, device=approx.device)

    window = approx.new_zeros((*approx.shape[:-1], h))
    for j in range(lowpass.shape[0]):
        window = window.index_add(
            window.ndim - 1, (base + j) % h, approx * lowpass[j] + detail * highpass[j]
        )
    return window
