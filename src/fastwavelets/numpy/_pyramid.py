"""Two-band analysis and synthesis step of the wavelet pyramid."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..exceptions import PreconditionViolation
from ..wavelets import Wavelet


def _check_window(h: int, wavelet: Wavelet) -> None:
    if h < 2 or h % 2 != 0:
        msg = f"Window length must be even and at least 2, got {h}"
        raise PreconditionViolation(msg)
    if h < wavelet.min_transform_length:
        msg = (
            f"Window length {h} is shorter than the minimum transform length "
            f"{wavelet.min_transform_length} of {wavelet.name!r}"
        )
        raise PreconditionViolation(msg)


def analyze(
    window: npt.ArrayLike, wavelet: Wavelet
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Split a window into approximation and detail halves.

    The filters are applied with periodic wrap-around and downsampling by
    two: for output index ``i`` and tap ``j``, the input sample
    ``k = (2 i + j) mod h`` contributes ``window[k] * lowpass[j]`` to
    ``approx[i]`` and ``window[k] * highpass[j]`` to ``detail[i]``. Filters
    longer than the window wrap around it several times.

    Parameters
    ----------
    window : array_like
        Real samples, transformed along the last axis. Leading axes are
        independent windows.
    wavelet : Wavelet
        Filter bank.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        **approx** : Low-pass half, shape ``(..., h // 2)``.

        **detail** : High-pass half, shape ``(..., h // 2)``.

    Raises
    ------
    PreconditionViolation
        If the window length ``h`` is odd, smaller than 2 or smaller than the
        wavelet's minimum transform length.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import analyze
    >>> from fastwavelets.wavelets import get_wavelet
    >>> approx, detail = analyze(np.ones(4), get_wavelet("Haar"))
    >>> approx
    array([1.41421356, 1.41421356])
    >>> detail
    array([0., 0.])
    """
    window = np.asarray(window, dtype=np.float64)
    h = window.shape[-1] if window.ndim else 0
    _check_window(h, wavelet)

    half = h // 2
    approx = np.zeros((*window.shape[:-1], half))
    detail = np.zeros((*window.shape[:-1], half))
    base = 2 * np.arange(half)
    for j, (low, high) in enumerate(
        zip(wavelet.analysis_lowpass, wavelet.analysis_highpass)
    ):
        samples = window[..., (base + j) % h]
        approx += samples * low
        detail += samples * high
    return approx, detail


def synthesize(
    approx: npt.ArrayLike, detail: npt.ArrayLike, wavelet: Wavelet
) -> npt.NDArray[np.float64]:
    """
    Merge approximation and detail halves back into one window.

    Inverse of :func:`analyze` over the same index space:
    ``window[k] += approx[i] * lowpass[j] + detail[i] * highpass[j]`` with
    ``k = (2 i + j) mod h`` and the synthesis filters of the wavelet.

    Parameters
    ----------
    approx, detail : array_like
        Halves of equal shape ``(..., h // 2)``.
    wavelet : Wavelet
        Filter bank.

    Returns
    -------
    np.ndarray
        Window of shape ``(..., h)``.

    Raises
    ------
    PreconditionViolation
        If the halves differ in shape or give an invalid window length.
    """
    approx = np.asarray(approx, dtype=np.float64)
    detail = np.asarray(detail, dtype=np.float64)
    if approx.shape != detail.shape or approx.ndim == 0:
        msg = (
            "Approximation and detail must be arrays of equal shape, "
            f"got {approx.shape} and {detail.shape}"
        )
        raise PreconditionViolation(msg)
    half = approx.shape[-1]
    h = 2 * half
    _check_window(h, wavelet)

    window = np.zeros((*approx.shape[:-1], h))
    base = 2 * np.arange(half)
    for j, (low, high) in enumerate(
        zip(wavelet.synthesis_lowpass, wavelet.synthesis_highpass)
    ):
        # for fixed j the targets (2 i + j) mod h are distinct
        window[..., (base + j) % h] += approx * low + detail * high
    return window
