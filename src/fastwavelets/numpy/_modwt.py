from __future__ import annotations

import logging
import numbers

import numpy as np
import numpy.typing as npt

from ..exceptions import PreconditionViolation
from ..typing import FloatNDArray, MODWTCoefficients
from ..wavelets import Wavelet, get_wavelet

logger = logging.getLogger(__name__)

_DEGENERATE_NORM = 1e-12


def upsample_filter(filt: npt.ArrayLike, level: int) -> FloatNDArray:
    """
    Insert ``2**(level - 1) - 1`` zeros between neighbouring taps.

    Parameters
    ----------
    filt : array_like
        1-D filter.
    level : int
        Decomposition level, at least 1. Level 1 returns the filter as is.

    Returns
    -------
    np.ndarray
        Filter of length ``(L - 1) * 2**(level - 1) + 1``.

    Examples
    --------
    >>> from fastwavelets.numpy import upsample_filter
    >>> upsample_filter([1.0, 2.0, 3.0], 3)
    array([1., 0., 0., 0., 2., 0., 0., 0., 3.])
    """
    filt = np.asarray(filt, dtype=np.float64)
    if level < 1:
        msg = f"Upsampling level must be at least 1, got {level}"
        raise PreconditionViolation(msg)
    step = 1 << (level - 1)
    out = np.zeros((filt.size - 1) * step + 1)
    out[::step] = filt
    return out


def _circular_convolve(
    signal: npt.NDArray[np.float64], filt: npt.NDArray[np.float64], step: int
) -> npt.NDArray[np.float64]:
    # out[n] = sum_m s[(n - m) mod N] f_up[m], visiting only non-zero taps m = j * step
    out = np.zeros_like(signal)
    for j, tap in enumerate(filt):
        out += tap * np.roll(signal, j * step)
    return out


def _circular_correlate(
    signal: npt.NDArray[np.float64], filt: npt.NDArray[np.float64], step: int
) -> npt.NDArray[np.float64]:
    # adjoint of _circular_convolve: out[n] = sum_m s[(n + m) mod N] f_up[m]
    out = np.zeros_like(signal)
    for j, tap in enumerate(filt):
        out += tap * np.roll(signal, -j * step)
    return out


def _normalize(filt: npt.NDArray[np.float64], label: str) -> npt.NDArray[np.float64]:
    norm = float(np.sqrt(np.sum(filt**2)))
    if norm <= _DEGENERATE_NORM:
        logger.warning(
            "%s filter has near-zero energy (norm %.3g), skipping normalization",
            label,
            norm,
        )
        return filt.copy()
    return filt / norm


class MaximalOverlapTransform:
    """
    Maximal overlap discrete wavelet transform (MODWT).

    An undecimated, shift-invariant wavelet transform. Level ``j`` convolves
    the previous approximation circularly with the analysis filters
    upsampled by ``2**(j - 1)``, so every level keeps all ``N`` samples and
    any signal length works. The filters are normalized to unit energy and
    scaled by ``1 / sqrt(2)``.

    For orthonormal wavelets the reconstruction is exact and the energy of
    the signal is split across the levels:
    ``sum_j |W_j|**2 + |V_J|**2 == |X|**2``.

    Parameters
    ----------
    wavelet : Wavelet or str
        Filter bank, or its name in the wavelet bank.

    Attributes
    ----------
    lowpass, highpass : np.ndarray
        Scaled analysis filters.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import MaximalOverlapTransform
    >>> modwt = MaximalOverlapTransform("Haar")
    >>> modwt.forward(np.array([1.0, 2.0, 3.0, 4.0]), level=1)
    array([[-1.5,  0.5,  0.5,  0.5],
           [ 2.5,  1.5,  2.5,  3.5]])
    """

    name = "Maximal Overlap Discrete Wavelet Transform"

    def __init__(self, wavelet: Wavelet | str) -> None:
        self.wavelet = get_wavelet(wavelet) if isinstance(wavelet, str) else wavelet
        scale = 1.0 / np.sqrt(2.0)
        self.lowpass = _normalize(self.wavelet.analysis_lowpass, "Low-pass") * scale
        self.highpass = _normalize(self.wavelet.analysis_highpass, "High-pass") * scale

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wavelet.name!r})"

    def forward(self, signal: npt.ArrayLike, level: int) -> MODWTCoefficients:
        """
        Decompose a signal into ``level`` detail rows and one approximation.

        Parameters
        ----------
        signal : array_like
            Real 1-D signal of any length ``N >= 1``.
        level : int
            Number of levels ``J >= 0``.

        Returns
        -------
        np.ndarray
            Array of shape ``(J + 1, N)`` holding ``W_1, ..., W_J, V_J``.

        Raises
        ------
        PreconditionViolation
            If the signal is empty or not 1-D, or ``level`` is negative.
        """
        signal = np.asarray(signal)
        if signal.ndim != 1 or signal.size == 0 or np.iscomplexobj(signal):
            msg = f"MODWT needs a non-empty real 1-D signal, got shape {signal.shape}"
            raise PreconditionViolation(msg)
        if isinstance(level, bool) or not isinstance(level, numbers.Integral) or level < 0:
            msg = f"MODWT level must be a non-negative integer, got {level!r}"
            raise PreconditionViolation(msg)

        coeffs = np.empty((level + 1, signal.size))
        approx = signal.astype(np.float64)
        for j in range(1, level + 1):
            step = 1 << (j - 1)
            coeffs[j - 1] = _circular_convolve(approx, self.highpass, step)
            approx = _circular_convolve(approx, self.lowpass, step)
        coeffs[level] = approx
        return coeffs

    def reverse(self, coeffs: MODWTCoefficients) -> FloatNDArray:
        """
        Reconstruct a signal from :meth:`forward` output.

        Working from the deepest level up,
        ``V_{j-1} = G_j^T V_j + H_j^T W_j`` where ``G_j^T`` and ``H_j^T`` are
        circular correlations with the upsampled filters.

        Parameters
        ----------
        coeffs : np.ndarray
            Array of shape ``(J + 1, N)``.

        Returns
        -------
        np.ndarray
            Signal of length ``N``.
        """
        coeffs = np.asarray(coeffs)
        if coeffs.ndim != 2 or coeffs.shape[0] < 1 or coeffs.shape[1] == 0:
            msg = f"MODWT coefficients must have shape (J + 1, N), got {coeffs.shape}"
            raise PreconditionViolation(msg)
        level = coeffs.shape[0] - 1
        approx = coeffs[level].astype(np.float64)
        for j in range(level, 0, -1):
            step = 1 << (j - 1)
            approx = _circular_correlate(approx, self.lowpass, step) + _circular_correlate(
                coeffs[j - 1].astype(np.float64), self.highpass, step
            )
        return approx
