from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from ..exceptions import PreconditionViolation
from ..typing import DecompositionLedger
from ..utils import is_power_of_two, max_level, validate_level
from ..wavelets import Wavelet, get_wavelet
from ._basic_transform import BasicTransform
from ._parallel import ParallelScheduler
from ._pyramid import analyze, synthesize

logger = logging.getLogger(__name__)


class WaveletTransform(BasicTransform):
    """
    Pyramid transform over signals whose length is a power of two.

    Every level halves the active window ``h``; how a level splits the data
    into windows is left to the subclasses. A signal of length ``N`` supports
    the levels ``0`` to ``log2(N) - log2(M) + 1``, where ``M`` is the
    minimum transform length of the wavelet. Level 0 leaves the signal
    unchanged and ``None`` selects the deepest level.

    Parameters
    ----------
    wavelet : Wavelet or str
        Filter bank, or its name in the wavelet bank.
    scheduler : ParallelScheduler, optional
        Distributes independent lines of 2-D and 3-D input over threads.
    """

    def __init__(
        self, wavelet: Wavelet | str, scheduler: ParallelScheduler | None = None
    ) -> None:
        super().__init__(scheduler=scheduler)
        self.wavelet = get_wavelet(wavelet) if isinstance(wavelet, str) else wavelet
        logger.debug("Created %s with %s", self.name, self.wavelet.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wavelet.name!r})"

    def max_level(self, length: int) -> int:
        """
        Deepest decomposition level for a signal of the given length.

        Examples
        --------
        >>> from fastwavelets.numpy import FastWaveletTransform
        >>> FastWaveletTransform("Haar").max_level(1024)
        10
        """
        self._validate(length, None)
        return max_level(length, self.wavelet.min_transform_length)

    def _validate(self, length: int, level: int | None) -> None:
        if not is_power_of_two(length):
            msg = (
                f"Signal length {length} is not a power of two; "
                "use AncientEgyptianDecomposition for arbitrary lengths"
            )
            raise PreconditionViolation(msg)
        validate_level(level, max_level(length, self.wavelet.min_transform_length))

    def _analysis_step(
        self, data: npt.NDArray[np.float64], h: int
    ) -> npt.NDArray[np.float64]:
        raise NotImplementedError

    def _synthesis_step(
        self, data: npt.NDArray[np.float64], h: int
    ) -> npt.NDArray[np.float64]:
        raise NotImplementedError

    def _forward_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        length = lines.shape[-1]
        level = validate_level(level, max_level(length, self.wavelet.min_transform_length))
        out = np.array(lines, dtype=np.float64)
        h = length
        for _ in range(level):
            out = self._analysis_step(out, h)
            h >>= 1
        return out

    def _reverse_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        length = lines.shape[-1]
        deepest = max_level(length, self.wavelet.min_transform_length)
        level = validate_level(level, deepest)
        out = np.array(lines, dtype=np.float64)
        h = self.wavelet.min_transform_length << (deepest - level)
        for _ in range(level):
            out = self._synthesis_step(out, h)
            h <<= 1
        return out

    def decompose(self, signal: npt.ArrayLike) -> DecompositionLedger:
        """
        Record the signal at every decomposition level.

        Parameters
        ----------
        signal : array_like
            Real 1-D signal of power-of-two length ``N``.

        Returns
        -------
        np.ndarray
            Ledger of shape ``(max_level + 1, N)``. Row 0 is the signal and
            row ``l`` equals ``forward(signal, level=l)``.

        Examples
        --------
        >>> import numpy as np
        >>> from fastwavelets.numpy import FastWaveletTransform
        >>> FastWaveletTransform("Haar").decompose(np.ones(4))
        array([[1.        , 1.        , 1.        , 1.        ],
               [1.41421356, 1.41421356, 0.        , 0.        ],
               [2.        , 0.        , 0.        , 0.        ]])
        """
        signal = np.asarray(signal)
        if signal.ndim != 1 or np.iscomplexobj(signal):
            msg = f"Can only decompose real 1-D signals, got shape {signal.shape}"
            raise PreconditionViolation(msg)
        length = signal.shape[0]
        self._validate(length, None)
        deepest = max_level(length, self.wavelet.min_transform_length)

        ledger = np.empty((deepest + 1, length))
        ledger[0] = signal
        h = length
        for row in range(1, deepest + 1):
            ledger[row] = self._analysis_step(ledger[row - 1], h)
            h >>= 1
        return ledger

    def recompose(
        self, ledger: DecompositionLedger, level: int | None = None
    ) -> npt.NDArray[np.float64]:
        """
        Reconstruct the signal from one row of a ledger.

        Parameters
        ----------
        ledger : np.ndarray
            Output of :meth:`decompose`.
        level : int, optional
            Row to reconstruct from. Defaults to the deepest row.

        Returns
        -------
        np.ndarray
            ``reverse(ledger[level], level)``.
        """
        ledger = np.asarray(ledger)
        if ledger.ndim != 2:
            msg = f"A ledger must be two-dimensional, got shape {ledger.shape}"
            raise PreconditionViolation(msg)
        rows, length = ledger.shape
        self._validate(length, None)
        deepest = max_level(length, self.wavelet.min_transform_length)
        if rows != deepest + 1:
            msg = (
                f"A ledger for signals of length {length} has {deepest + 1} rows, "
                f"got {rows}"
            )
            raise PreconditionViolation(msg)
        level = validate_level(level, deepest)
        return self.reverse(ledger[level], level)


class FastWaveletTransform(WaveletTransform):
    """
    Cascade (Mallat) wavelet transform.

    Each level splits only the current approximation, the leading ``h``
    samples, into approximation and detail halves; details from earlier
    levels stay where they are.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import FastWaveletTransform
    >>> fwt = FastWaveletTransform("Haar")
    >>> fwt.forward(np.ones(4))
    array([2., 0., 0., 0.])
    >>> fwt.forward(np.ones(4), level=1)
    array([1.41421356, 1.41421356, 0.        , 0.        ])
    >>> fwt.reverse(np.array([2.0, 0.0, 0.0, 0.0]))
    array([1., 1., 1., 1.])
    """

    name = "Fast Wavelet Transform"

    def _analysis_step(
        self, data: npt.NDArray[np.float64], h: int
    ) -> npt.NDArray[np.float64]:
        out = data.copy()
        approx, detail = analyze(data[..., :h], self.wavelet)
        out[..., : h // 2] = approx
        out[..., h // 2 : h] = detail
        return out

    def _synthesis_step(
        self, data: npt.NDArray[np.float64], h: int
    ) -> npt.NDArray[np.float64]:
        out = data.copy()
        out[..., :h] = synthesize(data[..., : h // 2], data[..., h // 2 : h], self.wavelet)
        return out


class WaveletPacketTransform(WaveletTransform):
    """
    Full wavelet packet tree.

    Each level splits every block of ``h`` samples, detail blocks included,
    into approximation and detail halves, so level ``l`` holds ``2**l``
    sub-bands.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import WaveletPacketTransform
    >>> WaveletPacketTransform("Haar").forward(np.array([1.0, 1.0, 1.0, 1.0]))
    array([2., 0., 0., 0.])
    """

    name = "Wavelet Packet Transform"

    def _analysis_step(
        self, data: npt.NDArray[np.float64], h: int
    ) -> npt.NDArray[np.float64]:
        length = data.shape[-1]
        blocks = data.reshape(*data.shape[:-1], length // h, h)
        approx, detail = analyze(blocks, self.wavelet)
        return np.concatenate([approx, detail], axis=-1).reshape(data.shape)

    def _synthesis_step(
        self, data: npt.NDArray[np.float64], h: int
    ) -> npt.NDArray[np.float64]:
        length = data.shape[-1]
        blocks = data.reshape(*data.shape[:-1], length // h, h)
        window = synthesize(blocks[..., : h // 2], blocks[..., h // 2 :], self.wavelet)
        return window.reshape(data.shape)
