from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..exceptions import ConfigurationError, PreconditionViolation
from ..utils import egyptian_segmentation
from ._basic_transform import BasicTransform
from ._parallel import ParallelScheduler
from ._wavelet_transform import WaveletTransform


class AncientEgyptianDecomposition(BasicTransform):
    """
    Wavelet transform for signals of any length.

    The length is written as a sum of distinct powers of two, one per set
    bit, and the signal is cut into contiguous segments of those sizes,
    largest first. Every segment is transformed on its own, to its deepest
    level, by the wrapped wavelet transform. Segments of a single sample
    pass through unchanged.

    Parameters
    ----------
    transform : WaveletTransform
        Transform applied to each segment.
    scheduler : ParallelScheduler, optional
        Distributes independent lines of 2-D and 3-D input over threads.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import AncientEgyptianDecomposition, FastWaveletTransform
    >>> aed = AncientEgyptianDecomposition(FastWaveletTransform("Haar"))
    >>> aed.forward(np.ones(7))
    array([2.        , 0.        , 0.        , 0.        , 1.41421356,
           0.        , 1.        ])
    """

    name = "Ancient Egyptian Decomposition"

    def __init__(
        self, transform: WaveletTransform, scheduler: ParallelScheduler | None = None
    ) -> None:
        if not isinstance(transform, WaveletTransform):
            msg = (
                "The Ancient Egyptian decomposition wraps wavelet transforms only, "
                f"got {type(transform).__name__}"
            )
            raise ConfigurationError(msg)
        super().__init__(scheduler=scheduler)
        self.transform = transform

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.transform!r})"

    def _validate(self, length: int, level: int | None) -> None:
        if level is not None:
            msg = (
                "The Ancient Egyptian decomposition always transforms every "
                f"segment completely and does not accept a level, got {level!r}"
            )
            raise PreconditionViolation(msg)
        if length < 1:
            msg = f"Signal length must be at least 1, got {length}"
            raise PreconditionViolation(msg)

    def _map_segments(self, lines: npt.NDArray[np.float64], inverse: bool) -> npt.NDArray[np.float64]:
        out = np.array(lines, dtype=np.float64)
        for offset, p in egyptian_segmentation(lines.shape[-1]):
            size = 1 << p
            if size == 1:
                continue
            segment = lines[..., offset : offset + size]
            if inverse:
                out[..., offset : offset + size] = self.transform._reverse_lines(segment, None)
            else:
                out[..., offset : offset + size] = self.transform._forward_lines(segment, None)
        return out

    def _forward_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        return self._map_segments(lines, inverse=False)

    def _reverse_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        return self._map_segments(lines, inverse=True)
