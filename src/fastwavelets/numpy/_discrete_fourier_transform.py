from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..exceptions import PreconditionViolation
from ._basic_transform import BasicTransform, deinterleave, interleave
from ._parallel import ParallelScheduler

_BLOCK = 64


class DiscreteFourierTransform(BasicTransform):
    """
    Discrete Fourier transform by direct summation.

    Real input of length ``2 n`` is read as ``n`` interleaved complex samples
    ``[re0, im0, re1, im1, ...]`` and the result is written back in the same
    layout. Complex input is interleaved automatically, so passing a complex
    array gives its ordinary DFT.

    The forward transform uses the kernel ``exp(-2 pi i k t / n)``, the
    reverse transform ``exp(+2 pi i k t / n) / n``. Products ``k t`` are
    reduced modulo ``n`` before the angle is formed. Output indices are
    computed in fixed blocks of 64 that the scheduler can spread over
    threads; the blocks are the same with or without a scheduler, so the
    results are too.

    Parameters
    ----------
    scheduler : ParallelScheduler, optional
        Distributes blocks of output indices, or independent lines of 2-D and 3-D
        input, over threads.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import DiscreteFourierTransform
    >>> dft = DiscreteFourierTransform()
    >>> np.round(dft.forward(np.ones(8)), 12) + 0.0
    array([4., 4., 0., 0., 0., 0., 0., 0.])
    >>> np.allclose(dft.forward(np.array([1j, 2, 3])), np.fft.fft([1j, 2, 3]))
    True
    """

    name = "Discrete Fourier Transform"

    def __init__(self, scheduler: ParallelScheduler | None = None) -> None:
        super().__init__(scheduler=scheduler)

    def _validate(self, length: int, level: int | None) -> None:
        if level is not None:
            msg = f"The Fourier transform has no decomposition levels, got level={level!r}"
            raise PreconditionViolation(msg)
        if length < 2 or length % 2 != 0:
            msg = (
                "Real input holds interleaved complex samples and needs an even "
                f"length of at least 2, got {length}"
            )
            raise PreconditionViolation(msg)

    def _transform(self, lines: npt.NDArray[np.float64], sign: float) -> npt.NDArray[np.float64]:
        samples = deinterleave(lines)
        n = samples.shape[-1]
        t = np.arange(n)
        spectrum = np.empty_like(samples)

        def work(start: int, stop: int) -> None:
            for block in range(start, stop):
                k = np.arange(block * _BLOCK, min((block + 1) * _BLOCK, n))
                kernel = np.exp(sign * 2j * np.pi * (np.outer(k, t) % n) / n)
                # lines one at a time, independent of batching
                for line in range(samples.shape[0]):
                    spectrum[line, k] = kernel @ samples[line]

        blocks = -(-n // _BLOCK)
        if self.scheduler is None:
            work(0, blocks)
        else:
            self.scheduler.run(work, blocks)
        if sign > 0:
            spectrum /= n
        return interleave(spectrum)

    def _forward_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        return self._transform(lines, -1.0)

    def _reverse_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        return self._transform(lines, 1.0)
