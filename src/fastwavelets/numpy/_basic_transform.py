"""Dimension and complexity dispatch shared by all transforms."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

import numpy as np
import numpy.typing as npt

from ..exceptions import PreconditionViolation
from ..typing import AnyNDArray, ComplexNDArray, FloatNDArray
from ._parallel import ParallelScheduler

LineOperator = Callable[[npt.NDArray[np.float64], Optional[int]], npt.NDArray[np.float64]]


def interleave(z: npt.ArrayLike) -> FloatNDArray:
    """
    Pack complex samples into a real array ``[re0, im0, re1, im1, ...]``.

    Examples
    --------
    >>> import numpy as np
    >>> from fastwavelets.numpy import interleave
    >>> interleave(np.array([1 + 2j, 3 - 4j]))
    array([ 1.,  2.,  3., -4.])
    """
    z = np.asarray(z, dtype=np.complex128)
    out = np.empty((*z.shape[:-1], 2 * z.shape[-1]))
    out[..., 0::2] = z.real
    out[..., 1::2] = z.imag
    return out


def deinterleave(x: npt.ArrayLike) -> ComplexNDArray:
    """Inverse of :func:`interleave`."""
    x = np.asarray(x, dtype=np.float64)
    if x.shape[-1] % 2 != 0:
        msg = f"Interleaved data must have an even length, got {x.shape[-1]}"
        raise PreconditionViolation(msg)
    return x[..., 0::2] + 1j * x[..., 1::2]


class BasicTransform:
    """
    Lifts a 1-D transform to complex input and to 2-D and 3-D arrays.

    Subclasses provide the 1-D operators :meth:`_forward_lines` and
    :meth:`_reverse_lines`, which transform every row of a 2-D array of
    shape ``(lines, n)``, and the length check :meth:`_validate`. This base
    class then handles:

    * 1-D real input: the 1-D operator itself.
    * 1-D complex input: the samples are interleaved into a real array of
      twice the length, transformed and split back into a complex array.
    * 2-D input: forward transforms the rows and then the columns; reverse
      undoes the columns first and then the rows.
    * 3-D input: forward applies the 2-D operator to every slice along axis 0
      and then the 1-D operator along axis 0; reverse runs in the opposite
      order.

    Every axis length is validated before anything is computed. The same
    ``level`` is handed to every 1-D call.

    Parameters
    ----------
    scheduler : ParallelScheduler, optional
        Distributes independent lines over worker threads. Without one,
        everything runs on the calling thread.
    """

    name: str = "Basic Transform"

    def __init__(self, scheduler: ParallelScheduler | None = None) -> None:
        self.scheduler = scheduler

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def _validate(self, length: int, level: int | None) -> None:
        raise NotImplementedError

    def _forward_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        raise NotImplementedError

    def _reverse_lines(
        self, lines: npt.NDArray[np.float64], level: int | None
    ) -> npt.NDArray[np.float64]:
        raise NotImplementedError

    def forward(self, x: npt.ArrayLike, level: int | None = None) -> AnyNDArray:
        """
        Transform from the time domain to the transform domain.

        Parameters
        ----------
        x : array_like
            Real 1-D, 2-D or 3-D array, or complex 1-D array.
        level : int, optional
            Decomposition level of every 1-D transform. ``None`` selects the
            deepest level the length allows.

        Returns
        -------
        np.ndarray
            Coefficients with the shape of ``x``; complex if ``x`` is complex.

        Raises
        ------
        PreconditionViolation
            If the rank, an axis length or the level is not supported.
        """
        return self._dispatch(x, level, inverse=False)

    def reverse(self, x: npt.ArrayLike, level: int | None = None) -> AnyNDArray:
        """
        Transform from the transform domain back to the time domain.

        ``level`` must equal the one given to :meth:`forward`.
        """
        return self._dispatch(x, level, inverse=True)

    def _dispatch(
        self, x: npt.ArrayLike, level: int | None, inverse: bool
    ) -> AnyNDArray:
        x = np.asarray(x)
        if np.iscomplexobj(x):
            if x.ndim != 1:
                msg = f"Complex input must be one-dimensional, got {x.ndim} dimensions"
                raise PreconditionViolation(msg)
            return deinterleave(self._dispatch(interleave(x), level, inverse))

        if x.ndim not in (1, 2, 3):
            msg = f"Only 1-D, 2-D and 3-D arrays are supported, got {x.ndim} dimensions"
            raise PreconditionViolation(msg)
        if not np.issubdtype(x.dtype, np.number) and x.dtype != np.bool_:
            msg = f"Input must be numeric, got dtype {x.dtype}"
            raise PreconditionViolation(msg)
        for length in x.shape:
            self._validate(int(length), level)

        data = np.asarray(x, dtype=np.float64)
        if inverse:
            for axis in range(data.ndim):
                data = self._apply_along_axis(self._reverse_lines, data, axis, level)
        else:
            for axis in reversed(range(data.ndim)):
                data = self._apply_along_axis(self._forward_lines, data, axis, level)
        return data

    def _apply_along_axis(
        self,
        operator: LineOperator,
        data: npt.NDArray[np.float64],
        axis: int,
        level: int | None,
    ) -> npt.NDArray[np.float64]:
        moved = np.moveaxis(data, axis, -1)
        shape = moved.shape
        lines = np.ascontiguousarray(moved).reshape(-1, shape[-1])
        out = np.empty_like(lines)

        def work(start: int, stop: int) -> None:
            out[start:stop] = operator(lines[start:stop], level)

        if self.scheduler is None or lines.shape[0] == 1:
            work(0, lines.shape[0])
        else:
            self.scheduler.run(work, lines.shape[0])
        return np.moveaxis(out.reshape(shape), -1, axis)
