from __future__ import annotations

import sys
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from ..exceptions import ConfigurationError
from ..utils import is_power_of_two


def _as_filter(name: str, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        msg = f"Filter {name!r} must be a non-empty 1-D sequence, got shape {arr.shape}"
        raise ConfigurationError(msg)
    if not np.all(np.isfinite(arr)):
        msg = f"Filter {name!r} contains non-finite values"
        raise ConfigurationError(msg)
    arr.flags.writeable = False
    return arr


def _mirror(scaling: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    # g[j] = (-1)**j * h[L - 1 - j]
    signs = np.where(np.arange(scaling.size) % 2 == 0, 1.0, -1.0)
    return signs * scaling[::-1]


@dataclass(frozen=True, eq=False, **({"kw_only": True} if sys.version_info >= (3, 10) else {}))
class Wavelet:
    """
    Two-band filter bank driving one pyramid step.

    A wavelet is an immutable value: its four filters are read-only arrays
    of a common length and it can be shared by any number of transforms.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"Daubechies 4"``.
    analysis_lowpass, analysis_highpass : array_like
        Decomposition filters producing approximation and detail coefficients.
    synthesis_lowpass, synthesis_highpass : array_like
        Reconstruction filters.
    min_transform_length : int, optional
        Smallest window the pyramid step may be applied to. Must be a power
        of two, at least 2. Default is 2.

    Examples
    --------
    >>> from fastwavelets.wavelets import Wavelet
    >>> haar = Wavelet.orthonormal("Haar", [0.5**0.5, 0.5**0.5])
    >>> haar.analysis_highpass
    array([ 0.70710678, -0.70710678])
    >>> haar.filter_length
    2
    """

    name: str
    analysis_lowpass: npt.NDArray[np.float64]
    analysis_highpass: npt.NDArray[np.float64]
    synthesis_lowpass: npt.NDArray[np.float64]
    synthesis_highpass: npt.NDArray[np.float64]
    min_transform_length: int = 2

    def __post_init__(self) -> None:
        filters = {}
        for field_name in (
            "analysis_lowpass",
            "analysis_highpass",
            "synthesis_lowpass",
            "synthesis_highpass",
        ):
            filters[field_name] = _as_filter(field_name, getattr(self, field_name))
            object.__setattr__(self, field_name, filters[field_name])

        lengths = {f.size for f in filters.values()}
        if len(lengths) != 1:
            msg = f"Wavelet {self.name!r} has filters of different lengths {sorted(lengths)}"
            raise ConfigurationError(msg)

        m = self.min_transform_length
        if isinstance(m, bool) or not isinstance(m, int) or m < 2 or not is_power_of_two(m):
            msg = f"Minimum transform length must be a power of two >= 2, got {m!r}"
            raise ConfigurationError(msg)

    @property
    def filter_length(self) -> int:
        return int(self.analysis_lowpass.size)

    @classmethod
    def orthonormal(
        cls, name: str, scaling: npt.ArrayLike, min_transform_length: int = 2
    ) -> Wavelet:
        """
        Build an orthonormal wavelet from its scaling filter.

        The wavelet filter is the quadrature mirror of the scaling filter,
        ``g[j] = (-1)**j h[L-1-j]``, and synthesis uses the same filters as
        analysis.

        Parameters
        ----------
        name : str
            Display name.
        scaling : array_like
            Low-pass (scaling) filter ``h``.
        min_transform_length : int, optional
            Smallest window the pyramid step may be applied to. Default is 2.

        Returns
        -------
        Wavelet
            Orthonormal filter bank.
        """
        lowpass = _as_filter("scaling", scaling)
        highpass = _mirror(lowpass)
        return cls(
            name=name,
            analysis_lowpass=lowpass,
            analysis_highpass=highpass,
            synthesis_lowpass=lowpass,
            synthesis_highpass=highpass,
            min_transform_length=min_transform_length,
        )

    @classmethod
    def biorthogonal(
        cls,
        name: str,
        analysis_scaling: npt.ArrayLike,
        synthesis_scaling: npt.ArrayLike,
        min_transform_length: int = 2,
    ) -> Wavelet:
        """
        Build a biorthogonal wavelet from a pair of dual scaling filters.

        Each high-pass filter is the quadrature mirror of the *other* side's
        low-pass filter, which gives perfect reconstruction whenever the two
        scaling filters are dual to each other.

        Parameters
        ----------
        name : str
            Display name.
        analysis_scaling, synthesis_scaling : array_like
            Dual low-pass filters of equal length (zero-padded if needed).
        min_transform_length : int, optional
            Smallest window the pyramid step may be applied to. Default is 2.

        Returns
        -------
        Wavelet
            Biorthogonal filter bank.
        """
        analysis = _as_filter("analysis_scaling", analysis_scaling)
        synthesis = _as_filter("synthesis_scaling", synthesis_scaling)
        if analysis.size != synthesis.size:
            msg = (
                f"Wavelet {name!r} needs scaling filters of equal length, "
                f"got {analysis.size} and {synthesis.size}"
            )
            raise ConfigurationError(msg)
        return cls(
            name=name,
            analysis_lowpass=analysis,
            analysis_highpass=_mirror(synthesis),
            synthesis_lowpass=synthesis,
            synthesis_highpass=_mirror(analysis),
            min_transform_length=min_transform_length,
        )
