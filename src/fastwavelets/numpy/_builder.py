from __future__ import annotations

import logging
from enum import Enum

from ..exceptions import ConfigurationError
from ..wavelets import Wavelet, get_wavelet
from ._ancient_egyptian import AncientEgyptianDecomposition
from ._basic_transform import BasicTransform
from ._discrete_fourier_transform import DiscreteFourierTransform
from ._parallel import ParallelScheduler
from ._wavelet_transform import FastWaveletTransform, WaveletPacketTransform

logger = logging.getLogger(__name__)


class TransformKind(str, Enum):
    """Transforms :func:`create_transform` can build."""

    DFT = DiscreteFourierTransform.name
    FWT = FastWaveletTransform.name
    WPT = WaveletPacketTransform.name


_TRANSFORMS: dict[TransformKind, type[BasicTransform]] = {
    TransformKind.DFT: DiscreteFourierTransform,
    TransformKind.FWT: FastWaveletTransform,
    TransformKind.WPT: WaveletPacketTransform,
}


def _kind(transform_name: TransformKind | str) -> TransformKind:
    if isinstance(transform_name, TransformKind):
        return transform_name
    if not isinstance(transform_name, str):
        msg = f"Transform name must be a string, got {type(transform_name).__name__}"
        raise ConfigurationError(msg)
    key = "".join(transform_name.lower().split())
    for kind in TransformKind:
        if key in (kind.name.lower(), "".join(kind.value.lower().split())):
            return kind
    msg = (
        f"Unknown transform {transform_name!r}. "
        f"Available transforms: {', '.join(kind.value for kind in TransformKind)}"
    )
    raise ConfigurationError(msg)


def create_transform(
    transform_name: TransformKind | str,
    wavelet: Wavelet | str | None = None,
    *,
    arbitrary_length: bool = False,
    scheduler: ParallelScheduler | None = None,
) -> BasicTransform:
    """
    Build a transform from its name.

    Parameters
    ----------
    transform_name : TransformKind or str
        ``"Fast Wavelet Transform"``, ``"Wavelet Packet Transform"`` or
        ``"Discrete Fourier Transform"``. Case and spaces are ignored, and
        the short forms ``"FWT"``, ``"WPT"`` and ``"DFT"`` are accepted.
    wavelet : Wavelet or str, optional
        Filter bank of a wavelet transform, or its name. Required for the
        wavelet transforms. The Fourier transform validates a given name
        but does not use the filters.
    arbitrary_length : bool, optional
        Wrap a wavelet transform in :class:`AncientEgyptianDecomposition`
        so that it accepts any signal length. Default is False.
    scheduler : ParallelScheduler, optional
        Scheduler shared by the created transforms.

    Returns
    -------
    BasicTransform
        Configured transform.

    Raises
    ------
    ConfigurationError
        If the transform or wavelet is unknown, a wavelet transform lacks a
        wavelet, or ``arbitrary_length`` is requested for the Fourier
        transform.

    Examples
    --------
    >>> from fastwavelets.numpy import create_transform, identify
    >>> fwt = create_transform("Fast Wavelet Transform", "Haar")
    >>> identify(fwt)
    'Fast Wavelet Transform'
    >>> identify(create_transform("wpt", "Haar", arbitrary_length=True))
    'Ancient Egyptian Decomposition'
    """
    kind = _kind(transform_name)
    if isinstance(wavelet, str):
        wavelet = get_wavelet(wavelet)
    elif wavelet is not None and not isinstance(wavelet, Wavelet):
        msg = f"Expected a Wavelet or a wavelet name, got {type(wavelet).__name__}"
        raise ConfigurationError(msg)

    if kind is TransformKind.DFT:
        if arbitrary_length:
            msg = "The Ancient Egyptian decomposition cannot wrap the Fourier transform"
            raise ConfigurationError(msg)
        transform: BasicTransform = DiscreteFourierTransform(scheduler=scheduler)
    else:
        if wavelet is None:
            msg = f"{kind.value} needs a wavelet"
            raise ConfigurationError(msg)
        transform = _TRANSFORMS[kind](wavelet, scheduler=scheduler)  # type: ignore[call-arg]
        if arbitrary_length:
            transform = AncientEgyptianDecomposition(transform, scheduler=scheduler)

    logger.debug("Built %r", transform)
    return transform


def identify(transform: BasicTransform) -> str:
    """
    Name of a transform.

    The three transform kinds report the names :func:`create_transform`
    accepts; an arbitrary-length wrapper reports its own name.
    """
    return transform.name
