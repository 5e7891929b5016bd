from __future__ import annotations

__all__ = [
    "AncientEgyptianDecomposition",
    "BasicTransform",
    "TransformKind",
    "DiscreteFourierTransform",
    "FastWaveletTransform",
    "MaximalOverlapTransform",
    "ParallelScheduler",
    "WaveletPacketTransform",
    "WaveletTransform",
    "analyze",
    "create_transform",
    "deinterleave",
    "identify",
    "interleave",
    "synthesize",
    "upsample_filter",
]

from ._ancient_egyptian import AncientEgyptianDecomposition
from ._basic_transform import BasicTransform, deinterleave, interleave
from ._builder import TransformKind, create_transform, identify
from ._discrete_fourier_transform import DiscreteFourierTransform
from ._modwt import MaximalOverlapTransform, upsample_filter
from ._parallel import ParallelScheduler
from ._pyramid import analyze, synthesize
from ._wavelet_transform import (
    FastWaveletTransform,
    WaveletPacketTransform,
    WaveletTransform,
)
