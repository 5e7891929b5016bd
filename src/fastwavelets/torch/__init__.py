"""PyTorch implementation of the wavelet pyramid transforms."""

from __future__ import annotations

from ._module import WaveletModule
from ._pyramid import analyze, synthesize
from ._transforms import FastWaveletTransform, WaveletPacketTransform, WaveletTransform

__all__ = [
    "FastWaveletTransform",
    "WaveletModule",
    "WaveletPacketTransform",
    "WaveletTransform",
    "analyze",
    "synthesize",
]
