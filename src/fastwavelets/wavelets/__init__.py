from __future__ import annotations

__all__ = ["Wavelet", "get_wavelet", "list_wavelets"]

from ._bank import get_wavelet, list_wavelets
from ._wavelet import Wavelet
