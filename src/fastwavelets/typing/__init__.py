from __future__ import annotations

__all__ = [
    "AnyNDArray",
    "ComplexNDArray",
    "DecompositionLedger",
    "EgyptianSegmentation",
    "FloatNDArray",
    "MODWTCoefficients",
]
from ._typing import (
    AnyNDArray,
    ComplexNDArray,
    DecompositionLedger,
    EgyptianSegmentation,
    FloatNDArray,
    MODWTCoefficients,
)
