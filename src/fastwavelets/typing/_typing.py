from __future__ import annotations

import sys
from typing import Union

import numpy as np
from numpy.typing import NDArray

if sys.version_info >= (3, 10):
    from typing import TypeAlias
else:
    from typing_extensions import TypeAlias

AnyNDArray: TypeAlias = NDArray[np.generic]
FloatNDArray: TypeAlias = Union[
    NDArray[np.float32],
    NDArray[np.float64],
]
ComplexNDArray: TypeAlias = Union[
    NDArray[np.complex64],
    NDArray[np.complex128],
]

# Row 0 is the signal, row l holds the coefficients after l levels.
DecompositionLedger: TypeAlias = NDArray[np.float64]

# Rows D1, ..., DJ followed by the approximation AJ.
MODWTCoefficients: TypeAlias = NDArray[np.float64]

# (offset, exponent) pairs, one per set bit of the length, largest first.
EgyptianSegmentation: TypeAlias = list[tuple[int, int]]
