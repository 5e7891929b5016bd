from __future__ import annotations

__all__ = [
    "egyptian_segmentation",
    "exponent",
    "is_power_of_two",
    "max_level",
    "validate_level",
]
from ._utils import (
    egyptian_segmentation,
    exponent,
    is_power_of_two,
    max_level,
    validate_level,
)
