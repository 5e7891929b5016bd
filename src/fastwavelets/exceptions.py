"""Errors raised by the transforms.

Every check happens before any output buffer is written, so a raised error
never leaves a partially transformed result behind.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "PreconditionViolation", "TransformError"]


class TransformError(Exception):
    """Base class of all errors raised by :mod:`fastwavelets`."""


class PreconditionViolation(TransformError, ValueError):
    """Input does not satisfy a transform precondition.

    Raised for lengths that are not powers of two where one is required,
    decomposition levels outside ``[0, max_level]``, unsupported array ranks
    and mismatched coefficient shapes.
    """


class ConfigurationError(TransformError, ValueError):
    """A transform or wavelet cannot be built from the given settings.

    Raised for unknown transform or wavelet names, malformed filter data and
    invalid scheduler settings.
    """
