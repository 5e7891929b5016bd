from __future__ import annotations

import numbers

from ..exceptions import PreconditionViolation
from ..typing import EgyptianSegmentation


def is_power_of_two(n: int) -> bool:
    """
    Check whether ``n`` is a positive integer power of two.

    Examples
    --------
    >>> from fastwavelets.utils import is_power_of_two
    >>> is_power_of_two(1), is_power_of_two(64), is_power_of_two(96)
    (True, True, False)
    """
    return n >= 1 and (n & (n - 1)) == 0


def exponent(n: int) -> int:
    """
    Base-2 logarithm of a power of two.

    Parameters
    ----------
    n : int
        Power of two.

    Returns
    -------
    int
        ``p`` such that ``2**p == n``.

    Examples
    --------
    >>> from fastwavelets.utils import exponent
    >>> exponent(1024)
    10
    """
    if not is_power_of_two(n):
        msg = f"{n} is not a power of two"
        raise PreconditionViolation(msg)
    return n.bit_length() - 1


def max_level(length: int, min_transform_length: int) -> int:
    """
    Number of pyramid steps that fit into a signal of the given length.

    The window halves at every step and may not drop below
    ``min_transform_length``, so the deepest level is
    ``log2(length) - log2(min_transform_length) + 1``. Signals shorter than
    the minimum transform length support only level 0.

    Examples
    --------
    >>> from fastwavelets.utils import max_level
    >>> max_level(1024, 2)
    10
    >>> max_level(1024, 4)
    9
    >>> max_level(1, 2)
    0
    """
    if length < min_transform_length:
        return 0
    return exponent(length) - exponent(min_transform_length) + 1


def validate_level(level: int | None, deepest: int) -> int:
    """
    Resolve and check a requested decomposition level.

    Parameters
    ----------
    level : int or None
        Requested level. ``None`` selects ``deepest``.
    deepest : int
        Maximal level for the signal at hand.

    Returns
    -------
    int
        Level in ``[0, deepest]``.

    Raises
    ------
    PreconditionViolation
        If ``level`` is not an integer or lies outside ``[0, deepest]``.
    """
    if level is None:
        return deepest
    if isinstance(level, bool) or not isinstance(level, numbers.Integral):
        msg = f"Level must be an integer, got {level!r}"
        raise PreconditionViolation(msg)
    if level < 0 or level > deepest:
        msg = f"Level {level} is outside of the valid range [0, {deepest}]"
        raise PreconditionViolation(msg)
    return int(level)


def egyptian_segmentation(n: int) -> EgyptianSegmentation:
    """
    Split a length into a sum of distinct powers of two.

    Every set bit of ``n`` contributes one segment. Segments are ordered by
    decreasing size and laid out contiguously, so the offsets are running
    sums of the preceding sizes.

    Parameters
    ----------
    n : int
        Signal length, at least 1.

    Returns
    -------
    list[tuple[int, int]]
        ``(offset, p)`` pairs, one per segment of size ``2**p``.

    Raises
    ------
    PreconditionViolation
        If ``n < 1``.

    Examples
    --------
    >>> from fastwavelets.utils import egyptian_segmentation
    >>> egyptian_segmentation(42)
    [(0, 5), (32, 3), (40, 1)]
    >>> egyptian_segmentation(1)
    [(0, 0)]
    """
    if n < 1:
        msg = f"Cannot segment a length of {n}, need at least one sample"
        raise PreconditionViolation(msg)
    segments: EgyptianSegmentation = []
    offset = 0
    for p in range(n.bit_length() - 1, -1, -1):
        if n & (1 << p):
            segments.append((offset, p))
            offset += 1 << p
    return segments
