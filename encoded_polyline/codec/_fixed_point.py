"""Fixed-point and zigzag helpers shared by the encoder and decoder.

Python integers never overflow, so the signed 64-bit limits are checked
explicitly before a value is allowed to reach the chunk coders.
"""

from __future__ import annotations

import math

from encoded_polyline.core.constants import INT64_MAX, INT64_MIN


def scale_factor(precision: int) -> float:
    """Return ``10**precision`` as a float (exact for precision <= 22)."""
    return float(10**precision)


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def quantize(value: float, factor: float) -> int:
    """Scale ``value`` and round half away from zero to an int64.

    Raises:
        OverflowError: If the value is not finite or the rounded result
            does not fit in a signed 64-bit integer.
    """
    scaled = value * factor
    if not math.isfinite(scaled):
        msg = f"{value!r} * {factor:g} is not finite"
        raise OverflowError(msg)

    magnitude = abs(scaled)
    rounded = math.floor(magnitude)
    # magnitude - floor(magnitude) is exact for doubles
    if magnitude - rounded >= 0.5:
        rounded += 1
    result = -rounded if scaled < 0 else rounded

    if not fits_int64(result):
        msg = f"{value!r} * {factor:g} rounds to {result}, outside int64"
        raise OverflowError(msg)
    return result


def zigzag_fold(delta: int) -> int:
    """Fold a signed delta into a non-negative integer (sign in bit 0)."""
    return ~(delta << 1) if delta < 0 else delta << 1


def zigzag_unfold(value: int) -> int:
    """Inverse of ``zigzag_fold``."""
    return ~(value >> 1) if value & 1 else value >> 1
