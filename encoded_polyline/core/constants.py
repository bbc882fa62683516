"""Shared polyline constants.

Centralises the wire-format numbers (bias, chunk width, continuation bit)
and the integer limits that both the encoder and the decoder enforce.
"""

from __future__ import annotations

import enum

# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------

DEFAULT_PRECISION: int = 5
"""Google's public polyline precision (1e-5 degrees)."""

POLYLINE6_PRECISION: int = 6
"""Alternate precision used by OSRM and Valhalla."""

MIN_PRECISION: int = 0
MAX_PRECISION: int = 18
"""Largest precision whose scale factor ``10**p`` still fits in int64."""

# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------

BIAS: int = 63
"""Offset added to every 6-bit group (ASCII ``?``)."""

CHUNK_BITS: int = 5
CHUNK_MASK: int = 0x1F
CONTINUATION_BIT: int = 0x20

MIN_ENCODED_BYTE: int = BIAS
MAX_ENCODED_BYTE: int = BIAS + (CONTINUATION_BIT | CHUNK_MASK)
"""126 (``~``): the largest byte the encoder can emit."""

# ---------------------------------------------------------------------------
# Integer width
# ---------------------------------------------------------------------------

INT_BITS: int = 64
INT64_MIN: int = -(1 << (INT_BITS - 1))
INT64_MAX: int = (1 << (INT_BITS - 1)) - 1

MAX_CHUNKS: int = -(-INT_BITS // CHUNK_BITS)
"""13 chunks cover 64 bits; the last one may only carry 4 of them."""


class Strategy(enum.Enum):
    """Chunk coding strategy.

    Values:
        LOOP:  Reference shift-and-mask loop.
        TABLE: Precomputed lookup tables; identical output and errors.
    """

    LOOP = "loop"
    TABLE = "table"


DEFAULT_STRATEGY: Strategy = Strategy.TABLE
