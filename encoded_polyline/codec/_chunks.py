"""Reference shift-and-mask coding of one folded value.

A folded (non-negative) value is written as 5-bit groups, least
significant first.  Every group except the last carries the continuation
bit 0x20, and every byte is offset by 63 so the output is printable.

The readers raise the decode errors themselves so that both strategies
share one set of messages and positions (see ``_tables``).
"""

from __future__ import annotations

from encoded_polyline.core.constants import (
    BIAS,
    CHUNK_BITS,
    CHUNK_MASK,
    CONTINUATION_BIT,
    INT_BITS,
    MAX_ENCODED_BYTE,
    MIN_ENCODED_BYTE,
)
from encoded_polyline.core.exceptions import (
    DecodeOverflowError,
    InvalidByteError,
    UnterminatedChunkError,
)


def write_value_loop(value: int) -> str:
    """Encode a folded value as polyline characters."""
    chars = []
    while value >= CONTINUATION_BIT:
        chars.append(chr((CONTINUATION_BIT | (value & CHUNK_MASK)) + BIAS))
        value >>= CHUNK_BITS
    chars.append(chr(value + BIAS))
    return "".join(chars)


def read_value_loop(data: bytes, start: int) -> tuple[int, int]:
    """Read one folded value starting at ``data[start]``.

    Returns:
        ``(value, next_position)``.

    Raises:
        InvalidByteError: A byte outside 63-126 was found.
        UnterminatedChunkError: Input ended with the continuation bit set.
        DecodeOverflowError: The value would need more than 64 bits.
    """
    value = 0
    shift = 0
    pos = start
    end = len(data)
    while True:
        if pos >= end:
            raise unterminated(end)
        byte = data[pos]
        if not MIN_ENCODED_BYTE <= byte <= MAX_ENCODED_BYTE:
            raise invalid_byte(pos, byte)
        chunk = byte - BIAS
        # Reject before shifting: the last group may only hold the bits left in 64
        if shift + CHUNK_BITS > INT_BITS and (
            chunk & CONTINUATION_BIT or (chunk & CHUNK_MASK) >> (INT_BITS - shift)
        ):
            raise chunk_overflow(pos)
        value |= (chunk & CHUNK_MASK) << shift
        pos += 1
        if not chunk & CONTINUATION_BIT:
            return value, pos
        shift += CHUNK_BITS


# ---------------------------------------------------------------------------
# Error constructors (shared with the table strategy)
# ---------------------------------------------------------------------------


def invalid_byte(pos: int, byte: int) -> InvalidByteError:
    msg = (
        f"Invalid byte 0x{byte:02x} at position {pos}; "
        f"expected {MIN_ENCODED_BYTE}-{MAX_ENCODED_BYTE}"
    )
    return InvalidByteError(msg, position=pos, byte=byte)


def unterminated(pos: int) -> UnterminatedChunkError:
    msg = f"Polyline ends at position {pos} in the middle of a value"
    return UnterminatedChunkError(msg, position=pos)


def chunk_overflow(pos: int) -> DecodeOverflowError:
    msg = f"Value starting before position {pos} exceeds {INT_BITS} bits"
    return DecodeOverflowError(msg, position=pos)
