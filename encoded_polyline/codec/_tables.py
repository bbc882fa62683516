"""Lookup-table coding of one folded value.

Same contract as ``_chunks``: byte-identical output and the same error
kind at the same position for every input.  Tables are built once at
import time and are immutable tuples.
"""

from __future__ import annotations

from encoded_polyline.codec._chunks import (
    chunk_overflow,
    invalid_byte,
    unterminated,
    write_value_loop,
)
from encoded_polyline.core.constants import (
    BIAS,
    CHUNK_BITS,
    CHUNK_MASK,
    CONTINUATION_BIT,
    INT_BITS,
    MAX_CHUNKS,
    MAX_ENCODED_BYTE,
    MIN_ENCODED_BYTE,
)

# Two chunks per lookup
GROUP_BITS = 2 * CHUNK_BITS
GROUP_SIZE = 1 << GROUP_BITS
GROUP_MASK = GROUP_SIZE - 1

_INVALID = -1
_OVERFLOW = -2


def _build_final_table() -> tuple[str, ...]:
    """Complete encodings of every value below ``GROUP_SIZE``."""
    return tuple(write_value_loop(v) for v in range(GROUP_SIZE))


def _build_continued_table() -> tuple[str, ...]:
    """Low ten bits of a larger value: two chunks, both continued."""
    return tuple(
        chr((CONTINUATION_BIT | (v & CHUNK_MASK)) + BIAS)
        + chr((CONTINUATION_BIT | (v >> CHUNK_BITS)) + BIAS)
        for v in range(GROUP_SIZE)
    )


def _build_decode_rows() -> tuple[tuple[int, ...], ...]:
    """Per chunk index, map every byte to its pre-shifted payload.

    Invalid bytes map to ``_INVALID``.  In the last row, bytes whose
    payload would spill past bit 63 or that keep the value going map to
    ``_OVERFLOW``.
    """
    rows = []
    for index in range(MAX_CHUNKS):
        shift = index * CHUNK_BITS
        room = INT_BITS - shift
        row = []
        for byte in range(256):
            if not MIN_ENCODED_BYTE <= byte <= MAX_ENCODED_BYTE:
                row.append(_INVALID)
                continue
            chunk = byte - BIAS
            payload = chunk & CHUNK_MASK
            if room < CHUNK_BITS and (chunk & CONTINUATION_BIT or payload >> room):
                row.append(_OVERFLOW)
                continue
            row.append(payload << shift)
        rows.append(tuple(row))
    return tuple(rows)


def _build_continues() -> tuple[bool, ...]:
    return tuple(
        MIN_ENCODED_BYTE <= byte <= MAX_ENCODED_BYTE and bool((byte - BIAS) & CONTINUATION_BIT)
        for byte in range(256)
    )


FINAL_TABLE = _build_final_table()
CONTINUED_TABLE = _build_continued_table()
DECODE_ROWS = _build_decode_rows()
CONTINUES = _build_continues()


def write_value_table(value: int) -> str:
    """Encode a folded value using the precomputed tables."""
    if value < GROUP_SIZE:
        return FINAL_TABLE[value]
    parts = []
    while value >= GROUP_SIZE:
        parts.append(CONTINUED_TABLE[value & GROUP_MASK])
        value >>= GROUP_BITS
    parts.append(FINAL_TABLE[value])
    return "".join(parts)


def read_value_table(data: bytes, start: int) -> tuple[int, int]:
    """Read one folded value starting at ``data[start]``.

    Raises:
        InvalidByteError: A byte outside 63-126 was found.
        UnterminatedChunkError: Input ended with the continuation bit set.
        DecodeOverflowError: The value would need more than 64 bits.
    """
    value = 0
    pos = start
    end = len(data)
    for row in DECODE_ROWS:
        if pos >= end:
            raise unterminated(end)
        byte = data[pos]
        contribution = row[byte]
        if contribution < 0:
            if contribution == _INVALID:
                raise invalid_byte(pos, byte)
            raise chunk_overflow(pos)
        value |= contribution
        pos += 1
        if not CONTINUES[byte]:
            return value, pos
    # The last row maps every continued byte to _OVERFLOW
    raise chunk_overflow(pos)
