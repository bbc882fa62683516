"""Polyline decoder.

Reads zigzag-folded values two at a time (``y`` then ``x``), adds each
to its running per-axis total and divides by ``10**precision``.

Decoding is all-or-nothing: any malformed byte, truncation or overflow
raises a ``DecodeError`` subclass carrying the byte offset, and no
partial sequence is returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from encoded_polyline.codec._chunks import read_value_loop
from encoded_polyline.codec._fixed_point import (
    fits_int64,
    scale_factor,
    zigzag_unfold,
)
from encoded_polyline.codec._tables import read_value_table
from encoded_polyline.core.constants import DEFAULT_PRECISION, Strategy
from encoded_polyline.core.exceptions import (
    DecodeError,
    DecodeOverflowError,
    IncompleteCoordinateError,
)
from encoded_polyline.core.validation import resolve_strategy, validate_precision
from encoded_polyline.models.coordinate import Coordinate

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("encoded_polyline.codec.decoder")

_READERS: dict[Strategy, Callable[[bytes, int], tuple[int, int]]] = {
    Strategy.LOOP: read_value_loop,
    Strategy.TABLE: read_value_table,
}


def decode(
    polyline: str | bytes,
    precision: int = DEFAULT_PRECISION,
    *,
    strategy: Strategy | str | None = None,
) -> list[Coordinate]:
    """Decode a polyline string into coordinates.

    ``str`` input is UTF-8 encoded before scanning, so error positions
    are byte offsets.

    Args:
        polyline: The encoded polyline.
        precision: Decimal digits the polyline was encoded with.
        strategy: ``"loop"`` or ``"table"`` (default).

    Returns:
        Decoded ``Coordinate`` list; ``[]`` for empty input.

    Raises:
        TypeError: If ``polyline`` is not ``str`` or bytes-like.
        PrecisionError: If ``precision`` is out of range.
        StrategyError: If ``strategy`` is unknown.
        InvalidByteError: A byte outside 63-126 was found.
        UnterminatedChunkError: Input ended in the middle of a value.
        IncompleteCoordinateError: Input ended after a lone ``y`` value.
        DecodeOverflowError: A value or running total leaves int64.
    """
    validate_precision(precision)
    read_value = _READERS[resolve_strategy(strategy)]
    factor = scale_factor(precision)
    data = _as_bytes(polyline)

    try:
        coordinates = _decode_bytes(data, factor, read_value)
    except DecodeError as exc:
        logger.warning(
            "Polyline rejected | error=%s | position=%s | length=%d",
            exc.code,
            exc.position,
            len(data),
        )
        raise

    logger.debug(
        "Polyline decoded | points=%d | precision=%d | length=%d",
        len(coordinates),
        precision,
        len(data),
    )
    return coordinates


def _decode_bytes(
    data: bytes,
    factor: float,
    read_value: Callable[[bytes, int], tuple[int, int]],
) -> list[Coordinate]:
    coordinates: list[Coordinate] = []
    scaled_x = 0
    scaled_y = 0
    pos = 0
    end = len(data)

    while pos < end:
        y_start = pos
        folded, pos = read_value(data, pos)
        scaled_y = _accumulate(scaled_y, folded, y_start, "y")

        if pos >= end:
            msg = f"Polyline ends after the y value starting at position {y_start}; no x value"
            raise IncompleteCoordinateError(msg, position=y_start)

        x_start = pos
        folded, pos = read_value(data, pos)
        scaled_x = _accumulate(scaled_x, folded, x_start, "x")

        coordinates.append(Coordinate(x=scaled_x / factor, y=scaled_y / factor))

    return coordinates


def _accumulate(total: int, folded: int, start: int, axis: str) -> int:
    total += zigzag_unfold(folded)
    if not fits_int64(total):
        msg = f"Running {axis} total leaves int64 at the value starting at position {start}"
        raise DecodeOverflowError(msg, position=start)
    return total


def _as_bytes(polyline: str | bytes) -> bytes:
    if isinstance(polyline, str):
        return polyline.encode("utf-8")
    if isinstance(polyline, (bytes, bytearray, memoryview)):
        return bytes(polyline)
    msg = f"polyline must be str or bytes, got {type(polyline).__name__}"
    raise TypeError(msg)
