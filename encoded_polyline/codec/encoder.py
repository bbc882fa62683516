"""Polyline encoder.

Quantises each coordinate to ``round(value * 10**precision)``, chains
deltas from the previous point (starting at zero), zigzag-folds each
delta and writes it as 5-bit chunks.  Each point is written ``y`` first,
then ``x``.

Nothing is returned on failure: the output is joined only after every
coordinate has been encoded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from encoded_polyline.codec._chunks import write_value_loop
from encoded_polyline.codec._fixed_point import (
    fits_int64,
    quantize,
    scale_factor,
    zigzag_fold,
)
from encoded_polyline.codec._tables import write_value_table
from encoded_polyline.core.constants import DEFAULT_PRECISION, Strategy
from encoded_polyline.core.exceptions import EncodeOverflowError
from encoded_polyline.core.validation import resolve_strategy, validate_precision
from encoded_polyline.models.coordinate import iter_coordinates

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger("encoded_polyline.codec.encoder")

_WRITERS: dict[Strategy, Callable[[int], str]] = {
    Strategy.LOOP: write_value_loop,
    Strategy.TABLE: write_value_table,
}


def encode(
    coordinates: Iterable[object],
    precision: int = DEFAULT_PRECISION,
    *,
    strategy: Strategy | str | None = None,
) -> str:
    """Encode a coordinate sequence as a polyline string.

    Args:
        coordinates: ``Coordinate`` objects, ``(x, y)`` pairs, points with
            ``.x``/``.y``, or a shapely ``LineString``.
        precision: Decimal digits to preserve (5 for Google, 6 for OSRM).
        strategy: ``"loop"`` or ``"table"`` (default).

    Returns:
        The encoded polyline; ``""`` for an empty sequence.

    Raises:
        PrecisionError: If ``precision`` is out of range.
        StrategyError: If ``strategy`` is unknown.
        CoordinateShapeError: If an item is not a 2D coordinate.
        EncodeOverflowError: If a scaled value or delta leaves int64.
    """
    validate_precision(precision)
    write_value = _WRITERS[resolve_strategy(strategy)]
    factor = scale_factor(precision)

    parts: list[str] = []
    previous_x = 0
    previous_y = 0
    count = 0
    for index, coord in enumerate(iter_coordinates(coordinates)):
        scaled_y = _scale(coord.y, factor, index, "y")
        scaled_x = _scale(coord.x, factor, index, "x")
        parts.append(write_value(zigzag_fold(_delta(scaled_y, previous_y, index, "y"))))
        parts.append(write_value(zigzag_fold(_delta(scaled_x, previous_x, index, "x"))))
        previous_x = scaled_x
        previous_y = scaled_y
        count += 1

    output = "".join(parts)
    logger.debug(
        "Polyline encoded | points=%d | precision=%d | length=%d",
        count,
        precision,
        len(output),
    )
    return output


def _scale(value: float, factor: float, index: int, axis: str) -> int:
    try:
        return quantize(value, factor)
    except OverflowError as exc:
        logger.warning("Encode overflow | index=%d | axis=%s | value=%r", index, axis, value)
        msg = f"Coordinate {axis}={value!r} at index {index} cannot be scaled into int64: {exc}"
        raise EncodeOverflowError(msg, index=index, axis=axis) from exc


def _delta(scaled: int, previous: int, index: int, axis: str) -> int:
    delta = scaled - previous
    if not fits_int64(delta):
        logger.warning("Encode overflow | index=%d | axis=%s | delta=%d", index, axis, delta)
        msg = f"Delta {delta} on {axis} at index {index} does not fit in int64"
        raise EncodeOverflowError(msg, index=index, axis=axis)
    return delta
