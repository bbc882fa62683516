"""Shapely interop for coordinate sequences.

The encoder already accepts a ``LineString`` directly (anything with a
``coords`` attribute); these helpers cover the other direction and the
explicit conversion when a caller wants a geometry object back from
``decode``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from encoded_polyline.core.exceptions import GeometryConversionError
from encoded_polyline.models.coordinate import Coordinate, iter_coordinates

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shapely.geometry import LineString

logger = logging.getLogger("encoded_polyline.models.geometry")


def to_linestring(coordinates: Iterable[object]) -> LineString:
    """Build a shapely ``LineString`` from a coordinate sequence.

    An empty sequence yields an empty ``LineString``.

    Raises:
        GeometryConversionError: If the sequence has exactly one point
            (a LineString needs zero or at least two).
        CoordinateShapeError: If an item is not a 2D coordinate.
    """
    from shapely.geometry import LineString

    points = [c.as_tuple() for c in iter_coordinates(coordinates)]
    if len(points) == 1:
        msg = "Cannot build a LineString from a single coordinate"
        raise GeometryConversionError(msg, position=0)

    try:
        return LineString(points)
    except Exception as exc:
        msg = f"Cannot create LineString: {exc}"
        raise GeometryConversionError(msg) from exc


def from_linestring(line: LineString) -> list[Coordinate]:
    """Extract the vertices of a shapely ``LineString`` as coordinates.

    Raises:
        GeometryConversionError: If ``line`` is not a LineString or is
            three-dimensional.
    """
    geom_type = getattr(line, "geom_type", type(line).__name__)
    if geom_type not in ("LineString", "LinearRing"):
        msg = f"Expected a LineString, got {geom_type}"
        raise GeometryConversionError(msg)

    if line.has_z:
        logger.warning("Rejecting 3D %s with %d vertices", geom_type, len(line.coords))
        msg = f"{geom_type} is three-dimensional; only 2D coordinates are supported"
        raise GeometryConversionError(msg)

    return [Coordinate(x=float(x), y=float(y)) for x, y in line.coords]
