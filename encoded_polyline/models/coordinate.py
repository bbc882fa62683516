"""Data model for a single polyline vertex.

A Coordinate is an immutable ``(x, y)`` pair of floats.  ``x`` is the
longitude-like axis and ``y`` the latitude-like axis; the encoder writes
``y`` before ``x`` on the wire, matching the Google polyline convention.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from encoded_polyline.core.exceptions import CoordinateShapeError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A single 2D coordinate.

    Attributes:
        x: Longitude-like value.
        y: Latitude-like value.
    """

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(x, y)``."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Coordinate:
        """Deserialise from a ``{"x": ..., "y": ...}`` payload.

        Raises:
            CoordinateShapeError: If either key is missing or not numeric.
        """
        if "x" not in data or "y" not in data:
            msg = f"Coordinate dict must have 'x' and 'y' keys, got {sorted(data)}"
            raise CoordinateShapeError(msg)
        return cls(x=_as_float(data["x"], 0, "x"), y=_as_float(data["y"], 0, "y"))

    def is_close(self, other: Coordinate, tolerance: float) -> bool:
        """Whether both axes of ``other`` are within ``tolerance``."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance


def iter_coordinates(items: Iterable[object]) -> Iterator[Coordinate]:
    """Yield a ``Coordinate`` for every item of a caller-supplied sequence.

    Accepts ``Coordinate`` instances, 2-item sequences ``(x, y)``, objects
    exposing ``.x``/``.y`` (e.g. shapely ``Point``), or a shapely
    ``LineString`` (anything with a ``coords`` attribute).

    Raises:
        CoordinateShapeError: If an item is not a 2D numeric coordinate.
    """
    coords = getattr(items, "coords", None)
    if coords is not None:
        items = coords

    for index, item in enumerate(items):
        yield _to_coordinate(item, index)


def _to_coordinate(item: object, index: int) -> Coordinate:
    if isinstance(item, Coordinate):
        if type(item.x) is float and type(item.y) is float:
            return item
        return Coordinate(x=_as_float(item.x, index, "x"), y=_as_float(item.y, index, "y"))

    if isinstance(item, (str, bytes)):
        msg = f"Coordinate at index {index} must be a pair of numbers, got {type(item).__name__}"
        raise CoordinateShapeError(msg, position=index)

    if hasattr(item, "x") and hasattr(item, "y"):
        if getattr(item, "has_z", False):
            msg = f"Coordinate at index {index} is three-dimensional"
            raise CoordinateShapeError(msg, position=index)
        x = item.x  # type: ignore[attr-defined]
        y = item.y  # type: ignore[attr-defined]
        return Coordinate(x=_as_float(x, index, "x"), y=_as_float(y, index, "y"))

    try:
        values = tuple(item)  # type: ignore[call-overload]
    except TypeError as exc:
        msg = f"Coordinate at index {index} must be a pair of numbers, got {type(item).__name__}"
        raise CoordinateShapeError(msg, position=index) from exc

    if len(values) != 2:
        msg = f"Coordinate at index {index} must have exactly 2 values, got {len(values)}"
        raise CoordinateShapeError(msg, position=index)

    return Coordinate(x=_as_float(values[0], index, "x"), y=_as_float(values[1], index, "y"))


def _as_float(value: object, index: int, axis: str) -> float:
    if isinstance(value, (str, bytes, bool)):
        msg = f"Coordinate {axis} at index {index} must be numeric, got {type(value).__name__}"
        raise CoordinateShapeError(msg, position=index)
    try:
        result = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"Coordinate {axis} at index {index} must be numeric, got {type(value).__name__}"
        raise CoordinateShapeError(msg, position=index) from exc
    return result
