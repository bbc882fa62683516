"""Data models.

- Coordinate: Immutable ``(x, y)`` vertex
- iter_coordinates: Coerce caller input into coordinates
- to_linestring / from_linestring: shapely interop
"""

from encoded_polyline.models.coordinate import Coordinate, iter_coordinates
from encoded_polyline.models.geometry import from_linestring, to_linestring

__all__ = [
    "Coordinate",
    "from_linestring",
    "iter_coordinates",
    "to_linestring",
]
