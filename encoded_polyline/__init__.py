"""Google Encoded Polyline encoding and decoding.

Polyline is a lossy text encoding of a coordinate path: each coordinate
is rounded to ``precision`` decimal digits, delta-encoded against the
previous point, and written as printable ASCII.

A note on coordinate order
--------------------------
Coordinates are ``(x, y)`` pairs, i.e. ``(longitude, latitude)``.  The
polyline format itself writes latitude first, so every point is emitted
as ``y`` then ``x``::

    >>> encode([(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)], 5)
    '_p~iF~ps|U_ulLnnqC_mqNvxq`@'
"""

from encoded_polyline.codec import PolylineCodec, decode, encode
from encoded_polyline.core.config import CodecConfig, ConfigValidationError
from encoded_polyline.core.constants import (
    DEFAULT_PRECISION,
    POLYLINE6_PRECISION,
    Strategy,
)
from encoded_polyline.core.exceptions import (
    CoordinateShapeError,
    DecodeError,
    DecodeOverflowError,
    EncodeError,
    EncodeOverflowError,
    GeometryConversionError,
    IncompleteCoordinateError,
    InvalidByteError,
    PolylineError,
    PrecisionError,
    StrategyError,
    UnterminatedChunkError,
    ValidationError,
)
from encoded_polyline.models import Coordinate, from_linestring, to_linestring

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PRECISION",
    "POLYLINE6_PRECISION",
    "CodecConfig",
    "ConfigValidationError",
    "Coordinate",
    "CoordinateShapeError",
    "DecodeError",
    "DecodeOverflowError",
    "EncodeError",
    "EncodeOverflowError",
    "GeometryConversionError",
    "IncompleteCoordinateError",
    "InvalidByteError",
    "PolylineCodec",
    "PolylineError",
    "PrecisionError",
    "Strategy",
    "StrategyError",
    "UnterminatedChunkError",
    "ValidationError",
    "decode",
    "encode",
    "from_linestring",
    "to_linestring",
]
