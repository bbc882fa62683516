"""Configured codec facade.

``PolylineCodec`` binds a ``CodecConfig`` so applications that load
precision and strategy once (e.g. via ``CodecConfig.from_env()``) can
pass a single object around instead of repeating keyword arguments.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from encoded_polyline.codec.decoder import decode
from encoded_polyline.codec.encoder import encode
from encoded_polyline.core.config import CodecConfig
from encoded_polyline.models.geometry import to_linestring

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shapely.geometry import LineString

    from encoded_polyline.models.coordinate import Coordinate

logger = logging.getLogger("encoded_polyline.codec.codec")


class PolylineCodec:
    """Encode and decode with a fixed precision and strategy."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()
        logger.debug(
            "PolylineCodec configured | precision=%d | strategy=%s",
            self.config.precision,
            self.config.strategy.value,
        )

    @classmethod
    def from_env(cls) -> PolylineCodec:
        """Build a codec from ``POLYLINE_PRECISION`` / ``POLYLINE_STRATEGY``."""
        return cls(CodecConfig.from_env())

    @property
    def precision(self) -> int:
        return self.config.precision

    def encode(self, coordinates: Iterable[object]) -> str:
        return encode(coordinates, self.config.precision, strategy=self.config.strategy)

    def decode(self, polyline: str | bytes) -> list[Coordinate]:
        return decode(polyline, self.config.precision, strategy=self.config.strategy)

    def decode_linestring(self, polyline: str | bytes) -> LineString:
        """Decode straight into a shapely ``LineString``."""
        return to_linestring(self.decode(polyline))

    def __repr__(self) -> str:
        return (
            f"PolylineCodec(precision={self.config.precision}, "
            f"strategy={self.config.strategy.value!r})"
        )
