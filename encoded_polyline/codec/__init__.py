"""Google Encoded Polyline codec.

- **encoder**: coordinates + precision -> polyline string
- **decoder**: polyline string + precision -> coordinates
- **_fixed_point**: scaling, rounding, int64 checks, zigzag folding
- **_chunks**: reference shift-and-mask chunk coding
- **_tables**: lookup-table chunk coding (same output, same errors)
- **codec**: ``PolylineCodec`` facade bound to a ``CodecConfig``
"""

from __future__ import annotations

from encoded_polyline.codec.codec import PolylineCodec
from encoded_polyline.codec.decoder import decode
from encoded_polyline.codec.encoder import encode

__all__ = [
    "PolylineCodec",
    "decode",
    "encode",
]
