"""Unified polyline exception taxonomy.

Every error raised by the package inherits from ``PolylineError`` and
carries structured context fields so callers can tell malformed text
apart from values that fall outside the representable integer range.

Taxonomy categories
-------------------
- ``ValidationError``: bad arguments (precision, coordinate shape, config).
- ``EncodeError``: a coordinate cannot be quantised into int64.
- ``DecodeError``: the polyline text is malformed or overflows int64.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging or translation at a binding layer.
"""

from __future__ import annotations


class PolylineError(Exception):
    """Base exception for all polyline errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. ``"DECODE_INVALID_BYTE"``).
        position: Byte offset (decode) or coordinate index (encode)
            where the error was detected, or ``None``.
    """

    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        code: str = "",
        position: int | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.position = position
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, EncodeError):
            return "encode"
        if isinstance(self, DecodeError):
            return "decode"
        return "unknown"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "message": self.message,
            "position": self.position,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PolylineError):
    """Invalid argument passed to the codec."""

    default_code = "VALIDATION_FAILED"


class EncodeError(PolylineError):
    """A coordinate sequence could not be encoded."""

    default_code = "ENCODE_FAILED"


class DecodeError(PolylineError):
    """A polyline string could not be decoded."""

    default_code = "DECODE_FAILED"


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class PrecisionError(ValidationError):
    """Precision is not an integer in the supported range."""

    default_code = "PRECISION_INVALID"


class StrategyError(ValidationError):
    """Unknown codec strategy name."""

    default_code = "STRATEGY_INVALID"


class CoordinateShapeError(ValidationError):
    """An input item is not a two-dimensional numeric coordinate."""

    default_code = "COORDINATE_SHAPE_INVALID"


class GeometryConversionError(ValidationError):
    """Coordinates cannot be represented by the requested geometry type."""

    default_code = "GEOMETRY_CONVERSION_FAILED"


# ---------------------------------------------------------------------------
# Encode errors
# ---------------------------------------------------------------------------


class EncodeOverflowError(EncodeError):
    """A scaled coordinate or delta does not fit in a signed 64-bit integer.

    Attributes:
        index: Zero-based index of the offending coordinate.
        axis: ``"x"`` or ``"y"``.
    """

    default_code = "ENCODE_OVERFLOW"

    def __init__(self, message: str, *, index: int, axis: str) -> None:
        self.index = index
        self.axis = axis
        super().__init__(message, position=index)


# ---------------------------------------------------------------------------
# Decode errors
# ---------------------------------------------------------------------------


class InvalidByteError(DecodeError):
    """A byte outside the encoded range 63-126 appeared in the input.

    Attributes:
        byte: The offending byte value.
    """

    default_code = "DECODE_INVALID_BYTE"

    def __init__(self, message: str, *, position: int, byte: int) -> None:
        self.byte = byte
        super().__init__(message, position=position)


class UnterminatedChunkError(DecodeError):
    """Input ended while a continuation bit was still set."""

    default_code = "DECODE_UNTERMINATED_CHUNK"


class DecodeOverflowError(DecodeError):
    """A decoded value would leave the signed 64-bit integer range."""

    default_code = "DECODE_OVERFLOW"


class IncompleteCoordinateError(DecodeError):
    """Input ended after the first value of a coordinate pair."""

    default_code = "DECODE_INCOMPLETE_COORDINATE"
