"""Tests for the unified exception taxonomy.

Validates:
- PolylineError base attributes and ``to_error_dict()`` keys
- Category classification (validation, encode, decode)
- Every public exception is a PolylineError subclass with its own code
"""

from __future__ import annotations

from typing import ClassVar

import pytest

from encoded_polyline.core.config import ConfigValidationError
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


class TestPolylineErrorBase:
    """PolylineError base class behavior."""

    def test_default_attributes(self) -> None:
        err = PolylineError("boom")
        assert err.message == "boom"
        assert err.code == ""
        assert err.position is None
        assert err.category == "unknown"

    def test_custom_attributes(self) -> None:
        err = PolylineError("fail", code="CUSTOM", position=7)
        assert err.code == "CUSTOM"
        assert err.position == 7

    def test_str_is_message(self) -> None:
        assert str(PolylineError("human-readable error")) == "human-readable error"

    def test_to_error_dict(self) -> None:
        err = UnterminatedChunkError("ends early", position=3)
        assert err.to_error_dict() == {
            "category": "decode",
            "code": "DECODE_UNTERMINATED_CHUNK",
            "message": "ends early",
            "position": 3,
        }


class TestCategories:
    """Concrete classes map to the right category."""

    CASES: ClassVar[list[tuple[PolylineError, str]]] = [
        (PrecisionError("p"), "validation"),
        (StrategyError("s"), "validation"),
        (CoordinateShapeError("c"), "validation"),
        (GeometryConversionError("g"), "validation"),
        (ConfigValidationError("KEY", 1, "bad"), "validation"),
        (EncodeOverflowError("o", index=0, axis="x"), "encode"),
        (InvalidByteError("i", position=0, byte=0), "decode"),
        (UnterminatedChunkError("u"), "decode"),
        (DecodeOverflowError("d"), "decode"),
        (IncompleteCoordinateError("n"), "decode"),
    ]

    @pytest.mark.parametrize(("err", "category"), CASES)
    def test_category(self, err: PolylineError, category: str) -> None:
        assert err.category == category
        assert isinstance(err, PolylineError)

    def test_codes_are_unique(self) -> None:
        codes = [err.code for err, _ in self.CASES]
        assert len(codes) == len(set(codes))


class TestHierarchy:
    """Malformed-text and overflow errors are distinct decode errors."""

    @pytest.mark.parametrize(
        "cls",
        [InvalidByteError, UnterminatedChunkError, DecodeOverflowError, IncompleteCoordinateError],
    )
    def test_decode_errors(self, cls: type[PolylineError]) -> None:
        assert issubclass(cls, DecodeError)
        assert not issubclass(cls, EncodeError)

    def test_overflow_kinds_are_separate(self) -> None:
        assert not issubclass(DecodeOverflowError, InvalidByteError)
        assert not issubclass(EncodeOverflowError, DecodeError)

    def test_validation_subclasses(self) -> None:
        for cls in (PrecisionError, StrategyError, CoordinateShapeError, ConfigValidationError):
            assert issubclass(cls, ValidationError)

    def test_encode_overflow_context(self) -> None:
        err = EncodeOverflowError("too big", index=4, axis="y")
        assert err.index == 4
        assert err.axis == "y"
        assert err.position == 4

    def test_invalid_byte_context(self) -> None:
        err = InvalidByteError("bad", position=9, byte=0x20)
        assert err.byte == 0x20
        assert err.position == 9
