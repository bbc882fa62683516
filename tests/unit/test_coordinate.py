"""Tests for the Coordinate model and input coercion."""

from __future__ import annotations

import pytest

from encoded_polyline.core.exceptions import CoordinateShapeError
from encoded_polyline.models.coordinate import Coordinate, iter_coordinates


class TestCoordinate:
    def test_as_tuple(self) -> None:
        assert Coordinate(x=-120.2, y=38.5).as_tuple() == (-120.2, 38.5)

    def test_round_trip_dict(self) -> None:
        coord = Coordinate(x=1.5, y=-2.5)
        assert Coordinate.from_dict(coord.to_dict()) == coord

    def test_from_dict_missing_key(self) -> None:
        with pytest.raises(CoordinateShapeError):
            Coordinate.from_dict({"x": 1.0})

    def test_immutable(self) -> None:
        coord = Coordinate(x=1.0, y=2.0)
        with pytest.raises(AttributeError):
            coord.x = 3.0  # type: ignore[misc]

    def test_is_close(self) -> None:
        a = Coordinate(x=1.0, y=2.0)
        assert a.is_close(Coordinate(x=1.000004, y=1.999996), 0.000005)
        assert not a.is_close(Coordinate(x=1.00001, y=2.0), 0.000005)


class TestIterCoordinates:
    """Caller input is coerced into Coordinate instances."""

    def test_tuples_and_lists(self) -> None:
        result = list(iter_coordinates([(1, 2), [3.5, 4.5]]))
        assert result == [Coordinate(x=1.0, y=2.0), Coordinate(x=3.5, y=4.5)]

    def test_coordinates_pass_through(self) -> None:
        coord = Coordinate(x=1.0, y=2.0)
        assert list(iter_coordinates([coord]))[0] is coord

    def test_coordinate_with_int_fields_is_coerced(self) -> None:
        result = list(iter_coordinates([Coordinate(x=1, y=2)]))
        assert result == [Coordinate(x=1.0, y=2.0)]
        assert type(result[0].x) is float

    def test_coordinate_with_non_numeric_field(self) -> None:
        bad = Coordinate(x="a", y=1.0)  # type: ignore[arg-type]
        with pytest.raises(CoordinateShapeError, match="Coordinate x at index 1") as exc_info:
            list(iter_coordinates([Coordinate(x=0.0, y=0.0), bad]))
        assert exc_info.value.position == 1

    def test_point_like_objects(self) -> None:
        from shapely.geometry import Point

        assert list(iter_coordinates([Point(1.0, 2.0)])) == [Coordinate(x=1.0, y=2.0)]

    def test_linestring(self) -> None:
        from shapely.geometry import LineString

        line = LineString([(2.0, 1.0), (4.0, 3.0)])
        assert [c.as_tuple() for c in iter_coordinates(line)] == [(2.0, 1.0), (4.0, 3.0)]

    def test_3d_point_rejected(self) -> None:
        from shapely.geometry import Point

        with pytest.raises(CoordinateShapeError, match="three-dimensional"):
            list(iter_coordinates([Point(1.0, 2.0, 3.0)]))

    def test_wrong_arity(self) -> None:
        with pytest.raises(CoordinateShapeError) as exc_info:
            list(iter_coordinates([(1.0, 2.0), (1.0,)]))
        assert exc_info.value.position == 1

    def test_string_item(self) -> None:
        with pytest.raises(CoordinateShapeError):
            list(iter_coordinates(["ab"]))

    def test_scalar_item(self) -> None:
        with pytest.raises(CoordinateShapeError):
            list(iter_coordinates([1.0]))

    def test_bool_value(self) -> None:
        with pytest.raises(CoordinateShapeError):
            list(iter_coordinates([(True, 1.0)]))

    def test_numpy_array(self) -> None:
        np = pytest.importorskip("numpy")
        arr = np.array([[2.0, 1.0], [4.0, 3.0]])
        assert [c.as_tuple() for c in iter_coordinates(arr)] == [(2.0, 1.0), (4.0, 3.0)]
