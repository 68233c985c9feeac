import math

import pytest

from pathbuilder import BoundingBox, PathBuilder, PathVector, Point
from pathbuilder.geometry import arrow_lines, lateral_points, mid_angle, sign


class TestPoint:
    def test_coordinates(self):
        point = Point(1.5, -2)

        assert point.x == 1.5
        assert point.y == -2.0
        assert point.to_tuple() == (1.5, -2.0)

    def test_equality_is_tolerant(self):
        assert Point(1, 2) == (1 + 1e-12, 2)
        assert Point(1, 2) != (1.1, 2)
        assert Point(1, 2) != "not a point"

    def test_equality_between_points(self):
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) != Point(3, 5)
        assert Point(3, 4) == (3, 4)
        assert [Point(0, 0), Point(1, 1)] == [(0, 0), (1, 1)]

    def test_equality_with_builder_points(self):
        builder = PathBuilder()
        builder.add_linear(100)

        assert builder.points[0] == (0, 0)
        assert builder.points[1] == Point(100, 0)
        assert builder.points[0] != builder.points[1]

    def test_read_only(self):
        with pytest.raises(ValueError):
            Point(0, 0)[0] = 1.0

    def test_arithmetic_returns_new_point(self):
        moved = Point(1, 2) + Point(3, 4)

        assert moved == (4, 6)


class TestPathVector:
    def test_unpacks_as_pair(self):
        length, heading = PathVector(10.0, 0.5)

        assert (length, heading) == (10.0, 0.5)
        assert PathVector(10.0, 0.5).to_json() == {"length": 10.0, "heading": 0.5}


class TestBoundingBox:
    def test_starts_at_origin(self):
        box = BoundingBox()

        assert box.size == (0.0, 0.0)
        assert box.top_left == (0, 0)

    def test_expanded_grows_only(self):
        box = BoundingBox().expanded((10, -5)).expanded((-3, 4)).expanded((1, 1))

        assert box == BoundingBox(left=-3, top=-5, right=10, bottom=4)
        assert box.width == 13
        assert box.height == 9
        assert box.bottom_right == (10, 4)

    def test_contains(self):
        box = BoundingBox(0, 0, 10, 10)

        assert box.contains((5, 5))
        assert not box.contains((11, 5))
        assert box.contains((10.5, 5), tolerance=1)


class TestAngleHelpers:
    def test_sign(self):
        assert sign(-3) == -1.0
        assert sign(0) == 0.0
        assert sign(2) == 1.0

    def test_mid_angle_ignores_full_turns(self):
        disparity, bisector = mid_angle(0.1, 0.1 + 2 * math.pi)

        assert disparity == pytest.approx(0, abs=1e-6)
        assert bisector == pytest.approx(0.1, abs=1e-6)

    def test_mid_angle_turns_toward_second_heading(self):
        disparity, bisector = mid_angle(math.pi / 2, 0)

        assert disparity == pytest.approx(math.pi / 4)
        assert bisector == pytest.approx(math.pi / 4)

        disparity, bisector = mid_angle(0, math.pi / 2)
        assert bisector == pytest.approx(math.pi / 4)

    def test_lateral_points(self):
        left, right = lateral_points((10, 0), 5, 0)

        assert left == (10, -5)
        assert right == (10, 5)

    def test_arrow_lines(self):
        lines = arrow_lines((0, 0), 10, math.pi / 2)

        assert len(lines) == 3
        shaft_start, tip = lines[0]
        assert shaft_start == (0, 0)
        assert tip == (0, 10)
        assert lines[1][1] == (-1.5, 7.5)
        assert lines[2][1] == (1.5, 7.5)
