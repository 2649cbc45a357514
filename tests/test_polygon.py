"""Tests for perimeter and outline geometry."""

import math

import pytest

from shapearea import Circle, Rectangle, ShapeError, shape_outline, shape_perimeter


class TestShapePerimeter:
    """Test suite for shape_perimeter."""

    def test_circle(self):
        assert shape_perimeter({"shape": "circle", "radius": 1}) == pytest.approx(2 * math.pi)

    def test_rectangle(self):
        assert shape_perimeter(Rectangle(height=3, width=4)) == 14

    def test_tag_is_ignored(self):
        assert shape_perimeter({"shape": "rectangle", "radius": 2}) == pytest.approx(4 * math.pi)

    def test_missing_dimension(self):
        with pytest.raises(ShapeError):
            shape_perimeter({"width": 4})

    def test_typed_shape_with_bad_dimension(self):
        with pytest.raises(ShapeError, match="radius"):
            shape_perimeter(Circle(radius="2"))
        with pytest.raises(ShapeError, match="width"):
            shape_perimeter(Rectangle(height=1, width=False))

    def test_overflowing_perimeter(self):
        with pytest.raises(ShapeError, match="too large"):
            shape_perimeter({"radius": 10**400})


class TestShapeOutline:
    """Test suite for shape_outline."""

    def test_rectangle_outline_is_exact(self):
        outline = shape_outline({"height": 3, "width": 4})
        assert outline.area == pytest.approx(12)
        assert outline.bounds == (0.0, 0.0, 4.0, 3.0)

    def test_circle_outline_approximates_area(self):
        outline = shape_outline(Circle(radius=2))
        assert outline.area == pytest.approx(4 * math.pi, rel=1e-2)
        assert outline.area < 4 * math.pi
        assert outline.centroid.x == pytest.approx(0.0, abs=1e-9)
        assert outline.centroid.y == pytest.approx(0.0, abs=1e-9)

    def test_more_segments_is_closer(self):
        coarse = shape_outline(Circle(radius=1), quad_segs=4)
        fine = shape_outline(Circle(radius=1), quad_segs=128)
        assert abs(math.pi - fine.area) < abs(math.pi - coarse.area)

    def test_zero_radius_is_empty(self):
        assert shape_outline({"radius": 0}).is_empty
