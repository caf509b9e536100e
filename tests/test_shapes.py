"""
Unit tests for shape vertex generators.
"""

import math

import numpy as np
import pytest

from polykit import (
    O,
    Point,
    PolygonShapeError,
    box,
    box_centered,
    distance,
    ngon,
    ngonside,
    polyarea,
    polyedgelengths,
    polyorientation,
    Orientation,
    rect,
    star,
)


class TestNgon:
    """Tests for ngon() and ngonside()."""

    def test_vertices_on_circle(self):
        center = Point(3, -4)
        pgon = ngon(center, 7, 9)
        assert pgon.shape == (9, 2)
        for x, y in pgon:
            assert distance(center, Point(x, y)) == pytest.approx(7)

    def test_first_vertex_angle(self):
        """Vertex n sits at orientation + n * 2pi / sides, starting from n = 1."""
        pgon = ngon(O, 1, 4, orientation=0.1)
        angle = math.atan2(pgon[0, 1], pgon[0, 0])
        assert angle == pytest.approx(0.1 + math.pi / 2)

    def test_winding(self):
        assert polyorientation(ngon(O, 5, 6)) is Orientation.COUNTERCLOCKWISE
        assert polyorientation(ngon(O, 5, 6, reversepath=True)) is Orientation.CLOCKWISE

    def test_reversepath(self):
        np.testing.assert_allclose(ngon(O, 5, 6, reversepath=True), ngon(O, 5, 6)[::-1])
        np.testing.assert_allclose(ngonside(O, 2, 5, reversepath=True), ngonside(O, 2, 5)[::-1])

    def test_too_few_sides(self):
        with pytest.raises(PolygonShapeError):
            ngon(O, 5, 2)

    def test_ngonside(self):
        pgon = ngonside(O, 4, 7)
        np.testing.assert_allclose(polyedgelengths(pgon), 4.0)


class TestStar:
    """Tests for star() function."""

    def test_alternating_radii(self):
        pgon = star(O, 10, 5, 0.4)
        assert pgon.shape == (10, 2)
        radii = np.linalg.norm(pgon, axis=1)
        np.testing.assert_allclose(radii[0::2], 10)
        np.testing.assert_allclose(radii[1::2], 4)

    def test_area(self):
        """Each of the 2n triangles from the centre has area r R sin(pi / n) / 2."""
        n, r_out, ratio = 7, 10.0, 0.5
        expected = n * r_out * (r_out * ratio) * math.sin(math.pi / n)
        assert polyarea(star(O, r_out, n, ratio)) == pytest.approx(expected)

    def test_reversepath(self):
        np.testing.assert_allclose(star(O, 10, 5, reversepath=True), star(O, 10, 5)[::-1])


class TestRectangles:
    """Tests for rect(), box() and box_centered()."""

    def test_rect_order(self):
        np.testing.assert_array_equal(rect(Point(1, 2), 3, 4),
                                      [[1, 6], [1, 2], [4, 2], [4, 6]])

    def test_box_order(self):
        np.testing.assert_array_equal(box(Point(0, 0), Point(2, 1)),
                                      [[0, 0], [2, 0], [2, 1], [0, 1]])

    def test_box_centered(self):
        pgon = box_centered(Point(5, 5), 4, 2)
        assert polyarea(pgon) == pytest.approx(8)
        np.testing.assert_allclose(pgon.mean(axis=0), [5, 5])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
