"""
Unit tests for polygon transforms.
"""

import math

import numpy as np
import pytest

from polykit import (
    O,
    DegenerateGeometryError,
    Point,
    PolygonShapeError,
    polyarea,
    polycentroid,
    polymove,
    polyreflect,
    polyrotate,
    polyscale,
    star,
)

SQUARE = np.array([[0, 0], [2, 0], [2, 2], [0, 2]], dtype=float)


class TestPolyMove:
    """Tests for polymove() function."""

    def test_translates(self):
        result = polymove(SQUARE, Point(0, 0), Point(10, -5))
        np.testing.assert_allclose(result, SQUARE + [10, -5])

    def test_input_unchanged(self):
        original = SQUARE.copy()
        polymove(SQUARE, O, Point(1, 1))
        np.testing.assert_array_equal(SQUARE, original)

    def test_out_in_place(self):
        """Passing the input as ``out`` updates it in place."""
        work = SQUARE.copy()
        result = polymove(work, O, Point(1, 2), out=work)
        assert result is work
        np.testing.assert_allclose(work, SQUARE + [1, 2])

    def test_out_wrong_shape(self):
        with pytest.raises(PolygonShapeError):
            polymove(SQUARE, O, Point(1, 1), out=np.zeros((3, 2)))


class TestPolyScale:
    """Tests for polyscale() function."""

    def test_uniform_about_origin(self):
        np.testing.assert_allclose(polyscale(SQUARE, 3), SQUARE * 3)

    def test_about_center(self):
        """Scaling about the centroid keeps the centroid fixed."""
        c = polycentroid(SQUARE)
        result = polyscale(SQUARE, 2, center=c)
        assert polycentroid(result) == c
        assert polyarea(result) == pytest.approx(16.0)

    def test_non_uniform(self):
        result = polyscale(SQUARE, 2, 0.5)
        np.testing.assert_allclose(result[2], [4, 1])
        assert polyarea(result) == pytest.approx(4.0)


class TestPolyRotate:
    """Tests for polyrotate() function."""

    def test_quarter_turn(self):
        result = polyrotate(np.array([[1, 0], [0, 1]], dtype=float), math.pi / 2)
        np.testing.assert_allclose(result, [[0, 1], [-1, 0]], atol=1e-12)

    def test_about_center(self):
        result = polyrotate(SQUARE, math.pi, center=Point(1, 1))
        np.testing.assert_allclose(result, [[2, 2], [0, 2], [0, 0], [2, 0]], atol=1e-12)

    def test_preserves_area_and_count(self):
        pgon = star(O, 50, 7, 0.4)
        result = polyrotate(pgon, 1.234, center=Point(10, -3))
        assert result.shape == pgon.shape
        assert polyarea(result) == pytest.approx(polyarea(pgon))

    def test_out(self):
        work = SQUARE.copy()
        polyrotate(work, math.pi / 2, out=work)
        np.testing.assert_allclose(work[1], [0, 2], atol=1e-12)


class TestPolyReflect:
    """Tests for polyreflect() function."""

    def test_default_is_y_axis(self):
        result = polyreflect(np.array([[1, 2], [-3, 4]], dtype=float))
        np.testing.assert_allclose(result, [[-1, 2], [3, 4]])

    def test_diagonal(self):
        result = polyreflect(np.array([[1, 0], [5, 2]], dtype=float), O, Point(1, 1))
        np.testing.assert_allclose(result, [[0, 1], [2, 5]], atol=1e-12)

    def test_reverses_winding(self):
        result = polyreflect(SQUARE, Point(0, 5), Point(3, 7))
        assert polyarea(result, signed=True) == pytest.approx(-polyarea(SQUARE, signed=True))

    def test_twice_is_identity(self):
        pgon = star(Point(3, 4), 20, 5, 0.5)
        p1, p2 = Point(-1, 2), Point(4, -7)
        np.testing.assert_allclose(polyreflect(polyreflect(pgon, p1, p2), p1, p2), pgon)

    def test_degenerate_line(self):
        with pytest.raises(DegenerateGeometryError):
            polyreflect(SQUARE, Point(1, 1), Point(1, 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
