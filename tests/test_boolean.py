"""
Unit tests for edge intersections, self-intersection and overlap.
"""

import math

import numpy as np
import pytest

from polykit import (
    O,
    Point,
    box,
    isinside,
    ispolyselfintersecting,
    polyarea,
    polyintersect,
    polyintersections,
    polyresolve,
    polyselfintersections,
    star,
)

SQUARE_A = box(Point(0, 0), Point(2, 2))
SQUARE_B = box(Point(1, 1), Point(3, 3))
BOW_TIE = np.array([[0, 0], [2, 2], [2, 0], [0, 2]], dtype=float)
U_SHAPE = np.array([
    [0, 0], [3, 0], [3, 3], [2, 3], [2, 1], [1, 1], [1, 3], [0, 3]
], dtype=float)


class TestPolyIntersections:
    """Tests for polyintersections() function."""

    def test_overlapping_squares(self):
        points = polyintersections(SQUARE_A, SQUARE_B)
        assert len(points) == 2
        assert any(p == Point(2, 1) for p in points)
        assert any(p == Point(1, 2) for p in points)

    def test_disjoint(self):
        far = box(Point(10, 10), Point(11, 11))
        assert polyintersections(SQUARE_A, far) == []

    def test_shared_vertex_reported_once(self):
        a = np.array([[0, 0], [1, 0], [0, 1]], dtype=float)
        b = np.array([[0, 0], [-1, 0], [0, -1]], dtype=float)
        assert polyintersections(a, b) == [Point(0, 0)]

    def test_points_lie_on_both_boundaries(self):
        pgon1 = star(O, 201.9, 23, 0.8, math.pi / 2)
        pgon2 = star(O, 201.9, 23, 0.8, math.pi / 5)
        points = polyintersections(pgon1, pgon2)
        assert len(points) > 0
        for p in points:
            assert isinside(p, pgon1)
            assert isinside(p, pgon2)
            assert not isinside(p, pgon1, allowonedge=False)


class TestSelfIntersection:
    """Tests for self-intersection detection and resolution."""

    def test_bow_tie(self):
        assert polyselfintersections(BOW_TIE) == [Point(1, 1)]
        assert ispolyselfintersecting(BOW_TIE)

    def test_simple_polygons(self):
        assert not ispolyselfintersecting(SQUARE_A)
        assert not ispolyselfintersecting(U_SHAPE)
        assert not ispolyselfintersecting(star(O, 100, 9, 0.4))

    def test_repeated_vertex_is_not_a_crossing(self):
        poly = np.array([[0, 0], [2, 0], [2, 0], [2, 2], [0, 2]], dtype=float)
        assert not ispolyselfintersecting(poly)

    def test_triangle(self):
        triangle = np.array([[0, 0], [1, 0], [0, 1]], dtype=float)
        assert polyselfintersections(triangle) == []

    def test_resolve_bow_tie(self):
        """Both lobes of a bow tie survive."""
        pieces = polyresolve(BOW_TIE)
        assert len(pieces) == 2
        for piece in pieces:
            assert polyarea(piece) == pytest.approx(1.0)

    def test_resolve_simple_is_copy(self):
        pieces = polyresolve(U_SHAPE)
        assert len(pieces) == 1
        np.testing.assert_array_equal(pieces[0], U_SHAPE)
        assert pieces[0] is not U_SHAPE


class TestPolyIntersect:
    """Tests for polyintersect() function."""

    def test_overlapping_squares(self):
        regions = polyintersect(SQUARE_A, SQUARE_B)
        assert len(regions) == 1
        assert polyarea(regions[0]) == pytest.approx(1.0)
        assert polyarea(regions[0], signed=True) > 0

    def test_disjoint(self):
        assert polyintersect(SQUARE_A, box(Point(10, 10), Point(11, 11))) == []

    def test_touching_edge_has_no_area(self):
        neighbour = box(Point(2, 0), Point(4, 2))
        assert polyintersect(SQUARE_A, neighbour) == []

    def test_contained(self):
        inner = box(Point(0.5, 0.5), Point(1, 1))
        regions = polyintersect(SQUARE_A, inner)
        assert len(regions) == 1
        assert polyarea(regions[0]) == pytest.approx(0.25)

    def test_separate_regions(self):
        """A bar across both arms of a U overlaps it twice, largest first."""
        bar = np.array([[-1, 2], [4, 2], [4, 2.5], [-1, 2.5]], dtype=float)
        regions = polyintersect(U_SHAPE, bar)
        assert len(regions) == 2
        for region in regions:
            assert polyarea(region) == pytest.approx(0.5)

    def test_clockwise_input(self):
        regions = polyintersect(SQUARE_A[::-1], SQUARE_B[::-1])
        assert len(regions) == 1
        assert polyarea(regions[0], signed=True) == pytest.approx(1.0)

    def test_stars(self):
        pgon1 = star(O, 201.9, 23, 0.8, math.pi / 2)
        pgon2 = star(O, 201.9, 23, 0.8, math.pi / 5)
        regions = polyintersect(pgon1, pgon2)
        total = sum(polyarea(r) for r in regions)
        assert len(regions) >= 1
        assert total <= min(polyarea(pgon1), polyarea(pgon2)) + 1e-6
        assert total > 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
