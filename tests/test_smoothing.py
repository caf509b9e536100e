"""
Unit tests for corner rounding and offsetting.
"""

import math

import numpy as np
import pytest

from polykit import (
    O,
    Action,
    Point,
    ngon,
    offsetpoly,
    polyarea,
    polysmooth,
)

SQUARE = np.array([[0, 0], [2, 0], [2, 2], [0, 2]], dtype=float)


class RecordingRenderer:
    """Renderer stand-in that remembers what it was asked to draw."""

    def __init__(self):
        self.calls = []

    def draw(self, points, action, close=True):
        self.calls.append((points, action, close))


class TestPolySmooth:
    """Tests for polysmooth() function."""

    def test_rounded_square_area(self):
        """A 10x10 square with unit corners loses (4 - pi) of area, less the chord error."""
        square = SQUARE * 5
        outline = polysmooth(square, 1.0)
        assert len(outline) == 4 * 9
        assert polyarea(outline) == pytest.approx(100 - (4 - math.pi), abs=0.05)
        assert np.all(outline >= -1e-12)
        assert np.all(outline <= 10 + 1e-12)

    def test_arcs_are_tangent_to_edges(self):
        outline = polysmooth(SQUARE * 5, 1.0)
        # first arc rounds the corner at the origin, from the left edge to the bottom edge
        np.testing.assert_allclose(outline[0], [0, 1], atol=1e-12)
        np.testing.assert_allclose(outline[8], [1, 0], atol=1e-12)
        radii = np.linalg.norm(outline[:9] - [1, 1], axis=1)
        np.testing.assert_allclose(radii, 1.0)

    def test_radius_clamped_per_corner(self):
        """An oversized radius shrinks to fit: a 2x2 square becomes a unit circle."""
        outline = polysmooth(SQUARE, 5.0)
        radii = np.linalg.norm(outline - [1, 1], axis=1)
        np.testing.assert_allclose(radii, 1.0, atol=1e-9)

    def test_clamp_uses_half_the_shorter_edge(self):
        """On a 4x2 rectangle the arcs meet at the middle of the short edges."""
        rectangle = np.array([[0, 0], [4, 0], [4, 2], [0, 2]], dtype=float)
        outline = polysmooth(rectangle, 5.0)
        np.testing.assert_allclose(outline[0], [0, 1], atol=1e-12)
        np.testing.assert_allclose(outline[8], [1, 0], atol=1e-12)
        np.testing.assert_allclose(outline[-1], outline[0], atol=1e-12)
        radii = np.linalg.norm(outline[:9] - [1, 1], axis=1)
        np.testing.assert_allclose(radii, 1.0)

    def test_renderer_receives_action(self):
        renderer = RecordingRenderer()
        outline = polysmooth(SQUARE, 0.5, action="stroke", renderer=renderer)
        assert len(renderer.calls) == 1
        points, action, close = renderer.calls[0]
        assert points is outline
        assert action is Action.STROKE
        assert close

    def test_no_renderer(self):
        outline = polysmooth(ngon(O, 10, 5), 1.0, action=Action.FILL)
        assert outline.shape[1] == 2

    def test_zero_radius(self):
        np.testing.assert_array_equal(polysmooth(SQUARE, 0), SQUARE)

    def test_repeated_and_straight_vertices(self):
        """Duplicate and collinear vertices do not break the outline."""
        poly = np.array([[0, 0], [1, 0], [2, 0], [2, 0], [2, 2], [0, 2]], dtype=float)
        outline = polysmooth(poly, 0.25)
        assert np.all(np.isfinite(outline))
        np.testing.assert_allclose(outline[9], [1, 0])


class TestOffsetPoly:
    """Tests for offsetpoly() function."""

    def test_expand_square(self):
        result = offsetpoly(SQUARE, 1)
        np.testing.assert_allclose(result, [[-1, -1], [3, -1], [3, 3], [-1, 3]], atol=1e-12)

    def test_positive_expands_whatever_winding(self):
        assert polyarea(offsetpoly(SQUARE, 1)) == pytest.approx(16.0)
        assert polyarea(offsetpoly(SQUARE[::-1], 1)) == pytest.approx(16.0)

    def test_shrink(self):
        assert polyarea(offsetpoly(SQUARE, -0.5)) == pytest.approx(1.0)

    def test_round_trip_convex(self):
        hexagon = ngon(Point(3, 4), 10, 6)
        back = offsetpoly(offsetpoly(hexagon, 2), -2)
        np.testing.assert_allclose(back, hexagon, atol=1e-9)

    def test_parallel_edges(self):
        """A vertex in the middle of a straight edge is shifted along the normal."""
        poly = np.array([[0, 0], [1, 0], [2, 0], [2, 2], [0, 2]], dtype=float)
        result = offsetpoly(poly, 1)
        assert len(result) == 5
        np.testing.assert_allclose(result[1], [1, -1], atol=1e-12)
        np.testing.assert_allclose(result[0], [-1, -1], atol=1e-12)

    def test_position_independent(self):
        """Offsetting far from the origin matches offsetting at the origin."""
        heptagon = ngon(O, 100, 7)
        shift = np.array([3e6, 2e6])
        np.testing.assert_allclose(offsetpoly(heptagon + shift, 5),
                                   offsetpoly(heptagon, 5) + shift, atol=1e-6)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
