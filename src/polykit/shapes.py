"""
Vertex generators for common shapes.

These only compute points; drawing them is up to a renderer.
"""

import math

import numpy as np

from .core.point import Point
from .errors import PolygonShapeError


def ngon(center: Point, radius: float, sides: int = 5, orientation: float = 0.0,
         reversepath: bool = False) -> np.ndarray:
    """
    Vertices of a regular polygon with circumradius ``radius``.

    Vertex n (n = 1..sides) is at angle ``orientation + n * 2pi / sides``,
    so the polygon winds counterclockwise. With ``reversepath`` the same
    vertices are returned in reverse order, winding clockwise; there is no
    separate drawing step for the flag to act on, so it applies to the
    returned vertices.
    """
    if sides < 3:
        raise PolygonShapeError(f"ngon needs at least 3 sides, got {sides}")
    angles = orientation + np.arange(1, sides + 1) * 2 * math.pi / sides
    pts = np.column_stack([center.x + np.cos(angles) * radius,
                           center.y + np.sin(angles) * radius])
    return pts[::-1].copy() if reversepath else pts


def ngonside(center: Point, sidelength: float, sides: int = 5, orientation: float = 0.0,
             reversepath: bool = False) -> np.ndarray:
    """Regular polygon specified by side length instead of circumradius."""
    radius = 0.5 * sidelength / math.sin(math.pi / sides)
    return ngon(center, radius, sides, orientation, reversepath=reversepath)


def star(center: Point, radius: float, npoints: int = 5, ratio: float = 0.5,
         orientation: float = 0.0, reversepath: bool = False) -> np.ndarray:
    """
    Vertices of a star: ``npoints`` outer points alternating with inner
    points at ``radius * ratio``, half a step further round.
    """
    if npoints < 2:
        raise PolygonShapeError(f"star needs at least 2 points, got {npoints}")
    n = np.arange(1, npoints + 1)
    step = 2 * math.pi / npoints
    outer_angles = orientation + n * step
    inner_angles = orientation + (n + 0.5) * step

    pts = np.empty((2 * npoints, 2))
    pts[0::2, 0] = center.x + np.cos(outer_angles) * radius
    pts[0::2, 1] = center.y + np.sin(outer_angles) * radius
    pts[1::2, 0] = center.x + np.cos(inner_angles) * radius * ratio
    pts[1::2, 1] = center.y + np.sin(inner_angles) * radius * ratio
    return pts[::-1].copy() if reversepath else pts


def rect(corner: Point, w: float, h: float) -> np.ndarray:
    """
    Corners of a rectangle with one corner at ``corner``: in order
    (x, y + h), (x, y), (x + w, y), (x + w, y + h).
    """
    return np.array([
        [corner.x, corner.y + h],
        [corner.x, corner.y],
        [corner.x + w, corner.y],
        [corner.x + w, corner.y + h],
    ], dtype=np.float64)


def box(corner1: Point, corner2: Point) -> np.ndarray:
    """Corners of the rectangle with opposite corners ``corner1`` and ``corner2``."""
    return np.array([
        [corner1.x, corner1.y],
        [corner2.x, corner1.y],
        [corner2.x, corner2.y],
        [corner1.x, corner2.y],
    ], dtype=np.float64)


def box_centered(center: Point, width: float, height: float) -> np.ndarray:
    return rect(Point(center.x - width / 2, center.y - height / 2), width, height)
