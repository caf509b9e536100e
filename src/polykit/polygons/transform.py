"""
Affine transforms of polygons.

Each transform maps every vertex independently, so vertex count and order
never change. By default a new array is returned and the input is left
alone; pass ``out=`` (which may be the input array itself) to write the
result into a caller-owned buffer instead.
"""

import math
from typing import Optional

import numpy as np

from ..core.point import ORIGIN, Point
from ..errors import DegenerateGeometryError, PolygonShapeError
from .metrics import as_polygon


def _emit(result: np.ndarray, out: Optional[np.ndarray]) -> np.ndarray:
    if out is None:
        return result
    if out.shape != result.shape:
        raise PolygonShapeError(
            f"out has shape {out.shape}, expected {result.shape}")
    out[...] = result
    return out


def polymove(poly, frompoint: Point, topoint: Point,
             out: Optional[np.ndarray] = None) -> np.ndarray:
    """Translate by the vector from ``frompoint`` to ``topoint``."""
    poly = as_polygon(poly)
    shift = np.array([topoint.x - frompoint.x, topoint.y - frompoint.y])
    return _emit(poly + shift, out)


def polyscale(poly, sh: float, sv: Optional[float] = None,
              center: Point = ORIGIN,
              out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Scale about ``center`` by ``sh`` horizontally and ``sv`` vertically.

    ``sv`` defaults to ``sh`` (uniform scaling).
    """
    if sv is None:
        sv = sh
    poly = as_polygon(poly)
    c = center.as_array()
    return _emit((poly - c) * np.array([sh, sv]) + c, out)


def polyrotate(poly, angle: float, center: Point = ORIGIN,
               out: Optional[np.ndarray] = None) -> np.ndarray:
    """Rotate by ``angle`` radians about ``center`` (counterclockwise for y-up axes)."""
    poly = as_polygon(poly)
    c = center.as_array()
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    rotation = np.array([[cos_a, -sin_a],
                         [sin_a, cos_a]])
    return _emit((poly - c) @ rotation.T + c, out)


def polyreflect(poly, pt1: Point = ORIGIN, pt2: Point = ORIGIN + (0, 100),
                out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Reflect across the infinite line through ``pt1`` and ``pt2``.

    The default line is the y axis.

    Raises
    ------
    DegenerateGeometryError
        If ``pt1`` and ``pt2`` coincide exactly.
    """
    poly = as_polygon(poly)
    a = pt1.as_array()
    direction = pt2.as_array() - a
    length = np.linalg.norm(direction)
    if length == 0.0:
        raise DegenerateGeometryError(
            f"polyreflect(): line points {pt1} and {pt2} are the same")
    direction /= length

    rel = poly - a
    foot = a + np.outer(rel @ direction, direction)
    return _emit(2.0 * foot - poly, out)
