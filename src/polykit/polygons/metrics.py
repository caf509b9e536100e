"""
Polygon metrics.

Contains utility functions for:
- Polygon validation and conversion
- Area, centroid and orientation (shoelace formula)
- Perimeter, edge lengths and arc-length distances
- Point-in-polygon testing
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from ..config import DEFAULT_TOLERANCES, Tolerances
from ..core.point import Point
from ..errors import PolygonShapeError


class Orientation(Enum):
    """Winding direction, in a y-up coordinate system."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


def as_polygon(poly, min_vertices: int = 0) -> np.ndarray:
    """
    Convert a polygon to a float array of shape (M, 2).

    Parameters
    ----------
    poly : array-like
        ``np.ndarray`` of shape (M, 2), or a sequence of ``Point`` or
        ``(x, y)`` pairs.
    min_vertices : int
        Minimum number of vertices required.

    Returns
    -------
    np.ndarray
        Polygon vertices of shape (M, 2). Arrays that are already float64
        are returned without copying.

    Raises
    ------
    PolygonShapeError
        If the input has the wrong shape or too few vertices.
    """
    if isinstance(poly, np.ndarray):
        arr = np.asarray(poly, dtype=np.float64)
    else:
        pairs = [(p[0], p[1]) for p in poly]
        arr = np.array(pairs, dtype=np.float64) if pairs else np.empty((0, 2))

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PolygonShapeError(f"Expected points of shape (N, 2), got {arr.shape}")

    if len(arr) < min_vertices:
        raise PolygonShapeError(f"Need at least {min_vertices} points, got {len(arr)}")

    return arr


def to_points(poly) -> List[Point]:
    """Polygon vertices as a list of ``Point``."""
    return [Point(x, y) for x, y in as_polygon(poly)]


def _shoelace_terms(poly: np.ndarray) -> np.ndarray:
    x = poly[:, 0]
    y = poly[:, 1]
    return x * np.roll(y, -1) - np.roll(x, -1) * y


def polyarea(poly, signed: bool = False) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).
    signed : bool
        Return the signed area: positive for counterclockwise winding.

    Returns
    -------
    float
        Area of the polygon; 0.0 for fewer than 3 vertices.
    """
    poly = as_polygon(poly)
    if len(poly) < 3:
        return 0.0

    area = 0.5 * float(np.sum(_shoelace_terms(poly)))
    return area if signed else abs(area)


def polycentroid(poly, tol: Tolerances = DEFAULT_TOLERANCES) -> Point:
    """
    Area-weighted centroid of a polygon.

    Falls back to the vertex mean when the polygon has (almost) no area,
    which covers lines and fewer than three vertices.
    """
    poly = as_polygon(poly, min_vertices=1)
    if len(poly) < 3:
        return Point(*np.mean(poly, axis=0))

    cross = _shoelace_terms(poly)
    area = 0.5 * np.sum(cross)
    if abs(area) < tol.area_eps:
        return Point(*np.mean(poly, axis=0))

    x = poly[:, 0]
    y = poly[:, 1]
    cx = np.sum((x + np.roll(x, -1)) * cross) / (6.0 * area)
    cy = np.sum((y + np.roll(y, -1)) * cross) / (6.0 * area)
    return Point(cx, cy)


def polyorientation(poly) -> Orientation:
    """
    Winding direction from the sign of the shoelace sum.

    A zero-area polygon reports ``CLOCKWISE``.
    """
    if polyarea(poly, signed=True) > 0:
        return Orientation.COUNTERCLOCKWISE
    return Orientation.CLOCKWISE


def ispolyclockwise(poly) -> bool:
    return polyorientation(poly) is Orientation.CLOCKWISE


def ensure_ccw(poly) -> np.ndarray:
    """
    Ensure polygon vertices are in counter-clockwise order.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).

    Returns
    -------
    np.ndarray
        Polygon vertices in CCW order.
    """
    poly = as_polygon(poly)
    if polyarea(poly, signed=True) < 0:
        # Clockwise, reverse to make CCW
        return poly[::-1].copy()
    return poly


def polyedgelengths(poly, closed: bool = True) -> np.ndarray:
    """Length of each edge in order, including last-to-first when ``closed``."""
    poly = as_polygon(poly)
    if len(poly) < 2:
        return np.zeros(0)
    if closed:
        poly = np.vstack([poly, poly[:1]])
    return np.linalg.norm(np.diff(poly, axis=0), axis=1)


def polyperimeter(poly, closed: bool = True) -> float:
    """Sum of the edge lengths, wrapping last to first when ``closed``."""
    return float(np.sum(polyedgelengths(poly, closed=closed)))


def polydistances(poly, closed: bool = True) -> np.ndarray:
    """
    Cumulative arc length at each vertex.

    The first entry is 0 and the last is the perimeter; a closed polygon
    with M vertices yields M + 1 values, the extra one for the return to
    the first vertex.
    """
    return np.concatenate([[0.0], np.cumsum(polyedgelengths(poly, closed=closed))])


def polydistancematrix(poly) -> np.ndarray:
    """Full (M, M) matrix of distances between every pair of vertices."""
    poly = as_polygon(poly)
    return cdist(poly, poly)


def boundingbox(poly) -> Tuple[Point, Point]:
    """Lower-left and upper-right corners of the axis-aligned bounding box."""
    poly = as_polygon(poly, min_vertices=1)
    lo = poly.min(axis=0)
    hi = poly.max(axis=0)
    return Point(*lo), Point(*hi)


def contains(poly, points, allowonedge: bool = True,
             atol: Optional[float] = None,
             tol: Tolerances = DEFAULT_TOLERANCES) -> np.ndarray:
    """
    Test if points are inside or on a polygon (convex or concave).

    Uses the crossing-number (ray casting) rule for the interior. Points
    on an edge or vertex, found with the same collinearity test as
    ``ispointonline``, count as inside unless ``allowonedge`` is False.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).
    points : array-like
        Points to test of shape (N, 2) or a single point.
    allowonedge : bool
        Result reported for boundary points.
    atol : float, optional
        Collinearity tolerance for the boundary test. Defaults to
        ``tol.line_atol``.

    Returns
    -------
    np.ndarray
        Boolean array of shape (N,) indicating containment.
    """
    if atol is None:
        atol = tol.line_atol
    poly = as_polygon(poly)
    if isinstance(points, Point):
        points = points.as_array()
    elif not isinstance(points, np.ndarray):
        points = [tuple(p) if isinstance(p, Point) else p for p in points]
    points = np.atleast_2d(np.asarray(points, dtype=np.float64))

    n_points = len(points)
    if len(poly) < 3:
        return np.zeros(n_points, dtype=bool)

    px = points[:, 0:1]
    py = points[:, 1:2]
    x1 = poly[:, 0][np.newaxis, :]
    y1 = poly[:, 1][np.newaxis, :]
    x2 = np.roll(poly[:, 0], -1)[np.newaxis, :]
    y2 = np.roll(poly[:, 1], -1)[np.newaxis, :]

    # boundary: collinear with an edge and within its extent
    dxl = x2 - x1
    dyl = y2 - y1
    cpr = (px - x1) * dyl - (py - y1) * dxl
    along_x = np.abs(dxl) >= np.abs(dyl)
    within = np.where(
        along_x,
        (np.minimum(x1, x2) <= px) & (px <= np.maximum(x1, x2)),
        (np.minimum(y1, y2) <= py) & (py <= np.maximum(y1, y2)),
    )
    degenerate = (dxl == 0) & (dyl == 0)
    at_vertex = (np.abs(px - x1) <= atol) & (np.abs(py - y1) <= atol)
    within = np.where(degenerate, at_vertex, within)
    on_edge = np.any((np.abs(cpr) <= atol) & within, axis=1)

    # interior: count edges crossed by a ray towards +x
    straddles = (y1 > py) != (y2 > py)
    with np.errstate(divide='ignore', invalid='ignore'):
        x_cross = x1 + (py - y1) * dxl / dyl
    crossings = np.sum(straddles & (px < x_cross), axis=1)
    inside = (crossings % 2) == 1

    return np.where(on_edge, allowonedge, inside & ~on_edge)


def isinside(point: Point, poly, allowonedge: bool = True,
             tol: Tolerances = DEFAULT_TOLERANCES) -> bool:
    """True if ``point`` is inside ``poly``; boundary points count as inside by default."""
    return bool(contains(poly, [point], allowonedge=allowonedge, tol=tol)[0])


def iter_edges(poly, closed: bool = True) -> Iterable[Tuple[Point, Point]]:
    """Yield consecutive (start, end) Point pairs."""
    pts = to_points(poly)
    n = len(pts)
    last = n if closed else n - 1
    for i in range(max(last, 0)):
        yield pts[i], pts[(i + 1) % n]


def polyremoveduplicates(poly, tol: Tolerances = DEFAULT_TOLERANCES) -> np.ndarray:
    """Drop vertices equal to their successor (last compared with first)."""
    poly = as_polygon(poly)
    if len(poly) < 2:
        return poly.copy()
    nxt = np.roll(poly, -1, axis=0)
    distinct = np.any(np.abs(poly - nxt) > tol.point_atol, axis=1)
    if not np.any(distinct):
        return poly[:1].copy()
    return poly[distinct]


def polystats(poly, points=None) -> dict:
    """
    Compute diagnostic statistics for a polygon.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).
    points : array-like, optional
        Points of shape (N, 2) to classify against the polygon.

    Returns
    -------
    dict
        Statistics including:
        - num_vertices: Number of polygon vertices
        - area: Polygon area
        - perimeter: Closed perimeter
        - centroid: Area-weighted centroid
        - orientation: Winding direction name
        - points_inside / points_outside: Counts, when ``points`` is given
    """
    poly = as_polygon(poly)
    stats = {
        'num_vertices': len(poly),
        'area': polyarea(poly),
        'perimeter': polyperimeter(poly),
        'centroid': polycentroid(poly) if len(poly) else None,
        'orientation': polyorientation(poly).value,
    }
    if points is not None:
        inside_mask = contains(poly, points)
        stats['points_inside'] = int(np.sum(inside_mask))
        stats['points_outside'] = int(np.sum(~inside_mask))
    return stats
