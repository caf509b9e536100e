"""
Polygon Reshape Module

Operations that change the set of vertices of a polygon:
- Arc-length resampling and splitting of the boundary (sample, portion, remainder)
- Cutting by a line (split)
- Dropping collinear vertices
- Interpolating spline through the vertices (fit)
- Sorting by angle, by distance, or into a nearest-neighbour chain
"""

import logging
import math
from typing import List, Optional, Tuple

import numpy as np
from scipy.interpolate import splev, splprep
from shapely.geometry import Polygon

from ..config import DEFAULT_TOLERANCES, Tolerances
from ..core.intersection import ispointonline
from ..core.point import Point
from ..errors import PolygonShapeError
from .conversion import repair, shapely_polygons
from .metrics import Orientation, as_polygon, polycentroid, polydistances, polyorientation

logger = logging.getLogger(__name__)


def _path(poly: np.ndarray, closed: bool) -> np.ndarray:
    """Vertices in drawing order, with the first repeated at the end when closed."""
    if closed and len(poly) > 1:
        return np.vstack([poly, poly[:1]])
    return poly


def polysample(poly, n: int, closed: bool = True) -> np.ndarray:
    """
    Resample the boundary at ``n`` points equally spaced by arc length.

    Points are placed by linear interpolation along the edges, starting at
    the first vertex. For a closed polygon the last sample stops one
    spacing short of the start; for an open chain it lands on the last
    vertex.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).
    n : int
        Number of samples, at least 2.
    closed : bool
        Include the edge from the last vertex back to the first.

    Returns
    -------
    np.ndarray
        Samples of shape (n, 2).
    """
    poly = as_polygon(poly, min_vertices=2)
    if n < 2:
        raise PolygonShapeError(f"polysample needs at least 2 samples, got {n}")

    path = _path(poly, closed)
    cumulative = polydistances(poly, closed=closed)
    targets = np.linspace(0.0, cumulative[-1], n, endpoint=not closed)

    x = np.interp(targets, cumulative, path[:, 0])
    y = np.interp(targets, cumulative, path[:, 1])
    return np.column_stack([x, y])


def _split_at_fraction(poly, fraction: float, closed: bool) -> Tuple[np.ndarray, np.ndarray]:
    poly = as_polygon(poly, min_vertices=2)
    fraction = min(max(float(fraction), 0.0), 1.0)

    path = _path(poly, closed)
    cumulative = polydistances(poly, closed=closed)
    target = fraction * cumulative[-1]

    # vertices at or before the split
    idx = int(np.searchsorted(cumulative, target, side='right'))
    idx = max(1, min(idx, len(path)))
    split = np.array([np.interp(target, cumulative, path[:, 0]),
                      np.interp(target, cumulative, path[:, 1])])

    head = path[:idx]
    if not np.allclose(head[-1], split):
        head = np.vstack([head, split])
    tail = np.vstack([split, path[idx:]])
    return head, tail


def polyportion(poly, fraction: float = 0.5, closed: bool = True) -> np.ndarray:
    """
    Leading part of the boundary, up to ``fraction`` of its length.

    The chain starts at the first vertex and ends at the interpolated split
    point, which is also the first point of ``polyremainder`` for the same
    fraction. ``fraction`` is clamped to [0, 1].
    """
    return _split_at_fraction(poly, fraction, closed)[0]


def polyremainder(poly, fraction: float = 0.5, closed: bool = True) -> np.ndarray:
    """
    Trailing part of the boundary, from ``fraction`` of its length to the end.

    For a closed polygon the chain ends back at the first vertex.
    """
    return _split_at_fraction(poly, fraction, closed)[1]


def polysplit(poly, p1: Point, p2: Point,
              tol: Tolerances = DEFAULT_TOLERANCES) -> List[np.ndarray]:
    """
    Cut a polygon by the infinite line through ``p1`` and ``p2``.

    Each edge that strictly crosses the line gets a new vertex at the
    crossing, then the vertices are dealt to the left (and on-line) and
    right (and on-line) sides, in the manner of a half-plane clip. A
    concave polygon can give several pieces on one side, joined along the
    cutting line; those are separated with Shapely.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).
    p1, p2 : Point
        Two distinct points on the cutting line.

    Returns
    -------
    list of np.ndarray
        Pieces left of ``p1 -> p2`` first, then those on the right, each
        with the winding of the input. If the line does not cut the
        polygon, a single copy of it.

    Notes
    -----
    O(M) for the cut plus the cost of separating pieces.
    """
    poly = as_polygon(poly, min_vertices=3)
    a = p1.as_array()
    direction = p2.as_array() - a
    length = float(np.hypot(*direction))
    if length == 0.0:
        return [poly.copy()]

    rel = poly - a
    sides = (direction[0] * rel[:, 1] - direction[1] * rel[:, 0]) / length
    sides[np.abs(sides) <= tol.point_atol] = 0.0

    if not (np.any(sides > 0) and np.any(sides < 0)):
        return [poly.copy()]

    left, right = [], []
    n = len(poly)
    for i in range(n):
        j = (i + 1) % n
        si, sj = sides[i], sides[j]
        if si >= 0:
            left.append(poly[i])
        if si <= 0:
            right.append(poly[i])
        if si * sj < 0:
            t = si / (si - sj)
            crossing = poly[i] + t * (poly[j] - poly[i])
            left.append(crossing)
            right.append(crossing)

    ccw = polyorientation(poly) is Orientation.COUNTERCLOCKWISE
    pieces = []
    for chain in (left, right):
        pieces.extend(_separate(np.array(chain), ccw, tol))
    return pieces


def _separate(chain: np.ndarray, ccw: bool, tol: Tolerances) -> List[np.ndarray]:
    if len(chain) < 3:
        return []
    shape = Polygon(chain)
    if shape.is_valid:
        return shapely_polygons(shape, ccw=ccw, tol=tol)
    logger.debug("polysplit: separating %d-vertex chain joined along the cut", len(chain))
    return shapely_polygons(repair(shape), ccw=ccw, tol=tol)


def polyremovecollinearpoints(poly, atol: Optional[float] = None,
                              tol: Tolerances = DEFAULT_TOLERANCES) -> np.ndarray:
    """
    Drop vertices that lie on the segment joining their neighbours.

    Each vertex is tested against the last vertex kept and the next input
    vertex, so runs of collinear points and repeated points collapse.
    Vertices where the boundary doubles back (collinear but outside the
    segment) are kept.
    """
    if atol is None:
        atol = tol.collinear_atol
    poly = as_polygon(poly)
    n = len(poly)
    if n < 3:
        return poly.copy()

    pts = [Point(x, y) for x, y in poly]
    kept: List[Point] = []
    for i in range(n):
        prev = kept[-1] if kept else pts[-1]
        nxt = pts[(i + 1) % n]
        if ispointonline(pts[i], prev, nxt, atol=atol, tol=tol):
            continue
        kept.append(pts[i])

    return np.array([p.as_tuple() for p in kept], dtype=np.float64).reshape(-1, 2)


def polyfit(poly, npoints: int = 30, closed: bool = False) -> np.ndarray:
    """
    Smooth curve through the vertices, sampled at ``npoints`` points.

    Fits an interpolating parametric spline (cubic where there are enough
    vertices) with ``scipy.interpolate.splprep``; ``closed`` makes it
    periodic. Consecutive repeated vertices are dropped before fitting.
    """
    poly = as_polygon(poly, min_vertices=2)
    keep = np.ones(len(poly), dtype=bool)
    keep[1:] = np.any(np.diff(poly, axis=0) != 0, axis=1)
    poly = poly[keep]
    if closed and len(poly) > 1 and np.allclose(poly[0], poly[-1]):
        poly = poly[:-1]
    if len(poly) < 2:
        raise PolygonShapeError(f"polyfit needs at least 2 distinct points, got {len(poly)}")

    data = np.vstack([poly, poly[:1]]) if closed else poly
    k = min(3, len(poly) - 1)

    tck, _ = splprep([data[:, 0], data[:, 1]], s=0, k=k, per=1 if closed else 0)
    u = np.linspace(0.0, 1.0, npoints, endpoint=not closed)
    x, y = splev(u, tck)
    return np.column_stack([x, y])


def polysortbyangle(poly, center: Optional[Point] = None) -> np.ndarray:
    """
    Vertices sorted by polar angle in [0, 2pi) about ``center``.

    ``center`` defaults to the centroid. The sort is stable.
    """
    poly = as_polygon(poly)
    if center is None:
        center = polycentroid(poly)
    rel = poly - center.as_array()
    angles = np.mod(np.arctan2(rel[:, 1], rel[:, 0]), 2 * math.pi)
    return poly[np.argsort(angles, kind='stable')]


def polysortbydistance(poly, refpoint: Point) -> np.ndarray:
    """Vertices sorted by distance from ``refpoint``, nearest first (stable)."""
    poly = as_polygon(poly)
    dist = np.linalg.norm(poly - refpoint.as_array(), axis=1)
    return poly[np.argsort(dist, kind='stable')]


def polysortbynearest(poly, start: Point) -> np.ndarray:
    """
    Greedy nearest-neighbour chain.

    Starts from the vertex nearest ``start`` and repeatedly moves to the
    nearest unvisited vertex. O(M^2).
    """
    poly = as_polygon(poly)
    n = len(poly)
    if n == 0:
        return poly.copy()

    remaining = np.ones(n, dtype=bool)
    order = []
    current = start.as_array()
    for _ in range(n):
        dist = np.linalg.norm(poly - current, axis=1)
        dist[~remaining] = np.inf
        i = int(np.argmin(dist))
        order.append(i)
        remaining[i] = False
        current = poly[i]
    return poly[order]
