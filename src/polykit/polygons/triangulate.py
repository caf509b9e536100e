"""
Ear-clipping triangulation.

A vertex is an ear when its corner is convex and no other remaining
vertex lies in (or on) the triangle it forms with its neighbours. Ears are
clipped until three vertices remain.

Degenerate input is handled by two rules that each remove one vertex per
step, so the loop always terminates:
- a vertex whose corner has (near) zero area, from a repeated point or a
  collinear run or a spike, is dropped without emitting a triangle
- if a full pass finds no ear (only possible with numerically
  inconsistent input) the first convex vertex is clipped regardless,
  and if there is none the remnant is abandoned
"""

import logging
from typing import List

import numpy as np

from ..config import DEFAULT_TOLERANCES, Tolerances
from .boolean import ispolyselfintersecting, polyresolve
from .metrics import as_polygon, ensure_ccw, polyremoveduplicates

logger = logging.getLogger(__name__)


def _cross(o: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    return float((a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0]))


def _blocked(pts: np.ndarray, a: np.ndarray, b: np.ndarray, c: np.ndarray,
             eps: float) -> bool:
    """True if any of ``pts`` lies inside or on the CCW triangle (a, b, c)."""
    if len(pts) == 0:
        return False
    # points coinciding with a corner do not block
    same = np.zeros(len(pts), dtype=bool)
    for corner in (a, b, c):
        same |= np.all(np.abs(pts - corner) <= eps, axis=1)
    pts = pts[~same]
    if len(pts) == 0:
        return False

    d1 = (b[0] - a[0]) * (pts[:, 1] - a[1]) - (b[1] - a[1]) * (pts[:, 0] - a[0])
    d2 = (c[0] - b[0]) * (pts[:, 1] - b[1]) - (c[1] - b[1]) * (pts[:, 0] - b[0])
    d3 = (a[0] - c[0]) * (pts[:, 1] - c[1]) - (a[1] - c[1]) * (pts[:, 0] - c[0])
    return bool(np.any((d1 >= -eps) & (d2 >= -eps) & (d3 >= -eps)))


def _earclip(poly: np.ndarray, tol: Tolerances) -> List[np.ndarray]:
    poly = ensure_ccw(poly)
    idx = list(range(len(poly)))
    triangles: List[np.ndarray] = []
    eps = tol.area_eps
    k = 0

    while len(idx) > 3:
        m = len(idx)
        clipped = False
        for step in range(m):
            pos = (k + step) % m
            i0, i1, i2 = idx[pos - 1], idx[pos], idx[(pos + 1) % m]
            a, b, c = poly[i0], poly[i1], poly[i2]
            area2 = _cross(a, b, c)

            if abs(area2) <= eps:
                del idx[pos]
                clipped = True
                break
            if area2 < 0:
                continue

            others = [j for j in idx if j not in (i0, i1, i2)]
            if _blocked(poly[others], a, b, c, eps):
                continue

            triangles.append(np.array([a, b, c]))
            del idx[pos]
            clipped = True
            break

        if clipped:
            k = pos % len(idx) if idx else 0
            continue

        convex = [p for p in range(m)
                  if _cross(poly[idx[p - 1]], poly[idx[p]], poly[idx[(p + 1) % m]]) > eps]
        if not convex:
            logger.debug("polytriangulate: abandoning %d-vertex remnant with no convex corner", m)
            return triangles
        pos = convex[0]
        logger.debug("polytriangulate: no clean ear among %d vertices, clipping vertex %d",
                     m, idx[pos])
        triangles.append(np.array([poly[idx[pos - 1]], poly[idx[pos]], poly[idx[(pos + 1) % m]]]))
        del idx[pos]
        k = pos % len(idx)

    if len(idx) == 3 and abs(_cross(*poly[idx])) > eps:
        triangles.append(poly[idx].copy())
    return triangles


def polytriangulate(poly, tol: Tolerances = DEFAULT_TOLERANCES) -> List[np.ndarray]:
    """
    Decompose a polygon into non-overlapping triangles covering its interior.

    A self-intersecting polygon is first resolved into simple polygons and
    each is triangulated separately. The input is not modified.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2), convex or not.

    Returns
    -------
    list of np.ndarray
        Triangles of shape (3, 2), each counterclockwise. For a simple
        polygon their areas sum to the polygon's area.

    Notes
    -----
    Typically O(M^2): each clip scans for an ear starting where the last
    one was found and tests it against the remaining vertices. The
    self-intersection check adds O(M^2) edge pairs. Worst case O(M^3).
    """
    poly = polyremoveduplicates(as_polygon(poly), tol=tol)
    if len(poly) < 3:
        return []

    if ispolyselfintersecting(poly, tol=tol):
        pieces = polyresolve(poly, tol=tol)
    else:
        pieces = [poly]

    triangles: List[np.ndarray] = []
    for piece in pieces:
        triangles.extend(_earclip(piece, tol))
    return triangles
