"""
Polygon Boolean/Topology Module

Edge-level and region-level relations between polygons:
- Pairwise edge intersection points between two polygons
- Self-intersection detection, and resolution into simple polygons
- Intersection of the regions enclosed by two polygons

Edge tests use the same ``intersectionlines`` predicate as the rest of
the engine, so shared vertices and collinear overlaps are classified the
same way everywhere. Region work goes through Shapely.
"""

import logging
from typing import List

import numpy as np

from ..config import DEFAULT_TOLERANCES, Tolerances
from ..core.intersection import intersectionlines
from ..core.point import Point
from .conversion import repair, shapely_polygons, to_shapely
from .metrics import as_polygon, boundingbox, polyarea, polyremoveduplicates, to_points

logger = logging.getLogger(__name__)


def _append_unique(found: List[Point], pt: Point) -> None:
    if not any(pt == q for q in found):
        found.append(pt)


def polyintersections(poly_a, poly_b,
                      tol: Tolerances = DEFAULT_TOLERANCES) -> List[Point]:
    """
    Every point where an edge of ``poly_a`` meets an edge of ``poly_b``.

    Both polygons are treated as closed. Points are listed in the order
    they are met walking ``poly_a``'s edges, with repeats (for example a
    shared vertex met by two edges) collapsed. Interior and exterior are
    not considered.

    Notes
    -----
    O(M * N) edge pairs.
    """
    a = to_points(polyremoveduplicates(as_polygon(poly_a, min_vertices=2), tol=tol))
    b = to_points(polyremoveduplicates(as_polygon(poly_b, min_vertices=2), tol=tol))

    result: List[Point] = []
    for i in range(len(a)):
        a0, a1 = a[i], a[(i + 1) % len(a)]
        for j in range(len(b)):
            found, pt = intersectionlines(a0, a1, b[j], b[(j + 1) % len(b)],
                                          crossingonly=True, tol=tol)
            if found:
                _append_unique(result, pt)
    return result


def polyselfintersections(poly, tol: Tolerances = DEFAULT_TOLERANCES) -> List[Point]:
    """
    Points where non-adjacent edges of a closed polygon touch or cross.

    Repeated consecutive vertices are removed first so that the edges
    either side of a repeat are not mistaken for non-adjacent ones.

    Notes
    -----
    O(M^2) edge pairs.
    """
    pts = to_points(polyremoveduplicates(as_polygon(poly), tol=tol))
    n = len(pts)
    result: List[Point] = []
    if n < 4:
        return result

    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            found, pt = intersectionlines(pts[i], pts[(i + 1) % n],
                                          pts[j], pts[(j + 1) % n],
                                          crossingonly=True, tol=tol)
            if found:
                _append_unique(result, pt)
    return result


def ispolyselfintersecting(poly, tol: Tolerances = DEFAULT_TOLERANCES) -> bool:
    return len(polyselfintersections(poly, tol=tol)) > 0


def polyresolve(poly, tol: Tolerances = DEFAULT_TOLERANCES) -> List[np.ndarray]:
    """
    Split a self-intersecting polygon into simple polygons.

    Every lobe with area is kept (a bow tie gives two triangles), largest
    first. A simple polygon is returned unchanged as the only item.
    Pieces keep the input's winding; a polygon whose signed area is zero
    yields counterclockwise pieces.
    """
    poly = polyremoveduplicates(as_polygon(poly, min_vertices=3), tol=tol)
    if len(poly) < 3:
        return []
    if not ispolyselfintersecting(poly, tol=tol):
        return [poly.copy()]

    logger.debug("polyresolve: untangling %d-vertex self-intersecting polygon", len(poly))
    ccw = polyarea(poly, signed=True) >= 0
    return shapely_polygons(repair(to_shapely(poly)), ccw=ccw, tol=tol)


def _boxes_overlap(poly_a: np.ndarray, poly_b: np.ndarray) -> bool:
    lo_a, hi_a = boundingbox(poly_a)
    lo_b, hi_b = boundingbox(poly_b)
    return not (hi_a.x < lo_b.x or hi_b.x < lo_a.x or hi_a.y < lo_b.y or hi_b.y < lo_a.y)


def polyintersect(poly_a, poly_b, tol: Tolerances = DEFAULT_TOLERANCES) -> List[np.ndarray]:
    """
    Regions covered by both polygons.

    Parameters
    ----------
    poly_a, poly_b : array-like
        Polygon vertices of shape (M, 2) and (N, 2). Self-intersecting
        input is repaired first.

    Returns
    -------
    list of np.ndarray
        One counterclockwise polygon per separate overlap region, largest
        first; empty when the regions do not overlap or only touch.
        Holes in an overlap region are not represented.
    """
    poly_a = as_polygon(poly_a, min_vertices=3)
    poly_b = as_polygon(poly_b, min_vertices=3)
    if not _boxes_overlap(poly_a, poly_b):
        return []

    shape_a = repair(to_shapely(poly_a))
    shape_b = repair(to_shapely(poly_b))
    return shapely_polygons(shape_a.intersection(shape_b), ccw=True, tol=tol)
