"""
Corner rounding and parallel offsetting.
"""

import logging
import math
from typing import List, Optional, Union

import numpy as np

from ..config import DEFAULT_TOLERANCES, Tolerances
from ..core.actions import Action, Renderer
from ..core.intersection import intersectionlines
from ..core.point import Point
from .metrics import Orientation, as_polygon, polyorientation, polyremoveduplicates

logger = logging.getLogger(__name__)


def _corner_arc(prev: np.ndarray, corner: np.ndarray, nxt: np.ndarray,
                radius: float, segments: int) -> np.ndarray:
    """
    Points of the arc rounding ``corner``, tangent to both adjacent edges.

    The tangent points sit ``radius / tan(half angle)`` from the corner;
    when that does not fit in half of the shorter edge the radius is
    reduced to fit.
    """
    v1 = prev - corner
    v2 = nxt - corner
    l1 = float(np.hypot(*v1))
    l2 = float(np.hypot(*v2))
    u1 = v1 / l1
    u2 = v2 / l2

    cos_angle = float(np.clip(np.dot(u1, u2), -1.0, 1.0))
    angle = math.acos(cos_angle)
    if angle < 1e-9 or math.pi - angle < 1e-9:
        # straight through or doubling back: nothing to round
        return corner[np.newaxis, :]

    half = angle / 2.0
    offset = radius / math.tan(half)
    limit = min(l1, l2) / 2.0
    if offset > limit:
        clamped = limit * math.tan(half)
        logger.debug("polysmooth: radius %.6g clamped to %.6g at corner %s",
                     radius, clamped, corner)
        radius = clamped
        offset = limit

    start = corner + u1 * offset
    end = corner + u2 * offset
    bisector = u1 + u2
    bisector /= np.hypot(*bisector)
    center = corner + bisector * (radius / math.sin(half))

    a0 = math.atan2(start[1] - center[1], start[0] - center[0])
    a1 = math.atan2(end[1] - center[1], end[0] - center[0])
    sweep = (a1 - a0 + math.pi) % (2 * math.pi) - math.pi
    angles = a0 + sweep * np.linspace(0.0, 1.0, segments + 1)
    return np.column_stack([center[0] + radius * np.cos(angles),
                            center[1] + radius * np.sin(angles)])


def polysmooth(poly, radius: float,
               action: Union[Action, str, None] = Action.NONE,
               renderer: Optional[Renderer] = None,
               segments: int = 8,
               tol: Tolerances = DEFAULT_TOLERANCES) -> np.ndarray:
    """
    Round every corner of a closed polygon with a circular arc.

    For each vertex the arc centre lies on the corner's bisector, and the
    arc meets both adjacent edges tangentially; consecutive arcs are joined
    by the straight remains of the edges. At each corner the radius is
    reduced, if needed, until both tangent points lie within half the
    shorter adjacent edge, so neighbouring arcs never overlap. The clamp
    applies to that corner only and a short edge never aborts the call.
    Repeated and straight-through vertices are passed through unchanged.

    Parameters
    ----------
    poly : array-like
        Polygon vertices of shape (M, 2).
    radius : float
        Requested corner radius.
    action : Action or str
        Drawing action handed to ``renderer`` with the outline.
    renderer : Renderer, optional
        Backend that draws the result. Nothing is drawn when omitted.
    segments : int
        Straight pieces used to approximate each arc.

    Returns
    -------
    np.ndarray
        The rounded outline, shape (K, 2).
    """
    action = Action.coerce(action)
    poly = polyremoveduplicates(as_polygon(poly, min_vertices=3), tol=tol)
    n = len(poly)

    if n < 3 or radius <= 0:
        outline = poly.copy()
    else:
        arcs: List[np.ndarray] = [
            _corner_arc(poly[i - 1], poly[i], poly[(i + 1) % n], radius, segments)
            for i in range(n)
        ]
        outline = np.vstack(arcs)

    if renderer is not None:
        renderer.draw(outline, action, close=True)
    return outline


def offsetpoly(poly, d: float, tol: Tolerances = DEFAULT_TOLERANCES) -> np.ndarray:
    """
    Parallel polygon at distance ``d`` with mitred corners.

    Every edge is shifted ``d`` along its outward normal and each new
    vertex is where two consecutive shifted edges meet. Positive ``d``
    expands the polygon and negative ``d`` shrinks it, whatever the
    winding. Where consecutive edges are parallel the shifted vertex is
    used as is. Large negative distances can make the result self-intersect;
    that is not repaired here.

    Returns
    -------
    np.ndarray
        Offset vertices, one per distinct input vertex, in input order.
    """
    poly = polyremoveduplicates(as_polygon(poly, min_vertices=3), tol=tol)
    n = len(poly)
    if n < 3:
        return poly.copy()

    sign = 1.0 if polyorientation(poly) is Orientation.COUNTERCLOCKWISE else -1.0
    edges = np.roll(poly, -1, axis=0) - poly
    lengths = np.hypot(edges[:, 0], edges[:, 1])
    normals = sign * np.column_stack([edges[:, 1], -edges[:, 0]]) / lengths[:, np.newaxis]

    starts = poly + d * normals
    ends = np.roll(poly, -1, axis=0) + d * normals

    result = np.empty_like(poly)
    for i in range(n):
        h = i - 1
        # Local to the corner, since the line tests use absolute tolerances.
        origin = poly[i]
        found, pt = intersectionlines(
            Point(*(starts[h] - origin)), Point(*(ends[h] - origin)),
            Point(*(starts[i] - origin)), Point(*(ends[i] - origin)),
            crossingonly=False, tol=tol,
        )
        if found:
            result[i] = (pt.x + origin[0], pt.y + origin[1])
        else:
            result[i] = poly[i] + d * normals[i]
    return result
