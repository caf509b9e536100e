"""
Line and circle intersection.

Contains:
- Point-on-line test (segment or extended line)
- Line/line intersection with an explicit degenerate-case ladder
- Line/circle intersection
- Geometric inversion of a point through a circle
"""

import math
from typing import NamedTuple, Optional

from ..config import DEFAULT_TOLERANCES, Tolerances
from ..errors import DegenerateGeometryError
from .point import Point, between, getnearestpointonline, polar


class PointResult(NamedTuple):
    """
    Outcome of a construction that may or may not produce a point.

    Attributes
    ----------
    found : bool
        Whether the construction succeeded.
    point : Point or None
        The constructed point; ``None`` when nothing was found, except for
        ``pointinverse`` which hands back the input point.
    """
    found: bool
    point: Optional[Point]


class CircleIntersection(NamedTuple):
    """
    Outcome of a line/circle intersection.

    Attributes
    ----------
    count : int
        0, 1 (tangent) or 2.
    first : Point or None
        First intersection (the ``+sqrt`` root when there are two).
    second : Point or None
        Second intersection, only set when ``count == 2``.
    """
    count: int
    first: Optional[Point]
    second: Optional[Point]


NO_INTERSECTION = PointResult(False, None)


def ispointonline(pt: Point, pt1: Point, pt2: Point,
                  extended: bool = False,
                  atol: Optional[float] = None,
                  tol: Tolerances = DEFAULT_TOLERANCES) -> bool:
    """
    Test whether ``pt`` lies on the line from ``pt1`` to ``pt2``.

    Collinearity is decided by the cross product of ``pt - pt1`` and
    ``pt2 - pt1`` compared to zero within ``atol``. When ``extended`` is
    False the point must also lie within the segment, checked along
    whichever axis has the larger extent.

    Parameters
    ----------
    pt : Point
        Point to test.
    pt1, pt2 : Point
        Line end points.
    extended : bool
        Accept points on the infinite line through ``pt1`` and ``pt2``.
    atol : float, optional
        Collinearity tolerance. Defaults to ``tol.line_atol``.
    tol : Tolerances
        Tolerance set.

    Returns
    -------
    bool
    """
    if atol is None:
        atol = tol.line_atol
    dxc = pt.x - pt1.x
    dyc = pt.y - pt1.y
    dxl = pt2.x - pt1.x
    dyl = pt2.y - pt1.y
    cpr = dxc * dyl - dyc * dxl

    if abs(cpr) > atol:
        return False

    if extended:
        return True

    if abs(dxl) >= abs(dyl):
        if dxl > 0:
            return pt1.x <= pt.x <= pt2.x
        return pt2.x <= pt.x <= pt1.x
    if dyl > 0:
        return pt1.y <= pt.y <= pt2.y
    return pt2.y <= pt.y <= pt1.y


def intersectionlines(p0: Point, p1: Point, p2: Point, p3: Point,
                      crossingonly: bool = False,
                      tol: Tolerances = DEFAULT_TOLERANCES) -> PointResult:
    """
    Find where the line ``p0-p1`` meets the line ``p2-p3``.

    The degenerate cases are checked in order:

    1. either line collapses to a point: no intersection
    2. the two lines are the same pair of points: no intersection
    3. the lines share one end point: that end point
    4. otherwise Cramer's rule; a zero determinant means parallel or
       collinear lines and no intersection

    Collinear segments that overlap without sharing an end point therefore
    never intersect.

    Parameters
    ----------
    p0, p1 : Point
        First line.
    p2, p3 : Point
        Second line.
    crossingonly : bool
        If True the point must lie on both segments. If False it may lie
        anywhere on the extended lines.
    tol : Tolerances
        Tolerance set used for Point equality and the on-line checks.

    Returns
    -------
    PointResult
        ``(True, point)`` or ``(False, None)``.
    """
    if p0 == p1 or p2 == p3:
        return NO_INTERSECTION
    if (p0 == p2 and p1 == p3) or (p0 == p3 and p1 == p2):
        return NO_INTERSECTION
    if p0 == p2 or p0 == p3:
        return PointResult(True, p0)
    if p1 == p2 or p1 == p3:
        return PointResult(True, p1)

    a1 = p0.y - p1.y
    b1 = p1.x - p0.x
    c1 = -(p0.x * p1.y - p1.x * p0.y)

    a2 = p2.y - p3.y
    b2 = p3.x - p2.x
    c2 = -(p2.x * p3.y - p3.x * p2.y)

    d = a1 * b2 - b1 * a2
    if d == 0.0:
        return NO_INTERSECTION

    dx = c1 * b2 - b1 * c2
    dy = a1 * c2 - c1 * a2
    pt = Point(dx / d, dy / d)

    extended = not crossingonly
    if (ispointonline(pt, p0, p1, extended=extended, tol=tol)
            and ispointonline(pt, p2, p3, extended=extended, tol=tol)):
        return PointResult(True, pt)
    return NO_INTERSECTION


def intersection_line_circle(p1: Point, p2: Point, center: Point, r: float,
                             tol: Tolerances = DEFAULT_TOLERANCES) -> CircleIntersection:
    """
    Intersect the infinite line through ``p1`` and ``p2`` with a circle.

    Substitutes ``p1 + t (p2 - p1)`` into the circle equation and solves
    the quadratic. The discriminant is treated as zero (tangent) only
    when it is within ``tol.tangent_atol`` relative to the size of its
    terms, which by default covers float rounding and nothing more.
    Intersections need not lie between ``p1`` and ``p2``.

    Raises
    ------
    DegenerateGeometryError
        If ``p1`` and ``p2`` coincide exactly.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    a = dx * dx + dy * dy
    if a == 0.0:
        raise DegenerateGeometryError(
            f"intersection_line_circle(): line points {p1} and {p2} are the same")
    b = 2.0 * (dx * (p1.x - center.x) + dy * (p1.y - center.y))
    c = (center.x ** 2 + center.y ** 2 + p1.x ** 2 + p1.y ** 2
         - 2.0 * (center.x * p1.x + center.y * p1.y) - r ** 2)
    disc = b * b - 4.0 * a * c

    scale = max(b * b, abs(4.0 * a * c))
    if abs(disc) <= tol.tangent_atol * scale:
        mu = -b / (2.0 * a)
        return CircleIntersection(1, Point(p1.x + mu * dx, p1.y + mu * dy), None)
    if disc < 0.0:
        return CircleIntersection(0, None, None)

    root = math.sqrt(disc)
    mu1 = (-b + root) / (2.0 * a)
    mu2 = (-b - root) / (2.0 * a)
    return CircleIntersection(
        2,
        Point(p1.x + mu1 * dx, p1.y + mu1 * dy),
        Point(p1.x + mu2 * dx, p1.y + mu2 * dy),
    )


intersectionlinecircle = intersection_line_circle


def pointinverse(a: Point, center: Point, r: float,
                 tol: Tolerances = DEFAULT_TOLERANCES) -> PointResult:
    """
    Invert ``a`` through the circle (``center``, ``r``).

    Ruler-and-compass construction: ``C`` is where the ray from the centre
    through ``a`` meets the circle, ``B`` another point on the circle. Line
    ``BC`` bisects the angle ``a B a'``, so reflecting ``a`` across it and
    intersecting with the line through the centre gives ``a'``, with
    ``distance(center, a) * distance(center, a') == r**2``.

    Returns
    -------
    PointResult
        ``(True, a')``, or ``(False, a)`` if the construction degenerates.

    Raises
    ------
    DegenerateGeometryError
        If ``a`` coincides with ``center``.
    """
    if a == center:
        raise DegenerateGeometryError(
            f"pointinverse(): point {a} and centerpoint {center} are the same")

    hit = intersection_line_circle(center, a, center, r, tol=tol)
    if hit.count == 0:
        return PointResult(False, a)

    c = hit.first
    b = center + polar(r, 0.7)
    if b == c:
        return PointResult(False, a)

    h = getnearestpointonline(b, c, a)
    d = between(a, h, 2)
    found, inverse = intersectionlines(b, d, center, a, crossingonly=False, tol=tol)
    if found:
        return PointResult(True, inverse)
    return PointResult(False, a)
