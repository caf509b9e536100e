"""
Point Module

Immutable 2D point value type and the scalar geometry built on it:
- Arithmetic with points, scalars and (x, y) tuples
- Approximate equality and lexicographic ordering
- Distances, projections, perpendiculars, polar conversion
- Random points inside a rectangle
"""

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from ..config import DEFAULT_TOLERANCES, Tolerances
from ..errors import DegenerateGeometryError


Number = Union[int, float]


@dataclass(frozen=True, eq=False)
class Point:
    """
    Immutable point with two float coordinates.

    Equality uses an absolute tolerance of ``DEFAULT_TOLERANCES.point_atol``
    on each coordinate, so Points are deliberately not hashable.
    Ordering is lexicographic on (x, y), with the x tie decided by the
    looser relative tolerance.

    Attributes
    ----------
    x : float
        Horizontal coordinate.
    y : float
        Vertical coordinate.
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_tuple(cls, xy) -> "Point":
        if isinstance(xy, Point):
            return xy
        x, y = xy
        return cls(x, y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    # sequence protocol, so a Point unpacks as x, y
    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, i) -> float:
        return (self.x, self.y)[i]

    # arithmetic
    def _split(self, other) -> Optional[Tuple[float, float]]:
        if isinstance(other, Point):
            return other.x, other.y
        if isinstance(other, (int, float, np.integer, np.floating)):
            return other, other
        if isinstance(other, (tuple, list)) and len(other) == 2:
            return other[0], other[1]
        return None

    def __add__(self, other) -> "Point":
        o = self._split(other)
        if o is None:
            return NotImplemented
        return Point(self.x + o[0], self.y + o[1])

    __radd__ = __add__

    def __sub__(self, other) -> "Point":
        o = self._split(other)
        if o is None:
            return NotImplemented
        return Point(self.x - o[0], self.y - o[1])

    def __rsub__(self, other) -> "Point":
        o = self._split(other)
        if o is None:
            return NotImplemented
        return Point(o[0] - self.x, o[1] - self.y)

    def __mul__(self, other) -> "Point":
        o = self._split(other)
        if o is None:
            return NotImplemented
        return Point(self.x * o[0], self.y * o[1])

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Point":
        o = self._split(other)
        if o is None:
            return NotImplemented
        return Point(self.x / o[0], self.y / o[1])

    def __pow__(self, e: Number) -> "Point":
        return Point(self.x ** e, self.y ** e)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    # comparisons
    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return isapprox(self, other)

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        rtol = DEFAULT_TOLERANCES.point_rtol
        return self.x < other.x or (
            math.isclose(self.x, other.x, rel_tol=rtol) and self.y < other.y
        )

    def __gt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return other < self

    def __le__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not other < self

    def __ge__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not self < other

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


ORIGIN = Point(0.0, 0.0)
O = ORIGIN


def isapprox(p1: Point, p2: Point, atol: Optional[float] = None,
             tol: Tolerances = DEFAULT_TOLERANCES) -> bool:
    """True when both coordinates agree within ``atol`` (default ``tol.point_atol``)."""
    if atol is None:
        atol = tol.point_atol
    return abs(p1.x - p2.x) <= atol and abs(p1.y - p2.y) <= atol


def cmp(p1: Point, p2: Point) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if p1 < p2:
        return -1
    if p2 < p1:
        return 1
    return 0


def dotproduct(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def crossproduct(p1: Point, p2: Point) -> float:
    """
    Perp-dot product of two vectors: ``p1.x * p2.y - p1.y * p2.x`` with the
    sign convention ``dotproduct(p1, perpendicular(p2))``.
    """
    return dotproduct(p1, perpendicular(p2))


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def pointlinedistance(p: Point, a: Point, b: Point) -> float:
    """
    Perpendicular distance from ``p`` to the infinite line through ``a``
    and ``b``, computed as triangle area over base length.
    """
    area = abs(0.5 * (a.x * b.y + b.x * p.y + p.x * a.y
                      - b.x * a.y - p.x * b.y - a.x * p.y))
    bottom = math.hypot(a.x - b.x, a.y - b.y)
    if bottom == 0.0:
        raise DegenerateGeometryError(
            f"pointlinedistance(): line points {a} and {b} are the same")
    return 2.0 * area / bottom


def getnearestpointonline(pt1: Point, pt2: Point, startpt: Point) -> Point:
    """
    Project ``startpt`` onto the infinite line through ``pt1`` and ``pt2``.

    Raises
    ------
    DegenerateGeometryError
        If ``pt1`` and ``pt2`` coincide exactly (no direction).
    """
    dx = pt2.x - pt1.x
    dy = pt2.y - pt1.y
    mag = math.hypot(dx, dy)
    if mag == 0.0:
        raise DegenerateGeometryError(
            f"getnearestpointonline(): line points {pt1} and {pt2} are the same")
    dx /= mag
    dy /= mag
    lam = dx * (startpt.x - pt1.x) + dy * (startpt.y - pt1.y)
    return Point(dx * lam + pt1.x, dy * lam + pt1.y)


def midpoint(p1, p2: Optional[Point] = None) -> Point:
    """
    Midpoint of two points, or of the first two items of a sequence when
    called with one argument.
    """
    if p2 is None:
        p1, p2 = p1[0], p1[1]
    p1 = Point.from_tuple(p1)
    p2 = Point.from_tuple(p2)
    return Point((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)


def between(p1, p2, x: Optional[Number] = None) -> Point:
    """
    Point at parameter ``x`` on the line from ``p1`` to ``p2``.

    ``between(p1, p2, 0.5)`` is the midpoint. Values outside [0, 1]
    extrapolate. Also callable as ``between((p1, p2), x)``.
    """
    if x is None:
        x = p2
        p1, p2 = p1
    return p1 + x * (p2 - p1)


def perpendicular(p1: Point, p2: Optional[Point] = None, k: Number = 1.0) -> Point:
    """
    Perpendicular helpers.

    ``perpendicular(p)`` returns ``Point(p.y, -p.x)``.

    ``perpendicular(p1, p2, k)`` returns the point ``k`` units from ``p1``
    along the normal (-dy, dx) of the segment ``p1 -> p2``.

    Raises
    ------
    DegenerateGeometryError
        If ``p1`` and ``p2`` are the same point.
    """
    if p2 is None:
        return Point(p1.y, -p1.x)
    px = p2.x - p1.x
    py = p2.y - p1.y
    length = math.hypot(px, py)
    if length > 0.0:
        return Point(p1.x + k * (-py / length), p1.y + k * (px / length))
    raise DegenerateGeometryError(
        f"perpendicular(): points {p1} and {p2} are the same")


def slope(a: Point, b: Point) -> float:
    """Angle of the line from ``a`` to ``b``, in [0, 2pi)."""
    angle = math.atan2(b.y - a.y, b.x - a.x) % (2 * math.pi)
    # -0.0 % 2pi and tiny negatives can round up to exactly 2pi
    return 0.0 if angle >= 2 * math.pi else angle


def polar(r: Number, theta: Number) -> Point:
    """Convert polar (radius, angle) to a Cartesian point."""
    return Point(r * math.cos(theta), r * math.sin(theta))


def _randomordinate(low: float, high: float, rng: np.random.Generator) -> float:
    return low + rng.random() * abs(high - low)


def _corners(args: Sequence) -> Tuple[float, float, float, float]:
    if len(args) == 2:
        lowpt, highpt = args
        return lowpt[0], lowpt[1], highpt[0], highpt[1]
    if len(args) == 4:
        return tuple(args)
    raise TypeError(f"Expected two corner points or four ordinates, got {len(args)} values")


def randompoint(*args, rng: Optional[np.random.Generator] = None) -> Point:
    """
    Random point inside an axis-aligned rectangle.

    Call as ``randompoint(lowpt, highpt)`` or
    ``randompoint(lowx, lowy, highx, highy)``.
    """
    if rng is None:
        rng = np.random.default_rng()
    lowx, lowy, highx, highy = _corners(args)
    return Point(_randomordinate(lowx, highx, rng), _randomordinate(lowy, highy, rng))


def randompointarray(*args, rng: Optional[np.random.Generator] = None) -> list:
    """
    ``n`` random points inside a rectangle.

    Call as ``randompointarray(lowpt, highpt, n)`` or
    ``randompointarray(lowx, lowy, highx, highy, n)``.
    """
    if rng is None:
        rng = np.random.default_rng()
    *corners, n = args
    lowx, lowy, highx, highy = _corners(corners)
    return [
        Point(_randomordinate(lowx, highx, rng), _randomordinate(lowy, highy, rng))
        for _ in range(int(n))
    ]
