"""
polykit - Polygon geometry for vector drawing.

This package treats an ordered sequence of 2D points as a closed shape and
provides:
- An immutable Point type with tolerant comparison
- Line/line and line/circle intersection, point inversion
- Area, perimeter, centroid, winding and point-in-polygon tests
- Move, scale, rotate and reflect transforms
- Resampling, splitting, smoothing, offsetting and spline fitting
- Self-intersection handling, polygon overlap and triangulation

Drawing is left to a renderer; ``polykit.visualization`` has one backed
by matplotlib.

Example
-------
>>> from polykit import Point, star, polyarea, polytriangulate
>>> pgon = star(Point(0, 0), 100, 5, 0.5)
>>> triangles = polytriangulate(pgon)
>>> total = sum(polyarea(t) for t in triangles)
"""

import logging

from .config import DEFAULT_TOLERANCES, Tolerances
from .errors import DegenerateGeometryError, GeometryError, PolygonShapeError
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .polygons import *  # noqa: F401,F403
from .polygons import __all__ as _polygons_all
from .shapes import box, box_centered, ngon, ngonside, rect, star

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_TOLERANCES',
    'Tolerances',
    'DegenerateGeometryError',
    'GeometryError',
    'PolygonShapeError',
    'box',
    'box_centered',
    'ngon',
    'ngonside',
    'rect',
    'star',
] + list(_core_all) + list(_polygons_all)
