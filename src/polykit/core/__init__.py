"""
Core point and line geometry.
"""

from .actions import Action, Renderer
from .point import (
    O,
    ORIGIN,
    Point,
    between,
    cmp,
    crossproduct,
    distance,
    dotproduct,
    getnearestpointonline,
    isapprox,
    midpoint,
    perpendicular,
    pointlinedistance,
    polar,
    randompoint,
    randompointarray,
    slope,
)
from .intersection import (
    NO_INTERSECTION,
    CircleIntersection,
    PointResult,
    intersection_line_circle,
    intersectionlinecircle,
    intersectionlines,
    ispointonline,
    pointinverse,
)

__all__ = [
    'Action',
    'Renderer',
    'O',
    'ORIGIN',
    'Point',
    'between',
    'cmp',
    'crossproduct',
    'distance',
    'dotproduct',
    'getnearestpointonline',
    'isapprox',
    'midpoint',
    'perpendicular',
    'pointlinedistance',
    'polar',
    'randompoint',
    'randompointarray',
    'slope',
    'NO_INTERSECTION',
    'CircleIntersection',
    'PointResult',
    'intersection_line_circle',
    'intersectionlinecircle',
    'intersectionlines',
    'ispointonline',
    'pointinverse',
]
