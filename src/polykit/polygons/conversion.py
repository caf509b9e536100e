"""
Shapely/numpy conversions and polygon repair.

Shapely is used for region-level work (overlaps, pieces of a cut,
untangling self-intersections); everything else stays in numpy.
"""

import logging
from typing import List

import numpy as np
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.geometry.polygon import orient
from shapely.validation import make_valid

from ..config import DEFAULT_TOLERANCES, Tolerances
from .metrics import as_polygon

logger = logging.getLogger(__name__)


def to_shapely(poly) -> Polygon:
    """Build a Shapely polygon from (M, 2) vertices."""
    return Polygon(as_polygon(poly, min_vertices=3))


def shapely_to_numpy(geom) -> np.ndarray:
    """
    Convert a Shapely polygon to numpy array of vertices.

    Parameters
    ----------
    geom : Polygon or MultiPolygon
        Shapely geometry object. For a MultiPolygon the largest part is used.

    Returns
    -------
    np.ndarray
        Exterior vertices of shape (M, 2), without the closing duplicate.
    """
    if isinstance(geom, MultiPolygon):
        geom = max(geom.geoms, key=lambda g: g.area)

    coords = np.array(geom.exterior.coords)
    # Remove the closing duplicate vertex that Shapely adds
    if len(coords) > 1 and np.allclose(coords[0], coords[-1]):
        coords = coords[:-1]
    return coords


def shapely_polygons(geom, ccw: bool = True,
                     tol: Tolerances = DEFAULT_TOLERANCES) -> List[np.ndarray]:
    """
    Every polygonal part of a Shapely geometry as numpy vertices.

    Points, lines and slivers with no area are dropped. Parts are returned
    largest first, each wound counterclockwise when ``ccw`` is True and
    clockwise otherwise. Holes are not represented.
    """
    if geom is None or geom.is_empty:
        return []

    parts = [Polygon(p.exterior) for p in _flatten(geom)]
    parts = [p for p in parts if p.area > tol.area_eps]
    parts.sort(key=lambda g: g.area, reverse=True)
    sign = 1.0 if ccw else -1.0
    return [shapely_to_numpy(orient(p, sign=sign)) for p in parts]


def _flatten(geom) -> List[Polygon]:
    if isinstance(geom, Polygon):
        return [geom]
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        out = []
        for g in geom.geoms:
            out.extend(_flatten(g))
        return out
    return []


def repair(geom):
    """
    Make a possibly invalid Shapely polygon valid.

    Uses ``make_valid``, which keeps every lobe of a bow tie, and falls
    back to ``buffer(0)`` when that yields nothing with area.
    """
    if geom.is_valid:
        return geom
    fixed = make_valid(geom)
    if fixed.is_empty or fixed.area == 0.0:
        logger.debug("make_valid produced no area, falling back to buffer(0)")
        fixed = geom.buffer(0)
    return fixed
