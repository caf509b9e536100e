"""
Polygon algorithms.
"""

from .metrics import (
    Orientation,
    as_polygon,
    boundingbox,
    contains,
    ensure_ccw,
    isinside,
    ispolyclockwise,
    iter_edges,
    polyarea,
    polycentroid,
    polydistancematrix,
    polydistances,
    polyedgelengths,
    polyorientation,
    polyperimeter,
    polyremoveduplicates,
    polystats,
    to_points,
)
from .transform import polymove, polyreflect, polyrotate, polyscale
from .reshape import (
    polyfit,
    polyportion,
    polyremainder,
    polyremovecollinearpoints,
    polysample,
    polysortbyangle,
    polysortbydistance,
    polysortbynearest,
    polysplit,
)
from .smoothing import offsetpoly, polysmooth
from .boolean import (
    ispolyselfintersecting,
    polyintersect,
    polyintersections,
    polyresolve,
    polyselfintersections,
)
from .triangulate import polytriangulate
from .conversion import shapely_polygons, shapely_to_numpy, to_shapely

__all__ = [
    # Metrics
    'Orientation',
    'as_polygon',
    'boundingbox',
    'contains',
    'ensure_ccw',
    'isinside',
    'ispolyclockwise',
    'iter_edges',
    'polyarea',
    'polycentroid',
    'polydistancematrix',
    'polydistances',
    'polyedgelengths',
    'polyorientation',
    'polyperimeter',
    'polyremoveduplicates',
    'polystats',
    'to_points',
    # Transform
    'polymove',
    'polyreflect',
    'polyrotate',
    'polyscale',
    # Reshape
    'polyfit',
    'polyportion',
    'polyremainder',
    'polyremovecollinearpoints',
    'polysample',
    'polysortbyangle',
    'polysortbydistance',
    'polysortbynearest',
    'polysplit',
    'offsetpoly',
    'polysmooth',
    # Boolean/topology
    'ispolyselfintersecting',
    'polyintersect',
    'polyintersections',
    'polyresolve',
    'polyselfintersections',
    'polytriangulate',
    # Shapely conversions
    'shapely_polygons',
    'shapely_to_numpy',
    'to_shapely',
]
