"""
Typed exceptions raised by polykit.

All of them derive from ``ValueError`` so callers that already guard
against bad numeric input keep working.
"""


class GeometryError(ValueError):
    """Base class for geometry failures."""


class DegenerateGeometryError(GeometryError):
    """A construction needs a direction or distance that collapsed to zero."""


class PolygonShapeError(GeometryError):
    """Input is not an (M, 2) polygon, or has too few vertices."""
