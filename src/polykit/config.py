"""
Numerical tolerances shared by the whole geometry engine.

Every comparison that is not exact goes through one of these values, so
changing behaviour means building a new ``Tolerances`` and passing it
explicitly rather than editing defaults scattered across modules.
"""

from dataclasses import dataclass, replace as _replace

import numpy as np


@dataclass(frozen=True)
class Tolerances:
    """
    Container for the absolute and relative tolerances used by polykit.

    Attributes
    ----------
    point_atol : float
        Absolute tolerance for Point equality on each coordinate.
    point_rtol : float
        Relative tolerance for the looser "approximately equal" test used
        when ordering Points whose x coordinates tie.
    line_atol : float
        Tolerance on the cross product in ``ispointonline``.
    collinear_atol : float
        Default tolerance for ``polyremovecollinearpoints``.
    area_eps : float
        Areas below this are treated as zero (degenerate ears, centroids).
    tangent_atol : float
        Discriminant magnitude, relative to the size of its terms, below
        which a line touches a circle. A few ulps, so only rounding noise
        is absorbed and near-tangent secants keep both points.
    """
    point_atol: float = 1e-8
    point_rtol: float = float(np.sqrt(np.finfo(np.float64).eps))
    line_atol: float = 1e-4
    collinear_atol: float = 1e-4
    area_eps: float = 1e-10
    tangent_atol: float = float(8 * np.finfo(np.float64).eps)

    def replace(self, **changes) -> "Tolerances":
        """Return a copy with the given fields changed."""
        return _replace(self, **changes)


DEFAULT_TOLERANCES = Tolerances()
