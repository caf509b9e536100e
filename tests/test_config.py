"""
Tests for tolerances, drawing actions, errors and logging setup.
"""

import logging

import pytest

from polykit import (
    DEFAULT_TOLERANCES,
    Action,
    DegenerateGeometryError,
    GeometryError,
    Point,
    PolygonShapeError,
    Tolerances,
    isapprox,
    polysmooth,
)
from polykit.log import setup_logging


class TestTolerances:
    """Tests for the Tolerances container."""

    def test_defaults(self):
        assert DEFAULT_TOLERANCES.point_atol == 1e-8
        assert DEFAULT_TOLERANCES.line_atol == 1e-4
        assert DEFAULT_TOLERANCES.point_rtol == pytest.approx(1.4901161193847656e-08)

    def test_replace(self):
        loose = DEFAULT_TOLERANCES.replace(point_atol=0.1)
        assert loose.point_atol == 0.1
        assert loose.line_atol == DEFAULT_TOLERANCES.line_atol
        assert DEFAULT_TOLERANCES.point_atol == 1e-8

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Tolerances().point_atol = 1.0

    def test_passed_through(self):
        loose = Tolerances(point_atol=0.1)
        assert isapprox(Point(0, 0), Point(0.05, 0), tol=loose)
        assert not isapprox(Point(0, 0), Point(0.05, 0))


class TestAction:
    """Tests for Action.coerce()."""

    @pytest.mark.parametrize("value, expected", [
        (None, Action.NONE),
        ("nothing", Action.NONE),
        (":stroke", Action.STROKE),
        ("FillPreserve", Action.FILLPRESERVE),
        (Action.CLIP, Action.CLIP),
        ("path", Action.PATH),
    ])
    def test_coerce(self, value, expected):
        assert Action.coerce(value) is expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown drawing action"):
            Action.coerce("sparkle")


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(DegenerateGeometryError, GeometryError)
        assert issubclass(PolygonShapeError, GeometryError)
        assert issubclass(GeometryError, ValueError)


class TestLogging:
    """Tests for logging setup and debug messages."""

    def test_setup_is_idempotent(self):
        logger = logging.getLogger("polykit")
        setup_logging()
        count = len(logger.handlers)
        setup_logging()
        assert len(logger.handlers) == count

    def test_clamp_is_logged(self, caplog):
        square = [(0, 0), (2, 0), (2, 2), (0, 2)]
        with caplog.at_level(logging.DEBUG, logger="polykit"):
            polysmooth(square, 5.0)
        assert any("clamped" in record.getMessage() for record in caplog.records)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
