# csgtrace/geometry/errors.py
"""
Error kinds raised by shape construction and intersection.

Each derives from GeometryError and from the closest built-in exception, so
callers can catch either the specific kind or the usual Python category.
"""


class GeometryError(Exception):
    """Base class for all geometry core errors."""


class InvalidShapeError(GeometryError, ValueError):
    """A shape parameter makes the shape meaningless (e.g. a zero plane normal)."""


class NonPositiveSizeError(GeometryError, ValueError):
    """A size parameter is zero or negative (sphere radius, degenerate triangle)."""


class NotImplementedFault(GeometryError, NotImplementedError):
    """Hit-testing was requested for a composition that has none."""


class InvariantViolation(GeometryError, RuntimeError):
    """An internal invariant of the solver or the CSG merger was broken."""
