"""Exceptions raised by the triangulation core."""


class EarClipError(Exception):
    """Base class for all earclip errors."""


class PolygonTooSmallError(EarClipError, ValueError):
    """Fewer than 3 vertices remain after dropping the closing duplicate."""


class PolygonFormatError(EarClipError, ValueError):
    """A polygon file could not be parsed into ``x,y`` records."""


class ConsistencyError(EarClipError, RuntimeError):
    """Internal defect: the clipping state disagrees with the polygon.

    Raised when the triangulated area does not reconcile with the integrated
    polygon area, or when a non-degenerate ear tip turns out not to be convex.
    """
