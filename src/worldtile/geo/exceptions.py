"""Error types raised by the geometry kernel.

Every error carries a short ``stat`` key in addition to the human readable
message so the pipeline can count failures per kind without parsing text.
"""


class GeometryException(Exception):
    """Base class for geometry failures the caller is expected to handle."""

    def __init__(self, stat: str, message: str):
        super().__init__(message)
        self.stat = stat
        self.message = message

    def __str__(self):
        return f'{self.stat}: {self.message}'


class UnsupportedGeometryType(GeometryException):
    """Operation received a geometry kind it does not handle."""


class InvalidGeometry(GeometryException):
    """Input is empty, not areal, or could not be assembled into valid polygons."""


class DegenerateRing(GeometryException):
    """Ring has fewer than three distinct vertices."""
