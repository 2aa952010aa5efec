"""Polygon boundary extraction.

`polygon_to_line_string` turns the rings of polygonal geometry into line
strings so they can be rendered or measured as lines. Ring coordinate order
is kept exactly; nothing is reversed, deduplicated or re-noded.
"""
from typing import List

from shapely.geometry import LineString

from worldtile.geo.exceptions import InvalidGeometry, UnsupportedGeometryType
from worldtile.geo.geometry import GeometryKind, combine_line_strings, geometry_kind


def _ring_lines(geom, out: List[LineString]) -> None:
    kind = geometry_kind(geom)
    if kind is GeometryKind.LINEAR_RING:
        if not geom.is_empty:
            out.append(LineString(geom.coords))
    elif kind is GeometryKind.POLYGON:
        if geom.is_empty:
            return
        _ring_lines(geom.exterior, out)
        for hole in geom.interiors:
            _ring_lines(hole, out)
    elif kind is GeometryKind.MULTI_POLYGON:
        for polygon in geom.geoms:
            _ring_lines(polygon, out)
    else:
        raise UnsupportedGeometryType('polygon_to_linestring_bad_type',
                                      f'cannot extract rings from {kind.value}')


def polygon_to_line_string(geom):
    """Return the rings of a Polygon, LinearRing or MultiPolygon as lines.

    A single ring yields a LineString; several rings yield a MultiLineString
    ordered polygon by polygon, exterior first then holes.
    """
    lines: List[LineString] = []
    _ring_lines(geom, lines)
    if not lines:
        raise InvalidGeometry('polygon_to_linestring_empty', 'no rings to convert')
    return combine_line_strings(lines)
