"""
geometry.py

Geometry model for the kernel. Geometries are shapely 2.x objects, which are
immutable and safe to share read-only between threads. This module adds:

- `GeometryKind` / `geometry_kind(geom)`: the closed set of variants every
  component dispatches on.
- factory helpers taking flat ``x0, y0, x1, y1, ...`` argument lists.
- empty-geometry constants and the `combine_*` helpers that turn lists of
  homogeneous parts into one geometry.
- `transform_coords(geom, func)`: structure-preserving coordinate mapping.

"""
from enum import Enum
from typing import Callable, Iterable, List, Sequence, Tuple

import numpy as np
import shapely
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

from worldtile.geo.exceptions import DegenerateRing, UnsupportedGeometryType


class GeometryKind(Enum):
    POINT = 'Point'
    LINE_STRING = 'LineString'
    LINEAR_RING = 'LinearRing'
    POLYGON = 'Polygon'
    MULTI_POINT = 'MultiPoint'
    MULTI_LINE_STRING = 'MultiLineString'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'


_KINDS_BY_TYPE = {kind.value: kind for kind in GeometryKind}

EMPTY_GEOMETRY = GeometryCollection()
EMPTY_POINT = Point()
EMPTY_LINE = LineString()
EMPTY_POLYGON = Polygon()


def geometry_kind(geom) -> GeometryKind:
    """Return the `GeometryKind` of ``geom``.

    Raises `UnsupportedGeometryType` for anything that is not a shapely
    geometry of one of the known variants.
    """
    if not isinstance(geom, BaseGeometry):
        raise UnsupportedGeometryType('unsupported_type', f'not a geometry: {type(geom).__name__}')
    kind = _KINDS_BY_TYPE.get(geom.geom_type)
    if kind is None:
        raise UnsupportedGeometryType('unsupported_type', f'unrecognized geometry type: {geom.geom_type}')
    return kind


def _pairs(xy: Sequence[float]) -> List[Tuple[float, float]]:
    if len(xy) % 2 != 0:
        raise ValueError(f'expected an even number of ordinates, got {len(xy)}')
    return [(float(xy[i]), float(xy[i + 1])) for i in range(0, len(xy), 2)]


def new_point(x: float, y: float) -> Point:
    return Point(float(x), float(y))


def new_line_string(*xy: float) -> LineString:
    """Build a LineString from ``x0, y0, x1, y1, ...``."""
    return LineString(_pairs(xy))


def new_linear_ring(*xy: float) -> LinearRing:
    """Build a LinearRing from ``x0, y0, x1, y1, ...``.

    The coordinates are used as given (duplicates kept); shapely closes the
    ring if the last coordinate differs from the first. Raises
    `DegenerateRing` when fewer than three distinct vertices remain.
    """
    coords = _pairs(xy)
    if len(set(coords)) < 3:
        raise DegenerateRing('degenerate_ring', f'ring needs 3 distinct vertices, got {len(set(coords))}')
    return LinearRing(coords)


def rectangle_coords(min_xy: float, max_xy: float) -> List[Tuple[float, float]]:
    """Counter-clockwise closed coordinate list of a square from ``min_xy`` to ``max_xy``."""
    return [
        (min_xy, min_xy),
        (max_xy, min_xy),
        (max_xy, max_xy),
        (min_xy, max_xy),
        (min_xy, min_xy),
    ]


def rectangle(min_xy: float, max_xy: float) -> Polygon:
    return Polygon(rectangle_coords(min_xy, max_xy))


def new_polygon(exterior, holes: Iterable = ()) -> Polygon:
    """Build a Polygon from an exterior ring/coordinate list and optional holes."""
    exterior_coords = exterior.coords if isinstance(exterior, BaseGeometry) else exterior
    hole_coords = [h.coords if isinstance(h, BaseGeometry) else h for h in holes]
    return Polygon(exterior_coords, hole_coords)


def new_multi_polygon(*polygons: Polygon) -> MultiPolygon:
    return MultiPolygon(list(polygons))


def new_multi_line_string(*lines: LineString) -> MultiLineString:
    return MultiLineString(list(lines))


def combine_points(points: Sequence[Point]):
    """Single point when one is given, otherwise a MultiPoint."""
    if len(points) == 1:
        return points[0]
    return MultiPoint(list(points))


def combine_line_strings(lines: Sequence[LineString]):
    if len(lines) == 1:
        return lines[0]
    return MultiLineString(list(lines))


def combine_polygons(polygons: Sequence[Polygon]):
    if len(polygons) == 1:
        return polygons[0]
    return MultiPolygon(list(polygons))


def transform_coords(geom, func: Callable[[np.ndarray], np.ndarray]):
    """Apply ``func`` to the (N, 2) coordinate array of ``geom``.

    Structure (ring order, part order, holes) is preserved; only coordinate
    values change.
    """
    return shapely.transform(geom, func)
