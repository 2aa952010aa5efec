"""Geometry kernel: world projection, flat location codec, ring and polygon helpers.

Every function here is pure and keeps no state between calls, so it can be
used from many worker threads on separate geometries at once.
"""
from worldtile.geo.boundary import polygon_to_line_string
from worldtile.geo.combine import combine
from worldtile.geo.convexity import is_convex
from worldtile.geo.exceptions import (
    DegenerateRing,
    GeometryException,
    InvalidGeometry,
    UnsupportedGeometryType,
)
from worldtile.geo.flat_location import (
    decode_flat_location,
    decode_world_x,
    decode_world_y,
    encode_flat_location,
)
from worldtile.geo.geometry import (
    EMPTY_GEOMETRY,
    EMPTY_LINE,
    EMPTY_POINT,
    EMPTY_POLYGON,
    GeometryKind,
    combine_line_strings,
    combine_points,
    combine_polygons,
    geometry_kind,
)
from worldtile.geo.projection import (
    lat_lon_to_world,
    meters_per_pixel_at_equator,
    meters_to_pixels_at_equator,
    min_zoom_for_pixel_size,
    to_lat_lon_bounds,
    to_world_bounds,
    world_lat,
    world_lon,
    world_to_lat_lon,
    world_x,
    world_y,
)
from worldtile.geo.topology import fix_polygon, snap_and_fix_polygon, snap_and_renode

__all__ = [
    "DegenerateRing",
    "EMPTY_GEOMETRY",
    "EMPTY_LINE",
    "EMPTY_POINT",
    "EMPTY_POLYGON",
    "GeometryException",
    "GeometryKind",
    "InvalidGeometry",
    "UnsupportedGeometryType",
    "combine",
    "combine_line_strings",
    "combine_points",
    "combine_polygons",
    "decode_flat_location",
    "decode_world_x",
    "decode_world_y",
    "encode_flat_location",
    "fix_polygon",
    "geometry_kind",
    "is_convex",
    "lat_lon_to_world",
    "meters_per_pixel_at_equator",
    "meters_to_pixels_at_equator",
    "min_zoom_for_pixel_size",
    "polygon_to_line_string",
    "snap_and_fix_polygon",
    "snap_and_renode",
    "to_lat_lon_bounds",
    "to_world_bounds",
    "world_lat",
    "world_lon",
    "world_to_lat_lon",
    "world_x",
    "world_y",
]
