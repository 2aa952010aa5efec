"""
projection.py

Spherical (web) Mercator world projection. World coordinates put the whole
map in roughly [0, 1] x [0, 1] with y growing southwards, which makes tile
math at any zoom a multiplication by ``2**zoom``.

Nothing here clamps: longitudes beyond +-180 and latitudes near the poles
extrapolate, and every function is total over finite input. Functions accept
scalars or numpy arrays and return the same shape.

Public functions:
- `world_x(lon)`, `world_y(lat)` and their inverses `world_lon(x)`, `world_lat(y)`
- `lat_lon_to_world(geom)`, `world_to_lat_lon(geom)`
- `to_world_bounds(bounds)`, `to_lat_lon_bounds(bounds)`
- `meters_per_pixel_at_equator(zoom)`, `meters_to_pixels_at_equator(zoom, meters)`
- `min_zoom_for_pixel_size(world_size, min_pixel_size)`

"""
import math
from typing import Tuple

import numpy as np

from worldtile.geo.config import EQUATORIAL_CIRCUMFERENCE_METERS, MAX_ZOOM, TILE_PIXEL_SIZE
from worldtile.geo.geometry import transform_coords

Bounds = Tuple[float, float, float, float]


def world_x(lon):
    """Linear map of longitude to world x: -180 -> 0, 180 -> 1."""
    return (np.asarray(lon, dtype=float) + 180.0) / 360.0


def world_y(lat):
    """Mercator forward transform of latitude to world y: 0 -> 0.5, north is smaller.

    Uses ``asinh(tan(lat))`` rather than ``log(tan(pi/4 + lat/2))`` so the
    poles and beyond stay finite.
    """
    lat_rad = np.radians(np.asarray(lat, dtype=float))
    return 0.5 - np.arcsinh(np.tan(lat_rad)) / (2.0 * math.pi)


def world_lon(x):
    return np.asarray(x, dtype=float) * 360.0 - 180.0


def world_lat(y):
    """Inverse of `world_y`; exact round trip for latitudes strictly inside +-90."""
    y = np.asarray(y, dtype=float)
    with np.errstate(over='ignore'):
        return np.degrees(np.arctan(np.sinh(math.pi * (1.0 - 2.0 * y))))


def _to_world(coords: np.ndarray) -> np.ndarray:
    return np.column_stack((world_x(coords[:, 0]), world_y(coords[:, 1])))


def _to_lat_lon(coords: np.ndarray) -> np.ndarray:
    return np.column_stack((world_lon(coords[:, 0]), world_lat(coords[:, 1])))


def lat_lon_to_world(geom):
    """Project every (lon, lat) coordinate of ``geom`` to world coordinates."""
    return transform_coords(geom, _to_world)


def world_to_lat_lon(geom):
    """Inverse of `lat_lon_to_world`."""
    return transform_coords(geom, _to_lat_lon)


def to_world_bounds(bounds: Bounds) -> Bounds:
    """Convert ``(min_lon, min_lat, max_lon, max_lat)`` to world ``(min_x, min_y, max_x, max_y)``.

    World y grows southwards, so the northern latitude becomes the minimum y.
    """
    min_lon, min_lat, max_lon, max_lat = bounds
    return (
        float(world_x(min_lon)),
        float(world_y(max_lat)),
        float(world_x(max_lon)),
        float(world_y(min_lat)),
    )


def to_lat_lon_bounds(bounds: Bounds) -> Bounds:
    min_x, min_y, max_x, max_y = bounds
    return (
        float(world_lon(min_x)),
        float(world_lat(max_y)),
        float(world_lon(max_x)),
        float(world_lat(min_y)),
    )


def meters_per_pixel_at_equator(zoom, tile_size=TILE_PIXEL_SIZE,
                                circumference=EQUATORIAL_CIRCUMFERENCE_METERS):
    """Ground resolution at the equator: ``circumference / (tile_size * 2**zoom)``."""
    return circumference / (tile_size * 2.0 ** zoom)


def meters_to_pixels_at_equator(zoom, meters, tile_size=TILE_PIXEL_SIZE,
                                circumference=EQUATORIAL_CIRCUMFERENCE_METERS):
    return meters / meters_per_pixel_at_equator(zoom, tile_size, circumference)


def min_zoom_for_pixel_size(world_size: float, min_pixel_size: float,
                            max_zoom: int = MAX_ZOOM, tile_size=TILE_PIXEL_SIZE) -> int:
    """Lowest zoom at which an extent of ``world_size`` covers ``min_pixel_size`` pixels.

    Clamped to ``[0, max_zoom]``; a zero-size extent never gets big enough
    and returns ``max_zoom``.
    """
    world_pixels = world_size * tile_size
    if min_pixel_size <= 0:
        return 0
    if world_pixels <= 0:
        return max_zoom
    zoom = math.ceil(math.log2(min_pixel_size / world_pixels))
    return int(min(max(zoom, 0), max_zoom))
