"""
flat_location.py

Packs a (lon, lat) location into one unsigned 64-bit integer for compact
sorting and deduplication of point data.

Layout (see `worldtile.geo.config.FLAT_LOCATION`):

    bits 63..32   floor((world_x + 1) * 2**30)
    bits 31..0    floor((world_y + 1) * 2**30)

Each axis covers world values in [-1, 3) at a resolution of 2**-30, which
leaves room for longitudes past the antimeridian and latitudes past the
Mercator cutoff. Values outside that range are clamped to the nearest
representable step.
"""
import math
from typing import Tuple

from worldtile.geo.config import FLAT_LOCATION
from worldtile.geo.projection import world_lat, world_lon, world_x, world_y

_AXIS_BITS = FLAT_LOCATION['axis_bits']
_OFFSET = FLAT_LOCATION['offset']
_SCALE = FLAT_LOCATION['scale']
_AXIS_MASK = (1 << _AXIS_BITS) - 1


def _quantize(world: float) -> int:
    q = math.floor((float(world) + _OFFSET) * _SCALE)
    return min(max(q, 0), _AXIS_MASK)


def _dequantize(q: int) -> float:
    return q / _SCALE - _OFFSET


def encode_flat_location(lon: float, lat: float) -> int:
    """Encode a lon/lat pair as an unsigned 64-bit integer."""
    x = _quantize(world_x(lon))
    y = _quantize(world_y(lat))
    return (x << _AXIS_BITS) | y


def decode_world_x(encoded: int) -> float:
    return _dequantize((int(encoded) >> _AXIS_BITS) & _AXIS_MASK)


def decode_world_y(encoded: int) -> float:
    return _dequantize(int(encoded) & _AXIS_MASK)


def decode_flat_location(encoded: int) -> Tuple[float, float]:
    """Return the (lon, lat) an encoded value stands for."""
    return (
        float(world_lon(decode_world_x(encoded))),
        float(world_lat(decode_world_y(encoded))),
    )
