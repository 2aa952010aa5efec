# -*- coding: utf-8 -*-

"""
geo/config.py

Constants shared by the world projection, the flat location codec and the
polygon topology fixer. Everything here is read-only process-wide data: the
functions that consume these values take them as keyword defaults, so callers
that need a different tile size or snapping grid pass it explicitly instead of
editing this module.

Contents:
---------
1. EARTH / PROJECTION:
   - Spherical (web) Mercator earth radius and equatorial circumference (m).

2. TILES:
   - Tile size in pixels, tile extent in integer tile units, the resulting
     snapping grid used by `snap_and_fix_polygon`, and the deepest zoom.

3. FLAT_LOCATION:
   - Bit layout of the 64-bit flat-encoded location. This layout is a
     compatibility contract for anything sorting or storing encoded values.

4. CONVEXITY_TOLERANCE:
   - Largest opposite-turn cross product, relative to the largest turn, that
     still counts as convex.

Usage:
------
    from worldtile.geo.config import TILE_GRID_SIZE, EQUATORIAL_CIRCUMFERENCE_METERS

"""
import math

# ───────────────────────────────────────────────────────────────────────────────
# 1) EARTH / PROJECTION
# ───────────────────────────────────────────────────────────────────────────────
WORLD_RADIUS_METERS = 6_378_137.0
EQUATORIAL_CIRCUMFERENCE_METERS = 2.0 * math.pi * WORLD_RADIUS_METERS   # ~40,075,016.686 m

# ───────────────────────────────────────────────────────────────────────────────
# 2) TILES
# ───────────────────────────────────────────────────────────────────────────────
TILE_PIXEL_SIZE = 256            # pixels along one tile edge
TILE_EXTENT = 4096               # integer units along one tile edge in encoded tiles
TILE_GRID_SIZE = TILE_PIXEL_SIZE / TILE_EXTENT   # 1/16 pixel snapping grid
MAX_ZOOM = 15

# ───────────────────────────────────────────────────────────────────────────────
# 3) FLAT LOCATION LAYOUT
#    bits 63..32 : quantized world x
#    bits 31..0  : quantized world y
#    each axis   : floor((world + offset) * scale), clamped to [0, 2**32 - 1]
# ───────────────────────────────────────────────────────────────────────────────
FLAT_LOCATION = {
    'axis_bits': 32,
    'offset': 1.0,              # shifts the representable range to [-1, 3)
    'scale': float(2 ** 30),    # 2**32 steps spread over a width of 4
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) CONVEXITY
# ───────────────────────────────────────────────────────────────────────────────
CONVEXITY_TOLERANCE = 1e-3
