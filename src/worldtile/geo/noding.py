"""
noding.py

Snap, node and re-assemble polygon rings. This is the machinery behind
`snap_and_fix_polygon`; it is built on GEOS primitives exposed by shapely
(snap-rounding noder through ``union_all(grid_size=...)``, polygonizer,
point-on-surface) plus an even-odd ray-crossing test.

Pipeline for one ring:

1. `snap_to_grid` rounds every coordinate to the grid (ties round up).
2. `node_lines` snap-rounds the ring linework so every crossing or touch
   becomes a shared vertex and overlapping segments collapse into one.
3. `polygonize_faces` returns the bounded faces of that arrangement.
4. `ring_region` keeps the faces whose interior point has odd crossing
   parity against the ring, and unions them.

A polygon's region is its shell region minus the union of its hole regions
(`polygon_region`). Spikes, zero-area loops and figure-eight pinches all
come out as ordinary valid polygons or vanish.

Cost: with ``n`` ring vertices and ``k`` edge intersections the noding step is
``O((n + k) log n)``. ``k`` is ``O(n**2)`` for pathological rings, and the
parity test is ``O(faces * n)``, so the worst case is quadratic in vertex
count; well-formed rings stay close to ``O(n log n)``.
"""
import logging
from typing import Sequence

import numpy as np
import shapely
from shapely.geometry import LineString
from shapely.ops import polygonize

from worldtile.geo.geometry import EMPTY_POLYGON, transform_coords

logger = logging.getLogger(__name__)


def snap_to_grid(geom, grid_size: float):
    """Round every coordinate of ``geom`` to the nearest multiple of ``grid_size``.

    Only coordinates move; the result may be invalid (collapsed edges,
    new self-touches) and is meant to be re-noded.
    """
    def _snap(coords):
        return np.floor(coords / grid_size + 0.5) * grid_size
    return transform_coords(geom, _snap)


def node_lines(lines: Sequence, grid_size: float):
    """Snap-rounded union of ``lines``: fully noded, duplicate segments merged."""
    return shapely.union_all(np.asarray(list(lines), dtype=object), grid_size=grid_size)


def polygonize_faces(noded) -> np.ndarray:
    """Bounded faces of a noded line arrangement as an array of Polygons."""
    parts = list(shapely.get_parts(noded))
    if not parts:
        return np.empty(0, dtype=object)
    return np.asarray(list(polygonize(parts)), dtype=object)


def crossing_parity(ring_coords, xs, ys) -> np.ndarray:
    """Even-odd test of points ``(xs, ys)`` against a closed ring.

    Casts a ray towards +x from each point and counts edge crossings.
    Returns a boolean array, True where the count is odd. Points exactly on
    an edge get an arbitrary answer; callers only pass face interior points.
    """
    rc = np.asarray(ring_coords, dtype=float)[:, :2]
    px = np.asarray(xs, dtype=float)[:, None]
    py = np.asarray(ys, dtype=float)[:, None]
    x0, y0 = rc[:-1, 0][None, :], rc[:-1, 1][None, :]
    x1, y1 = rc[1:, 0][None, :], rc[1:, 1][None, :]

    straddles = (y0 > py) != (y1 > py)
    with np.errstate(divide='ignore', invalid='ignore'):
        x_cross = x0 + (py - y0) * (x1 - x0) / (y1 - y0)
    hits = straddles & (px < x_cross)
    return (np.count_nonzero(hits, axis=1) % 2) == 1


def ring_region(ring_coords, grid_size: float):
    """Area enclosed by a ring under the even-odd rule, as valid polygonal geometry.

    ``ring_coords`` should already be snapped to ``grid_size``.
    """
    rc = np.asarray(ring_coords, dtype=float)
    if rc.shape[0] < 4:
        return EMPTY_POLYGON
    noded = node_lines([LineString(rc)], grid_size)
    faces = polygonize_faces(noded)
    if faces.size == 0:
        return EMPTY_POLYGON

    samples = shapely.get_coordinates(shapely.point_on_surface(faces))
    inside = crossing_parity(rc, samples[:, 0], samples[:, 1])
    logger.debug('ring with %d vertices: %d faces, %d inside', rc.shape[0], faces.size, int(inside.sum()))
    if not inside.any():
        return EMPTY_POLYGON
    return shapely.union_all(faces[inside], grid_size=grid_size)


def polygon_region(polygon, grid_size: float):
    """Shell region minus the union of hole regions for one (snapped) polygon."""
    if polygon.is_empty:
        return EMPTY_POLYGON
    shell = ring_region(polygon.exterior.coords, grid_size)
    if shell.is_empty:
        return shell
    holes = [ring_region(hole.coords, grid_size) for hole in polygon.interiors]
    holes = [h for h in holes if not h.is_empty]
    if not holes:
        return shell
    return shapely.difference(shell, shapely.union_all(holes, grid_size=grid_size), grid_size=grid_size)
