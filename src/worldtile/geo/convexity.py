"""Ring convexity test used by simplification heuristics.

The classifier looks at the sign of the turn (cross product of consecutive
edge vectors) at every distinct vertex. A turn only counts when it is large
compared with the squared length of that vertex's own edges, so the test
stays local to each vertex and independent of rotation, reflection, ring
direction and scale.
"""
from typing import Tuple

import numpy as np

from worldtile.geo.config import CONVEXITY_TOLERANCE
from worldtile.geo.geometry import GeometryKind, geometry_kind
from worldtile.geo.exceptions import UnsupportedGeometryType


def _distinct_vertices(coords: np.ndarray) -> np.ndarray:
    """Drop consecutive duplicates, treating the sequence as cyclic.

    For a closed ring this also drops the closing coordinate.
    """
    keep = np.any(coords != np.roll(coords, 1, axis=0), axis=1)
    return coords[keep]


def turn_cross_products(coords) -> Tuple[np.ndarray, np.ndarray]:
    """Cross product of the incoming and outgoing edge at each distinct vertex.

    Also returns, per vertex, the larger squared length of those two edges,
    the natural unit for its cross product.
    """
    pts = _distinct_vertices(np.asarray(coords, dtype=float)[:, :2])
    if pts.shape[0] < 3:
        return np.zeros(0, dtype=float), np.zeros(0, dtype=float)
    incoming = pts - np.roll(pts, 1, axis=0)
    outgoing = np.roll(pts, -1, axis=0) - pts
    z = incoming[:, 0] * outgoing[:, 1] - incoming[:, 1] * outgoing[:, 0]
    unit = np.maximum(
        incoming[:, 0] ** 2 + incoming[:, 1] ** 2,
        outgoing[:, 0] ** 2 + outgoing[:, 1] ** 2,
    )
    return z, unit


def is_convex(ring, tolerance: float = CONVEXITY_TOLERANCE) -> bool:
    """Return True if ``ring`` turns consistently in one direction.

    Accepts a LinearRing, or a Polygon whose exterior is tested. Rings with
    fewer than three distinct vertices, and fully collinear rings, are
    convex. A vertex turns when its cross product exceeds ``tolerance``
    times the larger squared length of its two edges; the ring is concave
    when it turns both left and right.
    """
    kind = geometry_kind(ring)
    if kind is GeometryKind.POLYGON:
        ring = ring.exterior
    elif kind is not GeometryKind.LINEAR_RING:
        raise UnsupportedGeometryType('is_convex_bad_type', f'expected a ring, got {kind.value}')
    if ring.is_empty:
        return True

    z, unit = turn_cross_products(ring.coords)
    turning = np.abs(z) > tolerance * unit
    return not (np.any(turning & (z > 0)) and np.any(turning & (z < 0)))
