"""
topology.py

Polygon repair after coordinate quantization.

`snap_and_fix_polygon` snaps polygonal geometry to the tile precision grid
and guarantees a valid Polygon/MultiPolygon back. Invalid input is first
repaired with ``buffer(0)``, which unions nested and overlapping shells
instead of rejecting them, and then reduced with the GEOS snap-rounding
precision reducer. When reduction still fails the geometry goes through
progressively heavier repairs:

1. ``make_valid(method='structure')``
2. a closing buffer of half a grid cell
3. `snap_and_renode`, which re-nodes every ring with `worldtile.geo.noding`
   and unions the resulting regions

See `worldtile.geo.noding` for the worst-case cost of the re-noding path.
"""
import logging
from typing import List

import shapely
from shapely.errors import GEOSException
from shapely.geometry import Polygon

from worldtile.geo.config import TILE_GRID_SIZE
from worldtile.geo.exceptions import InvalidGeometry
from worldtile.geo.geometry import EMPTY_POLYGON, GeometryKind, combine_polygons, geometry_kind
from worldtile.geo.noding import polygon_region, snap_to_grid

logger = logging.getLogger(__name__)


def _polygon_parts(geom) -> List[Polygon]:
    polygons: List[Polygon] = []

    def _collect(g):
        kind = geometry_kind(g)
        if kind is GeometryKind.POLYGON:
            if not g.is_empty:
                polygons.append(g)
        elif kind in (GeometryKind.MULTI_POLYGON, GeometryKind.GEOMETRY_COLLECTION):
            for part in g.geoms:
                _collect(part)
        else:
            raise InvalidGeometry('snap_fix_not_polygonal', f'cannot fix {kind.value} as a polygon')

    _collect(geom)
    return polygons


def _as_polygonal(geom):
    """Keep only the polygon parts of an overlay result."""
    polygons: List[Polygon] = []
    for part in shapely.get_parts(geom):
        kind = geometry_kind(part)
        if kind is GeometryKind.POLYGON:
            polygons.append(part)
        elif kind is GeometryKind.MULTI_POLYGON:
            polygons.extend(part.geoms)
    polygons = [p for p in polygons if not p.is_empty]
    if not polygons:
        return EMPTY_POLYGON
    return combine_polygons(polygons)


def _reduce(geom, grid_size: float):
    # GEOSException propagates to the caller, which decides how to retry
    reduced = _as_polygonal(shapely.set_precision(geom, grid_size))
    if not reduced.is_valid:
        raise InvalidGeometry('snap_fix_invalid_result', shapely.is_valid_reason(reduced))
    return reduced


def _make_valid(geom, grid_size: float):
    return shapely.make_valid(geom, method='structure', keep_collapsed=False)


def _close(geom, grid_size: float):
    return fix_polygon(geom, grid_size / 2)


_RETRIES = (
    ('make_valid', _make_valid),
    ('closing buffer', _close),
)


def snap_and_fix_polygon(geom, grid_size: float = TILE_GRID_SIZE):
    """Snap ``geom`` to ``grid_size`` and return valid polygonal geometry.

    Accepts a Polygon, a MultiPolygon or a GeometryCollection of polygons.
    Raises `InvalidGeometry` for empty or non-areal input, or when even
    re-noding cannot assemble valid polygons. A result that collapses
    entirely at this grid size is returned as an empty Polygon.
    """
    polygons = _polygon_parts(geom)
    if not polygons:
        raise InvalidGeometry('snap_fix_empty_input', 'no polygons to fix')

    areal = combine_polygons(polygons)
    if not areal.is_valid:
        logger.debug('invalid input (%s); repairing with buffer(0)', shapely.is_valid_reason(areal))
        areal = fix_polygon(areal)
    try:
        return _reduce(areal, grid_size)
    except (GEOSException, InvalidGeometry) as e:
        logger.debug('precision reduction failed: %s', e)

    for name, repair in _RETRIES:
        try:
            areal = repair(areal, grid_size)
            return _reduce(areal, grid_size)
        except (GEOSException, InvalidGeometry) as e:
            logger.debug('precision reduction after %s failed: %s', name, e)

    logger.debug('re-noding %d polygon(s)', len(polygons))
    return _renode(polygons, grid_size)


def _renode(polygons: List[Polygon], grid_size: float):
    try:
        regions = [polygon_region(snap_to_grid(p, grid_size), grid_size) for p in polygons]
        merged = shapely.union_all(regions, grid_size=grid_size)
    except GEOSException as e:
        raise InvalidGeometry('snap_fix_noding_failed', f'could not assemble polygons from noded rings: {e}') from e

    result = _as_polygonal(merged)
    if not result.is_valid:
        raise InvalidGeometry('snap_fix_invalid_result', shapely.is_valid_reason(result))
    return result


def snap_and_renode(geom, grid_size: float = TILE_GRID_SIZE):
    """Snap ``geom`` to ``grid_size`` and rebuild it from fully noded rings.

    Every ring is read with the even-odd rule, holes are subtracted from
    their own shell, and all polygons are unioned, so nested and
    overlapping shells merge. Same input rules and errors as
    `snap_and_fix_polygon`.
    """
    polygons = _polygon_parts(geom)
    if not polygons:
        raise InvalidGeometry('snap_fix_empty_input', 'no polygons to fix')
    return _renode(polygons, grid_size)


def fix_polygon(geom, buffer: float = 0.0):
    """Classic buffer repair.

    ``buffer(0)`` when ``buffer`` is zero, otherwise a closing
    ``buffer(b).buffer(-b)`` that also fills gaps narrower than ``2 * b``.
    """
    try:
        if buffer == 0:
            return geom.buffer(0)
        return geom.buffer(buffer).buffer(-buffer)
    except GEOSException as e:
        raise InvalidGeometry('fix_polygon_topology_error', f'robustness error fixing polygon: {e}') from e
