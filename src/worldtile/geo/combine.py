"""Combine several geometries into one flat GeometryCollection."""
from typing import List

from shapely.geometry import GeometryCollection

from worldtile.geo.geometry import EMPTY_GEOMETRY, GeometryKind, geometry_kind


def _flatten(geom, out: List) -> None:
    if geometry_kind(geom) is GeometryKind.GEOMETRY_COLLECTION:
        for child in geom.geoms:
            _flatten(child, out)
    else:
        out.append(geom)


def combine(*geoms):
    """Combine ``geoms`` into a single geometry.

    - no argument: `EMPTY_GEOMETRY`
    - one argument: returned as is
    - more: a GeometryCollection of the leaves, nested collections unpacked
      at any depth, left to right.
    """
    if not geoms:
        return EMPTY_GEOMETRY
    if len(geoms) == 1:
        return geoms[0]
    leaves: List = []
    for geom in geoms:
        _flatten(geom, leaves)
    return GeometryCollection(leaves)
