#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Axis-aligned bounding envelopes. """

from dataclasses import dataclass
from typing import Optional

from gpkgproj.spatial.geometry.geometry import GeometryType


@dataclass(frozen=True)
class GeometryEnvelope:
    """ Bounding box with an optional Z range.

    An envelope does not record its CRS; callers must keep track of
    which CRS it is expressed in.

    Minimums are not checked against maximums. A reprojected envelope can
    come out inverted (a box around a pole, or a westing axis); see
    `is_inverted`.

    Raises
    ------
    ValueError
        If only one Z bound is given.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    min_z: Optional[float] = None
    max_z: Optional[float] = None

    def __post_init__(self):
        if (self.min_z is None) != (self.max_z is None):
            raise ValueError('Both Z bounds must be given, or neither.')

    @property
    def has_z(self):
        return self.min_z is not None

    @property
    def is_inverted(self):
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    def intersects(self, other):
        """ Whether two envelopes overlap or touch in X & Y. """
        return (self.min_x <= other.max_x and other.min_x <= self.max_x
                and self.min_y <= other.max_y and other.min_y <= self.max_y)

    def union(self, other):
        """ Smallest envelope containing both envelopes. """
        min_z = max_z = None
        if self.has_z and other.has_z:
            min_z = min(self.min_z, other.min_z)
            max_z = max(self.max_z, other.max_z)
        return GeometryEnvelope(
            min(self.min_x, other.min_x), min(self.min_y, other.min_y),
            max(self.max_x, other.max_x), max(self.max_y, other.max_y),
            min_z, max_z
        )


def _iter_points(geom):
    gtype = geom.geometry_type

    if gtype is GeometryType.POINT:
        yield geom
    elif gtype in (GeometryType.LINESTRING, GeometryType.MULTIPOINT):
        yield from geom.points
    elif gtype is GeometryType.POLYGON:
        for ring in geom.rings:
            yield from ring.points
    elif gtype is GeometryType.MULTILINESTRING:
        for part in geom.line_strings:
            yield from _iter_points(part)
    elif gtype is GeometryType.MULTIPOLYGON:
        for part in geom.polygons:
            yield from _iter_points(part)
    elif gtype is GeometryType.GEOMETRYCOLLECTION:
        for part in geom.geometries:
            yield from _iter_points(part)
    else:
        raise TypeError(f'Unknown geometry type "{gtype}".')


def build_envelope(geom):
    """ Compute the envelope of a geometry.

    Parameters
    ----------
    geom: Point, LineString, ...
        Any geometry variant.

    Returns
    -------
    envelope: GeometryEnvelope or None
        Envelope of all coordinates; None for an empty geometry. A Z range
        is included only when every point has a Z value.
    """

    points = list(_iter_points(geom))

    if not points:
        return None

    xs = [p.x for p in points]
    ys = [p.y for p in points]

    min_z = max_z = None
    if all(p.has_z for p in points):
        zs = [p.z for p in points]
        min_z, max_z = min(zs), max(zs)

    return GeometryEnvelope(min(xs), min(ys), max(xs), max(ys), min_z, max_z)
