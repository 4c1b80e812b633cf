#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Simple feature geometry types.

Geometries form a closed set of variants, each tagged with a
`GeometryType`. Code that needs to walk a geometry branches on
`geometry_type` rather than relying on per-class methods, so every
traversal must handle each variant explicitly.

All types are immutable. Sequences passed to constructors are stored
as tuples.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class GeometryType(Enum):
    POINT = 'Point'
    LINESTRING = 'LineString'
    POLYGON = 'Polygon'
    MULTIPOINT = 'MultiPoint'
    MULTILINESTRING = 'MultiLineString'
    MULTIPOLYGON = 'MultiPolygon'
    GEOMETRYCOLLECTION = 'GeometryCollection'


def _freeze(obj, name):
    object.__setattr__(obj, name, tuple(getattr(obj, name)))


def _any(parts, attr):
    return any(getattr(p, attr) for p in parts)


@dataclass(frozen=True)
class Point:
    """ A single coordinate with optional Z & M ordinates. """

    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None

    geometry_type = GeometryType.POINT

    @property
    def has_z(self):
        return self.z is not None

    @property
    def has_m(self):
        return self.m is not None

    @property
    def coords(self):
        """ Ordinates as a tuple, `(x, y[, z][, m])`. """
        return (self.x, self.y) + tuple(v for v in (self.z, self.m) if v is not None)


@dataclass(frozen=True)
class LineString:
    """ An ordered sequence of points.

    Also used for polygon rings. Ring closure is a property of the
    points given; it is not checked.
    """

    points: Tuple[Point, ...] = ()

    geometry_type = GeometryType.LINESTRING

    def __post_init__(self):
        _freeze(self, 'points')

    @property
    def has_z(self):
        return _any(self.points, 'has_z')

    @property
    def has_m(self):
        return _any(self.points, 'has_m')

    @property
    def is_closed(self):
        return len(self.points) > 0 and self.points[0] == self.points[-1]

    def __len__(self):
        return len(self.points)


@dataclass(frozen=True)
class Polygon:
    """ An exterior ring followed by zero or more interior rings. """

    rings: Tuple[LineString, ...] = ()

    geometry_type = GeometryType.POLYGON

    def __post_init__(self):
        _freeze(self, 'rings')

    @property
    def exterior(self):
        return self.rings[0] if self.rings else None

    @property
    def interiors(self):
        return self.rings[1:]

    @property
    def has_z(self):
        return _any(self.rings, 'has_z')

    @property
    def has_m(self):
        return _any(self.rings, 'has_m')


@dataclass(frozen=True)
class MultiPoint:
    points: Tuple[Point, ...] = ()

    geometry_type = GeometryType.MULTIPOINT

    def __post_init__(self):
        _freeze(self, 'points')

    @property
    def has_z(self):
        return _any(self.points, 'has_z')

    @property
    def has_m(self):
        return _any(self.points, 'has_m')


@dataclass(frozen=True)
class MultiLineString:
    line_strings: Tuple[LineString, ...] = ()

    geometry_type = GeometryType.MULTILINESTRING

    def __post_init__(self):
        _freeze(self, 'line_strings')

    @property
    def has_z(self):
        return _any(self.line_strings, 'has_z')

    @property
    def has_m(self):
        return _any(self.line_strings, 'has_m')


@dataclass(frozen=True)
class MultiPolygon:
    polygons: Tuple[Polygon, ...] = ()

    geometry_type = GeometryType.MULTIPOLYGON

    def __post_init__(self):
        _freeze(self, 'polygons')

    @property
    def has_z(self):
        return _any(self.polygons, 'has_z')

    @property
    def has_m(self):
        return _any(self.polygons, 'has_m')


@dataclass(frozen=True)
class GeometryCollection:
    """ A heterogeneous, possibly nested, collection of geometries. """

    geometries: Tuple = field(default=())

    geometry_type = GeometryType.GEOMETRYCOLLECTION

    def __post_init__(self):
        _freeze(self, 'geometries')

    @property
    def has_z(self):
        return _any(self.geometries, 'has_z')

    @property
    def has_m(self):
        return _any(self.geometries, 'has_m')


def common_geometry_type(geometries):
    """ Find a common geometry type among a list of geometries. """

    types = set(g.geometry_type for g in geometries)

    if len(types) > 1:
        raise TypeError('All geometries must share a common type!')

    return types.pop()
