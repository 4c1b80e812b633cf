#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Geometric operations. """

from shapely import geometry as sgeom

from gpkgproj.spatial.geometry.geometry import (
    GeometryType, Point, LineString, Polygon, MultiPoint,
    MultiLineString, MultiPolygon, GeometryCollection
)


def transform_geometry(geom, transform_xy):
    ''' Rebuild a geometry with every (x, y) pair passed through a
        coordinate function.

        ARGUMENTS:
        ---------
         geom (Point, LineString, ...): The geometry to be transformed.

         transform_xy (callable): Maps `(x, y)` to `(x', y')`.

        RETURNS:
        -------
         The transformed geometry. Variant, part order & counts, and Z/M
         ordinates are preserved; only X & Y change.

        NOTES:
        -----
         Any exception raised by `transform_xy` propagates; no partially
         transformed geometry is ever returned.
    '''
    gtype = getattr(geom, 'geometry_type', None)

    if gtype is GeometryType.POINT:
        x, y = transform_xy(geom.x, geom.y)
        return Point(x, y, geom.z, geom.m)
    elif gtype is GeometryType.LINESTRING:
        return LineString([transform_geometry(p, transform_xy) for p in geom.points])
    elif gtype is GeometryType.POLYGON:
        # Exterior first, then interiors; winding is left as given
        return Polygon([transform_geometry(r, transform_xy) for r in geom.rings])
    elif gtype is GeometryType.MULTIPOINT:
        return MultiPoint([transform_geometry(p, transform_xy) for p in geom.points])
    elif gtype is GeometryType.MULTILINESTRING:
        return MultiLineString([transform_geometry(ls, transform_xy) for ls in geom.line_strings])
    elif gtype is GeometryType.MULTIPOLYGON:
        return MultiPolygon([transform_geometry(p, transform_xy) for p in geom.polygons])
    elif gtype is GeometryType.GEOMETRYCOLLECTION:
        return GeometryCollection([transform_geometry(g, transform_xy) for g in geom.geometries])

    raise TypeError(f'Cannot transform object of type "{type(geom).__name__}".')


def _points_from_coords(coords):
    return [Point(*c) for c in coords]


def from_shapely(shape):
    """ Convert a `shapely` geometry to a simple feature geometry. """

    kind = shape.geom_type

    if kind == 'Point':
        if shape.is_empty:
            raise ValueError('Empty points cannot be converted.')
        return Point(*shape.coords[0])
    elif kind in ('LineString', 'LinearRing'):
        return LineString(_points_from_coords(shape.coords))
    elif kind == 'Polygon':
        if shape.is_empty:
            return Polygon()
        rings = [shape.exterior, *shape.interiors]
        return Polygon([LineString(_points_from_coords(r.coords)) for r in rings])
    elif kind == 'MultiPoint':
        return MultiPoint([from_shapely(g) for g in shape.geoms])
    elif kind == 'MultiLineString':
        return MultiLineString([from_shapely(g) for g in shape.geoms])
    elif kind == 'MultiPolygon':
        return MultiPolygon([from_shapely(g) for g in shape.geoms])
    elif kind == 'GeometryCollection':
        return GeometryCollection([from_shapely(g) for g in shape.geoms])

    raise TypeError(f'Unsupported shapely geometry type "{kind}".')


def to_shapely(geom):
    """ Convert a simple feature geometry to a `shapely` geometry.

    `shapely` has no notion of an M ordinate, so measured geometries are
    rejected rather than silently truncated.
    """

    if geom.has_m:
        raise ValueError('Geometries with M values cannot be converted to shapely.')

    gtype = geom.geometry_type

    if gtype is GeometryType.POINT:
        return sgeom.Point(*geom.coords)
    elif gtype is GeometryType.LINESTRING:
        return sgeom.LineString([p.coords for p in geom.points])
    elif gtype is GeometryType.POLYGON:
        if not geom.rings:
            return sgeom.Polygon()
        shell = [p.coords for p in geom.exterior.points]
        holes = [[p.coords for p in r.points] for r in geom.interiors]
        return sgeom.Polygon(shell, holes)
    elif gtype is GeometryType.MULTIPOINT:
        return sgeom.MultiPoint([to_shapely(p) for p in geom.points])
    elif gtype is GeometryType.MULTILINESTRING:
        return sgeom.MultiLineString([to_shapely(ls) for ls in geom.line_strings])
    elif gtype is GeometryType.MULTIPOLYGON:
        return sgeom.MultiPolygon([to_shapely(p) for p in geom.polygons])
    elif gtype is GeometryType.GEOMETRYCOLLECTION:
        return sgeom.GeometryCollection([to_shapely(g) for g in geom.geometries])

    raise TypeError(f'Cannot convert object of type "{type(geom).__name__}".')


def reproject(geom, transform):
    ''' Reproject a `shapely` geometry using a `ProjectionTransform`.

        ARGUMENTS:
        ---------
         geom (shapely.geometry.base.BaseGeometry): The geometry to be
            reprojected; an instance of some `shapely` geometry type.

         transform (ProjectionTransform): A projection transform. NOTE:
            the source CRS must match that of the input geometry.

        RETURNS:
        -------
         shapely.geometry.base.BaseGeometry: The reprojected geometry.
    '''
    # Convert to the simple feature model & back
    reprojected = transform.transform_geometry(from_shapely(geom))

    return to_shapely(reprojected)
