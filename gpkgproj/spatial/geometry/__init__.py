""" Simple feature geometries. """

from gpkgproj.spatial.geometry.geometry import (
    GeometryType, Point, LineString, Polygon, MultiPoint,
    MultiLineString, MultiPolygon, GeometryCollection, common_geometry_type
)
from gpkgproj.spatial.geometry.ops import transform_geometry
