import pytest
from shapely import geometry as sgeom

from gpkgproj.spatial.geometry import (
    GeometryType, Point, LineString, Polygon, MultiPoint, MultiLineString,
    MultiPolygon, GeometryCollection, common_geometry_type, transform_geometry
)
from gpkgproj.spatial.geometry.ops import from_shapely, to_shapely, reproject


def shift(x, y):
    return x + 100.0, y - 50.0


def square(x0, y0, size, z=None):
    coords = [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size), (x0, y0)]
    return LineString([Point(x, y, z) for x, y in coords])


def shape(geom):
    """ Variant tags, part counts & Z/M flags, ignoring coordinate values. """
    gtype = geom.geometry_type
    if gtype is GeometryType.POINT:
        return (gtype, geom.has_z, geom.has_m)
    if gtype is GeometryType.POLYGON:
        parts = geom.rings
    elif gtype is GeometryType.MULTILINESTRING:
        parts = geom.line_strings
    elif gtype is GeometryType.MULTIPOLYGON:
        parts = geom.polygons
    elif gtype is GeometryType.GEOMETRYCOLLECTION:
        parts = geom.geometries
    else:
        parts = geom.points
    return (gtype, tuple(shape(p) for p in parts))


POLYGON = Polygon([square(0.0, 0.0, 10.0), square(2.0, 2.0, 2.0), square(6.0, 6.0, 1.0)])

GEOMETRIES = [
    Point(1.0, 2.0),
    Point(1.0, 2.0, z=3.0, m=4.0),
    LineString([Point(0.0, 0.0, m=1.0), Point(1.0, 1.0, m=2.0)]),
    POLYGON,
    MultiPoint([Point(0.0, 0.0, z=1.0), Point(5.0, 5.0, z=2.0)]),
    MultiLineString([square(0.0, 0.0, 1.0), LineString([Point(3.0, 3.0), Point(4.0, 4.0)])]),
    MultiPolygon([POLYGON, Polygon([square(20.0, 20.0, 5.0, z=9.0)])]),
    GeometryCollection([
        Point(0.0, 0.0),
        POLYGON,
        GeometryCollection([LineString([Point(1.0, 1.0), Point(2.0, 2.0)])]),
    ]),
    LineString(),
    GeometryCollection(),
]


@pytest.mark.parametrize('geom', GEOMETRIES, ids=lambda g: g.geometry_type.value)
def test_transform_preserves_structure(geom):
    result = transform_geometry(geom, shift)
    assert type(result) is type(geom)
    assert shape(result) == shape(geom)
    assert result.has_z == geom.has_z
    assert result.has_m == geom.has_m


def test_point_keeps_z_and_m():
    assert transform_geometry(Point(1.0, 2.0, 3.0, 4.0), shift) == Point(101.0, -48.0, 3.0, 4.0)


def test_polygon_ring_order_and_closure():
    result = transform_geometry(POLYGON, shift)
    assert result.exterior.is_closed
    assert [r.points[0] for r in result.rings] == [
        Point(100.0, -50.0, None), Point(102.0, -48.0), Point(106.0, -44.0)
    ]
    assert len(result.interiors) == 2


def test_open_ring_is_not_closed():
    ring = LineString([Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)])
    assert not transform_geometry(Polygon([ring]), shift).exterior.is_closed


def test_unknown_geometry_raises():
    with pytest.raises(TypeError):
        transform_geometry((1.0, 2.0), shift)


def test_sequences_stored_as_tuples():
    line = LineString([Point(0.0, 0.0)])
    assert isinstance(line.points, tuple)
    assert len(line) == 1


def test_common_geometry_type():
    assert common_geometry_type([Point(0.0, 0.0), Point(1.0, 1.0)]) is GeometryType.POINT
    with pytest.raises(TypeError):
        common_geometry_type([Point(0.0, 0.0), POLYGON])


def test_from_shapely():
    shp = sgeom.Polygon([(0, 0, 1), (4, 0, 1), (4, 4, 1), (0, 0, 1)],
                        [[(1, 1, 1), (2, 1, 1), (2, 2, 1), (1, 1, 1)]])
    geom = from_shapely(shp)
    assert geom.geometry_type is GeometryType.POLYGON
    assert len(geom.rings) == 2
    assert geom.has_z
    assert geom.exterior.points[1] == Point(4.0, 0.0, 1.0)


def test_from_shapely_collections():
    shp = sgeom.GeometryCollection([
        sgeom.Point(1, 2),
        sgeom.MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]]),
    ])
    geom = from_shapely(shp)
    assert geom.geometries[0] == Point(1.0, 2.0)
    assert geom.geometries[1].geometry_type is GeometryType.MULTILINESTRING
    assert len(geom.geometries[1].line_strings) == 2


def test_to_shapely():
    shp = to_shapely(POLYGON)
    assert shp.geom_type == 'Polygon'
    assert len(shp.interiors) == 2
    assert shp.area == pytest.approx(100.0 - 4.0 - 1.0)


def test_to_shapely_rejects_m():
    with pytest.raises(ValueError):
        to_shapely(Point(1.0, 2.0, m=3.0))


def test_reproject(scaled):
    shp = sgeom.MultiPoint([(0, 0), (1, 2)])
    result = reproject(shp, scaled)
    assert [(p.x, p.y) for p in result.geoms] == [(10.0, -5.0), (12.0, 1.0)]
