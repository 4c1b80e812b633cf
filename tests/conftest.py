import pytest

from gpkgproj.errors import (
    UnknownCRSError, TransformConstructionError, CoordinateConversionError
)
from gpkgproj.spatial.projection import Projection, ProjectionProvider, parse_identifier
from gpkgproj.spatial.transform import TransformBuilder


def scale_forward(x, y):
    return 2.0 * x + 10.0, 3.0 * y - 5.0


def scale_inverse(x, y):
    return (x - 10.0) / 2.0, (y + 5.0) / 3.0


def fold(x, y):
    # Right-hand corners swing left as y grows
    return x * (1.0 - 2.0 * y), y


def bounded(x, y):
    if abs(x) > 180.0:
        raise CoordinateConversionError(f'x={x} out of range')
    return x, y


def identity(x, y):
    return x, y


TRANSFORMS = {
    ('EPSG:4326', 'EPSG:4326'): identity,
    ('EPSG:4326', 'TEST:1'): scale_forward,
    ('TEST:1', 'EPSG:4326'): scale_inverse,
    ('EPSG:4326', 'TEST:2'): fold,
    ('EPSG:4326', 'TEST:4'): bounded,
}


class FakeProvider(ProjectionProvider):
    """ Deterministic provider recording every native call. """

    def __init__(self, transforms=None):
        self.transforms = dict(TRANSFORMS if transforms is None else transforms)
        self.known = {k for pair in self.transforms for k in pair} | {'TEST:3'}
        self.created = []
        self.calls = []

    def resolve(self, identifier):
        authority, code = parse_identifier(identifier)
        projection = Projection(authority, code, definition=f'def:{authority}:{code}')
        if projection.identifier not in self.known:
            raise UnknownCRSError(f'Unknown CRS {projection.identifier}')
        return projection

    def create_native_transform(self, from_projection, to_projection):
        key = (from_projection.identifier, to_projection.identifier)
        if key not in self.transforms:
            raise TransformConstructionError(f'No transform for {key}')
        self.created.append(key)
        fn = self.transforms[key]

        def native(x, y):
            self.calls.append((key, x, y))
            return fn(x, y)

        return native


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def builder(provider):
    return TransformBuilder(provider)


@pytest.fixture
def wgs84(builder):
    return builder.resolve('EPSG:4326')


@pytest.fixture
def scaled(builder, wgs84):
    return builder.build(wgs84, builder.resolve('TEST:1'))
