#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Transforms between coordinate reference systems. """

import logging
import threading
from numbers import Real

import numpy as np

from gpkgproj.spatial.envelope import GeometryEnvelope
from gpkgproj.spatial.geometry.geometry import GeometryType
from gpkgproj.spatial.geometry.ops import transform_geometry

logger = logging.getLogger(__name__)


class ProjectionTransform:
    """ A coordinate transform from one projection to another.

    The native transform function is created once, by the builder, and is
    used for every coordinate converted through this object. Transforms
    are immutable & may be shared between threads.

    Parameters
    ----------
    from_projection: Projection
        Source CRS.
    to_projection: Projection
        Target CRS.
    native: callable
        Function mapping `(x, y)` in the source CRS to `(x, y)` in the
        target CRS.
    """

    __slots__ = ('_from', '_to', '_native')

    def __init__(self, from_projection, to_projection, native):
        self._from = from_projection
        self._to = to_projection
        self._native = native

    @property
    def from_projection(self):
        return self._from

    @property
    def to_projection(self):
        return self._to

    @property
    def native(self):
        return self._native

    def transform_xy(self, x, y):
        """ Transform a single (x, y) location.

        Out-of-domain coordinates are not checked; whatever the native
        function returns or raises is passed on.
        """
        return self._native(x, y)

    def transform_coords(self, xs, ys):
        """ Transform arrays of x & y coordinates.

        Parameters
        ----------
        xs, ys: array_like
            Coordinates of equal length.

        Returns
        -------
        xs, ys: np.ndarray
            Transformed coordinates, in input order.
        """

        xs = np.asarray(xs, dtype=float).ravel()
        ys = np.asarray(ys, dtype=float).ravel()

        if xs.shape != ys.shape:
            raise ValueError('Coordinate arrays must have the same length.')

        out = np.empty((2, xs.size))
        for i, (x, y) in enumerate(zip(xs, ys)):
            out[:, i] = self._native(x, y)

        return out[0], out[1]

    def transform_point(self, point):
        """ Transform a `Point`, keeping its Z & M values. """
        return transform_geometry(point, self._native)

    def transform_points(self, points):
        """ Transform a sequence of points, preserving order. """
        return [transform_geometry(p, self._native) for p in points]

    def transform_geometry(self, geom):
        """ Transform any geometry, preserving its structure. """
        return transform_geometry(geom, self._native)

    def transform_envelope(self, envelope):
        """ Transform an envelope by projecting its four corners.

        The result is an approximation: for nonlinear projections the true
        image of a box is not a box. Minimum X comes from the left corners,
        maximum X from the right, minimum Y from the lower & maximum Y from
        the upper corners. Any Z range is carried through unchanged. The
        result is returned as paired, even when it comes out inverted.
        """

        lower_left = self._native(envelope.min_x, envelope.min_y)
        lower_right = self._native(envelope.max_x, envelope.min_y)
        upper_right = self._native(envelope.max_x, envelope.max_y)
        upper_left = self._native(envelope.min_x, envelope.max_y)

        min_x = min(lower_left[0], upper_left[0])
        max_x = max(lower_right[0], upper_right[0])
        min_y = min(lower_left[1], lower_right[1])
        max_y = max(upper_left[1], upper_right[1])

        return GeometryEnvelope(min_x, min_y, max_x, max_y,
                                envelope.min_z, envelope.max_z)

    def transform(self, value):
        """ Transform a point, geometry, envelope, (x, y) pair or a
        sequence of points.
        """

        if isinstance(value, GeometryEnvelope):
            return self.transform_envelope(value)
        if isinstance(getattr(value, 'geometry_type', None), GeometryType):
            return self.transform_geometry(value)
        if (isinstance(value, tuple) and len(value) == 2
                and all(isinstance(v, Real) for v in value)):
            return self.transform_xy(*value)
        if isinstance(value, (list, tuple)):
            return self.transform_points(value)

        raise TypeError(f'Cannot transform object of type "{type(value).__name__}".')

    def is_same_projection(self):
        """ Whether source & target CRS share an identifier. """
        return self._from == self._to

    def inverse(self):
        """ Transform from the target CRS back to the source CRS.

        Built by asking the target projection for a transform toward the
        source, not by inverting this transform.
        """
        return self._to.get_transformation(self._from)

    def __repr__(self):
        return f'ProjectionTransform({self._from.identifier} -> {self._to.identifier})'


class TransformBuilder:
    """ Builds `ProjectionTransform` objects from a projection provider.

    Parameters
    ----------
    provider: ProjectionProvider
        Resolves identifiers & creates native transforms.
    cache: bool, optional
        Keep one transform per (from, to) pair. Off by default. The cache
        is guarded by a lock, so a cached builder may be shared between
        threads & builds each pair once.
    """

    def __init__(self, provider, cache=False):
        self.provider = provider
        self._cache = {} if cache else None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, provider, config):
        return cls(provider, cache=config['cache_transforms'])

    def resolve(self, identifier):
        """ Resolve a CRS identifier to a projection bound to this builder. """
        return self.provider.resolve(identifier).bind(self)

    def build(self, from_projection, to_projection):
        """ Build a transform between two projections.

        Same-CRS pairs still get a native transform; no identity shortcut
        is taken.

        Raises
        ------
        TransformConstructionError
            If the provider cannot relate the two projections.
        """

        if self._cache is None:
            return self._build(from_projection, to_projection)

        key = (from_projection, to_projection)
        with self._lock:
            if key not in self._cache:
                self._cache[key] = self._build(from_projection, to_projection)
            return self._cache[key]

    def _build(self, from_projection, to_projection):

        if from_projection.builder is not self:
            from_projection = from_projection.bind(self)
        if to_projection.builder is not self:
            to_projection = to_projection.bind(self)

        if from_projection == to_projection:
            logger.debug('Building transform between identical projections %s.'
                         %from_projection.identifier)

        native = self.provider.create_native_transform(from_projection, to_projection)
        transform = ProjectionTransform(from_projection, to_projection, native)

        logger.info('Built transform %s -> %s.'
                    %(from_projection.identifier, to_projection.identifier))

        return transform

    def is_same_projection(self, transform):
        return transform.is_same_projection()

    def inverse(self, transform):
        return transform.inverse()
