#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Projection handles & the provider interface. """

from abc import ABC, abstractmethod

from gpkgproj.errors import UnknownCRSError, TransformConstructionError


class Projection:
    """ Handle on a coordinate reference system.

    Two projections are equal when their authority & code are equal; the
    native definition is never compared.

    Parameters
    ----------
    authority: str
        Naming authority, e.g. "EPSG". Compared case-insensitively.
    code: int or str
        Code within the authority.
    definition: object, optional
        Provider-native CRS definition (e.g. `osr.SpatialReference`).
    builder: TransformBuilder, optional
        Builder used by `get_transformation`.
    """

    __slots__ = ('_authority', '_code', '_definition', '_builder')

    def __init__(self, authority, code, definition=None, builder=None):
        self._authority = str(authority).upper()
        self._code = str(code)
        self._definition = definition
        self._builder = builder

    @property
    def authority(self):
        return self._authority

    @property
    def code(self):
        return self._code

    @property
    def definition(self):
        return self._definition

    @property
    def builder(self):
        return self._builder

    @property
    def identifier(self):
        return f'{self._authority}:{self._code}'

    def bind(self, builder):
        """ Copy of this projection attached to a transform builder. """
        return Projection(self._authority, self._code, self._definition, builder)

    def get_transformation(self, to_projection):
        """ Build a transform from this projection to another one. """
        if self._builder is None:
            raise TransformConstructionError(
                f'Projection {self.identifier} is not bound to a transform builder.')
        return self._builder.build(self, to_projection)

    def __eq__(self, other):
        if not isinstance(other, Projection):
            return NotImplemented
        return (self._authority, self._code) == (other._authority, other._code)

    def __hash__(self):
        return hash((self._authority, self._code))

    def __repr__(self):
        return f'Projection({self.identifier!r})'


def parse_identifier(identifier):
    """ Split a CRS identifier into an (authority, code) pair.

    Accepts a bare EPSG code, an `(authority, code)` pair, an
    "AUTHORITY:CODE" string, a PROJ.4 string or a WKT string.
    """

    if isinstance(identifier, int):
        return 'EPSG', identifier

    if isinstance(identifier, (tuple, list)):
        if len(identifier) != 2:
            raise UnknownCRSError(f'Invalid CRS identifier {identifier!r}.')
        authority, code = identifier
        if isinstance(code, str) and code.strip().isdigit():
            code = int(code)
        return str(authority).upper(), code

    if isinstance(identifier, str):
        text = identifier.strip()
        if text.startswith('+'):
            return 'PROJ4', text
        if '[' in text:
            return 'WKT', text
        authority, sep, code = text.partition(':')
        if not sep or not authority or not code:
            raise UnknownCRSError(f'Invalid CRS identifier {identifier!r}.')
        code = code.strip()
        return authority.strip().upper(), int(code) if code.isdigit() else code

    raise UnknownCRSError(f'Invalid CRS identifier {identifier!r}.')


class ProjectionProvider(ABC):
    """ Source of projections & native coordinate transforms. """

    @abstractmethod
    def resolve(self, identifier):
        """ Resolve an identifier to a `Projection`.

        Raises
        ------
        UnknownCRSError
            If the identifier cannot be resolved.
        """

    @abstractmethod
    def create_native_transform(self, from_projection, to_projection):
        """ Create a function mapping `(x, y)` to `(x', y')`.

        Raises
        ------
        TransformConstructionError
            If the projections cannot be related.
        """


