#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Spatial reference systems. """

import logging

import osgeo
from osgeo import osr

from gpkgproj.config import DEFAULTS
from gpkgproj.errors import UnknownCRSError, TransformConstructionError
from gpkgproj.spatial.projection import Projection, ProjectionProvider, parse_identifier

logger = logging.getLogger(__name__)

osr.UseExceptions()


def set_axis_mapping(crs):
    # Ensure (x, y) coordinate ordering
    if int(osgeo.__version__[0]) >= 3:
        # By default, GDAL 3 respects the axis ordering specified by the SRS
        # See: https://github.com/OSGeo/gdal/issues/1546
        crs.SetAxisMappingStrategy(osr.OAMS_TRADITIONAL_GIS_ORDER)


def get_crs(axis_mapping='traditional', **kwargs):
    """ Build an `osr.SpatialReference` from a single keyword.

    `epsg`, `proj4` and `wkt` use the matching importers. `esri` takes
    either the lines of an ESRI .prj file or an ESRI authority code. Any
    other keyword is taken as an authority name, e.g. `ogc='CRS84'`.
    """

    crs = osr.SpatialReference()
    key, val = [*kwargs.items()].pop()
    key = key.lower()

    if key == 'epsg':
        err = crs.ImportFromEPSG(int(val))
    elif key == 'proj4':
        err = crs.ImportFromProj4(val)
    elif key == 'wkt':
        err = crs.ImportFromWkt(val)
    elif key == 'esri' and isinstance(val, (list, tuple)):
        err = crs.ImportFromESRI(list(val))
    else:
        err = crs.SetFromUserInput(f'{key.upper()}:{val}')

    # Error codes are only returned when GDAL exceptions are disabled
    if err:
        raise RuntimeError(f'OGR error {err} importing {key} definition {val!r}.')

    if axis_mapping == 'traditional':
        set_axis_mapping(crs)

    return crs


def utm_crs(zone, north=True, datum='WGS84', axis_mapping='traditional'):
    crs = osr.SpatialReference()
    crs.SetWellKnownGeogCS(datum)
    crs.SetUTM(zone, north)
    if axis_mapping == 'traditional':
        set_axis_mapping(crs)
    return crs


class OSRProvider(ProjectionProvider):
    """ Projection provider backed by GDAL's `osr` module.

    Parameters
    ----------
    config: dict, optional
        Configuration; see `gpkgproj.config.DEFAULTS`.
    """

    def __init__(self, config=None):
        self.config = dict(DEFAULTS) if config is None else config

    def resolve(self, identifier):

        authority, code = parse_identifier(identifier)

        try:
            crs = get_crs(axis_mapping=self.config['axis_mapping'], **{authority: code})
        except (RuntimeError, TypeError, ValueError) as err:
            raise UnknownCRSError(f'Cannot resolve CRS {authority}:{code}: {err}') from err

        # Prefer the authority code of a CRS given by definition string
        if authority in ('PROJ4', 'WKT'):
            name, number = crs.GetAuthorityName(None), crs.GetAuthorityCode(None)
            if name and number:
                authority, code = name, number

        logger.debug('Resolved CRS %s:%s.' %(authority, code))

        return Projection(authority, code, crs)

    def resolve_utm(self, zone, north=True, datum='WGS84'):
        """ Resolve a UTM zone to a projection.

        The EPSG code is identified where GDAL knows one (WGS84 zones);
        otherwise the projection is named `UTM:<zone><N|S>_<datum>`.
        """

        axis_mapping = self.config['axis_mapping']
        try:
            crs = utm_crs(zone, north, datum, axis_mapping=axis_mapping)
        except RuntimeError as err:
            raise UnknownCRSError(f'Cannot define UTM zone {zone}: {err}') from err

        try:
            crs.AutoIdentifyEPSG()
        except RuntimeError:
            logger.debug('No EPSG code for UTM zone %s (%s).' %(zone, datum))

        if crs.GetAuthorityName(None) == 'EPSG' and crs.GetAuthorityCode(None):
            # Re-import so the definition carries the EPSG axis order
            return self.resolve(('EPSG', crs.GetAuthorityCode(None)))

        hemisphere = 'N' if north else 'S'
        return Projection('UTM', f'{zone}{hemisphere}_{datum}', crs)

    def create_native_transform(self, from_projection, to_projection):

        try:
            ct = osr.CreateCoordinateTransformation(from_projection.definition,
                                                    to_projection.definition)
        except (RuntimeError, TypeError) as err:
            raise TransformConstructionError(
                f'Cannot transform {from_projection.identifier} to '
                f'{to_projection.identifier}: {err}') from err

        if ct is None:
            raise TransformConstructionError(
                f'Cannot transform {from_projection.identifier} to '
                f'{to_projection.identifier}.')

        def transform_xy(x, y):
            x, y, _ = ct.TransformPoint(float(x), float(y))
            return x, y

        return transform_xy
