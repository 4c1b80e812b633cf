#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Exceptions & warnings raised by projection and tiling code. """


class ProjectionError(Exception):
    """ Base class for coordinate reference system failures. """


class UnknownCRSError(ProjectionError, KeyError):
    """ A CRS identifier could not be resolved by the provider. """

    def __str__(self):
        # `KeyError` quotes its argument; keep the plain message
        return Exception.__str__(self)


class TransformConstructionError(ProjectionError):
    """ No coordinate conversion can be built for a pair of CRS. """


class CoordinateConversionError(ProjectionError):
    """ A coordinate lies outside the domain of a transform.

    Providers may raise this from their native transform function. It is
    never caught or reinterpreted by `gpkgproj`.
    """


class InvalidRangeWarning(UserWarning):
    """ A tile grid has an inverted column or row range. """
