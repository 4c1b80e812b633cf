#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Projection transforms & tile grids for GeoPackage-style tile stores.

The GDAL-backed provider lives in `gpkgproj.spatial.crs` and is not
imported here.
"""

from gpkgproj.errors import (
    ProjectionError, UnknownCRSError, TransformConstructionError,
    CoordinateConversionError, InvalidRangeWarning
)
from gpkgproj.spatial.envelope import GeometryEnvelope, build_envelope
from gpkgproj.spatial.projection import Projection, ProjectionProvider
from gpkgproj.spatial.transform import ProjectionTransform, TransformBuilder
from gpkgproj.tiles.grid import TileGrid

__version__ = '1.0.0'
