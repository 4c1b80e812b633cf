#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Conversions between Web Mercator bounding boxes and tile grids. """

import math

from gpkgproj.spatial.envelope import GeometryEnvelope
from gpkgproj.tiles.grid import TileGrid

# Half the circumference of the Web Mercator (EPSG:3857) world, in meters
WEB_MERCATOR_HALF_WORLD_WIDTH = 20037508.342789244

# Fraction of a tile within which an edge counts as lying on a tile boundary
TILE_EDGE_TOLERANCE = 1e-6


def tiles_per_side(zoom):
    """ Number of tile columns (and rows) at a zoom level. """
    return 2 ** zoom


def tile_size(zoom):
    """ Tile width at a zoom level, in Web Mercator meters. """
    return 2 * WEB_MERCATOR_HALF_WORLD_WIDTH / tiles_per_side(zoom)


def _first_tile(position):
    # Position in tile units; an edge on a boundary starts the next tile
    nearest = round(position)
    if abs(position - nearest) < TILE_EDGE_TOLERANCE:
        return nearest
    return math.floor(position)


def _last_tile(position):
    # An edge on a boundary closes the previous tile
    nearest = round(position)
    if abs(position - nearest) < TILE_EDGE_TOLERANCE:
        return nearest - 1
    return math.floor(position)


def get_tile_grid(envelope, zoom):
    """ Tile grid covering a Web Mercator envelope.

    Rows count downward from the top of the world. Edges within a small
    fraction of a tile of a tile boundary are snapped to it. A zero-width
    axis still covers the one tile containing it, and the grid is clamped
    to the tile matrix at the given zoom.

    Parameters
    ----------
    envelope: GeometryEnvelope
        Bounding box in EPSG:3857 meters.
    zoom: int
        Zoom level.

    Returns
    -------
    grid: TileGrid or None
        None if the envelope lies entirely outside the world extent.
    """

    half = WEB_MERCATOR_HALF_WORLD_WIDTH
    world = GeometryEnvelope(-half, -half, half, half)

    if not envelope.intersects(world):
        return None

    last = tiles_per_side(zoom) - 1
    size = tile_size(zoom)

    min_x = _first_tile((envelope.min_x + half) / size)
    max_x = max(_last_tile((envelope.max_x + half) / size), min_x)
    min_y = _first_tile((half - envelope.max_y) / size)
    max_y = max(_last_tile((half - envelope.min_y) / size), min_y)

    def clamp(index):
        return min(max(index, 0), last)

    return TileGrid(clamp(min_x), clamp(max_x), clamp(min_y), clamp(max_y))


def get_web_mercator_bounding_box(grid, zoom):
    """ Web Mercator envelope of a tile grid at a zoom level. """

    size = tile_size(zoom)
    half = WEB_MERCATOR_HALF_WORLD_WIDTH

    min_x = -half + grid.min_x * size
    max_x = -half + (grid.max_x + 1) * size
    min_y = half - (grid.max_y + 1) * size
    max_y = half - grid.min_y * size

    return GeometryEnvelope(min_x, min_y, max_x, max_y)
