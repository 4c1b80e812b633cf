#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Tile grids: inclusive column & row ranges of a tile matrix. """

import warnings

from gpkgproj.errors import InvalidRangeWarning


class TileGrid:
    """ Tile grid with x (column) and y (row) ranges.

    Both ranges are inclusive. Bounds are plain attributes and are not
    validated; see `is_valid`.

    Parameters
    ----------
    min_x, max_x: int
        First & last tile column.
    min_y, max_y: int
        First & last tile row.
    """

    def __init__(self, min_x, max_x, min_y, max_y):
        self.min_x = min_x
        self.max_x = max_x
        self.min_y = min_y
        self.max_y = max_y

    def is_valid(self):
        return self.min_x <= self.max_x and self.min_y <= self.max_y

    def count(self):
        """ Number of tiles in the grid.

        An inverted range is not an error: the product of the two range
        widths is still returned (zero or negative), with an
        `InvalidRangeWarning`.
        """

        if not self.is_valid():
            warnings.warn(f'Inverted range in {self!r}.', InvalidRangeWarning, stacklevel=2)

        return ((self.max_x + 1) - self.min_x) * ((self.max_y + 1) - self.min_y)

    def contains(self, x, y):
        """ Whether a tile column & row fall inside the grid. """
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def _key(self):
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f'TileGrid(min_x={self.min_x}, max_x={self.max_x}, '
                f'min_y={self.min_y}, max_y={self.max_y})')
