""" Tile matrix addressing. """
