""" Spatial reference systems, geometries & transforms. """
