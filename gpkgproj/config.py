#!/usr/bin/env python3
#
# Copyright (C) 2021 Brendan Heberlein <bheberlein@wisc.edu>
# Licensed GNU GPL v3; see `../LICENSE` for complete terms.
#
# Environmental Spectroscopy Laboratory
# Dept. of Forest and Wildlife Ecology
# University of Wisconsin - Madison

""" Configuration defaults & loading. """

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

AXIS_MAPPINGS = ('traditional', 'authority')

DEFAULTS = {
    # 'traditional' forces (x, y) = (lon, lat) ordering on GDAL >= 3
    'axis_mapping': 'traditional',
    # Keep one transform per (from, to) pair in each builder
    'cache_transforms': False,
    'log_level': 'INFO',
}


def load_config(fn=None, **overrides):
    """ Load a configuration dictionary.

    Values from a JSON file (if given) and then keyword overrides are
    merged over `DEFAULTS`.

    Parameters
    ----------
    fn: str or Path, optional
        JSON configuration filename.
    **overrides
        Individual settings, applied last.

    Returns
    -------
    config: dict
        Complete configuration.
    """

    config = dict(DEFAULTS)

    if fn is not None:
        fn = Path(fn)
        with fn.open() as f:
            settings = json.load(f)
        logger.info('Read configuration from %s.' %fn)
        config.update(_checked(settings))

    config.update(_checked(overrides))

    if config['axis_mapping'] not in AXIS_MAPPINGS:
        raise ValueError(f'Invalid axis mapping "{config["axis_mapping"]}".')

    if not isinstance(logging.getLevelName(str(config['log_level']).upper()), int):
        raise ValueError(f'Invalid log level "{config["log_level"]}".')

    return config


def configure_logging(config):
    """ Set the level of the package logger from a configuration. """
    logging.getLogger('gpkgproj').setLevel(config['log_level'].upper())


def _checked(settings):
    for key in settings:
        if key not in DEFAULTS:
            raise KeyError(f'Invalid key "{key}".')
    return settings
