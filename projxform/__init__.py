# -*- coding: utf-8 -*-
"""
projxform - Coordinate reprojection for map rendering pipelines.

Reprojects points, line strings, coordinate arrays and bounding boxes
between a source and a destination spatial reference system. The WGS84 /
spherical Mercator pair is handled with closed-form formulas; every other
pair goes through a pluggable geodetic backend (pyproj by default).

Dependencies
------------
numpy
pyproj

Author
------
projxform developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

__version__ = "0.1.0"

from projxform.exceptions import (
    ProjxformError,
    ValidationError,
    DependencyError,
    ConfigurationError,
)
from projxform.vocabulary import WellKnownSRS, TransformStrategy
from projxform.geometry import Point, LineString, Box2D
from projxform.projection import (
    Projection,
    ProjTransform,
    TransformBackend,
    PyprojBackend,
    DEFAULT_ENVELOPE_POINTS,
)

__all__ = [
    'ProjxformError',
    'ValidationError',
    'DependencyError',
    'ConfigurationError',
    'WellKnownSRS',
    'TransformStrategy',
    'Point',
    'LineString',
    'Box2D',
    'Projection',
    'ProjTransform',
    'TransformBackend',
    'PyprojBackend',
    'DEFAULT_ENVELOPE_POINTS',
]
