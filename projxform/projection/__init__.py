# -*- coding: utf-8 -*-
"""
Projection Module - Reprojection between spatial reference systems.

Provides the SRS descriptor, the general projection backend interface and
the ``ProjTransform`` engine that reprojects arrays, points, line strings
and bounding boxes between a fixed pair of SRS.

Key Classes
-----------
- Projection: Immutable SRS descriptor
- ProjTransform: Forward/backward reprojection engine
- TransformBackend: Interface for the general geodetic backend
- PyprojBackend: Default backend on top of pyproj

Usage
-----
    >>> from projxform.projection import Projection, ProjTransform
    >>> from projxform.geometry import Box2D
    >>>
    >>> tr = ProjTransform(Projection('EPSG:32601'), Projection('EPSG:4326'))
    >>> box = Box2D(300000.0, 5500000.0, 700000.0, 5900000.0)
    >>> ok = tr.forward_box(box, points=40)

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

from projxform.projection.srs import Projection
from projxform.projection.backend import TransformBackend, PyprojBackend
from projxform.projection.envelope import (
    envelope_points,
    envelope_steps,
    is_clockwise,
    calculate_bbox,
)
from projxform.projection.well_known import (
    EARTH_RADIUS,
    MAX_EXTENT,
    MAX_LATITUDE,
    lonlat2merc,
    merc2lonlat,
    well_known_srs,
)
from projxform.projection.transform import (
    ProjTransform,
    DEFAULT_ENVELOPE_POINTS,
)

__all__ = [
    'Projection',
    'TransformBackend',
    'PyprojBackend',
    'ProjTransform',
    'DEFAULT_ENVELOPE_POINTS',
    'envelope_points',
    'envelope_steps',
    'is_clockwise',
    'calculate_bbox',
    'EARTH_RADIUS',
    'MAX_EXTENT',
    'MAX_LATITUDE',
    'lonlat2merc',
    'merc2lonlat',
    'well_known_srs',
]
