# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for projxform.

Defines the controlled vocabularies shared by the SRS descriptor and the
transform engine: the closed set of well-known spatial reference systems
and the transform strategies an engine can select.

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

from enum import Enum


class WellKnownSRS(Enum):
    """Spatial reference systems recognized without the general backend.

    Pairs of these systems are transformed with closed-form formulas.
    """

    WGS84 = "wgs84"
    SPHERICAL_MERCATOR = "spherical_mercator"


class TransformStrategy(Enum):
    """Transform strategy selected once when a ``ProjTransform`` is built.

    - ``IDENTITY``: source equals destination, every call is a no-op.
    - ``WGS84_TO_MERC``: closed-form geographic to spherical Mercator.
    - ``MERC_TO_WGS84``: closed-form spherical Mercator to geographic.
    - ``GENERAL``: delegated to a ``TransformBackend``.
    """

    IDENTITY = "identity"
    WGS84_TO_MERC = "wgs84_to_merc"
    MERC_TO_WGS84 = "merc_to_wgs84"
    GENERAL = "general"
