# -*- coding: utf-8 -*-
"""
Well-Known SRS - Alias table and closed-form spherical Mercator formulas.

Resolves textual SRS definitions that denote WGS84 geographic coordinates
or spherical (web) Mercator without consulting PROJ, and provides the
vectorized forward/inverse Mercator formulas used by the transform engine
whenever both ends of a transform are one of these two systems.

Both formulas clamp their inputs to the Mercator domain, so they never
fail: longitudes to [-180, 180], latitudes to +/- ``MAX_LATITUDE``, and
projected coordinates to +/- ``MAX_EXTENT``.

Dependencies
------------
numpy

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

# Standard library
import math
from typing import Dict, Optional

# Third-party
import numpy as np

# projxform internal
from projxform.vocabulary import WellKnownSRS

EARTH_RADIUS = 6378137.0
MAX_EXTENT = math.pi * EARTH_RADIUS  # 20037508.342789244
MAX_LATITUDE = 85.0511287798066

_MERC_SCALE = MAX_EXTENT / 180.0

_ALIASES: Dict[str, WellKnownSRS] = {
    'epsg:4326': WellKnownSRS.WGS84,
    '+init=epsg:4326': WellKnownSRS.WGS84,
    'wgs84': WellKnownSRS.WGS84,
    'ogc:crs84': WellKnownSRS.WGS84,
    'urn:ogc:def:crs:ogc:1.3:crs84': WellKnownSRS.WGS84,
    '+proj=longlat +datum=wgs84 +no_defs': WellKnownSRS.WGS84,
    '+proj=longlat +ellps=wgs84 +datum=wgs84 +no_defs': WellKnownSRS.WGS84,
    'epsg:3857': WellKnownSRS.SPHERICAL_MERCATOR,
    '+init=epsg:3857': WellKnownSRS.SPHERICAL_MERCATOR,
    'epsg:900913': WellKnownSRS.SPHERICAL_MERCATOR,
    '+init=epsg:900913': WellKnownSRS.SPHERICAL_MERCATOR,
    'epsg:3785': WellKnownSRS.SPHERICAL_MERCATOR,
    (
        '+proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 +lon_0=0.0 '
        '+x_0=0.0 +y_0=0.0 +k=1.0 +units=m +nadgrids=@null +wktext '
        '+no_defs +over'
    ): WellKnownSRS.SPHERICAL_MERCATOR,
}


CANONICAL_DEFINITIONS: Dict[WellKnownSRS, str] = {
    WellKnownSRS.WGS84: 'EPSG:4326',
    WellKnownSRS.SPHERICAL_MERCATOR: 'EPSG:3857',
}


def normalize_srs(params: str) -> str:
    """Lower-case and collapse whitespace in an SRS definition."""
    return ' '.join(params.lower().split())


def well_known_srs(params: str) -> Optional[WellKnownSRS]:
    """Look up the well-known kind of an SRS definition.

    Parameters
    ----------
    params : str
        Textual SRS definition, e.g. ``'EPSG:4326'`` or
        ``'+init=epsg:3857'``. Case and whitespace are ignored.

    Returns
    -------
    WellKnownSRS or None
        The matching kind, or ``None`` for any other SRS.
    """
    return _ALIASES.get(normalize_srs(params))


def lonlat2merc(xs: np.ndarray, ys: np.ndarray) -> None:
    """Project geographic degrees to spherical Mercator meters, in place.

    Parameters
    ----------
    xs : np.ndarray
        Longitudes in degrees (float64). Overwritten with eastings.
    ys : np.ndarray
        Latitudes in degrees (float64). Overwritten with northings.
    """
    np.clip(xs, -180.0, 180.0, out=xs)
    np.clip(ys, -MAX_LATITUDE, MAX_LATITUDE, out=ys)
    xs *= _MERC_SCALE
    ys[:] = np.log(np.tan((90.0 + ys) * (math.pi / 360.0))) * EARTH_RADIUS


def merc2lonlat(xs: np.ndarray, ys: np.ndarray) -> None:
    """Unproject spherical Mercator meters to geographic degrees, in place.

    Parameters
    ----------
    xs : np.ndarray
        Eastings in meters (float64). Overwritten with longitudes.
    ys : np.ndarray
        Northings in meters (float64). Overwritten with latitudes.
    """
    np.clip(xs, -MAX_EXTENT, MAX_EXTENT, out=xs)
    np.clip(ys, -MAX_EXTENT, MAX_EXTENT, out=ys)
    xs /= _MERC_SCALE
    ys[:] = np.degrees(
        2.0 * np.arctan(np.exp(ys / EARTH_RADIUS)) - 0.5 * math.pi
    )
