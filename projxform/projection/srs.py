# -*- coding: utf-8 -*-
"""
SRS Descriptor - Immutable handle to a spatial reference system.

``Projection`` wraps a textual SRS definition and answers the two questions
the transform engine asks at construction time: is the SRS geographic, and
is it one of the well-known systems handled by closed-form formulas. The
well-known table is consulted first so that WGS84 and spherical Mercator
never need PROJ; any other definition is resolved through ``pyproj.CRS``.

Dependencies
------------
pyproj (only for SRS that are not well known)

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
from typing import Any, Optional

# projxform internal
from projxform.exceptions import ValidationError
from projxform.projection._backend import require_pyproj
from projxform.projection.well_known import (
    CANONICAL_DEFINITIONS,
    normalize_srs,
    well_known_srs,
)
from projxform.vocabulary import WellKnownSRS


class Projection:
    """Spatial reference system descriptor.

    Two projections compare equal when they resolve to the same well-known
    system, or otherwise when their normalized definitions match.

    Parameters
    ----------
    params : str
        Textual SRS definition (EPSG code, PROJ string, WKT).
    geographic : bool, optional
        Declare whether the SRS uses angular coordinates instead of
        resolving it. When omitted, well-known systems answer from the
        alias table and all others are resolved with pyproj.

    Raises
    ------
    ValidationError
        If *params* is empty or pyproj rejects the definition.
    DependencyError
        If the SRS is not well known, *geographic* is omitted, and pyproj
        is not installed.

    Examples
    --------
    >>> Projection('EPSG:4326').is_geographic
    True
    >>> Projection('+init=epsg:3857').well_known
    <WellKnownSRS.SPHERICAL_MERCATOR: 'spherical_mercator'>
    """

    def __init__(self, params: str, geographic: Optional[bool] = None) -> None:
        if not isinstance(params, str) or not params.strip():
            raise ValidationError(
                f"SRS definition must be a non-empty string, got {params!r}"
            )
        self._params = params.strip()
        self._key = normalize_srs(self._params)
        self._well_known = well_known_srs(self._key)
        self._crs = None

        if geographic is not None:
            self._is_geographic = bool(geographic)
        elif self._well_known is not None:
            self._is_geographic = self._well_known is WellKnownSRS.WGS84
        else:
            self._is_geographic = bool(self.init_backend().is_geographic)

    @property
    def params(self) -> str:
        """Definition as given by the caller, stripped of outer whitespace."""
        return self._params

    @property
    def is_geographic(self) -> bool:
        return self._is_geographic

    @property
    def well_known(self) -> Optional[WellKnownSRS]:
        return self._well_known

    def init_backend(self) -> Any:
        """Resolve the definition to a ``pyproj.CRS``.

        Idempotent: the CRS is built on the first call and returned as-is
        afterwards. Well-known systems are resolved from their canonical
        EPSG code, since PROJ does not accept every alias spelling.

        Returns
        -------
        pyproj.CRS

        Raises
        ------
        DependencyError
            If pyproj is not installed.
        ValidationError
            If pyproj cannot parse the definition.
        """
        if self._crs is None:
            require_pyproj(f"Resolving SRS '{self._params}'")
            import pyproj

            definition = CANONICAL_DEFINITIONS.get(
                self._well_known, self._params
            )
            try:
                self._crs = pyproj.CRS.from_user_input(definition)
            except pyproj.exceptions.CRSError as exc:
                raise ValidationError(
                    f"Invalid SRS definition '{self._params}': {exc}"
                ) from exc
        return self._crs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        if self._well_known is not None or other._well_known is not None:
            return self._well_known is other._well_known
        return self._key == other._key

    def __hash__(self) -> int:
        if self._well_known is not None:
            return hash(self._well_known)
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Projection({self._params!r})"

    def __str__(self) -> str:
        return self._params
