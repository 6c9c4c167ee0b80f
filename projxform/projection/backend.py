# -*- coding: utf-8 -*-
"""
Transform Backends - General-purpose geodetic projection capability.

Defines ``TransformBackend``, the interface the transform engine needs from
a geodetic projection library, and ``PyprojBackend``, the default
implementation on top of ``pyproj.Transformer``.

Backend contract
----------------
- ``prepare(source, dest)`` acquires whatever handles are needed to
  transform in both directions between the two SRS. It is called once,
  when the engine is built, and may raise on configuration problems.
- ``transform_batch(source, dest, xs, ys, zs)`` transforms whole arrays in
  place. Coordinates on a geographic side are in **radians**, both in and
  out. Domain errors are reported by returning ``False``, never by raising.

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

# Standard library
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# projxform internal
from projxform.exceptions import ConfigurationError
from projxform.projection._backend import require_pyproj
from projxform.projection.srs import Projection

logger = logging.getLogger(__name__)


class TransformBackend(ABC):
    """Abstract batched point-transform primitive."""

    @abstractmethod
    def prepare(self, source: Projection, dest: Projection) -> None:
        """Acquire handles for transforming ``source <-> dest``.

        Parameters
        ----------
        source : Projection
            Source SRS.
        dest : Projection
            Destination SRS.
        """
        pass

    @abstractmethod
    def transform_batch(
        self,
        source: Projection,
        dest: Projection,
        xs: np.ndarray,
        ys: np.ndarray,
        zs: np.ndarray,
    ) -> bool:
        """Transform coordinate arrays from *source* to *dest* in place.

        Parameters
        ----------
        source : Projection
            SRS the coordinates are currently in.
        dest : Projection
            SRS to transform into.
        xs, ys, zs : np.ndarray
            1D float64 arrays of equal length. Geographic coordinates are
            in radians.

        Returns
        -------
        bool
            True on success. False if any point is outside the valid
            domain; array contents are then unspecified.
        """
        pass


class PyprojBackend(TransformBackend):
    """``TransformBackend`` built on ``pyproj.Transformer``.

    One transformer per direction is created in ``prepare`` with
    ``always_xy=True`` so coordinates are always (x, y) / (lon, lat).

    Notes
    -----
    ``pyproj.Transformer`` objects must not be shared between threads.
    Engines using this backend are safe for concurrent use only when each
    thread builds its own engine.

    Raises
    ------
    DependencyError
        If pyproj is not installed.
    """

    def __init__(self) -> None:
        require_pyproj("PyprojBackend")
        self._transformers: Dict[Tuple[Projection, Projection], Any] = {}

    def prepare(self, source: Projection, dest: Projection) -> None:
        import pyproj

        for src, dst in ((source, dest), (dest, source)):
            if (src, dst) in self._transformers:
                continue
            self._transformers[(src, dst)] = pyproj.Transformer.from_crs(
                src.init_backend(), dst.init_backend(), always_xy=True
            )

    def transform_batch(
        self,
        source: Projection,
        dest: Projection,
        xs: np.ndarray,
        ys: np.ndarray,
        zs: np.ndarray,
    ) -> bool:
        import pyproj

        transformer = self._transformers.get((source, dest))
        if transformer is None:
            raise ConfigurationError(
                f"PyprojBackend was not prepared for "
                f"'{source.params}'->'{dest.params}'"
            )

        try:
            out_x, out_y, out_z = transformer.transform(
                xs, ys, zs, radians=True, errcheck=True
            )
        except pyproj.exceptions.ProjError as exc:
            logger.debug(
                "pyproj rejected %d points '%s'->'%s': %s",
                xs.size, source.params, dest.params, exc,
            )
            return False

        out_x = np.asarray(out_x, dtype=np.float64)
        out_y = np.asarray(out_y, dtype=np.float64)
        if not (np.all(np.isfinite(out_x)) and np.all(np.isfinite(out_y))):
            return False

        xs[:] = out_x
        ys[:] = out_y
        zs[:] = np.asarray(out_z, dtype=np.float64)
        return True
