# -*- coding: utf-8 -*-
"""
Projection Transform - Reprojection engine for one pair of SRS.

Provides ``ProjTransform``, which transforms coordinate arrays, points,
line strings and bounding boxes from a source SRS to a destination SRS
(forward) and back (backward). The transform strategy is chosen once, at
construction:

    source == dest                    ->  IDENTITY       (no-op)
    WGS84 -> spherical Mercator       ->  WGS84_TO_MERC  (closed form)
    spherical Mercator -> WGS84       ->  MERC_TO_WGS84  (closed form)
    anything else                     ->  GENERAL        (TransformBackend)

Failure policy
--------------
Domain errors are never raised. Array, point and box operations return
``False``; line string operations return the number of vertices that
failed. Failed array and point transforms leave the caller's coordinates
at their pre-call values; failed box transforms leave the box unmodified.

Dependencies
------------
numpy
pyproj (GENERAL strategy with the default backend)

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
from typing import Optional, Tuple

# Third-party
import numpy as np

# projxform internal
from projxform.exceptions import ConfigurationError, ValidationError
from projxform.geometry import Box2D, LineString, Point
from projxform.projection import _backend
from projxform.projection.backend import PyprojBackend, TransformBackend
from projxform.projection.envelope import (
    calculate_bbox,
    envelope_points,
    is_clockwise,
)
from projxform.projection.srs import Projection
from projxform.projection.well_known import lonlat2merc, merc2lonlat
from projxform.vocabulary import TransformStrategy, WellKnownSRS

logger = logging.getLogger(__name__)

DEFAULT_ENVELOPE_POINTS = 20

_SHORTCUTS = {
    (WellKnownSRS.WGS84, WellKnownSRS.SPHERICAL_MERCATOR):
        TransformStrategy.WGS84_TO_MERC,
    (WellKnownSRS.SPHERICAL_MERCATOR, WellKnownSRS.WGS84):
        TransformStrategy.MERC_TO_WGS84,
}


def _check_arrays(
    xs: np.ndarray,
    ys: np.ndarray,
    zs: Optional[np.ndarray],
) -> None:
    """Validate in-place coordinate arrays."""
    for name, arr in (('xs', xs), ('ys', ys), ('zs', zs)):
        if arr is None and name == 'zs':
            continue
        if not isinstance(arr, np.ndarray) or arr.dtype != np.float64:
            raise ValidationError(
                f"{name} must be a float64 numpy array, "
                f"got {type(arr).__name__}"
                + (f" of {arr.dtype}" if isinstance(arr, np.ndarray) else "")
            )
        if arr.ndim != 1:
            raise ValidationError(
                f"{name} must be 1D, got shape {arr.shape}"
            )
    if ys.shape != xs.shape or (zs is not None and zs.shape != xs.shape):
        raise ValidationError(
            f"Coordinate arrays must have equal length, got "
            f"{xs.shape}, {ys.shape}"
            + (f", {zs.shape}" if zs is not None else "")
        )


class ProjTransform:
    """Forward/backward reprojection between a fixed pair of SRS.

    The engine is immutable after construction and keeps no per-call
    state, so it may be used concurrently as long as the backend's
    ``transform_batch`` is itself safe for concurrent use (see
    ``PyprojBackend`` for the default backend's constraint).

    Parameters
    ----------
    source : Projection
        Source SRS.
    dest : Projection
        Destination SRS.
    backend : TransformBackend, optional
        General projection backend. Only used, and only prepared, when
        neither the identity nor the WGS84/Mercator shortcut applies.
        Defaults to a ``PyprojBackend``.

    Attributes
    ----------
    source : Projection
    dest : Projection
    strategy : TransformStrategy
        Strategy selected at construction.

    Raises
    ------
    ConfigurationError
        If the general backend is needed and none is available.

    Examples
    --------
    >>> tr = ProjTransform(Projection('EPSG:4326'), Projection('EPSG:3857'))
    >>> tr.is_known()
    True
    >>> x, y, z = tr.forward_xyz(180.0, 0.0)  # x == 20037508.34...

    Reprojecting a box with perimeter densification:

    >>> box = Box2D(-10.0, 40.0, 10.0, 50.0)
    >>> ok = tr.forward_box(box, points=DEFAULT_ENVELOPE_POINTS)
    """

    def __init__(
        self,
        source: Projection,
        dest: Projection,
        backend: Optional[TransformBackend] = None,
    ) -> None:
        self._source = source
        self._dest = dest
        self._backend: Optional[TransformBackend] = None
        self._is_source_geographic = False
        self._is_dest_geographic = False

        if source == dest:
            self._strategy = TransformStrategy.IDENTITY
        else:
            self._is_source_geographic = source.is_geographic
            self._is_dest_geographic = dest.is_geographic
            strategy = None
            if source.well_known is not None and dest.well_known is not None:
                strategy = _SHORTCUTS.get((source.well_known, dest.well_known))
            if strategy is None:
                strategy = TransformStrategy.GENERAL
                self._backend = self._init_backend(backend)
            self._strategy = strategy

        logger.debug(
            "ProjTransform '%s'->'%s' using %s strategy",
            source.params, dest.params, self._strategy.value,
        )

    def _init_backend(
        self,
        backend: Optional[TransformBackend],
    ) -> TransformBackend:
        if backend is None:
            if not _backend.has_pyproj():
                raise ConfigurationError(
                    "Cannot initialize ProjTransform for given projections "
                    "without pyproj support: "
                    f"'{self._source.params}'->'{self._dest.params}'"
                )
            backend = PyprojBackend()
        backend.prepare(self._source, self._dest)
        return backend

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def source(self) -> Projection:
        return self._source

    @property
    def dest(self) -> Projection:
        return self._dest

    @property
    def strategy(self) -> TransformStrategy:
        return self._strategy

    @property
    def backend(self) -> Optional[TransformBackend]:
        """Prepared backend, or None unless the strategy is GENERAL."""
        return self._backend

    @property
    def is_source_geographic(self) -> bool:
        return self._is_source_geographic

    @property
    def is_dest_geographic(self) -> bool:
        return self._is_dest_geographic

    @property
    def wgs84_to_merc(self) -> bool:
        return self._strategy is TransformStrategy.WGS84_TO_MERC

    @property
    def merc_to_wgs84(self) -> bool:
        return self._strategy is TransformStrategy.MERC_TO_WGS84

    def equal(self) -> bool:
        """True when source and destination are the same SRS."""
        return self._strategy is TransformStrategy.IDENTITY

    def is_known(self) -> bool:
        """True when the closed-form WGS84/Mercator shortcut is used."""
        return self.wgs84_to_merc or self.merc_to_wgs84

    def __repr__(self) -> str:
        return (
            f"ProjTransform({self._source!r}, {self._dest!r}, "
            f"strategy={self._strategy.value!r})"
        )

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def forward(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        zs: Optional[np.ndarray] = None,
    ) -> bool:
        """Transform coordinate arrays from source to destination in place.

        Parameters
        ----------
        xs, ys : np.ndarray
            1D float64 arrays of x/longitude and y/latitude. Geographic
            coordinates are in degrees.
        zs : np.ndarray, optional
            1D float64 heights. Treated as zeros when omitted.

        Returns
        -------
        bool
            True on success. On failure the arrays keep their pre-call
            values.

        Raises
        ------
        ValidationError
            If the arrays are not 1D float64 arrays of equal length.
        """
        return self._transform(xs, ys, zs, inverse=False)

    def backward(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        zs: Optional[np.ndarray] = None,
    ) -> bool:
        """Transform coordinate arrays from destination to source in place.

        Mirror of ``forward``.
        """
        return self._transform(xs, ys, zs, inverse=True)

    def _closed_form(self, inverse: bool):
        """Closed-form formula for a shortcut strategy in one direction."""
        to_merc = self._strategy is TransformStrategy.WGS84_TO_MERC
        return lonlat2merc if to_merc != inverse else merc2lonlat

    def _transform(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        zs: Optional[np.ndarray],
        inverse: bool,
    ) -> bool:
        _check_arrays(xs, ys, zs)

        if self._strategy is TransformStrategy.IDENTITY or xs.size == 0:
            return True

        if self._strategy is not TransformStrategy.GENERAL:
            self._closed_form(inverse)(xs, ys)
            return True

        if inverse:
            src, dst = self._dest, self._source
            src_geo, dst_geo = self._is_dest_geographic, self._is_source_geographic
        else:
            src, dst = self._source, self._dest
            src_geo, dst_geo = self._is_source_geographic, self._is_dest_geographic

        # Work on copies so a failed batch never leaks into the caller's arrays
        work_x = xs.copy()
        work_y = ys.copy()
        work_z = zs.copy() if zs is not None else np.zeros_like(xs)

        if src_geo:
            np.radians(work_x, out=work_x)
            np.radians(work_y, out=work_y)

        if not self._backend.transform_batch(src, dst, work_x, work_y, work_z):
            logger.debug(
                "Transform '%s'->'%s' failed for batch of %d points",
                src.params, dst.params, xs.size,
            )
            return False

        if dst_geo:
            np.degrees(work_x, out=work_x)
            np.degrees(work_y, out=work_y)

        xs[:] = work_x
        ys[:] = work_y
        if zs is not None:
            zs[:] = work_z
        return True

    # ------------------------------------------------------------------
    # Scalars and points
    # ------------------------------------------------------------------

    def forward_xyz(
        self,
        x: float,
        y: float,
        z: float = 0.0,
    ) -> Optional[Tuple[float, float, float]]:
        """Transform a single coordinate from source to destination.

        Returns
        -------
        Tuple[float, float, float] or None
            ``(x, y, z)`` in the destination SRS, or None on failure.
        """
        return self._transform_xyz(x, y, z, inverse=False)

    def backward_xyz(
        self,
        x: float,
        y: float,
        z: float = 0.0,
    ) -> Optional[Tuple[float, float, float]]:
        """Transform a single coordinate from destination to source."""
        return self._transform_xyz(x, y, z, inverse=True)

    def _transform_xyz(
        self,
        x: float,
        y: float,
        z: float,
        inverse: bool,
    ) -> Optional[Tuple[float, float, float]]:
        xs = np.array([x], dtype=np.float64)
        ys = np.array([y], dtype=np.float64)
        zs = np.array([z], dtype=np.float64)
        if not self._transform(xs, ys, zs, inverse):
            return None
        return (float(xs[0]), float(ys[0]), float(zs[0]))

    def forward_point(self, point: Point) -> bool:
        """Transform *point* in place; unchanged on failure."""
        return self._transform_point(point, inverse=False)

    def backward_point(self, point: Point) -> bool:
        """Transform *point* back to the source SRS in place."""
        return self._transform_point(point, inverse=True)

    def _transform_point(self, point: Point, inverse: bool) -> bool:
        result = self._transform_xyz(point.x, point.y, point.z, inverse)
        if result is None:
            return False
        point.x, point.y, point.z = result
        return True

    # ------------------------------------------------------------------
    # Line strings
    # ------------------------------------------------------------------

    def forward_line(self, line: LineString) -> int:
        """Transform every vertex of *line* in place.

        Under the GENERAL strategy each vertex is transformed on its own;
        a failing vertex keeps its original coordinates and the remaining
        vertices are still attempted.

        Returns
        -------
        int
            Number of vertices that failed. Always 0 for the identity and
            shortcut strategies.
        """
        return self._transform_line(line, inverse=False)

    def backward_line(self, line: LineString) -> int:
        """Mirror of ``forward_line``."""
        return self._transform_line(line, inverse=True)

    def _transform_line(self, line: LineString, inverse: bool) -> int:
        if self._strategy is TransformStrategy.IDENTITY:
            return 0

        if self._strategy is not TransformStrategy.GENERAL:
            xs, ys, zs = line.to_arrays()
            self._closed_form(inverse)(xs, ys)
            line.assign_arrays(xs, ys, zs)
            return 0

        failed = 0
        for point in line:
            if not self._transform_point(point, inverse):
                failed += 1
        if failed:
            logger.debug(
                "%d of %d line string vertices failed to transform",
                failed, len(line),
            )
        return failed

    # ------------------------------------------------------------------
    # Boxes
    # ------------------------------------------------------------------

    def forward_box(self, box: Box2D, points: Optional[int] = None) -> bool:
        """Reproject *box* from source to destination in place.

        Parameters
        ----------
        box : Box2D
            Envelope to transform. Updated in place on success and left
            unmodified on failure.
        points : int, optional
            When omitted, only the two opposite corners are transformed.
            When given, the perimeter is densified to at least this many
            samples and the result is corrected for antimeridian crossing
            (see ``envelope_points``). Ignored by the shortcut strategies,
            whose formulas are monotonic per axis.

        Returns
        -------
        bool
            True on success.
        """
        if points is None:
            return self._transform_box(box, inverse=False)
        return self._transform_box_densified(box, points, inverse=False)

    def backward_box(self, box: Box2D, points: Optional[int] = None) -> bool:
        """Reproject *box* from destination to source in place.

        Mirror of ``forward_box``.
        """
        if points is None:
            return self._transform_box(box, inverse=True)
        return self._transform_box_densified(box, points, inverse=True)

    def _transform_box(self, box: Box2D, inverse: bool) -> bool:
        if self._strategy is TransformStrategy.IDENTITY:
            return True

        lower = self._transform_xyz(box.minx, box.miny, 0.0, inverse)
        if lower is None:
            return False
        upper = self._transform_xyz(box.maxx, box.maxy, 0.0, inverse)
        if upper is None:
            return False

        box.init(lower[0], lower[1], upper[0], upper[1])
        return True

    def _transform_box_densified(
        self,
        box: Box2D,
        points: int,
        inverse: bool,
    ) -> bool:
        if isinstance(points, bool) or not isinstance(points, (int, np.integer)):
            raise ValidationError(
                f"points must be an integer, got {type(points).__name__}"
            )

        if self._strategy is TransformStrategy.IDENTITY:
            return True
        if self._strategy is not TransformStrategy.GENERAL:
            return self._transform_box(box, inverse)

        # envelope_points is always clockwise
        xs, ys = envelope_points(box, int(points))
        for i in range(xs.size):
            result = self._transform_xyz(xs[i], ys[i], 0.0, inverse)
            if result is None:
                return False
            xs[i], ys[i] = result[0], result[1]

        result_box = calculate_bbox(xs, ys)

        dst_geo = self._is_source_geographic if inverse else self._is_dest_geographic
        if dst_geo and not is_clockwise(xs, ys):
            # Winding flipped in a geographic destination: the samples were
            # wrapped across the antimeridian. Span the full longitude range.
            miny = result_box.miny
            result_box.expand_to_include(-180.0, miny)
            result_box.expand_to_include(180.0, miny)

        cx, cy = result_box.center
        box.re_center(cx, cy)
        box.set_height(result_box.height)
        box.set_width(result_box.width)
        return True
