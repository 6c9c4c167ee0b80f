# -*- coding: utf-8 -*-
"""
Geometry - Plain data carriers transformed by ``ProjTransform``.

Provides ``Point`` (x, y, z), ``LineString`` (ordered sequence of points)
and ``Box2D`` (axis-aligned envelope). These types carry coordinates only;
they have no notion of the spatial reference system they are expressed in.

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
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

# Third-party
import numpy as np


@dataclass
class Point:
    """Mutable coordinate, transformed in place.

    Parameters
    ----------
    x : float
        Easting or longitude.
    y : float
        Northing or latitude.
    z : float
        Height. Defaults to 0.0.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class LineString:
    """Ordered sequence of ``Point`` vertices.

    Parameters
    ----------
    points : iterable of Point or (x, y) / (x, y, z) tuples, optional
        Initial vertices. Order is preserved.
    """

    def __init__(
        self,
        points: Iterable[Union[Point, Tuple[float, ...]]] = (),
    ) -> None:
        self._points: List[Point] = [
            p if isinstance(p, Point) else Point(*p) for p in points
        ]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineString):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"LineString({self._points!r})"

    def append(self, point: Point) -> None:
        """Append a vertex."""
        self._points.append(point)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(xs, ys, zs)`` float64 copies of the vertices."""
        xs = np.array([p.x for p in self._points], dtype=np.float64)
        ys = np.array([p.y for p in self._points], dtype=np.float64)
        zs = np.array([p.z for p in self._points], dtype=np.float64)
        return xs, ys, zs

    def assign_arrays(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        zs: np.ndarray,
    ) -> None:
        """Write coordinate arrays back into the existing vertices."""
        for p, x, y, z in zip(self._points, xs, ys, zs):
            p.x = float(x)
            p.y = float(y)
            p.z = float(z)


class Box2D:
    """Axis-aligned bounding box.

    Extents are normalized on construction and on ``init`` so that
    ``minx <= maxx`` and ``miny <= maxy``.

    Parameters
    ----------
    minx, miny, maxx, maxy : float
        Box extents. Swapped corners are accepted and normalized.
    """

    def __init__(
        self,
        minx: float = 0.0,
        miny: float = 0.0,
        maxx: float = 0.0,
        maxy: float = 0.0,
    ) -> None:
        self.init(minx, miny, maxx, maxy)

    def init(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Reset the extents from two opposite corners."""
        self.minx = float(min(x0, x1))
        self.maxx = float(max(x0, x1))
        self.miny = float(min(y0, y1))
        self.maxy = float(max(y0, y1))

    @property
    def width(self) -> float:
        return self.maxx - self.minx

    @property
    def height(self) -> float:
        return self.maxy - self.miny

    @property
    def center(self) -> Tuple[float, float]:
        return (0.5 * (self.minx + self.maxx), 0.5 * (self.miny + self.maxy))

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """``(minx, miny, maxx, maxy)``."""
        return (self.minx, self.miny, self.maxx, self.maxy)

    def set_width(self, width: float) -> None:
        """Resize horizontally about the current center."""
        cx = 0.5 * (self.minx + self.maxx)
        half = 0.5 * width
        self.minx = cx - half
        self.maxx = cx + half

    def set_height(self, height: float) -> None:
        """Resize vertically about the current center."""
        cy = 0.5 * (self.miny + self.maxy)
        half = 0.5 * height
        self.miny = cy - half
        self.maxy = cy + half

    def re_center(self, cx: float, cy: float) -> None:
        """Move the box so its center is ``(cx, cy)``, keeping its size."""
        dx = cx - 0.5 * (self.minx + self.maxx)
        dy = cy - 0.5 * (self.miny + self.maxy)
        self.minx += dx
        self.maxx += dx
        self.miny += dy
        self.maxy += dy

    def expand_to_include(self, x: float, y: float) -> None:
        """Grow the box to cover the point ``(x, y)``."""
        self.minx = min(self.minx, x)
        self.maxx = max(self.maxx, x)
        self.miny = min(self.miny, y)
        self.maxy = max(self.maxy, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box2D):
            return NotImplemented
        return self.bounds == other.bounds

    def __repr__(self) -> str:
        return (
            f"Box2D({self.minx!r}, {self.miny!r}, "
            f"{self.maxx!r}, {self.maxy!r})"
        )
