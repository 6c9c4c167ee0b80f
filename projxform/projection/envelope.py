# -*- coding: utf-8 -*-
"""
Envelope Utilities - Perimeter sampling and winding tests for boxes.

Helpers for the robust (densified) envelope transform. ``envelope_points``
always walks the box perimeter clockwise, so after reprojection a change
of winding reveals that the samples were wrapped across the antimeridian.

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
from typing import Tuple

# Third-party
import numpy as np

# projxform internal
from projxform.exceptions import ValidationError
from projxform.geometry import Box2D


def envelope_steps(points: int) -> int:
    """Number of samples per box side for a requested sample count.

    ``ceil(max(points - 4, 0) / 4) + 1``, so at least one sample (the
    corner) per side. The total is ``4 * steps``, i.e. *points* rounded up
    to a multiple of four, with a minimum of four.
    """
    if points <= 4:
        return 1
    return int(math.ceil((points - 4) / 4.0)) + 1


def envelope_points(box: Box2D, points: int) -> Tuple[np.ndarray, np.ndarray]:
    """Sample the perimeter of *box* in clockwise order.

    Starts at the top-left corner and proceeds along the top edge (left to
    right), the right edge (top to bottom), the bottom edge (right to left)
    and the left edge (bottom to top). Each side contributes its leading
    corner and ``steps - 1`` evenly spaced interior samples.

    Parameters
    ----------
    box : Box2D
        Envelope to sample. Zero width or height is allowed.
    points : int
        Requested number of samples (lower bound).

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``(xs, ys)`` float64 arrays of length ``4 * envelope_steps(points)``.
    """
    steps = envelope_steps(points)
    xstep = box.width / steps
    ystep = box.height / steps
    i = np.arange(steps, dtype=np.float64)

    # top: left>right
    top_x = box.minx + i * xstep
    top_y = np.full(steps, box.maxy)
    # right: top>bottom
    right_x = np.full(steps, box.maxx)
    right_y = box.maxy - i * ystep
    # bottom: right>left
    bottom_x = box.maxx - i * xstep
    bottom_y = np.full(steps, box.miny)
    # left: bottom>top
    left_x = np.full(steps, box.minx)
    left_y = box.miny + i * ystep

    xs = np.concatenate([top_x, right_x, bottom_x, left_x])
    ys = np.concatenate([top_y, right_y, bottom_y, left_y])
    return xs, ys


def shoelace_sum(xs: np.ndarray, ys: np.ndarray) -> float:
    """Twice the signed area of the closed polygon ``(xs, ys)``.

    Positive for counterclockwise vertices (y axis up), negative for
    clockwise.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    return float(np.sum(xs * np.roll(ys, -1) - np.roll(xs, -1) * ys))


def is_clockwise(xs: np.ndarray, ys: np.ndarray) -> bool:
    """Return True if the cyclic vertex sequence winds clockwise.

    Degenerate (zero-area) sequences count as clockwise.
    """
    return shoelace_sum(xs, ys) <= 0.0


def calculate_bbox(xs: np.ndarray, ys: np.ndarray) -> Box2D:
    """Axis-aligned bounding box of a set of samples.

    Raises
    ------
    ValidationError
        If fewer than two samples are given.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if xs.size < 2 or ys.size != xs.size:
        raise ValidationError(
            f"Bounding box needs at least 2 paired samples, got "
            f"{xs.size} x and {ys.size} y values"
        )
    return Box2D(
        float(np.min(xs)), float(np.min(ys)),
        float(np.max(xs)), float(np.max(ys)),
    )
