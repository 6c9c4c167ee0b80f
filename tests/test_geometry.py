# -*- coding: utf-8 -*-
"""
Geometry Tests - Point, LineString and Box2D data carriers.

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

import pytest
import numpy as np

from projxform.geometry import Box2D, LineString, Point


# ---------------------------------------------------------------------------
# Box2D
# ---------------------------------------------------------------------------

class TestBox2D:
    """Test Box2D construction and in-place resizing."""

    def test_swapped_corners_normalized(self):
        """Corners given max-first are normalized to min <= max."""
        box = Box2D(10.0, 20.0, -10.0, -20.0)
        assert box.bounds == (-10.0, -20.0, 10.0, 20.0)

    def test_width_height_center(self):
        box = Box2D(0.0, 0.0, 4.0, 2.0)
        assert box.width == 4.0
        assert box.height == 2.0
        assert box.center == (2.0, 1.0)

    def test_re_center_keeps_size(self):
        """re_center moves the box without changing its extent."""
        box = Box2D(0.0, 0.0, 4.0, 2.0)
        box.re_center(10.0, 10.0)
        assert box.bounds == (8.0, 9.0, 12.0, 11.0)

    def test_set_width_and_height_about_center(self):
        box = Box2D(0.0, 0.0, 4.0, 2.0)
        box.set_width(8.0)
        box.set_height(6.0)
        assert box.bounds == (-2.0, -2.0, 6.0, 4.0)

    def test_expand_to_include(self):
        box = Box2D(0.0, 0.0, 1.0, 1.0)
        box.expand_to_include(-180.0, 0.5)
        box.expand_to_include(180.0, 2.0)
        assert box.bounds == (-180.0, 0.0, 180.0, 2.0)

    def test_equality(self):
        assert Box2D(0, 0, 1, 1) == Box2D(1, 1, 0, 0)
        assert Box2D(0, 0, 1, 1) != Box2D(0, 0, 1, 2)

    def test_surface_limited_to_engine_needs(self):
        """Box2D carries only what the envelope transforms use."""
        assert not hasattr(Box2D, 'contains')


# ---------------------------------------------------------------------------
# LineString
# ---------------------------------------------------------------------------

class TestLineString:
    """Test LineString construction and array round trip."""

    def test_from_tuples(self):
        line = LineString([(1.0, 2.0), (3.0, 4.0, 5.0)])
        assert len(line) == 2
        assert line[0] == Point(1.0, 2.0, 0.0)
        assert line[1] == Point(3.0, 4.0, 5.0)

    def test_empty(self):
        line = LineString()
        assert len(line) == 0
        xs, ys, zs = line.to_arrays()
        assert xs.shape == (0,)

    def test_assign_arrays_updates_existing_points(self):
        """assign_arrays writes through to the same Point objects."""
        p = Point(1.0, 1.0)
        line = LineString([p, Point(2.0, 2.0)])
        xs, ys, zs = line.to_arrays()
        line.assign_arrays(xs * 10, ys * 10, zs)
        assert p.x == 10.0
        assert line[1].y == 20.0

    def test_append(self):
        line = LineString()
        line.append(Point(1.0, 2.0))
        assert len(line) == 1
        assert list(line) == [Point(1.0, 2.0)]

    def test_to_arrays_dtype(self):
        line = LineString([(1, 2), (3, 4)])
        xs, ys, zs = line.to_arrays()
        assert xs.dtype == np.float64
        np.testing.assert_array_equal(ys, [2.0, 4.0])
        np.testing.assert_array_equal(zs, [0.0, 0.0])
