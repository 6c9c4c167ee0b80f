# -*- coding: utf-8 -*-
"""
pyproj Integration Tests - ProjTransform on top of PROJ.

Verifies the default ``PyprojBackend``: radians bridging against known
UTM coordinates, agreement of the general path with the closed-form
Mercator shortcut, per-vertex failures on out-of-domain input, and
antimeridian detection for a Mercator centered on 180 degrees.

Dependencies
------------
pytest
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

import pytest
import numpy as np

pyproj = pytest.importorskip('pyproj')

from projxform.exceptions import ConfigurationError
from projxform.geometry import Box2D, LineString
from projxform.projection.backend import PyprojBackend
from projxform.projection.srs import Projection
from projxform.projection.well_known import _ALIASES
from projxform.projection.transform import ProjTransform
from projxform.vocabulary import TransformStrategy


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def wgs84_to_utm():
    """WGS84 -> UTM zone 33N (central meridian 15 E)."""
    return ProjTransform(Projection('EPSG:4326'), Projection('EPSG:32633'))


@pytest.fixture
def general_merc():
    """WGS84 -> EPSG:3857 given as WKT, so the shortcut is not taken."""
    wkt = pyproj.CRS.from_epsg(3857).to_wkt()
    return ProjTransform(Projection('EPSG:4326'), Projection(wkt))


@pytest.fixture
def merc_180():
    """Mercator centered on the antimeridian -> WGS84."""
    src = Projection('+proj=merc +lon_0=180 +datum=WGS84 +units=m +no_defs')
    return ProjTransform(src, Projection('EPSG:4326'))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    """Test default backend construction."""

    def test_default_backend(self, wgs84_to_utm):
        assert wgs84_to_utm.strategy is TransformStrategy.GENERAL
        assert isinstance(wgs84_to_utm.backend, PyprojBackend)
        assert wgs84_to_utm.is_source_geographic
        assert not wgs84_to_utm.is_dest_geographic

    @pytest.mark.parametrize('alias', sorted(_ALIASES))
    def test_every_alias_builds_general(self, alias):
        """Lower-cased aliases resolve through their canonical EPSG code."""
        xform = ProjTransform(Projection(alias), Projection('EPSG:32633'))
        assert xform.strategy is TransformStrategy.GENERAL
        assert xform.source.init_backend() is not None
        assert xform.forward_box(Box2D(12.0, 40.0, 14.0, 42.0))

    def test_lowercase_crs84_resolves(self):
        crs = Projection('ogc:crs84').init_backend()
        assert crs.is_geographic
        assert crs == pyproj.CRS.from_epsg(4326)

    def test_unprepared_pair_rejected(self):
        backend = PyprojBackend()
        src = Projection('EPSG:4326')
        dst = Projection('EPSG:32633')
        with pytest.raises(ConfigurationError, match="not prepared"):
            backend.transform_batch(src, dst, np.zeros(1), np.zeros(1),
                                    np.zeros(1))


# ---------------------------------------------------------------------------
# Points and arrays
# ---------------------------------------------------------------------------

class TestPoints:
    """Test point transforms through PROJ."""

    def test_central_meridian(self, wgs84_to_utm):
        """(15 E, 0 N) is the false origin of UTM 33N."""
        x, y, _ = wgs84_to_utm.forward_xyz(15.0, 0.0)
        assert x == pytest.approx(500000.0, abs=1e-3)
        assert y == pytest.approx(0.0, abs=1e-3)

    def test_round_trip(self, wgs84_to_utm):
        lons = np.array([12.0, 15.0, 17.5])
        lats = np.array([40.0, 50.0, 60.0])
        xs, ys = lons.copy(), lats.copy()
        assert wgs84_to_utm.forward(xs, ys)
        assert np.all(xs > 100000.0)
        assert wgs84_to_utm.backward(xs, ys)
        np.testing.assert_allclose(xs, lons, atol=1e-8)
        np.testing.assert_allclose(ys, lats, atol=1e-8)

    def test_general_matches_shortcut(self, general_merc):
        """PROJ's web Mercator agrees with the closed-form formulas."""
        shortcut = ProjTransform(Projection('EPSG:4326'),
                                 Projection('EPSG:3857'))
        assert general_merc.strategy is TransformStrategy.GENERAL

        rng = np.random.default_rng(3)
        lons = rng.uniform(-179.0, 179.0, 50)
        lats = rng.uniform(-80.0, 80.0, 50)
        gx, gy = lons.copy(), lats.copy()
        sx, sy = lons.copy(), lats.copy()
        assert general_merc.forward(gx, gy)
        assert shortcut.forward(sx, sy)
        np.testing.assert_allclose(gx, sx, atol=1e-4)
        np.testing.assert_allclose(gy, sy, atol=1e-4)

    def test_out_of_domain_fails(self, wgs84_to_utm):
        xs = np.array([15.0, 15.0])
        ys = np.array([0.0, 100.0])
        assert not wgs84_to_utm.forward(xs, ys)
        np.testing.assert_array_equal(ys, [0.0, 100.0])

    def test_line_best_effort(self, wgs84_to_utm):
        line = LineString([(15.0, 0.0), (15.0, 100.0), (16.0, 1.0)])
        assert wgs84_to_utm.forward_line(line) == 1
        assert line[0].x == pytest.approx(500000.0, abs=1e-3)
        assert (line[1].x, line[1].y) == (15.0, 100.0)
        assert line[2].x > 500000.0


# ---------------------------------------------------------------------------
# Boxes
# ---------------------------------------------------------------------------

class TestBoxes:
    """Test simple and densified box transforms through PROJ."""

    def test_densified_covers_corners(self, wgs84_to_utm):
        """Densified result covers the two-corner result."""
        simple = Box2D(10.0, 45.0, 20.0, 55.0)
        dense = Box2D(10.0, 45.0, 20.0, 55.0)
        assert wgs84_to_utm.forward_box(simple)
        assert wgs84_to_utm.forward_box(dense, points=40)
        assert dense.minx <= simple.minx + 1e-6
        assert dense.maxx >= simple.maxx - 1e-6
        assert dense.maxy >= simple.maxy - 1e-6

    def test_antimeridian_crossing(self, merc_180):
        """A box straddling 180 degrees expands to the full longitude range."""
        box = Box2D(-1.0e6, 1.0e6, 1.0e6, 2.0e6)
        assert merc_180.forward_box(box, points=20)
        assert box.minx == pytest.approx(-180.0)
        assert box.maxx == pytest.approx(180.0)
        assert 0.0 < box.miny < box.maxy < 20.0

    def test_no_crossing(self, merc_180):
        """A box east of the antimeridian keeps its own extent."""
        box = Box2D(-3.0e6, 1.0e6, -2.0e6, 2.0e6)
        assert merc_180.forward_box(box, points=20)
        assert 150.0 < box.minx < box.maxx < 165.0
