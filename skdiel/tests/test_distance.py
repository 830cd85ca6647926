"""Unit test for TAD distances and sufficiency rules

"""

import unittest as ut
import numpy as np
import numpy.testing as npt
import xarray as xr
import skdiel.distance as distance
from skdiel.tests import daily_from_arrays


class TestTADDistance(ut.TestCase):
    def setUp(self):
        rng = np.random.default_rng(123)
        self.tads = rng.dirichlet(np.ones(8), size=20)

    def test_symmetry_identity(self):
        for a, b in zip(self.tads[:-1], self.tads[1:]):
            self.assertAlmostEqual(float(distance.tad_distance(a, b)),
                                   float(distance.tad_distance(b, a)))
            self.assertEqual(float(distance.tad_distance(a, a)), 0)

    def test_range(self):
        dists = distance.tad_distance(self.tads[:-1], self.tads[1:])
        self.assertEqual(dists.shape, (19,))
        self.assertTrue(((dists >= 0) & (dists <= 1)).all())
        disjoint = distance.tad_distance([1, 0, 0], [0, 0, 1])
        self.assertAlmostEqual(float(disjoint), 1)

    def test_dataarray(self):
        a = xr.DataArray(self.tads[:3], dims=("date", "depth_bin"))
        b = xr.DataArray(self.tads[3:6], dims=("date", "depth_bin"))
        dists = distance.tad_distance(a, b)
        self.assertTupleEqual(dists.dims, ("date",))
        expected = np.abs(self.tads[:3] - self.tads[3:6]).sum(axis=1) / 2
        npt.assert_allclose(dists, expected)

    def test_null_poisoning(self):
        dist = distance.tad_distance([0.5, np.nan, 0.5], [0.5, 0.5, 0])
        self.assertTrue(np.isnan(dist))


class TestDayDistances(ut.TestCase):
    def setUp(self):
        high = [[1, 0, 0], [0, 1, 0], [0, 0, 1], [0.5, 0.5, 0],
                [0, 0.5, 0.5]]
        low = [[0, 0, 1], [1, 0, 0], [0, 1, 0], [0, 1, 0], [1, 0, 0]]
        self.high_counts = [5, 1, 5, 5, 5]
        self.low_counts = [5, 5, 5, 5, 2]
        self.daily = daily_from_arrays([high, low], [self.high_counts,
                                                     self.low_counts])

    def test_intraday(self):
        intraday = distance.intraday_distance(self.daily)
        self.assertTupleEqual(intraday.dims, ("date",))
        npt.assert_allclose(intraday[[0, 2, 3]], [1, 1, 0.5])
        # Fewer than 3 hours in either phase
        self.assertTrue(np.isnan(intraday[1]))
        self.assertTrue(np.isnan(intraday[4]))
        # Lowering the threshold restores them
        intraday = distance.intraday_distance(self.daily, min_hours=1)
        self.assertFalse(intraday.isnull().any())

    def test_neighbor(self):
        neighbor = distance.neighbor_distances(self.daily)
        self.assertTupleEqual(neighbor.dims, ("phase", "lag", "date"))
        npt.assert_array_equal(neighbor["lag"], distance.LAGS)
        high = neighbor.sel(phase="high")
        # Day 2 vs day 3, high phase
        self.assertAlmostEqual(float(high.sel(lag=1)[2]), 1)
        self.assertAlmostEqual(float(high.sel(lag=-1)[3]), 1)
        self.assertAlmostEqual(float(high.sel(lag=2)[0]), 1)
        # Outside the span
        self.assertTrue(high.sel(lag=-1)[0].isnull())
        self.assertTrue(high.sel(lag=-2)[1].isnull())
        self.assertTrue(high.sel(lag=2)[3].isnull())
        # Day 1 has too few high hours: no high distances to or from it
        self.assertTrue(high.sel(lag=1)[0].isnull())
        self.assertTrue(high.sel(lag=-1)[2].isnull())
        self.assertTrue(high[:, 1].isnull().all())
        # Low phase at day 1 is fine
        low = neighbor.sel(phase="low")
        self.assertAlmostEqual(float(low.sel(lag=-1)[2]), 1)

    def test_fallback_second_neighbor(self):
        neighbor = distance.neighbor_distances(self.daily)
        gated = distance.fallback_neighbor_distance(self.daily, neighbor)
        self.assertTupleEqual(gated.dims, ("phase", "direction", "date"))
        prev_high = gated.sel(phase="high", direction="prev")
        # Previous day has 1 hour, the one before has 5: use lag -2
        self.assertAlmostEqual(float(prev_high[2]),
                               float(neighbor.sel(phase="high", lag=-2)[2]))
        self.assertAlmostEqual(float(prev_high[2]), 1)
        # Low phase has enough hours on the previous day: use lag -1
        prev_low = gated.sel(phase="low", direction="prev")
        self.assertAlmostEqual(float(prev_low[2]),
                               float(neighbor.sel(phase="low", lag=-1)[2]))
        # Next low for day 3: day 4 has 2 hours, beyond the span
        next_low = gated.sel(phase="low", direction="next")
        self.assertTrue(next_low[3].isnull())
        self.assertAlmostEqual(float(next_low[2]),
                               float(neighbor.sel(phase="low", lag=1)[2]))

    def test_fallback_both_insufficient(self):
        high = self.daily["tad_mean"].sel(phase="high").to_numpy()
        low = self.daily["tad_mean"].sel(phase="low").to_numpy()
        daily = daily_from_arrays([high, low], [[2, 1, 5, 5, 5],
                                                self.low_counts])
        neighbor = distance.neighbor_distances(daily)
        gated = distance.fallback_neighbor_distance(daily, neighbor)
        self.assertTrue(gated.sel(phase="high", direction="prev")[2]
                        .isnull())
        # Other directions are decided independently
        self.assertFalse(gated.sel(phase="high", direction="next")[2]
                         .isnull())
        self.assertFalse(gated.sel(phase="low", direction="prev")[2]
                         .isnull())


if __name__ == '__main__':
    ut.main()
