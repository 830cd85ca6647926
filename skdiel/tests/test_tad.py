"""Unit test for TAD binning

"""

import unittest as ut
import numpy as np
import numpy.testing as npt
import pandas as pd
from skdiel.tad import TAD_BOUNDS, depth_bin, hourly_tad
from skdiel.tests import synthetic_dataset


class TestDepthBin(ut.TestCase):
    def setUp(self):
        self.depths = np.linspace(-10, 2000, 4021)

    def test_total(self):
        bins = depth_bin(self.depths)
        self.assertTrue(np.isin(bins, TAD_BOUNDS).all())

    def test_monotonic(self):
        bins = depth_bin(self.depths)
        self.assertTrue((np.diff(bins) >= 0).all())

    def test_bounds_inclusive(self):
        npt.assert_array_equal(depth_bin(TAD_BOUNDS[:-1]),
                               TAD_BOUNDS[:-1])
        npt.assert_array_equal(depth_bin([20.01, 500.01, 1e4]),
                               [50, 1000, 1000])
        npt.assert_array_equal(depth_bin([-5, 0]), [20, 20])


class TestHourlyTAD(ut.TestCase):
    def setUp(self):
        self.idx = pd.date_range("2020-01-01", periods=96, freq="75s")

    def test_complete_hours(self):
        depth = pd.Series(np.linspace(0, 700, 96), index=self.idx)
        tad = hourly_tad(depth, interval="75s")
        self.assertEqual(tad.shape, (2, len(TAD_BOUNDS)))
        npt.assert_allclose(tad.sum(axis=1), 1)
        self.assertListEqual(tad.columns.tolist(), list(TAD_BOUNDS))

    def test_incomplete_hour(self):
        depth = pd.Series(np.full(96, 30.0), index=self.idx)
        # Drop samples from the second hour, and make some null
        depth = depth.iloc[:60].copy()
        depth.iloc[:6] = np.nan
        tad = hourly_tad(depth, interval="75s")
        npt.assert_allclose(tad.sum(axis=1), [42 / 48, 12 / 48])
        npt.assert_allclose(tad[50], [42 / 48, 12 / 48])

    def test_interval_from_attrs(self):
        ds = synthetic_dataset(n_days=1)
        tad = hourly_tad(ds["depth"])
        self.assertEqual(tad.shape[0], 24)
        npt.assert_allclose(tad.sum(axis=1), 1)
        # Deep hours are in the 300 m bin
        npt.assert_allclose(tad[300].to_numpy()[6:18], 1)
        npt.assert_allclose(tad[20].to_numpy()[:6], 1)

    def test_missing_interval(self):
        depth = pd.Series(np.ones(96), index=self.idx)
        self.assertRaises(LookupError, hourly_tad, depth)

    def test_non_numeric_depth(self):
        depth = pd.Series(["a"] * 96, index=self.idx)
        self.assertRaises(TypeError, hourly_tad, depth, interval="75s")

    def test_empty(self):
        depth = pd.Series(np.full(96, np.nan), index=self.idx)
        tad = hourly_tad(depth, interval="75s")
        self.assertEqual(tad.shape, (0, len(TAD_BOUNDS)))


if __name__ == '__main__':
    ut.main()
