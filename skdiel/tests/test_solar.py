"""Unit test for the solar position provider

"""

import unittest as ut
import numpy.testing as npt
import pandas as pd
from skdiel.solar import solar_altitude, solar_altitudes


class TestSolar(ut.TestCase):
    def setUp(self):
        # Near the March equinox, at the equator and prime meridian
        self.noon = pd.Timestamp("2020-03-20 12:00")
        self.midnight = pd.Timestamp("2020-03-20 00:00")

    def test_altitude(self):
        self.assertGreater(solar_altitude(self.noon, 0, 0), 85)
        self.assertLess(solar_altitude(self.midnight, 0, 0), -85)

    def test_timezone(self):
        noon_tz = self.noon.tz_localize("UTC").tz_convert("Asia/Tokyo")
        self.assertAlmostEqual(solar_altitude(self.noon, 60, 20),
                               solar_altitude(noon_tz, 60, 20))

    def test_polar_summer(self):
        # Sun does not set at 78N in late June
        times = pd.date_range("2020-06-21", periods=24, freq="h")
        alts = solar_altitudes(times, [78] * 24, [15] * 24)
        self.assertTrue((alts > 0).all())

    def test_offset(self):
        times = pd.DatetimeIndex([self.noon])
        later = solar_altitudes(times, [45], [0], offset="10min")
        npt.assert_allclose(later, [solar_altitude(self.noon +
                                                   pd.Timedelta("10min"),
                                                   45, 0)])


if __name__ == '__main__':
    ut.main()
