"""scikit-diel tests"""

import numpy as np
import pandas as pd
import xarray as xr

START = "2020-06-01"
# Hours with the sun above the daily midrange under `synthetic_solar`, for
# fixes taken 20 minutes past each hour
HIGH_HOURS = np.arange(6, 18)


def synthetic_solar(timestamp, latitude, longitude, offset=-10,
                    amplitude=40):
    """Deterministic solar altitude with a 24 h cosine cycle

    Altitude peaks at local solar noon, using longitude to shift UTC time.
    Latitude is accepted for signature compatibility but ignored.

    Parameters
    ----------
    timestamp : datetime-like
    latitude, longitude : float
    offset : float, optional
        Daily mean altitude.
    amplitude : float, optional
        Half the daily altitude range.

    Returns
    -------
    float

    """
    ts = pd.Timestamp(timestamp)
    hour = (ts.hour + ts.minute / 60 + ts.second / 3600 +
            float(longitude) / 15)
    return offset + amplitude * np.cos(2 * np.pi * (hour - 12) / 24)


def polar_day_solar(timestamp, latitude, longitude):
    """Solar altitude that never sets, for continuous daylight"""
    return synthetic_solar(timestamp, latitude, longitude, offset=20,
                           amplitude=10)


def synthetic_depth(n_days=15, diel_days=None, interval="75s",
                    deep=250.0, shallow=10.0, start=START):
    """Depth record switching depth with the high solar altitude phase

    On diel days, depth is `deep` during :data:`HIGH_HOURS` and `shallow`
    otherwise.  Other days are spent at `shallow` depth throughout.

    Parameters
    ----------
    n_days : int, optional
        Number of calendar days.
    diel_days : array_like, optional
        Zero-based indices of the diel days.  Default is all days.
    interval : str, optional
        Sampling interval.
    deep, shallow : float, optional
        Depths of each phase.
    start : str, optional
        First day.

    Returns
    -------
    pandas.Series

    """
    if diel_days is None:
        diel_days = np.arange(n_days)
    intvl = pd.Timedelta(interval)
    times = pd.date_range(start, periods=int(n_days * pd.Timedelta("1D") /
                                             intvl),
                          freq=intvl, name="timestamp")
    day_idx = (times.normalize() - pd.Timestamp(start)).days
    is_deep = (np.isin(day_idx, diel_days) &
               np.isin(times.hour, HIGH_HOURS))
    depth = np.where(is_deep, deep, shallow)

    return pd.Series(depth, index=times, name="depth")


def synthetic_dataset(interval="75s", **kwargs):
    """Dataset with depth record from :func:`synthetic_depth`

    Parameters
    ----------
    interval : str, optional
        Sampling interval.
    **kwargs : optional keyword arguments
        Passed to :func:`synthetic_depth`.

    Returns
    -------
    xarray.Dataset

    """
    depth = synthetic_depth(interval=interval, **kwargs).to_xarray()
    depth.attrs = dict(units="m",
                       sampling_rate=pd.Timedelta(interval).total_seconds(),
                       sampling_rate_units="s")
    return xr.Dataset({"depth": depth},
                      attrs=dict(animal_species_common="synthetic"))


def synthetic_locations(n_days=15, start=START, latitude=45.0,
                        longitude=0.0, minute=20):
    """Hourly location fixes at a fixed position

    Parameters
    ----------
    n_days : int, optional
        Number of calendar days.
    start : str, optional
        First day.
    latitude, longitude : float, optional
        Position of every fix.
    minute : int, optional
        Minute past each hour of the fixes.

    Returns
    -------
    pandas.DataFrame

    """
    times = pd.date_range(pd.Timestamp(start) + pd.Timedelta(minutes=minute),
                          periods=n_days * 24, freq="h", name="timestamp")
    return pd.DataFrame({"latitude": latitude, "longitude": longitude},
                        index=times)


def daily_from_arrays(tad_mean, hour_count, start=START):
    """Build a daily phase Dataset from plain arrays

    Parameters
    ----------
    tad_mean : array_like
        Mean TAD with shape (2, n_days, n_bins), phases ordered as
        ("high", "low").
    hour_count : array_like
        Hour counts with shape (2, n_days).
    start : str, optional
        First day.

    Returns
    -------
    xarray.Dataset

    """
    tad_mean = np.asarray(tad_mean, dtype=float)
    ndays, nbins = tad_mean.shape[1:]
    dates = pd.date_range(start, periods=ndays, freq="D", name="date")
    return xr.Dataset({"tad_mean": (("phase", "date", "depth_bin"),
                                    tad_mean),
                       "hour_count": (("phase", "date"),
                                      np.asarray(hour_count, dtype=int))},
                      coords={"phase": ["high", "low"], "date": dates,
                              "depth_bin": np.arange(nbins)})
