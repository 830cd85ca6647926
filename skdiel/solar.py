"""Solar position provider

The diel algorithm only needs solar altitude (elevation) above the horizon
for arbitrary UTC timestamps at given coordinates.  The default provider
relies on :func:`astral.sun.elevation`, but any callable with the
signature of :func:`solar_altitude` can be supplied to functions accepting
a `solar_fun` argument.

.. autosummary::

   solar_altitude
   solar_altitudes

"""

import datetime
import numpy as np
import pandas as pd
from astral import Observer
from astral.sun import elevation

__all__ = ["solar_altitude", "solar_altitudes"]


def solar_altitude(timestamp, latitude, longitude):
    """Solar altitude in degrees at a given time and place

    Parameters
    ----------
    timestamp : datetime-like
        UTC time.  Naive timestamps are taken to be in UTC.
    latitude : float
        Latitude in decimal degrees.
    longitude : float
        Longitude in decimal degrees.

    Returns
    -------
    float

    """
    ts = pd.Timestamp(timestamp)
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")
    observer = Observer(latitude=float(latitude),
                        longitude=float(longitude))
    dtime = ts.to_pydatetime().astimezone(datetime.timezone.utc)
    return elevation(observer, dtime)


def solar_altitudes(times, latitude, longitude, solar_fun=solar_altitude,
                    offset=None):
    """Evaluate solar altitude along a track

    Parameters
    ----------
    times : pandas.DatetimeIndex
        UTC times of each location fix.
    latitude, longitude : array_like
        Coordinates of each fix, same length as `times`.
    solar_fun : callable, optional
        Provider with the signature of :func:`solar_altitude`.
    offset : str or pandas.Timedelta, optional
        Shift added to each time before evaluation (e.g. "10min").

    Returns
    -------
    numpy.ndarray

    """
    if offset is not None:
        times = times + pd.Timedelta(offset)
    alts = [solar_fun(t, lat, lon) for t, lat, lon
            in zip(times, latitude, longitude)]
    return np.asarray(alts, dtype=float)
