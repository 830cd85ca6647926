"""Light phase assignment from solar altitude

Two independent labellings are provided.  The first assigns a light phase
(day, night, dawn, dusk) to each location fix using fixed solar altitude
thresholds, and is useful as an auxiliary description of the track.  The
second is the one used for diel detection: solar altitude is aligned to
the half-hour mark of each hour, and each hour is labelled "high" or "low"
relative to the midrange altitude of its own calendar day.  Using a
day-relative threshold allows contrasting phases under continuous daylight
or darkness, when there is no sunrise or sunset.

.. autosummary::

   light_phase
   label_light_phases
   half_hour_grid
   align_half_hourly
   daily_midrange
   label_high_low
   hour_labels

"""

import logging
import numpy as np
import pandas as pd
from skdiel.solar import solar_altitude, solar_altitudes
from skdiel.helpers import _as_utc_index, _check_numeric

__all__ = ["DAY_ALTITUDE", "NIGHT_ALTITUDE", "LIGHT_PHASES", "HL_PHASES",
           "light_phase", "label_light_phases", "half_hour_grid",
           "align_half_hourly", "daily_midrange", "label_high_low",
           "hour_labels"]

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

# Upper limb at the horizon, with standard refraction
DAY_ALTITUDE = -0.83
# End of astronomical twilight
NIGHT_ALTITUDE = -18.0
LIGHT_PHASES = ["day", "dawn", "dusk", "night"]
HL_PHASES = ["high", "low"]
_TWILIGHT_LAG = "10min"


def _check_locations(locations, latitude_name="latitude",
                     longitude_name="longitude"):
    """Validate location fixes and return a clean, sorted copy

    Parameters
    ----------
    locations : pandas.DataFrame
        Time-indexed location fixes.
    latitude_name, longitude_name : str, optional
        Names of the coordinate columns.

    Returns
    -------
    pandas.DataFrame
        Columns ``latitude`` and ``longitude``, with a UTC
        timezone-naive index named "time".

    """
    missing = [x for x in [latitude_name, longitude_name]
               if x not in locations.columns]
    if missing:
        msg = "Location columns not found: {}".format(missing)
        logger.error(msg)
        raise LookupError(msg)

    locs = pd.DataFrame({"latitude": locations[latitude_name].to_numpy(),
                         "longitude": locations[longitude_name].to_numpy()},
                        index=_as_utc_index(locations.index))
    _check_numeric(locs["latitude"], "latitude")
    _check_numeric(locs["longitude"], "longitude")
    locs.index.name = "time"

    return locs.sort_index()


def light_phase(altitude, altitude_later):
    """Classify solar altitudes into light phases

    Altitudes above :data:`DAY_ALTITUDE` are ``day``, those at or below
    :data:`NIGHT_ALTITUDE` are ``night``, and the rest are twilight:
    ``dusk`` if the sun is setting (lower altitude 10 minutes later),
    ``dawn`` otherwise.

    Parameters
    ----------
    altitude : array_like
        Solar altitude (degrees) at each time.
    altitude_later : array_like
        Solar altitude (degrees) 10 minutes after each time.

    Returns
    -------
    pandas.Categorical

    Examples
    --------
    >>> light_phase([10, -5, -5, -30, np.nan], [11, -6, -4, -31, 0])
    ['day', 'dusk', 'dawn', 'night', NaN]
    Categories (4, object): ['day', 'dawn', 'dusk', 'night']

    """
    alt = np.asarray(altitude, dtype=float)
    alt_later = np.asarray(altitude_later, dtype=float)
    labels = np.full(alt.shape, "dawn", dtype=object)
    labels[alt_later < alt] = "dusk"
    labels[alt <= NIGHT_ALTITUDE] = "night"
    labels[alt > DAY_ALTITUDE] = "day"
    labels[np.isnan(alt)] = None

    return pd.Categorical(labels, categories=LIGHT_PHASES)


def label_light_phases(locations, solar_fun=solar_altitude, **kwargs):
    """Light phase of each location fix

    Parameters
    ----------
    locations : pandas.DataFrame
        Time-indexed location fixes.
    solar_fun : callable, optional
        Solar position provider (see :func:`~skdiel.solar.solar_altitude`).
    **kwargs : optional keyword arguments
        Column names passed to the location validator (`latitude_name`,
        `longitude_name`).

    Returns
    -------
    pandas.DataFrame
        Columns ``altitude``, ``altitude_later`` and ``phase``, indexed as
        the (sorted) fixes.

    """
    locs = _check_locations(locations, **kwargs)
    alt = solar_altitudes(locs.index, locs["latitude"], locs["longitude"],
                          solar_fun=solar_fun)
    alt_later = solar_altitudes(locs.index, locs["latitude"],
                                locs["longitude"], solar_fun=solar_fun,
                                offset=_TWILIGHT_LAG)
    phases = pd.DataFrame({"altitude": alt, "altitude_later": alt_later},
                          index=locs.index)
    phases["phase"] = light_phase(alt, alt_later)

    logger.info("Finished labelling light phases")

    return phases


def half_hour_grid(start, end):
    """Hourly half-hour marks spanning a time interval

    The grid begins at the first HH:30 mark at or after `start`, and ends
    at the last one at or before `end`.  An hour whose :30 mark falls after
    `end` is left out, so with fixes at HH:20 the last hour of the track
    gets no label.

    Parameters
    ----------
    start, end : datetime-like

    Returns
    -------
    pandas.DatetimeIndex

    Examples
    --------
    >>> half_hour_grid("2020-01-01 10:15", "2020-01-01 12:10")
    ... # doctest: +NORMALIZE_WHITESPACE
    DatetimeIndex(['2020-01-01 10:30:00', '2020-01-01 11:30:00'],
                  dtype='datetime64[ns]', freq='h')

    """
    half = pd.Timedelta("30min")
    first = (pd.Timestamp(start) - half).ceil("h") + half
    last = (pd.Timestamp(end) - half).floor("h") + half
    grid = pd.date_range(first, last, freq="h")

    return grid.astype("datetime64[ns]")


def align_half_hourly(solar, tolerance=None):
    """Align solar altitude samples onto the half-hour grid

    Each half-hour mark takes the value of the nearest solar sample in
    time; there is no interpolation.

    Parameters
    ----------
    solar : pandas.Series
        Solar altitude indexed by time of each location fix.
    tolerance : str or pandas.Timedelta, optional
        Maximum time distance to the nearest sample.  Marks without a
        sample within this distance get a null altitude.  Default is no
        limit.

    Returns
    -------
    pandas.Series
        Altitude indexed by half-hour mark.

    """
    solar = solar.dropna().sort_index()
    if solar.empty:
        return pd.Series([], index=pd.DatetimeIndex([], name="time"),
                         name="altitude", dtype=float)

    grid = half_hour_grid(solar.index[0], solar.index[-1])
    left = pd.DataFrame({"time": grid})
    right = pd.DataFrame({"time": solar.index.astype("datetime64[ns]"),
                          "altitude": solar.to_numpy(dtype=float)})
    if tolerance is not None:
        tolerance = pd.Timedelta(tolerance)
    aligned = pd.merge_asof(left, right, on="time", direction="nearest",
                            tolerance=tolerance)

    return aligned.set_index("time")["altitude"]


def daily_midrange(aligned):
    """Midrange of half-hourly solar altitude for each calendar day

    Parameters
    ----------
    aligned : pandas.Series
        Output of :func:`align_half_hourly`.

    Returns
    -------
    pandas.Series
        Midrange altitude indexed by date.

    """
    grp = aligned.groupby(aligned.index.normalize())
    midrange = (grp.max() + grp.min()) / 2
    midrange.index.name = "date"

    return midrange.rename("midrange")


def label_high_low(aligned):
    """Label each hour as high or low solar altitude

    An hour is "high" when the altitude aligned to its half-hour mark is
    strictly greater than its day's midrange altitude, and "low"
    otherwise.  Hours without an aligned altitude are left unlabelled.

    Parameters
    ----------
    aligned : pandas.Series
        Output of :func:`align_half_hourly`.

    Returns
    -------
    pandas.DataFrame
        Columns ``altitude``, ``midrange`` and ``phase`` indexed by hour
        (truncated to HH:00).

    """
    midrange = daily_midrange(aligned)
    days = aligned.index.normalize()
    mid = midrange.reindex(days).to_numpy()
    alt = aligned.to_numpy(dtype=float)
    labels = np.where(alt > mid, "high", "low").astype(object)
    labels[np.isnan(alt) | np.isnan(mid)] = None

    hours = pd.DatetimeIndex(aligned.index.floor("h"), name="hour")
    out = pd.DataFrame({"altitude": alt, "midrange": mid}, index=hours)
    out["phase"] = pd.Categorical(labels, categories=HL_PHASES)

    return out


def hour_labels(locations, solar_fun=solar_altitude, tolerance=None,
                **kwargs):
    """High/low solar altitude label of each hour spanned by a track

    Parameters
    ----------
    locations : pandas.DataFrame
        Time-indexed location fixes.
    solar_fun : callable, optional
        Solar position provider (see :func:`~skdiel.solar.solar_altitude`).
    tolerance : str or pandas.Timedelta, optional
        Passed to :func:`align_half_hourly`.
    **kwargs : optional keyword arguments
        Column names passed to the location validator (`latitude_name`,
        `longitude_name`).

    Returns
    -------
    pandas.DataFrame
        See :func:`label_high_low`.

    """
    locs = _check_locations(locations, **kwargs)
    alt = solar_altitudes(locs.index, locs["latitude"], locs["longitude"],
                          solar_fun=solar_fun)
    solar = pd.Series(alt, index=locs.index, name="altitude")
    aligned = align_half_hourly(solar, tolerance=tolerance)
    labels = label_high_low(aligned)

    logger.info("Finished labelling high/low solar altitude hours")

    return labels
