r"""Distances between daily TAD distributions

The distance between two TAD vectors :math:`a` and :math:`b` is half their
Manhattan (cityblock) distance:

.. math::

   D(a, b) = \frac{1}{2} \sum_{i} |a_i - b_i|

which is the proportion of time reallocated between depth bins.  It is
used within days, between the high and low solar altitude phases, and
across days, between the same phase on a day and on its neighbours.

Distances built from phases with fewer than `min_hours` hours are null,
and so is any distance involving a missing day.

.. autosummary::

   tad_distance
   intraday_distance
   neighbor_distances
   fallback_neighbor_distance

"""

import logging
import pandas as pd
import xarray as xr
from scipy.spatial import distance

__all__ = ["LAGS", "MIN_HOURS", "tad_distance", "intraday_distance",
           "neighbor_distances", "fallback_neighbor_distance"]

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

LAGS = (-2, -1, 1, 2)
MIN_HOURS = 3
# Direction: (primary lag, fallback lag)
_DIRECTIONS = {"prev": (-1, -2), "next": (1, 2)}


def tad_distance(a, b, dim="depth_bin"):
    """Halved Manhattan distance between TAD vectors

    Parameters
    ----------
    a, b : xarray.DataArray or array_like
        TAD vectors, broadcast against each other.  For DataArrays, the
        vectors lie along `dim`; for arrays, along the last axis.
    dim : str, optional
        Name of the depth bin dimension.

    Returns
    -------
    xarray.DataArray or numpy.ndarray
        Null wherever either vector has null values.

    Examples
    --------
    >>> float(tad_distance([0.5, 0.5, 0], [0, 0.5, 0.5]))
    0.5

    """
    dist = xr.apply_ufunc(distance.cityblock, a, b,
                          input_core_dims=[[dim], [dim]],
                          vectorize=True, output_dtypes=[float])
    return dist / 2


def _enough_hours(daily, min_hours):
    return daily["hour_count"] >= min_hours


def intraday_distance(daily, min_hours=MIN_HOURS):
    """Distance between high and low phase TAD within each day

    Parameters
    ----------
    daily : xarray.Dataset
        Output of :func:`~skdiel.dailyphase.daily_phase_means`.
    min_hours : int, optional
        Minimum number of hours in each phase for the distance to be
        defined.

    Returns
    -------
    xarray.DataArray
        Distance along the date dimension.

    """
    means = daily["tad_mean"]
    dist = tad_distance(means.sel(phase="high", drop=True),
                        means.sel(phase="low", drop=True))
    enough = _enough_hours(daily, min_hours).all("phase")

    return dist.where(enough).rename("intraday_dist")


def neighbor_distances(daily, lags=LAGS, min_hours=MIN_HOURS):
    """Distance between each day and its neighbours, phase by phase

    The neighbour at lag `k` of a day is the day `k` calendar days later
    (earlier for negative `k`).  Neighbours falling outside the date span
    are missing.

    Parameters
    ----------
    daily : xarray.Dataset
        Output of :func:`~skdiel.dailyphase.daily_phase_means`.
    lags : sequence of int, optional
        Day offsets to compare against.
    min_hours : int, optional
        Minimum number of hours in a phase, on both days, for the
        distance to be defined.

    Returns
    -------
    xarray.DataArray
        Distances with dimensions (phase, lag, date).

    """
    means = daily["tad_mean"]
    enough = _enough_hours(daily, min_hours)
    dists = []
    for lag in lags:
        # Position d holds day d + lag
        other = means.shift(date=-lag)
        other_enough = enough.shift(date=-lag, fill_value=False)
        dist = tad_distance(means, other)
        dists.append(dist.where(enough & other_enough))

    out = xr.concat(dists, dim=pd.Index(list(lags), name="lag"))

    return out.transpose("phase", "lag", "date").rename("neighbor_dist")


def fallback_neighbor_distance(daily, neighbor, min_hours=MIN_HOURS):
    """Select the usable neighbour distance in each direction

    For the previous and next directions separately, and for each phase,
    the distance to the adjacent day is used when that day has at least
    `min_hours` hours in the phase.  Otherwise, the distance to the day
    two days away is used if that day has enough hours, and the distance
    is null if neither does.

    Parameters
    ----------
    daily : xarray.Dataset
        Output of :func:`~skdiel.dailyphase.daily_phase_means`.
    neighbor : xarray.DataArray
        Output of :func:`neighbor_distances`, including lags -2, -1, 1,
        and 2.
    min_hours : int, optional
        Minimum number of hours for a neighbour to be usable.

    Returns
    -------
    xarray.DataArray
        Distances with dimensions (phase, direction, date).

    """
    enough = _enough_hours(daily, min_hours)
    gated = []
    for primary, secondary in _DIRECTIONS.values():
        primary_ok = enough.shift(date=-primary, fill_value=False)
        secondary_ok = enough.shift(date=-secondary, fill_value=False)
        primary_dist = neighbor.sel(lag=primary, drop=True)
        secondary_dist = neighbor.sel(lag=secondary, drop=True)
        gated.append(xr.where(primary_ok, primary_dist,
                              secondary_dist.where(secondary_ok)))

    out = xr.concat(gated, dim=pd.Index(list(_DIRECTIONS),
                                        name="direction"))

    logger.info("Finished gating neighbour distances (min_hours={})"
                .format(min_hours))

    return out.transpose("phase", "direction", "date").rename("gated_dist")
