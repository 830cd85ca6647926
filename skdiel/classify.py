"""Classification of days as showing diel behaviour

Classification proceeds in two stages.  A day is first deemed significant
(``sig_dist``) when the distance between its high and low solar altitude
TAD is larger than all four gated same-phase distances to its neighbours
(previous and next days, high and low phases).  A significant day is then
confirmed as diel when at least one adjacent day is also significant, so
isolated significant days are not reported as diel.

Missing data never become a negative finding: whenever a day lacks the
hours needed for any of the distances involved, both flags are null for
that day.

.. autosummary::

   significant_days
   confirm_diel
   boundary_mask
   classify_days
   diel_records
   diel_periods
   diel_summary

"""

import logging
import numpy as np
import pandas as pd
import xarray as xr
from skdiel.distance import (MIN_HOURS, intraday_distance,
                             neighbor_distances, fallback_neighbor_distance)
from skdiel.helpers import rle_key

__all__ = ["BOUNDARY_RULES", "significant_days", "confirm_diel",
           "boundary_mask", "classify_days", "diel_records",
           "diel_periods", "diel_summary"]

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

BOUNDARY_RULES = ["strict", "relaxed"]


def significant_days(intraday, gated):
    """Flag days where the intra-day distance exceeds all neighbour ones

    Parameters
    ----------
    intraday : xarray.DataArray
        Intra-day distance along dimension "date".
    gated : xarray.DataArray
        Gated neighbour distances with dimensions (phase, direction, date).

    Returns
    -------
    xarray.DataArray
        1.0 where the intra-day distance is strictly larger than every
        neighbour distance, 0.0 where it is not, and null if any of the
        distances is null.

    """
    other_dims = [x for x in gated.dims if x != "date"]
    exceeds = (intraday > gated).all(other_dims)
    missing = intraday.isnull() | gated.isnull().any(other_dims)
    sig = exceeds.astype(float).where(~missing)

    return sig.rename("sig_dist")


def confirm_diel(sig):
    """Confirm significant days with an adjacent significant day

    Parameters
    ----------
    sig : xarray.DataArray
        Output of :func:`significant_days`.

    Returns
    -------
    xarray.DataArray
        1.0 for significant days with a significant previous or next day,
        0.0 for other days, and null wherever `sig` is null.

    """
    is_sig = sig == 1
    prev_sig = is_sig.shift(date=1, fill_value=False)
    next_sig = is_sig.shift(date=-1, fill_value=False)
    diel = (is_sig & (prev_sig | next_sig)).astype(float)

    return diel.where(sig.notnull()).rename("diel")


def boundary_mask(daily, boundary="strict", min_hours=MIN_HOURS):
    """Days of the span to report on

    The first two and last two days of the span lack neighbours for a full
    comparison.  With the "strict" rule all of them are excluded.  With
    the "relaxed" rule, the second and penultimate days are kept if both
    of their phases have at least `min_hours` hours.

    Parameters
    ----------
    daily : xarray.Dataset
        Output of :func:`~skdiel.dailyphase.daily_phase_means`.
    boundary : {"strict", "relaxed"}, optional
        Rule for boundary days.
    min_hours : int, optional
        Minimum hours in each phase for the "relaxed" rule.

    Returns
    -------
    xarray.DataArray
        Boolean mask along dimension "date".

    """
    if boundary not in BOUNDARY_RULES:
        msg = "boundary must be one of: {}".format(BOUNDARY_RULES)
        logger.error(msg)
        raise LookupError(msg)

    ndays = daily.sizes["date"]
    pos = np.arange(ndays)
    keep = (pos >= 2) & (pos < ndays - 2)
    if boundary == "relaxed":
        enough = (daily["hour_count"] >= min_hours).all("phase").to_numpy()
        keep |= ((pos == 1) | (pos == ndays - 2)) & enough

    return xr.DataArray(keep, coords={"date": daily["date"]},
                        dims="date", name="keep")


def classify_days(daily, min_hours=MIN_HOURS, boundary="strict"):
    """Run distance calculations and classification over the date span

    Parameters
    ----------
    daily : xarray.Dataset
        Output of :func:`~skdiel.dailyphase.daily_phase_means`.
    min_hours : int, optional
        Minimum number of hours in a phase for its data to be used.
    boundary : {"strict", "relaxed"}, optional
        Rule for boundary days (see :func:`boundary_mask`).

    Returns
    -------
    xarray.Dataset
        Data variables ``intraday_dist`` (date), ``neighbor_dist`` (phase,
        lag, date), ``gated_dist`` (phase, direction, date), ``sig_dist``
        (date), ``diel`` (date), and ``keep`` (date).

    """
    keep = boundary_mask(daily, boundary=boundary, min_hours=min_hours)
    intraday = intraday_distance(daily, min_hours=min_hours)
    neighbor = neighbor_distances(daily, min_hours=min_hours)
    gated = fallback_neighbor_distance(daily, neighbor,
                                       min_hours=min_hours)
    sig = significant_days(intraday, gated)
    diel = confirm_diel(sig)
    out = xr.merge([intraday, neighbor, gated, sig, diel, keep])
    out.attrs.update(min_hours=min_hours, boundary=boundary)

    logger.info("Finished classifying {} days"
                .format(int(keep.sum())))

    return out


def diel_records(classified, individual_id=None):
    """Diel record for every reported day

    Parameters
    ----------
    classified : xarray.Dataset
        Output of :func:`classify_days`.
    individual_id : str, optional
        Identifier of the individual.

    Returns
    -------
    pandas.DataFrame
        Indexed by date, with columns ``intraday_dist``, ``sig_dist``,
        ``diel``, and ``individual_id``.  Flags are nullable integers.

    """
    kept = classified.isel(date=np.flatnonzero(classified["keep"]))
    recs = pd.DataFrame({"intraday_dist": kept["intraday_dist"].to_numpy(),
                         "sig_dist": kept["sig_dist"].to_numpy(),
                         "diel": kept["diel"].to_numpy()},
                        index=pd.DatetimeIndex(kept["date"].to_numpy(),
                                               name="date"))
    recs = recs.astype({"sig_dist": "Int64", "diel": "Int64"})
    recs["individual_id"] = individual_id

    return recs


def diel_periods(records):
    """Periods of consecutive diel days

    Parameters
    ----------
    records : pandas.DataFrame
        Output of :func:`diel_records`.

    Returns
    -------
    pandas.DataFrame
        One row per period, with columns ``beg_date``, ``end_date``, and
        ``n_days``.

    """
    flag = records["diel"].fillna(-1).astype(int)
    runs = pd.DataFrame({"flag": flag, "run": rle_key(flag),
                         "date": records.index})
    periods = (runs[runs["flag"] == 1].groupby("run")["date"]
               .agg(["min", "max", "size"]))
    periods.columns = ["beg_date", "end_date", "n_days"]
    periods = periods.reset_index(drop=True)
    periods.index.name = "period"

    return periods


def diel_summary(records):
    """Count diel, non-diel, and data-deficient days

    Parameters
    ----------
    records : pandas.DataFrame
        Output of :func:`diel_records`.

    Returns
    -------
    pandas.Series

    """
    diel = records["diel"]
    return pd.Series({"diel": int((diel == 1).sum()),
                      "non_diel": int((diel == 0).sum()),
                      "data_deficient": int(diel.isna().sum())},
                     name="n_days")
