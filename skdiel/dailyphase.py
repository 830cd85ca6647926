"""Daily summaries of hourly TAD by solar altitude phase

Hourly TAD vectors are matched to the high/low label of the same hour, and
averaged for every (day, phase) pair.  The result is laid out on a
contiguous sequence of calendar days, where days without any hour in a
given phase hold null vectors and a zero hour count.  Keeping these gaps
explicit means a lag of `k` positions along the date dimension is always a
lag of `k` calendar days.

.. autosummary::

   join_hourly_phase
   daily_phase_means

"""

import logging
import numpy as np
import pandas as pd
import xarray as xr
from skdiel.lightphase import HL_PHASES

__all__ = ["join_hourly_phase", "daily_phase_means"]

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())


def join_hourly_phase(tad, labels):
    """Match hourly TAD vectors with the phase label of the same hour

    This is an exact join on the hour: TAD hours without a label (or with
    a null label) are dropped, as are labelled hours without TAD.

    Parameters
    ----------
    tad : pandas.DataFrame
        Hourly TAD, as returned by :func:`~skdiel.tad.hourly_tad`.
    labels : pandas.DataFrame
        Hour labels, as returned by :func:`~skdiel.lightphase.hour_labels`.

    Returns
    -------
    pandas.DataFrame
        `tad` columns plus a ``phase`` column, indexed by hour.

    """
    phase = labels["phase"].dropna()
    phase = phase[~phase.index.duplicated(keep="first")]
    joined = tad.join(phase, how="inner")
    joined.index.name = "hour"

    return joined


def daily_phase_means(joined):
    """Mean TAD vector and hour count for each day and phase

    Parameters
    ----------
    joined : pandas.DataFrame
        Output of :func:`join_hourly_phase`.

    Returns
    -------
    xarray.Dataset
        With data variables ``tad_mean`` (phase, date, depth_bin) and
        ``hour_count`` (phase, date), spanning every calendar day from the
        first to the last hour in `joined`.

    """
    bins = joined.columns.drop("phase")
    if joined.empty:
        dates = pd.DatetimeIndex([], name="date")
    else:
        days = joined.index.normalize()
        dates = pd.date_range(days.min(), days.max(), freq="D", name="date")

    phase = joined["phase"].astype(str)
    days = joined.index.normalize()
    grp = joined[bins].groupby([phase.to_numpy(), days])
    means = grp.mean()
    counts = grp.size()

    shape = (len(HL_PHASES), dates.size, bins.size)
    tad_mean = np.full(shape, np.nan)
    hour_count = np.zeros(shape[:2], dtype=int)
    for i, phase_i in enumerate(HL_PHASES):
        if phase_i not in means.index.get_level_values(0):
            continue
        mean_i = means.xs(phase_i, level=0).reindex(dates)
        tad_mean[i] = mean_i.to_numpy(dtype=float)
        hour_count[i] = (counts.xs(phase_i, level=0)
                         .reindex(dates, fill_value=0).to_numpy())

    daily = xr.Dataset({"tad_mean": (("phase", "date", "depth_bin"),
                                     tad_mean),
                        "hour_count": (("phase", "date"), hour_count)},
                       coords={"phase": HL_PHASES,
                               "date": dates.astype("datetime64[ns]"),
                               "depth_bin": np.asarray(bins.tolist())})
    # Write-once: downstream computations only read from the arena
    daily["tad_mean"].data.flags.writeable = False
    daily["hour_count"].data.flags.writeable = False

    logger.info("Finished daily phase summaries over {} days"
                .format(dates.size))

    return daily
