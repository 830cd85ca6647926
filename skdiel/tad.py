"""Time-At-Depth (TAD) distributions

Depth measurements are assigned to depth bins defined by their upper
bounds, and the proportion of each hour spent in each bin forms the hourly
TAD vector.  Proportions are relative to the number of samples expected in
a complete hour given the sampling interval, so incomplete hours have
vectors summing to less than one.  These are deliberately not
renormalized; sparse data are filtered later by the number of hours
contributing to daily summaries.

.. autosummary::

   depth_bin
   hourly_tad

"""

import logging
import numpy as np
import pandas as pd
from skdiel.helpers import (get_var_sampling_interval, _as_utc_index,
                            _check_numeric)

__all__ = ["TAD_BOUNDS", "depth_bin", "hourly_tad"]

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

# Upper bounds of depth bins (m); the last bin holds all depths > 500 m
TAD_BOUNDS = (20, 50, 100, 200, 300, 400, 500, 1000)


def depth_bin(depth, bounds=TAD_BOUNDS):
    """Assign depths to the bin with the smallest upper bound >= depth

    Depths shallower than the first bound belong to the first bin, and
    depths deeper than the penultimate bound belong to the last bin.

    Parameters
    ----------
    depth : array_like
        Depth measurements.  Must not contain null values.
    bounds : array_like, optional
        Increasing upper bounds of the bins.

    Returns
    -------
    numpy.ndarray
        Upper bound of the bin for each depth.

    Examples
    --------
    >>> depth_bin([-1, 0, 20, 20.5, 450, 500, 501, 3000])
    array([  20,   20,   20,   50,  500,  500, 1000, 1000])

    """
    bounds = np.asarray(bounds)
    idx = np.searchsorted(bounds, np.asarray(depth), side="left")
    return bounds[np.clip(idx, 0, bounds.size - 1)]


def hourly_tad(depth, interval=None, bounds=TAD_BOUNDS):
    """Proportion of time spent in each depth bin for every hour

    Parameters
    ----------
    depth : xarray.DataArray or pandas.Series
        Time-indexed depth measurements.  Null depths are dropped.
    interval : str or pandas.Timedelta, optional
        Sampling interval of `depth`.  If not provided, it is retrieved
        from the DataArray attributes.
    bounds : array_like, optional
        Increasing upper bounds of the depth bins.

    Returns
    -------
    pandas.DataFrame
        One row per hour with at least one sample (index "hour"), and one
        column per depth bin (named by its upper bound).

    Examples
    --------
    >>> idx = pd.date_range("2020-01-01", periods=48, freq="75s")
    >>> depth = pd.Series(np.repeat([10.0, 80.0], 24), index=idx)
    >>> hourly_tad(depth, interval="75s").iloc[0, :3].tolist()
    [0.5, 0.0, 0.5]

    """
    if interval is None:
        interval = get_var_sampling_interval(depth)
    interval = pd.Timedelta(interval)
    if interval <= pd.Timedelta(0):
        msg = "Sampling interval must be positive, got {}".format(interval)
        logger.error(msg)
        raise ValueError(msg)

    if isinstance(depth, pd.Series):
        depth_ser = depth
    else:
        depth_ser = depth.to_series()
    _check_numeric(depth_ser, "depth")
    depth_ser = pd.Series(depth_ser.to_numpy(dtype=float),
                          index=_as_utc_index(depth_ser.index)).dropna()

    n_expected = pd.Timedelta("1h") / interval
    if depth_ser.empty:
        logger.warning("No depth samples available for binning")
        return pd.DataFrame(columns=pd.Index(list(bounds),
                                             name="depth_bin"),
                            index=pd.DatetimeIndex([], name="hour"),
                            dtype=float)

    bins = pd.Series(depth_bin(depth_ser.to_numpy(), bounds),
                     index=depth_ser.index)
    hours = pd.DatetimeIndex(depth_ser.index.floor("h"), name="hour")
    counts = (bins.groupby([hours, bins.to_numpy()]).size()
              .unstack(fill_value=0)
              .reindex(columns=list(bounds), fill_value=0))
    tad = counts / n_expected
    tad.columns.name = "depth_bin"

    logger.info("Finished binning {} depth samples into {} hours"
                .format(depth_ser.size, tad.shape[0]))

    return tad
