"""Utilities to help with simple and repetitive tasks

"""

import logging
import numpy as np
import pandas as pd
import xarray as xr

__all__ = ["_append_xr_attr", "_load_dataset", "_as_utc_index",
           "_check_numeric", "get_var_sampling_interval", "rle_key"]

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())


def _append_xr_attr(x, attr, val):
    """Append to attribute to xarray.DataArray or xarray.Dataset

    If attribute does not exist, create it.  Attribute is assumed to be a
    string.

    Parameters
    ----------
    x : xarray.DataArray or xarray.Dataset
    attr : str
        Attribute name to update or add
    val : str
        Attribute value
    """
    if attr in x.attrs:
        x.attrs[attr] += "{}".format(val)
    else:
        x.attrs[attr] = "{}".format(val)


def _load_dataset(filename_or_obj, **kwargs):
    """Private function to load Dataset object from file name or object

    Parameters
    ----------
    filename_or_obj : str, Path or xarray.backends.*DataStore
        String indicating the file where the data comes from.
    **kwargs :
        Arguments passed to `xarray.load_dataset`.

    Returns
    -------
    dataset : Dataset
        The output Dataset.

    """
    return xr.load_dataset(filename_or_obj, **kwargs)


def _as_utc_index(x):
    """Return timezone-naive UTC DatetimeIndex from array-like timestamps

    Timezone-naive input is taken to be UTC already.  Non-parsable
    timestamps raise ``ValueError`` from pandas.

    Parameters
    ----------
    x : array_like
        Timestamps.

    Returns
    -------
    pandas.DatetimeIndex

    """
    idx = pd.DatetimeIndex(pd.to_datetime(x))
    if idx.tz is not None:
        idx = idx.tz_convert("UTC").tz_localize(None)

    return idx.astype("datetime64[ns]")


def _check_numeric(x, what):
    """Fail if `x` does not hold numeric data

    Parameters
    ----------
    x : pandas.Series, numpy.ndarray or xarray.DataArray
    what : str
        Name used in the error message.

    """
    if not np.issubdtype(np.asarray(x).dtype, np.number):
        msg = "{} must be numeric, got dtype {}".format(what, x.dtype)
        logger.error(msg)
        raise TypeError(msg)


def get_var_sampling_interval(x):
    """Retrieve sampling interval from DataArray attributes

    The interval is read from the ``sampling_rate`` and
    ``sampling_rate_units`` attributes.  Rates given in Hz are inverted,
    otherwise the unit is taken as a time unit for the interval itself.

    Parameters
    ----------
    x : xarray.DataArray

    Returns
    -------
    pandas.Timedelta

    Examples
    --------
    >>> da = xr.DataArray([1.0, 2.0],
    ...                   attrs=dict(sampling_rate=75,
    ...                              sampling_rate_units="s"))
    >>> get_var_sampling_interval(da)
    Timedelta('0 days 00:01:15')

    """
    attrs = x.attrs
    try:
        rate = attrs["sampling_rate"]
        units = attrs["sampling_rate_units"]
    except KeyError:
        msg = ("Sampling interval not available; set 'sampling_rate' "
               "and 'sampling_rate_units' attributes")
        logger.error(msg)
        raise LookupError(msg)

    if units == "Hz":
        intvl = pd.Timedelta(1.0 / float(rate), unit="s")
    else:
        intvl = pd.Timedelta("{}{}".format(rate, units))

    return(intvl)


def rle_key(x):
    """Emulate a run length encoder

    Assigns a numerical sequence identifying run lengths in input Series.

    Parameters
    ----------
    x : pandas.Series
        Series with data to encode.

    Returns
    -------
    out : pandas.Series

    Examples
    --------
    >>> N = 18
    >>> color = np.repeat(list("ABCABC"), 3)
    >>> ss = pd.Series(color,
    ...                index=pd.date_range("2020-01-01", periods=N,
    ...                                    freq="10s", tz="UTC"),
    ...                dtype="category")
    >>> rle_key(ss).tolist()
    [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5, 5, 5, 6, 6, 6]

    """
    xout = x.ne(x.shift()).cumsum()
    return(xout)
