"""Base definition of the depth input data

"""

import pandas as pd
from skdiel.helpers import (get_var_sampling_interval,
                            _append_xr_attr, _load_dataset)


class DepthSource:
    """Define depth data source

    Use xarray.Dataset to ensure pseudo-standard metadata

    Attributes
    ----------
    depth_file : str
        String indicating the file where the data comes from.
    tdr : xarray.Dataset
        Dataset with input data.
    depth_name : str
        Name of data variable with depth measurements.
    time_name : str
        Name of the time dimension in the dataset.
    individual_id : str
        Identifier of the individual carrying the recorder.

    Examples
    --------
    >>> from skdiel.tests import synthetic_dataset
    >>> src = DepthSource(synthetic_dataset(), individual_id="ID1")
    >>> print(src)  # doctest: +ELLIPSIS
    Depth Recorder -- Class DepthSource object ...

    """
    def __init__(self, dataset, depth_name="depth", time_name="timestamp",
                 subsample=None, individual_id=None, depth_filename=None):
        """Set up attributes for DepthSource objects

        Parameters
        ----------
        dataset : xarray.Dataset
            Dataset containing depth, and optionally other DataArrays.
        depth_name : str, optional
            Name of data variable with depth measurements.
        time_name : str, optional
            Name of the time dimension in the dataset.
        subsample : str, optional
            Subsample dataset at given frequency specification.  See pandas
            offset aliases.
        individual_id : str, optional
            Identifier of the individual, carried to the diel records.
        depth_filename : str
            Name of the file from which `dataset` originated.

        """
        self.time_name = time_name
        if subsample is not None:
            self.tdr = (dataset.resample({time_name: subsample})
                        .nearest())
            for vname, da in self.tdr.data_vars.items():
                da.attrs["sampling_rate"] = (pd.to_timedelta(subsample)
                                             .total_seconds())
                da.attrs["sampling_rate_units"] = "s"
                _append_xr_attr(da, "history",
                                "Resampled to {}\n".format(subsample))
        else:
            self.tdr = dataset
        self.depth_name = depth_name
        self.individual_id = individual_id
        self.depth_file = depth_filename

    @classmethod
    def read_netcdf(cls, depth_file, depth_name="depth",
                    time_name="timestamp", subsample=None,
                    individual_id=None, **kwargs):
        """Instantiate object by loading Dataset from NetCDF file

        Parameters
        ----------
        depth_file : str
            As first argument for :func:`xarray.load_dataset`.
        depth_name : str, optional
            Name of data variable with depth measurements. Default: "depth".
        time_name : str, optional
            Name of the time dimension in the dataset.
        subsample : str, optional
            Subsample dataset at given frequency specification.  See pandas
            offset aliases.
        individual_id : str, optional
            Identifier of the individual.
        **kwargs : optional keyword arguments
            Arguments passed to :func:`xarray.load_dataset`.

        Returns
        -------
        obj : DepthSource or Diel
            Class matches the caller.

        """
        dataset = _load_dataset(depth_file, **kwargs)
        return cls(dataset, depth_name=depth_name, time_name=time_name,
                   subsample=subsample, individual_id=individual_id,
                   depth_filename=depth_file)

    def __str__(self):
        x = self.tdr
        depth_xr = x[self.depth_name]
        depth_ser = depth_xr.to_series()
        objcls = ("Depth Recorder -- Class {} object\n"
                  .format(self.__class__.__name__))
        src = "{0:<20} {1}\n".format("Source File", self.depth_file)
        ind = "{0:<20} {1}\n".format("Individual", self.individual_id)
        itv = ("{0:<20} {1}\n"
               .format("Sampling interval",
                       get_var_sampling_interval(depth_xr)))
        nsamples = "{0:<20} {1}\n".format("Number of Samples",
                                          depth_xr.shape[0])
        beg = "{0:<20} {1}\n".format("Sampling Begins",
                                     depth_ser.index[0])
        end = "{0:<20} {1}\n".format("Sampling Ends",
                                     depth_ser.index[-1])
        dur = "{0:<20} {1}\n".format("Total duration",
                                     depth_ser.index[-1] -
                                     depth_ser.index[0])
        drange = "{0:<20} [{1},{2}]\n".format("Measured depth range",
                                              depth_ser.min(),
                                              depth_ser.max())
        others = "{0:<20} {1}\n".format("Other variables",
                                        [x for x in list(x.keys())
                                         if x != self.depth_name])
        attr_list = "Attributes:\n"
        for key, val in sorted(x.attrs.items()):
            attr_list += "{0:>35}: {1}\n".format(key, val)
        attr_list = attr_list.rstrip("\n")

        return (objcls + src + ind + itv + nsamples + beg + end + dur +
                drange + others + attr_list)

    def _get_depth(self):
        return self.tdr[self.depth_name]

    depth = property(_get_depth)
    """Return depth array

    Returns
    -------
    xarray.DataArray

    """
