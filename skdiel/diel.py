"""Diel behaviour detection for a single depth record

"""

import copy
import logging
import pandas as pd
from skdiel.depthsource import DepthSource
from skdiel.solar import solar_altitude
from skdiel.tad import TAD_BOUNDS, hourly_tad
from skdiel.lightphase import label_light_phases, hour_labels
from skdiel.dailyphase import join_hourly_phase, daily_phase_means
from skdiel.distance import MIN_HOURS
import skdiel.classify as classify
import skdiel.dielconfig as dielconfig

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())


class Diel(DepthSource):
    """Detect days with diel behaviour in a depth record

    Diel subclasses `DepthSource` to provide the full sequence of steps
    from depth and location fixes to daily diel flags.

    See help(DepthSource) for inherited attributes.

    Attributes
    ----------
    locations : pandas.DataFrame
        Location fixes used for solar altitude phases.
    params : dict
        Dictionary with parameters used in each step.  {'tad':
        {'bounds': tuple, 'interval': pandas.Timedelta}, 'phases':
        {'tolerance': str}, 'diel': {'min_hours': int, 'boundary': str}}

    Examples
    --------
    Construct an instance from synthetic data

    >>> from skdiel.tests import (synthetic_dataset, synthetic_locations,
    ...                           synthetic_solar)
    >>> dielX = Diel(synthetic_dataset(), individual_id="ID1")
    >>> dielX.bin_tad()
    >>> dielX.assign_phases(synthetic_locations(),
    ...                     solar_fun=synthetic_solar)
    >>> dielX.aggregate()
    >>> dielX.classify()
    >>> dielX.get_diel()  # doctest: +ELLIPSIS
                intraday_dist  sig_dist  diel individual_id
    date
    ...

    """

    def __init__(self, *args, **kwargs):
        """Set up attributes for Diel objects

        Parameters
        ----------
        *args : positional arguments
            Passed to :meth:`DepthSource.__init__`
        **kwargs : keyword arguments
            Passed to :meth:`DepthSource.__init__`

        """
        DepthSource.__init__(self, *args, **kwargs)
        self.locations = None
        self._hourly_tad = None
        self._light_phases = None
        self._hour_labels = None
        self._daily = None
        self._classified = None
        self.params = dict(tad={}, phases={}, diel={})

    def __str__(self):
        base = DepthSource.__str__(self)
        return (base +
                ("\n{0:<20} {1}\n{2:<20} {3}\n{4:<20} {5}"
                 .format("TAD parameters:", self.params["tad"],
                         "Phase parameters:", self.params["phases"],
                         "Diel parameters:", self.params["diel"])))

    def bin_tad(self, bounds=TAD_BOUNDS, interval=None):
        """Calculate hourly Time-At-Depth distributions

        Parameters
        ----------
        bounds : array_like, optional
            Increasing upper bounds of the depth bins.
        interval : str or pandas.Timedelta, optional
            Sampling interval of the depth record.  Retrieved from the
            depth metadata if not provided.

        """
        tad = hourly_tad(self.depth, interval=interval, bounds=bounds)
        self._hourly_tad = tad
        self.params["tad"].update(bounds=tuple(bounds), interval=interval)

        logger.info("Finished calculating hourly TAD")

    def assign_phases(self, locations, solar_fun=solar_altitude,
                      tolerance=None, light_phases=True, **kwargs):
        """Assign solar altitude phases from location fixes

        Parameters
        ----------
        locations : pandas.DataFrame
            Time-indexed location fixes.
        solar_fun : callable, optional
            Solar position provider (see
            :func:`~skdiel.solar.solar_altitude`).
        tolerance : str or pandas.Timedelta, optional
            Maximum time distance between a half-hour mark and its nearest
            fix.  Default is no limit.
        light_phases : bool, optional
            Whether to also label the light phase of each fix.
        **kwargs : optional keyword arguments
            Names of the coordinate columns (`latitude_name`,
            `longitude_name`).

        """
        self.locations = locations
        self._hour_labels = hour_labels(locations, solar_fun=solar_fun,
                                        tolerance=tolerance, **kwargs)
        if light_phases:
            self._light_phases = label_light_phases(locations,
                                                    solar_fun=solar_fun,
                                                    **kwargs)
        self.params["phases"].update(tolerance=tolerance)

        logger.info("Finished assigning solar altitude phases")

    def aggregate(self):
        """Summarize hourly TAD by day and solar altitude phase"""
        tad = self.get_hourly_tad()
        labels = self.get_hour_labels()
        joined = join_hourly_phase(tad, labels)
        self._daily = daily_phase_means(joined)

        logger.info("Finished aggregating TAD by day and phase")

    def classify(self, min_hours=MIN_HOURS, boundary="strict"):
        """Classify days as showing diel behaviour or not

        Parameters
        ----------
        min_hours : int, optional
            Minimum number of hours in a phase for its data to be used.
        boundary : {"strict", "relaxed"}, optional
            Rule for boundary days (see
            :func:`~skdiel.classify.boundary_mask`).

        """
        daily = self.get_daily()
        self._classified = classify.classify_days(daily,
                                                  min_hours=min_hours,
                                                  boundary=boundary)
        self.params["diel"].update(min_hours=min_hours, boundary=boundary)

        logger.info("Finished diel classification")

    def _get_step(self, attr, what):
        out = getattr(self, attr)
        if out is None:
            msg = "{} not available.".format(what)
            logger.error(msg)
            raise LookupError(msg)

        return out

    def get_hourly_tad(self):
        """Retrieve hourly TAD

        Returns
        -------
        pandas.DataFrame

        """
        return self._get_step("_hourly_tad", "Hourly TAD")

    def get_light_phases(self):
        """Retrieve light phase of each location fix

        Returns
        -------
        pandas.DataFrame

        """
        return self._get_step("_light_phases", "Light phases")

    def get_hour_labels(self):
        """Retrieve high/low solar altitude labels of each hour

        Returns
        -------
        pandas.DataFrame

        """
        return self._get_step("_hour_labels", "Hour labels")

    def get_daily(self):
        """Retrieve daily mean TAD and hour counts by phase

        Returns
        -------
        xarray.Dataset

        """
        return self._get_step("_daily", "Daily phase summaries")

    def get_distances(self, kind="intraday"):
        """Retrieve TAD distances

        Parameters
        ----------
        kind : {"intraday", "neighbor", "gated"}
            Which distances to retrieve: high vs low phase within days,
            same phase between days at each lag, or the neighbour
            distances selected by the sufficiency rules.

        Returns
        -------
        xarray.DataArray

        """
        kinds = {"intraday": "intraday_dist", "neighbor": "neighbor_dist",
                 "gated": "gated_dist"}
        if kind not in kinds:
            msg = "kind must be one of: {}".format(list(kinds))
            logger.error(msg)
            raise LookupError(msg)

        classified = self._get_step("_classified", "Classification")
        return classified[kinds[kind]]

    def get_diel(self):
        """Retrieve diel records for the reported days

        Returns
        -------
        pandas.DataFrame

        """
        classified = self._get_step("_classified", "Classification")
        return classify.diel_records(classified,
                                     individual_id=self.individual_id)

    def diel_periods(self):
        """Periods of consecutive diel days

        Returns
        -------
        pandas.DataFrame

        """
        return classify.diel_periods(self.get_diel())

    def diel_summary(self):
        """Count diel, non-diel, and data-deficient days

        Returns
        -------
        pandas.Series

        """
        return classify.diel_summary(self.get_diel())


def read_locations(locations_file, time_name="timestamp", **kwargs):
    """Read location fixes from a CSV file

    Parameters
    ----------
    locations_file : str or file-like
        CSV file with a time column and coordinate columns.
    time_name : str, optional
        Name of the time column.
    **kwargs : optional keyword arguments
        Passed to :func:`pandas.read_csv`.

    Returns
    -------
    pandas.DataFrame
        Time-indexed location fixes.

    """
    locs = pd.read_csv(locations_file, **kwargs)
    if time_name not in locs.columns:
        msg = "Time column {} not found in locations".format(time_name)
        logger.error(msg)
        raise LookupError(msg)

    locs.index = pd.DatetimeIndex(pd.to_datetime(locs.pop(time_name)),
                                  name=time_name)

    return locs


def detect_diel(depth_file, locations, config_file=None,
                individual_id=None, solar_fun=solar_altitude):
    """Perform all steps of diel behaviour detection

    This function is a convenience wrapper around :meth:`Diel.bin_tad`,
    :meth:`Diel.assign_phases`, :meth:`Diel.aggregate`, and
    :meth:`Diel.classify`, guided by a configuration file (JSON).

    Parameters
    ----------
    depth_file : str, Path or xarray.backends.*DataStore
        As first argument for :func:`xarray.load_dataset`.
    locations : pandas.DataFrame or str
        Time-indexed location fixes, or path to a CSV file with them.
    config_file : str, optional
        A valid string path for the configuration file.
    individual_id : str, optional
        Identifier of the individual, overriding the configuration.
    solar_fun : callable, optional
        Solar position provider (see :func:`~skdiel.solar.solar_altitude`).

    Returns
    -------
    out : Diel

    See Also
    --------
    dump_config_template : configuration template

    """
    if config_file is None:
        config = copy.deepcopy(dielconfig._DEFAULT_CONFIG)
    else:
        config = dielconfig.read_config(config_file)

    if individual_id is not None:
        config["individual_id"] = individual_id

    logger = logging.getLogger("skdiel")
    logger.setLevel(config["log_level"])

    load_dataset_kwargs = config["read"].pop("load_dataset_kwargs")
    logger.info("Reading config: {}, {}"
                .format(config["read"], load_dataset_kwargs))
    dielX = Diel.read_netcdf(depth_file,
                             individual_id=config["individual_id"],
                             **config["read"], **load_dataset_kwargs)

    locs_config = config["locations"]
    if isinstance(locations, pd.DataFrame):
        locs = locations
    else:
        locs = read_locations(locations, time_name=locs_config["time_name"])

    logger.info("TAD config: {}".format(config["tad"]))
    dielX.bin_tad(**config["tad"])

    logger.info("Phases config: {}".format(config["phases"]))
    dielX.assign_phases(locs, solar_fun=solar_fun,
                        latitude_name=locs_config["latitude_name"],
                        longitude_name=locs_config["longitude_name"],
                        **config["phases"])
    dielX.aggregate()

    logger.info("Diel config: {}".format(config["diel"]))
    dielX.classify(**config["diel"])

    return(dielX)
