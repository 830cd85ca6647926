"""Top-level class for detecting diel behaviour from depth records

The :class:`Diel` class encapsulates the processing of a depth record
from a NetCDF data file, together with the location fixes of the same
individual, to identify calendar days showing diel behaviour.

Behaviour is summarized as the Time-At-Depth (TAD) distribution of each
hour.  Hours are labelled as belonging to the "high" or "low" solar
altitude phase of their day, relative to the day's midrange altitude
rather than to sunrise and sunset, so contrasts can also be found under
continuous daylight or darkness.  A day shows diel behaviour when the
difference between its high and low phase TAD is larger than the
difference between the same phases on neighbouring days, and an adjacent
day shows this too.

All steps are encapsulated in :class:`Diel`, and can be controlled by a
set of user-defined variables in a configuration file, and executed
systematically by function :func:`detect_diel`.  The standard approach
follows the logical processing sequence described below:

1. Hourly TAD
2. Assignment of solar altitude phases
3. Daily TAD summaries by phase
4. Classification of days

Processing steps
----------------

.. autosummary::

   Diel.read_netcdf
   Diel.bin_tad
   Diel.assign_phases
   Diel.aggregate
   Diel.classify

Summaries
---------

.. autosummary::

   Diel.diel_periods
   Diel.diel_summary

Accessors
---------

.. autosummary::

   Diel.get_hourly_tad
   Diel.get_light_phases
   Diel.get_hour_labels
   Diel.get_daily
   Diel.get_distances
   Diel.get_diel

Functions
---------

.. autosummary::

   detect_diel
   dump_config_template

"""

from skdiel.diel import Diel, detect_diel
from skdiel.dielconfig import dump_config_template

__author__ = "scikit-diel developers"
__license__ = "AGPLv3"
__version__ = "0.1.0"
__all__ = ["Diel", "detect_diel", "dump_config_template"]
