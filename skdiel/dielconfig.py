"""Read and write diel detection configuration files

"""
import json

__all__ = ["dump_config_template", "dump_config", "read_config"]

_DEFAULT_CONFIG = {
    'log_level': "INFO",
    'individual_id': None,
    'read': {
        'depth_name': "depth",
        'time_name': "timestamp",
        'load_dataset_kwargs': {}
    },
    'locations': {
        'time_name': "timestamp",
        'latitude_name': "latitude",
        'longitude_name': "longitude"
    },
    'tad': {
        'bounds': [20, 50, 100, 200, 300, 400, 500, 1000],
        'interval': None
    },
    'phases': {
        'tolerance': None
    },
    'diel': {
        'min_hours': 3,
        'boundary': "strict"
    }
}

_DUMP_INDENT = 4


def dump_config_template(fname):
    """Dump configuration template file

    Dump a json configuration template file to set up diel detection.

    Parameters
    ----------
    fname : str or file-like
        A valid string path, or `file-like` object, for output file.

    Examples
    --------
    >>> dump_config_template("diel_config.json")  # doctest: +SKIP

    Edit the file to your specifications.

    """
    with open(fname, "w") as ofile:
        json.dump(_DEFAULT_CONFIG, ofile, indent=_DUMP_INDENT)


def read_config(config_file):
    """Read configuration file into dictionary

    Parameters
    ----------
    config_file : str or file-like
        A valid string path, or `file-like` object, for input file.

    Returns
    -------
    out : dict

    """
    with open(config_file, "r") as ifile:
        config = json.load(ifile)

    return(config)


def dump_config(fname, config_dict):
    """Dump configuration dictionary to file

    Dump a dictionary onto a JSON configuration file to set up diel
    detection.

    Parameters
    ----------
    fname : str or file-like
        A valid string path, or `file-like` object, for output file.
    config_dict : dict
        Dictionary to dump.

    """
    with open(fname, "w") as ofile:
        json.dump(config_dict, ofile, indent=_DUMP_INDENT)
