import sys
import argparse
import logging
from skdiel import detect_diel


def main():
    _DESCRIPTION = ("Detect days with diel behaviour, given depth and "
                    "location records")
    _FORMATERCLASS = argparse.ArgumentDefaultsHelpFormatter
    parser = argparse.ArgumentParser(description=_DESCRIPTION,
                                     formatter_class=_FORMATERCLASS)
    parser.add_argument("--config-file",
                        help="Path to JSON configuration file.")
    parser.add_argument("--individual-id",
                        help="Identifier of the individual.")
    parser.add_argument("depth_file",
                        help="Path to NetCDF depth data file.")
    parser.add_argument("locations_file",
                        help="Path to CSV file with location fixes.")
    args = parser.parse_args()
    logging.basicConfig()
    dielX = detect_diel(args.depth_file, args.locations_file,
                        config_file=args.config_file,
                        individual_id=args.individual_id)
    print(dielX.get_diel().to_string())
    return(0)


sys.exit(main())
