"""Argument parsing functionality for releasehunt."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="releasehunt",
        description=(
            "releasehunt - Discover published versions in directory-listing repositories"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--package",
                        dest="PACKAGES",
                        help="Package to look up as group:artifact[_suffix]. Can be repeated.",
                        action="append", type=str,
                        required=True)
    parser.add_argument("-r", "--registry",
                        dest="REGISTRIES",
                        help="Repository base URL to search. Can be repeated; tried in order.",
                        action="append", type=str,
                        default=[])

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to JSON output file (defaults to stdout)",
                        action="store",
                        type=str)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="HTTP request timeout in seconds",
                        action="store",
                        type=int)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to YAML configuration file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
