"""releasehunt: find published versions of packages in directory-listing repositories.

Entry point for the ``releasehunt`` console script. Looks up each requested
package, writes the results as JSON and exits with a code from ExitCodes.
"""

import asyncio
import json
import logging
import sys

from args import parse_args
from common.http_client import HttpFetchError, HttpTransport
from common.logging_utils import configure_logging
from constants import Constants, ExitCodes, load_config
from registry.hunt import DescriptorParseError, hunt_registries


async def lookup_packages(packages, registries, timeout=None):
    """Look up every package sequentially over a single shared transport.

    Returns:
        dict: lookup name -> ReleaseResult.to_dict() or None when not found.
    """
    results = {}
    async with HttpTransport(timeout=timeout) as transport:
        for package in packages:
            release = await hunt_registries(transport, package, registries)
            results[package] = release.to_dict() if release else None
            if release:
                logging.info("%s: %d versions at %s", package, len(release.versions), release.dependency_url)
            else:
                logging.warning("%s: no versions found", package)
    return results


def export_json(results, path):
    """Write results to ``path``, or stdout when ``path`` is None."""
    payload = json.dumps(results, indent=2)
    if path is None:
        print(payload)
        return
    try:
        with open(path, "w", encoding="utf-8") as outfile:
            outfile.write(payload + "\n")
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    try:
        load_config(args.CONFIG)
    except (OSError, ValueError) as e:
        logging.error("Unable to load configuration: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    registries = args.REGISTRIES or [Constants.REGISTRY_URL_MAVEN_REPO]

    try:
        results = asyncio.run(lookup_packages(args.PACKAGES, registries, args.TIMEOUT))
    except ValueError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except (HttpFetchError, DescriptorParseError) as e:
        logging.error("Repository communication failed: %s", e)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)

    export_json(results, args.OUTPUT)

    if any(r is None for r in results.values()):
        sys.exit(ExitCodes.NOT_FOUND.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
