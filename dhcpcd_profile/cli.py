"""Command line entry point.

Replace the data of a dhcpcd profile with the results of 'dhcpcd -U'.

Usage:
    update-dhcpcd-profile IFACE PROFILE [-o OUTPUT] [-c CONFIG]
"""

import argparse
import logging
import sys
from typing import List, Optional

from dhcpcd_profile import __version__
from dhcpcd_profile.constants import DEFAULT_CONFIG_PATH, DHCPCD_COMMAND
from dhcpcd_profile.document import ConfigDocument
from dhcpcd_profile.errors import ProfileUpdateError
from dhcpcd_profile.lease_dump import read_lease_dump

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="update-dhcpcd-profile",
        description="Replace the data of the given profile with the results of 'dhcpcd -U'.",
    )
    parser.add_argument(
        "iface",
        metavar="IFACE",
        help="Interface to get the lease information from.",
    )
    parser.add_argument(
        "profile",
        metavar="PROFILE",
        help="Profile to overwrite.",
    )
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file to read (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument(
        "-o", "--output",
        help="File to write the result to. Defaults to the configuration file.",
    )
    parser.add_argument(
        "--dhcpcd",
        default=DHCPCD_COMMAND,
        help=f"dhcpcd executable (default: {DHCPCD_COMMAND}).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def update_profile(iface: str, profile: str, config_path: str = DEFAULT_CONFIG_PATH,
                   output_path: Optional[str] = None, command: str = DHCPCD_COMMAND) -> ConfigDocument:
    """Read the lease of an interface and write it into a profile of the config file"""
    variables = read_lease_dump(iface, command=command)
    document = ConfigDocument.from_file(config_path)
    document.replace_profile(profile, variables)
    written = document.write_to_file(output_path or config_path)
    logger.info(f"Updated profile {profile} from {iface} in {written}")
    return document


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(levelname)s] %(message)s',
    )

    try:
        update_profile(args.iface, args.profile, args.config, args.output, args.dhcpcd)
    except ProfileUpdateError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
