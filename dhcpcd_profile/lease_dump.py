# dhcpcd_profile/lease_dump.py
"""Reading and parsing the lease variables dumped by `dhcpcd -U`."""

import logging
import subprocess
from typing import Dict, Optional

from dhcpcd_profile.constants import DHCPCD_COMMAND, DUMP_FLAG, SELECTED_VARIABLES
from dhcpcd_profile.editor import split_lines
from dhcpcd_profile.errors import EmptyDumpError, EncodingError, ExternalToolError

logger = logging.getLogger(__name__)


def decode_output(raw: bytes, source: str) -> str:
    """
    Decode raw bytes as strict UTF-8.

    Args:
        raw: Bytes read from a process pipe or a file
        source: Human readable origin used in the error message

    Returns:
        Decoded text

    Raises:
        EncodingError: If the bytes are not valid UTF-8
    """
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(source, str(e)) from e


def _strip_quotes(value: str) -> str:
    """Drop one single quote from each end if the value starts and ends with one"""
    # A lone "'" counts as both ends and becomes ''
    if value[0] == "'" and value[-1] == "'":
        return value[1:-1]
    return value


def parse_dump(dump_text: str, diagnostics: str = '') -> Dict[str, str]:
    """
    Parse `name=value` lines into a map of the selected lease variables.

    Lines without '=' or with an empty value are ignored. Values wrapped in
    single quotes are unquoted. A later assignment to the same name wins.

    Args:
        dump_text: Text printed by the lease tool
        diagnostics: Tool error output, attached to EmptyDumpError

    Returns:
        Dictionary of variable name to value, limited to SELECTED_VARIABLES

    Raises:
        EmptyDumpError: If no key=value pair was found at all
    """
    variables = {}

    for line in split_lines(dump_text):
        name, separator, value = line.partition('=')
        if not separator or not value:
            continue
        variables[name] = _strip_quotes(value)

    if not variables:
        raise EmptyDumpError(diagnostics)

    selected = {name: value for name, value in variables.items() if name in SELECTED_VARIABLES}
    logger.debug(f"Parsed {len(variables)} lease variables, kept {len(selected)}")
    return selected


def read_lease_dump(interface: str, command: Optional[str] = None) -> Dict[str, str]:
    """
    Run the lease tool for an interface and parse its dump.

    Args:
        interface: Network interface name passed to the tool
        command: Tool executable, defaults to DHCPCD_COMMAND

    Returns:
        Selected lease variables for the interface

    Raises:
        ExternalToolError: If the tool cannot be started
        EncodingError: If the tool output is not valid UTF-8
        EmptyDumpError: If the tool printed no variables
    """
    args = [command or DHCPCD_COMMAND, DUMP_FLAG, interface]
    logger.debug(f"Running {' '.join(args)}")

    try:
        result = subprocess.run(args, capture_output=True)
    except OSError as e:
        raise ExternalToolError(args, str(e)) from e

    if result.returncode != 0:
        logger.info(f"'{' '.join(args)}' exited with status {result.returncode}")

    stdout = decode_output(result.stdout, f"{args[0]} stdout")
    try:
        return parse_dump(stdout)
    except EmptyDumpError:
        # stderr is only needed to explain an empty dump
        stderr = decode_output(result.stderr, f"{args[0]} stderr")
        raise EmptyDumpError(stderr) from None
