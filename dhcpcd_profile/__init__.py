# dhcpcd_profile/__init__.py
"""Update dhcpcd profiles from the current lease of an interface."""

__version__ = '0.1.0'

from dhcpcd_profile.document import ConfigDocument
from dhcpcd_profile.editor import replace_profile
from dhcpcd_profile.lease_dump import parse_dump, read_lease_dump
from dhcpcd_profile.errors import (
    ProfileUpdateError,
    ExternalToolError,
    EncodingError,
    EmptyDumpError,
    ConfigIOError,
)

__all__ = [
    'ConfigDocument',
    'replace_profile',
    'parse_dump',
    'read_lease_dump',
    'ProfileUpdateError',
    'ExternalToolError',
    'EncodingError',
    'EmptyDumpError',
    'ConfigIOError',
]
