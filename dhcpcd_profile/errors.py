# dhcpcd_profile/errors.py
"""Exceptions raised while updating a dhcpcd profile."""

from typing import Optional, Sequence


class ProfileUpdateError(Exception):
    """Base class for every failure that aborts a profile update."""
    pass


class ExternalToolError(ProfileUpdateError):
    """Raised when the lease tool cannot be started."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        super().__init__(f"Failed to run '{' '.join(self.command)}': {reason}")


class EncodingError(ProfileUpdateError):
    """Raised when tool output or file content is not valid UTF-8."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Got non-UTF-8 data from {source}: {reason}")


class EmptyDumpError(ProfileUpdateError):
    """Raised when a lease dump contains no key=value pairs at all."""

    def __init__(self, diagnostics: str = ''):
        self.diagnostics = diagnostics
        message = "Lease dump contained no variables"
        if diagnostics.strip():
            message = f"{message}: {diagnostics.strip()}"
        super().__init__(message)


class ConfigIOError(ProfileUpdateError):
    """Raised when the configuration file cannot be read or written."""

    def __init__(self, path: str, reason: str, operation: Optional[str] = None):
        self.path = path
        self.operation = operation
        action = f"{operation} " if operation else ""
        super().__init__(f"Unable to {action}{path}: {reason}")
