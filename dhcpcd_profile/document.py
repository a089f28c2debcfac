# dhcpcd_profile/document.py
"""dhcpcd configuration document: loading, profile replacement and write-back."""

import logging
import os
import stat
import tempfile
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from dhcpcd_profile.change_record import ChangeRecord
from dhcpcd_profile.constants import PROFILE_PREFIX, STATIC_PREFIX
from dhcpcd_profile.editor import append_profile, profile_header, split_lines, split_profile
from dhcpcd_profile.errors import ConfigIOError
from dhcpcd_profile.lease_dump import decode_output

logger = logging.getLogger(__name__)


class ConfigDocument:
    """Ordered lines of a dhcpcd configuration file with a change log"""

    def __init__(self, lines: List[str], source_path: Optional[str] = None):
        self.source_path = source_path
        self._changes: List[ChangeRecord] = []

        # Use the property setter to initialise
        self.lines = lines

    def __repr__(self):
        source = self.source_path or '<text>'
        return f"<{self.__class__.__name__} {source} ({len(self._lines)} lines)>"

    def __str__(self):
        return self.to_text()

    def __len__(self) -> int:
        return len(self._lines)

    @classmethod
    def from_text(cls, text: str, source_path: Optional[str] = None) -> 'ConfigDocument':
        """Create a document by splitting text on newlines"""
        return cls(split_lines(text), source_path=source_path)

    @classmethod
    def from_file(cls, path: str) -> 'ConfigDocument':
        """
        Read a configuration file.

        Args:
            path: Path to the configuration file

        Returns:
            ConfigDocument holding the file's lines

        Raises:
            ConfigIOError: If the file cannot be read
            EncodingError: If the file is not valid UTF-8
        """
        try:
            with open(path, 'rb') as f:
                raw = f.read()
        except OSError as e:
            raise ConfigIOError(path, e.strerror or str(e), operation='read') from e

        document = cls.from_text(decode_output(raw, path), source_path=path)
        logger.debug(f"Read {len(document)} lines from {path}")
        return document

    @property
    def lines(self) -> List[str]:
        """Copy of the current configuration lines"""
        return list(self._lines)

    @lines.setter
    def lines(self, value: List[str]):
        """
        Replace all lines, logging the replacement after initialisation.

        Args:
            value: New list of configuration lines
        """
        # Only log if this is NOT the initial assignment
        if hasattr(self, '_lines'):
            change_record = ChangeRecord(
                change_id=str(uuid.uuid4())[:8],
                timestamp=datetime.now(),
                profile=None,
                removed_lines=list(self._lines),
                added_lines=list(value),
                change_type="total_replacement",
                source_operation="lines_assignment"
            )
            self._changes.append(change_record)
            logger.info(f"Logged change: {change_record.summary()}")

        self._lines = list(value)

    @property
    def changes(self) -> List[ChangeRecord]:
        """Change records in the order they were made"""
        return list(self._changes)

    def profile_names(self) -> List[str]:
        """Names of all profile headers in document order"""
        return [line[len(PROFILE_PREFIX):] for line in self._lines if line.startswith(PROFILE_PREFIX)]

    def get_profile(self, profile: str) -> Optional[List[str]]:
        """
        Get the lines of the first block for a profile, without its header.

        Returns:
            Block content lines, or None if the profile has no header
        """
        header = profile_header(profile)
        try:
            start = self._lines.index(header) + 1
        except ValueError:
            return None

        end = start
        while end < len(self._lines) and not self._lines[end].startswith(PROFILE_PREFIX):
            end += 1
        return self._lines[start:end]

    def get_static_values(self, profile: str) -> Dict[str, str]:
        """Parse the `static key=value` lines of a profile into a dictionary"""
        values = {}
        for line in self.get_profile(profile) or []:
            line = line.strip()
            if not line.startswith(STATIC_PREFIX):
                continue
            key, separator, value = line[len(STATIC_PREFIX):].partition('=')
            if separator:
                values[key.strip()] = value
        return values

    def replace_profile(self, profile: str, variables: Dict[str, str],
                        change_id: Optional[str] = None) -> ChangeRecord:
        """
        Replace the block of a profile with `static` lines for the variables.

        Args:
            profile: Profile name
            variables: Lease variables to write
            change_id: Optional change ID, generated if not given

        Returns:
            ChangeRecord describing the replacement
        """
        if change_id is None:
            change_id = str(uuid.uuid4())[:8]

        kept, removed = split_profile(self._lines, profile)
        new_lines = append_profile(kept, profile, variables)

        # The new block is always the tail of the document
        change_record = ChangeRecord(
            change_id=change_id,
            timestamp=datetime.now(),
            profile=profile,
            removed_lines=removed,
            added_lines=new_lines[len(kept):],
            change_type="profile_replacement",
            source_operation="replace_profile_method"
        )
        self._lines = new_lines
        self._changes.append(change_record)
        logger.info(f"Logged change: {change_record.summary()}")
        return change_record

    def to_text(self) -> str:
        """Render the document with every line newline-terminated"""
        return ''.join(f"{line}\n" for line in self._lines)

    def write_to_file(self, path: Optional[str] = None) -> str:
        """
        Atomically write the document to a file.

        The text goes to a temporary file in the target directory which is
        then renamed over the target. The target keeps its permission bits.

        Args:
            path: Output path, defaults to the path the document was read from

        Returns:
            The path written to

        Raises:
            ConfigIOError: If the file cannot be written
        """
        path = path or self.source_path
        if path is None:
            raise ValueError("No output path given and document has no source path")

        directory = os.path.dirname(os.path.abspath(path))
        tmp_path = None
        written = False
        try:
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=directory,
                                             prefix='.dhcpcd_', delete=False) as tmp:
                tmp_path = tmp.name
                tmp.write(self.to_text())
                tmp.flush()
                os.fsync(tmp.fileno())

            if os.path.exists(path):
                os.chmod(tmp_path, stat.S_IMODE(os.stat(path).st_mode))
            os.replace(tmp_path, path)
            written = True
        except (OSError, UnicodeError) as e:
            raise ConfigIOError(path, getattr(e, 'strerror', None) or str(e), operation='write') from e
        finally:
            if not written and tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.debug(f"Wrote {len(self._lines)} lines to {path}")
        return path
