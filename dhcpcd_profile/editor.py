# dhcpcd_profile/editor.py
"""Replacing a named profile block inside dhcpcd configuration lines."""

from typing import Dict, List, Sequence, Tuple

from dhcpcd_profile.constants import PROFILE_PREFIX, STATIC_PREFIX


def split_lines(text: str) -> List[str]:
    r"""
    Split text on "\n" only, dropping one trailing "\r" per line.

    A final newline does not start an extra empty line. Other control
    characters such as form feeds stay inside their line.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def profile_header(profile: str) -> str:
    """Header line that opens the block for a profile"""
    return f"{PROFILE_PREFIX}{profile}"


def split_profile(lines: Sequence[str], profile: str) -> Tuple[List[str], List[str]]:
    """
    Separate the block of a profile from the rest of the configuration lines.

    The block runs from the line equal to `profile <name>` up to, but not
    including, the next line starting with `profile `. Every header line
    switches the scan state, so a second matching header further down is
    taken out together with its content as well.

    Args:
        lines: Configuration lines without line terminators
        profile: Name of the profile to take out

    Returns:
        Tuple of (kept lines, removed lines), both in original order
    """
    header = profile_header(profile)
    in_profile = False
    kept = []
    removed = []

    for line in lines:
        if line.startswith(PROFILE_PREFIX):
            in_profile = line == header
        if in_profile:
            removed.append(line)
        else:
            kept.append(line)

    return kept, removed


def remove_profile(lines: Sequence[str], profile: str) -> List[str]:
    """Drop the block of a profile from configuration lines"""
    return split_profile(lines, profile)[0]


def render_profile(profile: str, variables: Dict[str, str]) -> List[str]:
    """Blank separator, header, then one `static key=value` line per variable"""
    block = ['', profile_header(profile)]
    block.extend(f"{STATIC_PREFIX}{key}={value}" for key, value in variables.items())
    return block


def append_profile(lines: Sequence[str], profile: str, variables: Dict[str, str]) -> List[str]:
    """
    Append a rendered profile block to lines that no longer contain it.

    The header is preceded by exactly one blank line. A blank line already
    ending the lines is reused as the separator instead of appending a blank
    line unconditionally, which would add one more blank line on every run.
    """
    new_lines = list(lines)
    block = render_profile(profile, variables)
    if new_lines and new_lines[-1] == '':
        block = block[1:]
    new_lines.extend(block)
    return new_lines


def replace_profile(lines: Sequence[str], profile: str, variables: Dict[str, str]) -> List[str]:
    """
    Remove the existing block of a profile and append a fresh one at the end.

    The input sequence is left untouched. The blank separator line before
    the new header is only added when the remaining lines do not already
    end with a blank line (see append_profile), so applying the same
    replacement twice gives the same result as applying it once.

    Args:
        lines: Current configuration lines
        profile: Profile name
        variables: Values written as `static` lines, in iteration order

    Returns:
        New configuration lines
    """
    return append_profile(remove_profile(lines, profile), profile, variables)
