"""Helpers that consume a scanner from the end of a log."""

import re
from typing import List, Optional, Pattern, Tuple, Union

from ..scanner import BackScanner


def read_last_n_lines(
    scanner: BackScanner,
    n: int,
    reverse: bool = True,
    skip_empty: bool = False
) -> List[str]:
    """
    Read the last N lines preceding the scanner's cursor.

    Args:
        scanner: Scanner positioned at the end of the region to read
        n: Number of lines to read
        reverse: If True, return newest first; if False, return oldest first
        skip_empty: If True, empty lines are not counted or returned

    Returns:
        List of at most N lines
    """
    lines = []
    if n <= 0:
        return lines

    for line, _ in scanner:
        if skip_empty and not line:
            continue
        lines.append(line)
        if len(lines) >= n:
            break

    # reverse=True: newest first (as read from the end)
    # reverse=False: oldest first (chronological order)
    if not reverse:
        lines.reverse()

    return lines


def find_last(
    scanner: BackScanner,
    pattern: Union[str, Pattern[str]]
) -> Optional[Tuple[str, int]]:
    """
    Find the most recent line matching a regular expression.

    Args:
        scanner: Scanner positioned at the end of the region to search
        pattern: Regex string or compiled pattern, matched with search()

    Returns:
        Tuple of (line, absolute offset), or None if no line matches
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    for line, pos in scanner:
        if regex.search(line):
            return line, pos
    return None
