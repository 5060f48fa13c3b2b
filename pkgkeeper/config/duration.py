"""Parsing of human-readable age strings."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Optional

# Unsuffixed means days
_DURATION_PATTERN = re.compile(r"([0-9]+)([hdw]?)")

_UNITS = {
    "": "days",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: Optional[str]) -> Optional[timedelta]:
    """Parse an age string such as "0", "12h", "3d" or "2w".

    Args:
        value: The literal to parse.

    Returns:
        The duration, or None if the literal is not in the grammar
        or is too large to represent.
    """
    if value is None:
        return None

    match = _DURATION_PATTERN.fullmatch(value.strip().lower())
    if match is None:
        return None

    amount = int(match.group(1))
    try:
        return timedelta(**{_UNITS[match.group(2)]: amount})
    except OverflowError:
        # Too large for a timedelta
        return None
