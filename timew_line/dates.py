"""
Timestamp parsing for timewarrior line tokens.

Timewarrior writes every instant as ``YYYYMMDDTHHMMSSZ`` in UTC, e.g.
``20001011T133055Z``. The trailing ``Z`` is the only zone marker that
is accepted; tokens ending in ``CEST``, ``+0200`` or a lowercase ``z``
are rejected. The offset is always fixed to UTC rather than read from
the token.

Two-stage check:
1. A strict shape regex rejects wrong lengths and non-digit fields,
   which ``strptime`` alone would tolerate (it accepts unpadded
   fields such as ``2000111``).
2. ``datetime.strptime`` rejects impossible calendar values
   (month 13, February 30, hour 24, ...).
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

DATE_FORMAT = "%Y%m%dT%H%M%SZ"

_DATE_PATTERN = re.compile(r"[0-9]{8}T[0-9]{6}Z")


def parse_date(token: str) -> datetime | None:
    """Parse a ``YYYYMMDDTHHMMSSZ`` token into an aware UTC datetime.

    Returns ``None`` on any failure; the caller decides which parse
    error that maps to.
    """
    if not _DATE_PATTERN.fullmatch(token):
        return None
    try:
        naive = datetime.strptime(token, DATE_FORMAT)
    except ValueError:
        return None
    return naive.replace(tzinfo=timezone.utc)
