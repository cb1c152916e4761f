"""
The TimeRecord value object produced by parsing one timewarrior line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class TimeRecord:
    """One tracked interval.

    Attributes:
        kind: First word of the line (e.g. ``inc``); not interpreted.
        start: Interval start, aware UTC datetime, second precision.
        end: Interval end. For an open interval this is the clock reading
            taken when the line was parsed.
        tags: Tags in source order; duplicates and empty strings are kept.
        active: True iff the line carried no explicit end timestamp.
    """

    kind: str
    start: datetime
    end: datetime
    tags: tuple[str, ...] = field(default_factory=tuple)
    active: bool = False

    @classmethod
    def from_line(cls, line: str) -> TimeRecord:
        """Parse *line* with the default parser settings."""
        from timew_line.parser import parse_line

        return parse_line(line)

    def duration(self) -> timedelta:
        """Signed span ``end - start``."""
        return self.end - self.start

    def full_tag(self) -> str:
        return " ".join(self.tags)

    def get_day(self) -> date:
        """UTC calendar date of ``start``."""
        return self.start.date()
