"""
timew-line: parser for single timewarrior data-file lines.

Public API surface:

- ``parse_line(line, ...)`` -- **recommended entry point**. Parses one
  line into a ``TimeRecord`` or raises a ``LineParseError`` subclass.

- ``LineParser(config, clock)`` -- reusable parser holding strictness
  settings and the clock used for open intervals.

- ``TimeRecord`` -- immutable result: kind, start, end, tags, active,
  plus ``duration()``, ``full_tag()`` and ``get_day()``.

- ``load_config(path)`` / ``save_config(config, path)`` -- YAML I/O for
  ``ParserConfig``.

Reading data files and aggregating records are left to the caller::

    with open("2024-01.data", encoding="utf-8") as f:
        records = [timew_line.parse_line(line) for line in f if line.strip()]
"""

from __future__ import annotations

from timew_line.config import ParserConfig, load_config, save_config
from timew_line.dates import parse_date
from timew_line.exceptions import (
    ConfigValidationError,
    GenericLineError,
    LineParseError,
    NoDateError,
    TimewLineError,
)
from timew_line.parser import LineParser, parse_line
from timew_line.record import TimeRecord

__all__ = [
    "parse_line",
    "parse_date",
    "LineParser",
    "TimeRecord",
    "ParserConfig",
    "load_config",
    "save_config",
    "TimewLineError",
    "LineParseError",
    "GenericLineError",
    "NoDateError",
    "ConfigValidationError",
]
