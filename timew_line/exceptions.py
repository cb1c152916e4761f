"""
Custom exception hierarchy for timew-line.

Why a custom hierarchy:
- The parse error taxonomy is closed: a line either has no usable start
  date (NoDateError) or violates some other grammar rule
  (GenericLineError). Callers can branch on the two leaf classes
  without inspecting message text.
- Config problems are kept apart from line problems so a caller reading
  thousands of lines can catch LineParseError per line and let config
  errors propagate.
"""

from __future__ import annotations


class TimewLineError(Exception):
    """Base exception for all timew-line errors."""


class LineParseError(TimewLineError):
    """Base class for the two ways a single line can fail to parse.

    Attributes:
        message: Human-readable description of the violated rule.
        line: The raw input line, when known.
    """

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message}: {self.line!r}"


class GenericLineError(LineParseError):
    """Raised for every grammar violation other than a missing start date.

    Covers: empty line, malformed trailer token, missing or unparseable
    end date, unexpected token after the end date, and any strictness
    check enabled through ParserConfig.
    """


class NoDateError(LineParseError):
    """Raised when the mandatory start date is missing or does not parse."""

    def __init__(self, line: str | None = None) -> None:
        super().__init__("No start date", line)


class ConfigValidationError(TimewLineError):
    """Raised when a parser config file is empty or unusable."""
