"""
Grammar-driven recognizer for timewarrior data lines.

Grammar::

    <line>    ::= <kind> <start> <trailer>?
    <trailer> ::= "#" <tags>
                | "-" <end> ("#" <tags>)?
    <start>, <end> ::= YYYYMMDDTHHMMSSZ

Parsing runs four steps in strict order over one TokenStream. Each
step consumes only the tokens it needs and cannot look back:

1. kind     -- one token, verbatim.        Missing -> GenericLineError.
2. start    -- one token, parse_date().    Missing/bad -> NoDateError.
3. trailer  -- one lookahead token decides the interval shape:
               "#"     open interval, tags follow
               "-"     closed interval; needs an end token, and the
                       token after it must be absent or "#"
               absent  open interval, no tags
               other   GenericLineError
4. tags     -- remaining tokens go to the tag lexer.

Open intervals take ``end`` from the parser's clock, sampled once per
line. The clock is injectable so tests can pin it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from timew_line.config import ParserConfig
from timew_line.dates import parse_date
from timew_line.exceptions import GenericLineError, LineParseError, NoDateError
from timew_line.record import TimeRecord
from timew_line.tags import SEPARATOR, LexState, scan_tags
from timew_line.tokenizer import TokenStream

logger = logging.getLogger(__name__)

OPEN_MARKER = "#"
RANGE_MARKER = "-"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current UTC time truncated to whole seconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class _Trailer:
    """Outcome of the trailer step."""
    end: datetime | None
    has_tags: bool


class LineParser:
    """Parses single timewarrior lines into TimeRecord values.

    Instances hold no per-line state and can be shared freely.

    Args:
        config: Strictness settings; ``ParserConfig()`` if omitted.
        clock: Zero-argument callable returning an aware UTC datetime,
            used as ``end`` for open intervals. Defaults to ``utc_now``.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config if config is not None else ParserConfig()
        self.clock = clock if clock is not None else utc_now

    def parse(self, line: str) -> TimeRecord:
        """Parse one line.

        Raises:
            NoDateError: If the start date is missing or malformed.
            GenericLineError: For every other grammar violation.
        """
        stream = TokenStream.from_line(line)
        try:
            record = self._parse_stream(stream)
        except LineParseError as exc:
            if exc.line is None:
                exc.line = line
            logger.debug("Rejected line %r: %s", line, exc.message)
            raise
        logger.debug(
            "Parsed %s interval kind=%s start=%s tags=%d",
            "open" if record.active else "closed",
            record.kind,
            record.start.isoformat(),
            len(record.tags),
        )
        return record

    # -----------------------------------------------------------------
    # Grammar steps
    # -----------------------------------------------------------------

    def _parse_stream(self, stream: TokenStream) -> TimeRecord:
        kind = self._read_kind(stream)
        start = self._read_start(stream)
        trailer = self._read_trailer(stream)
        tags = self._read_tags(stream) if trailer.has_tags else []

        active = trailer.end is None
        end = self.clock() if active else trailer.end

        if (
            self.config.require_ordered_interval
            and not active
            and end < start
        ):
            raise GenericLineError(
                f"End {end.isoformat()} precedes start {start.isoformat()}"
            )

        return TimeRecord(
            kind=kind,
            start=start,
            end=end,
            tags=tuple(tags),
            active=active,
        )

    @staticmethod
    def _read_kind(stream: TokenStream) -> str:
        kind = stream.next()
        if kind is None:
            raise GenericLineError("Empty line, no kind")
        return kind

    @staticmethod
    def _read_start(stream: TokenStream) -> datetime:
        token = stream.next()
        start = parse_date(token) if token is not None else None
        if start is None:
            raise NoDateError()
        return start

    @staticmethod
    def _read_trailer(stream: TokenStream) -> _Trailer:
        marker = stream.next()
        if marker is None:
            return _Trailer(end=None, has_tags=False)
        if marker == OPEN_MARKER:
            return _Trailer(end=None, has_tags=True)
        if marker != RANGE_MARKER:
            raise GenericLineError(f"Unexpected token {marker!r}")

        end_token = stream.next()
        if end_token is None:
            raise GenericLineError(f"Missing end date after {RANGE_MARKER!r}")

        # Only "#" or end of line may follow the end date.
        after = stream.next()
        if after is not None and after != OPEN_MARKER:
            raise GenericLineError(f"Unexpected token {after!r}")

        end = parse_date(end_token)
        if end is None:
            raise GenericLineError(f"Unparseable end date {end_token!r}")
        return _Trailer(end=end, has_tags=after == OPEN_MARKER)

    def _read_tags(self, stream: TokenStream) -> list[str]:
        tags, state = scan_tags(SEPARATOR.join(stream.rest()))
        if self.config.reject_unbalanced_quotes and state is LexState.QUOTED:
            raise GenericLineError("Unbalanced quote in tag section")
        if self.config.drop_empty_tags:
            tags = [t for t in tags if t]
        return tags


def parse_line(
    line: str,
    config: ParserConfig | None = None,
    clock: Clock | None = None,
) -> TimeRecord:
    """Parse one timewarrior line with a throwaway LineParser.

    Example::

        >>> rec = parse_line("inc 20001011T133055Z - 20001011T134055Z # work")
        >>> rec.duration()
        datetime.timedelta(seconds=600)
        >>> rec.tags
        ('work',)
    """
    return LineParser(config=config, clock=clock).parse(line)
