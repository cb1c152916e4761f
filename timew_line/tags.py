"""
Quote-aware tag lexer.

The tokenizer has already split the tag section on whitespace, which
breaks multi-word tags such as ``"ABC CDE"`` apart. The residual tokens
are therefore rejoined with single spaces and rescanned here one
character at a time by a two-state machine:

    state     char    action                               next state
    --------  ------  -----------------------------------  ----------
    UNQUOTED  '"'     (dropped)                            QUOTED
    UNQUOTED  ' '     emit current tag, start a new one    UNQUOTED
    UNQUOTED  other   append                               UNQUOTED
    QUOTED    '"'     (dropped)                            UNQUOTED
    QUOTED    ' '     append                               QUOTED
    QUOTED    other   append                               QUOTED

At end of input a non-empty current tag is emitted. Ending in QUOTED
(unbalanced quotes) is not an error. Empty tags produced by adjacent
separators (e.g. ``"" x``) are emitted as-is; duplicates are kept.
"""

from __future__ import annotations

import enum


class LexState(enum.Enum):
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


QUOTE = '"'
SEPARATOR = " "


def scan_tags(text: str) -> tuple[list[str], LexState]:
    """Run the tag state machine over *text*.

    Returns:
        Tuple of (tags in source order, state at end of input). A final
        state of ``LexState.QUOTED`` means the quotes were unbalanced.
    """
    state = LexState.UNQUOTED
    tags: list[str] = []
    current: list[str] = []

    for char in text:
        if char == QUOTE:
            state = LexState.QUOTED if state is LexState.UNQUOTED else LexState.UNQUOTED
        elif char == SEPARATOR and state is LexState.UNQUOTED:
            tags.append("".join(current))
            current = []
        else:
            current.append(char)

    if current:
        tags.append("".join(current))
    return tags, state
