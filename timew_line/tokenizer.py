"""
Whitespace tokenizer and forward-only token cursor.

A line is split on runs of whitespace into bare word tokens (no
positions, no types). Grammar steps then pull tokens one at a time from
a TokenStream; a consumed token cannot be pushed back, so every step
sees exactly the lookahead it asked for and nothing more.
"""

from __future__ import annotations


def tokenize(line: str) -> list[str]:
    """Split *line* on runs of whitespace, discarding empty tokens."""
    return line.split()


class TokenStream:
    """Forward-only cursor over the tokens of one line."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    @classmethod
    def from_line(cls, line: str) -> TokenStream:
        return cls(tokenize(line))

    def next(self) -> str | None:
        """Consume and return the next token, or ``None`` at end of line."""
        if self._pos >= len(self._tokens):
            return None
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def rest(self) -> list[str]:
        """Consume and return every remaining token."""
        remaining = self._tokens[self._pos:]
        self._pos = len(self._tokens)
        return remaining
