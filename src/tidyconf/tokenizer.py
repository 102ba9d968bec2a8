#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Character-level scanner for configuration text.

The tokenizer keeps a "current character" pulled from a ``CharSource``
and offers the primitive moves the value parsers are written against.
A lookahead buffer of depth two lets a parser hand characters back so
the property loop re-observes a line boundary it has already consumed.
"""

from __future__ import annotations

import logging

from tidyconf.streams import END_OF_STREAM, Char, CharSource

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n\f")
NEWLINES = frozenset("\r\n")

LOOKAHEAD_DEPTH = 2


def is_white(ch: Char) -> bool:
    """Return True for spaces, tabs, form feeds and line breaks."""
    return ch is not None and ch in WHITESPACE


def is_newline(ch: Char) -> bool:
    """Return True for ``\\r`` and ``\\n``."""
    return ch is not None and ch in NEWLINES


def is_digit(ch: Char) -> bool:
    """Return True for ASCII decimal digits."""
    return ch is not None and "0" <= ch <= "9"


class ConfigTokenizer:
    """Scanner state over one active character source.

    Parameters
    ----------
    source : CharSource or None
        Where characters come from; with no source every read yields
        ``END_OF_STREAM``.

    """

    def __init__(self, source: CharSource | None = None) -> None:
        self.source = source
        self.c: Char = END_OF_STREAM
        self._lookahead: list[str] = []

    def _get(self) -> Char:
        if self._lookahead:
            return self._lookahead.pop()
        if self.source is not None:
            return self.source.next_char()
        return END_OF_STREAM

    @property
    def at_end(self) -> bool:
        return self.c is END_OF_STREAM

    def first_char(self) -> Char:
        """Load the first character of the source."""
        self.c = self._get()
        return self.c

    def advance(self) -> Char:
        """Move to the next character; stays put at end of stream."""
        if self.c is not END_OF_STREAM:
            self.c = self._get()
        return self.c

    def skip_white(self) -> Char:
        """Skip whitespace other than line breaks."""
        while is_white(self.c) and not is_newline(self.c):
            self.c = self._get()
        return self.c

    def unget(self, ch: str) -> None:
        """Push ``ch`` back so it is read again before the source.

        Characters come back out in reverse order of pushing.

        Raises
        ------
        OverflowError
            If the lookahead buffer is already full.

        """
        if len(self._lookahead) >= LOOKAHEAD_DEPTH:
            raise OverflowError("tokenizer lookahead buffer is full")
        self._lookahead.append(ch)

    def rewind_line_break(self) -> None:
        """Re-present a consumed line break ahead of the current character.

        Used after peeking at the first character of the next line: that
        character stays current while a synthetic ``\\n`` and then the
        character itself are queued, so ``next_property`` stops at the
        break instead of swallowing the following line.
        """
        if self.c is not END_OF_STREAM:
            self.unget(self.c)
        self.unget("\n")

    def next_property(self) -> Char:
        """Skip to the first character of the next logical property.

        Skips the remainder of the current physical line, treating
        ``\\r\\n``, ``\\r`` and ``\\n`` alike. A following line that starts
        with whitespace continues the same property and is skipped too.
        """
        while True:
            while self.c is not END_OF_STREAM and not is_newline(self.c):
                self.c = self._get()

            if self.c == "\r":
                self.c = self._get()

            if self.c == "\n":
                self.c = self._get()

            if not is_white(self.c):
                return self.c
