#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tidyconf/streams.py
"""Character sources and output sinks.

Configuration text is consumed one character at a time from a
``CharSource``; saved configurations are written through an
``OutputSink`` that applies the configured output encoding and newline
style.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import IO, Optional, Protocol

from tidyconf.constants import Newline
from tidyconf.encodings import python_codec

logger = logging.getLogger(__name__)

Char = Optional[str]

END_OF_STREAM: Char = None

_NEWLINE_TEXT = {
    Newline.LF: "\n",
    Newline.CRLF: "\r\n",
    Newline.CR: "\r",
}


class CharSource(Protocol):
    """Anything that hands out characters until it is exhausted."""

    def next_char(self) -> Char:
        """Return the next character, or ``END_OF_STREAM``."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...


class StringSource:
    """Character source over an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next_char(self) -> Char:
        if self._pos >= len(self._text):
            return END_OF_STREAM
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def close(self) -> None:
        self._pos = len(self._text)


class FileSource:
    """Character source decoding a file in a given encoding.

    Line endings are passed through untranslated so the tokenizer sees
    ``\\r\\n`` and ``\\r`` as written. Use as a context manager to
    guarantee the file handle is released.
    """

    def __init__(self, path: str | Path, encoding: int) -> None:
        self.path = Path(path)
        self._handle: IO[str] | None = open(
            self.path, "r", encoding=python_codec(encoding), errors="replace", newline=""
        )

    def __enter__(self) -> FileSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def next_char(self) -> Char:
        if self._handle is None:
            return END_OF_STREAM
        ch = self._handle.read(1)
        return ch if ch else END_OF_STREAM

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("Closed configuration source %s", self.path)


class OutputSink:
    """Encode text for a binary destination.

    Parameters
    ----------
    target : IO[bytes]
        Binary file-like object receiving the encoded bytes
    encoding : int
        ``CharEncoding`` id of the output
    newline : int
        ``Newline`` style substituted for every ``"\\n"`` written

    """

    def __init__(self, target: IO[bytes], encoding: int, newline: int) -> None:
        self._target = target
        self._encoder = codecs.getincrementalencoder(python_codec(encoding))(errors="xmlcharrefreplace")
        self._newline = _NEWLINE_TEXT.get(newline, "\n")

    def write(self, text: str) -> None:
        """Write ``text``, translating line feeds to the configured newline."""
        if self._newline != "\n":
            text = text.replace("\n", self._newline)
        data = self._encoder.encode(text)
        if data:
            self._target.write(data)

    def flush(self) -> None:
        """Emit any bytes the encoder is holding back."""
        data = self._encoder.encode("", final=True)
        if data:
            self._target.write(data)
        if hasattr(self._target, "flush"):
            self._target.flush()
