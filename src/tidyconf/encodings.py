#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tidyconf/encodings.py
"""Character encoding name table.

Maps the encoding names accepted in configuration files to encoding ids
and to the Python codecs used when reading configuration files and
writing saved configurations.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass

from tidyconf.constants import CharEncoding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodingInfo:
    """One row of the encoding table."""

    encoding: CharEncoding
    iana_name: str
    opt_name: str
    codec: str


ENCODING_TABLE: tuple[EncodingInfo, ...] = (
    EncodingInfo(CharEncoding.RAW, "raw", "raw", "latin-1"),
    EncodingInfo(CharEncoding.ASCII, "us-ascii", "ascii", "ascii"),
    EncodingInfo(CharEncoding.LATIN0, "iso-8859-15", "latin0", "iso8859-15"),
    EncodingInfo(CharEncoding.LATIN1, "iso-8859-1", "latin1", "latin-1"),
    EncodingInfo(CharEncoding.UTF8, "utf-8", "utf8", "utf-8"),
    EncodingInfo(CharEncoding.ISO2022, "iso-2022", "iso2022", "iso2022-jp"),
    EncodingInfo(CharEncoding.MACROMAN, "macintosh", "mac", "mac-roman"),
    EncodingInfo(CharEncoding.WIN1252, "windows-1252", "win1252", "cp1252"),
    EncodingInfo(CharEncoding.IBM858, "ibm00858", "ibm858", "cp858"),
    EncodingInfo(CharEncoding.UTF16LE, "utf-16le", "utf16le", "utf-16-le"),
    EncodingInfo(CharEncoding.UTF16BE, "utf-16be", "utf16be", "utf-16-be"),
    EncodingInfo(CharEncoding.UTF16, "utf-16", "utf16", "utf-16"),
    EncodingInfo(CharEncoding.BIG5, "big5", "big5", "big5"),
    EncodingInfo(CharEncoding.SHIFTJIS, "shift_jis", "shiftjis", "shift_jis"),
)

_BY_OPT_NAME = {info.opt_name: info for info in ENCODING_TABLE}
_BY_ID = {int(info.encoding): info for info in ENCODING_TABLE}


def char_encoding_id(name: str) -> int:
    """Return the encoding id for an option-style encoding name, or -1.

    Parameters
    ----------
    name : str
        Encoding name as written in a configuration file (e.g. "utf8", "mac")

    Returns
    -------
    int
        The matching ``CharEncoding`` value, or -1 when the name is unknown

    """
    info = _BY_OPT_NAME.get(name.lower())
    if info is None:
        logger.debug("Unknown character encoding name: %r", name)
        return -1
    return int(info.encoding)


def char_encoding_name(encoding: int) -> str:
    """Return the IANA-style name of an encoding id, or "unknown"."""
    info = _BY_ID.get(encoding)
    return info.iana_name if info is not None else "unknown"


def char_encoding_opt_name(encoding: int) -> str:
    """Return the configuration-file spelling of an encoding id, or "unknown"."""
    info = _BY_ID.get(encoding)
    return info.opt_name if info is not None else "unknown"


def python_codec(encoding: int) -> str:
    """Return the Python codec used to read or write text in ``encoding``.

    Raises
    ------
    LookupError
        If the id is not in the table or Python lacks the codec.

    """
    info = _BY_ID.get(encoding)
    if info is None:
        raise LookupError(f"No codec for encoding id {encoding}")
    return codecs.lookup(info.codec).name
