#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Cross-option consistency rules.

``adjust_config`` is the post-pass run after a configuration file has been
read, before a snapshot is taken and after a bulk copy. It is idempotent:
running it twice leaves the same values as running it once. The two
named actions below it are invoked directly by individual value parsers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tidyconf.constants import (
    MAX_WRAP_WIDTH,
    UTF16_ENCODINGS,
    WORD_2000_INLINE_TAG,
    XML_DECL_EXEMPT_ENCODINGS,
    AttributeCase,
    CharEncoding,
    OptionId,
    TriState,
    UserTagType,
)

if TYPE_CHECKING:
    from tidyconf.config import TidyConfig

logger = logging.getLogger(__name__)

# primary encoding -> (input encoding, output encoding)
ENCODING_PAIRS: dict[int, tuple[CharEncoding, CharEncoding]] = {
    CharEncoding.MACROMAN: (CharEncoding.MACROMAN, CharEncoding.ASCII),
    CharEncoding.WIN1252: (CharEncoding.WIN1252, CharEncoding.ASCII),
    CharEncoding.IBM858: (CharEncoding.IBM858, CharEncoding.ASCII),
    CharEncoding.ASCII: (CharEncoding.LATIN1, CharEncoding.ASCII),
    CharEncoding.LATIN0: (CharEncoding.LATIN0, CharEncoding.ASCII),
}
for _enc in (
    CharEncoding.RAW,
    CharEncoding.LATIN1,
    CharEncoding.UTF8,
    CharEncoding.ISO2022,
    CharEncoding.UTF16LE,
    CharEncoding.UTF16BE,
    CharEncoding.UTF16,
    CharEncoding.SHIFTJIS,
    CharEncoding.BIG5,
):
    ENCODING_PAIRS[_enc] = (_enc, _enc)
del _enc


def adjust_char_encoding(config: TidyConfig, encoding: int) -> bool:
    """Derive input and output encodings from a primary encoding.

    Returns False, changing nothing, when the encoding has no mapping.
    """
    pair = ENCODING_PAIRS.get(encoding)
    if pair is None:
        logger.debug("No input/output mapping for encoding id %s", encoding)
        return False

    in_enc, out_enc = pair
    config.set_int(OptionId.CHAR_ENCODING, encoding)
    config.set_int(OptionId.IN_CHAR_ENCODING, in_enc)
    config.set_int(OptionId.OUT_CHAR_ENCODING, out_enc)
    return True


def apply_tab_indent(config: TidyConfig) -> None:
    """Indenting with tabs makes one indent unit one tab wide."""
    config.set_int(OptionId.INDENT_SPACES, 1)


def adjust_config(config: TidyConfig) -> None:
    """Enforce the implications between options.

    Rules are applied in order and later rules see the effect of earlier
    ones.
    """
    if config.get_bool(OptionId.ENCLOSE_BLOCK_TEXT):
        config.set_bool(OptionId.ENCLOSE_BODY_TEXT, True)

    if config.get_auto_bool(OptionId.INDENT_CONTENT) == TriState.NO:
        config.set_int(OptionId.INDENT_SPACES, 0)

    # a zero width disables wrapping
    if config.get_int(OptionId.WRAP_LEN) == 0:
        config.set_int(OptionId.WRAP_LEN, MAX_WRAP_WIDTH)

    if config.get_bool(OptionId.WORD_2000):
        config.defined_tags |= UserTagType.INLINE
        config.tags.define_tag(UserTagType.INLINE, WORD_2000_INLINE_TAG)

    # XML input and XHTML output are mutually exclusive
    if config.get_bool(OptionId.XML_TAGS):
        config.set_bool(OptionId.XHTML_OUT, False)

    # XHTML is written in lower case
    if config.get_bool(OptionId.XHTML_OUT):
        config.set_bool(OptionId.XML_OUT, True)
        config.set_bool(OptionId.UPPER_CASE_TAGS, False)
        config.set_int(OptionId.UPPER_CASE_ATTRS, AttributeCase.NO)

    if config.get_bool(OptionId.XML_TAGS):
        config.set_bool(OptionId.XML_OUT, True)
        config.set_bool(OptionId.XML_PIS, True)

    out_enc = config.get_int(OptionId.OUT_CHAR_ENCODING)
    if out_enc not in XML_DECL_EXEMPT_ENCODINGS and config.get_bool(OptionId.XML_OUT):
        config.set_bool(OptionId.XML_DECL, True)

    # XML requires end tags
    if config.get_bool(OptionId.XML_OUT):
        if out_enc in UTF16_ENCODINGS:
            config.set_int(OptionId.OUTPUT_BOM, TriState.YES)
        config.set_bool(OptionId.QUOTE_AMPERSAND, True)
        config.set_bool(OptionId.OMIT_OPTIONAL_TAGS, False)
