#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option value parsers.

Each parser reads characters from the configuration's active tokenizer and
stores the result for the option it was dispatched for. Every parser
returns True on success; on failure it records a bad-argument diagnostic
and leaves the option's previous value in place. Token lengths are bounded
and an over-long token is rejected rather than truncated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tidyconf.constants import (
    MAX_CSS_SELECTOR_LENGTH,
    MAX_ENCODING_NAME_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PICK_TOKEN_LENGTH,
    MAX_STRING_LENGTH,
    MAX_TAG_NAME_LENGTH,
    CustomTagsMode,
    DoctypeMode,
    OptionId,
    OptionType,
    UserTagType,
)
from tidyconf.consistency import adjust_char_encoding, apply_tab_indent
from tidyconf.encodings import char_encoding_id
from tidyconf.picklists import resolve_pick
from tidyconf.streams import END_OF_STREAM, Char
from tidyconf.tokenizer import ConfigTokenizer, is_digit, is_newline, is_white

if TYPE_CHECKING:
    from tidyconf.config import TidyConfig
    from tidyconf.registry import OptionDescriptor

logger = logging.getLogger(__name__)

QUOTES = ('"', "'")

TAG_OPTION_TYPES: dict[OptionId, UserTagType] = {
    OptionId.INLINE_TAGS: UserTagType.INLINE,
    OptionId.BLOCK_TAGS: UserTagType.BLOCK,
    OptionId.EMPTY_TAGS: UserTagType.EMPTY,
    OptionId.PRE_TAGS: UserTagType.PRE,
}

CUSTOM_TAG_TYPES: dict[int, UserTagType] = {
    CustomTagsMode.BLOCKLEVEL: UserTagType.BLOCK,
    CustomTagsMode.EMPTY: UserTagType.EMPTY,
    CustomTagsMode.INLINE: UserTagType.INLINE,
    CustomTagsMode.PRE: UserTagType.PRE,
}


class TokenOverflow(Exception):
    """Raised internally when a token exceeds its length bound."""


def read_token(
    tok: ConfigTokenizer,
    limit: int,
    stop: Callable[[Char], bool] = is_white,
    lower: bool = False,
) -> str:
    """Read characters from the current one until ``stop`` or end of stream.

    Raises
    ------
    TokenOverflow
        If more than ``limit`` characters would be read.

    """
    chars: list[str] = []
    c = tok.c
    while c is not END_OF_STREAM and not stop(c):
        if len(chars) >= limit:
            raise TokenOverflow(limit)
        chars.append(c.lower() if lower else c)
        c = tok.advance()
    return "".join(chars)


def read_delimited_string(tok: ConfigTokenizer, limit: int = MAX_STRING_LENGTH) -> str:
    """Read a possibly quoted value up to the closing quote or end of line.

    A leading ``"`` or ``'`` sets the delimiter. Leading whitespace is
    dropped and each run of whitespace becomes a single space.

    Raises
    ------
    TokenOverflow
        If the collapsed value is longer than ``limit``.

    """
    c = tok.skip_white()
    delim: str | None = None
    if c in QUOTES:
        delim = c
        c = tok.advance()

    chars: list[str] = []
    was_white = True
    while c is not END_OF_STREAM and not is_newline(c):
        if delim is not None and c == delim:
            break

        if is_white(c):
            if was_white:
                c = tok.advance()
                continue
            c = " "
            was_white = True
        else:
            was_white = False

        if len(chars) >= limit:
            raise TokenOverflow(limit)
        chars.append(c)
        c = tok.advance()
    return "".join(chars)


def parse_int(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse an unsigned decimal integer."""
    tok = config.tokenizer
    c = tok.skip_white()
    number = 0
    digits = False
    while is_digit(c):
        number = 10 * number + int(c)  # type: ignore[arg-type]
        digits = True
        c = tok.advance()

    if not digits:
        config.diagnostics.report_bad_argument(option.name)
        return False
    config.set_int(option.id, number)
    return True


def parse_name(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse a string containing no whitespace."""
    tok = config.tokenizer
    tok.skip_white()
    try:
        name = read_token(tok, MAX_NAME_LENGTH)
    except TokenOverflow:
        name = ""
    if not name:
        config.diagnostics.report_bad_argument(option.name)
        return False
    config.set_string(option.id, name)
    return True


def is_css1_selector(text: str) -> bool:
    """Check that ``text`` is usable as a CSS1 class name prefix.

    Letters and Latin-1 high characters may appear anywhere, digits and
    dashes anywhere but first, and a backslash escape admits up to four
    following digits or any single character.
    """
    valid = True
    esc_len = 0
    for pos, ch in enumerate(text):
        if not valid:
            break
        if ch == "\\":
            esc_len = 1
        elif ch.isdigit() and ch.isascii():
            if esc_len > 0:
                esc_len += 1
                valid = esc_len < 6
            if valid:
                valid = pos > 0 or esc_len > 0
        else:
            valid = (
                esc_len > 0
                or (pos > 0 and ch == "-")
                or (ch.isascii() and ch.isalpha())
                or ord(ch) >= 161
            )
            esc_len = 0
    return valid


def parse_css1_selector(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse a CSS class prefix; a dash is appended to terminate escapes."""
    tok = config.tokenizer
    tok.skip_white()
    try:
        selector = read_token(tok, MAX_CSS_SELECTOR_LENGTH)
    except TokenOverflow:
        config.diagnostics.report_bad_argument(option.name)
        return False

    if not selector:
        return False
    if not is_css1_selector(selector):
        config.diagnostics.report_bad_argument(option.name)
        return False

    config.set_string(option.id, selector + "-")
    return True


def parse_string(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse a string that may contain whitespace, optionally quoted."""
    try:
        text = read_delimited_string(config.tokenizer)
    except TokenOverflow:
        config.diagnostics.report_bad_argument(option.name)
        return False
    config.set_string(option.id, text)
    return True


def user_tag_type(config: TidyConfig, option: OptionDescriptor) -> UserTagType | None:
    """Return the tag category a tag-list option declares into."""
    if option.id == OptionId.CUSTOM_TAGS:
        return CUSTOM_TAG_TYPES.get(config.get_int(OptionId.USE_CUSTOM_TAGS))
    return TAG_OPTION_TYPES.get(option.id)


def parse_tag_names(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse a space or comma separated list of tag names.

    An indented line following a line break continues the list. When the
    next line is not indented, the consumed line break is handed back to
    the tokenizer so the property loop sees the boundary.
    """
    tag_type = user_tag_type(config, option)
    if tag_type is None:
        if option.id == OptionId.CUSTOM_TAGS:
            config.diagnostics.report_bad_argument(option.name)
        else:
            config.diagnostics.report_unknown_option(option.name)
        return False

    tok = config.tokenizer
    names: list[str] = []
    c = tok.skip_white()
    while c is not END_OF_STREAM:
        if c in (" ", "\t", ","):
            c = tok.advance()
            continue

        if is_newline(c):
            first = c
            c = tok.advance()
            if first == "\r" and c == "\n":
                c = tok.advance()
            if c is END_OF_STREAM:
                break
            if not is_white(c):
                tok.rewind_line_break()
                break
            continue

        try:
            name = read_token(tok, MAX_TAG_NAME_LENGTH, stop=lambda ch: is_white(ch) or ch == ",")
        except TokenOverflow:
            config.diagnostics.report_bad_argument(option.name)
            return False
        if name:
            names.append(name)
        c = tok.c

    if not names:
        config.diagnostics.report_bad_argument(option.name)
        return False

    config.set_string(option.id, None)
    config.tags.free_declared_tags(tag_type)
    config.defined_tags |= tag_type
    for name in names:
        config.declare_user_tag(option.id, tag_type, name)
    logger.debug("Declared %d %s tag(s) from %s", len(names), tag_type.name, option.name)
    return True


def get_pick_list_value(config: TidyConfig, option: OptionDescriptor) -> int | None:
    """Read a token and resolve it against the option's pick-list.

    Returns the ordinal of the matching choice, or None after recording a
    bad-argument diagnostic.
    """
    tok = config.tokenizer
    tok.skip_white()
    try:
        token = read_token(tok, MAX_PICK_TOKEN_LENGTH)
    except TokenOverflow:
        token = None

    value = None
    if token is not None and option.pick_list is not None:
        value = resolve_pick(option.pick_list, token)
    if value is None:
        config.diagnostics.report_bad_argument(option.name)
    return value


def parse_pick_list(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse a boolean or enumerated value from the option's pick-list."""
    value = get_pick_list_value(config, option)
    if value is None:
        return False
    if option.type is OptionType.BOOLEAN:
        config.set_bool(option.id, bool(value))
    elif option.type is OptionType.INTEGER:
        config.set_int(option.id, value)
    return True


def parse_tabs(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse ``indent-with-tabs``; turning it on makes each indent one unit wide."""
    value = get_pick_list_value(config, option)
    if value is None:
        return False
    tabs = value != 0
    config.set_bool(option.id, tabs)
    if tabs:
        apply_tab_indent(config)
    return True


def parse_char_enc(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse a character encoding name.

    Setting ``char-encoding`` also derives the input and output encodings.
    """
    tok = config.tokenizer
    tok.skip_white()
    try:
        name = read_token(tok, MAX_ENCODING_NAME_LENGTH, lower=True)
    except TokenOverflow:
        name = ""

    encoding = char_encoding_id(name) if name else -1
    if encoding < 0:
        config.diagnostics.report_bad_argument(option.name)
        return False

    config.set_int(option.id, encoding)
    if option.id == OptionId.CHAR_ENCODING:
        adjust_char_encoding(config, encoding)
    return True


def parse_doctype(config: TidyConfig, option: OptionDescriptor) -> bool:
    """Parse ``doctype``: a quoted formal public identifier or a doctype keyword.

    A quoted value such as ``"-//ACME//DTD HTML 3.14159//EN"`` is stored as
    the doctype string and switches the mode to user-supplied.
    """
    c = config.tokenizer.skip_white()
    if c in QUOTES:
        status = parse_string(config, option)
        if status:
            config.set_int(OptionId.DOCTYPE_MODE, DoctypeMode.USER)
        return status

    value = get_pick_list_value(config, option)
    if value is None:
        return False
    config.set_int(OptionId.DOCTYPE_MODE, value)
    return True
