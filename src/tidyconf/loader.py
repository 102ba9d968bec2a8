#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Reading option values from configuration files and name/value pairs.

Configuration file grammar::

    line        := comment | property | blank
    comment     := ('#' | "//") anything-to-eol
    property    := name ':' value
    continuation:= a value may continue onto following lines that
                   begin with whitespace

A malformed property is reported and skipped; the file is always read to
the end. Only a file that cannot be opened, or an unknown file encoding,
stops a parse before it starts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from tidyconf._path_utils import expand_tilde
from tidyconf.consistency import adjust_config
from tidyconf.constants import DEFAULT_CONFIG_FILE_ENCODING, MAX_OPTION_NAME_LENGTH
from tidyconf.encodings import char_encoding_id
from tidyconf.exceptions import ConfigFileError
from tidyconf.parsers import TokenOverflow, read_delimited_string
from tidyconf.registry import get_option, lookup_option
from tidyconf.streams import END_OF_STREAM, FileSource, StringSource
from tidyconf.tokenizer import ConfigTokenizer, is_newline

if TYPE_CHECKING:
    from tidyconf.config import TidyConfig

logger = logging.getLogger(__name__)

COMMENT_STARTS = ("#", "/")


def parse_config_file(
    config: TidyConfig, path: Union[str, Path], encoding: str = DEFAULT_CONFIG_FILE_ENCODING
) -> int:
    """Read every property of a configuration file into ``config``.

    Parameters
    ----------
    config : TidyConfig
        Configuration receiving the values
    path : str or Path
        File to read; a leading ``~`` is expanded
    encoding : str, default "ascii"
        Configuration-file name of the file's character encoding

    Returns
    -------
    int
        1 if any bad-argument or unknown-option diagnostics were recorded
        during this call, otherwise 0.

    Raises
    ------
    ConfigFileError
        If the file cannot be opened or ``encoding`` is not recognized.

    """
    errors_before = config.option_errors
    file_name = expand_tilde(str(path))
    enc = char_encoding_id(encoding)

    source: FileSource | None = None
    failure: Exception | None = None
    if enc >= 0:
        try:
            source = FileSource(file_name, enc)
        except (OSError, LookupError) as exc:
            failure = exc

    if source is None:
        config.diagnostics.report_file_error(file_name)
        reason = f"unknown encoding '{encoding}'" if enc < 0 else str(failure)
        raise ConfigFileError(f"Cannot open configuration file {file_name}: {reason}", file_name, failure)

    logger.debug("Reading configuration from %s (%s)", file_name, encoding)
    previous = config.tokenizer
    with source:
        tok = config.tokenizer = ConfigTokenizer(source)
        try:
            tok.first_char()
            c = tok.skip_white()
            while c is not END_OF_STREAM:
                if c not in COMMENT_STARTS:
                    _parse_property(config, tok)
                c = tok.next_property()
        finally:
            config.tokenizer = previous

    adjust_config(config)
    return 1 if config.option_errors > errors_before else 0


def _parse_property(config: TidyConfig, tok: ConfigTokenizer) -> None:
    """Parse one ``name: value`` property starting at the current character."""
    chars: list[str] = []
    c = tok.c
    while c is not END_OF_STREAM and not is_newline(c) and c != ":":
        if len(chars) >= MAX_OPTION_NAME_LENGTH:
            config.diagnostics.report_unknown_option("".join(chars))
            return
        chars.append(c)
        c = tok.advance()

    if c != ":":
        return

    name = "".join(chars).strip()
    option = lookup_option(name)
    tok.advance()
    if option is None:
        _offer_to_callbacks(config, tok, name)
    elif option.parser is None:
        config.diagnostics.report_bad_argument(option.name)
    else:
        option.parser(config, option)


def _has_callbacks(config: TidyConfig) -> bool:
    return config.option_callback is not None or config.config_callback is not None


def _callbacks_accept(config: TidyConfig, name: str, value: str) -> bool:
    """Return True if every installed fallback handler accepts the property."""
    accepted = True
    if config.option_callback is not None:
        accepted = accepted and config.option_callback(name, value)
    if config.config_callback is not None:
        accepted = accepted and config.config_callback(config, name, value)
    return accepted


def _offer_to_callbacks(config: TidyConfig, tok: ConfigTokenizer, name: str) -> None:
    """Hand an unknown property to the fallback handlers, if any."""
    if not _has_callbacks(config):
        config.diagnostics.report_unknown_option(name)
        return

    try:
        value = read_delimited_string(tok)
    except TokenOverflow:
        config.diagnostics.report_unknown_option(name)
        return

    if not _callbacks_accept(config, name, value):
        config.diagnostics.report_unknown_option(name)


def parse_config_option(config: TidyConfig, name: str, value: str | None) -> bool:
    """Set the option called ``name`` from ``value``.

    Returns False for an unknown option that the fallback handlers do not
    accept, a missing value, or a value the option's parser rejects.
    """
    option = lookup_option(name)
    if option is None:
        status = _has_callbacks(config) and _callbacks_accept(config, name, value or "")
        if not status:
            config.diagnostics.report_unknown_option(name)
        return status
    return parse_config_value(config, option.id, value)


def parse_config_value(config: TidyConfig, option_id: int, value: str | None) -> bool:
    """Run the parser of option ``option_id`` over ``value``."""
    option = get_option(option_id)
    if option is None:
        config.diagnostics.report_unknown_option(str(option_id))
        return False
    if option.parser is None or value is None:
        config.diagnostics.report_bad_argument(option.name)
        return False

    previous = config.tokenizer
    source = StringSource(value)
    config.tokenizer = ConfigTokenizer(source)
    try:
        config.tokenizer.first_char()
        return option.parser(config, option)
    finally:
        source.close()
        config.tokenizer = previous
