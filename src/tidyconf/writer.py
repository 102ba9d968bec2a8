#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Saving configurations in the native ``name: value`` format.

Only options that differ from their defaults are written. Options with a
pick-list are written by canonical label, integers in decimal, booleans as
``yes``/``no`` and strings verbatim. ``doctype`` is written from the
doctype mode: a user-supplied doctype as a quoted string, any other
non-default mode by its label. Output uses the configured output encoding
and newline style.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Union

from tidyconf.constants import DoctypeMode, OptionId, OptionType
from tidyconf.exceptions import ConfigWriteError
from tidyconf.registry import OPTION_DEFS, OptionDescriptor
from tidyconf.snapshot import value_eq_default
from tidyconf.streams import OutputSink

if TYPE_CHECKING:
    from tidyconf.config import TidyConfig

logger = logging.getLogger(__name__)


def _write_option_string(option: OptionDescriptor, text: str, out: OutputSink) -> int:
    out.write(f"{option.name}: {text}\n")
    return 0


def _write_option_pick(option: OptionDescriptor, ordinal: int, out: OutputSink) -> int:
    label = option.pick_list.label_for(ordinal) if option.pick_list is not None else None
    if label is None:
        logger.error("Value %s of option %s has no pick-list label", ordinal, option.name)
        return -1
    return _write_option_string(option, label, out)


def doctype_is_default(config: TidyConfig) -> bool:
    """Return True when the doctype mode, which decides what is written, is its default."""
    return config.get_int(OptionId.DOCTYPE_MODE) == OPTION_DEFS[OptionId.DOCTYPE_MODE].default


def _write_doctype(config: TidyConfig, option: OptionDescriptor, out: OutputSink) -> int:
    mode = config.get_int(OptionId.DOCTYPE_MODE)
    if mode == DoctypeMode.USER:
        return _write_option_string(option, f'"{config.get_string(option.id) or ""}"', out)
    if doctype_is_default(config):
        return 0
    return _write_option_pick(option, mode, out)


# written ahead of the table order so that re-reading sees them before the
# options that depend on them
WRITE_FIRST: tuple[OptionId, ...] = (OptionId.USE_CUSTOM_TAGS,)


def write_order() -> list[OptionDescriptor]:
    """Return the options in the order they are saved."""
    first = [OPTION_DEFS[option_id] for option_id in WRITE_FIRST]
    return first + [option for option in OPTION_DEFS[1:] if option.id not in WRITE_FIRST]


def save_config_to_stream(config: TidyConfig, out: OutputSink) -> int:
    """Write every non-default, settable option to ``out``.

    Returns
    -------
    int
        0 on success, -1 if a stored value has no label in its pick-list;
        writing stops at the first failure.

    """
    rc = 0
    for option in write_order():
        if rc != 0:
            break
        if option.parser is None:
            continue

        if option.id == OptionId.DOCTYPE:
            rc = _write_doctype(config, option, out)
            continue

        value = config.values[option.id]
        if value_eq_default(option, value):
            continue

        if option.pick_list is not None:
            rc = _write_option_pick(option, config.get_int(option.id), out)
        elif option.type is OptionType.STRING:
            rc = _write_option_string(option, config.get_string(option.id) or "", out)
        elif option.type is OptionType.INTEGER:
            rc = _write_option_string(option, str(config.get_int(option.id)), out)
        else:
            rc = _write_option_string(option, "yes" if config.get_bool(option.id) else "no", out)
    out.flush()
    return rc


def _make_sink(config: TidyConfig, target: IO[bytes]) -> OutputSink:
    return OutputSink(
        target,
        encoding=config.get_int(OptionId.OUT_CHAR_ENCODING),
        newline=config.get_int(OptionId.NEWLINE),
    )


def save_config_file(config: TidyConfig, path: Union[str, Path]) -> int:
    """Save ``config`` to the file at ``path``.

    Raises
    ------
    ConfigWriteError
        If the file cannot be opened for writing.

    """
    try:
        with open(path, "wb") as handle:
            rc = save_config_to_stream(config, _make_sink(config, handle))
    except OSError as exc:
        raise ConfigWriteError(f"Cannot write configuration to {path}: {exc}", str(path), exc) from exc
    logger.debug("Saved configuration to %s (status %d)", path, rc)
    return rc


def save_config_sink(config: TidyConfig, sink: IO[bytes]) -> int:
    """Save ``config`` to a binary stream such as ``io.BytesIO``."""
    return save_config_to_stream(config, _make_sink(config, sink))
