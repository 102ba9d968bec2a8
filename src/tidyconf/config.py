#  Copyright (c) 2025 Tom Villani, Ph.D.
"""The configuration value store.

``TidyConfig`` owns the current and snapshot values of every option, the
derived tag dictionary, the diagnostics of the parses run against it and
the optional fallback handlers for unknown option names. The operations
themselves live in their component modules (``loader``, ``snapshot``,
``writer``, ``consistency``); the methods here are thin entry points.

Examples
--------
    >>> config = TidyConfig()
    >>> config.parse_option("wrap", "0")
    True
    >>> config.adjust()
    >>> config.get_int(OptionId.WRAP_LEN)
    2147483647

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Callable, Optional, Union

from tidyconf import loader, snapshot, writer
from tidyconf.consistency import adjust_config
from tidyconf.constants import (
    DEFAULT_CONFIG_FILE_ENCODING,
    N_OPTIONS,
    DoctypeMode,
    OptionId,
    OptionType,
    TriState,
    UserTagType,
)
from tidyconf.diagnostics import Diagnostics
from tidyconf.exceptions import OptionTypeError
from tidyconf.picklists import AUTO_BOOL_PICKS, DOCTYPE_PICKS
from tidyconf.registry import OPTION_DEFS, OptionDescriptor, get_option, lookup_option
from tidyconf.tags import TagDictionary
from tidyconf.tokenizer import ConfigTokenizer
from tidyconf.values import DEFAULT_STR, IntValue, OptionValue, StrValue, string_value

logger = logging.getLogger(__name__)

OptionCallback = Callable[[str, str], bool]
ConfigCallback = Callable[["TidyConfig", str, str], bool]


def default_value(option: OptionDescriptor) -> OptionValue:
    """Return the default value of ``option`` as stored in a slot."""
    if option.type is OptionType.STRING:
        return DEFAULT_STR
    return IntValue(int(option.default or 0))


def default_values() -> list[OptionValue]:
    """Return a fresh list of default values for every option."""
    return [default_value(option) for option in OPTION_DEFS]


class TidyConfig:
    """Option values of one configuration context.

    Parameters
    ----------
    option_callback : callable, optional
        ``(name, value) -> bool`` consulted for option names the registry
        does not know; returning True accepts the property.
    config_callback : callable, optional
        ``(config, name, value) -> bool``, consulted like ``option_callback``.

    """

    def __init__(
        self,
        option_callback: Optional[OptionCallback] = None,
        config_callback: Optional[ConfigCallback] = None,
    ) -> None:
        self.values: list[OptionValue] = default_values()
        self.snapshot: list[OptionValue] = default_values()
        self.tags = TagDictionary()
        self.defined_tags = UserTagType.NULL
        self.diagnostics = Diagnostics()
        self.tokenizer = ConfigTokenizer()
        self.option_callback = option_callback
        self.config_callback = config_callback

    def __repr__(self) -> str:
        changed = sum(1 for option in OPTION_DEFS[1:] if not snapshot.value_eq_default(option, self.values[option.id]))
        return f"<TidyConfig {changed} non-default option(s), {self.option_errors} error(s)>"

    @property
    def option_errors(self) -> int:
        """Number of bad-argument and unknown-option reports so far."""
        return self.diagnostics.option_errors

    # -- typed access -------------------------------------------------------

    def _option(self, option_id: int, *kinds: OptionType) -> OptionDescriptor | None:
        option = get_option(option_id)
        if option is not None and option.type not in kinds:
            expected = " or ".join(kind.value for kind in kinds)
            raise OptionTypeError(option.name, expected, option.type.value)
        return option

    def get_int(self, option_id: int) -> int:
        """Return the integer value of an Integer or Boolean option."""
        option = self._option(option_id, OptionType.INTEGER, OptionType.BOOLEAN)
        if option is None:
            raise IndexError(f"option id {option_id} out of range")
        value = self.values[option_id]
        return value.value if isinstance(value, IntValue) else 0

    def get_bool(self, option_id: int) -> bool:
        """Return the value of a Boolean option."""
        option = self._option(option_id, OptionType.BOOLEAN)
        if option is None:
            raise IndexError(f"option id {option_id} out of range")
        return bool(self.get_int(option_id))

    def get_auto_bool(self, option_id: int) -> TriState:
        """Return the value of an auto/yes/no option."""
        option = self._option(option_id, OptionType.INTEGER)
        if option is None:
            raise IndexError(f"option id {option_id} out of range")
        if option.pick_list is not AUTO_BOOL_PICKS:
            raise OptionTypeError(option.name, "auto/yes/no", "plain Integer")
        return TriState(self.get_int(option_id))

    def get_string(self, option_id: int) -> str | None:
        """Return the value of a String option; None when at the default."""
        option = self._option(option_id, OptionType.STRING)
        if option is None:
            raise IndexError(f"option id {option_id} out of range")
        value = self.values[option_id]
        return value.text if isinstance(value, StrValue) else None

    def set_int(self, option_id: int, value: int) -> bool:
        """Store ``value`` for an Integer option; False if the id is out of range."""
        if self._option(option_id, OptionType.INTEGER) is None:
            return False
        self.values[option_id] = IntValue(int(value))
        return True

    def set_bool(self, option_id: int, value: bool) -> bool:
        """Store ``value`` for a Boolean option; False if the id is out of range."""
        if self._option(option_id, OptionType.BOOLEAN) is None:
            return False
        self.values[option_id] = IntValue(1 if value else 0)
        return True

    def set_string(self, option_id: int, value: str | None) -> bool:
        """Store ``value`` for a String option; empty or None restores the default."""
        if self._option(option_id, OptionType.STRING) is None:
            return False
        self.values[option_id] = string_value(value)
        return True

    def get_value(self, name: str) -> Union[int, str, None]:
        """Return the current value of the option called ``name``.

        Raises
        ------
        KeyError
            If no option has that name.

        """
        option = lookup_option(name)
        if option is None:
            raise KeyError(name)
        if option.is_string:
            return self.get_string(option.id)
        return self.get_int(option.id)

    def value_label(self, option_id: int) -> str:
        """Return the current value of an option as it would be written."""
        option = get_option(option_id)
        if option is None:
            raise IndexError(f"option id {option_id} out of range")
        if option.id == OptionId.DOCTYPE:
            # the mode decides between a keyword and the quoted identifier
            mode = self.get_int(OptionId.DOCTYPE_MODE)
            if mode == DoctypeMode.USER:
                return f'"{self.get_string(option_id) or ""}"'
            return DOCTYPE_PICKS.label_for(mode) or str(mode)
        if option.is_string:
            return self.get_string(option_id) or ""
        number = self.get_int(option_id)
        if option.pick_list is not None:
            label = option.pick_list.label_for(number)
            if label is not None:
                return label
        if option.type is OptionType.BOOLEAN:
            return "yes" if number else "no"
        return str(number)

    def declare_user_tag(self, option_id: int, tag_type: UserTagType, name: str) -> None:
        """Declare a tag and append its name to the option's list."""
        previous = self.get_string(option_id)
        self.tags.define_tag(tag_type, name)
        self.set_string(option_id, f"{previous}, {name}" if previous else name)

    # -- resets -------------------------------------------------------------

    def reset_option_to_default(self, option_id: int) -> bool:
        """Restore one option's default value; id 0 and out-of-range ids fail."""
        if not 0 < option_id < N_OPTIONS:
            return False
        self.values[option_id] = default_value(OPTION_DEFS[option_id])
        return True

    def reset_to_default(self) -> None:
        """Restore every default and forget all declared tags."""
        reset_config_to_default(self)

    def free(self) -> None:
        """Reset to defaults and make the defaults the snapshot."""
        free_config(self)

    # -- component operations -----------------------------------------------

    def parse_file(self, path: Union[str, Path], encoding: str = DEFAULT_CONFIG_FILE_ENCODING) -> int:
        """Read a configuration file; see ``loader.parse_config_file``."""
        return loader.parse_config_file(self, path, encoding)

    def parse_option(self, name: str, value: str | None) -> bool:
        """Set one option by name from text; see ``loader.parse_config_option``."""
        return loader.parse_config_option(self, name, value)

    def parse_value(self, option_id: int, value: str | None) -> bool:
        """Set one option by id from text; see ``loader.parse_config_value``."""
        return loader.parse_config_value(self, option_id, value)

    def adjust(self) -> None:
        """Run the consistency pass."""
        adjust_config(self)

    def take_snapshot(self) -> None:
        snapshot.take_config_snapshot(self)

    def reset_to_snapshot(self) -> None:
        snapshot.reset_config_to_snapshot(self)

    def copy_from(self, source: TidyConfig) -> None:
        """Copy every value of ``source`` into this configuration."""
        snapshot.copy_config(self, source)

    def diff_than_snapshot(self) -> bool:
        return snapshot.config_diff_than_snapshot(self)

    def diff_than_default(self) -> bool:
        return snapshot.config_diff_than_default(self)

    def save_file(self, path: Union[str, Path]) -> int:
        """Write non-default options to ``path``; see ``writer.save_config_file``."""
        return writer.save_config_file(self, path)

    def save_sink(self, sink: IO[bytes]) -> int:
        """Write non-default options to a binary stream."""
        return writer.save_config_sink(self, sink)


def reset_config_to_default(config: TidyConfig) -> None:
    """Restore every option default and forget all declared tags."""
    config.values = default_values()
    config.tags.free_declared_tags(UserTagType.NULL)
    config.defined_tags = UserTagType.NULL


def free_config(config: TidyConfig) -> None:
    """Reset ``config`` to defaults and take a snapshot of them."""
    reset_config_to_default(config)
    snapshot.take_config_snapshot(config)
