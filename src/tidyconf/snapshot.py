#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Snapshots, restores, copies and difference checks.

Tag declarations made through the ``new-*-tags`` options live in the tag
dictionary, which a plain value copy does not carry. Whenever one of those
option values changes through a restore or copy, the affected category is
cleared and rebuilt by parsing the restored value again.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from tidyconf.consistency import adjust_config
from tidyconf.constants import N_OPTIONS, OptionId, OptionType, UserTagType
from tidyconf.loader import parse_config_value
from tidyconf.registry import OPTION_DEFS, OptionDescriptor
from tidyconf.values import DEFAULT_STR, IntValue, OptionValue, values_identical

if TYPE_CHECKING:
    from tidyconf.config import TidyConfig

logger = logging.getLogger(__name__)

# Options whose values are re-parsed when they change, in re-parse order.
USER_TAG_OPTIONS: tuple[tuple[OptionId, UserTagType], ...] = (
    (OptionId.INLINE_TAGS, UserTagType.INLINE),
    (OptionId.BLOCK_TAGS, UserTagType.BLOCK),
    (OptionId.EMPTY_TAGS, UserTagType.EMPTY),
    (OptionId.PRE_TAGS, UserTagType.PRE),
)


def value_eq_default(option: OptionDescriptor, value: OptionValue) -> bool:
    """Return True if ``value`` is the default of ``option``."""
    if option.type is OptionType.STRING:
        return value is DEFAULT_STR
    return isinstance(value, IntValue) and value.value == (option.default or 0)


def changed_user_tags(current: Sequence[OptionValue], new: Sequence[OptionValue]) -> UserTagType:
    """Return the tag categories whose declaring option differs between two value sets."""
    changed = UserTagType.NULL
    for option_id, tag_type in USER_TAG_OPTIONS:
        if not values_identical(current[option_id], new[option_id]):
            changed |= tag_type
    return changed


def reparse_tag_decls(config: TidyConfig, changed: UserTagType) -> None:
    """Rebuild the tag dictionary for every category in ``changed``."""
    for option_id, tag_type in USER_TAG_OPTIONS:
        if not changed & tag_type:
            continue
        config.tags.free_declared_tags(tag_type)
        declaration = config.get_string(option_id)
        if declaration:
            parse_config_value(config, option_id, declaration)
        else:
            config.defined_tags &= ~tag_type
        logger.debug("Re-declared %s tags after value change", tag_type.name)


def take_config_snapshot(config: TidyConfig) -> None:
    """Make the values consistent, then remember them as the snapshot."""
    adjust_config(config)
    config.snapshot = list(config.values)


def reset_config_to_snapshot(config: TidyConfig) -> None:
    """Restore the snapshot values, rebuilding changed tag declarations."""
    changed = changed_user_tags(config.values, config.snapshot)
    config.values = list(config.snapshot)
    if changed:
        reparse_tag_decls(config, changed)


def copy_config(dest: TidyConfig, source: TidyConfig) -> None:
    """Copy all option values of ``source`` into ``dest``.

    ``dest`` is snapshotted first so the copy can be undone with
    ``reset_config_to_snapshot``.
    """
    if dest is source:
        return
    changed = changed_user_tags(dest.values, source.values)
    take_config_snapshot(dest)
    dest.values = list(source.values)
    if changed:
        reparse_tag_decls(dest, changed)
    adjust_config(dest)


def config_diff_than_snapshot(config: TidyConfig) -> bool:
    """Return True if any option differs from the snapshot."""
    return any(not values_identical(config.values[ix], config.snapshot[ix]) for ix in range(N_OPTIONS))


def config_diff_than_default(config: TidyConfig) -> bool:
    """Return True if any option other than id 0 differs from its default."""
    return any(not value_eq_default(option, config.values[option.id]) for option in OPTION_DEFS[1:])
