"""tidyconf - the configuration engine of an HTML cleanup tool.

tidyconf keeps a typed value for every known option, reads values from
the native ``name: value`` configuration format (and from TOML, YAML,
JSON or ``pyproject.toml`` tables), keeps interdependent options
consistent, supports snapshot/restore/copy of whole configurations and
writes the non-default values back out.

Examples
--------
Read a configuration file and query a value:

    >>> from tidyconf import TidyConfig, OptionId
    >>> config = TidyConfig()
    >>> config.parse_file("site.tidyrc")
    0
    >>> config.get_int(OptionId.WRAP_LEN)
    68

Set values by name and save the result:

    >>> config.parse_option("indent", "auto")
    True
    >>> config.save_file("out.tidyrc")
    0

"""

from tidyconf.config import TidyConfig, default_value, free_config, reset_config_to_default
from tidyconf.consistency import adjust_char_encoding, adjust_config
from tidyconf.constants import (
    AttributeCase,
    CharEncoding,
    CustomTagsMode,
    DoctypeMode,
    DuplicateAttrs,
    Newline,
    OptionCategory,
    OptionId,
    OptionType,
    SortAttributes,
    TriState,
    UserTagType,
)
from tidyconf.diagnostics import ConfigMessage, Diagnostics, MessageKind
from tidyconf.encodings import char_encoding_id, char_encoding_name, char_encoding_opt_name
from tidyconf.exceptions import (
    ConfigFileError,
    ConfigFormatError,
    ConfigWriteError,
    OptionTypeError,
    TidyConfError,
    ValidationError,
)
from tidyconf.loader import parse_config_file, parse_config_option, parse_config_value
from tidyconf.mapping import apply_config_mapping, load_config, load_config_with_priority
from tidyconf.registry import OPTION_DEFS, OptionDescriptor, get_option, iter_options, iter_pick_labels, lookup_option
from tidyconf.snapshot import (
    config_diff_than_default,
    config_diff_than_snapshot,
    copy_config,
    reset_config_to_snapshot,
    take_config_snapshot,
)
from tidyconf.writer import save_config_file, save_config_sink

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Configuration store
    "TidyConfig",
    "default_value",
    "reset_config_to_default",
    "free_config",
    # Registry
    "OPTION_DEFS",
    "OptionDescriptor",
    "get_option",
    "lookup_option",
    "iter_options",
    "iter_pick_labels",
    # Parsing
    "parse_config_file",
    "parse_config_option",
    "parse_config_value",
    "load_config",
    "load_config_with_priority",
    "apply_config_mapping",
    # Consistency
    "adjust_config",
    "adjust_char_encoding",
    # Snapshots
    "take_config_snapshot",
    "reset_config_to_snapshot",
    "copy_config",
    "config_diff_than_snapshot",
    "config_diff_than_default",
    # Saving
    "save_config_file",
    "save_config_sink",
    # Encodings
    "char_encoding_id",
    "char_encoding_name",
    "char_encoding_opt_name",
    # Diagnostics
    "ConfigMessage",
    "Diagnostics",
    "MessageKind",
    # Constants
    "AttributeCase",
    "CharEncoding",
    "CustomTagsMode",
    "DoctypeMode",
    "DuplicateAttrs",
    "Newline",
    "OptionCategory",
    "OptionId",
    "OptionType",
    "SortAttributes",
    "TriState",
    "UserTagType",
    # Exceptions
    "TidyConfError",
    "ValidationError",
    "OptionTypeError",
    "ConfigFileError",
    "ConfigFormatError",
    "ConfigWriteError",
]
