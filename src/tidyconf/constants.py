#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the tidyconf library.

This module centralizes the identifiers, enumerated values, buffer bounds
and default values used across the configuration engine. The numeric
values of every enumeration are significant: option values are stored as
plain integers and pick-list ordinals must line up with them.

Constants are organized by category:
1. Type Definitions - Literal types and enumerations
2. Option Identifiers - dense option ids matching the registry order
3. Enumerated Option Values - tri-state, doctype modes, newline styles
4. Buffer Bounds - maximum token lengths accepted by the value parsers
5. Defaults - default values that are not simple literals
"""

from __future__ import annotations

import os
from enum import Enum, IntEnum, IntFlag
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ShowFormat = Literal["table", "native"]


class OptionCategory(Enum):
    """Grouping of options for documentation and listing."""

    MARKUP = "markup"
    DIAGNOSTICS = "diagnostics"
    PRETTY_PRINT = "print"
    ENCODING = "encoding"
    MISCELLANEOUS = "misc"
    INTERNAL = "internal"


class OptionType(Enum):
    """Value kind declared by an option descriptor."""

    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    STRING = "String"


# =============================================================================
# Option Identifiers
# =============================================================================


class OptionId(IntEnum):
    """Dense option identifiers; the value doubles as the registry index."""

    UNKNOWN_OPTION = 0
    ACCESSIBILITY_CHECK_LEVEL = 1
    ALT_TEXT = 2
    ANCHOR_AS_NAME = 3
    ASCII_CHARS = 4
    BLOCK_TAGS = 5
    BODY_ONLY = 6
    BREAK_BEFORE_BR = 7
    CHAR_ENCODING = 8
    COERCE_END_TAGS = 9
    CSS_PREFIX = 10
    CUSTOM_TAGS = 11
    DECORATE_INFERRED_UL = 12
    DOCTYPE = 13
    DOCTYPE_MODE = 14
    DROP_EMPTY_ELEMS = 15
    DROP_EMPTY_PARAS = 16
    DROP_PROP_ATTRS = 17
    DUPLICATE_ATTRS = 18
    EMACS = 19
    EMACS_FILE = 20
    EMPTY_TAGS = 21
    ENCLOSE_BLOCK_TEXT = 22
    ENCLOSE_BODY_TEXT = 23
    ERR_FILE = 24
    ESCAPE_CDATA = 25
    ESCAPE_SCRIPTS = 26
    FIX_BACKSLASH = 27
    FIX_COMMENTS = 28
    FIX_URI = 29
    FORCE_OUTPUT = 30
    GDOC_CLEAN = 31
    HIDE_COMMENTS = 32
    HTML_OUT = 33
    IN_CHAR_ENCODING = 34
    INDENT_ATTRIBUTES = 35
    INDENT_CDATA = 36
    INDENT_CONTENT = 37
    INDENT_SPACES = 38
    INLINE_TAGS = 39
    JOIN_CLASSES = 40
    JOIN_STYLES = 41
    KEEP_FILE_TIMES = 42
    LITERAL_ATTRIBS = 43
    LOGICAL_EMPHASIS = 44
    LOWER_LITERALS = 45
    MAKE_BARE = 46
    MAKE_CLEAN = 47
    MARK = 48
    MERGE_DIVS = 49
    MERGE_EMPHASIS = 50
    MERGE_SPANS = 51
    META_CHARSET = 52
    NCR = 53
    NEWLINE = 54
    NUM_ENTITIES = 55
    OMIT_OPTIONAL_TAGS = 56
    OUT_CHAR_ENCODING = 57
    OUT_FILE = 58
    OUTPUT_BOM = 59
    PPRINT_TABS = 60
    PRESERVE_ENTITIES = 61
    PRE_TAGS = 62
    PUNCT_WRAP = 63
    QUIET = 64
    QUOTE_AMPERSAND = 65
    QUOTE_MARKS = 66
    QUOTE_NBSP = 67
    REPLACE_COLOR = 68
    SHOW_ERRORS = 69
    SHOW_INFO = 70
    SHOW_MARKUP = 71
    SHOW_META_CHANGE = 72
    SHOW_WARNINGS = 73
    SKIP_NESTED = 74
    SORT_ATTRIBUTES = 75
    STRICT_TAGS_ATTR = 76
    STYLE_TAGS = 77
    TAB_SIZE = 78
    UPPER_CASE_ATTRS = 79
    UPPER_CASE_TAGS = 80
    USE_CUSTOM_TAGS = 81
    VERT_SPACE = 82
    WARN_PROP_ATTRS = 83
    WORD_2000 = 84
    WRAP_ASP = 85
    WRAP_ATT_VALS = 86
    WRAP_JSTE = 87
    WRAP_LEN = 88
    WRAP_PHP = 89
    WRAP_SCRIPTLETS = 90
    WRAP_SECTION = 91
    WRITE_BACK = 92
    XHTML_OUT = 93
    XML_DECL = 94
    XML_OUT = 95
    XML_PIS = 96
    XML_SPACE = 97
    XML_TAGS = 98


N_OPTIONS = len(OptionId)

# =============================================================================
# Enumerated Option Values
# =============================================================================


class TriState(IntEnum):
    """Stored values of the auto/yes/no options."""

    NO = 0
    YES = 1
    AUTO = 2


class DuplicateAttrs(IntEnum):
    """Stored values of ``repeated-attributes``."""

    KEEP_FIRST = 0
    KEEP_LAST = 1


class DoctypeMode(IntEnum):
    """Stored values of ``doctype-mode``; order matches the doctype pick-list."""

    HTML5 = 0
    OMIT = 1
    AUTO = 2
    STRICT = 3
    LOOSE = 4
    USER = 5


class Newline(IntEnum):
    """Line ending written by the output sink."""

    LF = 0
    CRLF = 1
    CR = 2


class SortAttributes(IntEnum):
    """Stored values of ``sort-attributes``."""

    NONE = 0
    ALPHA = 1


class CustomTagsMode(IntEnum):
    """Stored values of ``custom-tags``."""

    NO = 0
    BLOCKLEVEL = 1
    EMPTY = 2
    INLINE = 3
    PRE = 4


class AttributeCase(IntEnum):
    """Stored values of ``uppercase-attributes``."""

    NO = 0
    YES = 1
    PRESERVE = 2


class CharEncoding(IntEnum):
    """Character encoding ids; order matches the encoding pick-list."""

    RAW = 0
    ASCII = 1
    LATIN0 = 2
    LATIN1 = 3
    UTF8 = 4
    ISO2022 = 5
    MACROMAN = 6
    WIN1252 = 7
    IBM858 = 8
    UTF16LE = 9
    UTF16BE = 10
    UTF16 = 11
    BIG5 = 12
    SHIFTJIS = 13


class UserTagType(IntFlag):
    """Categories of user-declared tags held by the tag dictionary."""

    NULL = 0
    EMPTY = 1
    INLINE = 2
    BLOCK = 4
    PRE = 8


UTF16_ENCODINGS = frozenset({CharEncoding.UTF16, CharEncoding.UTF16LE, CharEncoding.UTF16BE})

# Output encodings that never need an explicit XML declaration.
XML_DECL_EXEMPT_ENCODINGS = frozenset({CharEncoding.ASCII, CharEncoding.UTF8, CharEncoding.RAW}) | UTF16_ENCODINGS

# =============================================================================
# Buffer Bounds
# =============================================================================

MAX_OPTION_NAME_LENGTH = 63
MAX_PICK_TOKEN_LENGTH = 16
MAX_STRING_LENGTH = 8190
MAX_NAME_LENGTH = 1022
MAX_TAG_NAME_LENGTH = 1022
MAX_CSS_SELECTOR_LENGTH = 254
MAX_ENCODING_NAME_LENGTH = 62

MAX_WRAP_WIDTH = 0x7FFFFFFF

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_NEWLINE = Newline.CRLF if os.name == "nt" else Newline.LF
DEFAULT_CONFIG_FILE_ENCODING = "ascii"
DEFAULT_INDENT_SPACES = 2
DEFAULT_SHOW_ERRORS = 6
DEFAULT_TAB_SIZE = 8
DEFAULT_WRAP_LEN = 68

# Word 2000 documents use <o:p> as an inline element.
WORD_2000_INLINE_TAG = "o:p"

CONFIG_ENV_VAR = "TIDYCONF_CONFIG"
NATIVE_CONFIG_FILENAME = ".tidyrc"
MAPPING_CONFIG_FILENAMES = [".tidyconf.toml", ".tidyconf.yaml", ".tidyconf.yml", ".tidyconf.json"]
PYPROJECT_SECTION = "tidyconf"
