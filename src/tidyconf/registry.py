#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option registry.

``OPTION_DEFS`` is the immutable table of every recognized option, stored
in ``OptionId`` order so an option id doubles as its index. Each row names
the routine that parses values for the option; a row without a parser
cannot be set on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from tidyconf.constants import (
    DEFAULT_INDENT_SPACES,
    DEFAULT_NEWLINE,
    DEFAULT_SHOW_ERRORS,
    DEFAULT_TAB_SIZE,
    DEFAULT_WRAP_LEN,
    N_OPTIONS,
    AttributeCase,
    CharEncoding,
    CustomTagsMode,
    DoctypeMode,
    DuplicateAttrs,
    OptionCategory,
    OptionId,
    OptionType,
    SortAttributes,
    TriState,
)
from tidyconf.parsers import (
    parse_char_enc,
    parse_css1_selector,
    parse_doctype,
    parse_int,
    parse_pick_list,
    parse_string,
    parse_tabs,
    parse_tag_names,
)
from tidyconf.picklists import (
    ACCESS_PICKS,
    ATTRIBUTE_CASE_PICKS,
    AUTO_BOOL_PICKS,
    BOOL_PICKS,
    CHAR_ENC_PICKS,
    CUSTOM_TAGS_PICKS,
    DOCTYPE_PICKS,
    NEWLINE_PICKS,
    REPEAT_ATTR_PICKS,
    SORTER_PICKS,
    PickList,
)

if TYPE_CHECKING:
    from tidyconf.config import TidyConfig

ParseProperty = Callable[["TidyConfig", "OptionDescriptor"], bool]


@dataclass(frozen=True)
class OptionDescriptor:
    """Static description of one configuration option."""

    id: OptionId
    category: OptionCategory
    name: str
    type: OptionType
    default: Optional[int]
    parser: Optional[ParseProperty]
    pick_list: Optional[PickList] = None

    @property
    def settable(self) -> bool:
        """Whether values can be parsed for this option directly."""
        return self.parser is not None

    @property
    def is_string(self) -> bool:
        return self.type is OptionType.STRING


MU = OptionCategory.MARKUP
DG = OptionCategory.DIAGNOSTICS
PP = OptionCategory.PRETTY_PRINT
CE = OptionCategory.ENCODING
MS = OptionCategory.MISCELLANEOUS
IR = OptionCategory.INTERNAL

IN = OptionType.INTEGER
BL = OptionType.BOOLEAN
ST = OptionType.STRING

no = 0
yes = 1

_D = OptionDescriptor
_O = OptionId

# fmt: off
OPTION_DEFS: tuple[OptionDescriptor, ...] = (
    _D(_O.UNKNOWN_OPTION,            MS, "unknown!",                    IN, 0,                           None),
    _D(_O.ACCESSIBILITY_CHECK_LEVEL, DG, "accessibility-check",         IN, 0,                           parse_pick_list,     ACCESS_PICKS),
    _D(_O.ALT_TEXT,                  MU, "alt-text",                    ST, None,                        parse_string),
    _D(_O.ANCHOR_AS_NAME,            MU, "anchor-as-name",              BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.ASCII_CHARS,               CE, "ascii-chars",                 BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.BLOCK_TAGS,                MU, "new-blocklevel-tags",         ST, None,                        parse_tag_names),
    _D(_O.BODY_ONLY,                 MU, "show-body-only",              IN, TriState.NO,                 parse_pick_list,     AUTO_BOOL_PICKS),
    _D(_O.BREAK_BEFORE_BR,           PP, "break-before-br",             BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.CHAR_ENCODING,             CE, "char-encoding",               IN, CharEncoding.UTF8,           parse_char_enc,      CHAR_ENC_PICKS),
    _D(_O.COERCE_END_TAGS,           MU, "coerce-endtags",              BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.CSS_PREFIX,                MU, "css-prefix",                  ST, None,                        parse_css1_selector),
    _D(_O.CUSTOM_TAGS,               IR, "new-custom-tags",             ST, None,                        parse_tag_names),
    _D(_O.DECORATE_INFERRED_UL,      MU, "decorate-inferred-ul",        BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.DOCTYPE,                   MU, "doctype",                     ST, None,                        parse_doctype,       DOCTYPE_PICKS),
    _D(_O.DOCTYPE_MODE,              IR, "doctype-mode",                IN, DoctypeMode.AUTO,            None,                DOCTYPE_PICKS),
    _D(_O.DROP_EMPTY_ELEMS,          MU, "drop-empty-elements",         BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.DROP_EMPTY_PARAS,          MU, "drop-empty-paras",            BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.DROP_PROP_ATTRS,           MU, "drop-proprietary-attributes", BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.DUPLICATE_ATTRS,           MU, "repeated-attributes",         IN, DuplicateAttrs.KEEP_LAST,    parse_pick_list,     REPEAT_ATTR_PICKS),
    _D(_O.EMACS,                     MS, "gnu-emacs",                   BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.EMACS_FILE,                IR, "gnu-emacs-file",              ST, None,                        parse_string),
    _D(_O.EMPTY_TAGS,                MU, "new-empty-tags",              ST, None,                        parse_tag_names),
    _D(_O.ENCLOSE_BLOCK_TEXT,        MU, "enclose-block-text",          BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.ENCLOSE_BODY_TEXT,         MU, "enclose-text",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.ERR_FILE,                  MS, "error-file",                  ST, None,                        parse_string),
    _D(_O.ESCAPE_CDATA,              MU, "escape-cdata",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.ESCAPE_SCRIPTS,            PP, "escape-scripts",              BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.FIX_BACKSLASH,             MU, "fix-backslash",               BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.FIX_COMMENTS,              MU, "fix-bad-comments",            BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.FIX_URI,                   MU, "fix-uri",                     BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.FORCE_OUTPUT,              MS, "force-output",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.GDOC_CLEAN,                MU, "gdoc",                        BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.HIDE_COMMENTS,             MU, "hide-comments",               BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.HTML_OUT,                  MU, "output-html",                 BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.IN_CHAR_ENCODING,          CE, "input-encoding",              IN, CharEncoding.UTF8,           parse_char_enc,      CHAR_ENC_PICKS),
    _D(_O.INDENT_ATTRIBUTES,         PP, "indent-attributes",           BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.INDENT_CDATA,              MU, "indent-cdata",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.INDENT_CONTENT,            PP, "indent",                      IN, TriState.NO,                 parse_pick_list,     AUTO_BOOL_PICKS),
    _D(_O.INDENT_SPACES,             PP, "indent-spaces",               IN, DEFAULT_INDENT_SPACES,       parse_int),
    _D(_O.INLINE_TAGS,               MU, "new-inline-tags",             ST, None,                        parse_tag_names),
    _D(_O.JOIN_CLASSES,              MU, "join-classes",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.JOIN_STYLES,               MU, "join-styles",                 BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.KEEP_FILE_TIMES,           MS, "keep-time",                   BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.LITERAL_ATTRIBS,           MU, "literal-attributes",          BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.LOGICAL_EMPHASIS,          MU, "logical-emphasis",            BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.LOWER_LITERALS,            MU, "lower-literals",              BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.MAKE_BARE,                 MU, "bare",                        BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.MAKE_CLEAN,                MU, "clean",                       BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.MARK,                      MS, "tidy-mark",                   BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.MERGE_DIVS,                MU, "merge-divs",                  IN, TriState.AUTO,               parse_pick_list,     AUTO_BOOL_PICKS),
    _D(_O.MERGE_EMPHASIS,            MU, "merge-emphasis",              BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.MERGE_SPANS,               MU, "merge-spans",                 IN, TriState.AUTO,               parse_pick_list,     AUTO_BOOL_PICKS),
    _D(_O.META_CHARSET,              MS, "add-meta-charset",            BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.NCR,                       MU, "ncr",                         BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.NEWLINE,                   CE, "newline",                     IN, DEFAULT_NEWLINE,             parse_pick_list,     NEWLINE_PICKS),
    _D(_O.NUM_ENTITIES,              MU, "numeric-entities",            BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.OMIT_OPTIONAL_TAGS,        MU, "omit-optional-tags",          BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.OUT_CHAR_ENCODING,         CE, "output-encoding",             IN, CharEncoding.UTF8,           parse_char_enc,      CHAR_ENC_PICKS),
    _D(_O.OUT_FILE,                  MS, "output-file",                 ST, None,                        parse_string),
    _D(_O.OUTPUT_BOM,                CE, "output-bom",                  IN, TriState.AUTO,               parse_pick_list,     AUTO_BOOL_PICKS),
    _D(_O.PPRINT_TABS,               PP, "indent-with-tabs",            BL, no,                          parse_tabs,          BOOL_PICKS),
    _D(_O.PRESERVE_ENTITIES,         MU, "preserve-entities",           BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.PRE_TAGS,                  MU, "new-pre-tags",                ST, None,                        parse_tag_names),
    _D(_O.PUNCT_WRAP,                PP, "punctuation-wrap",            BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.QUIET,                     MS, "quiet",                       BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.QUOTE_AMPERSAND,           MU, "quote-ampersand",             BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.QUOTE_MARKS,               MU, "quote-marks",                 BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.QUOTE_NBSP,                MU, "quote-nbsp",                  BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.REPLACE_COLOR,             MU, "replace-color",               BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.SHOW_ERRORS,               DG, "show-errors",                 IN, DEFAULT_SHOW_ERRORS,         parse_int),
    _D(_O.SHOW_INFO,                 DG, "show-info",                   BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.SHOW_MARKUP,               PP, "markup",                      BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.SHOW_META_CHANGE,          MS, "show-meta-change",            BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.SHOW_WARNINGS,             DG, "show-warnings",               BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.SKIP_NESTED,               MU, "skip-nested",                 BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.SORT_ATTRIBUTES,           PP, "sort-attributes",             IN, SortAttributes.NONE,         parse_pick_list,     SORTER_PICKS),
    _D(_O.STRICT_TAGS_ATTR,          MU, "strict-tags-attributes",      BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.STYLE_TAGS,                MU, "fix-style-tags",              BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.TAB_SIZE,                  PP, "tab-size",                    IN, DEFAULT_TAB_SIZE,            parse_int),
    _D(_O.UPPER_CASE_ATTRS,          MU, "uppercase-attributes",        IN, AttributeCase.NO,            parse_pick_list,     ATTRIBUTE_CASE_PICKS),
    _D(_O.UPPER_CASE_TAGS,           MU, "uppercase-tags",              BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.USE_CUSTOM_TAGS,           MU, "custom-tags",                 IN, CustomTagsMode.NO,           parse_pick_list,     CUSTOM_TAGS_PICKS),
    _D(_O.VERT_SPACE,                PP, "vertical-space",              IN, TriState.NO,                 parse_pick_list,     AUTO_BOOL_PICKS),
    _D(_O.WARN_PROP_ATTRS,           MU, "warn-proprietary-attributes", BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.WORD_2000,                 MU, "word-2000",                   BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.WRAP_ASP,                  PP, "wrap-asp",                    BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.WRAP_ATT_VALS,             PP, "wrap-attributes",             BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.WRAP_JSTE,                 PP, "wrap-jste",                   BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.WRAP_LEN,                  PP, "wrap",                        IN, DEFAULT_WRAP_LEN,            parse_int),
    _D(_O.WRAP_PHP,                  PP, "wrap-php",                    BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.WRAP_SCRIPTLETS,           PP, "wrap-script-literals",        BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.WRAP_SECTION,              PP, "wrap-sections",               BL, yes,                         parse_pick_list,     BOOL_PICKS),
    _D(_O.WRITE_BACK,                MS, "write-back",                  BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.XHTML_OUT,                 MU, "output-xhtml",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.XML_DECL,                  MU, "add-xml-decl",                BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.XML_OUT,                   MU, "output-xml",                  BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.XML_PIS,                   MU, "assume-xml-procins",          BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.XML_SPACE,                 MU, "add-xml-space",               BL, no,                          parse_pick_list,     BOOL_PICKS),
    _D(_O.XML_TAGS,                  MU, "input-xml",                   BL, no,                          parse_pick_list,     BOOL_PICKS),
)
# fmt: on

assert len(OPTION_DEFS) == N_OPTIONS
assert all(option.id == index for index, option in enumerate(OPTION_DEFS))


def lookup_option(name: str) -> OptionDescriptor | None:
    """Find an option by canonical name, ignoring case.

    The table is small and only consulted for options set by name, so a
    linear scan is enough.
    """
    folded = name.lower()
    for option in OPTION_DEFS:
        if option.name == folded:
            return option
    return None


def get_option(option_id: int) -> OptionDescriptor | None:
    """Return the descriptor for ``option_id``, or None when out of range."""
    if 0 <= option_id < N_OPTIONS:
        return OPTION_DEFS[option_id]
    return None


def iter_options(category: OptionCategory | None = None) -> Iterator[OptionDescriptor]:
    """Yield every real option (id 1 onwards), optionally filtered by category."""
    for option in OPTION_DEFS[1:]:
        if category is None or option.category is category:
            yield option


def iter_pick_labels(option: OptionDescriptor) -> Iterator[str]:
    """Yield the canonical labels an option accepts, in ordinal order."""
    if option.pick_list is not None:
        yield from option.pick_list.labels()
