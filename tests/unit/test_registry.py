#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the option registry."""

import pytest

from tidyconf.constants import N_OPTIONS, OptionCategory, OptionId, OptionType
from tidyconf.picklists import BOOL_PICKS
from tidyconf.registry import OPTION_DEFS, get_option, iter_options, iter_pick_labels, lookup_option


@pytest.mark.unit
class TestOptionTable:
    """Tests for the option descriptor table."""

    def test_dense_ids(self):
        """Test that every descriptor sits at the index of its id."""
        assert len(OPTION_DEFS) == N_OPTIONS == 99
        for index, option in enumerate(OPTION_DEFS):
            assert option.id == index

    def test_placeholder_first(self):
        """Test that id 0 is the placeholder and cannot be set."""
        assert OPTION_DEFS[0].name == "unknown!"
        assert not OPTION_DEFS[0].settable

    def test_names_unique_and_lowercase(self):
        """Test that option names are unique lower-case strings."""
        names = [option.name for option in OPTION_DEFS]
        assert len(set(names)) == len(names)
        assert all(name == name.lower() for name in names)

    def test_booleans_use_bool_picks(self):
        """Test that every Boolean option with a parser uses the boolean pick-list."""
        for option in OPTION_DEFS:
            if option.type is OptionType.BOOLEAN and option.settable:
                assert option.pick_list is BOOL_PICKS, option.name

    def test_string_defaults_empty(self):
        """Test that string options default to no value."""
        for option in OPTION_DEFS:
            if option.is_string:
                assert option.default is None, option.name

    def test_doctype_mode_internal(self):
        """Test that doctype-mode is internal and has no parser."""
        option = OPTION_DEFS[OptionId.DOCTYPE_MODE]
        assert option.category is OptionCategory.INTERNAL
        assert option.parser is None


@pytest.mark.unit
class TestLookup:
    """Tests for option lookup and iteration."""

    def test_lookup_by_name(self):
        """Test finding an option by name in any case."""
        assert lookup_option("wrap").id == OptionId.WRAP_LEN
        assert lookup_option("Output-XHTML").id == OptionId.XHTML_OUT

    def test_lookup_unknown(self):
        """Test that unknown names are not found."""
        assert lookup_option("no-such-option") is None

    def test_get_option_bounds(self):
        """Test id bounds checking."""
        assert get_option(OptionId.QUIET).name == "quiet"
        assert get_option(N_OPTIONS) is None
        assert get_option(-1) is None

    def test_iter_options_skips_placeholder(self):
        """Test that iteration starts at id 1."""
        options = list(iter_options())
        assert len(options) == N_OPTIONS - 1
        assert options[0].id == 1

    def test_iter_options_by_category(self):
        """Test filtering options by category."""
        encoding_options = {option.name for option in iter_options(OptionCategory.ENCODING)}
        assert {"char-encoding", "input-encoding", "output-encoding", "newline"} <= encoding_options
        assert "wrap" not in encoding_options

    def test_iter_pick_labels(self):
        """Test listing the labels an option accepts."""
        assert list(iter_pick_labels(lookup_option("indent"))) == ["no", "yes", "auto"]
        assert list(iter_pick_labels(lookup_option("wrap"))) == []
