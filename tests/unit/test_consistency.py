#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the cross-option consistency pass."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tidyconf import TidyConfig
from tidyconf.consistency import ENCODING_PAIRS, adjust_char_encoding, adjust_config
from tidyconf.constants import MAX_WRAP_WIDTH, AttributeCase, CharEncoding, OptionId, TriState, UserTagType


@pytest.mark.unit
class TestAdjustConfig:
    """Tests for the individual consistency rules."""

    def test_enclose_block_text_implies_enclose_text(self, config):
        """Test that enclosing block text also encloses body text."""
        config.set_bool(OptionId.ENCLOSE_BLOCK_TEXT, True)
        adjust_config(config)
        assert config.get_bool(OptionId.ENCLOSE_BODY_TEXT)

    def test_no_indent_zeroes_spaces(self, config):
        """Test that indent: no sets the indent width to zero."""
        config.set_int(OptionId.INDENT_SPACES, 4)
        adjust_config(config)
        assert config.get_int(OptionId.INDENT_SPACES) == 0

    def test_auto_indent_keeps_spaces(self, config):
        """Test that indent: auto keeps the indent width."""
        config.set_int(OptionId.INDENT_CONTENT, TriState.AUTO)
        config.set_int(OptionId.INDENT_SPACES, 4)
        adjust_config(config)
        assert config.get_int(OptionId.INDENT_SPACES) == 4

    def test_zero_wrap_is_unlimited(self, config):
        """Test that wrap 0 becomes the maximum width."""
        config.set_int(OptionId.WRAP_LEN, 0)
        adjust_config(config)
        assert config.get_int(OptionId.WRAP_LEN) == MAX_WRAP_WIDTH

    def test_word_2000_declares_inline_tag(self, config):
        """Test that word-2000 declares o:p as an inline tag."""
        config.set_bool(OptionId.WORD_2000, True)
        adjust_config(config)
        assert config.tags.tag_type("o:p") is UserTagType.INLINE
        assert config.defined_tags & UserTagType.INLINE

    def test_xml_input_disables_xhtml(self, config):
        """Test that XML input wins over XHTML output."""
        config.set_bool(OptionId.XML_TAGS, True)
        config.set_bool(OptionId.XHTML_OUT, True)
        adjust_config(config)
        assert not config.get_bool(OptionId.XHTML_OUT)
        assert config.get_bool(OptionId.XML_OUT)
        assert config.get_bool(OptionId.XML_PIS)

    def test_xhtml_forces_lower_case(self, config):
        """Test that XHTML output implies XML output in lower case."""
        config.set_bool(OptionId.XHTML_OUT, True)
        config.set_bool(OptionId.UPPER_CASE_TAGS, True)
        config.set_int(OptionId.UPPER_CASE_ATTRS, AttributeCase.YES)
        adjust_config(config)
        assert config.get_bool(OptionId.XML_OUT)
        assert not config.get_bool(OptionId.UPPER_CASE_TAGS)
        assert config.get_int(OptionId.UPPER_CASE_ATTRS) == AttributeCase.NO

    def test_xml_declaration_for_legacy_encoding(self, config):
        """Test that XML output in a legacy encoding adds the XML declaration."""
        config.set_bool(OptionId.XML_OUT, True)
        config.set_int(OptionId.OUT_CHAR_ENCODING, CharEncoding.LATIN1)
        adjust_config(config)
        assert config.get_bool(OptionId.XML_DECL)

    def test_no_xml_declaration_for_utf8(self, config):
        """Test that UTF-8 XML output does not force the declaration."""
        config.set_bool(OptionId.XML_OUT, True)
        adjust_config(config)
        assert not config.get_bool(OptionId.XML_DECL)

    def test_xml_output_rules(self, config):
        """Test the requirements of XML output."""
        config.set_bool(OptionId.XML_OUT, True)
        config.set_int(OptionId.OUT_CHAR_ENCODING, CharEncoding.UTF16LE)
        config.set_bool(OptionId.QUOTE_AMPERSAND, False)
        config.set_bool(OptionId.OMIT_OPTIONAL_TAGS, True)
        adjust_config(config)
        assert config.get_int(OptionId.OUTPUT_BOM) == TriState.YES
        assert config.get_bool(OptionId.QUOTE_AMPERSAND)
        assert not config.get_bool(OptionId.OMIT_OPTIONAL_TAGS)


@pytest.mark.unit
class TestCharEncodingPairs:
    """Tests for deriving input and output encodings."""

    @pytest.mark.parametrize(
        "primary,expected_in,expected_out",
        [
            (CharEncoding.ASCII, CharEncoding.LATIN1, CharEncoding.ASCII),
            (CharEncoding.LATIN0, CharEncoding.LATIN0, CharEncoding.ASCII),
            (CharEncoding.WIN1252, CharEncoding.WIN1252, CharEncoding.ASCII),
            (CharEncoding.IBM858, CharEncoding.IBM858, CharEncoding.ASCII),
            (CharEncoding.UTF8, CharEncoding.UTF8, CharEncoding.UTF8),
            (CharEncoding.SHIFTJIS, CharEncoding.SHIFTJIS, CharEncoding.SHIFTJIS),
        ],
    )
    def test_pairs(self, config, primary, expected_in, expected_out):
        """Test the input/output pair of each primary encoding."""
        assert adjust_char_encoding(config, primary)
        assert config.get_int(OptionId.CHAR_ENCODING) == primary
        assert config.get_int(OptionId.IN_CHAR_ENCODING) == expected_in
        assert config.get_int(OptionId.OUT_CHAR_ENCODING) == expected_out

    def test_every_encoding_mapped(self):
        """Test that every encoding id has a pair."""
        assert set(ENCODING_PAIRS) == set(CharEncoding)

    def test_unmapped_encoding(self, config):
        """Test that an unmapped id changes nothing."""
        assert not adjust_char_encoding(config, 99)
        assert config.get_int(OptionId.CHAR_ENCODING) == CharEncoding.UTF8


BOOL_SWITCHES = [
    OptionId.ENCLOSE_BLOCK_TEXT,
    OptionId.WORD_2000,
    OptionId.XML_TAGS,
    OptionId.XHTML_OUT,
    OptionId.XML_OUT,
    OptionId.UPPER_CASE_TAGS,
    OptionId.OMIT_OPTIONAL_TAGS,
]


@pytest.mark.unit
class TestAdjustIdempotent:
    """Property-based tests for the consistency pass."""

    @given(
        st.lists(st.booleans(), min_size=len(BOOL_SWITCHES), max_size=len(BOOL_SWITCHES)),
        st.sampled_from(list(CharEncoding)),
        st.sampled_from(list(TriState)),
        st.integers(min_value=0, max_value=200),
    )
    def test_twice_equals_once(self, switches, out_enc, indent, wrap):
        """Test that running the pass twice leaves the same values as once."""
        config = TidyConfig()
        for option_id, value in zip(BOOL_SWITCHES, switches):
            config.set_bool(option_id, value)
        config.set_int(OptionId.OUT_CHAR_ENCODING, out_enc)
        config.set_int(OptionId.INDENT_CONTENT, indent)
        config.set_int(OptionId.WRAP_LEN, wrap)

        adjust_config(config)
        once = list(config.values)
        adjust_config(config)
        assert config.values == once
