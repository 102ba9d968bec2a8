#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for option values and the declared tag dictionary."""

import copy

import pytest

from tidyconf.constants import UserTagType
from tidyconf.tags import TagDictionary
from tidyconf.values import DEFAULT_STR, DefaultStr, IntValue, StrValue, string_value, value_as_text, values_identical


@pytest.mark.unit
class TestOptionValues:
    """Tests for the option value variants."""

    def test_default_str_is_singleton(self):
        """Test that DefaultStr always yields the same object."""
        assert DefaultStr() is DEFAULT_STR
        assert copy.copy(DEFAULT_STR) is DEFAULT_STR
        assert copy.deepcopy([DEFAULT_STR])[0] is DEFAULT_STR

    def test_empty_string_is_default(self):
        """Test that empty and missing text become the shared default."""
        assert string_value("") is DEFAULT_STR
        assert string_value(None) is DEFAULT_STR
        assert string_value("x") == StrValue("x")

    def test_identity_rules(self):
        """Test comparison of values of one option."""
        assert values_identical(DEFAULT_STR, DEFAULT_STR)
        assert not values_identical(DEFAULT_STR, StrValue("a"))
        assert values_identical(StrValue("a"), StrValue("a"))
        assert not values_identical(StrValue("a"), StrValue("b"))
        assert values_identical(IntValue(3), IntValue(3))

    def test_value_as_text(self):
        """Test extracting text from a value."""
        assert value_as_text(StrValue("abc")) == "abc"
        assert value_as_text(DEFAULT_STR) is None
        assert value_as_text(IntValue(1)) is None


@pytest.mark.unit
class TestTagDictionary:
    """Tests for TagDictionary."""

    def test_define_and_lookup(self):
        """Test declaring tags and reading their category back."""
        tags = TagDictionary()
        tags.define_tag(UserTagType.INLINE, "CFIF")
        assert "cfif" in tags
        assert "CfIf" in tags
        assert tags.tag_type("cfif") is UserTagType.INLINE
        assert len(tags) == 1

    def test_free_one_category(self):
        """Test that freeing one category keeps the others."""
        tags = TagDictionary()
        tags.define_tag(UserTagType.INLINE, "a1")
        tags.define_tag(UserTagType.BLOCK, "b1")
        tags.free_declared_tags(UserTagType.INLINE)
        assert list(tags) == ["b1"]

    def test_free_all(self):
        """Test that NULL clears every category."""
        tags = TagDictionary()
        tags.define_tag(UserTagType.PRE, "p1")
        tags.define_tag(UserTagType.EMPTY, "e1")
        tags.free_declared_tags()
        assert len(tags) == 0

    def test_redeclare_moves_category(self):
        """Test that declaring a name again changes its category."""
        tags = TagDictionary()
        tags.define_tag(UserTagType.INLINE, "x")
        tags.define_tag(UserTagType.BLOCK, "x")
        assert tags.tags_of(UserTagType.BLOCK) == ["x"]
        assert tags.tags_of(UserTagType.INLINE) == []
