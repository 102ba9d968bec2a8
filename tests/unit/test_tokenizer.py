#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the configuration tokenizer and character sources."""

import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tidyconf.constants import CharEncoding, Newline
from tidyconf.streams import END_OF_STREAM, FileSource, OutputSink, StringSource
from tidyconf.tokenizer import ConfigTokenizer, is_digit, is_newline, is_white


def _tokenizer(text: str) -> ConfigTokenizer:
    tok = ConfigTokenizer(StringSource(text))
    tok.first_char()
    return tok


@pytest.mark.unit
class TestCharacterClasses:
    """Tests for the character class helpers."""

    def test_white(self):
        """Test whitespace classification, including end of stream."""
        assert all(is_white(ch) for ch in " \t\r\n\f")
        assert not is_white("x")
        assert not is_white(END_OF_STREAM)

    def test_newline(self):
        """Test that only CR and LF are line breaks."""
        assert is_newline("\n") and is_newline("\r")
        assert not is_newline(" ")

    def test_digit(self):
        """Test ASCII digit detection."""
        assert is_digit("7")
        assert not is_digit("a")
        assert not is_digit(END_OF_STREAM)


@pytest.mark.unit
class TestConfigTokenizer:
    """Tests for ConfigTokenizer movement."""

    def test_without_source(self):
        """Test that a tokenizer with no source is always at the end."""
        tok = ConfigTokenizer()
        assert tok.first_char() is END_OF_STREAM
        assert tok.advance() is END_OF_STREAM
        assert tok.at_end

    def test_advance_stays_at_end(self):
        """Test that advancing past the end keeps returning end of stream."""
        tok = _tokenizer("a")
        assert tok.c == "a"
        assert tok.advance() is END_OF_STREAM
        assert tok.advance() is END_OF_STREAM

    def test_skip_white_stops_at_newline(self):
        """Test that skip_white does not cross a line break."""
        tok = _tokenizer(" \t\nx")
        assert tok.skip_white() == "\n"

    def test_unget_order_and_depth(self):
        """Test that pushed-back characters come out last-in first-out."""
        tok = _tokenizer("z")
        tok.unget("a")
        tok.unget("b")
        with pytest.raises(OverflowError):
            tok.unget("c")
        assert tok.advance() == "b"
        assert tok.advance() == "a"
        assert tok.advance() is END_OF_STREAM

    def test_rewind_line_break(self):
        """Test that a rewound line break is seen before the current character."""
        tok = _tokenizer("rest")
        tok.rewind_line_break()
        assert tok.c == "r"
        assert tok.next_property() == "r"
        assert tok.advance() == "e"

    def test_next_property_skips_continuation_lines(self):
        """Test that indented lines belong to the previous property."""
        tok = _tokenizer("a: 1\n  more\n\tstill\nb: 2")
        assert tok.next_property() == "b"

    def test_next_property_crlf(self):
        """Test that CRLF and CR line endings behave like LF."""
        assert _tokenizer("a: 1\r\nb: 2").next_property() == "b"
        assert _tokenizer("a: 1\rb: 2").next_property() == "b"

    def test_next_property_at_end(self):
        """Test that the last line leads to end of stream."""
        assert _tokenizer("a: 1").next_property() is END_OF_STREAM

    @given(
        st.text(alphabet="abc: ", max_size=20),
        st.sampled_from(["\n", "\r\n", "\r"]),
        st.text(alphabet="xyz", min_size=1, max_size=5),
    )
    def test_newline_styles_equivalent(self, first, newline, second):
        """Test that every newline style reaches the same next property."""
        tok = _tokenizer(f"{first}{newline}{second}")
        assert tok.next_property() == second[0]


@pytest.mark.unit
class TestStreams:
    """Tests for character sources and output sinks."""

    def test_string_source_close(self):
        """Test that a closed string source is exhausted."""
        source = StringSource("abc")
        assert source.next_char() == "a"
        source.close()
        assert source.next_char() is END_OF_STREAM

    def test_file_source_keeps_line_endings(self, temp_dir):
        """Test that file sources pass CR LF through untranslated."""
        path = temp_dir / "crlf.txt"
        path.write_bytes(b"a\r\nb")
        with FileSource(path, CharEncoding.ASCII) as source:
            chars = [source.next_char() for _ in range(5)]
        assert chars == ["a", "\r", "\n", "b", END_OF_STREAM]

    def test_file_source_decodes(self, temp_dir):
        """Test decoding with the configured encoding."""
        path = temp_dir / "latin.txt"
        path.write_bytes("é".encode("latin-1"))
        with FileSource(path, CharEncoding.LATIN1) as source:
            assert source.next_char() == "é"

    def test_sink_newline_translation(self):
        """Test that the sink writes the configured newline style."""
        target = io.BytesIO()
        sink = OutputSink(target, CharEncoding.ASCII, Newline.CRLF)
        sink.write("a: 1\n")
        sink.flush()
        assert target.getvalue() == b"a: 1\r\n"

    def test_sink_unencodable_characters(self):
        """Test that characters outside the output encoding become references."""
        target = io.BytesIO()
        sink = OutputSink(target, CharEncoding.ASCII, Newline.LF)
        sink.write("é")
        sink.flush()
        assert target.getvalue() == b"&#233;"
