"""Tests for the serialized-format recognizer."""

import pytest

from stringy.core.serialized import is_serialized


class TestScalars:
    """Tests for scalar values."""

    @pytest.mark.parametrize(
        "text",
        ["N;", "b:0;", "b:1;", "i:0;", "i:-42;", "d:0.5;", "d:1.5E+25;", "d:NAN;", "d:-INF;"],
    )
    def test_valid_scalars(self, text):
        assert is_serialized(text, "UTF-8") is True

    @pytest.mark.parametrize("text", ["N", "b:2;", "i:;", "i:4.2;", "d:abc;", "x:1;"])
    def test_invalid_scalars(self, text):
        assert is_serialized(text, "UTF-8") is False

    def test_empty_string(self):
        """The empty string is not a serialized value."""
        assert is_serialized("", "UTF-8") is False


class TestStrings:
    """Tests for string values."""

    def test_length_in_bytes(self):
        """String lengths count encoded bytes, not codepoints."""
        assert is_serialized('s:5:"fòô";', "UTF-8") is True
        assert is_serialized('s:3:"fòô";', "UTF-8") is False

    def test_length_depends_on_encoding(self):
        """The same text has a different byte length in Latin-1."""
        assert is_serialized('s:3:"fòô";', "ISO-8859-1") is True

    def test_string_may_contain_quotes(self):
        """The declared length, not the quote, ends the data."""
        assert is_serialized('s:3:"a";";', "UTF-8") is True

    def test_length_past_end(self):
        assert is_serialized('s:10:"foo";', "UTF-8") is False

    def test_unencodable_text(self):
        """Text outside the encoding's repertoire is rejected, not raised."""
        assert is_serialized('s:2:"\u0159";', "ISO-8859-1") is False


class TestArrays:
    """Tests for array values."""

    def test_string_keys(self):
        assert is_serialized('a:1:{s:3:"foo";s:3:"bar";}', "UTF-8") is True

    def test_missing_terminator(self):
        assert is_serialized('a:1:{s:3:"foo";s:3:"bar"}', "UTF-8") is False

    def test_nested(self):
        text = 'a:2:{i:0;a:1:{s:1:"x";b:1;}i:1;N;}'
        assert is_serialized(text, "UTF-8") is True

    def test_count_mismatch(self):
        """Fewer entries than declared is malformed."""
        assert is_serialized('a:2:{i:0;N;}', "UTF-8") is False

    def test_trailing_input(self):
        assert is_serialized("a:0:{}N;", "UTF-8") is False

    def test_deep_nesting_rejected(self):
        """Pathologically deep nesting is rejected instead of recursing."""
        text = "a:1:{i:0;" * 600 + "N;" + "}" * 600
        assert is_serialized(text, "UTF-8") is False

    def test_objects_not_recognized(self):
        assert is_serialized('O:8:"stdClass":0:{}', "UTF-8") is False
