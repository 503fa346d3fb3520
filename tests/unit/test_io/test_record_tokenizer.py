"""Unit tests for the record tokenizer."""

import pytest
from vseprlib.parsing.io.record_tokenizer import split_record, strip_line_terminator


class TestSplitRecord:
    """Test cases for split_record."""

    def test_simple_line(self):
        """Test splitting a line without empty fields."""
        assert split_record("1,2,3") == ["1", "2", "3"]

    def test_trailing_delimiter_keeps_empty_field(self):
        """Test that a trailing delimiter yields an explicit empty last field."""
        fields = split_record("1,2,3,")
        assert len(fields) == 4
        assert fields[-1] == ""

    def test_consecutive_delimiters(self):
        """Test that empty inner fields are preserved in place."""
        assert split_record("1,,3") == ["1", "", "3"]

    def test_leading_delimiter(self):
        """Test that an empty first field is preserved."""
        assert split_record(",a") == ["", "a"]

    def test_only_delimiters(self):
        """Test a line consisting of delimiters only."""
        assert split_record(",,") == ["", "", ""]

    def test_empty_line(self):
        """Test that an empty line yields a single empty field."""
        assert split_record("") == [""]

    def test_whitespace_is_kept(self):
        """Test that whitespace inside fields is not trimmed."""
        assert split_record(" 1 , 2") == [" 1 ", " 2"]

    def test_custom_delimiter(self):
        """Test splitting on a non-comma delimiter."""
        assert split_record("a;b;", delimiter=";") == ["a", "b", ""]

    def test_field_count_matches_delimiters(self):
        """Test that n delimiters always give n + 1 fields."""
        line = "1,H,1,,1,hydrogen,,,"
        assert len(split_record(line)) == line.count(",") + 1

    @pytest.mark.parametrize("delimiter", ["", ",,", "ab"])
    def test_invalid_delimiter(self, delimiter):
        """Test that multi-character or empty delimiters are rejected."""
        with pytest.raises(ValueError, match="single character"):
            split_record("1,2", delimiter=delimiter)


class TestStripLineTerminator:
    """Test cases for strip_line_terminator."""

    def test_strips_newline(self):
        assert strip_line_terminator("1,H,\n") == "1,H,"

    def test_strips_crlf(self):
        assert strip_line_terminator("1,H\r\n") == "1,H"

    def test_keeps_other_whitespace(self):
        """Test that trailing spaces and tabs survive."""
        assert strip_line_terminator("1,H, \t\n") == "1,H, \t"
