"""Tests for text-boundary primitives and column conversions."""

import pytest

from jumpmatch.text import (
    byte_to_char_index,
    cell_to_char_index,
    char_display_width,
    char_span_to_bytes,
    char_to_byte_offset,
    starts_with_uppercase,
    utf8_length,
)
from jumpmatch.types import ColumnRange


class TestStartsWithUppercase:
    """Test starts_with_uppercase."""

    @pytest.mark.parametrize("text", ["Foo", "F", "HTTP", "Élan", "Ωmega"])
    def test_uppercase_first_letter(self, text: str) -> None:
        """Strings starting with an uppercase letter are uppercase."""
        assert starts_with_uppercase(text) is True

    @pytest.mark.parametrize("text", ["foo", "fOO", "élan", "ωmega"])
    def test_lowercase_first_letter(self, text: str) -> None:
        """Strings starting with a lowercase letter are not uppercase."""
        assert starts_with_uppercase(text) is False

    @pytest.mark.parametrize("text", ["", " Foo", "\tFoo", " "])
    def test_empty_and_blank(self, text: str) -> None:
        """Empty strings and a leading blank are never uppercase."""
        assert starts_with_uppercase(text) is False

    @pytest.mark.parametrize("text", ["1Foo", "_Foo", "#Foo"])
    def test_non_letter_first_character(self, text: str) -> None:
        """Digits and punctuation are not uppercase letters."""
        assert starts_with_uppercase(text) is False

    def test_only_first_character_is_inspected(self) -> None:
        """Later uppercase letters do not count."""
        assert starts_with_uppercase("fooBar") is False


class TestUtf8Length:
    """Test utf8_length."""

    def test_ascii(self) -> None:
        """ASCII characters are one byte each."""
        assert utf8_length("hello") == 5

    def test_multibyte(self) -> None:
        """Multi-byte characters are counted in bytes."""
        assert utf8_length("é") == 2
        assert utf8_length("日本") == 6
        assert utf8_length("a😀") == 5


class TestCharDisplayWidth:
    """Test char_display_width."""

    def test_narrow_character(self) -> None:
        """Latin characters are one cell wide."""
        assert char_display_width("a") == 1

    def test_wide_character(self) -> None:
        """East Asian wide characters take two cells."""
        assert char_display_width("日") == 2

    def test_combining_mark(self) -> None:
        """Combining marks take no cell."""
        assert char_display_width("\u0301") == 0

    def test_control_character_takes_two_cells(self) -> None:
        """Control characters are drawn as ^X."""
        assert char_display_width("\x01") == 2
        assert char_display_width("\x7f") == 2

    def test_tab_advances_to_next_tabstop(self) -> None:
        """A tab fills up to the next tab stop."""
        assert char_display_width("\t", column=0, tabstop=8) == 8
        assert char_display_width("\t", column=3, tabstop=8) == 5
        assert char_display_width("\t", column=3, tabstop=4) == 1


class TestCellToCharIndex:
    """Test cell_to_char_index."""

    def test_ascii_cells_are_characters(self) -> None:
        """On plain ASCII each cell is one character."""
        assert cell_to_char_index("hello", 0) == 0
        assert cell_to_char_index("hello", 3) == 3

    def test_negative_cell(self) -> None:
        """Negative cells map to the first character."""
        assert cell_to_char_index("hello", -4) == 0

    def test_wide_characters_span_two_cells(self) -> None:
        """Both cells of a wide character map to it."""
        line = "日本語"
        assert cell_to_char_index(line, 0) == 0
        assert cell_to_char_index(line, 1) == 0
        assert cell_to_char_index(line, 2) == 1
        assert cell_to_char_index(line, 5) == 2

    def test_tab_spans_to_tabstop(self) -> None:
        """Cells inside a tab map to the tab character."""
        line = "\tx"
        assert cell_to_char_index(line, 0, tabstop=4) == 0
        assert cell_to_char_index(line, 3, tabstop=4) == 0
        assert cell_to_char_index(line, 4, tabstop=4) == 1

    def test_control_characters_span_two_cells(self) -> None:
        """Both cells of a ^X rendering map to the control character."""
        line = "\x1bab"
        assert cell_to_char_index(line, 1) == 0
        assert cell_to_char_index(line, 2) == 1
        assert cell_to_char_index(line, 3) == 2

    def test_cells_past_end_map_past_last_character(self) -> None:
        """Cells beyond the line map to virtual characters after it."""
        assert cell_to_char_index("abc", 3) == 3
        assert cell_to_char_index("abc", 10) == 10
        assert cell_to_char_index("", 2) == 2


class TestCharToByteOffset:
    """Test char_to_byte_offset."""

    def test_ascii(self) -> None:
        """ASCII character indices are byte offsets."""
        assert char_to_byte_offset("hello", 0) == 0
        assert char_to_byte_offset("hello", 4) == 4

    def test_multibyte(self) -> None:
        """Offsets account for preceding multi-byte characters."""
        assert char_to_byte_offset("éa", 1) == 2
        assert char_to_byte_offset("日本語", 2) == 6

    def test_end_of_line_is_in_range(self) -> None:
        """The index just past the last character gives the byte length."""
        assert char_to_byte_offset("é", 1) == 2

    def test_out_of_range(self) -> None:
        """Indices outside the line give -1."""
        assert char_to_byte_offset("abc", 4) == -1
        assert char_to_byte_offset("abc", -1) == -1


class TestByteToCharIndex:
    """Test byte_to_char_index."""

    def test_ascii(self) -> None:
        """ASCII offsets are character indices, clamped to the line."""
        assert byte_to_char_index("hello", 2) == 2
        assert byte_to_char_index("hello", 9) == 5
        assert byte_to_char_index("hello", -1) == 0

    def test_multibyte(self) -> None:
        """Offsets inside a multi-byte character map to that character."""
        line = "aéb"
        assert byte_to_char_index(line, 1) == 1
        assert byte_to_char_index(line, 2) == 1
        assert byte_to_char_index(line, 3) == 2
        assert byte_to_char_index(line, 4) == 3


class TestCharSpanToBytes:
    """Test char_span_to_bytes."""

    def test_ascii(self) -> None:
        """ASCII spans are unchanged."""
        assert char_span_to_bytes("hello", 1, 3) == ColumnRange(start=1, end=3)

    def test_multibyte(self) -> None:
        """Spans are converted to byte offsets."""
        assert char_span_to_bytes("éàb", 1, 3) == ColumnRange(start=2, end=5)
