"""Unit tests for the 100-km square letter sequences.

Test cases include:
- Sequence contents (no I or O)
- Column/row letters per zone set, including wraparound
- Walking back from a letter to its offset
- Rejection of letters outside the sequences
"""

import unittest

import pytest

from utmref.alphabet import (
    COLUMN_LETTERS,
    ROW_LETTERS,
    column_letter,
    column_offset,
    row_letter,
    row_offset,
)
from utmref.errors import UnresolvableGridLetterError


class TestSequences(unittest.TestCase):
    """Test cases for the fixed letter sequences."""

    def test_lengths(self) -> None:
        """Columns have 24 letters, rows 20."""
        self.assertEqual(len(COLUMN_LETTERS), 24)
        self.assertEqual(len(ROW_LETTERS), 20)

    def test_i_and_o_excluded(self) -> None:
        """I and O never appear in either sequence."""
        for letters in (COLUMN_LETTERS, ROW_LETTERS):
            self.assertNotIn("I", letters)
            self.assertNotIn("O", letters)

    def test_row_letters_end_at_v(self) -> None:
        self.assertEqual(ROW_LETTERS[-1], "V")


class TestColumnLetter(unittest.TestCase):
    """Test cases for column letter lookup."""

    def test_set_columns(self) -> None:
        """Sets 1, 2, 3 cover A-H, J-R and S-Z."""
        self.assertEqual("".join(column_letter(c, 1) for c in range(1, 9)), "ABCDEFGH")
        self.assertEqual("".join(column_letter(c, 2) for c in range(1, 9)), "JKLMNPQR")
        self.assertEqual("".join(column_letter(c, 3) for c in range(1, 9)), "STUVWXYZ")

    def test_sets_repeat_every_three(self) -> None:
        for column in range(1, 9):
            self.assertEqual(column_letter(column, 1), column_letter(column, 4))
            self.assertEqual(column_letter(column, 3), column_letter(column, 6))

    def test_wraps_past_z(self) -> None:
        """Column 9 of set 3 wraps round to A."""
        self.assertEqual(column_letter(9, 3), "A")


class TestRowLetter(unittest.TestCase):
    """Test cases for row letter lookup."""

    def test_set_origins(self) -> None:
        self.assertEqual(row_letter(0, 1), "A")
        self.assertEqual(row_letter(0, 2), "F")

    def test_skips_i_and_o(self) -> None:
        """Row 8 of set 1 is J (I skipped), row 13 is P (O skipped)."""
        self.assertEqual(row_letter(8, 1), "J")
        self.assertEqual(row_letter(13, 1), "P")

    def test_wraps_past_v(self) -> None:
        """Rows of set 2 start at F and wrap from V to A."""
        self.assertEqual(row_letter(14, 2), "V")
        self.assertEqual(row_letter(15, 2), "A")
        self.assertEqual(row_letter(17, 2), "C")


class TestColumnOffset(unittest.TestCase):
    """Test cases for walking from a column letter back to its offset."""

    def test_offset_within_set(self) -> None:
        self.assertEqual(column_offset("J", 2), 0)
        self.assertEqual(column_offset("L", 2), 2)
        self.assertEqual(column_offset("G", 1), 6)

    def test_offset_after_wrap(self) -> None:
        """From S, A is reached after wrapping past Z."""
        self.assertEqual(column_offset("A", 3), 8)

    def test_inverse_of_column_letter(self) -> None:
        for zone_set in range(1, 7):
            for column in range(1, 9):
                letter = column_letter(column, zone_set)
                self.assertEqual(column_offset(letter, zone_set), column - 1)

    def test_excluded_letter(self) -> None:
        with pytest.raises(UnresolvableGridLetterError, match="'I'"):
            column_offset("I", 1)

    def test_non_letter(self) -> None:
        with pytest.raises(UnresolvableGridLetterError):
            column_offset("7", 2)


class TestRowOffset(unittest.TestCase):
    """Test cases for walking from a row letter back to its offset."""

    def test_offset_after_wrap(self) -> None:
        self.assertEqual(row_offset("C", 2), 17)

    def test_inverse_of_row_letter(self) -> None:
        for zone_set in range(1, 7):
            for row in range(20):
                letter = row_letter(row, zone_set)
                self.assertEqual(row_offset(letter, zone_set), row)

    def test_letter_above_v(self) -> None:
        with pytest.raises(UnresolvableGridLetterError, match="rows end at 'V'"):
            row_offset("W", 1)

    def test_excluded_letter(self) -> None:
        with pytest.raises(UnresolvableGridLetterError, match="'O'"):
            row_offset("O", 2)


if __name__ == "__main__":
    unittest.main()
