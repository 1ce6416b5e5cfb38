"""Tests for table structures and delimiter cell alignment."""

import pytest

from mdtable.alignment import Alignment, alignment_of, is_delimiter_cell
from mdtable.parser import read_table
from mdtable.table import Table, TableRow


class TestAlignmentOf:
    """Tests for reading alignments from delimiter cells."""

    @pytest.mark.parametrize("text,expected", [
        (" --- ", Alignment.DEFAULT),
        (":---", Alignment.LEFT),
        (" ---: ", Alignment.RIGHT),
        (" :-: ", Alignment.CENTER),
        ("-", Alignment.DEFAULT),
        ("foo", Alignment.DEFAULT),
    ])
    def test_alignment_of(self, text, expected):
        assert alignment_of(text) is expected

    def test_is_delimiter_cell(self):
        assert is_delimiter_cell(" :---: ")
        assert is_delimiter_cell("-")
        assert not is_delimiter_cell("")
        assert not is_delimiter_cell(" - - ")
        assert not is_delimiter_cell("::-")


class TestTableRow:
    """Tests for TableRow."""

    def test_render_without_source(self):
        row = TableRow([" a ", " b "], "  ", " ")
        assert row.to_text() == "  | a | b | "

    def test_render_without_cells(self):
        assert TableRow([], "  ", "x").to_text() == "  "

    def test_is_delimiter(self):
        assert TableRow([" --- ", ":-:"]).is_delimiter()
        assert not TableRow([" --- ", " a "]).is_delimiter()
        assert not TableRow([]).is_delimiter()

    def test_margin_edit_invalidates_source(self):
        row = read_table(["| a |"]).rows[0]
        row.margin_right = "  "
        assert row.to_text() == "| a |  "


class TestTable:
    """Tests for Table."""

    def test_dimensions(self):
        table = read_table(["| A |", "| --- | --- |", "| 1 | 2 | 3 |"])

        assert table.height == 3
        assert table.header_width == 1
        assert table.max_width == 3

    def test_empty_table(self):
        table = Table([])

        assert table.height == 0
        assert table.header_width == 0
        assert table.max_width == 0
        assert table.get_header_row() is None
        assert table.get_delimiter_row() is None
        assert table.to_text() == ""

    def test_delimiter_row(self):
        table = read_table(["| A |", "| :-- |"])
        assert table.get_delimiter_row() is table.rows[1]

    def test_no_delimiter_row(self):
        assert read_table(["| A |"]).get_delimiter_row() is None
        assert read_table(["| A |", "| B |"]).get_delimiter_row() is None
        assert read_table(["| A |", "| B |"]).get_alignments() is None

    def test_alignments(self):
        table = read_table(["| a | b | c | d |", "| :-- | :-: | --: | --- |"])

        assert table.get_alignments() == [
            Alignment.LEFT,
            Alignment.CENTER,
            Alignment.RIGHT,
            Alignment.DEFAULT,
        ]
