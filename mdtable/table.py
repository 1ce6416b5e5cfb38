"""Table and row structures for pipe tables.

A row keeps its raw cell text exactly as written between the pipes,
along with whatever text sits outside the first and last pipe (the
margins). Rows read from source lines remember that line, so a row that
nobody changed renders back byte-for-byte.
"""

from typing import List, Optional, Sequence

from .alignment import Alignment, alignment_of, is_delimiter_cell


class TableRow:
    """One line of a pipe table.

    Attributes:
        cells: Raw cell texts, not stripped.
        margin_left: Text before the first pipe.
        margin_right: Text after the last pipe.
    """

    def __init__(
        self,
        cells: Sequence[str],
        margin_left: str = "",
        margin_right: str = "",
        source: Optional[str] = None,
    ):
        self.cells: List[str] = list(cells)
        self.margin_left = margin_left
        self.margin_right = margin_right
        self._source = source
        self._source_cells = tuple(self.cells)
        self._source_margins = (margin_left, margin_right)

    def __repr__(self) -> str:
        return (
            f"TableRow({self.cells!r}, margin_left={self.margin_left!r}, "
            f"margin_right={self.margin_right!r})"
        )

    @property
    def width(self) -> int:
        """Number of cells in the row."""
        return len(self.cells)

    def is_delimiter(self) -> bool:
        """Check if every cell looks like ' --- ', ':--', '--:' or ':-:'.

        A row without cells is not a delimiter row.
        """
        return bool(self.cells) and all(is_delimiter_cell(c) for c in self.cells)

    def _is_untouched(self) -> bool:
        return (
            self._source is not None
            and tuple(self.cells) == self._source_cells
            and (self.margin_left, self.margin_right) == self._source_margins
        )

    def to_text(self) -> str:
        """Render the row as a source line."""
        if self._is_untouched():
            return self._source
        if not self.cells:
            return self.margin_left
        return f"{self.margin_left}|{'|'.join(self.cells)}|{self.margin_right}"


class Table:
    """An ordered list of rows. Row 0 is the header, row 1 the delimiter."""

    def __init__(self, rows: Sequence[TableRow]):
        self.rows: List[TableRow] = list(rows)

    def __repr__(self) -> str:
        return f"Table({self.rows!r})"

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def header_width(self) -> int:
        """Cell count of the header row (0 for an empty table)."""
        header = self.get_header_row()
        return header.width if header is not None else 0

    @property
    def max_width(self) -> int:
        """Largest cell count over all rows."""
        return max((row.width for row in self.rows), default=0)

    def get_header_row(self) -> Optional[TableRow]:
        return self.rows[0] if self.rows else None

    def get_delimiter_row(self) -> Optional[TableRow]:
        """Return row 1 if it is a delimiter row, None otherwise."""
        if len(self.rows) < 2:
            return None
        row = self.rows[1]
        return row if row.is_delimiter() else None

    def get_alignments(self) -> Optional[List[Alignment]]:
        """Declared alignment per column, or None without a delimiter row."""
        delimiter = self.get_delimiter_row()
        if delimiter is None:
            return None
        return [alignment_of(cell) for cell in delimiter.cells]

    def to_lines(self) -> List[str]:
        return [row.to_text() for row in self.rows]

    def to_text(self) -> str:
        return "\n".join(self.to_lines())
