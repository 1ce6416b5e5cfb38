"""Table completion and cell alignment.

Completion turns a ragged pipe table into a structurally valid one: it
inserts a delimiter row when the table has none and pads every row to the
same number of cells. Alignment pads a single cell's text to a target
display width.

Usage:
    from mdtable import read_table, complete_table, CompleteOptions

    table = read_table(lines)
    completed = complete_table(table, CompleteOptions(delimiter_width=3))
    text = completed.table.to_text()
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, TypeVar

from .alignment import Alignment
from .display_width import WidthPolicy, compute_width
from .errors import EmptyTableError, InvalidDefaultAlignmentError, UnknownAlignmentError
from .table import Table, TableRow

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Index of the delimiter row in a well-formed table
DELIMITER_ROW_INDEX = 1


@dataclass(frozen=True)
class CompleteOptions:
    """Options for complete_table().

    Attributes:
        delimiter_width: Number of dashes in each synthesized delimiter cell.
    """

    delimiter_width: int


@dataclass
class CompletedTable:
    """Result of complete_table()."""

    table: Table
    delimiter_inserted: bool


@dataclass(frozen=True)
class AlignConfig(WidthPolicy):
    """Configuration for align().

    Attributes:
        width: Target display width in columns.
        default_alignment: Alignment used for DEFAULT columns. Must be
            LEFT, RIGHT or CENTER.
    """

    width: int
    default_alignment: Alignment


def delimiter_text(width: int, alignment: Alignment) -> str:
    """Return the raw text of one delimiter cell.

    Args:
        width: Number of dashes.
        alignment: Alignment the cell declares.

    Raises:
        UnknownAlignmentError: If ``alignment`` is not an Alignment.
    """
    bar = "-" * width
    if alignment is Alignment.DEFAULT:
        return f" {bar} "
    elif alignment is Alignment.LEFT:
        return f":{bar} "
    elif alignment is Alignment.RIGHT:
        return f" {bar}:"
    elif alignment is Alignment.CENTER:
        return f":{bar}:"
    raise UnknownAlignmentError(alignment)


def extend_array(sequence: Sequence[T], size: int, callback: Callable[[int], T]) -> List[T]:
    """Return a new list grown to ``size`` elements.

    Existing elements are kept in order; each added position ``i`` is
    filled with ``callback(i)``. Nothing is removed when ``size`` is
    smaller than the sequence.
    """
    extended = list(sequence)
    for i in range(len(extended), size):
        extended.append(callback(i))
    return extended


def complete_table(table: Table, options: CompleteOptions) -> CompletedTable:
    """Complete a table by adding a missing delimiter row and missing cells.

    The input table is left as it is; rows that need no change are shared
    with the returned table.

    Args:
        table: Table to complete. Must have at least one row.
        options: Completion options.

    Returns:
        CompletedTable with the normalized table and whether a delimiter
        row was inserted.

    Raises:
        EmptyTableError: If the table has no rows.
    """
    if table.height == 0:
        raise EmptyTableError()

    def new_delimiter_cell(_index: int) -> str:
        return delimiter_text(options.delimiter_width, Alignment.DEFAULT)

    rows = list(table.rows)

    delimiter_inserted = False
    if table.get_delimiter_row() is None:
        # An empty header still gets one column
        width = max(table.header_width, 1)
        rows.insert(
            DELIMITER_ROW_INDEX,
            TableRow(extend_array([], width, new_delimiter_cell)),
        )
        delimiter_inserted = True
        logger.debug("Inserted delimiter row with %d cell(s)", width)

    max_width = max(row.width for row in rows)
    for i, row in enumerate(rows):
        if row.width >= max_width:
            continue
        if i == DELIMITER_ROW_INDEX:
            fill = new_delimiter_cell
        else:
            fill = lambda _index: ""
        rows[i] = TableRow(
            extend_array(row.cells, max_width, fill),
            row.margin_left,
            row.margin_right,
        )
        logger.debug("Extended row %d from %d to %d cells", i, row.width, max_width)

    return CompletedTable(table=Table(rows), delimiter_inserted=delimiter_inserted)


def align(text: str, alignment: Alignment, config: AlignConfig) -> str:
    """Pad text with spaces to ``config.width`` display columns.

    Text that is already as wide as the target, or wider, is returned
    unchanged. For CENTER with an odd amount of padding, the extra space
    goes on the right.

    Args:
        text: Cell text to pad. Returned as-is apart from added spaces,
            even when ``config.normalize`` is set.
        alignment: Column alignment. DEFAULT resolves to
            ``config.default_alignment``.
        config: Target width, default alignment and width policy.

    Raises:
        InvalidDefaultAlignmentError: If ``config.default_alignment`` is DEFAULT.
        UnknownAlignmentError: If either alignment is not an Alignment.
    """
    if config.default_alignment is Alignment.DEFAULT:
        raise InvalidDefaultAlignmentError()
    if not isinstance(config.default_alignment, Alignment):
        raise UnknownAlignmentError(config.default_alignment)
    if not isinstance(alignment, Alignment):
        raise UnknownAlignmentError(alignment)

    if alignment is Alignment.DEFAULT:
        alignment = config.default_alignment

    deficit = config.width - compute_width(text, config)
    if deficit <= 0:
        return text

    if alignment is Alignment.LEFT:
        return text + " " * deficit
    elif alignment is Alignment.RIGHT:
        return " " * deficit + text
    else:  # center
        left = deficit // 2
        return " " * left + text + " " * (deficit - left)
