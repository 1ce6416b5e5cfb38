"""Reading source lines into Table structures.

Cells are split on unescaped pipes. A backslash escapes the next
character and pipes inside backtick code spans do not split. Cell text is
kept verbatim, escapes and surrounding spaces included.
"""

import re
from typing import Iterable, List

from .table import Table, TableRow

_WHITESPACE = re.compile(r"^\s*$")


def _backtick_run(text: str, start: int) -> int:
    return len(text[start:]) - len(text[start:].lstrip("`"))


def _code_span_end(text: str, start: int) -> int:
    """Find the index just past the code span opened at ``start``.

    Returns -1 when the backtick run is never closed.
    """
    run = _backtick_run(text, start)
    fence = "`" * run
    pos = start + run
    while True:
        found = text.find(fence, pos)
        if found == -1:
            return -1
        # The closing run must be exactly as long as the opening one
        closing = _backtick_run(text, found)
        if closing == run:
            return found + run
        pos = found + closing


def split_cells(text: str) -> List[str]:
    """Split a line into the fragments between pipes.

    A line with n unescaped pipes yields n + 1 fragments, including the
    (possibly empty) text before the first pipe and after the last one.
    """
    fragments = []
    buf = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\":
            buf.append(text[i:i + 2])
            i += 2
        elif char == "`":
            end = _code_span_end(text, i)
            if end == -1:
                # Unclosed: the backticks are literal
                run = _backtick_run(text, i)
                buf.append(text[i:i + run])
                i += run
            else:
                buf.append(text[i:end])
                i = end
        elif char == "|":
            fragments.append("".join(buf))
            buf = []
            i += 1
        else:
            buf.append(char)
            i += 1
    fragments.append("".join(buf))
    return fragments


def read_table_row(line: str) -> TableRow:
    """Read one source line as a table row.

    Whitespace before the first pipe becomes the left margin, whitespace
    after the last pipe the right margin. The line itself is remembered
    so the row renders back unchanged until it is edited.
    """
    cells = split_cells(line)

    margin_left = ""
    if cells and _WHITESPACE.match(cells[0]):
        margin_left = cells.pop(0)

    margin_right = ""
    if len(cells) > 1 and _WHITESPACE.match(cells[-1]):
        margin_right = cells.pop()

    return TableRow(cells, margin_left, margin_right, source=line)


def read_table(lines: Iterable[str]) -> Table:
    """Read source lines (without line terminators) as a table."""
    return Table([read_table_row(line) for line in lines])
