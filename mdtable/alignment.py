"""Column alignment states for pipe tables."""

import re
from enum import Enum


class Alignment(Enum):
    """Alignment of a table column.

    DEFAULT means no directive was written in the delimiter row. It is a
    valid declared alignment but never a valid resolved one.
    """

    DEFAULT = "default"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


# A delimiter cell: optional colons around at least one dash
DELIMITER_CELL = re.compile(r"^\s*(:?)-+(:?)\s*$")


def is_delimiter_cell(text: str) -> bool:
    """Check whether raw cell text has the shape of a delimiter cell."""
    return DELIMITER_CELL.match(text) is not None


def alignment_of(text: str) -> Alignment:
    """Read the declared alignment from a delimiter cell (e.g. ' :---: ').

    Text that is not a delimiter cell yields DEFAULT.
    """
    match = DELIMITER_CELL.match(text)
    if match is None:
        return Alignment.DEFAULT

    left, right = match.group(1), match.group(2)
    if left and right:
        return Alignment.CENTER
    if left:
        return Alignment.LEFT
    if right:
        return Alignment.RIGHT
    return Alignment.DEFAULT
