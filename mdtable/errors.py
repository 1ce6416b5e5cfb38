"""Error types raised by the table completer and the text aligner.

Every abnormal input either gets normalized silently or raises one of
these. None of them is recoverable inside the library; they signal a
caller or configuration mistake.
"""

from typing import Any


class TableFormatError(Exception):
    """Base class for table formatting errors."""
    pass


class EmptyTableError(TableFormatError):
    """The table handed to the completer has no rows."""

    def __init__(self):
        super().__init__("Empty table: at least one row is required")


class UnknownAlignmentError(TableFormatError):
    """An alignment value outside DEFAULT/LEFT/RIGHT/CENTER was given."""

    def __init__(self, alignment: Any):
        self.alignment = alignment
        super().__init__(f"Unknown alignment: {alignment!r}")


class InvalidDefaultAlignmentError(TableFormatError):
    """The configured default alignment is itself DEFAULT."""

    def __init__(self):
        super().__init__(
            "Default alignment must be concrete (left, right or center)"
        )
