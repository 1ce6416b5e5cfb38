"""Display width measurement for table cells.

Measures how many monospace columns a string occupies using the Unicode
East Asian Width property, so that columns holding CJK or fullwidth text
line up with columns holding plain ASCII.
"""

import unicodedata
from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class WidthPolicy:
    """How characters are counted when measuring display width.

    Attributes:
        normalize: Apply NFC normalization before measuring, so that a
            base letter plus combining mark counts as one column when a
            precomposed form exists.
        wide_chars: Characters always counted as 2 columns.
        narrow_chars: Characters always counted as 1 column.
        ambiguous_as_wide: Count East Asian Ambiguous characters as 2
            columns instead of 1.
    """

    normalize: bool
    wide_chars: FrozenSet[str]
    narrow_chars: FrozenSet[str]
    ambiguous_as_wide: bool


def _char_width(char: str, policy: WidthPolicy) -> int:
    if char in policy.wide_chars:
        return 2
    if char in policy.narrow_chars:
        return 1

    eaw = unicodedata.east_asian_width(char)
    if eaw in ("F", "W"):
        # Fullwidth and Wide are always 2 columns
        return 2
    if eaw == "A":
        return 2 if policy.ambiguous_as_wide else 1
    # Halfwidth (H), Narrow (Na), Neutral (N)
    return 1


def compute_width(text: str, policy: WidthPolicy) -> int:
    """Calculate the display width of a string.

    Overrides in ``policy.wide_chars`` and ``policy.narrow_chars`` win over
    the East Asian Width category. Combining marks are not special-cased:
    without normalization "e\\u0301" measures 2.

    Args:
        text: The string to measure.
        policy: Width policy (any object with the WidthPolicy fields).

    Returns:
        The display width in columns.
    """
    if policy.normalize:
        text = unicodedata.normalize("NFC", text)
    return sum(_char_width(char, policy) for char in text)
