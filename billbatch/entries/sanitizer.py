"""Mini README: Read-side filters applied before entry fields are displayed.

Structure:
    * sanitize_amount - drops amount text that is not plain decimal digits.
    * note_counter - helper text showing how much of the note limit is used.

Sanitising happens on read only. The collection keeps whatever value was last
written, so an invalid amount stays in state and simply renders as empty
until the user types a valid one.
"""

from __future__ import annotations

import re

NOTE_CHARACTER_LIMIT = 31

_AMOUNT_PATTERN = re.compile(r"^\d*\.?\d*$", re.ASCII)


def sanitize_amount(raw: str) -> str:
    """Return ``raw`` when it is decimal-like text, otherwise an empty string."""

    # fullmatch keeps a trailing newline from sneaking past ``$``
    if _AMOUNT_PATTERN.fullmatch(raw):
        return raw
    return ""


def note_counter(note: str) -> str:
    return f"{len(note)}/{NOTE_CHARACTER_LIMIT}"
