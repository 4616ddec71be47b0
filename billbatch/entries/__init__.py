"""Mini README: Entry collection core for the bill batch composer.

This package holds everything with real invariants: the draft records, the
ordered collection that owns them, the completeness and capacity gate for
adding another draft, and the read-side amount sanitiser. Presentation code
only ever talks to ``EntryListController`` and ``sanitize_amount``.
"""

from .collection import (
    BLOCKS_LIMIT_MAX,
    Entry,
    EntryAppendRejected,
    EntryField,
    EntryListController,
    is_complete,
)
from .sanitizer import NOTE_CHARACTER_LIMIT, note_counter, sanitize_amount

__all__ = [
    "BLOCKS_LIMIT_MAX",
    "NOTE_CHARACTER_LIMIT",
    "Entry",
    "EntryAppendRejected",
    "EntryField",
    "EntryListController",
    "is_complete",
    "note_counter",
    "sanitize_amount",
]
