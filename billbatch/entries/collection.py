"""Mini README: Ordered collection of recurring bill drafts.

Structure:
    * EntryField - enum naming the six editable fields of a draft.
    * Entry - frozen dataclass holding one bill-payment draft.
    * is_complete - completeness predicate gating new drafts.
    * append_entry / replace_field / remove_entry - pure collection updates.
    * EntryListController - owns the current collection value.

Every mutation takes the previous tuple of entries and returns a new one, so
the controller swaps its whole state in a single assignment. Entries carry no
identifier: their position in the tuple is their identity, and callers refer
to them by index. Out-of-range indices, unknown fields and mistyped values are
caller bugs and raise immediately.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import datetime
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

BLOCKS_LIMIT_MAX = 5


class EntryField(str, Enum):
    """Enumerate the editable fields of a bill draft."""

    AMOUNT = "amount"
    FROM_ACCOUNT = "from_account"
    PAYEE = "payee"
    DATE = "date"
    REPEAT = "repeat"
    NOTE = "note"

    @classmethod
    def from_str(cls, value: str) -> "EntryField":
        """Accept snake_case or camelCase names (``fromAccount``)."""

        try:
            normalised = "".join(
                f"_{char.lower()}" if char.isupper() else char for char in value.strip()
            )
            return cls(normalised.lstrip("_"))
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported entry field: {value}") from error


@dataclass(frozen=True, slots=True)
class Entry:
    """One recurring bill-payment draft."""

    amount: str = "0.00"
    from_account: str = ""
    payee: str = ""
    date: Optional[datetime.date] = None
    repeat: str = ""
    note: str = ""

    def as_dict(self) -> Dict[str, object]:
        """Export the draft with serialisable values."""

        return {
            "amount": self.amount,
            "from_account": self.from_account,
            "payee": self.payee,
            "date": self.date.isoformat() if self.date is not None else None,
            "repeat": self.repeat,
            "note": self.note,
        }


EntryCollection = Tuple[Entry, ...]


def is_complete(entry: Entry) -> bool:
    """Return True when every field of ``entry`` is filled in.

    Only emptiness is checked. An amount such as ``"abc"`` counts as filled
    even though it renders as empty once sanitised.
    """

    return (
        len(entry.amount) > 0
        and entry.date is not None
        and len(entry.note) > 0
        and len(entry.payee) > 0
        and len(entry.from_account) > 0
        and len(entry.repeat) > 0
    )


def can_append_to(entries: EntryCollection) -> bool:
    """Return True when another draft may be added to ``entries``."""

    return all(is_complete(entry) for entry in entries) and len(entries) < BLOCKS_LIMIT_MAX


def _check_index(entries: EntryCollection, index: int) -> None:
    # negative indices would silently address entries from the end
    if not 0 <= index < len(entries):
        raise IndexError(f"Entry index {index} out of range for {len(entries)} entries")


def _check_value(entry_field: EntryField, value: object) -> None:
    if entry_field is EntryField.DATE:
        if value is not None and not isinstance(value, datetime.date):
            raise TypeError(f"Field 'date' expects a date or None, got {type(value).__name__}")
    elif not isinstance(value, str):
        raise TypeError(f"Field '{entry_field.value}' expects a string, got {type(value).__name__}")


def append_entry(entries: EntryCollection) -> EntryCollection:
    """Return ``entries`` with a default draft added at the end."""

    return entries + (Entry(),)


def replace_field(
    entries: EntryCollection,
    index: int,
    entry_field: Union[EntryField, str],
    value: object,
) -> EntryCollection:
    """Return ``entries`` with one field of the draft at ``index`` replaced."""

    _check_index(entries, index)
    if not isinstance(entry_field, EntryField):
        entry_field = EntryField.from_str(entry_field)
    _check_value(entry_field, value)
    if isinstance(value, datetime.datetime):
        value = value.date()
    updated = replace(entries[index], **{entry_field.value: value})
    return entries[:index] + (updated,) + entries[index + 1 :]


def remove_entry(entries: EntryCollection, index: int) -> EntryCollection:
    """Return ``entries`` without the draft at ``index``."""

    _check_index(entries, index)
    return entries[:index] + entries[index + 1 :]


class EntryAppendRejected(ValueError):
    """Raised when a draft is appended while appending is not allowed."""


class EntryListController:
    """Own the ordered collection of drafts for a single composing session."""

    def __init__(self) -> None:
        self._entries: EntryCollection = (Entry(),)
        LOGGER.debug("Entry list initialised with %s entry", len(self._entries))

    def get_entries(self) -> EntryCollection:
        """Return the current drafts in display order."""

        return self._entries

    def can_append(self) -> bool:
        """Return True when every draft is complete and capacity remains."""

        return can_append_to(self._entries)

    def append(self) -> None:
        """Add a default draft at the end of the collection."""

        if not self.can_append():
            LOGGER.warning(
                "Rejected append with %s entries (limit %s)", len(self._entries), BLOCKS_LIMIT_MAX
            )
            raise EntryAppendRejected(
                "Another entry can only be added once every entry is complete "
                f"and fewer than {BLOCKS_LIMIT_MAX} entries exist."
            )
        self._entries = append_entry(self._entries)
        LOGGER.info("Appended entry; collection now holds %s entries", len(self._entries))

    def update_field(self, index: int, entry_field: Union[EntryField, str], value: object) -> None:
        """Replace a single field of the draft at ``index``."""

        self._entries = replace_field(self._entries, index, entry_field, value)
        field_name = entry_field.value if isinstance(entry_field, EntryField) else entry_field
        LOGGER.debug("Updated field %s of entry %s", field_name, index)

    def remove(self, index: int) -> None:
        """Delete the draft at ``index``; later drafts shift down by one."""

        self._entries = remove_entry(self._entries, index)
        LOGGER.info("Removed entry %s; collection now holds %s entries", index, len(self._entries))
