"""Mini README: Tests for the read-side amount sanitiser and note counter."""

from __future__ import annotations

import pytest

from billbatch.entries import note_counter, sanitize_amount


@pytest.mark.parametrize("raw", ["12.5", "0.00", "12.", ".5", "7", "."])
def test_decimal_like_text_is_returned_unchanged(raw: str) -> None:
    assert sanitize_amount(raw) == raw


@pytest.mark.parametrize("raw", ["12.5.6", "", "abc", "-3", "1,000", "12.5\n", " 4"])
def test_other_text_is_discarded(raw: str) -> None:
    """Rejected edits come back empty rather than corrected."""

    assert sanitize_amount(raw) == ""


def test_non_ascii_digits_are_discarded() -> None:
    assert sanitize_amount("١٢") == ""


def test_note_counter_reports_usage_against_limit() -> None:
    assert note_counter("") == "0/31"
    assert note_counter("Hydro bill") == "10/31"
