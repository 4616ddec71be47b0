"""Mini README: Tests for environment-driven settings.

Confirms defaults, ``BILLBATCH_`` overrides and log level validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from billbatch.configuration import BillBatchSettings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVIRONMENT", "INTERFACE_HOST", "INTERFACE_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(f"BILLBATCH_{name}", raising=False)

    settings = BillBatchSettings(_env_file=None)

    assert settings.interface_port == 8000
    assert settings.log_level == "INFO"
    assert settings.is_production is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed variables override defaults and levels are normalised."""

    monkeypatch.setenv("BILLBATCH_INTERFACE_PORT", "9001")
    monkeypatch.setenv("BILLBATCH_LOG_LEVEL", "debug")
    monkeypatch.setenv("BILLBATCH_ENVIRONMENT", "Production")
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.interface_port == 9001
    assert settings.log_level == "DEBUG"
    assert settings.is_production is True


def test_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BILLBATCH_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        BillBatchSettings(_env_file=None)


def test_rejects_out_of_range_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BILLBATCH_INTERFACE_PORT", "70000")

    with pytest.raises(ValidationError):
        BillBatchSettings(_env_file=None)
