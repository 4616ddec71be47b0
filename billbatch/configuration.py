"""Mini README: Runtime configuration for the bill batch composer.

Structure:
    * BillBatchSettings - pydantic settings model read from the environment.
    * get_settings - cached accessor used by the CLI and the web interface.

Usage:
    Variables are prefixed with ``BILLBATCH_`` (for example
    ``BILLBATCH_INTERFACE_PORT=9000``) and may also live in a ``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BillBatchSettings(BaseSettings):
    """Runtime configuration for the bill batch composer."""

    environment: str = Field(
        "development",
        description="Environment label; anything but 'production' enables auto-reload.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface the JSON interface binds to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON interface listens on.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    class Config:
        env_prefix = "BILLBATCH_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _check_log_level(cls, value: str) -> str:
        """Accept only level names the logging module understands."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache()
def get_settings() -> BillBatchSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BillBatchSettings()
