"""Mini README: Tests for the shared logging helpers."""

from __future__ import annotations

import logging

from billbatch.logging_utils import configure_root_logger, get_logger


def test_reconfiguring_adjusts_level_without_new_handlers() -> None:
    """Repeated configuration must not stack duplicate stream handlers."""

    get_logger("billbatch.tests")
    root_logger = logging.getLogger()
    handler_count = len(root_logger.handlers)
    previous_level = root_logger.level
    try:
        configure_root_logger("DEBUG")
        configure_root_logger(logging.WARNING)

        assert len(root_logger.handlers) == handler_count
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.setLevel(previous_level)
