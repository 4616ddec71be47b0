"""Mini README: Core package initializer for the bill batch composer.

The package lets a user draft up to five recurring bill payments before
submitting them together. The entry collection lives in ``billbatch.entries``;
``billbatch.interface`` holds the presentation collaborators that call into it.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
