"""
Common utilities and shared modules.
"""

from adtracker.common.config import get_settings, settings
from adtracker.common.exceptions import AdTrackerError
from adtracker.common.logger import configure_logging, get_logger, log_context
from adtracker.common.storage import Dataset, JsonFileStorage, get_storage

__all__ = [
    "settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "log_context",
    "Dataset",
    "JsonFileStorage",
    "get_storage",
    "AdTrackerError",
]
