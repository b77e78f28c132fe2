"""Utility modules for toggl-clock."""

from toggl_clock.utils.logging import get_logger, setup_logging
from toggl_clock.utils.storage import StorageManager
from toggl_clock.utils.timefmt import format_start_time, format_time_zone_offset

__all__ = [
    "get_logger",
    "setup_logging",
    "StorageManager",
    "format_start_time",
    "format_time_zone_offset",
]
