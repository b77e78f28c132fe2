"""Timestamp formatting for Toggl time entries."""

from datetime import datetime

START_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_time_zone_offset(offset: str) -> str:
    """Insert a colon into a raw ``±HHMM`` UTC offset.

    Args:
        offset: Offset as rendered by ``strftime("%z")``, e.g. ``+0200``.

    Returns:
        Offset in ``±HH:MM`` form, e.g. ``+02:00``.
    """
    return f"{offset[:3]}:{offset[3:5]}"


def format_start_time(moment: datetime | None = None) -> str:
    """Render a moment as local ISO-8601 time with a colon-delimited offset.

    Args:
        moment: Time to render. Defaults to now. Naive values are taken as local time.

    Returns:
        Timestamp such as ``2024-01-02T09:30:00+02:00``.
    """
    local = (moment or datetime.now()).astimezone()
    return local.strftime(START_FORMAT) + format_time_zone_offset(local.strftime("%z"))
