"""Clock event handling for the running Toggl time entry."""

from toggl_clock.clock.events import ClockEventSource, ClockInEvent, ClockListener
from toggl_clock.clock.notify import Notifier, report
from toggl_clock.clock.projects import ProjectCache
from toggl_clock.clock.session import CurrentEntry, TogglSession

__all__ = [
    "ClockEventSource",
    "ClockInEvent",
    "ClockListener",
    "CurrentEntry",
    "Notifier",
    "ProjectCache",
    "TogglSession",
    "report",
]
