"""Clock events and explicit subscription to them.

A host (an editor integration, the ``run`` command) owns a
:class:`ClockEventSource` and emits events on it. Listeners subscribe and
unsubscribe explicitly; nothing registers itself implicitly.
"""

import logging
from typing import Protocol

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ClockInEvent(BaseModel):
    """A task was clocked in."""

    description: str
    tags: list[str] = Field(default_factory=list)
    project: str | None = None


class ClockListener(Protocol):
    """Receiver of clock events."""

    def on_clock_in(self, event: ClockInEvent) -> object: ...

    def on_clock_out(self) -> object: ...

    def on_clock_cancel(self) -> object: ...


class ClockEventSource:
    """Delivers clock events to subscribed listeners in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[ClockListener] = []

    def subscribe(self, listener: ClockListener) -> None:
        """Subscribe a listener; subscribing twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ClockListener) -> None:
        """Unsubscribe a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def is_subscribed(self, listener: ClockListener) -> bool:
        return listener in self._listeners

    def clock_in(self, description: str, tags: list[str] | None = None, project: str | None = None) -> None:
        """Emit a clock-in event.

        Args:
            description: Heading of the clocked task.
            tags: Tags of the clocked task.
            project: Name of the Toggl project, if the task names one.
        """
        event = ClockInEvent(description=description, tags=tags or [], project=project)
        logger.debug(f"Clock in: {event}")
        for listener in list(self._listeners):
            listener.on_clock_in(event)

    def clock_out(self) -> None:
        """Emit a clock-out event."""
        logger.debug("Clock out")
        for listener in list(self._listeners):
            listener.on_clock_out()

    def clock_cancel(self) -> None:
        """Emit a clock-cancel event."""
        logger.debug("Clock cancel")
        for listener in list(self._listeners):
            listener.on_clock_cancel()
