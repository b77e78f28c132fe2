"""Errors reported by the Toggl client and clock session.

None of these are fatal. They are delivered to failure callbacks and
notifiers rather than raised through the event loop.
"""


class TogglError(Exception):
    """Base class for Toggl integration errors."""


class TransportError(TogglError):
    """Network failure or timeout; the request was attempted once."""

    def __init__(self, message: str, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out


class HTTPStatusError(TogglError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class ParseError(TogglError):
    """The response body was not the JSON that was expected."""


class UnresolvedProject(TogglError):
    """No project ID is known for a project name."""

    def __init__(self, name: str | None) -> None:
        super().__init__(f"Unknown project: {name!r}")
        self.name = name
