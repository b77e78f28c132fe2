"""Toggl Track API integration."""

from toggl_clock.toggl.client import (
    DeleteResponse,
    Failure,
    Result,
    Success,
    TogglClient,
    basic_auth_header,
)
from toggl_clock.toggl.errors import (
    HTTPStatusError,
    ParseError,
    TogglError,
    TransportError,
    UnresolvedProject,
)
from toggl_clock.toggl.models import StartTimeEntry, TogglProject, TogglTimeEntry

__all__ = [
    "TogglClient",
    "basic_auth_header",
    "DeleteResponse",
    "Success",
    "Failure",
    "Result",
    "TogglError",
    "TransportError",
    "HTTPStatusError",
    "ParseError",
    "UnresolvedProject",
    "TogglProject",
    "TogglTimeEntry",
    "StartTimeEntry",
]
