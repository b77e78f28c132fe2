"""Keep a Toggl Track time entry running in step with local clock events."""

__version__ = "0.1.0"
