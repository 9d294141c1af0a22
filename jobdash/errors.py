"""Exceptions raised across the proxy and the dashboard core."""
from __future__ import annotations


class JobDashError(Exception):
    """Base class; the proxy reports these as HTTP 500 with the message."""


class ConfigurationError(JobDashError):
    """A required setting or credential is missing."""


class UpstreamError(JobDashError):
    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class SearchError(JobDashError):
    """The search proxy could not be reached or answered with an error."""


class InvalidResumeError(JobDashError):
    pass
