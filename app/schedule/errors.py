"""
Calendar error taxonomy.

Every failure in the calendar core is per-request and recoverable by
retrying or navigating to another month; none of these is fatal to the
process.
"""

from __future__ import annotations


class ScheduleError(Exception):
    """Base class for calendar errors."""


class ValidationError(ScheduleError):
    """Bad month, year or user id.  Raised before any query is issued."""


class NotFoundError(ScheduleError):
    """A user, template or assignment does not exist."""


class UpstreamFetchError(ScheduleError):
    """One source collection could not be fetched."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to fetch {source}: {reason}")


class ScheduleLoadError(ScheduleError):
    """A calendar view could not be assembled.

    Raised as a whole when any source fetch fails: a month is never
    returned with one of its collections missing.
    """

    def __init__(self, user_id: int, year: int, month: int, cause: Exception):
        self.user_id = user_id
        self.year = year
        self.month = month
        self.cause = cause
        super().__init__(f"Could not load schedule for user {user_id}, {year:04d}-{month:02d}: {cause}")
