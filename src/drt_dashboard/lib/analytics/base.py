"""Shared types for the analytics backend client."""

import re

# Backend default when the dashboard has no month selected
DEFAULT_ANALYSIS_MONTH = "2025-07-01"

_YEAR_MONTH = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
_YEAR_MONTH_FIRST_DAY = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-01$")


class AnalyticsApiError(Exception):
    """Raised when the analytics backend request fails.

    Distinguishes transport failures (timeout, connection error), HTTP error
    statuses and unusable response bodies from successful responses.

    Args:
        endpoint: Backend path that was requested.
        message: Human-readable error description.
        status_code: Optional HTTP status code returned by the backend.
    """

    def __init__(self, endpoint: str, message: str, status_code: int | None = None) -> None:
        self.endpoint = endpoint
        self.message = message
        self.status_code = status_code
        super().__init__(f"{endpoint}: {message}")


def normalize_analysis_month(month: str | None, default: str = DEFAULT_ANALYSIS_MONTH) -> str:
    """Return the ``YYYY-MM-01`` form the backend expects.

    Args:
        month: ``YYYY-MM``, ``YYYY-MM-01`` or None for ``default``.
        default: Month used when ``month`` is None.

    Returns:
        Month string ending in ``-01``.

    Raises:
        ValueError: If ``month`` matches neither accepted form.
    """
    if month is None:
        month = default
    if _YEAR_MONTH_FIRST_DAY.match(month):
        return month
    if _YEAR_MONTH.match(month):
        return f"{month}-01"
    msg = f"Invalid analysis month {month!r}: expected YYYY-MM or YYYY-MM-01"
    raise ValueError(msg)
