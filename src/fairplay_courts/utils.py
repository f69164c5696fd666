"""Utility functions for the FairPlay courts service."""

import logging
import re
from datetime import date, datetime
from urllib.parse import parse_qs, urljoin, urlparse

logger = logging.getLogger(__name__)

date_regex = re.compile(r"^\d{4}-\d{2}-\d{2}$")
time_regex = re.compile(r"^(\d{1,2})[:h](\d{2})$")

# First quoted relative URL to a vendor php page, e.g. href='tableau.php?d=...'
action_url_regex = re.compile(r"""['"]([^'"]*?\.php(?:\?[^'"]*)?)['"]""")


def parse_date(date_str: str) -> date | None:
    """Parse an ISO date (YYYY-MM-DD).

    Args:
        date_str: Date string to parse

    Returns:
        Date object, None when the string is not a valid date
    """
    if not isinstance(date_str, str) or not re.match(date_regex, date_str):
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return None


def validate_time(time_str: str) -> bool:
    """Validate a canonical (HH:MM) or vendor (HHhMM) time label.

    Args:
        time_str: Time string to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(time_str, str):
        return False
    match = re.match(time_regex, time_str.strip())
    if not match:
        return False
    hour, minute = int(match.group(1)), int(match.group(2))
    return 0 <= hour <= 23 and 0 <= minute <= 59


def to_vendor_time(time_str: str) -> str | None:
    """Convert '8:30' or '08:30' to the vendor form '08h30'."""
    if not validate_time(time_str):
        return None
    hour, minute = re.match(time_regex, time_str.strip()).groups()  # type: ignore
    return f"{int(hour):02d}h{minute}"


def to_canonical_time(time_str: str) -> str | None:
    """Convert '20h30' or '8:30' to the canonical form 'HH:MM'."""
    if not validate_time(time_str):
        return None
    hour, minute = re.match(time_regex, time_str.strip()).groups()  # type: ignore
    return f"{int(hour):02d}:{minute}"


def time_to_minutes(time_str: str) -> int:
    """Minute of day for a time label in either form.

    Raises:
        ValueError: If the label is not a valid time
    """
    canonical = to_canonical_time(time_str)
    if canonical is None:
        raise ValueError(f"Invalid time label: {time_str!r}")
    hours, minutes = canonical.split(":")
    return int(hours) * 60 + int(minutes)


def extract_embedded_url(
    handler: str | None, pattern: re.Pattern | None = None
) -> str | None:
    """Extract the action URL embedded in an inline event-handler attribute.

    Args:
        handler: Attribute value, e.g. "window.location.href='tableau.php?d=X'"
        pattern: Regex whose first group is the URL; defaults to the first
            quoted link to a php page

    Returns:
        The relative URL as written in the markup, None if absent
    """
    if not handler:
        return None
    match = re.search(pattern or action_url_regex, handler)
    if not match:
        return None
    return match.group(1)


def absolute_url(url: str, origin: str) -> str:
    """Resolve a vendor-relative URL against the vendor origin."""
    return urljoin(origin.rstrip("/") + "/", url)


def get_query_param(url: str | None, name: str) -> str | None:
    """Return the first value of a query parameter, None if absent or empty."""
    if not url:
        return None
    values = parse_qs(urlparse(url).query).get(name)
    if not values or not values[0]:
        return None
    return values[0]
