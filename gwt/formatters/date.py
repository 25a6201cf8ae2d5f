"""Date and time formatting utilities."""

from datetime import datetime, timezone
from typing import Optional


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_relative_time(date: datetime, now: Optional[datetime] = None) -> str:
    """
    Format a point in time relative to now.

    Naive datetimes are taken to be UTC. Dates in the future (clock skew
    between machines) read as "just now".

    Args:
        date: The moment to describe
        now: Reference time (defaults to the current time)

    Returns:
        Human string such as "just now", "5 minutes ago" or "2 weeks ago"

    Example:
        "1 day ago", "3 weeks ago", "10 months ago", "2 years ago"
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - date).total_seconds())
    if seconds < 60:
        return "just now"

    minutes = seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")

    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")

    days = hours // 24
    if days < 7:
        return _plural(days, "day")
    if days < 30:
        return _plural(days // 7, "week")
    if days < 365:
        return _plural(days // 30, "month")
    return _plural(days // 365, "year")
