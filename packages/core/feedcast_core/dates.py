"""
Date formatting for feeds.

RSS 2.0 wants RFC 822 timestamps, JSON Feed wants RFC 3339. Both are
formatted by hand so the output does not depend on the process locale.
"""

from datetime import datetime, timedelta

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _zone_label(value: datetime) -> str:
    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return "GMT"

    name = value.tzname()
    if name and name.isalpha():
        return name

    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"


def format_rfc822(value: datetime) -> str:
    """
    Format a datetime as ``EEE, dd MMM yyyy HH:mm:ss z``.

    Naive datetimes and zero offsets are labelled ``GMT``; named zones use
    their abbreviation (``EST``) and fixed offsets fall back to ``+hhmm``.

    Args:
        value: Datetime to format.

    Returns:
        Formatted timestamp, e.g. ``Tue, 10 Jun 2003 09:41:01 GMT``.
    """
    return (
        f"{_DAY_NAMES[value.weekday()]}, {value.day:02d} "
        f"{_MONTH_NAMES[value.month - 1]} {value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} "
        f"{_zone_label(value)}"
    )


def format_rfc3339(value: datetime) -> str:
    """
    Format a datetime as ``yyyy-MM-dd'T'HH:mm:ssXXX``.

    Naive datetimes are treated as UTC. A zero offset is written as ``Z``.

    Args:
        value: Datetime to format.

    Returns:
        Formatted timestamp, e.g. ``2014-05-09T14:04:00Z``.
    """
    stamp = value.replace(microsecond=0).isoformat()
    offset = value.utcoffset()
    if offset is None:
        return f"{stamp}Z"
    if offset == timedelta(0):
        return stamp.removesuffix("+00:00") + "Z"
    return stamp
