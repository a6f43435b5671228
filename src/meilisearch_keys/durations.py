"""
Relative duration parsing for key expiry dates.

Operators type durations such as ``1 hour``, ``6 months`` or
``2 weeks and 3 days``; these are added to the current instant and rendered
the way Meilisearch expects ``expiresAt`` values.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

_UNITS = {
    "s": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "second": "seconds",
    "seconds": "seconds",
    "min": "minutes",
    "mins": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "h": "hours",
    "hour": "hours",
    "hours": "hours",
    "d": "days",
    "day": "days",
    "days": "days",
    "w": "weeks",
    "week": "weeks",
    "weeks": "weeks",
    "month": "months",
    "months": "months",
    "y": "years",
    "year": "years",
    "years": "years",
}

_TERM = re.compile(r"([+-]?)\s*(\d+)\s*([a-z]+)")
_SEPARATORS = re.compile(r"\s*(?:,|\band\b)\s*")


def parse_duration(text: str) -> relativedelta:
    """
    Parse a relative duration into a relativedelta.

    Args:
        text: Duration such as "1 hour", "+6 months" or "1 year, 2 weeks"

    Returns:
        The summed relativedelta

    Raises:
        ValueError: If the text contains anything other than <number> <unit> terms
    """
    remaining = _SEPARATORS.sub(" ", text.strip().lower()).strip()
    if not remaining:
        raise ValueError("Duration is empty")

    delta = relativedelta()
    position = 0
    while position < len(remaining):
        match = _TERM.match(remaining, position)
        if not match:
            raise ValueError(f"Unrecognised duration: {text!r}")
        sign, amount, unit = match.groups()
        if unit not in _UNITS:
            raise ValueError(f"Unknown duration unit {unit!r} in {text!r}")
        value = -int(amount) if sign == "-" else int(amount)
        delta += relativedelta(**{_UNITS[unit]: value})
        position = match.end()
        while position < len(remaining) and remaining[position] == " ":
            position += 1
    return delta


def format_zulu(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with a trailing Z"""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def resolve_expiry(text: Optional[str], now: Optional[datetime] = None) -> Optional[str]:
    """Turn a relative duration into an absolute expiresAt value, or None when blank"""
    if text is None or not text.strip():
        return None
    if now is None:
        now = datetime.now(timezone.utc)
    delta = parse_duration(text)
    try:
        return format_zulu(now + delta)
    except (OverflowError, ValueError) as e:
        raise ValueError(f"Duration {text!r} is out of the supported date range") from e
