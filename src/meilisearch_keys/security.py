"""
Helpers for keeping key material out of logs.
"""

from typing import Optional


def sanitize_for_logging(value: Optional[str], visible: int = 4) -> str:
    """
    Mask an API key or key UID for logging.

    Only the last ``visible`` characters are kept, and only when the value is
    at least three times that long; shorter values are masked entirely.

    Args:
        value: Key value or UID
        visible: Number of trailing characters left readable

    Returns:
        Masked string safe for logging
    """
    if value is None:
        return "None"
    if not value:
        return ""
    if len(value) >= visible * 3:
        return "*" * (len(value) - visible) + value[-visible:]
    return "*" * len(value)
