"""Exceptions raised by the key command and the Meilisearch managers."""

from typing import Optional


class UsageError(Exception):
    """Missing or contradictory arguments, reported before any side effect."""

    def __init__(self, message: str, exit_code: int = 2):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class OperationFailedError(Exception):
    """The remote call went through but did not return a usable key."""

    exit_code = 4


class MeilisearchError(Exception):
    """Meilisearch could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
