"""Create, update or delete Meilisearch API keys from the command line."""

from .client import MeilisearchClient
from .command import KeyActionCommand, KeyCommandOptions
from .errors import MeilisearchError, OperationFailedError, UsageError

__version__ = "0.1.0"

__all__ = [
    "KeyActionCommand",
    "KeyCommandOptions",
    "MeilisearchClient",
    "MeilisearchError",
    "OperationFailedError",
    "UsageError",
]
