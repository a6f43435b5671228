"""
Configuration management for the key command.

This module provides centralized configuration with environment variable support
and validation before the command talks to Meilisearch.
"""

import logging
import os
from typing import Optional, List
from urllib.parse import urlparse


class Config:
    """Application configuration with validation."""

    # Meilisearch connection
    MEILI_HTTP_ADDR: str = os.getenv("MEILI_HTTP_ADDR", "http://localhost:7700")
    MEILI_MASTER_KEY: Optional[str] = os.getenv("MEILI_MASTER_KEY")

    # HTTP client settings
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30.0"))

    # Logging
    LOG_DIR: Optional[str] = os.getenv(
        "LOG_DIR", os.path.expanduser("~/.meilisearch-keys/logs")
    )
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls, url: Optional[str] = None) -> List[str]:
        """
        Validate configuration and return list of errors.

        Args:
            url: Meilisearch URL to check instead of MEILI_HTTP_ADDR

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        url = url if url is not None else cls.MEILI_HTTP_ADDR

        # Validate Meilisearch URL
        try:
            parsed = urlparse(url)
            if not parsed.scheme or not parsed.netloc:
                errors.append("MEILI_HTTP_ADDR must be a valid URL")
            if parsed.scheme not in ("http", "https"):
                errors.append("MEILI_HTTP_ADDR must use http or https scheme")
        except ValueError as e:
            errors.append(f"Invalid MEILI_HTTP_ADDR: {e}")

        if cls.HTTP_TIMEOUT < 0.1:
            errors.append("HTTP_TIMEOUT must be at least 0.1 seconds")
        if cls.HTTP_TIMEOUT > 600.0:  # Max 10 minutes
            errors.append("HTTP_TIMEOUT exceeds safe limit of 10 minutes")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"LOG_LEVEL must be a logging level name, got {cls.LOG_LEVEL}")

        return errors


# Global config instance
config = Config()
