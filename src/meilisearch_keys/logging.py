"""
Structured logging for the key command.

Log calls take a message plus keyword fields, e.g.
``logger.debug("Creating key", url=url, has_api_key=True)``. Warnings and
errors go to stderr; when a log directory is configured every record is also
appended to a JSON-lines file there.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config import config

LOG_FILE_NAME = "meilisearch-keys.log"


class JSONLineFormatter(logging.Formatter):
    """Render a record and its structured fields as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "fields", {}))
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Render a record as ``LEVEL message key=value ...``."""

    def format(self, record: logging.LogRecord) -> str:
        fields = getattr(record, "fields", {})
        parts = [record.levelname, record.getMessage()]
        parts.extend(f"{key}={value}" for key, value in fields.items())
        return " ".join(parts)


class CommandLogger:
    """Logger accepting structured keyword fields."""

    def __init__(self, name: str = "meilisearch-keys", log_dir: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.log_dir = log_dir
        # Handlers opened by this instance; the shared stderr handler is not one of them
        self._owned_handlers: List[logging.Handler] = []

        if not any(getattr(handler, "is_stderr", False) for handler in self.logger.handlers):
            stderr_handler = logging.StreamHandler(sys.stderr)
            stderr_handler.is_stderr = True
            stderr_handler.setLevel(logging.WARNING)
            stderr_handler.setFormatter(ConsoleFormatter())
            self.logger.addHandler(stderr_handler)

        if log_dir:
            self._add_file_handler(log_dir)

    def _add_file_handler(self, log_dir: str) -> None:
        path = os.path.join(log_dir, LOG_FILE_NAME)
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(path):
                return
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as e:
            self.warning("Could not open log file", path=path, error=str(e))
            return
        file_handler.setLevel(config.LOG_LEVEL)
        file_handler.setFormatter(JSONLineFormatter())
        self.logger.addHandler(file_handler)
        self._owned_handlers.append(file_handler)

    def _log(self, level: int, msg: str, **fields: Any) -> None:
        self.logger.log(level, msg, extra={"fields": fields})

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, **fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, **fields)

    def error(self, msg: str, **fields: Any) -> None:
        self._log(logging.ERROR, msg, **fields)

    def shutdown(self) -> None:
        """Flush and close the file handler opened by this logger."""
        for handler in self._owned_handlers:
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)
        self._owned_handlers = []
