"""
Structured Logger for the File Manager.

Writes one JSON object per line with a timestamp, level, message, and any
key/value diagnostics attached by the caller.
"""

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, TextIO


class LogLevel(Enum):
    """Severity levels, lowest first."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def parse(cls, name: Optional[str]) -> "LogLevel":
        """
        Parse a level name.

        Args:
            name: Level name such as "debug" or "WARN"; empty means INFO

        Returns:
            The matching LogLevel

        Raises:
            ValueError: If the name is not a known level
        """
        if not name:
            return cls.INFO

        key = name.strip().upper()
        if key == "WARN":
            key = "WARNING"

        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unrecognized log level: {name!r}") from None


@dataclass
class LogEntry:
    """A single log line."""
    timestamp: str
    level: str
    msg: str
    fields: Dict[str, Any]

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        """Build an entry from a logging record."""
        return cls(
            timestamp=datetime.fromtimestamp(record.created).isoformat(),
            level=record.levelname.lower(),
            msg=record.getMessage(),
            fields=getattr(record, "fields", {})
        )

    def to_json(self) -> str:
        """Convert entry to a flat JSON object string."""
        data = asdict(self)
        fields = data.pop("fields")
        for key, value in fields.items():
            data.setdefault(key, value)
        return json.dumps(data, ensure_ascii=False, default=str)

    @classmethod
    def from_json(cls, json_str: str) -> "LogEntry":
        """Create entry from a JSON line."""
        data = json.loads(json_str)
        return cls(
            timestamp=data.pop("timestamp"),
            level=data.pop("level"),
            msg=data.pop("msg"),
            fields=data
        )


class JsonFormatter(logging.Formatter):
    """Formats records as LogEntry JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        return LogEntry.from_record(record).to_json()


class StructuredLogger:
    """
    Leveled JSON-lines logger.

    Entries below the configured level are dropped. Values that are not
    JSON serializable (exceptions, paths) are written via str().
    """

    def __init__(self, level: str = "", stream: Optional[TextIO] = None):
        """
        Initialize the logger.

        Args:
            level: Minimum level name to emit (empty means info)
            stream: Text stream to write to (default: sys.stderr)

        Raises:
            ValueError: If level is not a known level name
        """
        self.level = LogLevel.parse(level)

        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter())

        # Standalone logger, not registered with the logging manager.
        self._logger = logging.Logger("filemanager", self.level.value)
        self._logger.propagate = False
        self._logger.addHandler(handler)

    def log(self, level: LogLevel, msg: str, **fields: Any) -> None:
        self._logger.log(level.value, msg, extra={"fields": fields})

    def debug(self, msg: str, **fields: Any) -> None:
        self.log(LogLevel.DEBUG, msg, **fields)

    def info(self, msg: str, **fields: Any) -> None:
        self.log(LogLevel.INFO, msg, **fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self.log(LogLevel.WARNING, msg, **fields)

    def error(self, msg: str, **fields: Any) -> None:
        self.log(LogLevel.ERROR, msg, **fields)
