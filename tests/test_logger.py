"""
Tests for the structured logger.
"""

import io
import json

import pytest

# Add parent directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.logger import LogEntry, LogLevel, StructuredLogger


class TestLogLevel:
    """Test LogLevel parsing."""

    @pytest.mark.parametrize("name, expected", [
        ("", LogLevel.INFO),
        (None, LogLevel.INFO),
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("warn", LogLevel.WARNING),
        ("Warning", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
    ])
    def test_parse(self, name, expected):
        """Test known level names."""
        assert LogLevel.parse(name) is expected

    def test_parse_unknown(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValueError, match="unrecognized log level"):
            LogLevel.parse("verbose")


class TestStructuredLogger:
    """Test StructuredLogger output."""

    @pytest.fixture
    def stream(self):
        return io.StringIO()

    def test_json_line(self, stream):
        """Test that an entry is a flat JSON object per line."""
        logger = StructuredLogger(level="info", stream=stream)

        logger.error("Failed to get file info", file="x.txt", error="denied")

        data = json.loads(stream.getvalue())
        assert data["level"] == "error"
        assert data["msg"] == "Failed to get file info"
        assert data["file"] == "x.txt"
        assert data["error"] == "denied"
        assert "timestamp" in data

    def test_level_filtering(self, stream):
        """Test that entries below the level are dropped."""
        logger = StructuredLogger(level="warn", stream=stream)

        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")
        logger.error("shown")

        levels = [LogEntry.from_json(line).level for line in stream.getvalue().splitlines()]
        assert levels == ["warning", "error"]

    def test_non_serializable_values(self, stream):
        """Test that exceptions and paths are written as strings."""
        logger = StructuredLogger(stream=stream)

        logger.info("value", error=OSError("boom"), where=Path("a/b"))

        data = json.loads(stream.getvalue())
        assert data["error"] == "boom"
        assert data["where"] == str(Path("a/b"))

    def test_fields_do_not_override_core_keys(self, stream):
        """Test that a field named like a core key keeps the core value."""
        logger = StructuredLogger(stream=stream)

        logger.info("real message", timestamp="shadow")

        assert json.loads(stream.getvalue())["timestamp"] != "shadow"

    def test_entry_from_json(self, stream):
        """Test reading an entry back."""
        logger = StructuredLogger(stream=stream)

        logger.info("hello", count=3)
        entry = LogEntry.from_json(stream.getvalue())

        assert entry.level == "info"
        assert entry.msg == "hello"
        assert entry.fields == {"count": 3}

    def test_invalid_level(self):
        """Test that an unknown level fails construction."""
        with pytest.raises(ValueError):
            StructuredLogger(level="loud")

    def test_defaults_to_stderr(self, capsys):
        """Test that output goes to stderr when no stream is given."""
        logger = StructuredLogger()

        logger.info("to stderr")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert json.loads(captured.err)["msg"] == "to stderr"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
