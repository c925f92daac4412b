"""Tests for logger configuration module."""

from pathlib import Path

from neokikoeru_bucket.logger.config import load_log_settings


def test_defaults() -> None:
    """Test WARNING console level and no file logging by default."""
    console_level, file_level, log_path = load_log_settings({})

    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path is None


def test_log_level_override() -> None:
    """Test LOG_LEVEL is honoured case-insensitively."""
    console_level, _, _ = load_log_settings({"LOG_LEVEL": "debug"})
    assert console_level == "DEBUG"


def test_unknown_log_level_falls_back() -> None:
    """Test an unknown level name falls back to WARNING."""
    console_level, _, _ = load_log_settings({"LOG_LEVEL": "LOUD"})
    assert console_level == "WARNING"


def test_log_file_with_tilde() -> None:
    """Test NEOKIKOERU_LOG_FILE expands a leading tilde."""
    _, _, log_path = load_log_settings(
        {"NEOKIKOERU_LOG_FILE": "~/logs/bucket.log"}
    )

    assert log_path == Path.home() / "logs" / "bucket.log"
    assert "~" not in str(log_path)
