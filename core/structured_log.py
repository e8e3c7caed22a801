from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)

# Environment settings are read when the handler is first opened.
LOG_DIR_ENV = "LEFTRIGHT_LOG_DIR"
MAX_BYTES_ENV = "LEFTRIGHT_LOG_MAX_BYTES"
BACKUP_COUNT_ENV = "LEFTRIGHT_LOG_BACKUP_COUNT"
DEFAULT_LOG_DIR = Path("logs")
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_fallback_dir: Optional[Path] = None
_file_handler: RotatingFileHandler | None = None


def configure(log_dir: str | Path | None) -> None:
    """
    Set the events directory used when LEFTRIGHT_LOG_DIR is unset.

    Closes any open handler so the next event re-resolves its location.
    Pass None to fall back to ./logs.
    """
    global _fallback_dir, _file_handler
    if _file_handler is not None:
        _file_handler.close()
        _file_handler = None
    _fallback_dir = Path(log_dir) if log_dir is not None else None


def get_log_dir() -> Path:
    """Events directory: $LEFTRIGHT_LOG_DIR, else the configured dir, else ./logs."""
    env_dir = os.getenv(LOG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return _fallback_dir or DEFAULT_LOG_DIR


def get_log_file() -> Path:
    """Path of the events file, the open one if a handler exists."""
    if _file_handler is not None:
        return Path(_file_handler.baseFilename)
    return get_log_dir() / "events.jsonl"


def _get_file_handler() -> RotatingFileHandler:
    """Get or create the rotating file handler."""
    global _file_handler
    if _file_handler is None:
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = RotatingFileHandler(
            str(log_file),
            maxBytes=int(os.getenv(MAX_BYTES_ENV, DEFAULT_MAX_BYTES)),
            backupCount=int(os.getenv(BACKUP_COUNT_ENV, DEFAULT_BACKUP_COUNT)),
            encoding="utf-8",
        )
        _file_handler.setFormatter(logging.Formatter("%(message)s"))
    return _file_handler


def jlog(event: str, level: str = "INFO", **fields: Any) -> None:
    """
    Write a structured JSON log entry with automatic rotation.

    Args:
        event: Event name/type
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **fields: Additional fields to include in the log entry
    """
    level = level.upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    rec: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "event": event,
        **fields,
    }
    line = json.dumps(rec, default=str)

    levelno = _LEVELS[level]
    handler = _get_file_handler()
    handler.emit(logging.LogRecord(
        name="leftright", level=levelno, pathname="", lineno=0,
        msg=line, args=(), exc_info=None,
    ))

    # Also echo a concise line through the module logger
    logger.log(levelno, "%s | %s", event, fields)


def read_recent_logs(count: int = 100, level: str | None = None) -> list[Dict[str, Any]]:
    """
    Read the most recent log entries.

    Args:
        count: Maximum number of entries to return
        level: Optional filter by log level

    Returns:
        List of log entries (most recent last)
    """
    entries: list[Dict[str, Any]] = []

    log_file = get_log_file()
    if not log_file.exists():
        return entries

    if _file_handler is not None:
        _file_handler.flush()

    with log_file.open("r", encoding="utf-8") as f:
        lines = f.readlines()

    for line in reversed(lines):
        if len(entries) >= count:
            break
        try:
            entry = json.loads(line.strip())
        except json.JSONDecodeError:
            continue
        if level is None or entry.get("level") == level:
            entries.append(entry)

    return list(reversed(entries))
