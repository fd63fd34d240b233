"""LupaSearch logging.

Library modules only write to ``log``; nothing is printed until an
application (the CLI) calls :func:`configure_logging`. Records look like
``mm-dd HH:MM:SS [INFO] message`` with a four-letter level tag.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

LOGGER_NAME: Final = "LupaSearch"
_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final = "%m-%d %H:%M:%S"
_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

log = logging.getLogger(LOGGER_NAME)
log.addHandler(logging.NullHandler())


class _LevelTagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Route ``log`` to stderr, and to a per-run file when asked.

    Args:
        level: Console level name (e.g. INFO, DEBUG); unknown names mean INFO.
        action: CLI command name; names the log sub-directory and file.
        log_to_file: Mirror every record, DEBUG included, to a file.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when logging only to the console.
    """
    console_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    formatter = _LevelTagFormatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    handlers: list[logging.Handler] = [_console_handler(console_level, formatter)]
    log_path = _run_log_path(log_dir, action) if log_to_file and action else None
    if log_path is not None:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    _install(handlers, level=min(logging.DEBUG, console_level))
    return log_path


def reset_logging() -> None:
    """Close configured handlers and return ``log`` to its silent default."""
    for handler in list(log.handlers):
        handler.close()
    _install([logging.NullHandler()], level=logging.NOTSET)
    log.propagate = True


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    # stderr; stdout carries rendered results.
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _run_log_path(log_dir: str, action: str) -> Path:
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    return action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"


def _install(handlers: list[logging.Handler], *, level: int) -> None:
    log.handlers.clear()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(level)
    log.propagate = False
