"""
Logging configuration — called once by main.py at startup.

Modules log through ``logging.getLogger(__name__)`` and inherit this
setup. The console handler writes to stderr so it never mixes with
package manager output relayed on stdout. An optional file handler
keeps full detail regardless of the console level.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)

# (format, datefmt) for verbose console levels
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT: tuple[str, str | None] = ("%(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names mean WARNING.
        log_file: Optional path of a log file. If it cannot be opened a
            warning is printed and logging continues on the console only.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    if console_level <= logging.DEBUG:
        fmt, datefmt = _CONSOLE_FORMATS[logging.DEBUG]
    elif console_level <= logging.INFO:
        fmt, datefmt = _CONSOLE_FORMATS[logging.INFO]
    else:
        fmt, datefmt = _CONSOLE_DEFAULT

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(console_level)

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot open log file %s: %s", log_file, e)
        else:
            fh.setLevel(file_level)
            fh.setFormatter(logging.Formatter(*_FILE_FORMAT))
            root.addHandler(fh)
            root.setLevel(min(console_level, file_level))

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
