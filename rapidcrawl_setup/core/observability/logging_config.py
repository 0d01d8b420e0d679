"""
Logging configuration for the setup wizard.

The wizard talks to the user through ``ui.console``; logging is the
diagnostic channel underneath it and stays silent unless asked for.

Levels resolve in precedence order:
    --debug / --verbose / --quiet  >  RAPIDCRAWL_SETUP_LOG_LEVEL  >  WARNING

RAPIDCRAWL_SETUP_LOG_FILE adds a file handler (always full detail);
RAPIDCRAWL_SETUP_LOG_FILE_LEVEL sets its level independently. A log file
that cannot be opened is reported once and the console keeps logging.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "RAPIDCRAWL_SETUP_LOG_LEVEL"
ENV_FILE = "RAPIDCRAWL_SETUP_LOG_FILE"
ENV_FILE_LEVEL = "RAPIDCRAWL_SETUP_LOG_FILE_LEVEL"

# ── Formats ─────────────────────────────────────────────────────

_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_MINIMAL = "%(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = ("urllib3", "asyncio")


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger once per process.

    Args:
        level: Console level name.
        log_file: Optional log file path (default: RAPIDCRAWL_SETUP_LOG_FILE).
        log_file_level: File level name (default: RAPIDCRAWL_SETUP_LOG_FILE_LEVEL,
            then ``level``).
        quiet_third_party: Hold noisy library loggers at WARNING unless
            the console is at DEBUG.
    """
    console_level = _parse_level(level)
    log_file = log_file or os.environ.get(ENV_FILE)
    log_file_level = log_file_level or os.environ.get(ENV_FILE_LEVEL)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_console_handler(console_level))

    effective = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        try:
            root.addHandler(_file_handler(log_file, file_level))
            effective = min(effective, file_level)
        except OSError as e:
            root.setLevel(console_level)
            logging.getLogger(__name__).warning(
                "Cannot open log file %s (%s); logging to the console only",
                log_file,
                e.strerror or e,
            )
    root.setLevel(effective)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _FMT_MINIMAL, None
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            fmt, datefmt = _CONSOLE_FORMATS[threshold]
            break
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
    return handler


def _parse_level(level: str | None) -> int:
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
