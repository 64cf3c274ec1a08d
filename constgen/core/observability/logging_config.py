"""
Logging configuration — one setup call from the CLI entrypoint.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where records go and how they look.

Level precedence:
    --debug / --verbose / --quiet  >  CONSTGEN_LOG_LEVEL  >  WARNING

A log file is added when CONSTGEN_LOG_FILE is set; its level comes from
CONSTGEN_LOG_FILE_LEVEL and falls back to the console level.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "CONSTGEN_LOG_LEVEL"
ENV_FILE = "CONSTGEN_LOG_FILE"
ENV_FILE_LEVEL = "CONSTGEN_LOG_FILE_LEVEL"

# Console format per threshold: (format, datefmt). Checked top-down.
_CONSOLE_FORMATS = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s %(name)s: %(message)s", "%H:%M:%S"),
)
_CONSOLE_DEFAULT = ("%(levelname)s: %(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-8s %(name)s — %(message)s", "%Y-%m-%d %H:%M:%S")

# PyYAML and pydantic stay quiet unless we're at DEBUG
_NOISY_LOGGERS = ("yaml", "pydantic")


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL) or "WARNING"


def _console_formatter(level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    fmt, datefmt = _CONSOLE_DEFAULT
    return logging.Formatter(fmt, datefmt=datefmt)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Install console (stderr) and optional file handlers on the root logger.

    Args:
        level: Console level name. Unknown names fall back to WARNING.
        log_file: Path of an extra log file, or None.
        log_file_level: Level for the file handler (default: ``level``).
        quiet_third_party: Hold library loggers at WARNING below DEBUG.
    """
    console_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT[0], datefmt=_FILE_FORMAT[1]))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    for name in _NOISY_LOGGERS:
        noisy = logging.getLogger(name)
        if quiet_third_party and console_level > logging.DEBUG:
            noisy.setLevel(logging.WARNING)
        else:
            noisy.setLevel(logging.NOTSET)

    logging.raiseExceptions = False


def setup_from_env(level: str) -> None:
    """``setup_logging`` with the file settings taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=_parse_level(level) > logging.DEBUG,
    )


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; WARNING when unset or unknown."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
