"""
Logging configuration — set once by the CLI before any command runs.

stdout belongs to generated code: anything printed there ends up pasted
into a Swift file.  Log records therefore go to stderr (or an explicit
stream) and optionally to a file, never to stdout.

Levels are resolved in precedence order:
    --debug / --verbose / --quiet  >  EQGEN_LOG_LEVEL  >  WARNING

EQGEN_LOG_FILE adds a file handler; EQGEN_LOG_FILE_LEVEL sets its level
(defaults to the console level).
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

ENV_LEVEL = "EQGEN_LOG_LEVEL"
ENV_FILE = "EQGEN_LOG_FILE"
ENV_FILE_LEVEL = "EQGEN_LOG_FILE_LEVEL"

# Console: bare messages unless the user asked for detail
_CONSOLE_FORMAT = "%(message)s"
_DETAIL_FORMAT = "%(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_FORMAT = "%(asctime)s " + _DETAIL_FORMAT

# Marks handlers installed here so a second setup replaces only those
_OWNED_ATTR = "_equatable_gen_handler"


class StdoutReservedError(ValueError):
    """Raised when logging is pointed at the stream generated code uses."""


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    env = os.environ if environ is None else environ
    return level_from_name(env.get(ENV_LEVEL))


def level_from_name(name: str | None) -> int:
    """``"debug"`` → ``logging.DEBUG``; unknown or empty names → WARNING."""
    level = logging.getLevelName(name.upper()) if name else None
    return level if isinstance(level, int) else logging.WARNING


def _own(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED_ATTR, True)
    return handler


def setup_logging(
    level: int = logging.WARNING,
    *,
    log_file: str | None = None,
    log_file_level: int | None = None,
    stream: TextIO | None = None,
) -> None:
    """Install the console (and optional file) handler on the root logger.

    Args:
        level: Console level.
        log_file: Optional path of a log file.
        log_file_level: File level; defaults to ``level``.
        stream: Console stream; defaults to the current ``sys.stderr``.

    Raises:
        StdoutReservedError: If ``stream`` is stdout.
    """
    stream = stream or sys.stderr
    if stream is sys.stdout or stream is sys.__stdout__:
        raise StdoutReservedError("stdout carries generated code; log to stderr or a file")

    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, _OWNED_ATTR, False)]:
        root.removeHandler(handler)
        handler.close()

    console_format = _DETAIL_FORMAT if level <= logging.INFO else _CONSOLE_FORMAT
    root.addHandler(_own(logging.StreamHandler(stream), level, console_format))

    root_level = level
    if log_file:
        file_level = level if log_file_level is None else log_file_level
        root.addHandler(_own(logging.FileHandler(log_file, encoding="utf-8"), file_level, _FILE_FORMAT))
        root_level = min(level, file_level)

    root.setLevel(root_level)


def setup_from_cli(*, debug: bool, verbose: bool, quiet: bool) -> None:
    """Configure logging from CLI flags plus the EQGEN_LOG_* environment."""
    file_level = os.environ.get(ENV_FILE_LEVEL)
    setup_logging(
        resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE) or None,
        log_file_level=level_from_name(file_level) if file_level else None,
    )
