"""
Logging configuration for the goxplat CLI.

``configure_cli_logging()`` runs once per invocation from main.py.  Every
module that does ``logger = logging.getLogger(__name__)`` inherits it.

Console level, highest precedence first:
    --debug / --verbose / --quiet  >  GOXPLAT_LOG_LEVEL  >  goxplat.yml log_level  >  WARNING

GOXPLAT_LOG_FILE adds a file handler; GOXPLAT_LOG_FILE_LEVEL sets its own
threshold (defaults to the console level).
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "GOXPLAT_LOG_LEVEL"
ENV_LOG_FILE = "GOXPLAT_LOG_FILE"
ENV_LOG_FILE_LEVEL = "GOXPLAT_LOG_FILE_LEVEL"

DEFAULT_LEVEL = "WARNING"

# (max level, format, datefmt): first row whose level is >= the console level
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
# Resolver fallbacks are the usual WARNING output; keep the level visible
_FMT_CONSOLE_DEFAULT = "goxplat %(levelname)s: %(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    config_level: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name from flags, environment and config.

    ``--debug`` beats ``--verbose`` beats ``--quiet`` when several are given.
    Empty values fall through to the next source.
    """
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"

    env = os.environ if environ is None else environ
    return env.get(ENV_LOG_LEVEL) or config_level or DEFAULT_LEVEL


def configure_cli_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    config_level: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve the level and install the root handlers.

    Returns:
        The console level name that was applied.
    """
    env = os.environ if environ is None else environ
    level = resolve_level(
        debug=debug,
        verbose=verbose,
        quiet=quiet,
        config_level=config_level,
        environ=env,
    )
    setup_logging(
        level=level,
        log_file=env.get(ENV_LOG_FILE) or None,
        log_file_level=env.get(ENV_LOG_FILE_LEVEL) or None,
    )
    return level


def setup_logging(
    level: str = DEFAULT_LEVEL,
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr handler and an
    optional file handler.

    Handlers from an earlier call are closed, so repeated setup does not
    leak open log files.
    """
    numeric_level = parse_level(level)

    fmt, datefmt = _FMT_CONSOLE_DEFAULT, None
    for max_level, row_fmt, row_datefmt in _CONSOLE_FORMATS:
        if numeric_level <= max_level:
            fmt, datefmt = row_fmt, row_datefmt
            break

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    _close_handlers(root)
    root.addHandler(console)

    root_level = numeric_level
    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else numeric_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(root_level)

    logging.raiseExceptions = False


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant.

    Unknown or empty names mean WARNING.
    """
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
