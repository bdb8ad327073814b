# deftree:header:start
#
#   project      : DefTree
#   file         : logging.py
#   file_relpath : src/deftree/core/logging.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree logging with a TRACE level below DEBUG and severity-colored records.

The merge engine logs every field decision at TRACE level, which is the level to use
when a resolved configuration does not look the way you expect:

    DEFTREE_LOG_LEVEL=trace deftree merge app.toml --defaults app.defaults.toml

Records always go to stderr (or the stream passed to `setup_logging`), so a merged
tree printed on stdout stays parseable at any log level.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from deftree.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class DefTreeLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(DefTreeLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Highest threshold first; levels below TRACE use the fallback color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record, colored by its level."""
        message: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``DEFTREE_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names in any case (``trace``, ``WARN``...) and numeric levels (``10``).
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Route all records to a single colored handler at ``level``.

    Args:
        level (int | None): Root level. When None, `resolve_env_log_level` is
            consulted, then CRITICAL.
        stream (TextIO | None): Destination of the records; ``sys.stderr`` by default.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> DefTreeLogger:
    """Return the `DefTreeLogger` named ``name``."""
    return cast("DefTreeLogger", logging.getLogger(name))
