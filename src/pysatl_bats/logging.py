"""
Package logger.

An independent loguru logger owned by ``pysatl_bats``. No sink is attached
on import, so the library stays silent until :func:`set_log_level` is called.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from typing import Literal, get_args

from loguru._logger import Core as _Core
from loguru._logger import Logger as _Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = (
    "<fg #B0BEC5>{time:YYYY-MM-DD HH:mm:ss.SSS}</fg #B0BEC5> | "
    "<level>{level: <8}</level> | "
    "<fg #2196F3>{name}</fg #2196F3>:"
    "<fg #03A9F4>{function}</fg #03A9F4>:"
    "<fg #009688>{line}</fg #009688> - "
    "<level>{message}</level>"
)

logger = _Logger(
    core=_Core(),
    exception=None,
    depth=0,
    record=False,
    lazy=False,
    colors=False,
    raw=False,
    capture=True,
    patchers=[],
    extra={},
)

_handler_id: int | None = None


def set_log_level(level: LogLevel) -> None:
    """
    Route package records of ``level`` and above to stderr.

    Parameters
    ----------
    level : str
        One of TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL.

    Raises
    ------
    ValueError
        If ``level`` is not a known level name.
    """
    global _handler_id

    valid_levels = get_args(LogLevel)
    if level not in valid_levels:
        raise ValueError(f"Invalid log level '{level}'. Must be one of: {valid_levels}")

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # already removed by the caller
            pass

    _handler_id = logger.add(sink=sys.stderr, level=level, colorize=True, format=LOG_FORMAT)
    logger.debug("Log level set to {}", level)


__all__ = ["logger", "set_log_level", "LogLevel"]
