# cppsage/log_manager.py
"""
Logger factory for cppsage.

:func:`get_logger` returns a configured :class:`logging.Logger` with a single
stream handler on stderr. Colored output via ``colorlog`` is used when stderr
is a TTY, or when forced through the environment.

Environment variables
---------------------
SAGE_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    Default level for loggers created without an explicit level.
SAGE_FORCE_COLOR=true|false
    Force colored logging on or off regardless of TTY detection.

Notes
-----
User-facing status lines are printed with click; logging carries the
diagnostic trail (commands run, files written and removed).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

import colorlog

__all__ = ["get_logger", "set_level", "ROOT_LOGGER_NAME"]

ROOT_LOGGER_NAME = "cppsage"

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name)s] %(message)s"
)


def _env_level() -> int:
    """Resolve the default level from ``SAGE_LOG_LEVEL`` (WARNING if unset/invalid)."""
    raw = os.getenv("SAGE_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(raw) if raw else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("SAGE_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in {"1", "true", "yes", "on"}
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _build_handler() -> logging.Handler:
    if _should_use_color():
        handler = colorlog.StreamHandler(stream=sys.stderr)
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt=_COLOR_FMT,
                datefmt=_PLAIN_DATEFMT,
                log_colors=_LEVEL_COLORS,
            )
        )
        return handler
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _root_logger() -> logging.Logger:
    """Return the package root logger, attaching its handler exactly once."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not getattr(root, "_cppsage_handler_attached", False):
        root.addHandler(_build_handler())
        root.setLevel(_env_level())
        root.propagate = False
        root._cppsage_handler_attached = True  # type: ignore[attr-defined]
    return root


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Return a logger under the ``cppsage`` hierarchy.

    Parameters
    ----------
    name : str, optional
        Dotted child name (e.g. ``"cppsage.manifest"``). Names outside the
        package hierarchy are prefixed with ``cppsage.``.
    level : int, optional
        Explicit level for this logger; otherwise it inherits from the root.

    Returns
    -------
    logging.Logger
    """
    _root_logger()
    if not name or name == ROOT_LOGGER_NAME:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    if level is not None:
        logger.setLevel(level)
    return logger


def set_level(level: int) -> None:
    """Set the level of the package root logger (used by ``--verbose``)."""
    _root_logger().setLevel(level)
