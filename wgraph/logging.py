"""Package-wide logging for wgraph.

Every module logs through ``get_logger(__name__)``; the loggers carry no
handlers of their own and inherit level and output from the ``wgraph`` root
logger, which owns exactly one handler (stderr by default, so path output on
stdout stays clean).

The initial level is INFO unless the ``WGRAPH_LOG_LEVEL`` environment variable
names another one (``debug``, ``WARNING``, ``10``, ...).
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "wgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "WGRAPH_LOG_LEVEL"

LevelLike = Union[int, str]

_root_configured = False


def parse_log_level(level: LevelLike) -> int:
    """Turn a level name or number into a logging level.

    Names are case-insensitive; numeric strings are accepted.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _default_level() -> int:
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        return parse_log_level(env_level)
    return logging.INFO


def setup_root_logger(
    level: Optional[LevelLike] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the wgraph root logger.

    Only the first call after import (or after reset_logging()) has an effect.

    Args:
        level: Initial level; defaults to WGRAPH_LOG_LEVEL or INFO.
        format_string: Record format; defaults to DEFAULT_FORMAT.
        handler: Output handler; defaults to a stderr StreamHandler.
    """
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_default_level() if level is None else parse_log_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # pytest's caplog listens on the global root logger
    root_logger.propagate = True
    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a handler-less logger below the wgraph root.

    Args:
        name: Logger name, normally the calling module's __name__.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: LevelLike) -> None:
    """Change the level of the wgraph root logger and its handlers.

    Args:
        level: A logging level number or name such as "debug".
    """
    setup_root_logger()
    numeric = parse_log_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler so the next setup starts fresh (used by tests)."""
    global _root_configured
    _root_configured = False
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
