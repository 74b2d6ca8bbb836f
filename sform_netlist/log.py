"""
Logging helpers.

The package logs through the standard ``logging`` module under the
``sform_netlist`` logger, which is silent unless a handler is attached.
"""

from __future__ import annotations

import logging

_logger = logging.getLogger("sform_netlist")
_logger.addHandler(logging.NullHandler())

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {name!r}")
    return level


def enable_verbose(level: str = "DEBUG", fmt: str = DEFAULT_FORMAT) -> logging.Handler:
    """
    Print package log records to stderr.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...).
        fmt: Format string for the stream handler.

    Returns:
        The handler that was attached.

    Raises:
        ValueError: If the level name is not a logging level.

    Example:
        >>> from sform_netlist.log import enable_verbose
        >>> enable_verbose("INFO")
    """
    numeric = _level(level)
    _logger.setLevel(numeric)

    # Replace any handler from an earlier call
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt))
    _logger.addHandler(handler)
    return handler


def disable_verbose():
    """Detach handlers added by enable_verbose()."""
    _logger.setLevel(logging.WARNING)
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)
