"""
Logging configuration module for the combat engine.

Engine messages carry a trailing `[key=value ...]` context, so the handler
renders them as plain text rather than rich markup.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int = logging.WARNING, console: Console | None = None
) -> RichHandler:
    """
    Routes log records to a RichHandler on stderr.

    The handler sits on the root logger so warnings from catchery show up
    too; only the `skirmish` logger is lowered to `level`, keeping debug
    output from other libraries quiet. Calling it again replaces the
    previously installed handler.

    Args:
        level (int): The level for the `skirmish` logger.
        console (Console | None): Where to write; stderr when omitted.

    Returns:
        RichHandler: The installed handler.

    """
    handler = RichHandler(
        console=console or Console(width=120, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logger.setLevel(level)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


logger = get_logger("skirmish")


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if context:
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"
    return message


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an info message with optional context.

    Args:
        message (str): The info message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a debug message with optional context.

    Args:
        message (str): The debug message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.debug(_with_context(message, context))
