"""Logging utilities with rich console output.

Combines Python's standard logging with rich's console rendering so that
parser diagnostics (skipped notes, missing markers) read well in a terminal.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Parsed 12 notes")
    logger.warning("Skipping note #3: expected element with 'bm-page' class")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .env import env

# Shared console so log records and CLI output interleave correctly
console = Console()


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    return RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses LOG_LEVEL from the environment or INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())

    handler = _rich_handler(show_time=show_time, show_path=show_path)
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    # pytest caplog captures through propagation
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once at the CLI entry point.

    Args:
        level: Default logging level, overridden by LOG_LEVEL
        log_file: Optional file path to also log to
    """
    level = env.log_level(default=level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = _rich_handler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a message with a green checkmark."""
    console.print(f"[green]✓[/green] {message}", soft_wrap=True)


def warning(message: str) -> None:
    """Print a message with a yellow warning icon; the message is not markup."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}", soft_wrap=True)


def error(message: str) -> None:
    """Print a message with a red X to stderr; the message is not markup.

    Example:
        >>> error("Expected element with 'bm-page' class")
        ✗ Expected element with 'bm-page' class
    """
    Console(stderr=True).print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)
