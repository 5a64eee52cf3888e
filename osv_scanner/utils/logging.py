"""Logging utilities for osv-scanner.

Log records always go to stderr so that rendered results on stdout stay
machine-readable.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAMESPACE = "osv_scanner"


class ScannerLogger:
    """Thin wrapper around a namespaced standard logger."""

    def __init__(self, name: str) -> None:
        self.logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(msg, extra=kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(msg, extra=kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, extra=kwargs)


def setup_logging(verbose: bool = False) -> None:
    """Attach a rich stderr handler to the package logger.

    Args:
        verbose: Enable debug logging
    """
    console = Console(stderr=True, theme=Theme({
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "debug": "dim",
    }))

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s", datefmt="[%X]"))

    root = logging.getLogger(LOGGER_NAMESPACE)
    # Remove existing handlers to avoid duplicates across invocations
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def get_logger(name: str) -> ScannerLogger:
    """Get a logger for a component.

    Args:
        name: Component name

    Returns:
        Logger namespaced under ``osv_scanner``
    """
    return ScannerLogger(name)
