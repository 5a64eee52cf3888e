"""Utility functions and helpers for osv-scanner."""

from .logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
