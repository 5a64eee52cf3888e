"""Scanning engines reached through the orchestrator."""

from .base import SourceScanner
from .registry import EngineRegistry, register_engine

# Engines contributed by installed plugins are added on first use
registry = EngineRegistry()

__all__ = [
    "SourceScanner",
    "EngineRegistry",
    "register_engine",
    "registry",
]
