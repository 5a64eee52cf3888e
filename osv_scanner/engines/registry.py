"""Plugin registry system for scanning engines."""

from importlib.metadata import entry_points
from typing import Dict, List, Optional, Tuple, Type

from ..core.models import PackageSource, SourceKind
from ..utils.logging import get_logger
from .base import SourceScanner

ENTRY_POINT_GROUP = "osv_scanner.engines"


class EngineRegistry:
    """Registry for source scanners with plugin support."""

    def __init__(self) -> None:
        """Initialize the engine registry."""
        self._engines: Dict[Tuple[SourceKind, str], SourceScanner] = {}
        self._kind_engines: Dict[SourceKind, List[SourceScanner]] = {}
        self.logger = get_logger("EngineRegistry")

    def register(self, kind: SourceKind, name: str, engine: SourceScanner) -> None:
        """Register an engine for a source kind.

        Args:
            kind: Kind of source the engine handles
            name: Engine name (e.g., 'osv-api')
            engine: Engine instance to register
        """
        key = (kind, name)
        previous = self._engines.get(key)
        if previous is not None:
            self._kind_engines[kind].remove(previous)

        self._engines[key] = engine
        self._kind_engines.setdefault(kind, []).append(engine)

    def get_engine(self, kind: SourceKind, name: str) -> Optional[SourceScanner]:
        return self._engines.get((kind, name))

    def find_engine(self, source: PackageSource) -> Optional[SourceScanner]:
        """Find an engine that can handle the given source.

        Args:
            source: Source to scan

        Returns:
            First registered engine accepting the source, or None
        """
        for engine in self._kind_engines.get(source.kind, []):
            if engine.can_scan(source):
                return engine
        return None

    def get_supported_kinds(self) -> List[SourceKind]:
        return [kind for kind, engines in self._kind_engines.items() if engines]

    def load_plugins(self, group: str = ENTRY_POINT_GROUP) -> int:
        """Register engines advertised through package entry points.

        Each entry point must resolve to a ``SourceScanner`` subclass, which
        is instantiated with no arguments.

        Args:
            group: Entry point group to read

        Returns:
            Number of engines registered
        """
        loaded = 0
        for entry_point in entry_points(group=group):
            engine_class = entry_point.load()
            if not (isinstance(engine_class, type) and issubclass(engine_class, SourceScanner)):
                self.logger.warning(f"Skipping entry point {entry_point.name}: not a SourceScanner")
                continue
            engine = engine_class()
            self.register(engine.kind, engine.name or entry_point.name, engine)
            self.logger.debug(f"Registered engine {entry_point.name} for {engine.kind.value} sources")
            loaded += 1
        return loaded


def register_engine(
    name: str,
    registry: Optional[EngineRegistry] = None
):
    """Class decorator registering an engine instance.

    Args:
        name: Engine name
        registry: Registry instance (uses global registry if None)

    Returns:
        Decorator returning the class unchanged
    """
    def decorator(engine_class: Type[SourceScanner]) -> Type[SourceScanner]:
        target = registry
        if target is None:
            from . import registry as global_registry
            target = global_registry
        engine = engine_class()
        target.register(engine.kind, name, engine)
        return engine_class

    return decorator
