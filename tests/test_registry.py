"""Tests for the engine registry."""

from unittest.mock import Mock, patch

from osv_scanner.core.models import PackageSource, SourceKind
from osv_scanner.engines.base import SourceScanner
from osv_scanner.engines.registry import ENTRY_POINT_GROUP, EngineRegistry, register_engine


class LockfileEngine(SourceScanner):
    kind = SourceKind.LOCKFILE
    name = "lockfile-engine"

    def scan(self, source):
        return []


class NpmOnlyEngine(LockfileEngine):
    """Engine accepting npm lockfiles only."""

    def can_scan(self, source):
        return super().can_scan(source) and source.path.endswith("package-lock.json")


class TestEngineRegistry:
    """Test engine registration and lookup."""

    def test_find_engine_by_kind(self):
        registry = EngineRegistry()
        engine = LockfileEngine()
        registry.register(SourceKind.LOCKFILE, "default", engine)

        assert registry.find_engine(PackageSource("yarn.lock", SourceKind.LOCKFILE)) is engine
        assert registry.find_engine(PackageSource("bom.json", SourceKind.SBOM)) is None
        assert registry.get_supported_kinds() == [SourceKind.LOCKFILE]

    def test_first_accepting_engine_wins(self):
        """Test that engines are consulted in registration order."""
        registry = EngineRegistry()
        npm = NpmOnlyEngine()
        fallback = LockfileEngine()
        registry.register(SourceKind.LOCKFILE, "npm", npm)
        registry.register(SourceKind.LOCKFILE, "fallback", fallback)

        assert registry.find_engine(PackageSource("app/package-lock.json", SourceKind.LOCKFILE)) is npm
        assert registry.find_engine(PackageSource("Cargo.lock", SourceKind.LOCKFILE)) is fallback

    def test_reregistering_replaces_engine(self):
        registry = EngineRegistry()
        first, second = LockfileEngine(), LockfileEngine()
        registry.register(SourceKind.LOCKFILE, "default", first)
        registry.register(SourceKind.LOCKFILE, "default", second)

        assert registry.get_engine(SourceKind.LOCKFILE, "default") is second
        assert registry.find_engine(PackageSource("yarn.lock", SourceKind.LOCKFILE)) is second

    def test_register_engine_decorator(self):
        registry = EngineRegistry()

        @register_engine("decorated", registry=registry)
        class DecoratedEngine(LockfileEngine):
            pass

        assert isinstance(registry.get_engine(SourceKind.LOCKFILE, "decorated"), DecoratedEngine)


class TestLoadPlugins:
    """Test entry point discovery."""

    def test_loads_scanner_classes(self):
        entry_point = Mock()
        entry_point.name = "plugin"
        entry_point.load.return_value = LockfileEngine
        not_an_engine = Mock()
        not_an_engine.name = "broken"
        not_an_engine.load.return_value = object

        registry = EngineRegistry()
        with patch("osv_scanner.engines.registry.entry_points", return_value=[entry_point, not_an_engine]) as eps:
            loaded = registry.load_plugins()

        eps.assert_called_once_with(group=ENTRY_POINT_GROUP)
        assert loaded == 1
        assert isinstance(registry.get_engine(SourceKind.LOCKFILE, "lockfile-engine"), LockfileEngine)
