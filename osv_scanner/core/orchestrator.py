"""Scan orchestration: resolving sources and delegating them to engines."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..engines.registry import EngineRegistry
from ..utils.logging import get_logger
from ..utils.path_utils import SourceFinder
from .config import ConfigManager
from .errors import (
    NoSourcesFoundError,
    OtherFailure,
    TerminationError,
    VulnerabilitiesFoundError,
)
from .models import (
    PackageResult,
    PackageSource,
    ScanRequest,
    ScanResult,
    SourceKind,
    SourceResult,
)

ScanOutcome = Tuple[ScanResult, Optional[TerminationError]]


class ScanOrchestrator(ABC):
    """Contract between the command line and the scanning engine."""

    @abstractmethod
    def scan(self, request: ScanRequest) -> ScanOutcome:
        """Run a scan.

        Args:
            request: What to scan

        Returns:
            The (possibly partial) result and the terminating error, if any:
            VulnerabilitiesFoundError when findings exist, NoSourcesFoundError
            when nothing could be resolved, OtherFailure for anything else
        """
        pass


class SourceOrchestrator(ScanOrchestrator):
    """Resolves a request into package sources and runs registered engines."""

    def __init__(
        self,
        registry: EngineRegistry,
        finder_factory=SourceFinder
    ) -> None:
        """Initialize the orchestrator.

        Args:
            registry: Engines available for each source kind
            finder_factory: Callable building a SourceFinder from
                ``recursive`` and ``skip_git`` keyword arguments
        """
        self.registry = registry
        self.finder_factory = finder_factory
        self.logger = get_logger("SourceOrchestrator")

    def scan(self, request: ScanRequest) -> ScanOutcome:
        result = ScanResult()
        try:
            self._scan_into(request, result)
        except TerminationError as e:
            return result, e

        if result.vulnerability_count:
            return result, VulnerabilitiesFoundError()
        return result, None

    def _scan_into(self, request: ScanRequest, result: ScanResult) -> None:
        sources = self.resolve_sources(request)
        if not sources:
            raise NoSourcesFoundError()

        configs = ConfigManager(request.config_override)

        for source in sources:
            packages = self._scan_source(source)
            self._apply_ignores(source, packages, configs)
            result.results.append(SourceResult(source=source, packages=packages))

        if result.package_count == 0:
            raise NoSourcesFoundError()

    def resolve_sources(self, request: ScanRequest) -> List[PackageSource]:
        """Expand a request into concrete package sources.

        Args:
            request: Scan request

        Returns:
            Sources in request order: lockfiles, SBOMs, images, then
            whatever each directory contains

        Raises:
            OtherFailure: If a directory cannot be walked
        """
        sources = [PackageSource(path, SourceKind.LOCKFILE) for path in request.lockfile_paths]
        sources += [PackageSource(path, SourceKind.SBOM) for path in request.sbom_paths]
        sources += [PackageSource(name, SourceKind.DOCKER) for name in request.docker_images]

        finder = self.finder_factory(recursive=request.recursive, skip_git=request.skip_git)
        for directory in request.directory_paths:
            self.logger.info(f"Scanning dir {directory}")
            try:
                found = finder.find_sources(directory)
            except OSError as e:
                raise OtherFailure(f"failed to scan directory {directory}: {e}", cause=e) from e
            self.logger.debug(f"Found {len(found)} sources in {directory}")
            sources.extend(found)

        return sources

    def _scan_source(self, source: PackageSource) -> List[PackageResult]:
        engine = self.registry.find_engine(source)
        if engine is None:
            raise OtherFailure(f"no scanning engine available for {source.kind.value} source {source.path}")

        self.logger.info(f"Scanning {source.kind.value} {source.path}")
        try:
            packages = engine.scan(source)
        except TerminationError:
            raise
        except Exception as e:
            raise OtherFailure(f"failed to scan {source.kind.value} {source.path}: {e}", cause=e) from e

        self.logger.debug(f"Scanned {source.path} and found {len(packages)} packages")
        return packages

    def _apply_ignores(
        self,
        source: PackageSource,
        packages: List[PackageResult],
        configs: ConfigManager
    ) -> None:
        config = configs.get(source.path)
        for package in packages:
            kept = []
            for vuln in package.vulnerabilities:
                ignored, entry = config.should_ignore(vuln.id)
                if ignored:
                    reason = entry.reason if entry and entry.reason else "no reason given"
                    self.logger.info(f"{vuln.id} has been filtered out because: {reason}")
                    continue
                kept.append(vuln)
            package.vulnerabilities = kept
