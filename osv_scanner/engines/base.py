"""Base class for scanning engines plugged into the orchestrator."""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import PackageResult, PackageSource, SourceKind


class SourceScanner(ABC):
    """Abstract base class for engines that scan one kind of package source.

    An engine extracts the packages from a source and reports the
    vulnerabilities known for each of them. The orchestrator never looks
    inside a source itself.
    """

    kind: SourceKind = SourceKind.LOCKFILE
    name: str = ""

    def can_scan(self, source: PackageSource) -> bool:
        """Check if this engine can handle the given source.

        Args:
            source: Source to check

        Returns:
            True if the engine handles this kind of source
        """
        return source.kind == self.kind

    @abstractmethod
    def scan(self, source: PackageSource) -> List[PackageResult]:
        """Scan a source.

        Args:
            source: Source to scan

        Returns:
            Every package found in the source, with its vulnerabilities
            (an empty list for packages with no known vulnerability)
        """
        pass
