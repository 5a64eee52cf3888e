"""Data models shared by the CLI, the orchestrator and the reporters."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class OutputMode(str, Enum):
    """Rendering mode for scan results."""

    TABLE = "table"
    JSON = "json"

    @classmethod
    def neutral(cls) -> "OutputMode":
        """Mode used before the requested one is known."""
        return cls.TABLE


class SourceKind(str, Enum):
    """Kinds of package sources a scan can cover."""

    LOCKFILE = "lockfile"
    SBOM = "sbom"
    DOCKER = "docker"
    GIT = "git"


@dataclass(frozen=True)
class ScanRequest:
    """Immutable description of what to scan and how.

    Paths and identifiers are kept exactly as given on the command line,
    in order and without de-duplication.
    """

    lockfile_paths: Tuple[str, ...] = ()
    sbom_paths: Tuple[str, ...] = ()
    docker_images: Tuple[str, ...] = ()
    directory_paths: Tuple[str, ...] = ()
    recursive: bool = False
    skip_git: bool = False
    config_override: Optional[str] = None

    def has_sources(self) -> bool:
        """Check whether any source was requested.

        Returns:
            True if at least one path or identifier is present
        """
        return any((
            self.lockfile_paths,
            self.sbom_paths,
            self.docker_images,
            self.directory_paths,
        ))


@dataclass(frozen=True)
class PackageSource:
    """A single scannable input: a file, an image or a repository."""

    path: str
    kind: SourceKind

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "type": self.kind.value}


@dataclass(frozen=True)
class Package:
    """A package pinned at a specific version."""

    name: str
    version: str
    ecosystem: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "version": self.version, "ecosystem": self.ecosystem}


@dataclass
class Vulnerability:
    """Represents a vulnerability with metadata."""

    id: str
    summary: str = ""
    details: str = ""
    severity: Optional[str] = None
    aliases: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate vulnerability data."""
        if not self.id:
            raise ValueError("Vulnerability ID cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "summary": self.summary,
            "details": self.details,
            "severity": self.severity,
            "aliases": list(self.aliases),
            "references": list(self.references),
        }


@dataclass
class PackageResult:
    """A package together with the vulnerabilities affecting it."""

    package: Package
    vulnerabilities: List[Vulnerability] = field(default_factory=list)

    @property
    def is_vulnerable(self) -> bool:
        return bool(self.vulnerabilities)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "package": self.package.to_dict(),
            "vulnerabilities": [vuln.to_dict() for vuln in self.vulnerabilities],
        }


@dataclass
class SourceResult:
    """Scan outcome for one package source."""

    source: PackageSource
    packages: List[PackageResult] = field(default_factory=list)

    def vulnerable_packages(self) -> List[PackageResult]:
        return [pkg for pkg in self.packages if pkg.is_vulnerable]


@dataclass
class ScanResult:
    """Aggregated outcome of a scan over every resolved source."""

    results: List[SourceResult] = field(default_factory=list)

    @property
    def package_count(self) -> int:
        return sum(len(result.packages) for result in self.results)

    @property
    def vulnerability_count(self) -> int:
        return sum(
            len(pkg.vulnerabilities)
            for result in self.results
            for pkg in result.packages
        )

    def vulnerable_packages(self) -> List[Tuple[PackageSource, PackageResult]]:
        """List vulnerable packages with the source they were found in.

        Returns:
            (source, package result) pairs in scan order
        """
        return [
            (result.source, pkg)
            for result in self.results
            for pkg in result.vulnerable_packages()
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Build the JSON document for this result.

        Only sources with at least one vulnerable package are included.

        Returns:
            JSON-serializable dictionary
        """
        results = []
        for result in self.results:
            vulnerable = result.vulnerable_packages()
            if not vulnerable:
                continue
            results.append({
                "source": result.source.to_dict(),
                "packages": [pkg.to_dict() for pkg in vulnerable],
            })
        return {"results": results}
