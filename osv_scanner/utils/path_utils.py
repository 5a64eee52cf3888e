"""Path utilities for discovering package sources inside directories."""

import fnmatch
import os
from pathlib import Path
from typing import Iterator, List, Optional

from ..core.models import PackageSource, SourceKind

GIT_DIR = ".git"

# Lockfile names recognised when walking directories
LOCKFILE_PATTERNS = [
    "buildscript-gradle.lockfile",
    "Cargo.lock",
    "composer.lock",
    "conan.lock",
    "Gemfile.lock",
    "go.mod",
    "gradle.lockfile",
    "mix.lock",
    "package-lock.json",
    "Pipfile.lock",
    "pnpm-lock.yaml",
    "poetry.lock",
    "pom.xml",
    "pubspec.lock",
    "requirements.txt",
    "yarn.lock",
]

SBOM_PATTERNS = [
    "*.spdx",
    "*.spdx.json",
    "*.spdx.yaml",
    "*.spdx.yml",
    "*.cdx.json",
    "*.cdx.xml",
    "bom.json",
    "bom.xml",
]

DEFAULT_IGNORED_DIRS = {
    "node_modules",
    "__pycache__",
}


class PathFilter:
    """Filters directory names during a walk."""

    def __init__(self, ignored_dirs: Optional[List[str]] = None) -> None:
        """Initialize path filter.

        Args:
            ignored_dirs: Directory names to skip entirely
        """
        self.ignored_dirs = set(DEFAULT_IGNORED_DIRS)
        if ignored_dirs:
            self.ignored_dirs.update(ignored_dirs)

    def is_ignored(self, name: str) -> bool:
        return name in self.ignored_dirs or name == GIT_DIR


def classify_file(path: Path) -> Optional[SourceKind]:
    """Work out whether a file is a lockfile or an SBOM.

    Args:
        path: File to classify

    Returns:
        Source kind, or None if the file is not recognised
    """
    name = path.name
    if name in LOCKFILE_PATTERNS:
        return SourceKind.LOCKFILE
    for pattern in SBOM_PATTERNS:
        if fnmatch.fnmatch(name, pattern):
            return SourceKind.SBOM
    return None


class SourceFinder:
    """Finds package sources in a directory tree."""

    def __init__(
        self,
        recursive: bool = False,
        skip_git: bool = False,
        path_filter: Optional[PathFilter] = None
    ) -> None:
        """Initialize the finder.

        Args:
            recursive: Descend into subdirectories
            skip_git: Do not report git repositories as sources
            path_filter: Directory filter, defaults to the standard one
        """
        self.recursive = recursive
        self.skip_git = skip_git
        self.path_filter = path_filter or PathFilter()

    def find_sources(self, root: str) -> List[PackageSource]:
        """Find all sources under a directory.

        Args:
            root: Directory to search

        Returns:
            Sources in walk order

        Raises:
            FileNotFoundError: If root does not exist
            NotADirectoryError: If root is not a directory
        """
        root_path = Path(root)
        if not root_path.exists():
            raise FileNotFoundError(f"directory does not exist: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"not a directory: {root}")

        return list(self._walk(root_path))

    def _walk(self, root: Path) -> Iterator[PackageSource]:
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)

            if GIT_DIR in dirnames and not self.skip_git:
                yield PackageSource(path=str(current), kind=SourceKind.GIT)

            for filename in sorted(filenames):
                file_path = current / filename
                kind = classify_file(file_path)
                if kind is not None:
                    yield PackageSource(path=str(file_path), kind=kind)

            if self.recursive:
                dirnames[:] = sorted(d for d in dirnames if not self.path_filter.is_ignored(d))
            else:
                dirnames[:] = []
