"""Shared fixtures for osv-scanner tests."""

import pytest

from osv_scanner.core.models import (
    Package,
    PackageResult,
    PackageSource,
    ScanResult,
    SourceKind,
    SourceResult,
    Vulnerability,
)
from osv_scanner.core.orchestrator import ScanOrchestrator


class FakeOrchestrator(ScanOrchestrator):
    """Orchestrator returning a canned outcome and recording requests."""

    def __init__(self, result=None, error=None):
        self.result = result if result is not None else ScanResult()
        self.error = error
        self.requests = []

    def scan(self, request):
        self.requests.append(request)
        return self.result, self.error


@pytest.fixture
def clean_result():
    """A result with one package and no vulnerabilities."""
    source = PackageSource("project/package-lock.json", SourceKind.LOCKFILE)
    return ScanResult(results=[
        SourceResult(
            source=source,
            packages=[PackageResult(Package("left-pad", "1.3.0", "npm"))],
        )
    ])


@pytest.fixture
def vulnerable_result():
    """A result with one vulnerable and one clean package."""
    source = PackageSource("project/requirements.txt", SourceKind.LOCKFILE)
    return ScanResult(results=[
        SourceResult(
            source=source,
            packages=[
                PackageResult(
                    Package("django", "3.2.0", "PyPI"),
                    [Vulnerability(
                        id="GHSA-xxxx-yyyy-zzzz",
                        summary="SQL injection in QuerySet.order_by",
                        severity="HIGH",
                        aliases=["CVE-2021-35042"],
                    )],
                ),
                PackageResult(Package("requests", "2.31.0", "PyPI")),
            ],
        )
    ])


@pytest.fixture
def make_orchestrator():
    """Factory for fake orchestrators."""
    return FakeOrchestrator
