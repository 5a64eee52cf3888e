"""Output formatters for scan results."""

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.models import PackageResult, ScanResult, SourceResult


class TableFormatter:
    """Rich table formatter for terminal output."""

    def __init__(self, console: Console) -> None:
        """Initialize the table formatter.

        Args:
            console: Rich console bound to the output stream
        """
        self.console = console

    def format_scan_results(self, result: ScanResult) -> None:
        """Render one table per source with findings, then a summary line.

        Args:
            result: Scan result to render
        """
        for source_result in result.results:
            vulnerable = source_result.vulnerable_packages()
            if vulnerable:
                self.console.print(self._create_vulnerabilities_table(source_result, vulnerable))

        self.console.print(self._create_summary(result), soft_wrap=True)

    def _create_vulnerabilities_table(
        self,
        source_result: SourceResult,
        vulnerable: List[PackageResult]
    ) -> Table:
        """Create vulnerabilities table for a source.

        Args:
            source_result: Source the packages were found in
            vulnerable: Packages with at least one vulnerability

        Returns:
            Rich table with one row per vulnerability
        """
        table = Table(title=source_result.source.path)

        table.add_column("OSV ID", style="red", no_wrap=True)
        table.add_column("Ecosystem", style="blue")
        table.add_column("Package", style="cyan")
        table.add_column("Version", style="blue")
        table.add_column("Severity", style="yellow")

        for package_result in vulnerable:
            package = package_result.package
            for vuln in package_result.vulnerabilities:
                severity = vuln.severity or "UNKNOWN"
                table.add_row(
                    vuln.id,
                    package.ecosystem,
                    package.name,
                    package.version,
                    Text(severity, style=self._get_severity_style(severity)),
                )

        return table

    def _create_summary(self, result: ScanResult) -> Text:
        count = result.vulnerability_count
        if not count:
            return Text(
                f"No vulnerabilities found in {result.package_count} packages",
                style="green",
            )
        vulnerable = len(result.vulnerable_packages())
        return Text(
            f"Found {count} vulnerabilities in {vulnerable} of {result.package_count} packages",
            style="red",
        )

    def _get_severity_style(self, severity: str) -> str:
        """Get color style for severity level.

        Args:
            severity: Severity level

        Returns:
            Color style string
        """
        severity_lower = severity.lower()

        if "critical" in severity_lower:
            return "red bold"
        elif "high" in severity_lower:
            return "red"
        elif "medium" in severity_lower or "moderate" in severity_lower:
            return "yellow"
        elif "low" in severity_lower:
            return "blue"
        else:
            return "white"


class JSONFormatter:
    """JSON formatter for machine-readable output."""

    def __init__(self, indent: Optional[int] = 2) -> None:
        self.indent = indent

    def format_scan_results(self, result: ScanResult) -> Dict[str, Any]:
        return result.to_dict()

    def dumps(self, result: ScanResult) -> str:
        """Serialize scan results.

        Args:
            result: Scan result to serialize

        Returns:
            JSON document text
        """
        return json.dumps(self.format_scan_results(result), indent=self.indent, ensure_ascii=False)
