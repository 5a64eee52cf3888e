"""Reporter writing results to stdout and diagnostics to stderr."""

import sys
from typing import Optional, TextIO

from rich.console import Console

from ..core.models import OutputMode, ScanResult
from ..utils.logging import get_logger
from .formatters import JSONFormatter, TableFormatter


class OutputError(Exception):
    """Raised when a scan result could not be written."""


class Reporter:
    """Output sink with a normal channel and a diagnostic channel.

    The reporter starts in the neutral mode and can be switched once the
    requested mode is known, so there is always one to print through.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        mode: OutputMode = OutputMode.neutral()
    ) -> None:
        """Initialize the reporter.

        Args:
            stdout: Stream for rendered results and plain text
            stderr: Stream for diagnostics
            mode: Initial output mode
        """
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.out_console = Console(file=self.stdout, highlight=False)
        self.err_console = Console(file=self.stderr, highlight=False)
        self.logger = get_logger("Reporter")
        self.mode = mode

    def set_mode(self, mode: OutputMode) -> None:
        if mode != self.mode:
            self.logger.debug(f"Switching output mode from {self.mode.value} to {mode.value}")
        self.mode = mode

    def print_text(self, message: str) -> None:
        """Write text to the normal channel, bypassing result formatting."""
        self.out_console.print(message, markup=False, soft_wrap=True, end="")

    def print_error(self, message: str) -> None:
        """Write a diagnostic to the error channel.

        Args:
            message: Diagnostic text
        """
        self.err_console.print(message.rstrip("\n"), style="red", markup=False, soft_wrap=True)

    def print_result(self, result: ScanResult) -> None:
        """Render a scan result in the current mode.

        Args:
            result: Scan result to render

        Raises:
            OutputError: If the result could not be serialized or written
        """
        try:
            if self.mode == OutputMode.JSON:
                self.stdout.write(JSONFormatter().dumps(result) + "\n")
                self.stdout.flush()
            else:
                TableFormatter(self.out_console).format_scan_results(result)
        except (OSError, TypeError, ValueError) as e:
            raise OutputError(str(e)) from e
