"""Main CLI interface for osv-scanner."""

import sys
from typing import Dict, List, Optional, Sequence, TextIO

import typer

from .. import __build_date__, __commit__, __version__
from ..core.errors import ErrorKind, OtherFailure, TerminationError, ValidationError
from ..core.models import OutputMode, ScanRequest
from ..core.orchestrator import ScanOrchestrator, SourceOrchestrator
from ..engines import registry
from ..output.reporter import OutputError, Reporter
from ..utils.logging import get_logger, setup_logging
from .arguments import translate, validate_format

PROG_NAME = "osv-scanner"

EXIT_SUCCESS = 0
EXIT_VULNERABILITIES_FOUND = 1
EXIT_FAILURE = 127
EXIT_NO_SOURCES = 128

EXIT_CODES: Dict[ErrorKind, int] = {
    ErrorKind.VULNERABILITIES_FOUND: EXIT_VULNERABILITIES_FOUND,
    ErrorKind.NO_SOURCES: EXIT_NO_SOURCES,
    ErrorKind.VALIDATION: EXIT_FAILURE,
    ErrorKind.OTHER: EXIT_FAILURE,
}

NO_SOURCES_MESSAGE = "No package sources found, --help for usage information."
ABORTED_MESSAGE = "Aborted."

# Typer may ship its own copy of click, so take the base class from the
# exceptions typer actually raises
UsageErrors = tuple(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "ClickException"
)

app = typer.Typer(
    name=PROG_NAME,
    help="Scans various mediums for dependencies and matches them against the OSV database",
    add_completion=False,
    # Plain help text so it can be written through the reporter
    rich_markup_mode=None
)

logger = get_logger("CLI")


class Dispatcher:
    """Runs one invocation: parse, scan, render and map the exit status.

    The dispatcher owns the reporter for the whole invocation and hands it
    to every step that prints.
    """

    def __init__(
        self,
        orchestrator: ScanOrchestrator,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ) -> None:
        """Initialize the dispatcher.

        Args:
            orchestrator: Scan engine entry point
            stdout: Stream for results, defaults to sys.stdout
            stderr: Stream for diagnostics, defaults to sys.stderr
        """
        self.orchestrator = orchestrator
        self.reporter = Reporter(stdout, stderr, OutputMode.neutral())

    def run(self, argv: Sequence[str]) -> int:
        """Process command-line arguments and return the exit status.

        Args:
            argv: Arguments without the program name

        Returns:
            Process exit status
        """
        command = typer.main.get_command(app)
        try:
            status = command.main(
                args=list(argv),
                prog_name=PROG_NAME,
                standalone_mode=False,
                obj=self,
            )
        except UsageErrors as e:
            return self.exit_status(ValidationError(e.format_message(), cause=e))
        except TerminationError as e:
            return self.exit_status(e)
        except typer.Abort:
            self.reporter.print_error(ABORTED_MESSAGE)
            return EXIT_FAILURE

        # typer.Exit raised by a callback comes back as its exit code
        if isinstance(status, int) and status != EXIT_SUCCESS:
            return status
        return self.exit_status(None)

    def print_help(self, help_text: str) -> None:
        self.reporter.print_text(help_text.rstrip("\n") + "\n")

    def print_version(self) -> None:
        self.reporter.print_text(
            f"{PROG_NAME} version: {__version__}\n"
            f"commit: {__commit__}\n"
            f"built at: {__build_date__}\n"
        )

    def execute(self, request: ScanRequest, mode: OutputMode) -> None:
        """Scan and render, raising the terminating error if there is one.

        The result is rendered even when the scan failed. A failure to
        render replaces the scan's own error.

        Args:
            request: What to scan
            mode: Effective output mode

        Raises:
            TerminationError: The rendering failure or the scan's error
        """
        self.reporter.set_mode(mode)
        result, error = self.orchestrator.scan(request)

        try:
            self.reporter.print_result(result)
        except OutputError as e:
            raise OtherFailure(f"failed to write output: {e}", cause=e) from e

        if error is not None:
            raise error

    def exit_status(self, error: Optional[TerminationError]) -> int:
        """Map a terminating error to an exit status, printing diagnostics.

        Args:
            error: Error that ended the invocation, or None

        Returns:
            Process exit status
        """
        if error is None:
            return EXIT_SUCCESS

        if error.kind == ErrorKind.NO_SOURCES:
            self.reporter.print_error(NO_SOURCES_MESSAGE)
        elif error.kind != ErrorKind.VULNERABILITIES_FOUND:
            logger.debug(f"Scan terminated with {error.kind.value} error: {error}")
            self.reporter.print_error(str(error))

        return EXIT_CODES[error.kind]


def _version_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    ctx.obj.print_version()
    raise typer.Exit()


def _help_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    ctx.obj.print_help(ctx.get_help())
    raise typer.Exit()


@app.command(context_settings={"help_option_names": []})
def scan(
    ctx: typer.Context,
    directories: Optional[List[str]] = typer.Argument(
        None,
        help="Directories to scan",
        metavar="[DIRECTORY1 DIRECTORY2...]",
        show_default=False
    ),
    docker: Optional[List[str]] = typer.Option(
        None,
        "--docker",
        "-D",
        help="Scan docker image with this name"
    ),
    lockfile: Optional[List[str]] = typer.Option(
        None,
        "--lockfile",
        "-L",
        help="Scan package lockfile on this path"
    ),
    sbom: Optional[List[str]] = typer.Option(
        None,
        "--sbom",
        "-S",
        help="Scan sbom file on this path"
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="Set/override config file"
    ),
    output_format: str = typer.Option(
        OutputMode.TABLE.value,
        "--format",
        "-f",
        help="Sets the output format",
        callback=validate_format
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Sets output to json (deprecated, use --format json instead)"
    ),
    skip_git: bool = typer.Option(
        False,
        "--skip-git",
        help="Skip scanning git repositories"
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Check subdirectories"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging on stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Print the version",
        callback=_version_callback,
        is_eager=True
    ),
    show_help: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit",
        callback=_help_callback,
        is_eager=True
    )
) -> None:
    """Scan lockfiles, SBOMs, docker images and directories for vulnerable dependencies."""
    setup_logging(verbose=verbose)

    request, mode = translate(
        lockfiles=lockfile,
        sboms=sbom,
        docker_images=docker,
        directories=directories,
        recursive=recursive,
        skip_git=skip_git,
        config=config,
        output_format=output_format,
        json_flag=json_output,
    )
    logger.debug(f"Effective output mode: {mode.value}")

    dispatcher: Dispatcher = ctx.obj
    dispatcher.execute(request, mode)


def default_orchestrator() -> ScanOrchestrator:
    """Build the orchestrator backed by the installed engine plugins."""
    registry.load_plugins()
    return SourceOrchestrator(registry)


def run(
    argv: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    orchestrator: Optional[ScanOrchestrator] = None
) -> int:
    """Run one invocation.

    Args:
        argv: Arguments without the program name
        stdout: Stream for results
        stderr: Stream for diagnostics
        orchestrator: Scan engine, defaults to the plugin-backed one

    Returns:
        Process exit status
    """
    if orchestrator is None:
        orchestrator = default_orchestrator()
    return Dispatcher(orchestrator, stdout, stderr).run(argv)


def main() -> None:
    """Main entry point for the osv-scanner CLI."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
