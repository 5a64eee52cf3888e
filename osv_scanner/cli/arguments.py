"""Translation of command-line values into a scan request."""

from typing import Iterable, Optional, Tuple

import typer

from ..core.models import OutputMode, ScanRequest

SUPPORTED_FORMATS = tuple(mode.value for mode in OutputMode)


def validate_format(value: str) -> str:
    """Reject unsupported ``--format`` values as soon as they are parsed.

    Args:
        value: Raw flag value

    Returns:
        The value unchanged

    Raises:
        typer.BadParameter: If the value is not a supported format
    """
    if value not in SUPPORTED_FORMATS:
        raise typer.BadParameter(
            f'unsupported output format "{value}" - must be either "table" or "json"'
        )
    return value


def effective_mode(output_format: str, json_flag: bool) -> OutputMode:
    """Work out the output mode; the legacy ``--json`` flag always wins."""
    if json_flag:
        return OutputMode.JSON
    return OutputMode(output_format)


def build_request(
    lockfiles: Optional[Iterable[str]] = None,
    sboms: Optional[Iterable[str]] = None,
    docker_images: Optional[Iterable[str]] = None,
    directories: Optional[Iterable[str]] = None,
    recursive: bool = False,
    skip_git: bool = False,
    config: Optional[str] = None
) -> ScanRequest:
    return ScanRequest(
        lockfile_paths=tuple(lockfiles or ()),
        sbom_paths=tuple(sboms or ()),
        docker_images=tuple(docker_images or ()),
        directory_paths=tuple(directories or ()),
        recursive=recursive,
        skip_git=skip_git,
        config_override=config or None,
    )


def translate(
    lockfiles: Optional[Iterable[str]] = None,
    sboms: Optional[Iterable[str]] = None,
    docker_images: Optional[Iterable[str]] = None,
    directories: Optional[Iterable[str]] = None,
    recursive: bool = False,
    skip_git: bool = False,
    config: Optional[str] = None,
    output_format: str = OutputMode.TABLE.value,
    json_flag: bool = False
) -> Tuple[ScanRequest, OutputMode]:
    """Convert raw flag values into a request and an output mode.

    Args:
        lockfiles: ``--lockfile`` values
        sboms: ``--sbom`` values
        docker_images: ``--docker`` values
        directories: Positional directory arguments
        recursive: ``--recursive`` flag
        skip_git: ``--skip-git`` flag
        config: ``--config`` value
        output_format: ``--format`` value
        json_flag: Legacy ``--json`` flag

    Returns:
        Tuple of (scan request, output mode)

    Raises:
        typer.BadParameter: If ``output_format`` is not supported
    """
    mode = effective_mode(validate_format(output_format), json_flag)
    request = build_request(
        lockfiles=lockfiles,
        sboms=sboms,
        docker_images=docker_images,
        directories=directories,
        recursive=recursive,
        skip_git=skip_git,
        config=config,
    )
    return request, mode
