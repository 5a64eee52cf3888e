"""osv-scanner - scans lockfiles, SBOMs, docker images and directories for vulnerable dependencies."""

__version__ = "0.1.0"
__commit__ = "n/a"
__build_date__ = "n/a"

from .core.errors import (
    ErrorKind,
    NoSourcesFoundError,
    OtherFailure,
    TerminationError,
    ValidationError,
    VulnerabilitiesFoundError,
)
from .core.models import OutputMode, ScanRequest, ScanResult

__all__ = [
    "ErrorKind",
    "NoSourcesFoundError",
    "OtherFailure",
    "TerminationError",
    "ValidationError",
    "VulnerabilitiesFoundError",
    "OutputMode",
    "ScanRequest",
    "ScanResult",
]
