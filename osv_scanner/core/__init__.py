"""Request model, error taxonomy and scan orchestration for osv-scanner."""

from .errors import (
    ErrorKind,
    NoSourcesFoundError,
    OtherFailure,
    TerminationError,
    ValidationError,
    VulnerabilitiesFoundError,
)
from .models import (
    OutputMode,
    Package,
    PackageResult,
    PackageSource,
    ScanRequest,
    ScanResult,
    SourceKind,
    SourceResult,
    Vulnerability,
)

__all__ = [
    "ErrorKind",
    "NoSourcesFoundError",
    "OtherFailure",
    "TerminationError",
    "ValidationError",
    "VulnerabilitiesFoundError",
    "OutputMode",
    "Package",
    "PackageResult",
    "PackageSource",
    "ScanRequest",
    "ScanResult",
    "SourceKind",
    "SourceResult",
    "Vulnerability",
]
