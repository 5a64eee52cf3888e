"""Termination errors raised by the scanner and mapped to exit statuses."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of conditions that terminate a scan invocation."""

    VALIDATION = "validation"
    VULNERABILITIES_FOUND = "vulnerabilities_found"
    NO_SOURCES = "no_sources"
    OTHER = "other"


class TerminationError(Exception):
    """Base class for every error that ends an invocation.

    Callers match on ``kind`` rather than on the concrete class so that the
    set of outcomes stays exhaustive.
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description
            cause: Underlying exception, if any
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class ValidationError(TerminationError):
    """A flag or argument value was rejected before scanning."""

    kind = ErrorKind.VALIDATION


class VulnerabilitiesFoundError(TerminationError):
    """The scan completed and reported at least one vulnerability."""

    kind = ErrorKind.VULNERABILITIES_FOUND

    def __init__(self, message: str = "vulnerabilities found") -> None:
        super().__init__(message)


class NoSourcesFoundError(TerminationError):
    """Nothing scannable could be resolved from the request."""

    kind = ErrorKind.NO_SOURCES

    def __init__(self, message: str = "no package sources found") -> None:
        super().__init__(message)


class OtherFailure(TerminationError):
    """Any other failure, wrapping its cause."""

    kind = ErrorKind.OTHER
