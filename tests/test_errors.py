"""Tests for the termination error taxonomy."""

import pytest

from osv_scanner.core.errors import (
    ErrorKind,
    NoSourcesFoundError,
    OtherFailure,
    TerminationError,
    ValidationError,
    VulnerabilitiesFoundError,
)


@pytest.mark.parametrize("error, kind", [
    (ValidationError("bad flag"), ErrorKind.VALIDATION),
    (VulnerabilitiesFoundError(), ErrorKind.VULNERABILITIES_FOUND),
    (NoSourcesFoundError(), ErrorKind.NO_SOURCES),
    (OtherFailure("boom"), ErrorKind.OTHER),
])
def test_kinds(error, kind):
    assert isinstance(error, TerminationError)
    assert error.kind == kind


def test_other_failure_keeps_cause():
    cause = IOError("permission denied")
    error = OtherFailure("failed to read yarn.lock: permission denied", cause=cause)

    assert error.cause is cause
    assert error.__cause__ is cause
    assert str(error) == "failed to read yarn.lock: permission denied"


def test_distinct_instances_share_kind():
    """Test that matching does not depend on instance identity."""
    assert NoSourcesFoundError().kind == NoSourcesFoundError("other message").kind
