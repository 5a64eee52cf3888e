"""Tests for argument translation."""

import pytest
import typer

from osv_scanner.cli.arguments import build_request, effective_mode, translate, validate_format
from osv_scanner.core.models import OutputMode, ScanRequest


class TestValidateFormat:
    """Test --format validation."""

    @pytest.mark.parametrize("value", ["table", "json"])
    def test_accepts_supported_formats(self, value):
        assert validate_format(value) == value

    @pytest.mark.parametrize("value", ["xml", "Json", "", " table", "sarif"])
    def test_rejects_other_values(self, value):
        """Test that unsupported formats raise with the value in the message."""
        with pytest.raises(typer.BadParameter) as exc_info:
            validate_format(value)

        assert f'"{value}"' in str(exc_info.value)


class TestEffectiveMode:
    """Test output mode selection."""

    @pytest.mark.parametrize("output_format", ["table", "json"])
    def test_json_flag_always_wins(self, output_format):
        assert effective_mode(output_format, True) == OutputMode.JSON

    def test_format_used_without_json_flag(self):
        assert effective_mode("table", False) == OutputMode.TABLE
        assert effective_mode("json", False) == OutputMode.JSON


class TestTranslate:
    """Test request building."""

    def test_defaults(self):
        """Test that no values produce an empty table-mode request."""
        request, mode = translate()

        assert request == ScanRequest()
        assert mode == OutputMode.TABLE
        assert not request.has_sources()

    def test_values_are_not_normalized(self):
        """Test that paths are kept verbatim, including duplicates."""
        request = build_request(
            lockfiles=["./a/../Cargo.lock", "./a/../Cargo.lock"],
            directories=["src/"],
        )

        assert request.lockfile_paths == ("./a/../Cargo.lock", "./a/../Cargo.lock")
        assert request.directory_paths == ("src/",)
        assert request.has_sources()

    def test_empty_config_is_none(self):
        request, _ = translate(config="")
        assert request.config_override is None

    def test_invalid_format_raises_before_request(self):
        with pytest.raises(typer.BadParameter):
            translate(lockfiles=["yarn.lock"], output_format="xml", json_flag=True)

    def test_request_is_immutable(self):
        request, _ = translate(lockfiles=["yarn.lock"])
        with pytest.raises(AttributeError):
            request.recursive = True
