"""Tests for ignore configuration loading."""

from datetime import datetime, timezone

import pytest

from osv_scanner.core.config import CONFIG_FILE_NAME, ConfigManager, IgnoreEntry, load_config
from osv_scanner.core.errors import OtherFailure


@pytest.fixture
def config_file(tmp_path):
    """Create a config with active, expired and future entries."""
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(
        '[[IgnoredVulns]]\n'
        'id = "GHSA-active"\n'
        'reason = "not reachable"\n'
        '\n'
        '[[IgnoredVulns]]\n'
        'id = "GHSA-expired"\n'
        'ignoreUntil = 2000-01-01\n'
        '\n'
        '[[IgnoredVulns]]\n'
        'id = "GHSA-future"\n'
        'ignoreUntil = 2999-01-01T00:00:00Z\n'
    )
    return path


class TestLoadConfig:
    """Test parsing of osv-scanner.toml."""

    def test_parses_entries(self, config_file):
        config = load_config(config_file)

        assert [entry.id for entry in config.ignored_vulns] == ["GHSA-active", "GHSA-expired", "GHSA-future"]
        assert config.ignored_vulns[0].reason == "not reachable"
        assert config.load_path == config_file

    def test_should_ignore(self, config_file):
        """Test expiry handling of ignore entries."""
        config = load_config(config_file)

        assert config.should_ignore("GHSA-active")[0] is True
        assert config.should_ignore("GHSA-expired")[0] is False
        assert config.should_ignore("GHSA-future")[0] is True
        assert config.should_ignore("GHSA-unknown") == (False, None)

    def test_empty_file(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("")
        assert load_config(path).ignored_vulns == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OtherFailure):
            load_config(tmp_path / "missing.toml")

    def test_entry_without_id_raises(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text('[[IgnoredVulns]]\nreason = "no id"\n')
        with pytest.raises(OtherFailure):
            load_config(path)

    def test_invalid_ignore_until_raises(self, tmp_path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text('[[IgnoredVulns]]\nid = "GHSA-1"\nignoreUntil = "soon"\n')
        with pytest.raises(OtherFailure):
            load_config(path)


class TestIgnoreEntry:
    """Test ignore entry expiry."""

    def test_without_expiry_is_active(self):
        assert IgnoreEntry(id="GHSA-1").is_active()

    def test_expiry_compared_to_reference_time(self):
        entry = IgnoreEntry(id="GHSA-1", ignore_until=datetime(2024, 6, 1, tzinfo=timezone.utc))

        assert entry.is_active(now=datetime(2024, 5, 1, tzinfo=timezone.utc))
        assert not entry.is_active(now=datetime(2024, 7, 1, tzinfo=timezone.utc))


class TestConfigManager:
    """Test config resolution per source."""

    def test_override_applies_everywhere(self, config_file, tmp_path):
        manager = ConfigManager(str(config_file))

        assert manager.get(str(tmp_path / "a" / "yarn.lock")) is manager.override_config
        assert manager.get("alpine:3.18") is manager.override_config

    def test_config_found_beside_target(self, config_file, tmp_path):
        """Test lookup next to files and inside directories."""
        lockfile = tmp_path / "Cargo.lock"
        lockfile.write_text("")
        manager = ConfigManager()

        from_file = manager.get(str(lockfile))
        from_dir = manager.get(str(tmp_path))

        assert from_file.load_path == config_file.absolute()
        assert from_file is from_dir

    def test_default_when_absent(self, tmp_path):
        manager = ConfigManager()
        config = manager.get(str(tmp_path / "yarn.lock"))

        assert config is manager.default_config
        assert config.ignored_vulns == []
