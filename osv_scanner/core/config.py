"""Loading of ``osv-scanner.toml`` ignore configuration."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

try:
    import tomllib
except ImportError:  # Python < 3.11
    import tomli as tomllib

from ..utils.logging import get_logger
from .errors import OtherFailure

CONFIG_FILE_NAME = "osv-scanner.toml"


@dataclass
class IgnoreEntry:
    """A vulnerability ID the user chose to ignore."""

    id: str
    ignore_until: Optional[datetime] = None
    reason: str = ""

    def is_active(self, now: Optional[datetime] = None) -> bool:
        """Check whether the entry still applies.

        Args:
            now: Reference time, defaults to the current UTC time

        Returns:
            True if there is no expiry or the expiry is in the future
        """
        if self.ignore_until is None:
            return True
        now = now or datetime.now(timezone.utc)
        return now < self.ignore_until


@dataclass
class Config:
    """Scanner configuration loaded from a TOML file."""

    ignored_vulns: List[IgnoreEntry] = field(default_factory=list)
    load_path: Optional[Path] = None

    def should_ignore(self, vuln_id: str) -> Tuple[bool, Optional[IgnoreEntry]]:
        """Check whether a vulnerability is ignored by this config.

        Args:
            vuln_id: Vulnerability identifier

        Returns:
            Tuple of (ignored, matching entry)
        """
        for entry in self.ignored_vulns:
            if entry.id == vuln_id:
                return entry.is_active(), entry
        return False, None


def _coerce_ignore_until(value: Any, config_path: Path) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise OtherFailure(f"invalid ignoreUntil value {value!r} in {config_path}")


def load_config(config_path: Path) -> Config:
    """Load a config file.

    Args:
        config_path: Path to the TOML file

    Returns:
        Parsed configuration

    Raises:
        OtherFailure: If the file cannot be read or is not valid TOML
    """
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise OtherFailure(f"failed to read config file {config_path}: {e}", cause=e) from e

    entries = []
    for raw in data.get("IgnoredVulns", []):
        if not isinstance(raw, dict) or not raw.get("id"):
            raise OtherFailure(f"IgnoredVulns entries must have an id in {config_path}")
        entries.append(IgnoreEntry(
            id=str(raw["id"]),
            ignore_until=_coerce_ignore_until(raw.get("ignoreUntil"), config_path),
            reason=str(raw.get("reason", "")),
        ))

    return Config(ignored_vulns=entries, load_path=config_path)


class ConfigManager:
    """Resolves which config applies to a given source path."""

    def __init__(self, override_path: Optional[str] = None) -> None:
        """Initialize the manager.

        Args:
            override_path: Config file applied to every source, if set
        """
        self.logger = get_logger("ConfigManager")
        self.default_config = Config()
        self.override_config: Optional[Config] = None
        self._configs: Dict[Path, Config] = {}

        if override_path:
            self.override_config = load_config(Path(override_path))
            self.logger.info(f"Loaded config override from {override_path}")

    def get(self, target_path: str) -> Config:
        """Get the config for a source.

        Args:
            target_path: Path of the source being scanned

        Returns:
            Override config, config found beside the target, or the default
        """
        if self.override_config is not None:
            return self.override_config

        config_path = self._config_path_for(Path(target_path))
        if config_path in self._configs:
            return self._configs[config_path]

        if config_path.is_file():
            config = load_config(config_path)
            self.logger.info(f"Loaded config from {config_path}")
        else:
            config = self.default_config

        self._configs[config_path] = config
        return config

    @staticmethod
    def _config_path_for(target: Path) -> Path:
        directory = target if target.is_dir() else target.parent
        return (directory / CONFIG_FILE_NAME).absolute()
