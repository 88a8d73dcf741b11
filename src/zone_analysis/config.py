"""Configuration loading for zone analysis runs."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS: tuple[str, ...] = ("*.txt.gz",)
# Large TLD zones that are not published under the *.txt.gz naming.
DEFAULT_EXTRA_ZONES: tuple[str, ...] = ("com.zone.gz", "org.zone.gz")
# Names accepted by Config.override.
SETTINGS = frozenset(
    {"directory", "parallel", "verbose", "progress", "patterns", "extra_zones", "stats_file"}
)


class ConfigError(ValueError):
    """Invalid configuration file or command-line value."""


@dataclass(slots=True)
class FastPathConfig:
    """Settings for the line-oriented extractor.

    Attributes:
        zones (list[str]): File name fragments selecting the fast path.
        types (list[str]): Lower-cased record types whose owners are kept.
        suffix (str): Appended to every owner written to the output.
        origin (str): Reported as the SOA of fast-path zones.
        chunk_lines (int): Lines read before the domain set is flushed.
    """

    zones: list[str] = field(default_factory=lambda: ["com.zone.gz"])
    types: list[str] = field(default_factory=lambda: ["a", "ns"])
    suffix: str = ".com"
    origin: str = "com."
    chunk_lines: int = 50_000_000

    def matches(self, filename: str) -> bool:
        return any(zone in filename for zone in self.zones)


def _str_list(data: dict[str, Any], key: str, default: list[str]) -> list[str]:
    raw = data.get(key, default)
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        raise ConfigError(f"'{key}' must be a list")
    return [str(item) for item in raw]


class Config:
    """Settings for one analysis run.

    Values come from defaults, then the optional YAML file, then command-line
    overrides.

    Args:
        path: Optional path to a YAML configuration file.

    Attributes:
        path: Path of the loaded YAML file, if any.
        directory: Directory holding the zone files.
        parallel: Number of zones processed concurrently.
        verbose: Log every parsed record.
        progress: Show a progress bar instead of per-zone log lines.
        patterns: Glob patterns selecting zone files in `directory`.
        extra_zones: File names always processed in addition to `patterns`.
        fast_path: Fast-path extractor settings.
        stats_file: Name of the statistics file written into `directory`.
    """

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        self.directory = ""
        self.parallel = 2
        self.verbose = False
        self.progress = False
        self.patterns: list[str] = list(DEFAULT_PATTERNS)
        self.extra_zones: list[str] = list(DEFAULT_EXTRA_ZONES)
        self.fast_path = FastPathConfig()
        self.stats_file = "stats"
        if path is not None:
            self.load(path)

    def load(self, path: str) -> None:
        """Load settings from a YAML file.

        Args:
            path: Path to YAML file.

        Raises:
            ConfigError: On invalid YAML or values of the wrong type.
            FileNotFoundError: If the file is missing.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parsing error: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError(f"top level of {path} must be a mapping")

        try:
            self.directory = str(data.get("directory", self.directory))
            self.parallel = int(data.get("parallel", self.parallel))
            self.verbose = bool(data.get("verbose", self.verbose))
            self.progress = bool(data.get("progress", self.progress))
            self.stats_file = str(data.get("stats_file", self.stats_file))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid value in {path}: {exc}") from exc

        self.patterns = _str_list(data, "patterns", self.patterns)
        self.extra_zones = _str_list(data, "extra_zones", self.extra_zones)

        fast = data.get("fast_path", {}) or {}
        if not isinstance(fast, dict):
            raise ConfigError("'fast_path' must be a mapping")
        current = self.fast_path
        try:
            self.fast_path = FastPathConfig(
                zones=_str_list(fast, "zones", current.zones),
                types=[t.lower() for t in _str_list(fast, "types", current.types)],
                suffix=str(fast.get("suffix", current.suffix)),
                origin=str(fast.get("origin", current.origin)),
                chunk_lines=int(fast.get("chunk_lines", current.chunk_lines)),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid fast_path value: {exc}") from exc

        self.path = path
        logger.info("configuration loaded from %s", path)

    def override(self, **values: Any) -> None:
        """Apply command-line values; None means "not given".

        Raises:
            ConfigError: For an unknown setting name.
        """
        for key, value in values.items():
            if value is None:
                continue
            if key not in SETTINGS:
                raise ConfigError(f"unknown setting {key!r}")
            setattr(self, key, value)

    def validate(self) -> None:
        """Check that the settings describe a runnable job.

        Raises:
            ConfigError: If no directory is set or `parallel` is not positive.
        """
        if not self.directory:
            raise ConfigError("must pass directory (e.g. /data/domains/2019/02/01/)")
        if not os.path.isdir(self.directory):
            raise ConfigError(f"directory {self.directory!r} does not exist")
        if self.parallel < 1:
            raise ConfigError("parallel must be positive")
        if self.fast_path.chunk_lines < 1:
            raise ConfigError("fast_path.chunk_lines must be positive")
