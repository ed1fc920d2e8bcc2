"""Configuration loading for skills-detector (.skills-detector.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

CONFIG_FILENAME = ".skills-detector.yml"
DEFAULT_OUTPUT_FILE = "skills.json"
DEFAULT_SEARCH_COMMAND = ("npx", "skills", "find")
DEFAULT_SEARCH_TIMEOUT = 30.0


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SearchConfig:
    """Registry search settings."""

    enabled: bool = True
    command: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_COMMAND))
    timeout: float = DEFAULT_SEARCH_TIMEOUT


@dataclass
class DetectorConfig:
    """Represents the settings defined in .skills-detector.yml."""

    root: Path
    search: SearchConfig = field(default_factory=SearchConfig)
    curated: Dict[str, List[str]] = field(default_factory=dict)
    exclude_terms: List[str] = field(default_factory=list)
    output: str = DEFAULT_OUTPUT_FILE


def load_config(config_path: Path) -> DetectorConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DetectorConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    search = SearchConfig()
    search_data = _as_dict(data.get("search"))
    enabled = search_data.get("enabled")
    if isinstance(enabled, bool):
        search.enabled = enabled
    command = _as_str_list(search_data.get("command"))
    if command:
        search.command = command
    if search_data.get("timeout") is not None:
        search.timeout = _positive_seconds(search_data["timeout"])

    # An explicit empty list is kept: it switches curation off for that term.
    curated: Dict[str, List[str]] = {
        str(term).lower(): _as_str_list(refs)
        for term, refs in _as_dict(data.get("curated")).items()
        if isinstance(refs, (str, list))
    }

    exclude_terms = [term.lower() for term in _as_str_list(data.get("exclude_terms"))]
    output = data.get("output")
    if not isinstance(output, str) or not output.strip():
        output = DEFAULT_OUTPUT_FILE

    return DetectorConfig(
        root=root,
        search=search,
        curated=curated,
        exclude_terms=exclude_terms,
        output=output,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value if isinstance(item, str)]
    return []


def _positive_seconds(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError("search.timeout must be a positive number of seconds")
    return float(value)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DetectorConfig",
    "SearchConfig",
    "load_config",
]
