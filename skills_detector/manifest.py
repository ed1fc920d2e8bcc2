"""Manifest loading and signal context construction."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .logging import get_logger
from .models import SignalContext

MANIFEST_FILENAME = "package.json"
_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")

logger = get_logger("manifest")


def load_package_json(root: Path) -> Optional[Dict[str, Any]]:
    """Return the parsed package.json contents, or None when absent or unusable."""
    package_json = root / MANIFEST_FILENAME
    try:
        text = package_json.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Unable to read %s: %s", package_json, exc)
        return None

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        logger.debug("Ignoring malformed %s: %s", package_json, exc)
        return None
    if not isinstance(data, dict):
        logger.debug("Ignoring %s without an object at the root", package_json)
        return None
    return data


def merge_dependencies(manifest: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Flatten runtime and development dependencies into one name -> version map."""
    merged: Dict[str, str] = {}
    if not manifest:
        return merged
    for section in _DEPENDENCY_SECTIONS:
        deps = manifest.get(section)
        if not isinstance(deps, dict):
            continue
        for name, version in deps.items():
            merged[str(name)] = str(version) if version is not None else ""
    return merged


def build_context(root: Path | str) -> SignalContext:
    """Snapshot ``root`` into a SignalContext for a single detection run."""
    resolved = Path(root).expanduser().resolve()
    manifest = load_package_json(resolved)
    dependencies = merge_dependencies(manifest)
    logger.debug(
        "Built context for %s (manifest=%s, %d dependencies)",
        resolved,
        manifest is not None,
        len(dependencies),
    )
    return SignalContext(root=resolved, manifest=manifest, dependencies=dependencies)


def path_exists(root: Path, relative: str) -> bool:
    """Return True when ``relative`` exists under ``root``.

    A trailing slash restricts the match to directories. Never raises.
    """
    try:
        return os.path.exists(os.path.join(root, relative))
    except (OSError, ValueError):
        return False


__all__ = [
    "MANIFEST_FILENAME",
    "build_context",
    "load_package_json",
    "merge_dependencies",
    "path_exists",
]
