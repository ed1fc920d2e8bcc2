"""Skills report assembly and persistence."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .models import CharacteristicsReport, SkillEntry

SCHEMA_URL = "https://unpkg.com/skillman/skills_schema.json"
_REPORT_MODE = 0o644


class ReportWriteError(RuntimeError):
    """Raised when the skills report cannot be written to disk."""


def utc_timestamp(now: Optional[datetime] = None) -> str:
    moment = now or datetime.now(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_skills_report(
    detected: CharacteristicsReport,
    skills: Sequence[SkillEntry],
    *,
    timestamp: Optional[str] = None,
) -> Dict[str, Any]:
    """Return the JSON-ready skills report document."""
    detected_payload = detected.to_dict()
    detected_payload["timestamp"] = timestamp or utc_timestamp()
    return {
        "$schema": SCHEMA_URL,
        "detected": detected_payload,
        "skills": [entry.to_dict() for entry in skills],
    }


def render_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, indent=2)


def resolve_output_path(root: Path, name: str) -> Path:
    """Resolve ``name`` against ``root``, refusing paths that leave it."""
    target = (root / name).resolve()
    if not target.is_relative_to(root.resolve()):
        raise ReportWriteError(f"Output path {name} is outside {root}")
    return target


def write_report(path: Path, payload: Dict[str, Any]) -> Path:
    """Write ``payload`` to ``path`` via a unique temporary sibling and an atomic rename."""
    content = render_json(payload) + "\n"
    tmp: Optional[Path] = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        tmp = Path(tmp_name)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(tmp, _REPORT_MODE)
        os.replace(tmp, path)
    except OSError as exc:
        if tmp is not None:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
        raise ReportWriteError(f"Unable to write {path}: {exc}") from exc
    return path


__all__ = [
    "ReportWriteError",
    "SCHEMA_URL",
    "build_skills_report",
    "render_json",
    "resolve_output_path",
    "utc_timestamp",
    "write_report",
]
