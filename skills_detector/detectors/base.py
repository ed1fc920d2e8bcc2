"""Rule evaluation shared by every detection catalog."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..manifest import path_exists
from ..models import DetectionRule, SignalContext

_GLOB_CHARS = frozenset("*?[")


def is_glob(path: str) -> bool:
    """Return True for wildcard marker paths, which are never expanded."""
    return any(char in _GLOB_CHARS for char in path)


def matches_rule(rule: DetectionRule, context: SignalContext) -> bool:
    """Evaluate ``rule`` clauses in priority order: required, marker, dependency."""
    if rule.required_files and _all_exist(rule.required_files, context):
        return True
    if rule.marker_files and _any_exists(rule.marker_files, context):
        return True
    if rule.dependencies and any(context.has_dependency(dep) for dep in rule.dependencies):
        return True
    return False


def evaluate_catalog(
    catalog: Iterable[DetectionRule], context: SignalContext
) -> List[str]:
    """Return the names of matching rules in catalog order."""
    detected: List[str] = []
    for rule in catalog:
        if rule.name in detected:
            continue
        if matches_rule(rule, context):
            detected.append(rule.name)
    return detected


def _all_exist(paths: Sequence[str], context: SignalContext) -> bool:
    for path in paths:
        if is_glob(path) or not path_exists(context.root, path):
            return False
    return True


def _any_exists(paths: Sequence[str], context: SignalContext) -> bool:
    for path in paths:
        if is_glob(path):
            continue
        if path_exists(context.root, path):
            return True
    return False


__all__ = ["evaluate_catalog", "is_glob", "matches_rule"]
