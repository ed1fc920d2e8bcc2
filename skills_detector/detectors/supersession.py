"""Pruning of tools made redundant by a more specific replacement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple


@dataclass(frozen=True)
class SupersessionRule:
    """When ``superseding`` is detected, every name in ``superseded`` is dropped."""

    superseding: str
    superseded: Tuple[str, ...]


SUPERSESSION_RULES: Tuple[SupersessionRule, ...] = (
    SupersessionRule("turbopack", ("webpack",)),
    SupersessionRule("biome", ("eslint", "prettier")),
)


def filter_superseded(
    tools: Sequence[str],
    rules: Sequence[SupersessionRule] = SUPERSESSION_RULES,
) -> List[str]:
    """Return ``tools`` without entries superseded by another detected tool."""
    present = set(tools)
    dropped: Set[str] = set()
    for rule in rules:
        if rule.superseding in present:
            dropped.update(rule.superseded)
    return [tool for tool in tools if tool not in dropped]


__all__ = ["SUPERSESSION_RULES", "SupersessionRule", "filter_superseded"]
