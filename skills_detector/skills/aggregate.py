"""Grouping of skill references into per-source entries."""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

from ..models import SkillEntry, SkillReference


def unique_refs(*groups: Iterable[str]) -> List[str]:
    """Concatenate reference groups, keeping the first occurrence of each string."""
    seen: Set[str] = set()
    ordered: List[str] = []
    for group in groups:
        for ref in group:
            if ref not in seen:
                seen.add(ref)
                ordered.append(ref)
    return ordered


def group_by_source(refs: Iterable[str]) -> List[SkillEntry]:
    """Group references by source with sorted skill names and sorted sources."""
    sources: Dict[str, Set[str]] = {}
    for ref in refs:
        parsed = SkillReference.parse(ref)
        skills = sources.setdefault(parsed.source, set())
        if parsed.skill:
            skills.add(parsed.skill)
    return [
        SkillEntry(source=source, skills=sorted(skills))
        for source, skills in sorted(sources.items())
    ]


def aggregate(curated_refs: Iterable[str], searched_refs: Iterable[str]) -> List[SkillEntry]:
    """Merge curated and searched references into deduplicated skill entries."""
    return group_by_source(unique_refs(curated_refs, searched_refs))


__all__ = ["aggregate", "group_by_source", "unique_refs"]
