"""Core data models shared across skills-detector components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SignalContext:
    """Read-only snapshot of a project directory handed to every rule."""

    root: Path
    manifest: Optional[Mapping[str, Any]] = None
    dependencies: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mappings so rule evaluators cannot mutate shared state.
        object.__setattr__(self, "dependencies", MappingProxyType(dict(self.dependencies)))
        if self.manifest is not None:
            object.__setattr__(self, "manifest", MappingProxyType(dict(self.manifest)))

    def has_dependency(self, name: str) -> bool:
        return name in self.dependencies


@dataclass(frozen=True)
class DetectionRule:
    """Detection rule with three optional clauses.

    ``required_files`` must all exist, any of ``marker_files`` may exist and
    any of ``dependencies`` may be present in the manifest.
    """

    name: str
    marker_files: Tuple[str, ...] = ()
    required_files: Tuple[str, ...] = ()
    dependencies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CharacteristicsReport:
    """Detected project characteristics, one ordered tuple per category."""

    frameworks: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    testing: Tuple[str, ...] = ()
    search_terms: Tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        *,
        frameworks: Tuple[str, ...] | List[str],
        languages: Tuple[str, ...] | List[str],
        tools: Tuple[str, ...] | List[str],
        testing: Tuple[str, ...] | List[str],
    ) -> "CharacteristicsReport":
        """Return a report whose search terms are the sorted union of all categories."""
        terms = sorted({*frameworks, *languages, *tools, *testing})
        return cls(
            frameworks=tuple(frameworks),
            languages=tuple(languages),
            tools=tuple(tools),
            testing=tuple(testing),
            search_terms=tuple(terms),
        )

    def is_empty(self) -> bool:
        return not self.search_terms

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frameworks": list(self.frameworks),
            "languages": list(self.languages),
            "tools": list(self.tools),
            "testing": list(self.testing),
            "searchTerms": list(self.search_terms),
        }


@dataclass(frozen=True)
class SkillReference:
    """A registry reference split into ``owner/repository`` and skill name."""

    source: str
    skill: str = ""

    @classmethod
    def parse(cls, ref: str) -> "SkillReference":
        source, sep, skill = ref.partition("@")
        if not sep:
            return cls(source=ref)
        return cls(source=source, skill=skill)

    def __str__(self) -> str:
        return f"{self.source}@{self.skill}" if self.skill else self.source


@dataclass
class SkillEntry:
    """All skills recommended from a single source repository."""

    source: str
    skills: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "skills": list(self.skills)}
