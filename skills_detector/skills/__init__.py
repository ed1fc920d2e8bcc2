"""Skill curation, registry search, relevance filtering and aggregation."""

from .aggregate import aggregate, group_by_source, unique_refs
from .curated import CURATED_SKILLS, CuratedTable
from .relevance import ECOSYSTEM_MARKERS, first_relevant, is_relevant, matches_term
from .search import SearchError, SkillSearcher, parse_skill_refs, strip_ansi

__all__ = [
    "CURATED_SKILLS",
    "CuratedTable",
    "ECOSYSTEM_MARKERS",
    "SearchError",
    "SkillSearcher",
    "aggregate",
    "first_relevant",
    "group_by_source",
    "is_relevant",
    "matches_term",
    "parse_skill_refs",
    "strip_ansi",
    "unique_refs",
]
