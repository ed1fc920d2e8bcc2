"""Hand-maintained skill references that bypass registry search."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

CURATED_SKILLS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "nextjs": (
            "vercel-labs/agent-skills@vercel-react-best-practices",
            "vercel-labs/next-skills@next-best-practices",
        ),
        "react": ("vercel-labs/agent-skills@vercel-react-best-practices",),
        "vue": ("hyf0/vue-skills@vue-best-practices",),
    }
)


class CuratedTable:
    """Lookup of curated references keyed by canonical term."""

    def __init__(
        self,
        entries: Mapping[str, Sequence[str]] = CURATED_SKILLS,
        overrides: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        merged: Dict[str, Tuple[str, ...]] = {
            term: tuple(refs) for term, refs in entries.items()
        }
        for term, refs in (overrides or {}).items():
            merged[term] = tuple(refs)
        self._entries = MappingProxyType(merged)

    def lookup(self, term: str) -> Optional[Tuple[str, ...]]:
        """Return the curated references for ``term`` or None."""
        refs = self._entries.get(term)
        return refs or None

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.lookup(term) is not None


__all__ = ["CURATED_SKILLS", "CuratedTable"]
