"""Relevance filtering for registry search candidates.

A registry search returns free-text identifiers ranked by popularity. A
candidate is kept only when the search term appears in it as a whole word
and it does not belong to a platform ecosystem the project does not use.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import AbstractSet, Iterable, Mapping, Optional, Tuple

# Substrings are matched anywhere in the lowercased candidate.
ECOSYSTEM_MARKERS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "react-native": ("react-native", "expo-"),
        "flutter": ("flutter",),
        "electron": ("electron",),
        "ios": ("swiftui", "uikit", "xcode"),
        "android": ("android", "jetpack-compose"),
        "unity": ("unity3d", "unity-engine", "unity-game"),
        "arduino": ("arduino", "esp32", "platformio"),
    }
)


def matches_term(candidate: str, term: str) -> bool:
    """Return True when ``term`` occurs in ``candidate`` as a whole word.

    Hyphenated compound terms also match as a plain substring, so
    ``testing-library`` matches ``react-testing-library``.
    """
    candidate = candidate.lower()
    term = term.lower()
    if not term:
        return False
    if _word_pattern(term).search(candidate):
        return True
    return "-" in term.strip("-") and term in candidate


def vetoing_ecosystem(
    candidate: str,
    detected_frameworks: AbstractSet[str],
    markers: Mapping[str, Tuple[str, ...]] = ECOSYSTEM_MARKERS,
) -> Optional[str]:
    """Return the first foreign ecosystem ``candidate`` belongs to, if any."""
    candidate = candidate.lower()
    for ecosystem, substrings in markers.items():
        if ecosystem in detected_frameworks:
            continue
        if any(marker in candidate for marker in substrings):
            return ecosystem
    return None


def is_relevant(
    candidate: str,
    term: str,
    detected_frameworks: AbstractSet[str],
    markers: Mapping[str, Tuple[str, ...]] = ECOSYSTEM_MARKERS,
) -> bool:
    """Decide whether ``candidate`` is a genuine match for ``term``."""
    if not matches_term(candidate, term):
        return False
    return vetoing_ecosystem(candidate, detected_frameworks, markers) is None


def first_relevant(
    candidates: Iterable[str],
    term: str,
    detected_frameworks: AbstractSet[str],
    markers: Mapping[str, Tuple[str, ...]] = ECOSYSTEM_MARKERS,
) -> Optional[str]:
    """Return the highest-ranked relevant candidate for ``term``."""
    for candidate in candidates:
        if is_relevant(candidate, term, detected_frameworks, markers):
            return candidate
    return None


def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![a-z]){re.escape(term)}(?![a-z])")


__all__ = [
    "ECOSYSTEM_MARKERS",
    "first_relevant",
    "is_relevant",
    "matches_term",
    "vetoing_ecosystem",
]
