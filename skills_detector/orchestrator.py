"""Pipeline orchestration for detection and skill recommendation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .config import ConfigError, DetectorConfig, load_config
from .detectors import detect
from .logging import get_logger
from .manifest import build_context
from .models import CharacteristicsReport, SkillEntry
from .report import build_skills_report, resolve_output_path, write_report
from .skills import CuratedTable, SkillSearcher, aggregate, first_relevant


@dataclass(frozen=True)
class TermOutcome:
    """What a single search term contributed to the recommendation."""

    term: str
    refs: Tuple[str, ...] = ()
    curated: bool = False


@dataclass
class RecommendOutcome:
    """Result of a full detection and recommendation run."""

    detected: CharacteristicsReport
    terms: List[TermOutcome] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    report: Dict[str, object] = field(default_factory=dict)
    output_path: Optional[Path] = None

    @property
    def refs(self) -> List[str]:
        seen: List[str] = []
        for outcome in self.terms:
            for ref in outcome.refs:
                if ref not in seen:
                    seen.append(ref)
        return seen


ProgressCallback = Callable[[TermOutcome], None]


class Orchestrator:
    """Coordinates detection, curation, search and report writing."""

    def __init__(
        self,
        searcher_factory: Callable[[DetectorConfig], SkillSearcher] | None = None,
    ) -> None:
        self._searcher_factory = searcher_factory or _default_searcher
        self.logger = get_logger("orchestrator")

    def run_detect(self, path: str | Path) -> CharacteristicsReport:
        """Detect project characteristics for ``path``."""
        repo_path = self._resolve_root(path)
        self.logger.info("Detecting characteristics of %s", repo_path)
        return detect(build_context(repo_path))

    def run_recommend(
        self,
        path: str | Path,
        *,
        skip_search: bool = False,
        write: bool = True,
        output: str | None = None,
        detected: CharacteristicsReport | None = None,
        on_term: ProgressCallback | None = None,
    ) -> RecommendOutcome:
        """Detect, gather skill references and optionally write the report.

        A previously computed ``detected`` report is reused instead of
        rescanning the project.
        """
        repo_path = self._resolve_root(path)
        config = self._load_config(repo_path)
        if detected is None:
            detected = self.run_detect(repo_path)

        terms: List[TermOutcome] = []
        if not detected.is_empty():
            terms = self._collect_refs(
                detected,
                config,
                search=config.search.enabled and not skip_search,
                on_term=on_term,
            )

        curated_refs = [ref for outcome in terms if outcome.curated for ref in outcome.refs]
        searched_refs = [ref for outcome in terms if not outcome.curated for ref in outcome.refs]
        skills = aggregate(curated_refs, searched_refs)
        report = build_skills_report(detected, skills)

        outcome = RecommendOutcome(
            detected=detected,
            terms=terms,
            skills=skills,
            report=report,
        )
        if write:
            target = resolve_output_path(repo_path, output or config.output)
            outcome.output_path = write_report(target, report)
            self.logger.info("Wrote %s", target)
        return outcome

    # ------------------------------------------------------------------
    # Internals

    def _collect_refs(
        self,
        detected: CharacteristicsReport,
        config: DetectorConfig,
        *,
        search: bool,
        on_term: ProgressCallback | None,
    ) -> List[TermOutcome]:
        curated_table = CuratedTable(overrides=config.curated)
        excluded = set(config.exclude_terms)
        terms = [term for term in detected.search_terms if term not in excluded]
        searcher = self._searcher_factory(config) if search else None
        frameworks = frozenset(detected.frameworks)

        outcomes: List[TermOutcome] = []
        for term in terms:
            curated = curated_table.lookup(term)
            if curated is not None:
                outcome = TermOutcome(term=term, refs=curated, curated=True)
            elif searcher is None:
                continue
            else:
                candidates = searcher.search(term)
                best = first_relevant(candidates, term, frameworks)
                if best is None and candidates:
                    self.logger.debug(
                        "Discarded %d irrelevant candidates for '%s'", len(candidates), term
                    )
                outcome = TermOutcome(term=term, refs=(best,) if best else ())
            outcomes.append(outcome)
            if on_term is not None:
                on_term(outcome)
        return outcomes

    def _load_config(self, repo_path: Path) -> DetectorConfig:
        try:
            return load_config(repo_path)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return DetectorConfig(root=repo_path)

    @staticmethod
    def _resolve_root(path: str | Path) -> Path:
        repo_path = Path(path).expanduser().resolve()
        if not repo_path.is_dir():
            raise FileNotFoundError(f"{repo_path} is not a directory")
        return repo_path


def _default_searcher(config: DetectorConfig) -> SkillSearcher:
    return SkillSearcher(config.search.command, timeout=config.search.timeout)


__all__ = ["Orchestrator", "ProgressCallback", "RecommendOutcome", "TermOutcome"]
