"""Detection catalogs and the engine that evaluates them."""

from __future__ import annotations

from pathlib import Path

from .base import evaluate_catalog, is_glob, matches_rule
from .frameworks import FRAMEWORK_RULES, detect_frameworks
from .languages import LANGUAGE_RULES, detect_languages
from .supersession import SUPERSESSION_RULES, SupersessionRule, filter_superseded
from .testing import TESTING_RULES, detect_testing
from .tools import TOOL_RULES, detect_tools
from ..logging import get_logger
from ..manifest import build_context
from ..models import CharacteristicsReport, SignalContext

logger = get_logger("detectors")


def detect(context: SignalContext) -> CharacteristicsReport:
    """Run every catalog against ``context`` and combine the results."""
    report = CharacteristicsReport.build(
        frameworks=detect_frameworks(context),
        languages=detect_languages(context),
        tools=detect_tools(context),
        testing=detect_testing(context),
    )
    logger.debug(
        "Detected %d frameworks, %d languages, %d tools, %d testing frameworks in %s",
        len(report.frameworks),
        len(report.languages),
        len(report.tools),
        len(report.testing),
        context.root,
    )
    return report


def detect_path(root: Path | str) -> CharacteristicsReport:
    """Build a context for ``root`` and detect its characteristics."""
    return detect(build_context(root))


__all__ = [
    "FRAMEWORK_RULES",
    "LANGUAGE_RULES",
    "SUPERSESSION_RULES",
    "TESTING_RULES",
    "TOOL_RULES",
    "SupersessionRule",
    "detect",
    "detect_frameworks",
    "detect_languages",
    "detect_path",
    "detect_testing",
    "detect_tools",
    "evaluate_catalog",
    "filter_superseded",
    "is_glob",
    "matches_rule",
]
