"""Testing framework detection catalog."""

from __future__ import annotations

from typing import List, Tuple

from .base import evaluate_catalog
from ..models import DetectionRule, SignalContext

TESTING_RULES: Tuple[DetectionRule, ...] = (
    # JavaScript / TypeScript
    DetectionRule(
        "vitest",
        marker_files=("vitest.config.ts", "vitest.config.js", "vitest.config.mjs"),
        dependencies=("vitest",),
    ),
    DetectionRule(
        "jest",
        marker_files=("jest.config.js", "jest.config.ts", "jest.config.json"),
        dependencies=("jest",),
    ),
    DetectionRule(
        "mocha",
        marker_files=(".mocharc.js", ".mocharc.json", ".mocharc.yaml"),
        dependencies=("mocha",),
    ),
    DetectionRule("ava", dependencies=("ava",)),
    DetectionRule("tap", dependencies=("tap",)),
    # End-to-end
    DetectionRule(
        "playwright",
        marker_files=("playwright.config.ts", "playwright.config.js"),
        dependencies=("@playwright/test", "playwright"),
    ),
    DetectionRule(
        "cypress",
        marker_files=("cypress.config.ts", "cypress.config.js", "cypress.json"),
        dependencies=("cypress",),
    ),
    DetectionRule("puppeteer", dependencies=("puppeteer",)),
    DetectionRule("selenium", dependencies=("selenium-webdriver",)),
    # Component testing
    DetectionRule(
        "testing-library",
        dependencies=(
            "@testing-library/react",
            "@testing-library/vue",
            "@testing-library/svelte",
            "@testing-library/dom",
        ),
    ),
    DetectionRule("enzyme", dependencies=("enzyme",)),
    # Python
    DetectionRule("pytest", marker_files=("pytest.ini", "pyproject.toml", "tests/", "test/")),
    DetectionRule("unittest"),
    # Ruby
    DetectionRule("rspec", marker_files=("spec/", ".rspec")),
    DetectionRule("minitest", marker_files=("test/",)),
    # Built into their toolchains; declared for completeness only.
    DetectionRule("go-test"),
    DetectionRule("cargo-test"),
)


def detect_testing(context: SignalContext) -> List[str]:
    """Detect testing frameworks in the project."""
    return evaluate_catalog(TESTING_RULES, context)


__all__ = ["TESTING_RULES", "detect_testing"]
