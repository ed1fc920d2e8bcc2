"""Programming language detection catalog."""

from __future__ import annotations

from typing import List, Tuple

from .base import evaluate_catalog
from ..models import DetectionRule, SignalContext

LANGUAGE_RULES: Tuple[DetectionRule, ...] = (
    DetectionRule(
        "typescript",
        marker_files=("tsconfig.json", "tsconfig.base.json"),
        dependencies=("typescript",),
    ),
    DetectionRule("javascript", marker_files=("package.json", "jsconfig.json")),
    DetectionRule(
        "python",
        marker_files=("requirements.txt", "pyproject.toml", "setup.py", "Pipfile", "poetry.lock"),
    ),
    DetectionRule("ruby", marker_files=("Gemfile", "Gemfile.lock", ".ruby-version")),
    DetectionRule("go", marker_files=("go.mod", "go.sum")),
    DetectionRule("rust", marker_files=("Cargo.toml", "Cargo.lock")),
    DetectionRule("java", marker_files=("pom.xml", "build.gradle")),
    DetectionRule("kotlin", marker_files=("build.gradle.kts",)),
    DetectionRule("swift", marker_files=("Package.swift", "*.xcodeproj", "*.xcworkspace")),
    DetectionRule("php", marker_files=("composer.json", "composer.lock")),
    DetectionRule("csharp", marker_files=("*.csproj", "*.sln")),
    DetectionRule("elixir", marker_files=("mix.exs", "mix.lock")),
    DetectionRule("scala", marker_files=("build.sbt",)),
    DetectionRule("clojure", marker_files=("project.clj", "deps.edn")),
    DetectionRule("haskell", marker_files=("stack.yaml", "cabal.project")),
    DetectionRule("zig", marker_files=("build.zig",)),
)


def detect_languages(context: SignalContext) -> List[str]:
    """Detect programming languages in the project."""
    return evaluate_catalog(LANGUAGE_RULES, context)


__all__ = ["LANGUAGE_RULES", "detect_languages"]
