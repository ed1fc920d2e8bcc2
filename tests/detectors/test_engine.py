"""Tests for rule evaluation and the detection entrypoint."""

from __future__ import annotations

from pathlib import Path

from skills_detector.detectors import detect, detect_path, evaluate_catalog, is_glob, matches_rule
from skills_detector.models import DetectionRule, SignalContext
from tests._fixtures.repo_builder import RepoBuilder


def _context(root: Path, **deps: str) -> SignalContext:
    return SignalContext(root=root, dependencies=deps)


def test_required_files_need_every_path(repo_builder: RepoBuilder) -> None:
    rule = DetectionRule("rails", required_files=("Gemfile", "config/application.rb"))
    repo_builder.touch("Gemfile")

    assert matches_rule(rule, repo_builder.context()) is False

    repo_builder.touch("config/application.rb")
    assert matches_rule(rule, repo_builder.context()) is True


def test_marker_files_match_any_path(repo_builder: RepoBuilder) -> None:
    rule = DetectionRule("docker", marker_files=("Dockerfile", "docker-compose.yml"))
    repo_builder.touch("docker-compose.yml")

    assert matches_rule(rule, repo_builder.context()) is True


def test_dependency_clause_matches_any_key(tmp_path: Path) -> None:
    rule = DetectionRule("redux", dependencies=("redux", "@reduxjs/toolkit"))

    assert matches_rule(rule, _context(tmp_path, **{"@reduxjs/toolkit": "2.0.0"})) is True
    assert matches_rule(rule, _context(tmp_path, Redux="4.0.0")) is False


def test_rule_without_clauses_never_matches(tmp_path: Path) -> None:
    assert matches_rule(DetectionRule("gin"), _context(tmp_path, gin="1.0")) is False


def test_failed_required_clause_falls_through_to_markers(repo_builder: RepoBuilder) -> None:
    rule = DetectionRule(
        "rails",
        marker_files=("config/application.rb",),
        required_files=("Gemfile", "config/application.rb"),
    )
    repo_builder.touch("config/application.rb")

    assert matches_rule(rule, repo_builder.context()) is True


def test_glob_markers_are_never_expanded(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("App.csproj")
    rule = DetectionRule("csharp", marker_files=("*.csproj", "*.sln"))

    assert is_glob("*.csproj")
    assert not is_glob("next.config.js")
    assert matches_rule(rule, repo_builder.context()) is False


def test_glob_rule_still_matches_through_dependencies(tmp_path: Path) -> None:
    rule = DetectionRule("arduino", marker_files=("*.ino",), dependencies=("johnny-five",))

    assert matches_rule(rule, _context(tmp_path, **{"johnny-five": "2.0.0"})) is True


def test_trailing_slash_markers_require_directories(repo_builder: RepoBuilder) -> None:
    rule = DetectionRule("kubernetes", marker_files=("k8s/",))
    repo_builder.touch("k8s")

    assert matches_rule(rule, repo_builder.context()) is False

    (repo_builder.path() / "k8s").unlink()
    repo_builder.touch("k8s/")
    assert matches_rule(rule, repo_builder.context()) is True


def test_catalog_results_follow_declaration_order(tmp_path: Path) -> None:
    catalog = (
        DetectionRule("zeta", dependencies=("z",)),
        DetectionRule("alpha", dependencies=("a",)),
        DetectionRule("zeta", dependencies=("a",)),
    )

    assert evaluate_catalog(catalog, _context(tmp_path, a="1", z="1")) == ["zeta", "alpha"]


def test_detection_is_deterministic(repo_builder: RepoBuilder) -> None:
    repo_builder.package_json(["next", "react", "tailwindcss"], ["vitest", "typescript"])
    repo_builder.touch("Dockerfile", "tests/")
    context = repo_builder.context()

    assert detect(context) == detect(context)


def test_search_terms_are_sorted_union_of_categories(repo_builder: RepoBuilder) -> None:
    repo_builder.package_json(["react", "prisma", "express"], ["jest", "typescript"])
    repo_builder.touch("pyproject.toml")

    report = detect(repo_builder.context())
    union = {*report.frameworks, *report.languages, *report.tools, *report.testing}

    assert list(report.search_terms) == sorted(union)
    assert len(report.search_terms) == len(set(report.search_terms))


def test_empty_project_detects_nothing(repo_builder: RepoBuilder) -> None:
    report = detect_path(repo_builder.path())

    assert report.is_empty()
    assert report.to_dict() == {
        "frameworks": [],
        "languages": [],
        "tools": [],
        "testing": [],
        "searchTerms": [],
    }
