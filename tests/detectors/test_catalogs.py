"""Scenario tests for the built-in detection catalogs."""

from __future__ import annotations

from skills_detector.detectors import (
    FRAMEWORK_RULES,
    LANGUAGE_RULES,
    TESTING_RULES,
    TOOL_RULES,
    detect,
    detect_frameworks,
    detect_languages,
    detect_testing,
    detect_tools,
)
from tests._fixtures.repo_builder import RepoBuilder


def test_canonical_names_are_unique_per_catalog() -> None:
    for catalog in (FRAMEWORK_RULES, LANGUAGE_RULES, TOOL_RULES, TESTING_RULES):
        names = [rule.name for rule in catalog]
        assert len(names) == len(set(names))


def test_next_config_alone_detects_nextjs_before_react(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("next.config.js")
    repo_builder.package_json(["react"])

    assert detect_frameworks(repo_builder.context()) == ["nextjs", "react"]


def test_turbopack_supersedes_webpack(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("webpack.config.js")
    repo_builder.package_json(["webpack"], ["turbopack"])

    tools = detect_tools(repo_builder.context())

    assert "turbopack" in tools
    assert "webpack" not in tools


def test_biome_supersedes_eslint_and_prettier(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(".eslintrc.json", ".prettierrc", "biome.json")
    repo_builder.package_json([], ["eslint", "prettier"])

    tools = detect_tools(repo_builder.context())

    assert tools == ["biome"]


def test_vite_config_alone_does_not_detect_vite(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("vite.config.ts")

    assert "vite" not in detect_frameworks(repo_builder.context())


def test_languages_from_marker_files(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("tsconfig.json", "package.json", "go.mod", "Cargo.toml", "build.gradle.kts")

    assert detect_languages(repo_builder.context()) == [
        "typescript",
        "javascript",
        "go",
        "rust",
        "kotlin",
    ]


def test_typescript_detected_from_dependency(repo_builder: RepoBuilder) -> None:
    repo_builder.package_json([], ["typescript"])

    assert detect_languages(repo_builder.context()) == ["typescript", "javascript"]


def test_python_project_detection(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("manage.py", "requirements.txt", "pytest.ini", "tests/")

    report = detect(repo_builder.context())

    assert report.frameworks == ("django",)
    assert report.languages == ("python",)
    assert report.testing == ("pytest",)


def test_test_directory_detects_pytest_and_minitest(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("test/")

    assert detect_testing(repo_builder.context()) == ["pytest", "minitest"]


def test_testing_library_variants(repo_builder: RepoBuilder) -> None:
    repo_builder.package_json([], ["@testing-library/vue", "vitest", "@playwright/test"])

    assert detect_testing(repo_builder.context()) == ["vitest", "playwright", "testing-library"]


def test_manifest_less_project_uses_markers_only(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("Dockerfile", "main.tf", "Pulumi.yaml")

    assert detect_tools(repo_builder.context()) == ["docker", "terraform", "pulumi"]


def test_malformed_manifest_falls_back_to_markers(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"package.json": "{not json", "turbo.json": "{}"})

    report = detect(repo_builder.context())

    assert report.tools == ("turborepo",)
    assert report.languages == ("javascript",)
