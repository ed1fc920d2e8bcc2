"""Tests for manifest loading and signal context construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from skills_detector.detectors import detect_path
from skills_detector.manifest import build_context, load_package_json, merge_dependencies, path_exists
from tests._fixtures.repo_builder import RepoBuilder


def test_missing_manifest_returns_none(tmp_path: Path) -> None:
    assert load_package_json(tmp_path) is None


@pytest.mark.parametrize(
    "content",
    [
        "{broken",
        "[1, 2, 3]",
        "",
        '{"dependencies": {"react": "18"}, "build": ' + "1" * 5000 + "}",
        "[" * 100_000 + "]" * 100_000,
    ],
    ids=["malformed", "array-root", "empty", "oversized-integer", "deep-nesting"],
)
def test_unusable_manifest_returns_none(tmp_path: Path, content: str) -> None:
    (tmp_path / "package.json").write_text(content, encoding="utf-8")

    assert load_package_json(tmp_path) is None


def test_detection_survives_oversized_integer_manifest(repo_builder: RepoBuilder) -> None:
    content = '{"dependencies": {"react": "18"}, "build": ' + "1" * 5000 + "}"
    repo_builder.write({"package.json": content})

    report = detect_path(repo_builder.path())

    assert report.frameworks == ()
    assert report.languages == ("javascript",)


def test_merge_dependencies_unions_sections_with_dev_precedence() -> None:
    manifest = {
        "dependencies": {"react": "^18.0.0", "next": "14.0.0"},
        "devDependencies": {"react": "^18.2.0", "vitest": "1.0.0"},
        "peerDependencies": {"vue": "3"},
    }

    assert merge_dependencies(manifest) == {
        "react": "^18.2.0",
        "next": "14.0.0",
        "vitest": "1.0.0",
    }


def test_merge_dependencies_ignores_non_mapping_sections() -> None:
    assert merge_dependencies({"dependencies": ["react"]}) == {}
    assert merge_dependencies(None) == {}


def test_build_context_is_read_only(repo_builder: RepoBuilder) -> None:
    repo_builder.package_json(["express"], ["jest"])

    context = repo_builder.context()

    assert context.root == repo_builder.path().resolve()
    assert context.manifest is not None and context.manifest["name"] == "demo"
    assert dict(context.dependencies) == {"express": "^1.0.0", "jest": "^1.0.0"}
    with pytest.raises(TypeError):
        context.dependencies["react"] = "18"  # type: ignore[index]


def test_build_context_without_manifest(tmp_path: Path) -> None:
    context = build_context(tmp_path)

    assert context.manifest is None
    assert dict(context.dependencies) == {}


def test_path_exists_never_raises(tmp_path: Path) -> None:
    (tmp_path / "Dockerfile").touch()

    assert path_exists(tmp_path, "Dockerfile") is True
    assert path_exists(tmp_path, "missing/file") is False
    assert path_exists(tmp_path, "bad\x00name") is False
