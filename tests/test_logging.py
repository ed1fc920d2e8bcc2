"""Tests for skills_detector.logging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from skills_detector.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("skills_detector")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_get_logger_namespaces_under_package() -> None:
    assert get_logger().name == "skills_detector"
    assert get_logger("search").name == "skills_detector.search"


def test_reconfiguring_closes_previous_file_handler(tmp_path: Path) -> None:
    logger = configure_logging(log_file=tmp_path / "first.log")
    first = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

    configure_logging()

    assert first.stream is None or first.stream.closed
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    assert len(logger.handlers) == 1


def test_diagnostics_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True)

    get_logger("cli").debug("scanning")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[skills-detector] DEBUG scanning" in captured.err


def test_default_level_hides_info(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = configure_logging(log_file=log_file)

    get_logger("orchestrator").info("quiet")
    get_logger("orchestrator").warning("loud")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "loud" in text
    assert "quiet" not in text
