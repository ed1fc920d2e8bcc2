"""Registry search through the ``skills`` command line tool."""

from __future__ import annotations

import re
import subprocess
from typing import Callable, List, Sequence

from ..config import DEFAULT_SEARCH_COMMAND, DEFAULT_SEARCH_TIMEOUT
from ..logging import get_logger

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
_SKILL_REF = re.compile(r"^[a-zA-Z0-9_-]+/[a-zA-Z0-9_-]+@[a-zA-Z0-9_:-]+", re.MULTILINE)

SearchRunner = Callable[[Sequence[str], float], str]


class SearchError(RuntimeError):
    """Raised by search runners when the registry call does not succeed."""


def strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)


def parse_skill_refs(output: str) -> List[str]:
    """Extract ``owner/repo@skill`` lines from raw search output, in rank order."""
    return _SKILL_REF.findall(strip_ansi(output))


class SkillSearcher:
    """Runs one blocking registry search per term; failures yield no candidates."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_SEARCH_COMMAND,
        *,
        timeout: float = DEFAULT_SEARCH_TIMEOUT,
        runner: SearchRunner | None = None,
    ) -> None:
        self.command = tuple(command)
        self.timeout = timeout
        self._runner = runner or self._default_runner
        self.logger = get_logger("search")

    def search(self, term: str) -> List[str]:
        """Return every candidate reference for ``term`` in registry order."""
        args = [*self.command, term]
        try:
            output = self._runner(args, self.timeout)
        except subprocess.TimeoutExpired:
            self.logger.warning("Search for '%s' timed out after %.0fs", term, self.timeout)
            return []
        except (SearchError, subprocess.SubprocessError, OSError) as exc:
            self.logger.warning("Search for '%s' failed: %s", term, exc)
            return []
        candidates = parse_skill_refs(output)
        self.logger.debug("Search for '%s' returned %d candidates", term, len(candidates))
        return candidates

    @staticmethod
    def _default_runner(args: Sequence[str], timeout: float) -> str:
        completed = subprocess.run(
            list(args),
            check=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            capture_output=True,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
        )
        return completed.stdout


__all__ = [
    "SearchError",
    "SearchRunner",
    "SkillSearcher",
    "parse_skill_refs",
    "strip_ansi",
]
