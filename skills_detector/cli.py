"""CLI entrypoint for skills-detector."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .logging import configure_logging
from .models import CharacteristicsReport
from .orchestrator import Orchestrator, TermOutcome
from .report import render_json

_INSTALL_HINT = "npx skillman install"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skills-detector",
        description="Detect project characteristics and find matching skills.",
    )
    parser.add_argument(
        "-C",
        "--cwd",
        default=".",
        help="Working directory to analyze (defaults to current directory).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON only instead of writing the skills report.",
    )
    parser.add_argument(
        "--skip-search",
        action="store_true",
        help="Skip searching for skills (detection only).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Report file name inside the analyzed directory (default: skills.json).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"skills-detector {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for skills-detector."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    try:
        _run(orchestrator, args)
    except FileNotFoundError as exc:
        parser.exit(1, f"Error: {exc}\n")
    except RuntimeError as exc:
        parser.exit(1, f"Error: {exc}\nRun with --verbose for more details.\n")


def _run(orchestrator: Orchestrator, args: argparse.Namespace) -> None:
    detected = orchestrator.run_detect(args.cwd)

    if args.json and args.skip_search:
        print(render_json(detected.to_dict()))
        return

    if not args.json:
        _print_summary(detected)
        if detected.is_empty():
            print("\nNo project characteristics detected.")
            return
        print(f"\nSearch terms: {', '.join(detected.search_terms)}")

    if args.skip_search:
        return

    if not args.json:
        print("\nSearching for skills (top result per term)...")

    outcome = orchestrator.run_recommend(
        args.cwd,
        write=not args.json,
        output=args.output,
        detected=detected,
        on_term=None if args.json else _print_term,
    )

    if args.json:
        print(render_json(outcome.report))
        return

    print(f"\nFound {len(outcome.refs)} skills from {len(outcome.skills)} sources")
    if outcome.output_path is not None:
        print(f"Wrote {_relativize(outcome.output_path)}")
    print(f"\nInstall with: {_INSTALL_HINT}")


def _print_summary(detected: CharacteristicsReport) -> None:
    print("\nProject Analysis\n")
    rows = (
        ("Frameworks:", detected.frameworks),
        ("Languages:", detected.languages),
        ("Tools:", detected.tools),
        ("Testing:", detected.testing),
    )
    for label, values in rows:
        if values:
            print(f"{label:<13}{', '.join(values)}")


def _print_term(outcome: TermOutcome) -> None:
    if not outcome.refs:
        print(f"  {outcome.term}... (none)")
    elif outcome.curated:
        print(f"  {outcome.term}... {', '.join(outcome.refs)} (curated)")
    else:
        print(f"  {outcome.term}... {outcome.refs[0]}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
