"""Command-line front door for rats.

Parses CLI options and resolves the starting directory. Then either prints a
ranked JSON listing (``--json``) or runs the interactive browser and prints
the chosen file.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import save_theme_name
from .debug import configure_logging
from .headless import DEFAULT_RESULT_LIMIT, collect_search_results, format_search_results
from .runtime import run_browser
from .ui_theme import available_theme_names, normalize_theme_name

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _theme_name(value: str) -> str:
    normalized = normalize_theme_name(value)
    if normalized != value.strip().lower():
        raise argparse.ArgumentTypeError(
            f"unknown theme {value!r} (choose from {', '.join(available_theme_names())})"
        )
    return normalized


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rats",
        description="Browse a directory with fuzzy filtering and a live file preview.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument("-q", "--query", default="", help="Initial filter query.")
    parser.add_argument("--json", action="store_true", help="Print ranked matches as JSON and exit.")
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=DEFAULT_RESULT_LIMIT,
        help=f"Maximum number of --json results (default: {DEFAULT_RESULT_LIMIT}).",
    )
    parser.add_argument(
        "--theme",
        type=_theme_name,
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later sessions.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    return parser


def run_json_mode(directory: Path, query: str, limit: int) -> None:
    """Write the ranked listing of ``directory`` to stdout as JSON."""
    try:
        results = collect_search_results(directory, query, limit)
    except OSError as exc:
        logger.error("json listing failed for %s: %s", directory, exc)
        reason = exc.strerror or str(exc)
        raise SystemExit(f"Cannot open directory: {directory}: {reason}") from exc
    sys.stdout.write(format_search_results(results))
    sys.stdout.write("\n")


def write_selected_path(path: Path) -> None:
    """Print ``path`` as raw filesystem bytes so undecodable names survive."""
    sys.stdout.flush()
    sys.stdout.buffer.write(os.fsencode(path) + b"\n")
    sys.stdout.buffer.flush()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch rats on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging()

    if default_path is None:
        default_path = Path.cwd()
    directory = Path(args.path) if args.path is not None else default_path
    if not directory.is_dir():
        raise SystemExit(f"Not a directory: {directory}")

    if args.json:
        run_json_mode(directory, args.query, args.limit)
        return

    if args.theme is not None:
        save_theme_name(args.theme)
    selected = run_browser(directory, args.query, args.theme, args.no_color)
    if selected is not None:
        write_selected_path(selected)


if __name__ == "__main__":
    main()
