"""Command-line front door for lazylaunch.

Parses CLI options, merges them over the persisted settings, and configures
logging. Then dispatches into the interactive launcher or ``--list`` output.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from .runtime import run_launcher
from .runtime.app import format_match_lines
from .runtime.config import LauncherSettings, load_settings, save_theme_name
from .ui_theme import available_theme_names, normalize_theme_name

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_seconds(value: str) -> float:
    """argparse type for cache timeouts in seconds."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazylaunch",
        description="Fuzzy-search and launch commands and desktop applications from the terminal.",
    )
    parser.add_argument("query", nargs="?", default="", help="Initial query text.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Persist --theme as the default theme.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--max-results", type=_positive_int, default=None, help="Maximum number of ranked matches.")
    parser.add_argument(
        "--cache-timeout",
        type=_nonnegative_seconds,
        default=None,
        help="Seconds before the item list is refreshed in the background.",
    )
    parser.add_argument("--no-descriptions", action="store_true", help="Hide application descriptions.")
    parser.add_argument("--list", action="store_true", help="Print ranked matches for QUERY and exit.")
    parser.add_argument("--list-themes", action="store_true", help="Print available theme names and exit.")
    parser.add_argument("--log-file", default=None, help="Write diagnostic logs to this file.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Log level used with --log-file (default: INFO).",
    )
    return parser


def configure_logging(log_file: str | None, level: str) -> None:
    """Send logs to ``log_file``; without one, the package stays silent."""
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=getattr(logging, level), format=LOG_FORMAT)


def apply_overrides(settings: LauncherSettings, args: argparse.Namespace) -> LauncherSettings:
    """Return ``settings`` with explicit CLI flags taking precedence."""
    overrides: dict[str, object] = {}
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.max_results is not None:
        overrides["max_results"] = args.max_results
    if args.cache_timeout is not None:
        overrides["cache_timeout"] = args.cache_timeout
    if args.no_descriptions:
        overrides["show_descriptions"] = False
    return dataclasses.replace(settings, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the launcher.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    if args.save_theme:
        if args.theme is None:
            parser.error("--save-theme requires --theme")
        theme_name = args.theme.strip().lower()
        if normalize_theme_name(theme_name) != theme_name:
            parser.error(f"unknown theme: {args.theme!r}")
        save_theme_name(theme_name)

    if args.list_themes:
        sys.stdout.write("\n".join(available_theme_names()) + "\n")
        return 0

    settings = apply_overrides(load_settings(), args)
    if args.list:
        lines = format_match_lines(args.query, settings)
        if lines:
            sys.stdout.write("\n".join(lines) + "\n")
        return 0

    return run_launcher(settings, no_color=args.no_color, query=args.query)


if __name__ == "__main__":
    raise SystemExit(main())
