# src/main.py — v1
"""CLI entry point: analyze and strength commands.

Usage:
    hubtags analyze <file> [options]
    hubtags strength <file> <u> <v>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from hubtags.version import __version__

if TYPE_CHECKING:
    from hubtags.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _load_settings(args)
        _setup_logging(settings, args.verbose)
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="hubtags",
        description=f"hubtags v{__version__} - core users and community hashtags",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--mode", choices=["closed", "open"], default=None,
        help="Neighborhood mode for connection strength (default: closed)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Print the four-stage report for a network file",
    )
    p_analyze.add_argument("file", type=Path, help="Path to network file")
    p_analyze.add_argument(
        "--ths", type=float, default=None,
        help="Override the strength threshold from the file",
    )
    p_analyze.add_argument(
        "--thc", type=int, default=None,
        help="Override the close-friend count threshold from the file",
    )
    p_analyze.add_argument(
        "--tags-per-line", type=int, default=None,
        help="Hashtags per output line (default: 5)",
    )
    p_analyze.set_defaults(func=_cmd_analyze)

    # --- strength ---
    p_strength = subparsers.add_parser(
        "strength", help="Print the strength of connection between two users",
    )
    p_strength.add_argument("file", type=Path, help="Path to network file")
    p_strength.add_argument("u", type=int, help="Source user index")
    p_strength.add_argument("v", type=int, help="Peer user index")
    p_strength.set_defaults(func=_cmd_strength)

    return parser


def _cmd_analyze(args: argparse.Namespace, settings: Settings) -> int:
    """Run the full analysis and print the report."""
    from hubtags.api.facade import analyze
    from hubtags.extraction.reader import read_network
    from hubtags.report.renderer import render_report

    file_path: Path = args.file
    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        return 1

    parsed = read_network(file_path)
    result = analyze(parsed.network, parsed.thresholds, settings=settings)
    sys.stdout.write(render_report(result, tags_per_line=settings.tags_per_line))
    return 0


def _cmd_strength(args: argparse.Namespace, settings: Settings) -> int:
    """Print one pair's strength with two decimals."""
    from hubtags.api.facade import measure_strength
    from hubtags.extraction.reader import read_network
    from hubtags.report.renderer import format_strength

    file_path: Path = args.file
    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        return 1

    parsed = read_network(file_path)
    value = measure_strength(parsed.network, args.u, args.v, settings=settings)
    print(
        f"Strength of connection between u{args.u} and u{args.v}: "
        f"{format_strength(value)}"
    )
    return 0


def _load_settings(args: argparse.Namespace) -> Settings:
    """Load settings, applying CLI flags over .env values."""
    from hubtags.config.settings import load_settings

    overrides = {
        "neighborhood_mode": args.mode,
        "strength_threshold": getattr(args, "ths", None),
        "min_close_friends": getattr(args, "thc", None),
        "tags_per_line": getattr(args, "tags_per_line", None),
    }
    return load_settings(**{k: v for k, v in overrides.items() if v is not None})


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage; logs go to stderr."""
    from hubtags.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
