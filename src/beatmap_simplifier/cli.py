"""
Command line entry point.

    beatmap-simplifier "Songs/My Pack" --mode extract
    beatmap-simplifier "Songs/My Pack" --section Beginner:2 --action Replace
    beatmap-simplifier "Songs/My Pack" --action "Insert After" --new-section Novice:1
"""

import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import DEFAULT_ACTION, DEFAULT_NEW_SECTION, DEFAULT_SECTION, load_options
from .processor import RunMode, run_directory


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simplify a dance-single chart in every .sm file of a directory")
    parser.add_argument("directory", help="Directory to scan (recursively) for .sm files")
    parser.add_argument("--mode", choices=[m.value for m in RunMode], default=RunMode.PROCESS.value,
                        help="extract: print the chart only; process: back up and rewrite (default)")
    parser.add_argument("--section", help=f"Chart to simplify as Difficulty:steps (default: {DEFAULT_SECTION})")
    parser.add_argument("--action", help=f"Replace, Insert Before or Insert After (default: {DEFAULT_ACTION})")
    parser.add_argument("--new-section", help=f"Label for an inserted chart as Difficulty:steps (default: {DEFAULT_NEW_SECTION})")
    parser.add_argument("--no-backup", action="store_true", help="Do not create .bak copies before rewriting")
    parser.add_argument("--env-file", help="Read BEATMAP_* settings from this .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    try:
        options = load_options(
            section=args.section,
            action=args.action,
            new_section=args.new_section,
            env_file=args.env_file,
        )
    except ValidationError as e:
        logging.error(f"❌ Missing or invalid parameters:\n{e}")
        return 2

    logging.debug(f"Options: {options.model_dump()}")

    try:
        reports = run_directory(args.directory, args.mode, options, backup=not args.no_backup)
    except (ValueError, FileNotFoundError) as e:
        logging.error(f"❌ Error: {e}")
        return 1

    return 1 if any(r.failed for r in reports) else 0


if __name__ == "__main__":
    raise SystemExit(main())
