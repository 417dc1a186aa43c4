#!/usr/bin/env python3
"""
Arcs Game Data - Command Line Entry Point
=========================================

Transforms a Tabletop Playground export into the overlay's game data JSON.

Usage:
    python backend/main.py export.json
    python backend/main.py export.json --pretty
    cat export.json | python backend/main.py -
    python backend/main.py export.json --check

Environment Variables:
    ARCS_LOG_LEVEL: Logging level (default: INFO)
    ARCS_LOG_DIR: Directory for a rotating log file (optional)

Exit codes: 0 on success, 1 when --check finds issues, 2 on unreadable or
malformed input.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Add project root to path for imports when running as a script.
# When invoked as a module (`python -m backend.main`), this is unnecessary.
PROJECT_ROOT = Path(__file__).parent.parent
if __package__ in (None, "") and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Load environment variables from .env file
try:
    from dotenv import load_dotenv

    load_dotenv(PROJECT_ROOT / ".env")
except ImportError:
    pass  # dotenv not installed, rely on environment variables

from arcs_game_data import (  # noqa: E402
    ExportValidator,
    GameDataTransformer,
    MalformedExportError,
    validate_export,
)
from backend.core.json_utils import json_dumps, json_loads  # noqa: E402

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure stderr + rotating file logging (when ARCS_LOG_DIR is set)."""
    level_name = os.environ.get("ARCS_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_dir_raw = os.environ.get("ARCS_LOG_DIR")
    if log_dir_raw:
        log_dir = Path(log_dir_raw)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_dir / "arcs-game-data.log",
                maxBytes=5_000_000,
                backupCount=3,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert an Arcs (Tabletop Playground) export to overlay game data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  arcs-transform export.json
  arcs-transform export.json --pretty
  arcs-transform - < export.json
  arcs-transform export.json --check
""",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Export JSON file, or - for stdin (default: -)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the output JSON",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the shape check before transforming",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the validation report instead of game data (exit 1 on issues)",
    )
    return parser.parse_args(argv)


def read_export(path: str) -> object:
    """Read and parse the export from a file path or stdin."""
    if path == "-":
        return json_loads(sys.stdin.buffer.read())
    return json_loads(Path(path).read_bytes())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        raw = read_export(args.path)
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {args.path} is not valid JSON: {e}", file=sys.stderr)
        return 2

    if not args.no_validate or args.check:
        try:
            validate_export(raw)
        except MalformedExportError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    if args.check:
        result = ExportValidator(raw).validate()
        print(json_dumps(result.to_dict(), indent=2))
        return 0 if result.valid else 1

    try:
        game_data = GameDataTransformer(raw).get_game_data()
    except (KeyError, TypeError, AttributeError) as e:
        # Only reachable with --no-validate
        print(f"Error: export does not have the expected shape: {e!r}", file=sys.stderr)
        return 2
    logger.debug("Transformed export with %d players", len(game_data["playerData"]["name"]))
    print(json_dumps(game_data, indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
