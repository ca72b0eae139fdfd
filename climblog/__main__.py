"""
Climb Log Entry Point

Loads the store once, runs the interactive shell, and saves once on quit.

Usage:
    # Store in ./climblog.db (or $CLIMBLOG_DB_PATH)
    python -m climblog

    # Another store file, with debug logs in a file
    python -m climblog --db ~/climbs.db --log-level DEBUG --log-file climblog.log

    # Refuse to start without an existing store
    python -m climblog --strict-load

Exit status is 1 when the store cannot be loaded or saved.
"""
import argparse
import logging
import sys
from typing import List, Optional

from climblog.cli import ClimbLogShell
from climblog.config import settings
from climblog.exceptions import ClimbLogError, StorageFailure
from climblog.services.binary_codec import load_or_create, save

logger = logging.getLogger(__name__)


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """Send logs to stderr (stdout is the prompt) and optionally a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="climblog", description="Personal climbing log"
    )
    parser.add_argument('--db', default=settings.DB_PATH, help='Store file path')
    parser.add_argument('--log-level', default=settings.LOG_LEVEL, help='Logging level')
    parser.add_argument('--log-file', default=settings.LOG_FILE, help='Also write logs to this file')
    parser.add_argument(
        '--strict-load',
        action='store_true',
        help='Fail if the store file does not exist instead of starting empty',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    create_missing = settings.CREATE_MISSING_DB and not args.strict_load
    try:
        collection = load_or_create(args.db, create_missing=create_missing)
    except StorageFailure as e:
        logger.error(f"Cannot start: {e.detail}")
        print(f"fatal: {e.detail}", file=sys.stderr)
        return 1

    ClimbLogShell(collection).run()

    try:
        save(collection, args.db)
    except ClimbLogError as e:
        logger.error(f"Cannot save: {e.detail}")
        print(f"fatal: {e.detail}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
