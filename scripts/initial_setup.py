"""Initial setup - apply migrations and load the starter exercise catalog."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import SessionLocal, run_migrations
from app.logging_config import configure_logging
from app.services.exercise_catalog import ExerciseCatalog


logger = logging.getLogger("scripts.initial_setup")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare the runner strength database")
    parser.add_argument(
        "--skip-seed",
        action="store_true",
        help="Only apply migrations; leave the exercises table untouched",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG regardless of LOG_LEVEL",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    run_migrations()
    logger.info("Database migrations applied")

    if args.skip_seed:
        return 0

    db = SessionLocal()
    try:
        result = ExerciseCatalog(db).seed()
    finally:
        db.close()

    print(f"{result['message']} ({result['count']} exercises added)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
