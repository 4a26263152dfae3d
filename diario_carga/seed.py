"""Populate the shared exercise library: ``python -m diario_carga.seed``."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import get_settings
from .db import create_database
from .services.library import default_library, seed_library

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the exercise library")
    parser.add_argument("--create-tables", action="store_true", help="create missing tables first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    database = create_database(get_settings())
    try:
        if args.create_tables:
            database.create_all()
        added = database.run_sync(lambda session: seed_library(session, default_library()))
    finally:
        database.dispose()
    logger.info("Added %s library exercises", added)
    return added


if __name__ == "__main__":
    main()
