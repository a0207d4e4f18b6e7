#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample data for development.

USAGE:
    python scripts/seed_data.py            # add sample rows
    python scripts/seed_data.py --clear    # wipe all rows first

The target database is the one configured by DATABASE_URL / .env.
"""

import argparse
import logging

from biblioteca.config import get_settings
from biblioteca.database import Database
from biblioteca.seed import seed_database


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the Biblioteca database")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing rows before seeding",
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    database = Database.from_settings(settings)
    try:
        summary = seed_database(database, clear_existing=args.clear)
    finally:
        database.dispose()

    print("Database seeding completed successfully!")
    for table, count in summary.items():
        print(f"  - {table}: {count}")
    print(f"\nAPI: http://localhost:{settings.port}  docs: http://localhost:{settings.port}/docs")


if __name__ == "__main__":
    main()
