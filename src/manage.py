"""Stockroom database management CLI.

Creates and drops the relational schema and loads the demo dataset.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Replace all data with the demo dataset

The default configuration stores data in memory, so seeding only persists
with a database-backed overlay, e.g. `PROTEAN_ENV=production`.
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the stockroom domain."""
    from stockroom.domain import stockroom
    from stockroom.utils.db import setup_db

    print("Initializing stockroom domain...")
    stockroom.init()
    print("Creating database schema...")
    setup_db(stockroom)
    print("Done.")


def drop_database():
    """Drop the database schema for the stockroom domain."""
    from stockroom.domain import stockroom
    from stockroom.utils.db import drop_db

    print("Initializing stockroom domain...")
    stockroom.init()
    print("Dropping database schema...")
    drop_db(stockroom)
    print("Done.")


def seed_database():
    """Load the demo stores and products."""
    from stockroom.domain import stockroom
    from stockroom.seed import seed
    from stockroom.utils.db import stores_in_memory

    print("Initializing stockroom domain...")
    stockroom.init()
    if stores_in_memory(stockroom):
        print(
            "Warning: the memory provider is active and seeded data is lost when this command exits. "
            "Set PROTEAN_ENV=production to seed the database.",
            file=sys.stderr,
        )
    with stockroom.domain_context():
        stores, products = seed()
    print(f"Seeded {stores} stores and {products} products.")


def main():
    parser = argparse.ArgumentParser(description="Stockroom database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Replace all data with the demo dataset")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
