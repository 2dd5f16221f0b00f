"""TailorHub database management CLI.

Creates and drops the database schema for the tailorhub domain using the
setup_db/drop_db utilities.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create the database schema."""
    from tailorhub.domain import tailorhub
    from tailorhub.utils.db import setup_db

    print("Initializing tailorhub domain...")
    tailorhub.init()
    print("Creating database schema...")
    setup_db(tailorhub)
    print("Done.")


def drop_database():
    """Drop the database schema."""
    from tailorhub.domain import tailorhub
    from tailorhub.utils.db import drop_db

    print("Initializing tailorhub domain...")
    tailorhub.init()
    print("Dropping database schema...")
    drop_db(tailorhub)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="TailorHub database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
