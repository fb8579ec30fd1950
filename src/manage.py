"""PC Store database management CLI.

Creates and drops the relational schema for the ``pcstore`` domain. Only
meaningful when the active environment points at SQLite or PostgreSQL.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create tables for every aggregate and entity."""
    from pcstore.domain import store
    from pcstore.utils.db import setup_db

    print("Initializing pcstore domain...")
    store.init()
    print("Creating database schema...")
    setup_db(store)
    print("Done.")


def drop_database():
    """Drop every table owned by the domain."""
    from pcstore.domain import store
    from pcstore.utils.db import drop_db

    print("Initializing pcstore domain...")
    store.init()
    print("Dropping database schema...")
    drop_db(store)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="PC Store database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
