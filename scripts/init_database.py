#!/usr/bin/env python
"""
Create (or recreate) the movie catalog database schema.

Usage:
    # Create missing tables
    python scripts/init_database.py

    # Drop everything and start over
    python scripts/init_database.py --reset

    # Target a specific database
    python scripts/init_database.py --database-url sqlite:///data/other.db
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cinelog.database import init_database, verify_schema, crud
from cinelog.utils.logging_config import setup_logging
from cinelog.web.config import get_database_url, get_log_level


def main():
    parser = argparse.ArgumentParser(description="Initialize the Cinelog database")
    parser.add_argument('--reset', action='store_true', help='Drop existing tables first')
    parser.add_argument('--database-url', default=None, help='SQLAlchemy URL (default: $DATABASE_URL)')
    args = parser.parse_args()

    setup_logging(level=get_log_level())

    db_manager = init_database(database_url=args.database_url or get_database_url(), reset=args.reset)
    if not verify_schema(db_manager):
        print("\n❌ Database initialization failed!")
        return 1

    with db_manager.session_scope() as session:
        stats = crud.get_catalog_stats(session)
    print(f"\n✅ Database ready at {db_manager.database_url}")
    print(f"   users={stats['users']} movies={stats['movies']} reviews={stats['reviews']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
