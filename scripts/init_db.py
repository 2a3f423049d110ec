#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the users and meals tables on the configured DATABASE_URL.
"""

import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import Database

logger = logging.getLogger("dailydiet.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    database = Database(settings.database_url, echo=settings.db_echo)
    try:
        database.init_schema()
    except Exception:
        logger.exception("Schema initialization failed")
        return 1
    finally:
        database.close()
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Daily Diet Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Tables 'users' and 'meals' are ready.")
    else:
        print("FAILED! Check the errors above.")

    sys.exit(exit_code)
