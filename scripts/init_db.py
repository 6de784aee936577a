"""
Database initialization script.

Run this script to create the users, hydration_entries and user_goals tables.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from app.core.app_logging import configure_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("Hydration Tracking Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except SQLAlchemyError as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
