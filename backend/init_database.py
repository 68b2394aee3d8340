#!/usr/bin/env python3
"""
Script to create the database tables and seed the default admin and product catalog.
Safe to run repeatedly; existing data is left alone.
"""

import asyncio
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bakery_crm.core.config import settings
from bakery_crm.core.logging import setup_logging
from bakery_crm.db.init_db import create_tables, seed_initial_data
from bakery_crm.db.session import init_db, close_db


async def run() -> None:
    await init_db()
    try:
        await create_tables()
        await seed_initial_data()
    finally:
        await close_db()


def main():
    """Main function to initialize the database."""
    print("="*60)
    print("Bakery CRM Database Setup")
    print(f"Database: {settings.DATABASE_URL}")
    print("="*60)
    
    setup_logging()
    try:
        asyncio.run(run())
    except Exception as e:
        print(f"\nERROR: Database setup failed: {e}")
        print("\nYou may need to:")
        print("1. Verify DATABASE_URL")
        print("2. Check that DB_CREATE_TABLES is enabled")
        return 1
    
    print("\n" + "="*60)
    print("DATABASE READY")
    print("="*60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
