#!/usr/bin/env python3
"""
Seed a Supabase project with the sample catalog.

Upserts categories, vendors, services and promotions (keyed on id), so
running it twice is harmless.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --only services
"""

import argparse
import logging
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.data.catalog import CATEGORY_ROWS, SERVICE_ROWS, VENDOR_ROWS
from core.data.promotions import DISCOUNT_CODES
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger("seed_catalog")

# Vendors before services: services reference vendor ids
TABLES = {
    "categories": CATEGORY_ROWS,
    "vendors": VENDOR_ROWS,
    "services": SERVICE_ROWS,
    "promotions": [dc.model_dump(mode="json") for dc in DISCOUNT_CODES],
}


def seed(tables: list[str]) -> int:
    """Upsert the given tables. Returns the number of rows written."""
    total = 0
    for table in tables:
        written = SupabaseClient.upsert_rows(table, TABLES[table])
        print(f"  {table:<12} {written:>3} rows")
        total += written
    return total


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the sample catalog and discount codes into Supabase")
    parser.add_argument(
        "--only",
        choices=list(TABLES),
        action="append",
        help="Seed only this table (repeatable)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    tables = [t for t in TABLES if not args.only or t in args.only]
    print(f"Seeding {', '.join(tables)}")

    try:
        total = seed(tables)
    except SupabaseClientError as e:
        print(f"\nSeeding failed: {e}")
        return 1

    print(f"\nDone: {total} rows written")
    return 0


if __name__ == "__main__":
    sys.exit(main())
