#!/usr/bin/env python3
"""
Mountain Content Migration

Parses the legacy site's mountain pages and stores each mountain with its
starting points.

Usage:
    python scripts/migrate_content.py [--site-path PATH]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config import settings
from config.database import init_database
from migration.content_importer import migrate_mountains, MOUNTAIN_DELAY

def main():
    parser = argparse.ArgumentParser(description="Migrate mountain pages from the legacy site")
    parser.add_argument("--site-path", type=Path, default=settings.LEGACY_SITE_PATH,
                        help="Root directory of the legacy site")
    parser.add_argument("--delay", type=float, default=MOUNTAIN_DELAY,
                        help="Seconds to wait between mountains")
    args = parser.parse_args()

    print("Starting content migration...\n")

    if not args.site_path.is_dir():
        print(f"❌ Legacy site path not found: {args.site_path}")
        print("Set LEGACY_SITE_PATH or pass --site-path.")
        return 1

    init_database()
    counts = migrate_mountains(args.site_path, delay=args.delay)

    print("\n" + "=" * 50)
    print("Migration complete!")
    print(f"Success: {counts['success']}")
    print(f"Failed: {counts['failed']}")
    print("=" * 50)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"❌ Migration failed: {e}")
        sys.exit(1)
