#!/usr/bin/env python3
"""
Activities & Places Migration

Parses the legacy activity and place pages into title, subtitle,
accordion sections and gallery images, and upserts them by slug.

Usage:
    python scripts/migrate_activities_places.py [--site-path PATH]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config import settings
from config.database import init_database
from migration.content_importer import migrate_content_pages, CONTENT_KINDS

def print_section(kind, counts):
    total = sum(counts.values())
    print(f"✨ {kind.capitalize()} migrated: {counts['success']}/{total}")
    if counts['failed']:
        print(f"❌ Failed: {counts['failed']}")
    if counts['skipped']:
        print(f"⚠️  Files skipped: {counts['skipped']}")

def main():
    parser = argparse.ArgumentParser(description="Migrate activity and place pages")
    parser.add_argument("--site-path", type=Path, default=settings.LEGACY_SITE_PATH,
                        help="Root directory of the legacy site")
    parser.add_argument("--only", choices=sorted(CONTENT_KINDS), help="Migrate a single kind")
    args = parser.parse_args()

    print("🚀 Starting Activities & Places Migration...")

    if not args.site_path.is_dir():
        print(f"❌ Legacy site path not found: {args.site_path}")
        return 1

    init_database()

    kinds = [args.only] if args.only else ['activities', 'places']
    for kind in kinds:
        print("\n" + "=" * 40)
        print(f"Migrating {kind.capitalize()}")
        print("=" * 40)
        print_section(kind, migrate_content_pages(kind, args.site_path))

    print("\n✅ Migration complete!")
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"❌ Fatal error: {e}")
        sys.exit(1)
