#!/usr/bin/env python3
"""
Image Migration

Converts every image under the legacy site's images/ directory to WebP,
uploads it to object storage and records its metadata.

Usage:
    python scripts/migrate_images.py [--images-path PATH]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config import settings
from config.database import init_database
from migration.image_pipeline import migrate_images, UPLOAD_DELAY

def main():
    parser = argparse.ArgumentParser(description="Optimize and upload legacy images")
    parser.add_argument("--images-path", type=Path, default=settings.LEGACY_SITE_PATH / "images",
                        help="Legacy images directory")
    parser.add_argument("--delay", type=float, default=UPLOAD_DELAY,
                        help="Seconds to wait between images")
    args = parser.parse_args()

    missing = settings.missing_service_settings()
    if missing:
        print("❌ Missing environment variables!")
        print("Make sure .env.local exists with:")
        for name in missing:
            print(f"  - {name}")
        return 1

    print("Starting image migration...\n")

    if not args.images_path.is_dir():
        print(f"❌ Images path not found: {args.images_path}")
        return 1

    init_database()
    counts = migrate_images(args.images_path, delay=args.delay)

    print("\n" + "=" * 50)
    print("Image migration complete!")
    print(f"Success: {counts['success']}")
    print(f"Failed: {counts['failed']}")
    print(f"Skipped: {counts['skipped']}")
    print("=" * 50)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"❌ Image migration failed: {e}")
        sys.exit(1)
