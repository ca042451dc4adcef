#!/usr/bin/env python3
"""
List Unlinked Images

Shows images with no owning mountain, grouped by bucket and directory.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from migration.image_links import list_unlinked_images

PREVIEW_COUNT = 5

def main():
    print("Fetching unlinked images...\n")

    grouped = list_unlinked_images()
    total = sum(len(paths) for paths in grouped.values())
    print(f"Found {total} unlinked images:")

    for key, paths in grouped.items():
        print(f"\n{key}/ ({len(paths)} images):")
        for path in paths[:PREVIEW_COUNT]:
            print(f"  - {path}")
        if len(paths) > PREVIEW_COUNT:
            print(f"  ... and {len(paths) - PREVIEW_COUNT} more")

    if grouped:
        print("\n" + "=" * 60)
        print("Summary:")
        for key, paths in grouped.items():
            print(f"  {key}: {len(paths)} images")
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
