#!/usr/bin/env python3
"""
Image Link Fix

Links images that have no mountain to the mountain whose slug matches
their storage path. Images with no match stay unlinked.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from migration.image_links import fix_image_links

def main():
    print("Starting image link fix...\n")

    counts = fix_image_links()

    print("\n" + "=" * 50)
    print("Image link fix complete!")
    print(f"Successfully linked: {counts['linked']}")
    print(f"Not linked: {counts['not_linked']}")
    print("=" * 50)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"❌ Script failed: {e}")
        sys.exit(1)
