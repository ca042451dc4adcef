#!/usr/bin/env python3
"""
Database Initialization Script

Run this script to create the site's tables.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import init_database, DATABASE_URL

def main():
    """Create all tables."""
    print("🚀 Initializing Explore the Mournes Database...")
    print("=" * 50)

    try:
        init_database()
        print(f"✅ Database initialized: {DATABASE_URL}")

        print("\n📊 Database Structure:")
        print("   - mountains: Mountain profiles")
        print("   - starting_points: Trailheads for each mountain")
        print("   - images: Uploaded image metadata")
        print("   - activities: Activity pages")
        print("   - places: Places of interest")

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
