"""
Content Importers

Writes parsed legacy pages into the backend: mountains with their starting
points, and activity/place pages. Each page is handled on its own; a failed
page is logged and counted, never rolled back with the others.
"""

import logging
import time
from pathlib import Path

from config.database import upsert_row, replace_starting_points
from config.models import Mountain, Activity, Place
from migration.legacy_parser import (
    ACTIVITY_FILES,
    PLACE_FILES,
    get_mountain_files,
    parse_mountain_html,
    parse_content_page,
)

logger = logging.getLogger(__name__)

MOUNTAIN_DELAY = 0.1  # seconds between mountains

CONTENT_KINDS = {
    'activities': {'model': Activity, 'files': ACTIVITY_FILES},
    'places': {'model': Place, 'files': PLACE_FILES},
}


def import_mountain(parsed):
    """
    Upsert a parsed mountain and replace its starting points.

    Args:
        parsed (dict): Output of parse_mountain_html

    Returns:
        dict or None: Stored mountain row, None if the mountain write failed
    """
    mountain = parsed['mountain']
    starting_points = parsed['starting_points']

    row = upsert_row(Mountain, mountain, on_conflict='slug')
    if row is None:
        logger.error(f"Could not store mountain {mountain['name']}")
        return None

    logger.info(f"Stored mountain: {mountain['name']}")

    written = replace_starting_points(row['id'], starting_points)
    if written is None:
        logger.error(f"Could not store starting points for {mountain['name']}")
    elif written:
        logger.info(f"  Stored {written} starting point(s)")

    return row


def migrate_mountains(site_path, delay=MOUNTAIN_DELAY):
    """
    Parse and import every mountain page of the legacy site.

    Returns:
        dict: Counts of 'success' and 'failed' pages
    """
    counts = {'success': 0, 'failed': 0}

    mountain_files = get_mountain_files(site_path)
    logger.info(f"Found {len(mountain_files)} mountain HTML files")

    for file_path in mountain_files:
        logger.info(f"Processing: {file_path.name}")

        parsed = parse_mountain_html(file_path)
        if parsed and import_mountain(parsed):
            counts['success'] += 1
        else:
            logger.warning(f"Failed to migrate {file_path.name}")
            counts['failed'] += 1

        if delay:
            time.sleep(delay)

    return counts


def build_content_row(kind, parsed):
    """Build the activities/places row for a parsed content page."""
    subtitle = parsed['content'].get('subtitle')
    row = {
        'slug': parsed['slug'],
        'title': parsed['title'],
        'content': parsed['content'],
        'published': True,
        'seo_title': parsed['title'],
        'seo_description': subtitle or parsed['title'],
    }
    if kind == 'places':
        # Coordinates are added by hand after migration
        row['latitude'] = None
        row['longitude'] = None
    return row


def migrate_content_pages(kind, site_path, files=None):
    """
    Migrate the activity or place pages of the legacy site.

    Args:
        kind (str): 'activities' or 'places'
        site_path (Path): Root of the legacy site
        files (list, optional): Override the fixed file list

    Returns:
        dict: Counts of 'success', 'failed' and 'skipped' pages
    """
    if kind not in CONTENT_KINDS:
        raise ValueError(f"Unknown content kind: {kind}")

    model = CONTENT_KINDS[kind]['model']
    files = files if files is not None else CONTENT_KINDS[kind]['files']
    counts = {'success': 0, 'failed': 0, 'skipped': 0}

    for filename in files:
        file_path = Path(site_path) / filename

        if not file_path.exists():
            logger.warning(f"File not found: {filename}")
            counts['skipped'] += 1
            continue

        parsed = parse_content_page(file_path)
        if parsed is None:
            counts['failed'] += 1
            continue

        if upsert_row(model, build_content_row(kind, parsed), on_conflict='slug'):
            logger.info(f"Migrated: {parsed['title']}")
            counts['success'] += 1
        else:
            counts['failed'] += 1

    return counts
