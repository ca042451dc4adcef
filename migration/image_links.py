"""
Image Link Repair

Best-effort linking of orphaned images (no mountain_id) to mountains by
guessing the mountain slug from the image's storage path.
"""

import logging
import re
import time

from config.database import select_one, update_rows, get_unlinked_images
from config.models import Image, Mountain
from migration.storage import BUCKETS

logger = logging.getLogger(__name__)

LINK_DELAY = 0.05  # seconds between images
SLIEVE_PREFIX = 'slieve-'
SHORT_SLUG_LENGTH = 10

_BUCKET_PREFIX = re.compile(r'^(?:' + '|'.join(re.escape(b) for b in BUCKETS) + r')/')
_IMAGE_SUFFIX = re.compile(r'\.(?:webp|jpg|jpeg|png)$')


def extract_mountain_slug_candidates(storage_path):
    """
    Generate possible mountain slugs for an image, most likely first.

    Examples:
        "mountain-images/donard/photo.webp"  -> ["donard", "photo", ..., "slieve-donard", ...]
        "backgrounds/bearnagh-bg.webp"       -> ["bearnagh-bg", "bearnagh", "slieve-bearnagh", ...]

    Order: directory name, filename, filename minus "-bg", filename minus
    "-background", then "slieve-" prefixed variants of short candidates.

    Returns:
        list: Unique candidate slugs
    """
    without_bucket = _BUCKET_PREFIX.sub('', storage_path.lower())
    parts = without_bucket.split('/')
    directory = _IMAGE_SUFFIX.sub('', parts[0])
    filename = _IMAGE_SUFFIX.sub('', parts[-1])

    possibilities = [
        directory,
        filename,
        re.sub(r'-bg$', '', filename),
        re.sub(r'-background$', '', filename),
    ]

    with_slieve = [
        f"{SLIEVE_PREFIX}{p}" for p in possibilities
        if p and not p.startswith(SLIEVE_PREFIX) and len(p) < SHORT_SLUG_LENGTH
    ]

    # dict keeps first-seen order
    return list(dict.fromkeys(p for p in possibilities + with_slieve if p))


def find_mountain_by_slug(slugs):
    """
    Return the id of the first mountain matching any candidate slug.
    """
    for slug in slugs:
        mountain = select_one(Mountain, slug=slug)
        if mountain:
            return mountain['id']
    return None


def fix_image_links(delay=LINK_DELAY):
    """
    Link every unlinked image to a mountain where a slug match exists.

    Returns:
        dict: Counts of 'linked' and 'not_linked' images
    """
    counts = {'linked': 0, 'not_linked': 0}

    images = get_unlinked_images()
    logger.info(f"Found {len(images)} images without mountain_id")

    for image in images:
        slugs = extract_mountain_slug_candidates(image['storage_path'])
        logger.info(f"Processing {image['storage_path']}, trying: {', '.join(slugs)}")

        mountain_id = find_mountain_by_slug(slugs)

        if mountain_id is None:
            logger.info(f"  No matching mountain for {image['storage_path']}")
            counts['not_linked'] += 1
        elif update_rows(Image, {'mountain_id': mountain_id}, id=image['id']):
            logger.info(f"  Linked to mountain {mountain_id}")
            counts['linked'] += 1
        else:
            counts['not_linked'] += 1

        if delay:
            time.sleep(delay)

    return counts


def group_unlinked_images(images):
    """
    Group storage paths by "bucket/dir" ("bucket/root" for top-level files).

    Returns:
        dict: Key -> list of storage paths, keys sorted
    """
    grouped = {}
    for image in images:
        parts = image['storage_path'].split('/')
        directory = parts[1] if len(parts) > 2 else 'root'
        grouped.setdefault(f"{parts[0]}/{directory}", []).append(image['storage_path'])
    return dict(sorted(grouped.items()))


def list_unlinked_images():
    return group_unlinked_images(get_unlinked_images())
