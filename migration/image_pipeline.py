"""
Image Migration Pipeline

Walks the legacy images directory, recompresses each image to WebP,
uploads it to object storage and records its metadata in the images table.
Items are processed one at a time with a fixed delay between them.
"""

import io
import logging
import os
import time
from pathlib import Path, PurePosixPath

from PIL import Image as PILImage, UnidentifiedImageError

from config.database import upsert_row
from config.models import Image
from migration.storage import (
    StorageClient,
    StorageError,
    MOUNTAIN_BUCKET,
    BACKGROUND_BUCKET,
    CONTENT_BUCKET,
)

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.webp'}
SKIP_FILES = {'Thumbs.db', '.DS_Store', 'desktop.ini'}
OUTPUT_EXTENSION = '.webp'
OUTPUT_MIME_TYPE = 'image/webp'
MAX_WIDTH = 1600
WEBP_QUALITY = 85
UPLOAD_DELAY = 0.2  # seconds between images


def is_image_file(filename):
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


def get_image_files(images_dir):
    """
    Get all image files below a directory, recursively.

    Args:
        images_dir (Path): Root images directory

    Returns:
        list: Sorted list of image file paths
    """
    images_dir = Path(images_dir)
    files = []

    if not images_dir.is_dir():
        logger.error(f"Images directory not found: {images_dir}")
        return files

    for root, dirs, filenames in os.walk(images_dir):
        dirs.sort()
        for filename in sorted(filenames):
            if filename in SKIP_FILES or not is_image_file(filename):
                continue
            files.append(Path(root) / filename)

    return files


def _posix_relative(relative_path):
    return PurePosixPath(str(relative_path).replace('\\', '/'))


def get_bucket_for_image(relative_path):
    """
    Choose the storage bucket for an image from its legacy path.

    Args:
        relative_path (str or Path): Path relative to the legacy images directory

    Returns:
        str: Bucket name
    """
    lowered = str(_posix_relative(relative_path)).lower()

    if 'background' in lowered:
        return BACKGROUND_BUCKET
    if 'mountain' in lowered:
        return MOUNTAIN_BUCKET
    return CONTENT_BUCKET


def generate_storage_path(relative_path):
    """
    Build the object path for an image, keeping its directory structure.

    "mountains/donard/Photo 1.JPG" -> "mountains/donard/Photo 1.webp"
    """
    path = _posix_relative(relative_path)
    storage_path = str(path.with_suffix(OUTPUT_EXTENSION))
    if storage_path.startswith('./'):
        storage_path = storage_path[2:]
    return storage_path


def legacy_reference_to_storage_path(reference):
    """
    Map an image reference from legacy HTML ("images/...") to "bucket/path".

    Returns:
        str or None: Storage path the migrated image is uploaded to
    """
    if not reference:
        return None
    reference = reference.strip()
    if reference.startswith('images/'):
        reference = reference[len('images/'):]
    if not reference:
        return None
    return f"{get_bucket_for_image(reference)}/{generate_storage_path(reference)}"


def optimize_image(file_path, max_width=MAX_WIDTH, quality=WEBP_QUALITY):
    """
    Resize an image to fit inside max_width and encode it as WebP.

    Images narrower than max_width are never enlarged.

    Returns:
        dict: {'data': bytes, 'width': int, 'height': int}
    """
    with PILImage.open(file_path) as img:
        if img.mode in ("RGBA", "LA", "P"):
            img = img.convert("RGBA")
        else:
            img = img.convert("RGB")

        if img.width > max_width:
            new_height = max(1, round(img.height * max_width / img.width))
            img = img.resize((max_width, new_height), PILImage.Resampling.LANCZOS)

        buffer = io.BytesIO()
        img.save(buffer, "WEBP", quality=quality)

        return {
            'data': buffer.getvalue(),
            'width': img.width,
            'height': img.height,
        }


def process_image(file_path, images_dir, storage_client):
    """
    Optimize, upload and record a single image.

    Returns:
        bool: True if the image was uploaded and recorded
    """
    file_path = Path(file_path)
    relative_path = file_path.relative_to(images_dir)
    bucket = get_bucket_for_image(relative_path)
    object_path = generate_storage_path(relative_path)

    logger.info(f"Processing {relative_path} -> {bucket}/{object_path}")

    optimized = optimize_image(file_path)
    storage_path = storage_client.upload(bucket, object_path, optimized['data'])

    row = upsert_row(Image, {
        'storage_path': storage_path,
        'title': file_path.name,
        'alt_text': file_path.name,
        'width': optimized['width'],
        'height': optimized['height'],
        'file_size': len(optimized['data']),
        'mime_type': OUTPUT_MIME_TYPE,
    }, on_conflict='storage_path')

    if row is None:
        logger.error(f"Uploaded {storage_path} but could not record its metadata")
        return False

    logger.info(f"Uploaded {storage_path} ({len(optimized['data']) / 1024:.1f}KB)")
    return True


def migrate_images(images_dir, storage_client=None, delay=UPLOAD_DELAY):
    """
    Migrate every image below images_dir.

    Args:
        images_dir (Path): Legacy images directory
        storage_client (StorageClient, optional): Client used for uploads
        delay (float): Seconds to wait after each image

    Returns:
        dict: Counts of 'success', 'failed' and 'skipped' images
    """
    images_dir = Path(images_dir)
    counts = {'success': 0, 'failed': 0, 'skipped': 0}

    image_files = get_image_files(images_dir)
    logger.info(f"Found {len(image_files)} image files in {images_dir}")

    if not image_files:
        return counts

    storage_client = storage_client or StorageClient()

    for index, file_path in enumerate(image_files, start=1):
        logger.info(f"[{index}/{len(image_files)}] {file_path.relative_to(images_dir)}")

        try:
            if process_image(file_path, images_dir, storage_client):
                counts['success'] += 1
            else:
                counts['failed'] += 1
        except UnidentifiedImageError:
            logger.warning(f"Not a readable image, skipping: {file_path}")
            counts['skipped'] += 1
        except (StorageError, OSError, ValueError) as e:
            logger.error(f"Failed to process {file_path}: {e}")
            counts['failed'] += 1
        except Exception as e:
            logger.error(f"Unexpected error processing {file_path}: {e}")
            counts['failed'] += 1

        if delay:
            time.sleep(delay)

    return counts
