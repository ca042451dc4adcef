"""
Object Storage Client

Uploads binary objects to the hosted backend's storage buckets over HTTP
and builds the public URLs the pages use to display them.
"""

import logging
from urllib.parse import quote

import requests

from config import settings

logger = logging.getLogger(__name__)

MOUNTAIN_BUCKET = 'mountain-images'
BACKGROUND_BUCKET = 'backgrounds'
CONTENT_BUCKET = 'content-images'
BUCKETS = (MOUNTAIN_BUCKET, BACKGROUND_BUCKET, CONTENT_BUCKET)


class StorageError(Exception):
    """Raised when the storage API rejects an upload."""


def public_url(storage_path, base_url=None):
    """
    Get the public URL of a stored object.

    Args:
        storage_path (str): "bucket/path/to/object.webp"
        base_url (str, optional): Backend URL (defaults to SUPABASE_URL)

    Returns:
        str: Public URL, or '' when no backend URL is configured
    """
    base_url = (base_url if base_url is not None else settings.SUPABASE_URL).rstrip('/')
    if not base_url:
        # Reported once by create_app; pages render without images
        return ''
    return f"{base_url}/storage/v1/object/public/{quote(storage_path.lstrip('/'), safe='/')}"


class StorageClient:
    """Thin wrapper around the storage REST endpoint."""

    def __init__(self, base_url=None, service_key=None, session=None, timeout=60):
        self.base_url = (base_url or settings.SUPABASE_URL).rstrip('/')
        self.service_key = service_key or settings.SUPABASE_SERVICE_KEY
        self.session = session or requests.Session()
        self.timeout = timeout

    def object_url(self, bucket, path):
        return f"{self.base_url}/storage/v1/object/{bucket}/{quote(path.lstrip('/'), safe='/')}"

    def upload(self, bucket, path, data, content_type='image/webp', upsert=True):
        """
        Upload bytes to a bucket.

        Args:
            bucket (str): Bucket name
            path (str): Object path inside the bucket
            data (bytes): Object content
            content_type (str): MIME type of the content
            upsert (bool): Overwrite an existing object at the same path

        Returns:
            str: Storage path "bucket/path"

        Raises:
            StorageError: If the request fails or the API returns an error status
        """
        headers = {
            'Authorization': f"Bearer {self.service_key}",
            'apikey': self.service_key,
            'Content-Type': content_type,
            'x-upsert': 'true' if upsert else 'false',
        }

        try:
            response = self.session.post(
                self.object_url(bucket, path),
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StorageError(f"Upload of {bucket}/{path} failed: {e}") from e

        if not response.ok:
            raise StorageError(
                f"Upload of {bucket}/{path} rejected ({response.status_code}): {response.text[:200]}"
            )

        logger.debug(f"Uploaded {bucket}/{path} ({len(data)} bytes)")
        return f"{bucket}/{path}"
