"""
Maintenance photo storage on Cloudflare R2.
Handles upload key generation, upload, and deletion by public URL.
"""

import logging
import secrets
import time
from typing import Iterable

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import (
    PHOTO_PUBLIC_BASE_URL,
    R2_ACCESS_KEY_ID,
    R2_ACCOUNT_ID,
    R2_BUCKET_NAME,
    R2_SECRET_ACCESS_KEY,
)

logger = logging.getLogger(__name__)

PHOTO_KEY_PREFIX = "maintenances"
MAX_PHOTO_SIZE_BYTES = 5 * 1024 * 1024  # 5MB
ALLOWED_PHOTO_MIME_TYPES = [
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/webp",
    "image/heic",
    "image/heif",
]


class PhotoUploadError(Exception):
    """Raised when the storage backend rejects an upload"""


class PhotoDeleteError(Exception):
    """Raised for foreign URLs or when the storage backend rejects a removal"""


def get_r2_client():
    """Get configured boto3 client for Cloudflare R2"""
    return boto3.client(
        "s3",
        endpoint_url=f"https://{R2_ACCOUNT_ID}.r2.cloudflarestorage.com",
        aws_access_key_id=R2_ACCESS_KEY_ID,
        aws_secret_access_key=R2_SECRET_ACCESS_KEY,
        config=Config(signature_version="s3v4"),
        region_name="auto",
    )


def generate_photo_key(association_id: str, filename: str) -> str:
    """
    Generate a unique R2 key for a maintenance photo.

    Format: maintenances/{association_id}-{timestamp_ms}-{random}.{ext}
    """
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "jpg"
    ext = "".join(c for c in ext if c.isalnum())[:10] or "jpg"
    timestamp_ms = int(time.time() * 1000)
    return f"{PHOTO_KEY_PREFIX}/{association_id}-{timestamp_ms}-{secrets.token_hex(4)}.{ext}"


def photo_url_for_key(key: str) -> str:
    return f"{PHOTO_PUBLIC_BASE_URL}/{key}"


def photo_key_from_url(url: str) -> str:
    """Strip the public base URL; anything else is not one of our photos"""
    prefix = f"{PHOTO_PUBLIC_BASE_URL}/"
    if not url or not url.startswith(prefix) or len(url) == len(prefix):
        raise PhotoDeleteError("Invalid photo URL")
    return url[len(prefix):]


def upload_maintenance_photo(
    file_content: bytes, filename: str, content_type: str, association_id: str
) -> str:
    """
    Upload a photo and return its public URL.

    Raises:
        PhotoUploadError: If the backend rejects the upload
    """
    key = generate_photo_key(association_id, filename)
    try:
        s3_client = get_r2_client()
        s3_client.put_object(
            Bucket=R2_BUCKET_NAME,
            Key=key,
            Body=file_content,
            ContentType=content_type,
            CacheControl="public, max-age=3600",
        )
    except (ClientError, BotoCoreError) as e:
        logger.error(f"❌ Photo upload failed for key {key}: {e}")
        raise PhotoUploadError(f"Upload failed: {e}") from e

    logger.info(f"✅ Uploaded maintenance photo: {key}")
    return photo_url_for_key(key)


def delete_maintenance_photo(url: str) -> None:
    """
    Delete a photo by its public URL.

    Raises:
        PhotoDeleteError: If the URL is foreign or the backend rejects the removal
    """
    key = photo_key_from_url(url)
    try:
        s3_client = get_r2_client()
        s3_client.delete_object(Bucket=R2_BUCKET_NAME, Key=key)
    except (ClientError, BotoCoreError) as e:
        raise PhotoDeleteError(f"Delete failed: {e}") from e

    logger.info(f"🗑️ Deleted maintenance photo: {key}")


def delete_photos_best_effort(urls: Iterable[str]) -> int:
    """Attempt to delete every photo; failures are logged and skipped. Returns the number deleted."""
    deleted = 0
    for url in urls:
        try:
            delete_maintenance_photo(url)
            deleted += 1
        except PhotoDeleteError as e:
            logger.warning(f"⚠️ Could not delete photo {url}: {e}")
    return deleted
