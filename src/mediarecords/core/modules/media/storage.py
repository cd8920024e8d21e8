"""Media host backends for uploaded files."""

import asyncio
from io import BytesIO
from typing import Any, Protocol

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
import structlog

from mediarecords.core.modules.media.models import UploadedMedia
from mediarecords.errors import MediaUploadError

logger = structlog.get_logger(__name__)


class BlobStore(Protocol):
    """Stores binary assets and returns a stable retrieval URL."""

    async def upload(self, content: bytes, folder: str, filename: str) -> UploadedMedia: ...


class CloudinaryBlobStore:
    """Uploads files to Cloudinary."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str) -> None:
        cloudinary.config(cloud_name=cloud_name, api_key=api_key, api_secret=api_secret, secure=True)

    async def upload(self, content: bytes, folder: str, filename: str) -> UploadedMedia:
        """Upload file content into a Cloudinary folder.

        Args:
            content: File content bytes
            folder: Cloudinary folder name
            filename: Original filename, used only for logging

        Returns:
            Uploaded asset information

        Raises:
            MediaUploadError: If Cloudinary rejects the file or cannot be reached
        """
        try:
            result = await asyncio.to_thread(_upload_sync, content, folder)
        except (cloudinary.exceptions.Error, ValueError) as e:
            # The SDK raises ValueError for missing credentials or cloud name
            logger.warning("Cloudinary upload failed", folder=folder, filename=filename, error=str(e))
            raise MediaUploadError(f"Cloudinary upload failed: {e}") from e

        secure_url = result.get("secure_url")
        if not secure_url:
            raise MediaUploadError("Cloudinary response has no secure_url")

        logger.debug("Uploaded to Cloudinary", folder=folder, filename=filename, public_id=result.get("public_id"))
        return UploadedMedia(
            url=secure_url,
            public_id=result.get("public_id", ""),
            resource_type=result.get("resource_type", "image"),
            format=result.get("format"),
            size=result.get("bytes"),
        )


def _upload_sync(content: bytes, folder: str) -> dict[str, Any]:
    return dict(cloudinary.uploader.upload(BytesIO(content), folder=folder, resource_type="image"))
