import asyncio

import structlog

from mediarecords.core.core import Service
from mediarecords.core.modules.media.image import is_valid_image
from mediarecords.core.modules.media.models import UploadedMedia
from mediarecords.errors import ValidationError

logger = structlog.get_logger(__name__)


class MediaService(Service):
    """Validates uploaded images and forwards them to the blob store."""

    async def upload_image(self, content: bytes, folder: str, filename: str) -> UploadedMedia:
        """Validate image bytes and upload them.

        Raises:
            ValidationError: If the file is empty, too large, or not an image
            MediaUploadError: If the blob store fails
        """
        if not content:
            raise ValidationError("Uploaded file is empty")

        max_size = self.core.config.max_upload_size
        if len(content) > max_size:
            raise ValidationError(f"File exceeds maximum size of {max_size} bytes")

        if not await asyncio.to_thread(is_valid_image, content):
            raise ValidationError(f"File is not a valid image: {filename}")

        media = await self.core.blob_store.upload(content, folder, filename)
        logger.debug("Uploaded image", folder=folder, filename=filename, url=media.url)
        return media
