"""Resolve an image reference (URL or storage key) to a fetchable URL."""

import logging
from typing import Optional

from ..domain.storage import ObjectStoragePort
from .ports import ImageNotFoundError

logger = logging.getLogger(__name__)

PASSTHROUGH_PREFIXES = ("http://", "https://", "data:image/")


class ImageResolver:
    """Turns the image reference passed to image search into a URL.

    - http(s) URLs and data:image URLs are returned unchanged
    - anything else is treated as an object-storage key and must exist;
      it is exchanged for a presigned URL

    Raises ImageNotFoundError before any embedding or vector search happens.
    """

    def __init__(self, storage: Optional[ObjectStoragePort] = None, url_ttl_seconds: int = 3600):
        self.storage = storage
        self.url_ttl_seconds = url_ttl_seconds

    async def resolve(self, image_ref: str) -> str:
        ref = (image_ref or "").strip()
        if not ref:
            raise ImageNotFoundError(image_ref, "empty image reference")

        if ref.lower().startswith(PASSTHROUGH_PREFIXES):
            return ref

        if self.storage is None:
            raise ImageNotFoundError(ref, "not a URL and no object storage configured")

        # generate_presigned_url checks that the object exists
        try:
            return await self.storage.generate_presigned_url(ref, expires_in_seconds=self.url_ttl_seconds)
        except FileNotFoundError as e:
            logger.info(f"Stored image not found: storage_key={ref}")
            raise ImageNotFoundError(ref, "no stored image with this key") from e
