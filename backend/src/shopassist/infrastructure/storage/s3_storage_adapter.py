"""S3 Storage Adapter - ObjectStoragePort over boto3.

Looks up uploaded query images by storage key and signs short-lived GET URLs
the vision model can fetch. Works against AWS S3 and MinIO.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import asyncio
import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...config import Settings, settings as default_settings
from ...domain.storage import ObjectStoragePort, StorageError

logger = logging.getLogger(__name__)

# HEAD responses that mean "no such object" rather than "storage unavailable"
NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "Unknown")


class S3StorageAdapter(ObjectStoragePort):
    """Read-only view of the image bucket.

    boto3 is synchronous; calls run in a worker thread so searches do not
    block the event loop.

    Example:
        storage = S3StorageAdapter("http://localhost:9000", "minioadmin", "minioadmin", "shopassist-images")
        url = await storage.generate_presigned_url("uploads/3f2a.png", expires_in_seconds=600)
    """

    def __init__(
        self,
        endpoint_url: Optional[str],
        access_key: str,
        secret_key: str,
        bucket_name: str,
        region: str = "us-east-1",
    ):
        # MinIO only accepts SigV4 presigned URLs
        self.s3_client = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region,
            config=Config(signature_version="s3v4"),
        )
        self.bucket_name = bucket_name
        self.region = region
        logger.info(f"S3 image storage: bucket={bucket_name} endpoint={endpoint_url or 'AWS S3'}")

    async def file_exists(self, storage_key: str) -> bool:
        """HEAD the object.

        Raises:
            StorageError: If storage cannot answer (anything other than "not found")
        """
        try:
            await asyncio.to_thread(self.s3_client.head_object, Bucket=self.bucket_name, Key=storage_key)
        except ClientError as e:
            code = _error_code(e)
            if code in NOT_FOUND_CODES:
                return False
            logger.error(f"HEAD {storage_key} failed with {code}")
            raise StorageError(f"Failed to check file existence: {code}") from e
        except BotoCoreError as e:
            logger.error(f"HEAD {storage_key} failed: {e}")
            raise StorageError(f"Storage unavailable: {e}") from e
        return True

    async def generate_presigned_url(self, storage_key: str, expires_in_seconds: int = 3600) -> str:
        """Sign a GET URL for an existing object.

        Raises:
            FileNotFoundError: If the object does not exist
            StorageError: If signing fails
        """
        if not await self.file_exists(storage_key):
            raise FileNotFoundError(f"File not found: {storage_key}")

        try:
            url = self.s3_client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket_name, "Key": storage_key},
                ExpiresIn=expires_in_seconds,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Signing {storage_key} failed: {e}")
            raise StorageError(f"Failed to generate presigned URL: {e}") from e

        logger.debug(f"Presigned {storage_key} for {expires_in_seconds}s")
        return url


def build_storage_from_settings(settings: Optional[Settings] = None) -> S3StorageAdapter:
    """Create the storage adapter from S3_* settings."""
    settings = settings or default_settings
    return S3StorageAdapter(
        endpoint_url=settings.S3_ENDPOINT_URL,
        access_key=settings.S3_ACCESS_KEY_ID,
        secret_key=settings.S3_SECRET_ACCESS_KEY,
        bucket_name=settings.S3_BUCKET_NAME,
        region=settings.S3_REGION,
    )
