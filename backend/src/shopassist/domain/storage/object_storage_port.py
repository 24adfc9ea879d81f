"""Object Storage Port - Domain interface for S3-compatible storage.

Uploaded query images live in object storage; search only needs to check that a
stored image exists and to turn its key into a fetchable URL.
"""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class ObjectStoragePort(ABC):
    """Port interface for S3-compatible object storage operations.

    Example Usage:
        storage = S3StorageAdapter(...)
        if await storage.file_exists("uploads/3f2a.png"):
            url = await storage.generate_presigned_url("uploads/3f2a.png")
    """

    @abstractmethod
    async def file_exists(self, storage_key: str) -> bool:
        """Check if a file exists in object storage.

        Args:
            storage_key: Storage key to check

        Returns:
            bool: True if file exists, False otherwise
        """
        pass

    @abstractmethod
    async def generate_presigned_url(
        self,
        storage_key: str,
        expires_in_seconds: int = 3600,
    ) -> str:
        """Generate a presigned URL for direct download.

        Args:
            storage_key: Storage key of file to generate URL for
            expires_in_seconds: URL expiration time (default: 1 hour)

        Returns:
            str: Presigned URL (valid for expires_in_seconds)

        Raises:
            FileNotFoundError: If file doesn't exist
            StorageError: If URL generation fails
        """
        pass
