"""Object storage domain port"""

from .object_storage_port import ObjectStoragePort, StorageError

__all__ = ["ObjectStoragePort", "StorageError"]
