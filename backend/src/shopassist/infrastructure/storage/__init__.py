"""Object storage adapters"""

from .s3_storage_adapter import S3StorageAdapter, build_storage_from_settings

__all__ = ["S3StorageAdapter", "build_storage_from_settings"]
