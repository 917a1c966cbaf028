from typing import TYPE_CHECKING

from .object_storage import ListingError, ObjectStorage, SigningError, StorageError
from .s3_storage import S3Storage, create_s3_client

if TYPE_CHECKING:
    from gallery.config import Settings


def get_storage_backend(settings: "Settings") -> ObjectStorage:
    """
    Factory for the storage backend described by settings.
    """
    return S3Storage(settings.s3_bucket_name, create_s3_client(settings))


__all__ = [
    "ListingError",
    "ObjectStorage",
    "S3Storage",
    "SigningError",
    "StorageError",
    "create_s3_client",
    "get_storage_backend",
]
