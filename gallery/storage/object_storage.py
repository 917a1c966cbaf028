from abc import ABC, abstractmethod


class StorageError(Exception):
    """Base class for object storage failures."""

    def __init__(self, message: str, bucket: str) -> None:
        super().__init__(message)
        self.bucket = bucket


class ListingError(StorageError):
    """Listing the bucket failed (network, credentials, missing bucket)."""


class SigningError(StorageError):
    """A presigned URL could not be generated for a key."""

    def __init__(self, message: str, bucket: str, key: str) -> None:
        super().__init__(message, bucket)
        self.key = key


class ObjectStorage(ABC):
    """
    Interface for read-only object storage backends.
    """

    @abstractmethod
    def list_keys(self, prefix: str = "") -> list[str]:
        """
        Return the object keys under prefix, in the order the backend
        returned them. A single listing call; results are not paginated.
        """
        error_message = "list_keys not implemented"
        raise NotImplementedError(error_message)

    @abstractmethod
    def presign_get(self, key: str, expires_in: int) -> str:
        """
        Return a URL granting read access to key for expires_in seconds.
        """
        error_message = "presign_get not implemented"
        raise NotImplementedError(error_message)
