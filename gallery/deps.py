from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from gallery.config import Settings, load_settings
from gallery.storage import ObjectStorage, get_storage_backend


@lru_cache
def get_settings() -> Settings:
    """
    Dependency returning the process-wide settings, loaded on first use.
    """
    return load_settings()


@lru_cache
def _storage_for(settings: Settings) -> ObjectStorage:
    return get_storage_backend(settings)


def get_storage(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ObjectStorage:
    """
    Dependency that provides the storage backend. One backend (and boto3
    client) is kept per settings object; listings and URLs are not cached.
    """
    return _storage_for(settings)
