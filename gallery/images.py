"""
Listing, filtering and URL resolution for gallery images.

Both entry points recover from storage failures locally: a failed listing
yields no images and a failed signature drops that one image, so a bad
backend can empty the gallery but never break the page.
"""

import logging
from collections.abc import Collection

from pydantic import BaseModel, ConfigDict

from gallery.config import DEFAULT_URL_EXPIRY_SECONDS, Settings
from gallery.storage import ListingError, ObjectStorage, SigningError

logger = logging.getLogger(__name__)


class ResolvedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    url: str


def has_allowed_extension(key: str, extensions: Collection[str]) -> bool:
    """
    True if the lowercased text after the last "." of the key's final path
    segment is one of extensions.
    """
    name = key.rsplit("/", 1)[-1]
    if "." not in name:
        return False
    return name.rsplit(".", 1)[-1].lower() in extensions


def list_images(
    storage: ObjectStorage, prefix: str, extensions: Collection[str]
) -> list[str]:
    """
    Return the image keys under prefix, in listing order.
    Returns an empty list if the backend cannot be listed.
    """
    try:
        keys = storage.list_keys(prefix)
    except ListingError as exc:
        logger.warning("Listing bucket %s failed: %s", exc.bucket, exc)
        return []
    return [key for key in keys if has_allowed_extension(key, extensions)]


def cdn_url(cdn_base: str, key: str) -> str:
    return cdn_base.rstrip("/") + "/" + key.lstrip("/")


def resolve_image_url(
    storage: ObjectStorage,
    key: str,
    cdn_base: str = "",
    expires_in: int = DEFAULT_URL_EXPIRY_SECONDS,
) -> str:
    """
    Return a viewable URL for key, or "" if one could not be produced.

    With a CDN base the URL is built locally and storage is not touched.
    Otherwise the backend signs a GET URL valid for expires_in seconds.
    """
    if cdn_base:
        return cdn_url(cdn_base, key)
    try:
        return storage.presign_get(key, expires_in)
    except SigningError as exc:
        logger.warning("Signing %s/%s failed: %s", exc.bucket, exc.key, exc)
        return ""


def collect_gallery(storage: ObjectStorage, settings: Settings) -> list[ResolvedImage]:
    """
    List, filter and resolve every image for one page render.
    Keys whose URL could not be resolved are left out.
    """
    images: list[ResolvedImage] = []
    for key in list_images(storage, settings.s3_prefix, settings.image_extensions):
        url = resolve_image_url(
            storage,
            key,
            cdn_base=settings.cdn_domain,
            expires_in=settings.url_expiry_seconds,
        )
        if url:
            images.append(ResolvedImage(key=key, url=url))
    return images
