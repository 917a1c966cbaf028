#!/usr/bin/env python3
"""
Script to print the images the gallery page would show.

- Loads S3 and CDN settings from .env (or environment variables).
- Lists the bucket once, filters to image keys and resolves each URL.
- Prints one "key<TAB>url" line per image to stdout.

Required in .env or environment:
    S3_BUCKET_NAME

Optional:
    S3_REGION, S3_ENDPOINT, S3_ACCESS_KEY, S3_SECRET_KEY, S3_PREFIX,
    CDN_DOMAIN, IMAGE_EXTENSIONS, S3_URL_EXPIRY

Usage:
    python scripts/list_gallery_images.py
"""

import logging
import sys

from dotenv import load_dotenv  # type: ignore[import]

from gallery.config import ConfigurationError, load_settings
from gallery.images import collect_gallery
from gallery.storage import get_storage_backend

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 1
    if not settings.s3_bucket_name:
        print(  # noqa: T201
            "Missing required environment variable: S3_BUCKET_NAME",
            file=sys.stderr,
        )
        return 1
    storage = get_storage_backend(settings)
    for image in collect_gallery(storage, settings):
        print(f"{image.key}\t{image.url}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
