import logging
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from gallery.config import Settings
from gallery.deps import get_settings, get_storage
from gallery.main import app
from gallery.storage import ListingError, ObjectStorage, SigningError

# Configure basic logging for tests
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

BUCKET = "gallery-bucket"


class FakeStorage(ObjectStorage):
    """
    In-memory storage that records every backend call.
    """

    def __init__(
        self,
        keys: list[str] | None = None,
        *,
        fail_listing: bool = False,
        fail_signing: set[str] | None = None,
    ) -> None:
        self.keys = keys or []
        self.fail_listing = fail_listing
        self.fail_signing = fail_signing or set()
        self.list_calls: list[str] = []
        self.sign_calls: list[tuple[str, int]] = []

    def list_keys(self, prefix: str = "") -> list[str]:
        self.list_calls.append(prefix)
        if self.fail_listing:
            error_message = "bucket unreachable"
            raise ListingError(error_message, BUCKET)
        return [key for key in self.keys if key.startswith(prefix)]

    def presign_get(self, key: str, expires_in: int) -> str:
        self.sign_calls.append((key, expires_in))
        if key in self.fail_signing:
            error_message = "access denied"
            raise SigningError(error_message, BUCKET, key)
        return f"https://signed.example.com/{BUCKET}/{key}?X-Amz-Expires={expires_in}"


@pytest.fixture
def settings() -> Settings:
    return Settings(s3_bucket_name=BUCKET)


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage(["a.jpg", "b.PNG", "notes.txt", "c.webp"])


@pytest.fixture
def client(
    settings: Settings, storage: FakeStorage
) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()
