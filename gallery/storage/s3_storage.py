import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .object_storage import ListingError, ObjectStorage, SigningError

if TYPE_CHECKING:
    from gallery.config import Settings

logger = logging.getLogger(__name__)


def create_s3_client(settings: "Settings") -> Any:  # noqa: ANN401
    """
    Build a boto3 S3 client for an S3-compatible endpoint.
    """
    return boto3.client(
        "s3",
        region_name=settings.s3_region,
        endpoint_url=settings.s3_endpoint or None,
        aws_access_key_id=settings.s3_access_key,
        aws_secret_access_key=settings.s3_secret_key,
        verify=settings.s3_verify_ssl,
        config=Config(signature_version="s3v4"),
    )


class S3Storage(ObjectStorage):
    """
    Object storage using the S3 API through boto3.
    """

    def __init__(self, bucket: str, client: Any) -> None:  # noqa: ANN401
        self.bucket = bucket
        self.client = client

    def list_keys(self, prefix: str = "") -> list[str]:
        try:
            result = self.client.list_objects_v2(Bucket=self.bucket, Prefix=prefix)
        except (BotoCoreError, ClientError) as exc:
            error_message = f"Failed to list bucket {self.bucket!r}: {exc}"
            raise ListingError(error_message, self.bucket) from exc
        if result.get("IsTruncated"):
            # Only the first page is used
            logger.debug(
                "Listing of %s/%s truncated at %d keys",
                self.bucket,
                prefix,
                result.get("KeyCount", 0),
            )
        return [obj["Key"] for obj in result.get("Contents", [])]

    def presign_get(self, key: str, expires_in: int) -> str:
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as exc:
            error_message = f"Failed to presign {self.bucket!r}/{key!r}: {exc}"
            raise SigningError(error_message, self.bucket, key) from exc
