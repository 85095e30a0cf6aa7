import time
from functools import lru_cache

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from structlog import get_logger

from realty.core.config import get_settings
from realty.services.parsing import sanitize_filename

logger = get_logger()

KEY_PREFIX = "real-estate"
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"}


class StorageError(Exception):
    pass


class StorageNotConfigured(StorageError):
    pass


@lru_cache
def get_s3_client():
    settings = get_settings()
    return boto3.client(
        "s3",
        endpoint_url=settings.S3_ENDPOINT or None,
        region_name=settings.S3_REGION,
        aws_access_key_id=settings.S3_ACCESS_KEY,
        aws_secret_access_key=settings.S3_SECRET_KEY,
        # S3-compatible providers generally only support path-style addressing.
        config=Config(s3={"addressing_style": "path"}, signature_version="s3v4"),
    )


def _bucket() -> str:
    settings = get_settings()
    if not settings.S3_BUCKET_NAME or not settings.S3_ENDPOINT:
        raise StorageNotConfigured("Object storage is not configured")
    return settings.S3_BUCKET_NAME


def object_key(filename: str) -> str:
    return f"{KEY_PREFIX}/{int(time.time() * 1000)}-{sanitize_filename(filename)}"


def public_url(key: str) -> str:
    settings = get_settings()
    return f"{settings.S3_ENDPOINT.rstrip('/')}/{settings.S3_BUCKET_NAME}/{key}"


def upload_bytes(data: bytes, filename: str, content_type: str) -> dict:
    """Store an image with a public-read ACL and return its ``url`` and ``key``."""
    bucket = _bucket()
    key = object_key(filename)
    try:
        get_s3_client().put_object(
            Bucket=bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
            ACL="public-read",
        )
    except (BotoCoreError, ClientError) as exc:
        logger.error("S3 upload failed", key=key, error=str(exc))
        raise StorageError("Failed to upload file to storage") from exc

    url = public_url(key)
    logger.info("Uploaded file", key=key, size=len(data), content_type=content_type)
    return {"url": url, "key": key}


def presigned_upload_url(filename: str, content_type: str = "image/jpeg") -> dict:
    bucket = _bucket()
    key = object_key(filename)
    try:
        upload_url = get_s3_client().generate_presigned_url(
            "put_object",
            Params={"Bucket": bucket, "Key": key, "ContentType": content_type, "ACL": "public-read"},
            ExpiresIn=get_settings().UPLOAD_URL_TTL_SECONDS,
        )
    except (BotoCoreError, ClientError) as exc:
        logger.error("Presigning upload URL failed", key=key, error=str(exc))
        raise StorageError("Failed to generate upload URL") from exc
    return {"upload_url": upload_url, "file_url": public_url(key)}
