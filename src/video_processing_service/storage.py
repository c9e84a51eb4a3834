"""
Raw/processed video storage on top of an ObjectStorage provider.

The provider (gcp | aws) is chosen by STORAGE_PROVIDER and built once at
startup; bucket names come from settings, never from the request.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ServiceSettings
from .errors import StorageError
from .interfaces import ObjectStorage
from .staging import LocalStaging

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gcp", "aws")


def _provider(settings: ServiceSettings) -> str:
    """Return STORAGE_PROVIDER stripped and lowercased."""
    return (settings.storage_provider or "gcp").strip().lower()


def object_storage_from_settings(settings: ServiceSettings) -> ObjectStorage:
    """Build the ObjectStorage for the configured provider."""
    provider = _provider(settings)
    if provider == "gcp":
        from .storage_gcp import GCSObjectStorage

        return GCSObjectStorage()
    if provider == "aws":
        from .storage_aws import S3ObjectStorage

        return S3ObjectStorage(
            region_name=settings.aws_region,
            endpoint_url=settings.s3_endpoint_url,
        )
    raise ValueError(
        f"Unsupported STORAGE_PROVIDER: {settings.storage_provider!r} "
        f"(expected one of {', '.join(SUPPORTED_PROVIDERS)})"
    )


class VideoStorage:
    """Moves videos between the raw/processed buckets and local staging."""

    def __init__(
        self,
        storage: ObjectStorage,
        staging: LocalStaging,
        *,
        raw_bucket: str,
        processed_bucket: str,
    ) -> None:
        self.storage = storage
        self.staging = staging
        self.raw_bucket = raw_bucket
        self.processed_bucket = processed_bucket

    def download_raw_video(self, name: str) -> Path:
        """
        Download raw_bucket/name into the raw staging directory under the same name.

        Raises:
            StorageError: the object is missing or the transfer failed.
        """
        dest = self.staging.raw_path(name)
        try:
            self.storage.download_file(self.raw_bucket, name, str(dest))
        except Exception as e:
            logger.warning("download: %s/%s failed: %s", self.raw_bucket, name, e)
            raise StorageError("download", self.raw_bucket, name, e) from e
        logger.info("download: %s/%s downloaded to %s", self.raw_bucket, name, dest)
        return dest

    def upload_processed_video(self, name: str) -> None:
        """
        Upload the processed staging file `name` to processed_bucket/name and make it public.
        The upload completes before the ACL change is attempted.

        Raises:
            StorageError: the upload or the ACL change failed.
        """
        src = self.staging.processed_path(name)
        try:
            self.storage.upload_file(self.processed_bucket, name, str(src))
        except Exception as e:
            logger.warning("upload: %s -> %s failed: %s", src, self.processed_bucket, e)
            raise StorageError("upload", self.processed_bucket, name, e) from e
        logger.info("upload: %s uploaded to %s", name, self.processed_bucket)
        try:
            self.storage.make_public(self.processed_bucket, name)
        except Exception as e:
            logger.warning("upload: make public %s/%s failed: %s", self.processed_bucket, name, e)
            raise StorageError("make_public", self.processed_bucket, name, e) from e
