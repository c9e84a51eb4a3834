"""Google Cloud Storage implementation of ObjectStorage."""

from __future__ import annotations

from google.cloud import storage as gcs_storage


class GCSObjectStorage:
    """ObjectStorage implementation using google-cloud-storage."""

    def __init__(self, client: gcs_storage.Client | None = None) -> None:
        self._client = client or gcs_storage.Client()

    def _blob(self, bucket: str, key: str) -> gcs_storage.Blob:
        return self._client.bucket(bucket).blob(key)

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Stream gs://bucket/key to the local path."""
        self._blob(bucket, key).download_to_filename(path)

    def upload_file(self, bucket: str, key: str, path: str) -> None:
        """Upload the local path to gs://bucket/key (resumable for large files)."""
        self._blob(bucket, key).upload_from_filename(path)

    def make_public(self, bucket: str, key: str) -> None:
        """Add allUsers READER to the object ACL."""
        self._blob(bucket, key).make_public()
