"""S3 implementation of ObjectStorage."""

import boto3


class S3ObjectStorage:
    """ObjectStorage implementation using S3."""

    def __init__(
        self,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._client = boto3.client(
            "s3",
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Stream s3://bucket/key to the local path."""
        self._client.download_file(bucket, key, path)

    def upload_file(self, bucket: str, key: str, path: str) -> None:
        """Upload the local path; boto3 switches to multipart for large files."""
        self._client.upload_file(path, bucket, key)

    def make_public(self, bucket: str, key: str) -> None:
        """Set the object ACL to public-read."""
        self._client.put_object_acl(Bucket=bucket, Key=key, ACL="public-read")
