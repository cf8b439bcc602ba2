"""S3 archive store implementing IArchiveStore."""

from __future__ import annotations

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rostercheck.core.exceptions import SessionStoreError

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


class S3ArchiveStore:
    """Production IArchiveStore backed by two S3 objects under a prefix."""

    def __init__(self, bucket: str, prefix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None,
                 data_key: str = "archive.zip", name_key: str = "archive.name") -> None:
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._data_path = f"{prefix}{data_key}"
        self._name_path = f"{prefix}{name_key}"
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def _get(self, key: str) -> bytes | None:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=key)
            return resp["Body"].read()
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return None
            raise SessionStoreError(f"S3 read failed for {key!r}: {exc}") from exc
        except BotoCoreError as exc:
            raise SessionStoreError(f"S3 read failed for {key!r}: {exc}") from exc

    def save(self, data: bytes, name: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=self._data_path, Body=data, ContentType="application/zip",
            )
            self._client.put_object(
                Bucket=self._bucket, Key=self._name_path, Body=name.encode("utf-8"),
                ContentType="text/plain; charset=utf-8",
            )
        except (ClientError, BotoCoreError) as exc:
            raise SessionStoreError(f"S3 write failed for {self._data_path!r}: {exc}") from exc

    def load(self) -> tuple[bytes, str] | None:
        data = self._get(self._data_path)
        if data is None:
            return None
        name = self._get(self._name_path)
        return data, name.decode("utf-8", errors="replace") if name else ""

    def clear(self) -> None:
        try:
            self._client.delete_object(Bucket=self._bucket, Key=self._data_path)
            self._client.delete_object(Bucket=self._bucket, Key=self._name_path)
        except (ClientError, BotoCoreError) as exc:
            raise SessionStoreError(f"S3 delete failed for {self._data_path!r}: {exc}") from exc
