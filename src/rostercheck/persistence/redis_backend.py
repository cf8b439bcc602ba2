"""Redis archive store implementing IArchiveStore.

The archive is held as a ``data:`` URL string under one key and its origin
filename under another, so the slots stay readable with ``decode_responses``.
"""

from __future__ import annotations

import base64
import binascii

import redis

from rostercheck.core.exceptions import SessionStoreError

_DATA_URL_PREFIX = "data:application/zip;base64,"


def to_data_url(data: bytes) -> str:
    return _DATA_URL_PREFIX + base64.b64encode(data).decode("ascii")


def from_data_url(value: str) -> bytes:
    """Decode a ``data:...;base64,`` URL, or bare base64, back to bytes."""
    payload = value.split(",", 1)[1] if value.startswith("data:") else value
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SessionStoreError(f"Persisted archive is not valid base64: {exc}") from exc


class RedisArchiveStore:
    """Production IArchiveStore backed by Redis."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 data_key: str = "renumeration:zip:dataUrl",
                 name_key: str = "renumeration:zip:name") -> None:
        self._host = host
        self._port = port
        self._db = db
        self._data_key = data_key
        self._name_key = name_key
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def save(self, data: bytes, name: str) -> None:
        try:
            pipe = self._client.pipeline()
            pipe.set(self._data_key, to_data_url(data))
            pipe.set(self._name_key, name)
            pipe.execute()
        except Exception as exc:
            raise SessionStoreError(f"Redis SET failed for key={self._data_key!r}: {exc}") from exc

    def load(self) -> tuple[bytes, str] | None:
        try:
            value = self._client.get(self._data_key)
            name = self._client.get(self._name_key)
        except Exception as exc:
            raise SessionStoreError(f"Redis GET failed for key={self._data_key!r}: {exc}") from exc
        if not value:
            return None
        return from_data_url(value), name or ""

    def clear(self) -> None:
        try:
            self._client.delete(self._data_key, self._name_key)
        except Exception as exc:
            raise SessionStoreError(f"Redis DELETE failed for key={self._data_key!r}: {exc}") from exc
