"""Pluggable archive stores behind the IArchiveStore Protocol."""

from __future__ import annotations

from rostercheck.core.config import AppSettings
from rostercheck.core.protocols import IArchiveStore
from rostercheck.persistence.memory_backend import MemoryArchiveStore
from rostercheck.persistence.redis_backend import RedisArchiveStore
from rostercheck.persistence.s3_backend import S3ArchiveStore


def create_archive_store(settings: AppSettings | None = None) -> IArchiveStore:
    """Create the configured archive store from application settings."""
    if settings is None:
        settings = AppSettings()

    session = settings.session
    if session.backend == "redis":
        return RedisArchiveStore(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            data_key=session.data_key,
            name_key=session.name_key,
        )
    if session.backend == "s3":
        return S3ArchiveStore(
            bucket=settings.s3.bucket,
            prefix=settings.s3.prefix,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )
    return MemoryArchiveStore(data_key=session.data_key, name_key=session.name_key)


__all__ = ["MemoryArchiveStore", "RedisArchiveStore", "S3ArchiveStore", "create_archive_store"]
