"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ArchiveConfig(BaseSettings):
    """Where things live inside an imported roster archive."""

    model_config = {"env_prefix": "ROSTERCHECK_ARCHIVE_"}

    # Primary path first, fallback after it.
    metadata_paths: list[str] = ["metadata.json", "internal/metadata.json"]
    timestamp_paths: list[str] = ["last_modified.txt", "internal/last_modified.txt"]
    attendance_paths: list[str] = [
        "attendance/day-{day}/slot-{slot}.json",
        "internal/attendance/day-{day}/slot-{slot}.json",
    ]
    max_concurrency: int = 16


class SessionStoreConfig(BaseSettings):
    """Persisted import session configuration."""

    model_config = {"env_prefix": "ROSTERCHECK_SESSION_"}

    backend: Literal["memory", "redis", "s3"] = "memory"
    data_key: str = "renumeration:zip:dataUrl"
    name_key: str = "renumeration:zip:name"
    default_file_name: str = "attendance.zip"


class RedisConfig(BaseSettings):
    """Redis session store configuration."""

    model_config = {"env_prefix": "ROSTERCHECK_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class S3Config(BaseSettings):
    """S3 session store configuration."""

    model_config = {"env_prefix": "ROSTERCHECK_S3_"}

    bucket: str = "rostercheck-sessions"
    prefix: str = "sessions/default/"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ROSTERCHECK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    preview_limit: int = 3

    archive: ArchiveConfig = ArchiveConfig()
    session: SessionStoreConfig = SessionStoreConfig()
    redis: RedisConfig = RedisConfig()
    s3: S3Config = S3Config()
