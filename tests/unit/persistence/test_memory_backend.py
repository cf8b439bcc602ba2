"""Tests for the in-memory archive store and the store factory."""

from __future__ import annotations

from rostercheck.core.config import AppSettings, SessionStoreConfig
from rostercheck.persistence.protocols import IArchiveStore
from rostercheck.persistence import MemoryArchiveStore, RedisArchiveStore, create_archive_store


class TestMemoryArchiveStore:
    def test_round_trip(self):
        store = MemoryArchiveStore()
        store.save(b"abc", "final.zip")
        assert store.load() == (b"abc", "final.zip")

    def test_empty(self):
        assert MemoryArchiveStore().load() is None

    def test_clear(self):
        store = MemoryArchiveStore()
        store.save(b"abc", "final.zip")
        store.clear()
        assert store.load() is None

    def test_satisfies_protocol(self):
        assert isinstance(MemoryArchiveStore(), IArchiveStore)


class TestFactory:
    def test_defaults_to_memory(self):
        assert isinstance(create_archive_store(AppSettings()), MemoryArchiveStore)

    def test_redis_backend(self):
        settings = AppSettings(session=SessionStoreConfig(backend="redis"))
        assert isinstance(create_archive_store(settings), RedisArchiveStore)
