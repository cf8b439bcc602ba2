"""Unit tests for RedisArchiveStore using fakeredis."""

from __future__ import annotations

from unittest.mock import patch

import fakeredis
import pytest

from rostercheck.core.exceptions import SessionStoreError
from rostercheck.core.protocols import IArchiveStore
from rostercheck.persistence.redis_backend import RedisArchiveStore, from_data_url, to_data_url

DATA_KEY = "renumeration:zip:dataUrl"
NAME_KEY = "renumeration:zip:name"


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def fake_client(fake_server):
    return fakeredis.FakeRedis(server=fake_server, decode_responses=True)


@pytest.fixture
def backend(fake_client):
    with patch("redis.Redis", return_value=fake_client):
        return RedisArchiveStore(host="localhost", port=6379, db=0)


class TestSave:
    def test_round_trips_bytes_and_name(self, backend):
        backend.save(b"PK\x03\x04\x00\xff", "final.zip")
        assert backend.load() == (b"PK\x03\x04\x00\xff", "final.zip")

    def test_stores_data_url_under_named_keys(self, backend, fake_client):
        backend.save(b"abc", "final.zip")
        assert fake_client.get(DATA_KEY) == "data:application/zip;base64,YWJj"
        assert fake_client.get(NAME_KEY) == "final.zip"

    def test_overwrites_previous_archive(self, backend):
        backend.save(b"old", "old.zip")
        backend.save(b"new", "new.zip")
        assert backend.load() == (b"new", "new.zip")


class TestLoad:
    def test_returns_none_when_empty(self, backend):
        assert backend.load() is None

    def test_missing_name_is_blank(self, backend, fake_client):
        fake_client.set(DATA_KEY, to_data_url(b"abc"))
        assert backend.load() == (b"abc", "")

    def test_corrupt_payload_raises(self, backend, fake_client):
        fake_client.set(DATA_KEY, "data:application/zip;base64,!!!")
        with pytest.raises(SessionStoreError):
            backend.load()


class TestClear:
    def test_removes_both_keys(self, backend, fake_client):
        backend.save(b"abc", "final.zip")
        backend.clear()
        assert fake_client.get(DATA_KEY) is None
        assert fake_client.get(NAME_KEY) is None

    def test_noop_when_empty(self, backend):
        backend.clear()


class TestErrorWrapping:
    def test_save_wraps_redis_error(self):
        b = RedisArchiveStore.__new__(RedisArchiveStore)
        b._data_key, b._name_key = DATA_KEY, NAME_KEY
        b._client = None  # will cause AttributeError -> SessionStoreError
        with pytest.raises(SessionStoreError):
            b.save(b"x", "x.zip")


def test_satisfies_protocol(backend):
    assert isinstance(backend, IArchiveStore)


def test_bare_base64_accepted():
    assert from_data_url("YWJj") == b"abc"
