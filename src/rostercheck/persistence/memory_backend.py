"""In-memory archive store for unit tests and single-process dev runs."""

from __future__ import annotations


class MemoryArchiveStore:
    """Dict-backed IArchiveStore."""

    def __init__(self, data_key: str = "archive:data", name_key: str = "archive:name") -> None:
        self._data_key = data_key
        self._name_key = name_key
        self._slots: dict[str, bytes | str] = {}

    def save(self, data: bytes, name: str) -> None:
        self._slots[self._data_key] = bytes(data)
        self._slots[self._name_key] = name

    def load(self) -> tuple[bytes, str] | None:
        data = self._slots.get(self._data_key)
        if data is None:
            return None
        return data, str(self._slots.get(self._name_key, ""))  # type: ignore[return-value]

    def clear(self) -> None:
        self._slots.pop(self._data_key, None)
        self._slots.pop(self._name_key, None)
