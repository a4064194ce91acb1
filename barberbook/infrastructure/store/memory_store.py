from __future__ import annotations

from barberbook.application.ports.key_value_store import KeyValueStorePort


class MemoryKeyValueStore(KeyValueStorePort):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._slots.get(key)

    def save(self, key: str, text: str) -> None:
        self._slots[key] = text
