from __future__ import annotations

import copy
from typing import Any

from infrastructure.stores.store import KeyValueStore


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, list[dict[str, Any]]] | None = None):
        self._store: dict[str, list[dict[str, Any]]] = copy.deepcopy(initial or {})

    def load(self, key: str) -> list[dict[str, Any]] | None:
        value = self._store.get(key)
        return copy.deepcopy(value) if value is not None else None

    def save(self, key: str, collection: list[dict[str, Any]]) -> None:
        self._store[key] = copy.deepcopy(collection)
