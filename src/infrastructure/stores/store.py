from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StoreError(RuntimeError):
    pass


class KeyValueStore(ABC):
    """Durable home for the serialized transaction and goal collections, one entry per key."""

    @abstractmethod
    def load(self, key: str) -> list[dict[str, Any]] | None:
        """Return the stored collection, or None when nothing usable is stored under `key`."""
        raise NotImplementedError

    @abstractmethod
    def save(self, key: str, collection: list[dict[str, Any]]) -> None:
        """Persist `collection` under `key`; raise StoreError on failure."""
        raise NotImplementedError
