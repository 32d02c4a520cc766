from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from infrastructure.stores.store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Stores each key as `<data_dir>/<key>.json`. Last write wins."""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self._data_dir = Path(data_dir or os.getenv("FINSMART_DATA_DIR", "data"))

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def load(self, key: str) -> list[dict[str, Any]] | None:
        path = self.path_for(key)
        if not path.exists():
            logger.info("JsonFileStore no data key=%s path=%s", key, path)
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("JsonFileStore unreadable data key=%s path=%s: %s", key, path, exc)
            return None
        if not isinstance(payload, list):
            logger.warning("JsonFileStore expected a list key=%s got=%s", key, type(payload).__name__)
            return None
        return payload

    def save(self, key: str, collection: list[dict[str, Any]]) -> None:
        path = self.path_for(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(collection, f, ensure_ascii=False, indent=2)
            tmp.replace(path)
        except (OSError, TypeError, ValueError) as exc:
            raise StoreError(f"Failed to save {key} to {path}: {exc}") from exc
        logger.info("JsonFileStore saved key=%s items=%d", key, len(collection))
