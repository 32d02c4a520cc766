from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from infrastructure.stores.json_file_store import JsonFileStore
from infrastructure.stores.memory_store import InMemoryStore
from infrastructure.stores.store import StoreError

ROWS = [{"id": "1", "description": "Grocery Store", "amount": 85.5, "date": "2024-01-15", "category": "Groceries"}]


class JsonFileStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.data_dir = Path(self._tmp.name) / "data"
        self.store = JsonFileStore(self.data_dir)

    def test_missing_key_loads_as_none(self) -> None:
        self.assertIsNone(self.store.load("finSmart_transactions"))

    def test_saved_collection_loads_back(self) -> None:
        self.store.save("finSmart_transactions", ROWS)

        self.assertTrue(self.store.path_for("finSmart_transactions").exists())
        self.assertEqual(self.store.load("finSmart_transactions"), ROWS)

    def test_last_write_wins(self) -> None:
        self.store.save("finSmart_goals", [{"id": "1"}])
        self.store.save("finSmart_goals", [{"id": "2"}])
        self.assertEqual(self.store.load("finSmart_goals"), [{"id": "2"}])

    def test_malformed_json_loads_as_none(self) -> None:
        self.data_dir.mkdir(parents=True)
        self.store.path_for("finSmart_goals").write_text("{not json", encoding="utf-8")
        self.assertIsNone(self.store.load("finSmart_goals"))

    def test_non_list_payload_loads_as_none(self) -> None:
        self.data_dir.mkdir(parents=True)
        self.store.path_for("finSmart_goals").write_text('{"id": "1"}', encoding="utf-8")
        self.assertIsNone(self.store.load("finSmart_goals"))

    def test_write_failure_raises_store_error(self) -> None:
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileStore(blocker)

        with self.assertRaises(StoreError):
            store.save("finSmart_transactions", ROWS)

    def test_data_dir_defaults_from_environment(self) -> None:
        with patch.dict(os.environ, {"FINSMART_DATA_DIR": self._tmp.name}):
            store = JsonFileStore()
        self.assertEqual(store.data_dir, Path(self._tmp.name))


class InMemoryStoreTests(unittest.TestCase):
    def test_loaded_collections_are_copies(self) -> None:
        store = InMemoryStore({"finSmart_transactions": ROWS})

        loaded = store.load("finSmart_transactions")
        loaded[0]["amount"] = 1.0

        self.assertEqual(store.load("finSmart_transactions")[0]["amount"], 85.5)
        self.assertIsNone(store.load("finSmart_goals"))


if __name__ == "__main__":
    unittest.main()
