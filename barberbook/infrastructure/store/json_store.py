from __future__ import annotations

import logging
from pathlib import Path

from barberbook.application.exceptions import StorageError
from barberbook.application.ports.key_value_store import KeyValueStorePort

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStorePort):
    """One <key>.json file per slot under data_dir."""

    def __init__(self, data_dir: str = "./data") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        """Get the file path for a slot key."""
        return self._data_dir / f"{key}.json"

    def load(self, key: str) -> str | None:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return None
        try:
            return file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not read slot {key!r}: {e}") from e

    def save(self, key: str, text: str) -> None:
        """Overwrite the slot atomically via a temp file and rename."""
        file_path = self._get_file_path(key)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(text)
            temp_path.replace(file_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            logger.error("Slot write failed", extra={"slot": key, "reason": str(e)})
            raise StorageError(f"Could not write slot {key!r}: {e}") from e
