from __future__ import annotations
import json, logging, os
from typing import Dict, Optional
from syncdash.domain.ports import KeyValueStorePort


class StorageLocal(KeyValueStorePort):
    """Local filesystem key-value store (one JSON object of strings).

    Reads treat a missing or corrupt file as empty. Writes are synchronous;
    a failed write is logged and otherwise ignored.
    """

    FILENAME = "local_storage.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir
        self._log = logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILENAME)

    # ---- KeyValueStorePort ----
    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._dump(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._dump(data)

    # ---- File I/O ----
    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            self._log.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, data: Dict[str, str]) -> None:
        tmp_path = f"{self.path}.tmp"
        try:
            os.makedirs(self.root, exist_ok=True)
            # write to a sibling file first so a crash never leaves half a JSON object
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            self._log.warning("Could not persist storage file %s: %s", self.path, exc)
