from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from syncdash.domain.ports import KeyValueStorePort


@dataclass
class StorageMemory(KeyValueStorePort):
    """In-process substitute for ``StorageLocal`` that records every write."""

    data: Dict[str, str] = field(default_factory=dict)
    writes: List[Tuple[str, str, Optional[str]]] = field(default_factory=list)

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)
        self.writes.append(("set", key, str(value)))

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
        self.writes.append(("remove", key, None))
