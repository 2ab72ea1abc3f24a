"""
In-memory datastore adapter (no persistence).

Reference implementation of the adapter contract backed by a plain dict.
Single process, single event loop; there is no locking.
"""

import dataclasses
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .adapter import DataStoreAdapter, StoredValue, coerce_number

logger = logging.getLogger(__name__)


class MemoryAdapter(DataStoreAdapter):
    """Dict-backed adapter"""

    def __init__(self):
        self._data = {}

    async def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        if key in self._data:
            del self._data[key]
            return True
        return False

    async def has(self, key: str) -> bool:
        return key in self._data

    async def clear(self) -> None:
        self._data.clear()
        logger.debug("MemoryAdapter cleared")

    async def keys(self) -> List[str]:
        return list(self._data.keys())

    async def size(self) -> int:
        return len(self._data)

    async def mget(self, keys: Sequence[str]) -> List[Optional[Any]]:
        return [self._data.get(key) for key in keys]

    async def mset(self, entries: Iterable[Tuple[str, Any]]) -> None:
        for key, value in entries:
            self._data[key] = value

    async def incr(self, key: str, delta: float = 1) -> float:
        current = self._data.get(key, 0)
        if isinstance(current, StoredValue):
            updated = coerce_number(key, current.value) + delta
            self._data[key] = dataclasses.replace(current, value=updated)
            return updated
        updated = coerce_number(key, current) + delta
        self._data[key] = updated
        return updated

    def __len__(self) -> int:
        return len(self._data)
