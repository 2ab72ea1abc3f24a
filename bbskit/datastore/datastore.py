"""
DataStore v1.0
Key/value store with per-key TTL on top of any DataStoreAdapter.

Values are kept in the adapter wrapped as StoredValue(value, expires_at).
Expired entries are removed lazily, when they are read.
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .. import config
from .adapter import DataStoreAdapter, StoredValue
from .memory_adapter import MemoryAdapter

logger = logging.getLogger(__name__)


class DataStore:
    """
    TTL-aware key/value store

    Usage:
        store = DataStore()
        await store.set("session:42", {"user_id": 42}, ttl=3600)
        views = await store.incr("thread:7:views")
    """

    def __init__(
        self,
        adapter: Optional[DataStoreAdapter] = None,
        default_ttl: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.adapter = adapter if adapter is not None else MemoryAdapter()
        self.default_ttl = config.DATASTORE_DEFAULT_TTL if default_ttl is None else default_ttl
        self._clock = clock
        # Created on first use so it belongs to the loop running incr()
        self._lock: Optional[asyncio.Lock] = None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _get_lock(self) -> asyncio.Lock:
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def _wrap(self, value: Any, ttl: Optional[float]) -> StoredValue:
        if ttl is None:
            ttl = self.default_ttl
        expires_at = self._clock() + ttl if ttl and ttl > 0 else None
        return StoredValue(value=value, expires_at=expires_at)

    async def _live_entry(self, key: str, entry: Any) -> Optional[StoredValue]:
        """Return a live StoredValue for a raw adapter entry, dropping expired ones"""
        if entry is None:
            return None
        if not isinstance(entry, StoredValue):
            # Written to the adapter directly; never expires
            return StoredValue(value=entry)
        if entry.is_expired(self._clock()):
            await self.adapter.delete(key)
            logger.debug(f"DataStore expired: {key}")
            return None
        return entry

    # ------------------------------------------------------------------
    # contract
    # ------------------------------------------------------------------

    async def get(self, key: str, default: Any = None) -> Any:
        """Value at key, or default if absent or expired"""
        entry = await self._live_entry(key, await self.adapter.get(key))
        return default if entry is None else entry.value

    async def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Store value at key.

        Args:
            key: Key to set
            value: Any value
            ttl: Seconds to live; None uses default_ttl, 0 means no expiry
        """
        await self.adapter.set(key, self._wrap(value, ttl))

    async def delete(self, key: str) -> bool:
        """Remove key; True if a live value was present"""
        present = await self.has(key)
        await self.adapter.delete(key)
        return present

    async def has(self, key: str) -> bool:
        return await self._live_entry(key, await self.adapter.get(key)) is not None

    async def clear(self) -> None:
        await self.adapter.clear()
        logger.info("DataStore cleared")

    async def keys(self) -> List[str]:
        """Keys holding live values"""
        all_keys = await self.adapter.keys()
        entries = await self.adapter.mget(all_keys)
        live = []
        for key, entry in zip(all_keys, entries):
            if await self._live_entry(key, entry) is not None:
                live.append(key)
        return live

    async def size(self) -> int:
        return len(await self.keys())

    async def mget(self, keys: Sequence[str]) -> List[Any]:
        """Values for keys in input order; None for absent or expired keys"""
        keys = list(keys)
        entries = await self.adapter.mget(keys)
        values = []
        for key, entry in zip(keys, entries):
            live = await self._live_entry(key, entry)
            values.append(None if live is None else live.value)
        return values

    async def mset(self, entries: Iterable[Tuple[str, Any]], ttl: Optional[float] = None) -> None:
        await self.adapter.mset([(key, self._wrap(value, ttl)) for key, value in entries])

    async def incr(self, key: str, delta: float = 1) -> float:
        """
        Add delta to the number at key, keeping its remaining TTL.

        An absent or expired key is created at delta without expiry.

        Raises:
            NonNumericValueError: If the stored value is not a number
        """
        async with self._get_lock():
            entry = await self._live_entry(key, await self.adapter.get(key))
            if entry is None:
                await self.adapter.set(key, StoredValue(value=delta))
                return delta
            return await self.adapter.incr(key, delta)

    # ------------------------------------------------------------------
    # extras
    # ------------------------------------------------------------------

    async def ttl(self, key: str) -> Optional[float]:
        """Remaining seconds to live, or None if the key has no expiry or is absent"""
        entry = await self._live_entry(key, await self.adapter.get(key))
        if entry is None or entry.expires_at is None:
            return None
        return max(0.0, entry.expires_at - self._clock())

    async def purge_expired(self) -> int:
        """Remove every expired entry and return how many were removed"""
        all_keys = await self.adapter.keys()
        entries = await self.adapter.mget(all_keys)
        now = self._clock()
        removed = 0
        for key, entry in zip(all_keys, entries):
            if isinstance(entry, StoredValue) and entry.is_expired(now):
                await self.adapter.delete(key)
                removed += 1
        if removed:
            logger.debug(f"DataStore purged {removed} expired entries")
        return removed

    async def get_stats(self) -> Dict[str, Any]:
        """Returns store statistics"""
        return {
            'adapter': self.adapter.get_name(),
            'size': await self.size(),
            'default_ttl': self.default_ttl,
        }
