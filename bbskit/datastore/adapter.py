"""
Datastore Adapter Interface
===========================

Abstract contract every key/value backend has to satisfy. All operations
are coroutines so network-backed stores (Redis, SQL) can be plugged in
without changing callers; the in-memory adapter simply never suspends.

Backends shared by several writers must keep ``incr`` atomic per key.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import NonNumericValueError


@dataclass(frozen=True)
class StoredValue:
    """Value plus absolute expiry timestamp (None = never expires)"""
    value: Any
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class DataStoreAdapter(ABC):
    """
    Abstract base class for all datastore backends

    Any new backend must implement these methods.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the value stored at key, or None if absent"""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Insert or replace the value at key"""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove key; True if it was present"""

    @abstractmethod
    async def has(self, key: str) -> bool:
        """True if key is present"""

    @abstractmethod
    async def clear(self) -> None:
        """Drop every key. Not reversible."""

    @abstractmethod
    async def keys(self) -> List[str]:
        """All keys currently stored"""

    @abstractmethod
    async def size(self) -> int:
        """Number of keys currently stored"""

    @abstractmethod
    async def mget(self, keys: Sequence[str]) -> List[Optional[Any]]:
        """Values for keys, aligned with the input order (None for absent keys)"""

    @abstractmethod
    async def mset(self, entries: Iterable[Tuple[str, Any]]) -> None:
        """Insert or replace several (key, value) pairs"""

    @abstractmethod
    async def incr(self, key: str, delta: float = 1) -> float:
        """
        Add delta to the number stored at key and return the new value.

        An absent key is created at delta. A StoredValue entry has its
        value incremented and keeps its expires_at; expiry itself is
        checked by the caller.

        Raises:
            NonNumericValueError: If the stored value is not a number
        """

    def get_name(self) -> str:
        """Get adapter name"""
        return self.__class__.__name__


def coerce_number(key: str, value: Any) -> float:
    """
    Read a stored value as a number for incr().

    Ints and floats pass through, numeric strings are parsed.

    Raises:
        NonNumericValueError: For anything else (booleans included)
    """
    if isinstance(value, bool):
        raise NonNumericValueError(key, value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            raise NonNumericValueError(key, value) from None
    raise NonNumericValueError(key, value)
