"""
Key/value storage: the adapter contract, the in-memory reference adapter and
the TTL-aware DataStore facade.
"""

from .adapter import DataStoreAdapter, StoredValue, coerce_number
from .memory_adapter import MemoryAdapter
from .datastore import DataStore

__all__ = [
    "DataStoreAdapter",
    "coerce_number",
    "MemoryAdapter",
    "DataStore",
    "StoredValue",
]
