"""
pytest configuration and fixtures for all tests
"""

import pytest
import re
import sys
import os

# Make the package importable from a plain checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bbskit.datastore import DataStore, MemoryAdapter


# ==================== GLOBAL FIXTURES ====================

@pytest.fixture
def base_username_rules():
    """Typical forum username rules"""
    return {
        "min": 3,
        "max": 12,
        "allowed": r"^[A-Za-z0-9_-]+$",
        "starts_with": r"^[A-Za-z0-9]",
        "ends_with": r"[A-Za-z0-9]$",
        "no_consecutive": ["_", "-"],
        "normalize": lambda s: s.strip(),
        "disallow": [re.compile("admin", re.IGNORECASE)],
        "custom": [lambda s: "reserved:root" if s.lower() == "root" else None],
    }


@pytest.fixture
def memory_adapter():
    """Fresh in-memory adapter"""
    return MemoryAdapter()


class FakeClock:
    """Manually advanced clock for TTL tests"""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def datastore(memory_adapter, clock):
    """DataStore over a fresh adapter with a controllable clock"""
    return DataStore(adapter=memory_adapter, default_ttl=0, clock=clock)


# ==================== MARKERS ====================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "security: marks tests as security tests"
    )
    config.addinivalue_line(
        "markers", "datastore: marks datastore tests"
    )


def pytest_collection_modifyitems(config, items):
    """Tag items by module name"""
    for item in items:
        if "escaper" in item.nodeid or "injection" in item.nodeid:
            item.add_marker(pytest.mark.security)
        if "datastore" in item.nodeid or "adapter" in item.nodeid:
            item.add_marker(pytest.mark.datastore)
