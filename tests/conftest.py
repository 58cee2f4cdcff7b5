"""Shared test fixtures."""

import pytest

from pai.memory.store import MemoryFileStore


@pytest.fixture
def store(tmp_path):
    """Create a MemoryFileStore rooted in a temporary directory."""
    MemoryFileStore._reset()
    s = MemoryFileStore(root=tmp_path / ".pi" / "pai")
    MemoryFileStore._instance = s
    yield s
    MemoryFileStore._reset()
