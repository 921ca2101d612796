"""Shared pytest fixtures."""

import os
import shutil
import pytest


TEST_DIR = "./data/test"


class CountingSource:
    """In-memory source that records every read_at call."""

    def __init__(self, data: bytes):
        self.data = data
        self.reads = []
        self.closed = False

    def read_at(self, offset: int, size: int) -> bytes:
        self.reads.append((offset, size))
        return self.data[offset:offset + size]

    def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="function")
def test_dir():
    """Create and cleanup test directory."""
    os.makedirs(TEST_DIR, exist_ok=True)
    yield TEST_DIR
    if os.path.exists(TEST_DIR):
        shutil.rmtree(TEST_DIR)


@pytest.fixture
def counting_source():
    """Factory for CountingSource instances."""
    return CountingSource
