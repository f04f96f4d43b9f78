"""
Shared fixtures for balloon-core tests.
"""

import pytest

from balloon_core.hashing import Hasher


class CountingHasher(Hasher):
    """Hasher that records how many primitive calls were made."""

    def __init__(self, name=None):
        super().__init__(name)
        self.calls = 0

    def __call__(self, *parts):
        self.calls += 1
        return super().__call__(*parts)


@pytest.fixture
def counting_hasher():
    return CountingHasher("sha256")


@pytest.fixture
def serial_backend(monkeypatch):
    """Run M-core lanes inline."""
    from balloon_core import config

    monkeypatch.setattr(config, "PARALLEL_BACKEND", "serial")
