import hashlib

import pytest
from click.testing import CliRunner

from omikuji.fortune import derive

SAMPLE_USERS = [f"test-{i}" for i in range(200)]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "vectors: Fixed input/output vectors that must never change"
    )


@pytest.fixture
def zero_digest():
    """32 zero bytes, bypassing real hashing."""
    return bytes(32)


@pytest.fixture
def ones_digest():
    """32 0xFF bytes, bypassing real hashing."""
    return b"\xff" * 32


@pytest.fixture
def alice_digest():
    return derive(2026, "alice")


@pytest.fixture
def bob_digest():
    return derive(2026, "bob")


@pytest.fixture(scope="session")
def sample_digests():
    """Digests for many users, for range closure checks."""
    return [derive(2026, user) for user in SAMPLE_USERS]


@pytest.fixture(scope="session")
def arbitrary_digests():
    """Plain SHA-256 digests unrelated to the seed format."""
    return [hashlib.sha256(f"walk-{i}".encode()).digest() for i in range(200)]


@pytest.fixture
def runner():
    return CliRunner()
