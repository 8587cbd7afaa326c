"""
Pytest configuration and shared fixtures for multihash codec tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides digest fixtures (computed with hashlib, tests only)
"""

import hashlib
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sha1_digest() -> bytes:
    """A real 20-byte SHA-1 digest."""
    return hashlib.sha1(b"multihash").digest()


@pytest.fixture
def sha256_digest() -> bytes:
    """A real 32-byte SHA-256 digest."""
    return hashlib.sha256(b"multihash").digest()


@pytest.fixture
def sha512_digest() -> bytes:
    """A real 64-byte SHA-512 digest."""
    return hashlib.sha512(b"multihash").digest()


@pytest.fixture
def sha1_multihash(sha1_digest) -> bytes:
    """A hand-built sha1 envelope."""
    return bytes([0x11, len(sha1_digest)]) + sha1_digest
