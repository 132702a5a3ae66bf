"""Common components for tests."""

import pytest

from geocryptor import Geohash36Cryptor, GeohashCryptor

__all__ = ["REVERSED_BASE32", "REVERSED_BASE36", "geohash_cryptor", "geohash36_cryptor"]

REVERSED_BASE32 = "zyxwvutsrqpnmkjhgfedcb9876543210"
REVERSED_BASE36 = "XWVTtRrQqPNnMLlKJjHhGgFDdCBb98765432"


@pytest.fixture()  # type: ignore
def geohash_cryptor() -> GeohashCryptor:
    """Binary geohash cryptor with the default alphabet."""
    return GeohashCryptor()


@pytest.fixture()  # type: ignore
def geohash36_cryptor() -> Geohash36Cryptor:
    """Senary geohash cryptor with the default alphabet."""
    return Geohash36Cryptor()
