"""
GeoCryptor.

GeoCryptor is a Python library used for encoding geographic coordinates into geohash strings
and decoding them back into rectangular regions, with the binary (base-32) and the senary
(base-36) geohash algorithms.
"""

from geocryptor._alphabet import Alphabet
from geocryptor._exceptions import (
    CoordinateError,
    InvalidAlphabetError,
    PrecisionError,
    UnknownSymbolError,
    UnknownSymbolWarning,
)
from geocryptor.bounding_box import BoundingBox
from geocryptor.cryptor import (
    CryptorAlgorithm,
    GeoCryptor,
    Geohash36Cryptor,
    GeohashCryptor,
    get_cryptor,
)
from geocryptor.geohash import decode, encode
from geocryptor.geohash36 import decode as decode36
from geocryptor.geohash36 import encode as encode36

__app_name__ = "GeoCryptor"
__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "BoundingBox",
    "CoordinateError",
    "CryptorAlgorithm",
    "GeoCryptor",
    "Geohash36Cryptor",
    "GeohashCryptor",
    "InvalidAlphabetError",
    "PrecisionError",
    "UnknownSymbolError",
    "UnknownSymbolWarning",
    "decode",
    "decode36",
    "encode",
    "encode36",
    "get_cryptor",
]
