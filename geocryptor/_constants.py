"""Constants used across the project."""

MAX_LAT = 90.0
MIN_LAT = -90.0
MAX_LNG = 180.0
MIN_LNG = -180.0

BASE32_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
BASE36_ALPHABET = "23456789bBCdDFgGhHjJKlLMnNPqQrRtTVWX"

BITS_PER_SYMBOL = 5
MAX_GEOHASH_PRECISION = 12

SENARY_GRID_SIZE = 6
INITIAL_UNIT_LAT = 30.0
INITIAL_UNIT_LNG = 60.0

# Index used by lenient decoding for symbols missing from the alphabet.
UNKNOWN_SYMBOL_INDEX = 0

FLOAT_TOLERANCE = 1e-9

# Doubles carry at most 17 significant digits, further decimal places are noise.
MAX_DECIMAL_PLACES = 17

__all__ = [
    "BASE32_ALPHABET",
    "BASE36_ALPHABET",
    "BITS_PER_SYMBOL",
    "FLOAT_TOLERANCE",
    "INITIAL_UNIT_LAT",
    "INITIAL_UNIT_LNG",
    "MAX_DECIMAL_PLACES",
    "MAX_GEOHASH_PRECISION",
    "MAX_LAT",
    "MAX_LNG",
    "MIN_LAT",
    "MIN_LNG",
    "SENARY_GRID_SIZE",
    "UNKNOWN_SYMBOL_INDEX",
]
