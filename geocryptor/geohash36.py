"""
Geohash-36 encoding and decoding.

Instead of interleaving bits, every symbol splits the current cell into a 6x6 grid. Rows are
counted from the north and columns from the west, so the symbol index is `row * 6 + col`.
"""

from geocryptor._alphabet import Alphabet
from geocryptor._constants import (
    BASE36_ALPHABET,
    INITIAL_UNIT_LAT,
    INITIAL_UNIT_LNG,
    MAX_LAT,
    MAX_LNG,
    MIN_LAT,
    MIN_LNG,
    SENARY_GRID_SIZE,
)
from geocryptor._exceptions import CoordinateError, PrecisionError
from geocryptor._rounding import is_valid_coordinate, round_to_precision
from geocryptor.bounding_box import BoundingBox

__all__ = [
    "RADIX",
    "DEFAULT_ALPHABET",
    "encode",
    "encode_as_box",
    "encode_with_units",
    "decode",
    "decode_as_box",
]

RADIX = SENARY_GRID_SIZE * SENARY_GRID_SIZE

DEFAULT_ALPHABET = Alphabet(BASE36_ALPHABET, size=RADIX)

LAST_CELL = SENARY_GRID_SIZE - 1


def _to_box(
    max_lat: float,
    min_lat: float,
    max_lng: float,
    min_lng: float,
    unit_lat: float,
    unit_lng: float,
    hash_value: str,
    precision: int,
) -> BoundingBox:
    # Units are already divided for the next level, the error is the size of the last cell.
    symbol_count = len(hash_value)
    return BoundingBox(
        max_lat=max_lat,
        min_lat=min_lat,
        max_lng=max_lng,
        min_lng=min_lng,
        lat_err=round_to_precision(unit_lat * SENARY_GRID_SIZE, symbol_count),
        lng_err=round_to_precision(unit_lng * SENARY_GRID_SIZE, symbol_count),
        hash_value=hash_value,
        precision=precision,
    )


def encode_with_units(
    latitude: float,
    longitude: float,
    precision: int,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> tuple[BoundingBox, float, float]:
    """
    Encode a point into a geohash-36 region.

    Args:
        latitude (float): Latitude in degrees, between -90 and 90.
        longitude (float): Longitude in degrees, between -180 and 180.
        precision (int): Number of symbols in the hash. Must be positive.
        alphabet (Alphabet, optional): 36 symbols used to render the hash.
            Defaults to the standard geohash-36 alphabet.

    Raises:
        CoordinateError: If the point lies outside of the world bounds.
        PrecisionError: If the precision isn't positive.

    Returns:
        tuple[BoundingBox, float, float]: Region containing the point and the latitude and
            longitude units of the next, not encoded, level.
    """
    if not is_valid_coordinate(latitude, longitude):
        raise CoordinateError(f"Point ({latitude}, {longitude}) lies outside of the world bounds.")

    if precision < 1:
        raise PrecisionError(f"Geohash-36 precision must be positive (got {precision}).")

    unit_lat, max_lat, min_lat = INITIAL_UNIT_LAT, MAX_LAT, MIN_LAT
    unit_lng, max_lng, min_lng = INITIAL_UNIT_LNG, MAX_LNG, MIN_LNG
    symbols = []
    for _ in range(precision):
        # At most 6 steps per axis, a linear scan is enough.
        # Float accumulation can push the scan past the last cell, so it stops there.
        row = 0
        while row < LAST_CELL and max_lat - unit_lat > latitude:
            row += 1
            max_lat -= unit_lat

        col = 0
        while col < LAST_CELL and min_lng + unit_lng < longitude:
            col += 1
            min_lng += unit_lng

        min_lat, max_lng = max_lat - unit_lat, min_lng + unit_lng
        unit_lat, unit_lng = unit_lat / SENARY_GRID_SIZE, unit_lng / SENARY_GRID_SIZE
        symbols.append(alphabet.symbol(row * SENARY_GRID_SIZE + col))

    box = _to_box(
        max_lat, min_lat, max_lng, min_lng, unit_lat, unit_lng, "".join(symbols), precision
    )
    return box, unit_lat, unit_lng


def encode_as_box(
    latitude: float,
    longitude: float,
    precision: int,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> BoundingBox:
    """Encode a point into a geohash-36 region."""
    box, _, _ = encode_with_units(latitude, longitude, precision, alphabet)
    return box


def encode(
    latitude: float,
    longitude: float,
    precision: int,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> str:
    """Encode a point into a geohash-36. Returns an empty string for invalid input."""
    try:
        return encode_as_box(latitude, longitude, precision, alphabet).hash_value
    except (CoordinateError, PrecisionError):
        return ""


def decode_as_box(
    geohash: str,
    precision: int = 0,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    strict: bool = False,
) -> BoundingBox:
    """
    Decode a geohash-36 into its region.

    Args:
        geohash (str): Hash to decode. Can be empty.
        precision (int, optional): Number of decimal places of the region center.
            Values lower than 1 mean the number of symbols in the hash. Defaults to 0.
        alphabet (Alphabet, optional): 36 symbols used to render the hash.
            Defaults to the standard geohash-36 alphabet.
        strict (bool, optional): Whether to raise an error for symbols missing from
            the alphabet, or to decode them as the first symbol. Defaults to `False`.

    Raises:
        UnknownSymbolError: If `strict` is set and the hash contains an unknown symbol.

    Returns:
        BoundingBox: Region denoted by the hash.
    """
    if precision <= 0:
        precision = len(geohash)

    unit_lat, max_lat, min_lat = INITIAL_UNIT_LAT, MAX_LAT, MIN_LAT
    unit_lng, max_lng, min_lng = INITIAL_UNIT_LNG, MAX_LNG, MIN_LNG
    for symbol in geohash:
        row, col = divmod(alphabet.resolve(symbol, strict), SENARY_GRID_SIZE)
        max_lat -= row * unit_lat
        min_lat = max_lat - unit_lat
        min_lng += col * unit_lng
        max_lng = min_lng + unit_lng
        unit_lat, unit_lng = unit_lat / SENARY_GRID_SIZE, unit_lng / SENARY_GRID_SIZE

    return _to_box(max_lat, min_lat, max_lng, min_lng, unit_lat, unit_lng, geohash, precision)


def decode(
    geohash: str,
    precision: int = 0,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    strict: bool = False,
) -> tuple[float, float]:
    """Decode a geohash-36 into the latitude and longitude of its center."""
    return decode_as_box(geohash, precision, alphabet, strict).center()
