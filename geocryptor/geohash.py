"""
Geohash encoding and decoding.

Geohash bisects longitude and latitude ranges alternately, starting with longitude. Every
bisection emits a single bit and each group of 5 bits is rendered as one base-32 symbol,
so longer hashes denote smaller regions nested inside the regions of their prefixes.

http://en.wikipedia.org/wiki/Geohash
"""

from collections.abc import Generator
from itertools import islice

from geocryptor._alphabet import Alphabet
from geocryptor._constants import (
    BASE32_ALPHABET,
    BITS_PER_SYMBOL,
    MAX_GEOHASH_PRECISION,
    MAX_LAT,
    MAX_LNG,
    MIN_LAT,
    MIN_LNG,
)
from geocryptor._exceptions import CoordinateError, PrecisionError
from geocryptor._rounding import is_valid_coordinate, round_to_precision
from geocryptor.bounding_box import BoundingBox

__all__ = [
    "RADIX",
    "DEFAULT_ALPHABET",
    "encode",
    "encode_as_box",
    "decode",
    "decode_as_box",
    "lat_err",
    "lng_err",
]

RADIX = 2**BITS_PER_SYMBOL

DEFAULT_ALPHABET = Alphabet(BASE32_ALPHABET, size=RADIX)


class _Window:
    """Running bounds narrowed by consecutive bisection bits."""

    __slots__ = ("min_lat", "max_lat", "min_lng", "max_lng")

    def __init__(self) -> None:
        self.min_lat = MIN_LAT
        self.max_lat = MAX_LAT
        self.min_lng = MIN_LNG
        self.max_lng = MAX_LNG

    def midpoint(self, is_longitude: bool) -> float:
        if is_longitude:
            return (self.min_lng + self.max_lng) / 2
        return (self.min_lat + self.max_lat) / 2

    def narrow(self, is_longitude: bool, bit: int) -> None:
        mid = self.midpoint(is_longitude)
        if is_longitude:
            if bit:
                self.min_lng = mid
            else:
                self.max_lng = mid
        elif bit:
            self.min_lat = mid
        else:
            self.max_lat = mid

    def to_box(self, hash_value: str, precision: int) -> BoundingBox:
        return BoundingBox(
            max_lat=self.max_lat,
            min_lat=self.min_lat,
            max_lng=self.max_lng,
            min_lng=self.min_lng,
            lat_err=lat_err(len(hash_value)),
            lng_err=lng_err(len(hash_value)),
            hash_value=hash_value,
            precision=precision,
        )


def _point_bits(
    latitude: float, longitude: float, window: _Window, bit_count: int
) -> Generator[int, None, None]:
    is_longitude = True
    for _ in range(bit_count):
        target = longitude if is_longitude else latitude
        bit = 1 if window.midpoint(is_longitude) < target else 0
        window.narrow(is_longitude, bit)
        yield bit
        is_longitude = not is_longitude


def _symbol_bits(index: int) -> Generator[int, None, None]:
    # Most significant bit first: 16, 8, 4, 2, 1.
    for n in range(BITS_PER_SYMBOL - 1, -1, -1):
        yield (index >> n) & 1


def lat_err(precision: int) -> float:
    """Half-height of a geohash cell with a given number of symbols, in degrees."""
    lat_bits = 2 * precision + precision // 2
    return round_to_precision((MAX_LAT - MIN_LAT) / (2 * 2**lat_bits), precision)


def lng_err(precision: int) -> float:
    """Half-width of a geohash cell with a given number of symbols, in degrees."""
    lng_bits = 3 * precision - precision // 2
    return round_to_precision((MAX_LNG - MIN_LNG) / (2 * 2**lng_bits), precision)


def encode_as_box(
    latitude: float,
    longitude: float,
    precision: int,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> BoundingBox:
    """
    Encode a point into a geohash region.

    Args:
        latitude (float): Latitude in degrees, between -90 and 90.
        longitude (float): Longitude in degrees, between -180 and 180.
        precision (int): Number of symbols in the hash, between 1 and 12.
        alphabet (Alphabet, optional): 32 symbols used to render the hash.
            Defaults to the standard geohash alphabet.

    Raises:
        CoordinateError: If the point lies outside of the world bounds.
        PrecisionError: If the precision is outside of the supported range.

    Returns:
        BoundingBox: Region containing the point.
    """
    if not is_valid_coordinate(latitude, longitude):
        raise CoordinateError(f"Point ({latitude}, {longitude}) lies outside of the world bounds.")

    if not 1 <= precision <= MAX_GEOHASH_PRECISION:
        raise PrecisionError(
            f"Geohash precision must be between 1 and {MAX_GEOHASH_PRECISION} (got {precision})."
        )

    window = _Window()
    bits = _point_bits(latitude, longitude, window, precision * BITS_PER_SYMBOL)
    symbols = []
    for _ in range(precision):
        index = 0
        for bit in islice(bits, BITS_PER_SYMBOL):
            index = (index << 1) | bit
        symbols.append(alphabet.symbol(index))

    return window.to_box("".join(symbols), precision)


def encode(
    latitude: float,
    longitude: float,
    precision: int,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> str:
    """Encode a point into a geohash. Returns an empty string for invalid input."""
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
    Decode a geohash into its region.

    Args:
        geohash (str): Hash to decode. Can be empty.
        precision (int, optional): Number of decimal places of the region center.
            Values lower than 1 mean the number of symbols in the hash. Defaults to 0.
        alphabet (Alphabet, optional): 32 symbols used to render the hash.
            Defaults to the standard geohash alphabet.
        strict (bool, optional): Whether to raise an error for symbols missing from
            the alphabet, or to decode them as the first symbol. Defaults to `False`.

    Raises:
        UnknownSymbolError: If `strict` is set and the hash contains an unknown symbol.

    Returns:
        BoundingBox: Region denoted by the hash.
    """
    if precision <= 0:
        precision = len(geohash)

    window = _Window()
    is_longitude = True
    for symbol in geohash:
        for bit in _symbol_bits(alphabet.resolve(symbol, strict)):
            window.narrow(is_longitude, bit)
            is_longitude = not is_longitude

    return window.to_box(geohash, precision)


def decode(
    geohash: str,
    precision: int = 0,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    strict: bool = False,
) -> tuple[float, float]:
    """Decode a geohash into the latitude and longitude of its center."""
    return decode_as_box(geohash, precision, alphabet, strict).center()
