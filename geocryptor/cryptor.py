"""Geohash cryptors binding a symbol alphabet to the codec functions."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Optional, Union

from geocryptor import geohash, geohash36
from geocryptor._alphabet import Alphabet
from geocryptor._exceptions import CoordinateError, PrecisionError
from geocryptor._neighbors import find_neighbors
from geocryptor.bounding_box import BoundingBox

__all__ = [
    "CryptorAlgorithm",
    "GeoCryptor",
    "GeohashCryptor",
    "Geohash36Cryptor",
    "get_cryptor",
]


class CryptorAlgorithm(str, Enum):
    """Enum of available geohash algorithms."""

    geohash = "geohash"
    geohash36 = "geohash36"

    @classmethod
    def _missing_(cls, value):  # type: ignore
        value = str(value).lower()
        for member in cls:
            if member.value == value:
                return member
        return None


class GeoCryptor(ABC):
    """
    Base geohash provider.

    Cryptor owns an immutable alphabet. Replacing it with `set_alphabet` swaps the reference,
    so a single cryptor can be shared between threads as long as the alphabet isn't changed.
    """

    radix: ClassVar[int]
    default_alphabet: ClassVar[Alphabet]

    def __init__(self, alphabet: Optional[str] = None) -> None:
        """
        Initialize GeoCryptor.

        Args:
            alphabet (Optional[str], optional): Symbols used to render hashes. Must contain
                `radix` unique symbols. Uses the default alphabet of the algorithm if `None`.
                Defaults to `None`.

        Raises:
            InvalidAlphabetError: If the alphabet has a wrong length or duplicated symbols.
        """
        self._alphabet = self.default_alphabet
        if alphabet is not None:
            self.set_alphabet(alphabet)

    @property
    def alphabet(self) -> Alphabet:
        """Symbol table used by the cryptor."""
        return self._alphabet

    @property
    def hash_key(self) -> str:
        """Symbols used to render hashes, in the index order."""
        return self._alphabet.symbols

    def get_alphabet(self) -> str:
        """Get symbols used to render hashes."""
        return self._alphabet.symbols

    def set_alphabet(self, symbols: str) -> None:
        """
        Replace symbols used to render hashes.

        Raises:
            InvalidAlphabetError: If the alphabet has a wrong length or duplicated symbols.
        """
        self._alphabet = Alphabet(symbols, size=self.radix)

    @abstractmethod
    def encode_as_box(self, latitude: float, longitude: float, precision: int) -> BoundingBox:
        """
        Encode a point into a region.

        Raises:
            CoordinateError: If the point lies outside of the world bounds.
            PrecisionError: If the precision isn't supported by the algorithm.
        """

    @abstractmethod
    def decode_as_box(self, value: str, precision: int = 0, strict: bool = False) -> BoundingBox:
        """
        Decode a hash into its region.

        Raises:
            UnknownSymbolError: If `strict` is set and the hash contains an unknown symbol.
        """

    def _cell_size(self, box: BoundingBox) -> tuple[float, float]:
        # Exact bounds, errors are rounded and can overshoot the cell.
        return box.max_lat - box.min_lat, box.max_lng - box.min_lng

    def encode(self, latitude: float, longitude: float, precision: int) -> str:
        """Encode a point into a hash. Returns an empty string for invalid input."""
        try:
            return self.encode_as_box(latitude, longitude, precision).hash_value
        except (CoordinateError, PrecisionError):
            return ""

    def encode_with_error(
        self, latitude: float, longitude: float, precision: int
    ) -> tuple[str, float, float]:
        """
        Encode a point into a hash with the latitude and longitude error in degrees.

        Returns an empty hash with zero errors for invalid input.
        """
        try:
            box = self.encode_as_box(latitude, longitude, precision)
        except (CoordinateError, PrecisionError):
            return "", 0.0, 0.0
        return (box.hash_value, *box.error_pair())

    def decode(self, value: str, precision: int = 0, strict: bool = False) -> tuple[float, float]:
        """Decode a hash into the latitude and longitude of its center."""
        return self.decode_as_box(value, precision, strict).center()

    def decode_with_error(
        self, value: str, precision: int = 0, strict: bool = False
    ) -> tuple[float, float, float, float]:
        """Decode a hash into its center with the latitude and longitude error in degrees."""
        box = self.decode_as_box(value, precision, strict)
        return (*box.center(), *box.error_pair())

    def neighbors(
        self, value: str, precision: int = 0, strict: bool = False
    ) -> list[Optional[BoundingBox]]:
        """
        Find 8 regions adjacent to the region of a given hash.

        Args:
            value (str): Hash to search around.
            precision (int, optional): Precision of the neighbors. Values lower than 1 mean
                the number of symbols in the hash. Defaults to 0.
            strict (bool, optional): Whether to raise an error for unknown symbols.
                Defaults to `False`.

        Returns:
            list[Optional[BoundingBox]]: Neighbors ordered from the south-west to the north-east,
                row by row. Directions crossing a pole are marked with `None`.
        """
        box = self.decode_as_box(value, precision, strict)
        lat_step, lng_step = self._cell_size(box)
        return find_neighbors(box, lat_step, lng_step, self.encode_as_box)


class GeohashCryptor(GeoCryptor):
    """Binary (base-32) geohash provider."""

    radix = geohash.RADIX
    default_alphabet = geohash.DEFAULT_ALPHABET

    def encode_as_box(self, latitude: float, longitude: float, precision: int) -> BoundingBox:
        """Encode a point into a geohash region."""
        return geohash.encode_as_box(latitude, longitude, precision, self._alphabet)

    def decode_as_box(self, value: str, precision: int = 0, strict: bool = False) -> BoundingBox:
        """Decode a geohash into its region."""
        return geohash.decode_as_box(value, precision, self._alphabet, strict)


class Geohash36Cryptor(GeoCryptor):
    """Senary (base-36) geohash provider."""

    radix = geohash36.RADIX
    default_alphabet = geohash36.DEFAULT_ALPHABET

    def encode_as_box(self, latitude: float, longitude: float, precision: int) -> BoundingBox:
        """Encode a point into a geohash-36 region."""
        return geohash36.encode_as_box(latitude, longitude, precision, self._alphabet)

    def decode_as_box(self, value: str, precision: int = 0, strict: bool = False) -> BoundingBox:
        """Decode a geohash-36 into its region."""
        return geohash36.decode_as_box(value, precision, self._alphabet, strict)


ALGORITHM_CRYPTOR_CLASS: dict[CryptorAlgorithm, type[GeoCryptor]] = {
    CryptorAlgorithm.geohash: GeohashCryptor,
    CryptorAlgorithm.geohash36: Geohash36Cryptor,
}


def get_cryptor(
    algorithm: Union[CryptorAlgorithm, str] = CryptorAlgorithm.geohash,
    alphabet: Optional[str] = None,
) -> GeoCryptor:
    """
    Get cryptor for a given algorithm.

    Args:
        algorithm (Union[CryptorAlgorithm, str], optional): Geohash algorithm.
            Defaults to `CryptorAlgorithm.geohash`.
        alphabet (Optional[str], optional): Custom symbols. Defaults to `None`.

    Raises:
        ValueError: If provided algorithm value cannot be parsed to CryptorAlgorithm.

    Returns:
        GeoCryptor: Cryptor instance.
    """
    try:
        algorithm_enum = CryptorAlgorithm(algorithm)
    except ValueError as ex:
        raise ValueError(f"Unknown geohash algorithm: {algorithm}.") from ex

    return ALGORITHM_CRYPTOR_CLASS[algorithm_enum](alphabet=alphabet)
