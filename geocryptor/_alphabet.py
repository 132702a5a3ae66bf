"""Immutable symbol table used to render and parse geohash characters."""

import sys
import warnings
from collections.abc import Iterator, Mapping
from types import FrameType, MappingProxyType
from typing import Optional

from geocryptor._constants import UNKNOWN_SYMBOL_INDEX
from geocryptor._exceptions import InvalidAlphabetError, UnknownSymbolError, UnknownSymbolWarning

__all__ = ["Alphabet"]


def _external_stacklevel() -> int:
    # Level 1 is the frame calling this function, the first frame outside of the package is
    # reported.
    frame = sys._getframe(1)
    stacklevel = 1
    while frame.f_back is not None and _is_package_frame(frame):
        frame = frame.f_back
        stacklevel += 1
    return stacklevel


def _is_package_frame(frame: FrameType) -> bool:
    module_name: str = frame.f_globals.get("__name__", "")
    return module_name.partition(".")[0] == "geocryptor"


class Alphabet:
    """
    Bijective mapping between geohash symbols and integer indexes.

    Instances are read-only after construction and can be shared between threads.
    """

    __slots__ = ("_symbols", "_indexes")

    def __init__(self, symbols: str, size: Optional[int] = None) -> None:
        """
        Initialize Alphabet.

        Args:
            symbols (str): Ordered symbols. Symbol at position `i` encodes the value `i`.
            size (Optional[int], optional): Required number of symbols. Not checked if `None`.
                Defaults to `None`.

        Raises:
            InvalidAlphabetError: If symbols are empty, contain duplicates or don't match
                the required size.
        """
        if not symbols:
            raise InvalidAlphabetError("Alphabet cannot be empty.")

        if size is not None and len(symbols) != size:
            raise InvalidAlphabetError(
                f"Alphabet must contain exactly {size} symbols (got {len(symbols)})."
            )

        indexes = {symbol: index for index, symbol in enumerate(symbols)}
        if len(indexes) != len(symbols):
            duplicates = sorted({symbol for symbol in symbols if symbols.count(symbol) > 1})
            raise InvalidAlphabetError(f"Alphabet contains duplicated symbols: {duplicates}.")

        self._symbols = symbols
        self._indexes: Mapping[str, int] = MappingProxyType(indexes)

    @property
    def symbols(self) -> str:
        """Ordered symbols of the alphabet."""
        return self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._indexes

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._symbols!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def symbol(self, index: int) -> str:
        """Get symbol encoding given index."""
        return self._symbols[index]

    def index(self, symbol: str) -> int:
        """
        Get index of a symbol.

        Raises:
            UnknownSymbolError: If the symbol isn't a part of the alphabet.
        """
        try:
            return self._indexes[symbol]
        except KeyError:
            raise UnknownSymbolError(
                f"Symbol {symbol!r} is not a part of the alphabet {self._symbols!r}.", symbol
            ) from None

    def lenient_index(self, symbol: str) -> int:
        """
        Get index of a symbol, falling back to `0` for unknown symbols.

        Unknown symbols are reported with `UnknownSymbolWarning`.
        """
        index = self._indexes.get(symbol)
        if index is None:
            warnings.warn(
                f"Symbol {symbol!r} is not a part of the alphabet. Decoding it as"
                f" {self._symbols[UNKNOWN_SYMBOL_INDEX]!r}.",
                UnknownSymbolWarning,
                stacklevel=_external_stacklevel(),
            )
            return UNKNOWN_SYMBOL_INDEX
        return index

    def resolve(self, symbol: str, strict: bool = False) -> int:
        """Get index of a symbol using strict or lenient lookup."""
        if strict:
            return self.index(symbol)
        return self.lenient_index(symbol)
