class UnknownSymbolWarning(Warning): ...


class CoordinateError(ValueError): ...


class PrecisionError(ValueError): ...


class InvalidAlphabetError(ValueError): ...


class UnknownSymbolError(ValueError):
    def __init__(self, message: str, symbol: str):
        super().__init__(message)
        self.symbol = symbol
