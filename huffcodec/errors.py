"""
errors.py

Typed failures raised by huffcodec.

Every error derives from ValueError so callers that already guard codec
calls with ``except ValueError`` keep working.
"""


from typing import Optional


class HuffmanError(ValueError):
    """Base class for all huffcodec failures."""
    pass


class EmptyInputError(HuffmanError):
    def __init__(self, message: str = "Input must not be empty") -> None:
        super().__init__(message)


class DegenerateAlphabetError(HuffmanError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Message contains a single distinct symbol: {symbol!r}")


class UnknownSymbolError(HuffmanError):
    def __init__(self, symbol: str, position: Optional[int] = None) -> None:
        self.symbol = symbol
        self.position = position
        if position is None:
            super().__init__(f"Symbol {symbol!r} has no code")
        else:
            super().__init__(f"Symbol {symbol!r} at position {position} has no code")


class CorruptTreeFileError(HuffmanError):
    pass


class MalformedBitstreamError(HuffmanError):
    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.position = position
        super().__init__(message)


class TruncatedStreamError(MalformedBitstreamError):
    pass
