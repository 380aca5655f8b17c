"""
validators.py

Shared codes for input validation in huffcodec.
"""


import os
from typing import Any

from .errors import EmptyInputError, MalformedBitstreamError
from .settings import MAX_SYMBOL


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_symbol(symbol: Any) -> None:
    """Validate that symbol is a single character in the single-byte range."""
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError("Symbol must be a single character")
    if ord(symbol) > MAX_SYMBOL:
        raise ValueError(f"Symbol {symbol!r} is outside the single-byte range")


def validate_message(message: Any) -> None:
    """Validate that message is a non-empty string of single-byte characters."""
    validate_type(message, "Message", str)
    if len(message) == 0:
        raise EmptyInputError("Message must not be empty")
    for position, symbol in enumerate(message):
        if ord(symbol) > MAX_SYMBOL:
            raise ValueError(f"Symbol {symbol!r} at position {position} is outside the single-byte range")


def validate_bitstring(bitstring: Any) -> None:
    """Validate that bitstring only holds '0' and '1' characters."""
    validate_type(bitstring, "Bitstring", str)
    for position, bit in enumerate(bitstring):
        if bit not in "01":
            raise MalformedBitstreamError(f"Invalid bit {bit!r} at position {position}", position)
