"""
coders.py



"""


import struct
import numpy as np
from typing import List, Optional

from .errors import EmptyInputError, MalformedBitstreamError, TruncatedStreamError, UnknownSymbolError
from .logger import Logger, CodingLog, CodingProgressStep
from .models import CodeTable, HuffmanNode
from .validators import validate_type, validate_bitstring


class MessageCoder:
    """
    Encodes messages with a code table and decodes bitstrings by walking a tree.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def encode(self, message: str, code_table: CodeTable) -> str:
        """
        Concatenate the code of every symbol of the message.

        Args:
            message (str): The message to encode.
            code_table (CodeTable): Code per symbol.

        Returns:
            str: The bitstring.

        Raises:
            EmptyInputError: If the message is empty.
            UnknownSymbolError: If a symbol of the message has no code.
        """
        validate_type(message, "Message", str)
        validate_type(code_table, "Code table", CodeTable)
        if len(message) == 0:
            raise EmptyInputError("Message must not be empty")

        parts: List[str] = []
        for position, symbol in enumerate(message):
            if not code_table.contains(symbol):
                raise UnknownSymbolError(symbol, position)
            parts.append(code_table.get_code(symbol))
            if self.logger is not None:
                self.logger.log(CodingProgressStep("Encoding symbols", len(message)))
        bitstring = "".join(parts)

        if self.logger is not None:
            self.logger.log(CodingLog(len(message), len(bitstring)))
        return bitstring

    def decode(self, bitstring: str, root: HuffmanNode) -> str:
        """
        Walk the tree from the root, '0' to the left child and '1' to the
        right child, emitting a symbol and restarting at every leaf.

        A lone-leaf root emits its symbol once per '0'.

        Args:
            bitstring (str): The encoded message.
            root (HuffmanNode): Root of the tree the message was encoded with.

        Returns:
            str: The decoded message.

        Raises:
            MalformedBitstreamError: On a character other than '0'/'1' or a
                branch the tree does not have.
            TruncatedStreamError: If the bitstring ends in the middle of a code.
        """
        validate_type(root, "Root", HuffmanNode)
        validate_bitstring(bitstring)

        symbols: List[str] = []
        if root.is_leaf:
            for position, bit in enumerate(bitstring):
                if bit != "0":
                    raise MalformedBitstreamError(f"Branch '1' at position {position} leaves a single-leaf tree", position)
                symbols.append(root.symbol)
        else:
            node = root
            for position, bit in enumerate(bitstring):
                node = node.left if bit == "0" else node.right
                if node is None:
                    raise MalformedBitstreamError(f"Bit at position {position} leaves the tree", position)
                if node.is_leaf:
                    symbols.append(node.symbol)
                    node = root
            if node is not root:
                raise TruncatedStreamError("Bitstring ends in the middle of a code", len(bitstring))

        message = "".join(symbols)
        if self.logger is not None:
            self.logger.log(CodingLog(len(message), len(bitstring)))
        return message


class BitPacker:
    """
    Packs a bitstring into bytes and back.

    Layout: 4 byte big-endian bit count, then the bits MSB first, zero padded
    to a whole byte.
    """

    HEADER_FORMAT = ">I"
    HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

    def pack(self, bitstring: str) -> bytes:
        validate_bitstring(bitstring)
        bits = np.frombuffer(bitstring.encode("ascii"), dtype=np.uint8) - ord("0")
        return struct.pack(self.HEADER_FORMAT, len(bitstring)) + np.packbits(bits).tobytes()

    def unpack(self, data: bytes) -> str:
        """
        Raises:
            TruncatedStreamError: If the header or payload is shorter than declared.
            MalformedBitstreamError: If bytes follow the declared payload.
        """
        validate_type(data, "Data", bytes)
        if len(data) < self.HEADER_SIZE:
            raise TruncatedStreamError("Packed bitstring is missing its header", len(data))
        bit_count, = struct.unpack(self.HEADER_FORMAT, data[:self.HEADER_SIZE])
        payload = data[self.HEADER_SIZE:]
        expected = (bit_count + 7) // 8
        if len(payload) < expected:
            raise TruncatedStreamError(f"Packed bitstring needs {expected} bytes, found {len(payload)}", len(data))
        if len(payload) > expected:
            raise MalformedBitstreamError(f"Packed bitstring has {len(payload) - expected} trailing bytes", len(data))

        bits = np.unpackbits(np.frombuffer(payload, dtype=np.uint8))[:bit_count]
        return (bits + ord("0")).astype(np.uint8).tobytes().decode("ascii")
