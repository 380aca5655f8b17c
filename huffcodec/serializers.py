"""
serializers.py

Persisted representations of the Huffman tree.

Both formats write one record per node in pre-order (node, left subtree,
right subtree); that order together with the leaf/internal tag determines
the shape of a strict binary tree.
"""


import abc
import struct
from typing import List, Optional, Set, Tuple

from .errors import CorruptTreeFileError
from .logger import Logger, SerializationLog
from .models import HuffmanNode
from .settings import (
    BINARY_SERIALIZER_CODE,
    INTERNAL_NODE_SENTINEL,
    LEGACY_TEXT_SERIALIZER_CODE,
    TREE_FILE_SIGNATURE,
    TREE_FILE_VERSION,
)
from .trees import iter_preorder
from .validators import validate_type


class TreeSerializerBase(abc.ABC):
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    @abc.abstractmethod
    def serializer_code(self) -> int:
        """Return the unique identification code for the serializer."""
        pass

    @abc.abstractmethod
    def serialize(self, root: HuffmanNode) -> bytes:
        """
        Convert a tree into its persisted representation.

        Args:
            root (HuffmanNode): Root of the tree.

        Returns:
            bytes: The tree file contents.
        """
        pass

    @abc.abstractmethod
    def deserialize(self, data: bytes) -> HuffmanNode:
        """
        Reconstruct a tree from its persisted representation.

        Args:
            data (bytes): The tree file contents.

        Returns:
            HuffmanNode: Root of the reconstructed tree.

        Raises:
            CorruptTreeFileError: If the data does not describe exactly one
                well-formed tree.
        """
        pass

    def _log(self, byte_count: int) -> None:
        if self.logger is not None:
            self.logger.log(SerializationLog(self.serializer_code, byte_count))


class _PreorderAssembler:
    """
    Rebuilds a tree from pre-order records without recursion.

    Internal records open a pending node; each finished subtree is attached
    to the innermost pending node, which is completed once it holds two
    children.
    """

    def __init__(self) -> None:
        self._pending: List[Tuple[float, List[HuffmanNode]]] = []
        self._symbols: Set[str] = set()
        self.root: Optional[HuffmanNode] = None

    @property
    def complete(self) -> bool:
        return self.root is not None

    def add_internal(self, weight: float) -> None:
        self._pending.append((weight, []))

    def add_leaf(self, weight: float, symbol: str) -> None:
        if symbol in self._symbols:
            raise CorruptTreeFileError(f"Symbol {symbol!r} appears in more than one leaf")
        self._symbols.add(symbol)
        node = HuffmanNode(weight, symbol)
        while self._pending:
            children = self._pending[-1][1]
            children.append(node)
            if len(children) < 2:
                return
            parent_weight, _ = self._pending.pop()
            node = HuffmanNode(parent_weight, left=children[0], right=children[1])
        self.root = node


class BinaryTreeSerializer(TreeSerializerBase):
    """
    Binary tree file.

    The format:
      - signature (3 bytes, b"HUF")
      - format version (2 bytes, big-endian unsigned)
      - node count (4 bytes, big-endian unsigned)
      - per node, in pre-order:
          - tag (1 byte, 0 internal, 1 leaf)
          - weight (8 bytes, big-endian double)
          - symbol (1 byte, leaves only)
    """

    HEADER_FORMAT = ">3sHI"
    HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
    RECORD_FORMAT = ">Bd"
    RECORD_SIZE = struct.calcsize(RECORD_FORMAT)
    INTERNAL_TAG = 0
    LEAF_TAG = 1

    @property
    def serializer_code(self) -> int:
        return BINARY_SERIALIZER_CODE

    def serialize(self, root: HuffmanNode) -> bytes:
        validate_type(root, "Root", HuffmanNode)
        records = []
        node_count = 0
        for node in iter_preorder(root):
            node_count += 1
            if node.is_leaf:
                records.append(struct.pack(self.RECORD_FORMAT, self.LEAF_TAG, node.weight))
                records.append(bytes((ord(node.symbol),)))
            else:
                records.append(struct.pack(self.RECORD_FORMAT, self.INTERNAL_TAG, node.weight))

        serialized = struct.pack(self.HEADER_FORMAT, TREE_FILE_SIGNATURE, TREE_FILE_VERSION, node_count)
        serialized += b"".join(records)
        self._log(len(serialized))
        return serialized

    def deserialize(self, data: bytes) -> HuffmanNode:
        validate_type(data, "Data", bytes)
        if len(data) < self.HEADER_SIZE:
            raise CorruptTreeFileError("Tree file is too short for its header")
        signature, version, node_count = struct.unpack(self.HEADER_FORMAT, data[:self.HEADER_SIZE])
        if signature != TREE_FILE_SIGNATURE:
            raise CorruptTreeFileError("Invalid tree file signature")
        if version != TREE_FILE_VERSION:
            raise CorruptTreeFileError(f"Unsupported tree file version: {version}")
        if node_count % 2 == 0:
            raise CorruptTreeFileError(f"Node count {node_count} cannot form a strict binary tree")

        assembler = _PreorderAssembler()
        offset = self.HEADER_SIZE
        records_read = 0
        while not assembler.complete:
            if records_read == node_count:
                raise CorruptTreeFileError(f"Tree is incomplete after the declared {node_count} nodes")
            if len(data) < offset + self.RECORD_SIZE:
                raise CorruptTreeFileError(f"Tree file is truncated in record {records_read}")
            tag, weight = struct.unpack(self.RECORD_FORMAT, data[offset:offset + self.RECORD_SIZE])
            offset += self.RECORD_SIZE
            records_read += 1

            if tag == self.INTERNAL_TAG:
                assembler.add_internal(weight)
            elif tag == self.LEAF_TAG:
                if len(data) < offset + 1:
                    raise CorruptTreeFileError(f"Tree file is truncated in record {records_read - 1}")
                assembler.add_leaf(weight, chr(data[offset]))
                offset += 1
            else:
                raise CorruptTreeFileError(f"Unknown node tag {tag} in record {records_read - 1}")

        if records_read != node_count:
            raise CorruptTreeFileError(f"Tree has {records_read} nodes, header declares {node_count}")
        if offset != len(data):
            raise CorruptTreeFileError(f"Tree file has {len(data) - offset} trailing bytes")
        return assembler.root


class LegacyTextTreeSerializer(TreeSerializerBase):
    """
    Line-oriented tree file: "<weight> <symbol>" per node, with the sentinel
    "$" in place of the symbol for internal nodes. Weights use 6 significant
    digits.

    Leaves holding the sentinel or a line break cannot be represented.
    """

    ENCODING = "latin-1"
    UNREPRESENTABLE_SYMBOLS = (INTERNAL_NODE_SENTINEL, "\n", "\r")

    @property
    def serializer_code(self) -> int:
        return LEGACY_TEXT_SERIALIZER_CODE

    def serialize(self, root: HuffmanNode) -> bytes:
        validate_type(root, "Root", HuffmanNode)
        lines = []
        for node in iter_preorder(root):
            if node.is_leaf:
                if node.symbol in self.UNREPRESENTABLE_SYMBOLS:
                    raise ValueError(f"Symbol {node.symbol!r} cannot be stored in a legacy tree file")
                lines.append(f"{node.weight:g} {node.symbol}\n")
            else:
                lines.append(f"{node.weight:g} {INTERNAL_NODE_SENTINEL}\n")
        serialized = "".join(lines).encode(self.ENCODING)
        self._log(len(serialized))
        return serialized

    def deserialize(self, data: bytes) -> HuffmanNode:
        validate_type(data, "Data", bytes)
        lines = data.decode(self.ENCODING).split("\n")
        if lines[-1] == "":
            lines.pop()

        assembler = _PreorderAssembler()
        line_number = 0
        while not assembler.complete:
            if line_number == len(lines):
                raise CorruptTreeFileError(f"Tree file ends after {line_number} lines, tree is incomplete")
            weight, symbol = self._parse_line(lines[line_number], line_number)
            line_number += 1
            if symbol == INTERNAL_NODE_SENTINEL:
                assembler.add_internal(weight)
            else:
                assembler.add_leaf(weight, symbol)

        if line_number != len(lines):
            raise CorruptTreeFileError(f"Tree file has {len(lines) - line_number} trailing lines")
        return assembler.root

    @staticmethod
    def _parse_line(line: str, line_number: int) -> Tuple[float, str]:
        if line.endswith("\r"):
            line = line[:-1]
        separator = line.find(" ")
        if separator <= 0 or len(line) - separator != 2:
            raise CorruptTreeFileError(f"Malformed record on line {line_number + 1}: {line!r}")
        try:
            weight = float(line[:separator])
        except ValueError:
            raise CorruptTreeFileError(f"Invalid weight on line {line_number + 1}: {line[:separator]!r}")
        return weight, line[separator + 1]


def get_serializer(code: int, logger: Optional[Logger] = None) -> TreeSerializerBase:
    """
    Retrieve a serializer instance based on the given code.

    Args:
        code (int): The serializer code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        TreeSerializerBase: An instance of a serializer.

    Raises:
        ValueError: If the serializer code is not supported.
    """
    if code == BINARY_SERIALIZER_CODE:
        return BinaryTreeSerializer(logger)
    elif code == LEGACY_TEXT_SERIALIZER_CODE:
        return LegacyTextTreeSerializer(logger)
    else:
        raise ValueError("Serializer code not supported")


def detect_serializer(data: bytes, logger: Optional[Logger] = None) -> TreeSerializerBase:
    """Pick the binary serializer for data carrying its signature, the legacy one otherwise."""
    validate_type(data, "Data", bytes)
    if data.startswith(TREE_FILE_SIGNATURE):
        return BinaryTreeSerializer(logger)
    return LegacyTextTreeSerializer(logger)
