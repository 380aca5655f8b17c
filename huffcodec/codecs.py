from typing import Optional, Tuple

from .analyzers import FrequencyAnalyzer
from .coders import MessageCoder
from .errors import DegenerateAlphabetError
from .logger import Logger
from .models import CodeTable
from .serializers import detect_serializer, get_serializer
from .settings import CodecSettings
from .trees import CodeTableGenerator, TreeBuilder
from .validators import validate_type, validate_file_exists, validate_message


class HuffmanCodec:
    def __init__(self, settings: Optional[CodecSettings] = None, logger: Optional[Logger] = None) -> None:
        if settings is None:
            settings = CodecSettings()
        validate_type(settings, "Settings", CodecSettings)
        self.settings: CodecSettings = settings
        self.logger: Optional[Logger] = logger

    def build_code_table(self, message: str) -> CodeTable:
        """
        Build the code table the message would be encoded with.

        Args:
            message (str): The message.

        Returns:
            CodeTable: Code per distinct symbol of the message.
        """
        _, code_table = self._build(message)
        return code_table

    def encode(self, message: str) -> Tuple[str, bytes]:
        """
        Encode the message and serialize the tree it was encoded with.

        Args:
            message (str): The message to encode.

        Returns:
            Tuple[str, bytes]: The bitstring and the tree file contents.

        Raises:
            EmptyInputError: If the message is empty.
            DegenerateAlphabetError: If the message has one distinct symbol and
                the settings disallow it.
        """
        root, code_table = self._build(message)
        bitstring = MessageCoder(self.logger).encode(message, code_table)
        tree_file = get_serializer(self.settings.serializer_code, self.logger).serialize(root)
        return bitstring, tree_file

    def decode(self, bitstring: str, tree_file: bytes) -> str:
        """
        Decode a bitstring with the tree stored in a tree file.

        Args:
            bitstring (str): The encoded message.
            tree_file (bytes): Tree file contents in either supported format.

        Returns:
            str: The decoded message.

        Raises:
            CorruptTreeFileError: If the tree file is malformed.
            MalformedBitstreamError: If the bitstring does not fit the tree.
            TruncatedStreamError: If the bitstring ends in the middle of a code.
        """
        validate_type(bitstring, "Bitstring", str)
        validate_type(tree_file, "Tree file", bytes)

        root = detect_serializer(tree_file, self.logger).deserialize(tree_file)
        return MessageCoder(self.logger).decode(bitstring, root)

    def _build(self, message: str):
        validate_message(message)
        frequency_table = FrequencyAnalyzer(self.logger).analyze(message)
        if frequency_table.get_size() == 1 and not self.settings.allow_degenerate_alphabet:
            raise DegenerateAlphabetError(message[0])
        root = TreeBuilder(self.logger).build(frequency_table)
        return root, CodeTableGenerator().generate(root)


class HuffmanCodecFile(HuffmanCodec):
    def encode(self, message: str, tree_path: Optional[str] = None) -> str:
        """
        Encode the message and write its tree file.

        Args:
            message (str): The message to encode.
            tree_path (Optional[str]): Path of the tree file, settings.default_tree_file if None.

        Returns:
            str: The bitstring.
        """
        if tree_path is None:
            tree_path = self.settings.default_tree_file
        validate_type(tree_path, "Tree path", str)

        bitstring, tree_file = super().encode(message)
        with open(tree_path, "wb") as file:
            file.write(tree_file)
        return bitstring

    def decode(self, bitstring: str, tree_path: Optional[str] = None) -> str:
        """
        Decode a bitstring with the tree read from a tree file.

        Args:
            bitstring (str): The encoded message.
            tree_path (Optional[str]): Path of the tree file, settings.default_tree_file if None.

        Returns:
            str: The decoded message.
        """
        if tree_path is None:
            tree_path = self.settings.default_tree_file
        validate_type(tree_path, "Tree path", str)
        validate_file_exists(tree_path)

        with open(tree_path, "rb") as file:
            tree_file = file.read()
        return super().decode(bitstring, tree_file)
