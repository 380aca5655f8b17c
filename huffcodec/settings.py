"""
settings.py

Constants and codec configuration for huffcodec.
"""


VERSION = "1.0.0"

# Binary tree file header: signature followed by a 2 byte format version.
TREE_FILE_SIGNATURE = b"HUF"
TREE_FILE_VERSION = 1

# Marks internal nodes in the legacy line-oriented tree file.
INTERNAL_NODE_SENTINEL = "$"

DEFAULT_TREE_FILE = "huffout.dat"

MAX_SYMBOL = 255

BINARY_SERIALIZER_CODE = 1
LEGACY_TEXT_SERIALIZER_CODE = 2


class CodecSettings:
    """
    Settings for the Huffman codec.
    """

    def __init__(
        self,
        serializer_code: int = BINARY_SERIALIZER_CODE,
        allow_degenerate_alphabet: bool = True,
        default_tree_file: str = DEFAULT_TREE_FILE,
    ) -> None:
        if not isinstance(serializer_code, int) or isinstance(serializer_code, bool):
            raise ValueError("Serializer code must be of type int")
        if serializer_code not in (BINARY_SERIALIZER_CODE, LEGACY_TEXT_SERIALIZER_CODE):
            raise ValueError("Serializer code not supported")
        if not isinstance(allow_degenerate_alphabet, bool):
            raise ValueError("Allow degenerate alphabet must be of type bool")
        if not isinstance(default_tree_file, str) or not default_tree_file:
            raise ValueError("Default tree file must be a non-empty str")

        self.serializer_code: int = serializer_code
        self.allow_degenerate_alphabet: bool = allow_degenerate_alphabet
        self.default_tree_file: str = default_tree_file

    def __repr__(self) -> str:
        return (
            f"CodecSettings(serializer_code={self.serializer_code}, "
            f"allow_degenerate_alphabet={self.allow_degenerate_alphabet}, "
            f"default_tree_file={self.default_tree_file!r})"
        )
