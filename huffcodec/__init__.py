"""
huffcodec: A Python library for Huffman coding of text with a persisted code tree.
"""

from .codecs import (
    HuffmanCodec,
    HuffmanCodecFile,
)

from .coders import (
    MessageCoder,
    BitPacker,
)

from .models import (
    SymbolFrequency,
    FrequencyTable,
    HuffmanNode,
    CodeTable,
)

from .analyzers import FrequencyAnalyzer

from .trees import (
    TreeBuilder,
    CodeTableGenerator,
    iter_preorder,
    count_leaves,
    tree_depth,
    trees_equivalent,
)

from .serializers import (
    TreeSerializerBase,
    BinaryTreeSerializer,
    LegacyTextTreeSerializer,
    get_serializer,
    detect_serializer,
)

from .settings import VERSION, CodecSettings

from .errors import (
    HuffmanError,
    EmptyInputError,
    DegenerateAlphabetError,
    UnknownSymbolError,
    CorruptTreeFileError,
    MalformedBitstreamError,
    TruncatedStreamError,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyAnalysisLog,
    TreeBuildLog,
    CodingLog,
    SerializationLog,
    CodingProgressStep,
)

# Validators
from .validators import *

__version__ = VERSION

__all__ = [

    "HuffmanCodec",
    "HuffmanCodecFile",

    "MessageCoder",
    "BitPacker",

    "SymbolFrequency",
    "FrequencyTable",
    "HuffmanNode",
    "CodeTable",

    "FrequencyAnalyzer",

    "TreeBuilder",
    "CodeTableGenerator",
    "iter_preorder",
    "count_leaves",
    "tree_depth",
    "trees_equivalent",

    "TreeSerializerBase",
    "BinaryTreeSerializer",
    "LegacyTextTreeSerializer",
    "get_serializer",
    "detect_serializer",

    "CodecSettings",

    "HuffmanError",
    "EmptyInputError",
    "DegenerateAlphabetError",
    "UnknownSymbolError",
    "CorruptTreeFileError",
    "MalformedBitstreamError",
    "TruncatedStreamError",

    "Logger",
    "Log",
    "LogLevel",
]
