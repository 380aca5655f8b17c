"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .validators import validate_symbol

Weight = Union[int, float]


class SymbolFrequency:
    """
    Represents a symbol together with its occurrence count and probability.
    """
    def __init__(self, symbol: str, count: Weight, probability: float) -> None:
        self.symbol: str = symbol
        self.count: Weight = count
        self.probability: float = probability

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return (self.symbol, self.count, self.probability) == (other.symbol, other.count, other.probability)
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.count}, {self.probability}]"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyTable:
    """
    Read-only mapping from each distinct symbol to its weight.

    Weights are occurrence counts when the table comes from a message, so
    ties between equally frequent symbols compare exactly. Probabilities are
    derived as weight / total.
    """
    def __init__(self, weights: Mapping[str, Weight]) -> None:
        self._weights: Dict[str, Weight] = {}
        for symbol, weight in weights.items():
            validate_symbol(symbol)
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise ValueError("Weight must be of type int or float")
            if weight <= 0:
                raise ValueError(f"Weight of symbol {symbol!r} must be positive")
            self._weights[symbol] = weight
        self._total: Weight = sum(self._weights.values())
        self._sorted_symbols: List[str] = sorted(self._weights)

    @classmethod
    def from_probabilities(cls, probabilities: Mapping[str, float]) -> 'FrequencyTable':
        """
        Build a table from a symbol -> probability mapping.

        Args:
            probabilities (Mapping[str, float]): Probabilities summing to ~1.0.

        Returns:
            FrequencyTable: The table, with the probabilities as weights.
        """
        for symbol, probability in probabilities.items():
            if isinstance(probability, (int, float)) and not 0 < probability <= 1:
                raise ValueError(f"Probability of symbol {symbol!r} must be in (0, 1]")
        return cls(probabilities)

    @property
    def total(self) -> Weight:
        return self._total

    def get_size(self) -> int:
        """
        Get the number of distinct symbols in the table.

        Returns:
            int: Number of symbols.
        """
        return len(self._weights)

    def contains(self, symbol: str) -> bool:
        return symbol in self._weights

    def get_sorted_symbols(self) -> List[str]:
        return list(self._sorted_symbols)

    def get_count(self, symbol: str) -> Weight:
        """
        Get the raw weight (occurrence count) of the symbol.

        Raises:
            KeyError: If the symbol is not in the table.
        """
        return self._weights[symbol]

    def get_probability(self, symbol: str) -> float:
        """
        Get the probability of the symbol, count divided by the total weight.

        Raises:
            KeyError: If the symbol is not in the table.
        """
        return self._weights[symbol] / self._total

    def items(self) -> Iterator[SymbolFrequency]:
        """
        Iterate the table in ascending symbol order.

        Returns:
            Iterator[SymbolFrequency]: One record per symbol.
        """
        for symbol in self._sorted_symbols:
            yield SymbolFrequency(symbol, self._weights[symbol], self.get_probability(symbol))

    def to_dict(self) -> Dict[str, float]:
        """Symbol -> probability."""
        return {symbol: self.get_probability(symbol) for symbol in self._sorted_symbols}

    def __len__(self) -> int:
        return len(self._weights)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return self._weights == other._weights

    def __repr__(self) -> str:
        return f"FrequencyTable({self.to_dict()})"


class HuffmanNode:
    """
    A node of the Huffman tree.

    A leaf holds one symbol and no children. An internal node holds no symbol
    and exactly two children; its weight is the sum of theirs.
    """
    def __init__(
        self,
        weight: float,
        symbol: Optional[str] = None,
        left: Optional['HuffmanNode'] = None,
        right: Optional['HuffmanNode'] = None,
    ) -> None:
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError("Weight must be of type int or float")
        if symbol is not None:
            validate_symbol(symbol)
            if left is not None or right is not None:
                raise ValueError("Leaf node must not have children")
        elif left is None or right is None:
            raise ValueError("Internal node must have exactly two children")

        self.weight: float = weight
        self.symbol: Optional[str] = symbol
        self.left: Optional[HuffmanNode] = left
        self.right: Optional[HuffmanNode] = right

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"HuffmanNode({self.weight}, {self.symbol!r})"
        return f"HuffmanNode({self.weight}, internal)"


class CodeTable:
    """
    Mapping from each symbol to its code, a string of '0' and '1'.
    """
    def __init__(self, codes: Optional[Mapping[str, str]] = None) -> None:
        self._codes: Dict[str, str] = {}
        if codes is not None:
            for symbol, code in codes.items():
                self.add(symbol, code)

    def add(self, symbol: str, code: str) -> None:
        validate_symbol(symbol)
        if not isinstance(code, str) or any(bit not in "01" for bit in code):
            raise ValueError("Code must be a str of '0' and '1'")
        if symbol in self._codes:
            raise ValueError(f"Symbol {symbol!r} already has a code")
        self._codes[symbol] = code

    def get_code(self, symbol: str) -> str:
        """
        Raises:
            KeyError: If the symbol has no code.
        """
        return self._codes[symbol]

    def contains(self, symbol: str) -> bool:
        return symbol in self._codes

    def get_size(self) -> int:
        return len(self._codes)

    def items(self) -> List[Tuple[str, str]]:
        """(symbol, code) pairs in ascending symbol order."""
        return sorted(self._codes.items())

    def code_lengths(self) -> Dict[str, int]:
        return {symbol: len(code) for symbol, code in self._codes.items()}

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another code.

        After sorting, a code that prefixes any other code also prefixes its
        immediate successor, so adjacent pairs are enough.
        """
        codes = sorted(self._codes.values())
        for current, following in zip(codes, codes[1:]):
            if following.startswith(current):
                return False
        return True

    def average_code_length(self, frequency_table: FrequencyTable) -> float:
        """
        Expected code length in bits per symbol under the given table.

        Raises:
            KeyError: If a symbol of the table has no code.
        """
        return sum(record.probability * len(self._codes[record.symbol]) for record in frequency_table.items())

    def to_dict(self) -> Dict[str, str]:
        return dict(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return False
        return self._codes == other._codes

    def __repr__(self) -> str:
        return f"CodeTable({dict(self.items())})"
