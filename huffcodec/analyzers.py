"""
analyzers.py

Frequency analysis of input messages.
"""


import numpy as np
from typing import Optional

from .logger import Logger, FrequencyAnalysisLog
from .models import FrequencyTable
from .validators import validate_message


class FrequencyAnalyzer:
    """
    Computes the per-symbol probability of a message.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def analyze(self, message: str) -> FrequencyTable:
        """
        Count every distinct symbol of the message.

        Args:
            message (str): The message, one symbol per character.

        Returns:
            FrequencyTable: Counts per symbol; probabilities are count / len(message).

        Raises:
            EmptyInputError: If the message is empty.
            ValueError: If the message is not a str or holds multi-byte characters.
        """
        validate_message(message)

        code_points = np.frombuffer(message.encode("latin-1"), dtype=np.uint8)
        values, counts = np.unique(code_points, return_counts=True)
        table = FrequencyTable({chr(int(value)): int(count) for value, count in zip(values, counts)})

        if self.logger is not None:
            self.logger.log(FrequencyAnalysisLog(table.get_size(), len(message)))
        return table
