"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import List, Optional, Union

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyAnalysisLog(Log):
    def __init__(self, alphabet_size: int, message_length: int) -> None:
        self.alphabet_size = alphabet_size
        self.message_length = message_length
        super().__init__("Frequency_analysis_log", LogLevel.INFO, f"Alphabet size: {alphabet_size}, Message length: {message_length}")


class TreeBuildLog(Log):
    def __init__(self, leaf_count: int, depth: int) -> None:
        self.leaf_count = leaf_count
        self.depth = depth
        super().__init__("Tree_build_log", LogLevel.INFO, f"Leaves: {leaf_count}, Depth: {depth}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded size: {encoded_size}")


class SerializationLog(Log):
    def __init__(self, serializer_code: int, byte_count: int) -> None:
        self.serializer_code = serializer_code
        self.byte_count = byte_count
        super().__init__("Serialization_log", LogLevel.INFO, f"Serializer: {serializer_code}, Bytes: {byte_count}")


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.coding_progress_count = 0

        self.logs: List[Log] = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.coding_step_interval_count = 1000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                count = self.coding_progress_count
                if log.total_steps is not None:
                    log.message = f"{log.base_message} ({count}/{log.total_steps})"
                else:
                    log.message = f"{log.base_message} ({count})"
                if self.record_progress:
                    self.logs.append(log)
                if self.display_progress and (count % self.coding_step_interval_count == 0):
                    print(log)

    def get_logs(self) -> List[Log]:
        return self.logs

    def clear(self) -> None:
        self.logs = []
        self.coding_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
