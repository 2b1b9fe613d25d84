"""
Base class for log readers.

A reader turns a log file into a sequence of text record lines, each paired
with the position used for progress reporting, and knows the total record
count up front.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Iterator, Optional, Tuple


class BaseLogReader(ABC):
    """Abstract base class for log readers."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the reader with optional configuration.

        Args:
            config: Optional configuration dictionary for reader settings
        """
        self.config = config or {}
        self.progress_interval = self.config.get('progress_interval', 1000)
        self._supported_extensions = set()
        self.total = 0

    @property
    def supported_extensions(self) -> set:
        """Return set of supported file extensions."""
        return self._supported_extensions

    @abstractmethod
    def open(self, file_path: str):
        """
        Open a log file and determine its total record count.

        Args:
            file_path: Path to the log file

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[int, str]]:
        """Yield ``(position, line)`` for every non-empty record line."""
        pass

    @abstractmethod
    def progress_at(self, position: int) -> Optional[int]:
        """
        Progress percentage to report after the record at ``position``.

        Returns:
            Integer percentage, or None when no report is due
        """
        pass

    def close(self):
        """Release any resources held by the reader."""
        pass

    def _percentage(self, position: int) -> int:
        return int(position / self.total * 100)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
        return False
