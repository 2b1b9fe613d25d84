"""
Reader for text-encoded DataFlash logs.

Each line of the file is one record, e.g. ``GPS, 3, 123456, 2100, ...``.
The whole file is read into memory up front so the total line count is
known for progress reporting.
"""

from .base import BaseLogReader
from typing import Iterator, List, Optional, Tuple
import logging


class TextLogReader(BaseLogReader):
    """Reader for text-based logs."""

    def __init__(self, config=None):
        super().__init__(config)
        self._supported_extensions = {'.log', '.txt'}
        self.encoding = self.config.get('encoding', 'utf-8')
        self.logger = logging.getLogger(__name__)
        self.lines: List[str] = []

    def open(self, file_path: str):
        """
        Read all lines of a text log into memory.

        Args:
            file_path: Path to the text log file

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        self.logger.info(f"Reading text log file: {file_path}")

        with open(file_path, 'r', encoding=self.encoding, errors='ignore') as f:
            self.lines = [line.rstrip('\n') for line in f]

        # A UTF-8 byte-order mark would otherwise become part of the first type tag
        if self.lines:
            self.lines[0] = self.lines[0].lstrip('\ufeff')

        self.total = len(self.lines)
        self.logger.debug(f"Read {self.total} lines from {file_path}")

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        for index, line in enumerate(self.lines):
            if not line:
                continue
            yield index, line

    def progress_at(self, position: int) -> Optional[int]:
        # position is the zero-based line index, so the first line reports 0%
        if position % self.progress_interval == 0:
            return self._percentage(position)
        return None

    def close(self):
        self.lines = []
