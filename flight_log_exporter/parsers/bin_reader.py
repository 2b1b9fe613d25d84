"""
Reader for ArduPilot binary DataFlash logs.

Uses pymavlink's DataFlash reader to walk the file and renders each message
as the equivalent text log line, so binary and text logs share one decoding
path.
"""

from .base import BaseLogReader
from ..utils.error_handling import CorruptedFileError
from pathlib import Path
from typing import Iterator, Optional, Tuple
import logging

try:
    from pymavlink import DFReader
except ImportError:
    raise ImportError("pymavlink is required for BIN parsing. Install with: pip install pymavlink")


class BinLogReader(BaseLogReader):
    """Reader for BIN (ArduPilot binary) files."""

    def __init__(self, config=None):
        super().__init__(config)
        self._supported_extensions = set(self.config.get('binary_extensions', ['.bin']))
        self.logger = logging.getLogger(__name__)
        self._dflog = None

    def open(self, file_path: str):
        """
        Open a BIN file and index its messages.

        Args:
            file_path: Path to the BIN file

        Raises:
            FileNotFoundError: If file doesn't exist
            CorruptedFileError: If pymavlink cannot index the file
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Invalid or missing BIN file: {file_path}")

        self.logger.info(f"Reading BIN file: {file_path}")

        if path.stat().st_size == 0:
            self.logger.warning(f"BIN file is empty: {file_path}")
            self.total = 0
            return

        try:
            self._dflog = DFReader.DFReader_binary(str(path), zero_time_base=True)
        except OSError:
            raise
        except Exception as e:
            raise CorruptedFileError(f"Failed to read BIN file {file_path}: {e}") from e

        self.total = sum(self._dflog.counts)
        self.logger.debug(f"Indexed {self.total} messages in {file_path}")

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        if self._dflog is None:
            return

        processed = 0
        while True:
            msg = self._dflog.recv_msg()
            if msg is None:
                break

            line = self.format_message(msg)
            if not line:
                continue

            processed += 1
            yield processed, line

    def progress_at(self, position: int) -> Optional[int]:
        # position counts records already processed, so the first report is at 1000
        if position % self.progress_interval == 0:
            return self._percentage(position)
        return None

    def format_message(self, msg) -> str:
        """
        Render a DataFlash message as a text log line.

        FMT messages come out as ``FMT, Type, Length, Name, Format, Columns``,
        the same layout text logs use.

        Args:
            msg: pymavlink DFMessage

        Returns:
            Comma separated record line
        """
        values = [msg.get_type()]
        for field in msg.get_fieldnames():
            value = getattr(msg, field)
            if isinstance(value, bytes):
                value = value.decode('utf-8', errors='replace')
            values.append(str(value))
        return ', '.join(values)

    def close(self):
        if self._dflog is not None:
            self._dflog.close()
            self._dflog = None
