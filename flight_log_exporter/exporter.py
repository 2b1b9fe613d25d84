"""
Export orchestrator.

Converts one DataFlash log (binary or text) into a CSV file next to it,
writing one row per exported record as the log is read.
"""

from typing import Any, Callable, Dict, Optional
from pathlib import Path
import logging

from .config import ExportConfig
from .parsers import BaseLogReader, BinLogReader, TextLogReader
from .processors import LineProcessor
from .records import CSV_HEADER
from .utils.error_handling import RobustErrorHandler
from .utils.io_utils import FileHandler

ProgressCallback = Callable[[int], None]


class LogCsvExporter:
    """Exports flight logs to CSV."""

    def __init__(self, config: Optional[ExportConfig] = None, clock=None):
        """
        Initialize the exporter.

        Args:
            config: Export configuration. If None, uses default config.
            clock: Capture-time source for ATT and POS rows (defaults to
                the wall clock)
        """
        self.config = config or ExportConfig()
        self.clock = clock
        self.logger = logging.getLogger(__name__)
        self.file_handler = FileHandler(self.config.to_dict())

        # Statistics of the most recent export
        self.last_stats: Dict[str, Any] = {}
        self.error_handler = RobustErrorHandler()

    def create_reader(self, log_file: str) -> BaseLogReader:
        """Pick the binary or text reader from the file extension."""
        reader_config = self.config.get_reader_config()
        if Path(log_file).suffix.lower() in self.config.binary_extensions:
            return BinLogReader(reader_config)
        return TextLogReader(reader_config)

    def output_path(self, log_file: str) -> Path:
        return self.file_handler.output_path_for(log_file, self.config.output_extension)

    def export(self, log_file: str, progress_callback: Optional[ProgressCallback] = None):
        """
        Export a log file to CSV.

        The CSV is written next to the input with its extension replaced.
        Records that fail to decode are logged and skipped; any other
        failure is logged and re-raised.

        Args:
            log_file: Path to the .bin or text log
            progress_callback: Called with integer percentages as the export
                advances

        Raises:
            FileNotFoundError: If the log file doesn't exist
            CorruptedFileError: If a binary log cannot be indexed
            OSError: If the CSV cannot be written
        """
        csv_file = self.output_path(log_file)
        self.error_handler.reset()
        processor = LineProcessor(
            config=self.config.get_decoder_config(),
            error_handler=self.error_handler,
            clock=self.clock
        )

        stats = {
            'log_file': str(log_file),
            'csv_file': str(csv_file),
            'records_read': 0,
            'rows_written': 0,
            'rows_by_type': {},
        }
        self.last_stats = stats

        self.logger.info(f"Exporting {log_file} to {csv_file}")

        with self.error_handler.handle_processing_errors(f"exporting {log_file} to CSV"):
            if Path(log_file).resolve() == csv_file.resolve():
                raise ValueError(f"Output would overwrite the input log: {log_file}")

            with self.create_reader(log_file) as reader:
                reader.open(str(log_file))

                with open(csv_file, 'w', encoding=self.config.encoding, newline='') as csv_out:
                    csv_out.write(CSV_HEADER + '\n')

                    for position, line in reader:
                        stats['records_read'] += 1

                        row = processor.process(line)
                        if row is not None:
                            csv_out.write(row.to_csv_line() + '\n')
                            stats['rows_written'] += 1
                            by_type = stats['rows_by_type']
                            by_type[row.message_type] = by_type.get(row.message_type, 0) + 1

                        if progress_callback is not None:
                            progress = reader.progress_at(position)
                            if progress is not None:
                                progress_callback(progress)

        stats['declarations'] = len(processor.registry)
        stats['decode_errors'] = self.error_handler.error_count

        self.logger.info(
            f"Exported {stats['rows_written']} rows from {stats['records_read']} records "
            f"({stats['decode_errors']} skipped with errors) to {csv_file}")


def export_to_csv(log_file: str, progress_callback: Optional[ProgressCallback] = None,
                  config: Optional[ExportConfig] = None):
    """
    Export a flight log to a CSV file next to it.

    Args:
        log_file: Path to the .bin or text log
        progress_callback: Optional callable receiving integer percentages
        config: Export configuration. If None, uses default config.
    """
    LogCsvExporter(config).export(log_file, progress_callback)
