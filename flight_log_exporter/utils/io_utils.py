"""
File I/O utilities.

This module provides common file handling operations.
"""

import pandas as pd
from pathlib import Path
from typing import List, Optional

from ..records import CSV_COLUMNS, NUMERIC_COLUMNS
from .gps_time import TIMESTAMP_FORMAT


class FileHandler:
    """Handles file I/O operations for the flight log exporter."""

    def __init__(self, config=None):
        """Initialize file handler."""
        self.config = config or {}

    def output_path_for(self, log_file: str, extension: str = '.csv') -> Path:
        """
        Get the CSV path for a log file.

        Args:
            log_file: Path to the input log
            extension: Extension that replaces the input extension

        Returns:
            Path next to the input with its extension replaced
        """
        return Path(log_file).with_suffix(extension)

    def load_export(self, file_path: str, encoding: str = 'utf-8') -> pd.DataFrame:
        """
        Load an exported CSV file for analysis.

        Numeric columns are returned as floats with blanks as NaN, Time is
        parsed to datetimes (NaT when blank) and RawData holds the original
        record text.

        Args:
            file_path: Path to the exported CSV file
            encoding: File encoding

        Returns:
            Loaded DataFrame
        """
        df = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)

        missing = [col for col in CSV_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"Not an exported log CSV, missing columns: {missing}")

        for col in NUMERIC_COLUMNS:
            df[col] = pd.to_numeric(df[col], errors='coerce')

        df['Time'] = pd.to_datetime(df['Time'], format=f"{TIMESTAMP_FORMAT}.%f", errors='coerce')

        return df[CSV_COLUMNS]

    def find_log_files(self, directory: str, extensions: Optional[List[str]] = None) -> List[str]:
        """
        Find log files in directory with specified extensions.

        Args:
            directory: Directory to search
            extensions: List of file extensions to look for

        Returns:
            List of found file paths
        """
        if extensions is None:
            extensions = ['.bin', '.log', '.txt']

        directory_path = Path(directory)
        found_files = set()

        for path in directory_path.iterdir():
            if path.is_file() and path.suffix.lower() in extensions:
                found_files.add(path)

        return [str(f) for f in sorted(found_files)]
