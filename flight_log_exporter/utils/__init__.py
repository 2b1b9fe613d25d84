"""
Utility functions and helpers for flight log export.

This module contains:
- Error handling and the exception hierarchy
- Token conversion helpers
- GPS time conversion
- File I/O utilities (flight_log_exporter.utils.io_utils)
"""

from .error_handling import (
    RobustErrorHandler, ExportError, FormatDeclarationError,
    RecordDecodeError, CorruptedFileError
)
from .gps_time import gps_time_to_datetime, format_timestamp

__all__ = [
    "RobustErrorHandler",
    "ExportError",
    "FormatDeclarationError",
    "RecordDecodeError",
    "CorruptedFileError",
    "gps_time_to_datetime",
    "format_timestamp",
]
