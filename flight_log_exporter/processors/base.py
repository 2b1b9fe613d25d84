"""
Base class for record decoders.

A decoder turns one tokenized record of a given type into an optional CSV
row, locating fields through the format registry.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Any, Callable, Optional

from ..parsers.format_registry import FormatRegistry
from ..records import CsvRow, LogRecord
from ..utils.conversions import safe_float
from ..utils.gps_time import format_timestamp


class BaseDecoder(ABC):
    """Abstract base class for record decoders."""

    message_type = ''

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the decoder with optional configuration.

        Args:
            config: Optional configuration dictionary for decoder settings
            clock: Callable returning the capture time for records without
                an embedded timestamp
        """
        self.config = config or {}
        self.clock = clock or datetime.now

    def matches(self, type_tag: str) -> bool:
        """Whether records with this type tag belong to this decoder."""
        return type_tag == self.message_type

    @abstractmethod
    def decode(self, record: LogRecord, registry: FormatRegistry) -> Optional[CsvRow]:
        """
        Decode a record into a CSV row.

        Args:
            record: Tokenized record
            registry: Format registry holding this type's declaration

        Returns:
            CsvRow, or None if the record should be skipped
        """
        pass

    def field_value(self, record: LogRecord, registry: FormatRegistry, field_name: str) -> float:
        """Numeric field value; 0.0 when the field is missing or not numeric."""
        offset = registry.find_field_offset(self.message_type, field_name)
        return safe_float(record.tokens, offset)

    def capture_time(self) -> str:
        return format_timestamp(self.clock())
