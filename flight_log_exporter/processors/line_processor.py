"""
Line processor: classifies each record by its type tag and routes it.

FMT records go to the format registry. Data records are dispatched to the
first decoder that claims their tag and whose declaration is registered.
Everything else is ignored.
"""

from typing import Dict, Any, Optional
import logging

from .base import BaseDecoder
from .decoders import GpsDecoder, AttitudeDecoder, PositionDecoder
from ..parsers.format_registry import FormatRegistry, FMT_TAG
from ..records import CsvRow, LogRecord
from ..utils.error_handling import RecordDecodeError, RobustErrorHandler


class LineProcessor:
    """Turns log lines into CSV rows for one export."""

    def __init__(self, registry: Optional[FormatRegistry] = None,
                 config: Optional[Dict[str, Any]] = None,
                 error_handler: Optional[RobustErrorHandler] = None,
                 clock=None):
        """
        Initialize the line processor.

        Args:
            registry: Format registry for this export (a new one by default)
            config: Decoder configuration
            error_handler: Ledger for per-record failures
            clock: Capture-time source for records without GPS time
        """
        self.config = config or {}
        self.error_handler = error_handler or RobustErrorHandler()
        self.registry = registry or FormatRegistry(self.error_handler)
        self.logger = logging.getLogger(__name__)

        # Insertion order is dispatch priority
        self.decoders: Dict[str, BaseDecoder] = {}
        for decoder in (GpsDecoder(self.config, clock),
                        AttitudeDecoder(self.config, clock),
                        PositionDecoder(self.config, clock)):
            self.register_decoder(decoder)

    def register_decoder(self, decoder: BaseDecoder):
        """Add a decoder, or replace the one for the same message type."""
        self.decoders[decoder.message_type] = decoder

    def find_decoder(self, type_tag: str) -> Optional[BaseDecoder]:
        """
        Find the decoder for a type tag.

        Returns:
            The first decoder claiming the tag whose declaration is
            registered, or None
        """
        for decoder in self.decoders.values():
            if decoder.matches(type_tag) and self.registry.is_registered(decoder.message_type):
                return decoder
        return None

    def process(self, line: str) -> Optional[CsvRow]:
        """
        Process one log line.

        Args:
            line: Raw record text

        Returns:
            CsvRow, or None for FMT records, unsupported or unregistered
            types, skipped records and records that failed to decode
        """
        record = LogRecord.from_line(line)
        type_tag = record.type_tag

        if type_tag == FMT_TAG:
            self.registry.register_declaration(record)
            return None

        decoder = self.find_decoder(type_tag)
        if decoder is None:
            return None

        row = None
        with self.error_handler.handle_record_errors(line, f"decode {decoder.message_type} record"):
            try:
                row = decoder.decode(record, self.registry)
            except Exception as e:
                raise RecordDecodeError(f"{decoder.message_type} decoder failed: {e}") from e
        return row
