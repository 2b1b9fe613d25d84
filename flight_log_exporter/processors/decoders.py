"""
Decoders for the record types exported to CSV: GPS, ATT and POS.
"""

from datetime import datetime
from typing import Optional, Sequence
import logging

from .base import BaseDecoder
from ..parsers.format_registry import FormatRegistry
from ..records import CsvRow, LogRecord
from ..utils.conversions import parse_float, parse_int
from ..utils.gps_time import GPS_LEAP_SECONDS, gps_time_to_datetime, format_timestamp


class GpsDecoder(BaseDecoder):
    """
    Decodes the GPS family (GPS, GPS2, ...) using the GPS declaration.

    Records without a 3-D fix are skipped. The Time column comes from the
    GPS week and time-of-week fields embedded in the record.
    """

    message_type = 'GPS'

    # Newer logs use GWk/GMS, older ones Week/TimeMS
    WEEK_FIELDS = ('GWk', 'Week')
    MSEC_FIELDS = ('GMS', 'TimeMS')

    def __init__(self, config=None, clock=None):
        super().__init__(config, clock)
        self.min_fix_type = self.config.get('min_gps_fix_type', 3)
        self.leap_seconds = self.config.get('gps_leap_seconds', GPS_LEAP_SECONDS)
        self.logger = logging.getLogger(__name__)

    def matches(self, type_tag: str) -> bool:
        return type_tag.startswith(self.message_type)

    def decode(self, record: LogRecord, registry: FormatRegistry) -> Optional[CsvRow]:
        if not self.has_fix(record, registry):
            return None

        return CsvRow(
            time=format_timestamp(self.gps_time(record, registry)),
            message_type=self.message_type,
            lat=self.field_value(record, registry, 'Lat'),
            lng=self.field_value(record, registry, 'Lng'),
            alt=self.field_value(record, registry, 'Alt'),
            spd=self.field_value(record, registry, 'Spd'),
            hdg=self.field_value(record, registry, 'GCrs'),
            vx=self.field_value(record, registry, 'VX'),
            vy=self.field_value(record, registry, 'VY'),
            vz=self.field_value(record, registry, 'VZ'),
            raw_data=record.raw
        )

    def has_fix(self, record: LogRecord, registry: FormatRegistry) -> bool:
        """
        Check the Status field for a 3-D fix.

        Records whose declaration has no Status field, or that are too short
        to contain it, are not gated.
        """
        offset = registry.find_field_offset(self.message_type, 'Status')
        if offset < 0 or offset >= len(record.tokens):
            return True

        status = parse_int(record.tokens[offset])
        return status is not None and status >= self.min_fix_type

    def gps_time(self, record: LogRecord, registry: FormatRegistry) -> Optional[datetime]:
        """GPS time embedded in the record, or None if unavailable."""
        week = parse_int(self._first_token(record, registry, self.WEEK_FIELDS))
        msec = parse_float(self._first_token(record, registry, self.MSEC_FIELDS))
        if week is None or msec is None:
            return None

        try:
            return gps_time_to_datetime(week, msec, self.leap_seconds)
        except (ValueError, OverflowError) as e:
            self.logger.debug(f"Unusable GPS time in record {record.raw}: {e}")
            return None

    def _first_token(self, record: LogRecord, registry: FormatRegistry,
                     field_names: Sequence[str]) -> Optional[str]:
        for name in field_names:
            offset = registry.find_field_offset(self.message_type, name)
            if 0 <= offset < len(record.tokens):
                return record.tokens[offset]
        return None


class AttitudeDecoder(BaseDecoder):
    """Decodes ATT records: roll, pitch and yaw."""

    message_type = 'ATT'

    def decode(self, record: LogRecord, registry: FormatRegistry) -> Optional[CsvRow]:
        # ATT has no GPS time; rows are stamped with the capture time
        return CsvRow(
            time=self.capture_time(),
            message_type=self.message_type,
            roll=self.field_value(record, registry, 'Roll'),
            pitch=self.field_value(record, registry, 'Pitch'),
            yaw=self.field_value(record, registry, 'Yaw'),
            raw_data=record.raw
        )


class PositionDecoder(BaseDecoder):
    """Decodes POS records: latitude, longitude and altitude."""

    message_type = 'POS'

    def decode(self, record: LogRecord, registry: FormatRegistry) -> Optional[CsvRow]:
        return CsvRow(
            time=self.capture_time(),
            message_type=self.message_type,
            lat=self.field_value(record, registry, 'Lat'),
            lng=self.field_value(record, registry, 'Lng'),
            alt=self.field_value(record, registry, 'Alt'),
            raw_data=record.raw
        )
