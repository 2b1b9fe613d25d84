"""
Record types shared by the readers, decoders and the exporter.
"""

import re
from dataclasses import dataclass, fields
from typing import List, Optional

from .utils.conversions import format_number, quote_csv_field

CSV_COLUMNS = [
    'Time', 'MessageType', 'Lat', 'Lng', 'Alt', 'Spd', 'Hdg',
    'VX', 'VY', 'VZ', 'Roll', 'Pitch', 'Yaw', 'RawData'
]

NUMERIC_COLUMNS = CSV_COLUMNS[2:13]

CSV_HEADER = ','.join(CSV_COLUMNS)

TOKEN_DELIMITERS = re.compile(r'[,:]')


@dataclass(frozen=True)
class LogRecord:
    """One log line split into tokens; token 0 is the type tag."""

    raw: str
    tokens: List[str]

    @classmethod
    def from_line(cls, line: str) -> 'LogRecord':
        return cls(raw=line, tokens=TOKEN_DELIMITERS.split(line))

    @property
    def type_tag(self) -> str:
        return self.tokens[0].strip()


@dataclass(frozen=True)
class CsvRow:
    """
    One output row.

    Numeric columns left as None are written blank. ``raw_data`` is always
    written quoted so the original record can be recovered exactly.
    """

    time: str
    message_type: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    alt: Optional[float] = None
    spd: Optional[float] = None
    hdg: Optional[float] = None
    vx: Optional[float] = None
    vy: Optional[float] = None
    vz: Optional[float] = None
    roll: Optional[float] = None
    pitch: Optional[float] = None
    yaw: Optional[float] = None
    raw_data: str = ""

    def to_fields(self) -> List[str]:
        """Serialize to the 14 CSV fields, in header order."""
        values = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == 'raw_data':
                values.append(quote_csv_field(value))
            elif value is None:
                values.append("")
            elif isinstance(value, str):
                values.append(value)
            else:
                values.append(format_number(value))
        return values

    def to_csv_line(self) -> str:
        return ','.join(self.to_fields())
