"""
Record processing components for flight log export.

This module contains:
- The decoder interface
- Decoders for GPS, ATT and POS records
- The line processor that dispatches records to decoders
"""

from .base import BaseDecoder
from .decoders import GpsDecoder, AttitudeDecoder, PositionDecoder
from .line_processor import LineProcessor

__all__ = [
    "BaseDecoder",
    "GpsDecoder",
    "AttitudeDecoder",
    "PositionDecoder",
    "LineProcessor"
]
