"""
Log readers and the format registry for DataFlash logs.

This module contains:
- BIN reader (ArduPilot binary logs, via pymavlink)
- TXT reader (text-encoded logs)
- Format registry built from FMT records
"""

from .base import BaseLogReader
from .bin_reader import BinLogReader
from .txt_reader import TextLogReader
from .format_registry import FormatRegistry, FormatDeclaration

__all__ = ["BaseLogReader", "BinLogReader", "TextLogReader", "FormatRegistry", "FormatDeclaration"]
