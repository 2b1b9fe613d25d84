"""
Flight Log Exporter - converts ArduPilot DataFlash logs to CSV.

This package reads binary (.bin) and text-encoded DataFlash logs, interprets
their self-describing FMT records, and writes GPS, attitude and position
records to a flat CSV file for downstream analysis.
"""

__version__ = "1.0.0"
__author__ = "Flight Log Exporter Team"

from .config import ExportConfig
from .exporter import LogCsvExporter, export_to_csv

__all__ = ["ExportConfig", "LogCsvExporter", "export_to_csv"]
