"""
Configuration management for flight log export.

Provides centralized configuration handling with validation and defaults.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List
import json
from pathlib import Path


@dataclass
class ExportConfig:
    """Configuration class for the log to CSV exporter."""

    # Input settings
    binary_extensions: List[str] = field(default_factory=lambda: ['.bin'])  # Read as DataFlash binary
    encoding: str = "utf-8"  # Output and text input encoding

    # Output settings
    output_extension: str = ".csv"  # Replaces the input file extension

    # Progress reporting
    progress_interval: int = 1000  # Records between progress callbacks

    # Decoding settings
    min_gps_fix_type: int = 3  # Minimum GPS Status to export (3 = 3-D fix)
    gps_leap_seconds: int = 18  # GPS to UTC offset for the Time column

    verbose: bool = False  # Enable verbose logging

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.binary_extensions = [ext.lower() for ext in self.binary_extensions]
        self._validate_config()

    def _validate_config(self):
        """Validate configuration parameters."""
        for ext in self.binary_extensions:
            if not ext.startswith('.'):
                raise ValueError(f"binary extension must start with '.': {ext}")

        if not self.output_extension.startswith('.'):
            raise ValueError("output_extension must start with '.'")

        if self.output_extension.lower() in self.binary_extensions:
            raise ValueError("output_extension must differ from the binary extensions")

        if self.progress_interval <= 0:
            raise ValueError("progress_interval must be positive")

        if self.min_gps_fix_type < 0:
            raise ValueError("min_gps_fix_type must be non-negative")

        if self.gps_leap_seconds < 0:
            raise ValueError("gps_leap_seconds must be non-negative")

        try:
            "".encode(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")

    @classmethod
    def from_file(cls, config_path: str) -> 'ExportConfig':
        """
        Load configuration from JSON file.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            ExportConfig instance
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def to_file(self, config_path: str):
        """
        Save configuration to JSON file.

        Args:
            config_path: Path where to save the configuration
        """
        path = Path(config_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in self.__dict__.items()
                if not key.startswith('_')}

    def get_reader_config(self) -> Dict[str, Any]:
        """Settings passed to the log readers."""
        return {
            'binary_extensions': list(self.binary_extensions),
            'encoding': self.encoding,
            'progress_interval': self.progress_interval,
        }

    def get_decoder_config(self) -> Dict[str, Any]:
        """Settings passed to the record decoders."""
        return {
            'min_gps_fix_type': self.min_gps_fix_type,
            'gps_leap_seconds': self.gps_leap_seconds,
        }

    def copy(self) -> 'ExportConfig':
        """Create a copy of the configuration."""
        return ExportConfig(**self.to_dict())
