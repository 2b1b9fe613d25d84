"""
Main entry point for Flight Log Exporter when run as a module.

This allows running the exporter with: python -m flight_log_exporter
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
