"""
Command-line interface for Flight Log Exporter.

Exports one or more DataFlash logs to CSV files next to them.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import Any, Dict, List

from . import __version__
from .config import ExportConfig
from .exporter import LogCsvExporter
from .parsers import BinLogReader, TextLogReader
from .utils.io_utils import FileHandler


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Export ArduPilot DataFlash logs to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export a single binary log (writes flight.csv)
  flight-log-exporter flight.bin

  # Export several logs and show progress
  flight-log-exporter flight1.bin flight2.log --progress

  # Export every log in a directory
  flight-log-exporter --input-dir /path/to/logs

  # Use configuration file
  flight-log-exporter flight.bin --config config.json

Supported formats: .bin (binary), any other extension is read as text
        """
    )

    # Input arguments
    parser.add_argument(
        'files',
        nargs='*',
        help='Log files to export'
    )
    parser.add_argument(
        '--input-dir', '-i',
        type=str,
        help='Directory to search for log files (alternative to specifying files)'
    )

    # Configuration arguments
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration file path (JSON format)'
    )

    parser.add_argument(
        '--save-config',
        type=str,
        help='Save current configuration to file'
    )

    parser.add_argument(
        '--min-fix',
        type=int,
        help='Minimum GPS Status exported (default: 3)'
    )

    # Output control
    parser.add_argument(
        '--progress', '-p',
        action='store_true',
        help='Print export progress'
    )

    # Logging and debugging
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except errors'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False):
    """Configure logging based on command line arguments."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def discover_log_files(input_dir: str, config: ExportConfig) -> List[str]:
    """Discover log files in the specified directory."""
    file_handler = FileHandler()
    reader_config = config.get_reader_config()
    extensions = set()
    for reader in (BinLogReader(reader_config), TextLogReader(reader_config)):
        extensions |= reader.supported_extensions
    return file_handler.find_log_files(input_dir, sorted(extensions))


def validate_files(files: List[str]) -> List[str]:
    """Validate that input files exist and are readable."""
    valid_files = []

    for file_path in files:
        path = Path(file_path)
        if not path.exists():
            print(f"Warning: File not found: {file_path}", file=sys.stderr)
            continue

        if not path.is_file():
            print(f"Warning: Not a file: {file_path}", file=sys.stderr)
            continue

        valid_files.append(str(path.absolute()))

    return valid_files


def create_config_from_args(args: argparse.Namespace) -> ExportConfig:
    """Create ExportConfig from command line arguments."""
    if args.config:
        config = ExportConfig.from_file(args.config)
    else:
        config = ExportConfig()

    if args.min_fix is not None:
        config.min_gps_fix_type = args.min_fix

    if args.verbose or args.debug:
        config.verbose = True

    # Re-validate after overrides
    return config.copy()


def print_progress(percent: int):
    print(f"\r  {percent:3d}%", end='', flush=True)


def print_error_summary(summary: Dict[str, Any]):
    """Print skipped-record counts by error type and operation."""
    if not summary['total_errors']:
        return

    print(f"  {summary['total_errors']} records skipped:")
    for operation, count in sorted(summary['operations'].items()):
        print(f"    {operation}: {count}")
    for error_type, count in sorted(summary['error_types'].items()):
        print(f"    {error_type}: {count}")


def main(argv: List[str] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.files and not args.input_dir:
        parser.print_help()
        return 1

    if args.files and args.input_dir:
        print("Error: Cannot specify both files and --input-dir", file=sys.stderr)
        return 1

    try:
        config = create_config_from_args(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.verbose, args.debug, args.quiet)
    logger = logging.getLogger('flight_log_exporter.cli')

    if args.save_config:
        config.to_file(args.save_config)
        logger.info(f"Configuration saved to: {args.save_config}")

    if args.input_dir:
        logger.info(f"Discovering log files in: {args.input_dir}")
        files = discover_log_files(args.input_dir, config)
        if not files:
            print(f"No log files found in directory: {args.input_dir}", file=sys.stderr)
            return 1
    else:
        files = args.files

    valid_files = validate_files(files)
    if not valid_files:
        print("No valid log files to export", file=sys.stderr)
        return 1

    exporter = LogCsvExporter(config)
    failures = 0

    try:
        for file_path in valid_files:
            callback = print_progress if args.progress and not args.quiet else None
            try:
                exporter.export(file_path, callback)
            except Exception as e:
                failures += 1
                if callback is not None:
                    print()
                print(f"Failed to export {file_path}: {e}", file=sys.stderr)
                continue

            if callback is not None:
                print()

            if not args.quiet:
                stats = exporter.last_stats
                print(f"{file_path} -> {stats['csv_file']}")
                print(f"  {stats['rows_written']} rows from {stats['records_read']} records")
                for message_type, count in sorted(stats['rows_by_type'].items()):
                    print(f"  {message_type}: {count}")
                if config.verbose:
                    print_error_summary(exporter.error_handler.get_error_summary())

    except KeyboardInterrupt:
        print("\nExport interrupted by user", file=sys.stderr)
        return 130

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
