"""
Error handling utilities for flight log export.

Per-record decoding failures are recovered locally and recorded in an error
ledger; fatal failures are logged and re-raised to the caller.
"""

from typing import Dict, Any, List
import logging
import traceback
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Base exception for export errors."""
    pass


class FormatDeclarationError(ExportError):
    """Exception raised when an FMT record cannot be parsed."""
    pass


class RecordDecodeError(ExportError):
    """Exception raised when a data record cannot be decoded."""
    pass


class CorruptedFileError(ExportError):
    """Exception raised when a log file is corrupted or unreadable."""
    pass


class RobustErrorHandler:
    """Applies the two-tier error policy used during an export."""

    def __init__(self, max_logged_errors: int = 1000):
        """
        Initialize error handler.

        Args:
            max_logged_errors: Maximum number of error entries kept in the ledger
        """
        self.max_logged_errors = max_logged_errors
        self.error_log: List[Dict[str, Any]] = []
        self.error_count = 0

    def _record(self, operation: str, error: Exception, line: str = None):
        self.error_count += 1
        if len(self.error_log) >= self.max_logged_errors:
            return
        self.error_log.append({
            'operation': operation,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'line': line,
        })

    @contextmanager
    def handle_record_errors(self, line: str, operation: str = "decode record"):
        """
        Context manager for recoverable per-record failures.

        The failure is logged at DEBUG level together with the offending
        record and swallowed so processing continues with the next record.

        Args:
            line: Raw record text being processed
            operation: Name of the operation being performed
        """
        try:
            yield
        except Exception as e:
            self._record(operation, e, line)
            logger.debug(f"Error in {operation}: {line}: {e}")

    @contextmanager
    def handle_processing_errors(self, operation_name: str, critical: bool = True):
        """
        Context manager for export-level failures.

        Args:
            operation_name: Name of the operation being performed
            critical: Whether the operation is critical (re-raises on failure)
        """
        try:
            logger.debug(f"Starting operation: {operation_name}")
            yield
            logger.debug(f"Completed operation: {operation_name}")
        except Exception as e:
            self._record(operation_name, e)

            logger.error(f"Error in {operation_name}: {e}")
            logger.debug(f"Full traceback: {traceback.format_exc()}")

            if critical:
                raise
            logger.warning(f"Non-critical error in {operation_name}, continuing...")

    def get_error_summary(self) -> Dict[str, Any]:
        """
        Get a summary of all errors encountered.

        Returns:
            Dictionary with error statistics and details
        """
        if not self.error_log:
            return {'total_errors': self.error_count, 'error_types': {}, 'operations': {}}

        error_types = {}
        operations = {}

        for error in self.error_log:
            error_type = error['error_type']
            operation = error['operation']

            error_types[error_type] = error_types.get(error_type, 0) + 1
            operations[operation] = operations.get(operation, 0) + 1

        return {
            'total_errors': self.error_count,
            'error_types': error_types,
            'operations': operations,
            'recent_errors': self.error_log[-5:]
        }

    def reset(self):
        """Clear the error ledger."""
        self.error_log = []
        self.error_count = 0
