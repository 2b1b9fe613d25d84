"""
Format registry for self-describing DataFlash logs.

FMT records declare the field layout of every other record type. The
registry is built incrementally while a log is read and answers
field-name to token-offset lookups for the decoders.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import logging

from ..records import LogRecord
from ..utils.conversions import NOT_FOUND
from ..utils.error_handling import FormatDeclarationError, RobustErrorHandler

FMT_TAG = 'FMT'

# FMT, type id, length, name, format
FMT_HEADER_TOKENS = 5


@dataclass(frozen=True)
class FormatDeclaration:
    """Field layout of one record type."""

    type_id: int
    length: int
    name: str
    format: str
    field_names: Tuple[str, ...]

    @classmethod
    def from_record(cls, record: LogRecord) -> 'FormatDeclaration':
        """
        Parse an FMT record.

        Args:
            record: Tokenized FMT record, e.g.
                ``FMT, 130, 45, GPS, BIHBcLLeeEefI, Status,TimeMS,Week,...``

        Returns:
            The parsed declaration

        Raises:
            FormatDeclarationError: If the record is not a well-formed FMT record
        """
        tokens = [t.strip() for t in record.tokens]
        tokens = [t for t in tokens if t]

        if not tokens or tokens[0] != FMT_TAG:
            raise FormatDeclarationError(f"Not an FMT record: {record.raw}")

        if len(tokens) < FMT_HEADER_TOKENS:
            raise FormatDeclarationError(
                f"FMT record has {len(tokens)} tokens, expected at least {FMT_HEADER_TOKENS}")

        try:
            type_id = int(tokens[1])
            length = int(tokens[2])
        except ValueError as e:
            raise FormatDeclarationError(f"Invalid FMT type id or length: {e}") from e

        return cls(
            type_id=type_id,
            length=length,
            name=tokens[3],
            format=tokens[4],
            field_names=tuple(tokens[FMT_HEADER_TOKENS:])
        )

    def field_offset(self, field_name: str) -> int:
        """Token offset of a field; token 0 is the type tag."""
        try:
            return self.field_names.index(field_name) + 1
        except ValueError:
            return NOT_FOUND


class FormatRegistry:
    """Maps record-type tags to their format declarations for one export."""

    def __init__(self, error_handler: Optional[RobustErrorHandler] = None):
        self.logger = logging.getLogger(__name__)
        self.error_handler = error_handler or RobustErrorHandler()
        self._declarations: Dict[str, FormatDeclaration] = {}

    def register_declaration(self, record: LogRecord) -> Optional[FormatDeclaration]:
        """
        Parse an FMT record and store its declaration by type name.

        Malformed declarations are logged and skipped; the type stays
        unregistered.

        Args:
            record: Tokenized FMT record

        Returns:
            The registered declaration, or None if the record was malformed
        """
        declaration = None
        with self.error_handler.handle_record_errors(record.raw, "register FMT declaration"):
            declaration = FormatDeclaration.from_record(record)
            self._declarations[declaration.name] = declaration
            self.logger.debug(
                f"Registered format {declaration.name} with {len(declaration.field_names)} fields")

        return declaration

    def find_field_offset(self, type_tag: str, field_name: str) -> int:
        """
        Find the token offset of a field within records of a type.

        Args:
            type_tag: Record-type tag, e.g. ``GPS``
            field_name: Case-sensitive field name, e.g. ``Lat``

        Returns:
            Zero-based token offset, or NOT_FOUND if the type is unregistered
            or has no such field
        """
        declaration = self._declarations.get(type_tag)
        if declaration is None:
            return NOT_FOUND
        return declaration.field_offset(field_name)

    def is_registered(self, type_tag: str) -> bool:
        return type_tag in self._declarations

    def get(self, type_tag: str) -> Optional[FormatDeclaration]:
        return self._declarations.get(type_tag)

    @property
    def type_tags(self) -> List[str]:
        return list(self._declarations)

    def __contains__(self, type_tag: str) -> bool:
        return self.is_registered(type_tag)

    def __len__(self) -> int:
        return len(self._declarations)
