"""
Token conversion helpers.

Numeric parsing here is best effort: a missing field and an unparsable token
both yield the default value, they are never reported as errors.
"""

import math
from typing import Optional, Sequence

NOT_FOUND = -1


def _clean(token: str) -> Optional[str]:
    if token is None:
        return None
    token = token.strip()
    # int()/float() accept digit grouping underscores and non-ASCII digits,
    # log tokens never use either
    if not token or not token.isascii() or '_' in token:
        return None
    return token


def parse_float(token: str) -> Optional[float]:
    """Parse a locale-invariant decimal number, returning None on failure."""
    token = _clean(token)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_int(token: str) -> Optional[int]:
    """Parse an integer token, returning None on failure."""
    token = _clean(token)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def safe_float(tokens: Sequence[str], index: int, default: float = 0.0) -> float:
    """
    Read the token at ``index`` as a float.

    Args:
        tokens: Record tokens
        index: Token offset, or NOT_FOUND
        default: Value returned when the offset is missing or the token is not numeric

    Returns:
        Parsed value or ``default``
    """
    if index < 0 or index >= len(tokens):
        return default

    value = parse_float(tokens[index])
    return default if value is None else value


def format_number(value: float) -> str:
    """
    Render a number in invariant shortest round-trip form.

    Integral values are written without a fractional part (``0``, ``100``).
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def quote_csv_field(text: str) -> str:
    """Wrap text in double quotes, doubling any embedded quotes."""
    return '"' + text.replace('"', '""') + '"'
