"""
Numeric Input Helpers

Decimal parsing with defaults for raw values typed into forms or read back
from storage.
"""

from decimal import Decimal, InvalidOperation


def to_decimal(value, default=Decimal('0'), min_val=None, max_val=None):
    """Safely parse a Decimal value with optional bounds.

    Accepts Decimals, ints, floats and strings (with either '.' or ',' as the
    decimal separator). Anything unparsable, empty, NaN or infinite returns
    ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        result = value
    else:
        text = str(value).strip().replace(',', '.')
        if not text:
            return default
        try:
            result = Decimal(text)
        except (InvalidOperation, ValueError):
            return default
    if not result.is_finite():
        return default
    if min_val is not None:
        result = max(Decimal(min_val), result)
    if max_val is not None:
        result = min(Decimal(max_val), result)
    return result


def to_int(value, default=None):
    """Safely parse an integer id, returning ``default`` when empty or invalid."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return default
