"""
Form Parsing Helpers

Parse numbers and dates from submitted form fields without raising.
"""

from datetime import date


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
        if result is None:
            return None
        if result != result or result in (float('inf'), float('-inf')):
            return default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value not in (None, '') else default
        if result is None:
            return None
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def parse_date(value):
    """Parse an ISO date (YYYY-MM-DD), None if empty or invalid."""
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def optional_positive(value, max_val=None):
    """A positive float, or None when blank, zero or invalid."""
    result = safe_float(value, default=None, max_val=max_val)
    if result is None or result <= 0:
        return None
    return result
