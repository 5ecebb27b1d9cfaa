"""
Constants Package

Unit tables, currency tables and input validation whitelists.
"""

from .units import (
    CANONICAL_UNIT,
    UNIT_MAPPINGS,
    WEIGHT_TO_G,
    WEIGHT_UNITS,
    INVENTORY_UNITS,
)

from .currency import (
    CANONICAL_CURRENCY,
    CURRENCIES,
    EXCHANGE_RATES,
    ZERO_DECIMAL_CURRENCIES,
)

from .validation import (
    VALID_PACKAGING_CATEGORIES,
    VALID_RECIPE_CATEGORIES,
    MAX_LENGTHS,
    MAX_NUMERIC_INPUT,
)

__all__ = [
    # Units
    'CANONICAL_UNIT',
    'UNIT_MAPPINGS',
    'WEIGHT_TO_G',
    'WEIGHT_UNITS',
    'INVENTORY_UNITS',
    # Currency
    'CANONICAL_CURRENCY',
    'CURRENCIES',
    'EXCHANGE_RATES',
    'ZERO_DECIMAL_CURRENCIES',
    # Validation
    'VALID_PACKAGING_CATEGORIES',
    'VALID_RECIPE_CATEGORIES',
    'MAX_LENGTHS',
    'MAX_NUMERIC_INPUT',
]
