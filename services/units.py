"""
Unit Conversion Service

Converts material and recipe quantities to grams, the canonical unit
for every cost calculation.
"""

import logging

from constants import UNIT_MAPPINGS, WEIGHT_TO_G

logger = logging.getLogger(__name__)


def normalize_unit(unit):
    """Map user input like 'Grams' or 'LBS' to a standard unit code."""
    if unit is None:
        return ''
    key = str(unit).strip().lower()
    return UNIT_MAPPINGS.get(key, key)


def is_weight_unit(unit):
    return normalize_unit(unit) in WEIGHT_TO_G


def to_grams(value, unit):
    """
    Convert a weight to grams.

    The sign of value is not checked. An unknown unit is treated as
    grams already, so partially migrated data still renders.
    """
    factor = WEIGHT_TO_G.get(normalize_unit(unit))
    if factor is None:
        logger.warning('Unknown weight unit %r, treating value as grams', unit)
        return value
    return value * factor


def from_grams(grams, unit):
    """Inverse of to_grams. Lossy for oz and lb at float precision."""
    factor = WEIGHT_TO_G.get(normalize_unit(unit))
    if factor is None:
        logger.warning('Unknown weight unit %r, treating value as grams', unit)
        return grams
    return grams / factor


def format_weight(weight, unit):
    """Format a weight with its unit, e.g. '12.50 g'."""
    return f"{weight:.2f} {normalize_unit(unit) or unit}"
