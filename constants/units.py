"""
Unit Constants and Conversion Tables

Contains the unit aliases and gram conversion factors used for
material purchases, recipe lines and inventory records.
"""

# Canonical mass unit for all cost math
CANONICAL_UNIT = 'g'

# Unit mappings for form input (lowercase input -> standard unit)
UNIT_MAPPINGS = {
    'g': 'g', 'gram': 'g', 'grams': 'g', 'gr': 'g',
    'kg': 'kg', 'kilogram': 'kg', 'kilograms': 'kg', 'kilo': 'kg', 'kilos': 'kg',
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz',
    'lb': 'lb', 'lbs': 'lb', 'pound': 'lb', 'pounds': 'lb',
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml',
    'l': 'l', 'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l',
    'pcs': 'pcs', 'pc': 'pcs', 'piece': 'pcs', 'pieces': 'pcs',
}

# Weight conversions to grams
WEIGHT_TO_G = {'g': 1, 'kg': 1000, 'oz': 28.3495, 'lb': 453.592}

# Units accepted on materials and recipe lines
WEIGHT_UNITS = ('g', 'kg', 'oz', 'lb')

# Inventory keeps volume and count units as recorded, never converted
INVENTORY_UNITS = WEIGHT_UNITS + ('ml', 'l', 'pcs')
