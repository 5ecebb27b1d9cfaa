"""
Validation Constants

Contains whitelist values for validating user input to prevent
injection attacks and ensure data integrity.
"""

# Valid packaging categories
VALID_PACKAGING_CATEGORIES = {'container', 'label', 'box', 'bag', 'other'}

# Valid recipe categories
VALID_RECIPE_CATEGORIES = {
    'Skincare', 'Haircare', 'Body', 'Soap', 'Lip', 'Bath',
    'Fragrance', 'Makeup', 'Other'
}

# Maximum field lengths for security
MAX_LENGTHS = {
    'material_name': 200,
    'recipe_name': 200,
    'packaging_name': 200,
    'product_name': 200,
    'category': 50,
    'email': 255,
    'supplier': 200,
    'notes': 5000,
    'instructions': 50000,
}

# Upper bound on any numeric form input (quantities, costs)
MAX_NUMERIC_INPUT = 1_000_000_000
