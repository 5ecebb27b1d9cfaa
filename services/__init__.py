"""
Services Package

Recipe costing engine (units, currency, cost, aggregation, scaling,
pricing) plus labels, export rows and the user-scoped repositories.
The engine modules are pure; only repository touches the database.
"""

from .units import (
    normalize_unit,
    to_grams,
    from_grams,
    format_weight,
)

from .currency import (
    Money,
    CurrencyMismatchError,
    convert_currency,
    format_currency,
    format_currency_without_conversion,
)

from .cost import (
    cost_per_gram,
    line_cost,
)

from .aggregation import (
    aggregate_recipe,
    total_recipe_weight,
)

from .scaling import (
    ScalingError,
    scale_recipe,
    scaling_options,
    format_scaling_factor,
)

from .pricing import (
    calculate_price,
)

__all__ = [
    # Units
    'normalize_unit',
    'to_grams',
    'from_grams',
    'format_weight',
    # Currency
    'Money',
    'CurrencyMismatchError',
    'convert_currency',
    'format_currency',
    'format_currency_without_conversion',
    # Cost
    'cost_per_gram',
    'line_cost',
    # Aggregation
    'aggregate_recipe',
    'total_recipe_weight',
    # Scaling
    'ScalingError',
    'scale_recipe',
    'scaling_options',
    'format_scaling_factor',
    # Pricing
    'calculate_price',
]
