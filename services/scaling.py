"""
Recipe Scaling Service

Rescales a recipe to a new total batch weight, keeping every ingredient's
share of the batch, and suggests sensible target sizes.
"""

from .aggregation import aggregate_lines, index_materials, live_total_weight, resolve_line
from .types import ScaledRecipe

# Round sizes offered for every recipe (grams)
BASE_SCALING_OPTIONS = [5, 10, 15, 20, 25, 30, 50, 75, 100, 150, 200, 250, 500, 1000]

# Extra small sizes for recipes of 50 g or less
SMALL_SCALING_OPTIONS = [1, 2, 3, 4, 6, 8, 12, 16]

# Multiples of the current size
SCALING_MULTIPLIERS = [0.25, 0.5, 0.75, 1.25, 1.5, 2, 2.5, 3, 5, 10]

MAX_SCALING_OPTIONS = 12
MIN_SCALING_OPTIONS = 4
MAX_FALLBACK_OPTIONS = 8

# Candidates this close to the current size are dropped
CURRENT_SIZE_TOLERANCE = 0.1


class ScalingError(ValueError):
    """Raised when a recipe cannot be scaled to the requested size."""
    pass


def scaling_basis(recipe):
    """
    Weight the recipe's current amounts correspond to.

    original_batch_size, then batch_size, then the live aggregated
    weight; the first that is set and non-zero wins.
    """
    for value in (getattr(recipe, 'original_batch_size', None),
                  getattr(recipe, 'batch_size', None)):
        if value:
            return value
    return live_total_weight(recipe)


def scale_recipe(recipe, target_weight, materials):
    """
    Scale every ingredient line by target_weight / basis.

    Weights and costs are recomputed from the current material costs and
    totals are summed from the scaled lines, so price changes since the
    recipe was saved are reflected.

    Raises:
        ScalingError: target_weight or the basis weight is not positive
    """
    if target_weight is None or target_weight <= 0:
        raise ScalingError(f"Target batch size must be positive, got {target_weight}")

    materials = index_materials(materials)
    basis = scaling_basis(recipe)
    if not basis or basis <= 0:
        raise ScalingError('Recipe has no weight to scale from')

    factor = target_weight / basis
    lines = [
        resolve_line(line, materials, amount=line.amount * factor)
        for line in recipe.ingredients
    ]
    number_of_units = getattr(recipe, 'number_of_units', None)
    aggregated = aggregate_lines(lines, number_of_units=number_of_units)

    return ScaledRecipe(
        name=recipe.name,
        ingredients=lines,
        id=getattr(recipe, 'id', None),
        total_cost=aggregated.total_cost,
        batch_size=target_weight,
        number_of_units=number_of_units,
        cost_per_unit=aggregated.cost_per_unit,
        original_batch_size=basis,
        scaling_factor=factor,
        original_recipe=recipe,
    )


def _unique_sorted(values):
    seen = set()
    result = []
    for value in sorted(values):
        key = round(value, 6)
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def _away_from(current_size, values):
    return [v for v in values if v > 0 and abs(v - current_size) > CURRENT_SIZE_TOLERANCE]


def scaling_options(recipe):
    """
    Suggested target sizes for a recipe, ascending and deduplicated.

    Combines round sizes with multiples of the current size, drops the
    current size itself and keeps the first 12.
    """
    current_size = getattr(recipe, 'batch_size', None) or live_total_weight(recipe)

    base_options = list(BASE_SCALING_OPTIONS)
    if current_size <= 50:
        base_options = SMALL_SCALING_OPTIONS + base_options
    custom_options = [current_size * m for m in SCALING_MULTIPLIERS]

    options = _unique_sorted(_away_from(current_size, base_options + custom_options))
    options = options[:MAX_SCALING_OPTIONS]
    if len(options) >= MIN_SCALING_OPTIONS:
        return options

    fallback = _away_from(current_size, [
        max(1, current_size * 0.5),
        max(2, current_size * 0.75),
        current_size * 1.5,
        current_size * 2,
    ])
    return _unique_sorted(options + fallback)[:MAX_FALLBACK_OPTIONS]


def format_scaling_factor(factor):
    if factor == 1:
        return '1:1 (Original)'
    if factor < 1:
        return f"1:{1 / factor:.1f} (Scaled Down)"
    return f"{factor:.1f}:1 (Scaled Up)"
