"""
Recipe Aggregation Service

Computes per-line weights, costs and shares, and recipe totals, always
from the current material records rather than the costs cached on lines.
"""

import logging

from .cost import line_cost
from .types import AggregatedRecipe, IngredientLine
from .units import to_grams

logger = logging.getLogger(__name__)


def index_materials(materials):
    """Accept a {id: material} mapping or an iterable of materials."""
    if materials is None:
        return {}
    if isinstance(materials, dict):
        return materials
    return {m.id: m for m in materials}


def _material_name(line, material):
    if material is not None:
        return material.name
    return getattr(line, 'material_name', '') or ''


def resolve_line(line, materials, amount=None):
    """
    Recompute one ingredient line against the live material record.

    Args:
        line: Any object with material_id, amount and unit
        materials: Mapping of material id to material
        amount: Optional replacement amount (used when scaling)

    Returns:
        A new IngredientLine; the input line is not modified
    """
    if amount is None:
        amount = line.amount
    material = materials.get(line.material_id)
    grams = to_grams(amount, line.unit)

    if material is None:
        logger.warning('Material %r not found, costing line at 0', line.material_id)
        cost = 0.0
    else:
        cost = line_cost(grams, material.cost_per_gram or 0.0)

    return IngredientLine(
        material_id=line.material_id,
        amount=amount,
        unit=line.unit,
        material_name=_material_name(line, material),
        amount_in_grams=grams,
        cost=cost,
        missing=material is None,
    )


def percentages(lines, total_weight):
    """Share of total weight per line, all 0 when the total is 0."""
    if total_weight <= 0:
        return [0.0 for _ in lines]
    return [line.amount_in_grams / total_weight * 100 for line in lines]


def cost_per_unit(total_cost, number_of_units):
    if number_of_units and number_of_units > 0:
        return total_cost / number_of_units
    return None


def aggregate_lines(lines, recipe=None, number_of_units=None):
    """Build an AggregatedRecipe from already-resolved lines."""
    total_weight = sum(line.amount_in_grams for line in lines)
    total_cost = sum(line.cost for line in lines)
    return AggregatedRecipe(
        recipe=recipe,
        lines=lines,
        percentages=percentages(lines, total_weight),
        total_weight=total_weight,
        total_cost=total_cost,
        cost_per_unit=cost_per_unit(total_cost, number_of_units),
    )


def aggregate_recipe(recipe, materials):
    """
    Aggregate a recipe against the current materials.

    Lines keep insertion order; use AggregatedRecipe.by_percentage()
    for display ordering.
    """
    materials = index_materials(materials)
    lines = [resolve_line(line, materials) for line in recipe.ingredients]
    return aggregate_lines(
        lines,
        recipe=recipe,
        number_of_units=getattr(recipe, 'number_of_units', None),
    )


def total_recipe_weight(recipe):
    """Sum of the weights stored on the recipe's lines."""
    return sum(line.amount_in_grams or 0.0 for line in recipe.ingredients)


def live_total_weight(recipe):
    """Total weight recomputed from line amounts and units."""
    return sum(to_grams(line.amount, line.unit) for line in recipe.ingredients)
