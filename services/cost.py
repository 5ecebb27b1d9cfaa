"""
Cost Calculation Service

Functions for deriving a material's cost per gram and a recipe line's cost.
"""

from .units import to_grams


def cost_per_gram(total_cost, total_quantity, unit):
    """
    Cost of one gram of a purchased material.

    Returns 0 when the purchased quantity is zero, e.g. a new material
    whose quantity has not been entered yet.
    """
    grams = to_grams(total_quantity, unit)
    if grams <= 0:
        return 0.0
    return total_cost / grams


def line_cost(used_grams, cost_per_gram):
    """Cost of using used_grams of a material."""
    return used_grams * cost_per_gram
