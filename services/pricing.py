"""
Pricing Service

Derives a sale price from material, packaging and container costs plus a
profit margin.
"""

from .currency import Money
from .types import PriceBreakdown


def to_canonical(cost):
    """
    Canonical amount for a cost input.

    Money values (typed into a form in a display currency) are converted
    to USD here, exactly once. Plain numbers are taken to be stored,
    already canonical values such as a recipe's total cost.
    """
    if cost is None:
        return 0.0
    if isinstance(cost, Money):
        return cost.canonical()
    return float(cost)


def calculate_price(actual_cost, packaging_cost=0.0, container_cost=0.0,
                    margin_percent=0.0, number_of_units=None):
    """
    Compute final price and profit for a product.

    Args:
        actual_cost: Material cost, a number (canonical) or Money
        packaging_cost: Packaging cost, a number (canonical) or Money
        container_cost: Container/add-on cost, a number (canonical) or Money
        margin_percent: Profit markup on total cost, in percent
        number_of_units: Optional unit count for per-unit figures

    Returns:
        PriceBreakdown with every amount in USD
    """
    actual = to_canonical(actual_cost)
    packaging = to_canonical(packaging_cost)
    container = to_canonical(container_cost)
    margin = margin_percent or 0.0

    total_cost = actual + packaging + container
    profit_amount = total_cost * margin / 100
    final_price = total_cost + profit_amount

    breakdown = PriceBreakdown(
        actual_cost=actual,
        packaging_cost=packaging,
        container_cost=container,
        profit_margin=margin,
        total_cost=total_cost,
        profit_amount=profit_amount,
        final_price=final_price,
    )

    if number_of_units and number_of_units > 0:
        breakdown.number_of_units = number_of_units
        breakdown.cost_per_unit = total_cost / number_of_units
        breakdown.price_per_unit = final_price / number_of_units
        breakdown.profit_per_unit = profit_amount / number_of_units

    return breakdown
