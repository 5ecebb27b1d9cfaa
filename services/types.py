"""
Core Data Types

Plain dataclasses passed between the costing engine and its callers.
The engine also accepts the SQLAlchemy models directly, since they expose
the same attribute names.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class RawMaterialData:
    """A purchased raw material with its derived cost per gram."""
    id: Any
    name: str
    total_cost: float
    total_quantity: float
    unit: str = 'g'
    cost_per_gram: float = 0.0


@dataclass
class IngredientLine:
    """
    One material used in a recipe.

    amount_in_grams and cost are caches; aggregation recomputes them
    from the live material record.
    """
    material_id: Any
    amount: float
    unit: str = 'g'
    material_name: str = ''
    amount_in_grams: float = 0.0
    cost: float = 0.0
    missing: bool = False


@dataclass
class RecipeData:
    """An ordered set of ingredient lines plus batch information."""
    name: str
    ingredients: List[IngredientLine] = field(default_factory=list)
    id: Any = None
    total_cost: float = 0.0
    batch_size: Optional[float] = None
    number_of_units: Optional[int] = None
    cost_per_unit: Optional[float] = None
    original_batch_size: Optional[float] = None


@dataclass
class ScaledRecipe(RecipeData):
    """A recipe rescaled to a new batch size, never persisted as such."""
    scaling_factor: float = 1.0
    original_recipe: Any = None


@dataclass
class AggregatedRecipe:
    """Live totals for a recipe, lines kept in insertion order."""
    recipe: Any
    lines: List[IngredientLine]
    percentages: List[float]
    total_weight: float
    total_cost: float
    cost_per_unit: Optional[float] = None

    def by_percentage(self):
        """Return (line, percentage) pairs, largest share first."""
        pairs = list(zip(self.lines, self.percentages))
        return sorted(pairs, key=lambda pair: pair[1], reverse=True)

    def items(self):
        return list(zip(self.lines, self.percentages))


@dataclass
class PriceBreakdown:
    """One pricing calculation, every amount in the canonical currency."""
    actual_cost: float
    packaging_cost: float
    container_cost: float
    profit_margin: float
    total_cost: float
    profit_amount: float
    final_price: float
    number_of_units: Optional[int] = None
    cost_per_unit: Optional[float] = None
    price_per_unit: Optional[float] = None
    profit_per_unit: Optional[float] = None
