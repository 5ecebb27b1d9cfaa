"""
Label Service

Builds the data printed on a product label. Ingredients are declared in
descending order of their share of the batch.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .aggregation import aggregate_recipe


@dataclass
class LabelIngredient:
    name: str
    percentage: float


@dataclass
class LabelData:
    product_name: str
    brand_name: str = ''
    description: str = ''
    net_weight: Optional[float] = None
    batch_number: str = ''
    ingredients: List[LabelIngredient] = field(default_factory=list)

    @property
    def ingredient_statement(self):
        return ', '.join(i.name for i in self.ingredients)


def build_label(recipe, materials, product_name=None, brand_name='',
                net_weight=None, batch_number='', description=''):
    """Label data for a recipe; net weight defaults to the batch weight in grams."""
    aggregated = aggregate_recipe(recipe, materials)
    ingredients = [
        LabelIngredient(name=line.material_name, percentage=round(percentage, 1))
        for line, percentage in aggregated.by_percentage()
    ]
    if net_weight is None:
        net_weight = round(aggregated.total_weight, 2)

    return LabelData(
        product_name=product_name or recipe.name,
        brand_name=brand_name,
        description=description,
        net_weight=net_weight,
        batch_number=batch_number,
        ingredients=ingredients,
    )
