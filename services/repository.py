"""
Repository Service

User-scoped persistence for materials, recipes, packaging, inventory and
price records. Each repository is built with a database session and the
signed-in user's id; every query is filtered by that id, so rows owned by
another user are simply not found.
"""

import logging

from models import (
    InventoryItem, PackagingItem, PriceRecord, RawMaterial, Recipe,
    RecipeIngredient, RecipeVersion,
)

from .aggregation import aggregate_recipe
from .cost import cost_per_gram

logger = logging.getLogger(__name__)


class BaseRepository:
    """List/get/save/delete for one user-owned model."""
    model = None
    order_by = 'name'

    def __init__(self, session, user_id):
        self.session = session
        self.user_id = user_id

    def query(self):
        return self.session.query(self.model).filter_by(user_id=self.user_id)

    def list(self):
        return self.query().order_by(getattr(self.model, self.order_by)).all()

    def get(self, id):
        return self.query().filter_by(id=id).first()

    def save(self, obj):
        obj.user_id = self.user_id
        self.session.add(obj)
        self.session.commit()
        logger.info('Saved %s %s for user %s', self.model.__name__, obj.id, self.user_id)
        return obj

    def delete(self, obj):
        self.session.delete(obj)
        self.session.commit()
        logger.info('Deleted %s %s for user %s', self.model.__name__, obj.id, self.user_id)


class MaterialRepository(BaseRepository):
    model = RawMaterial

    def save(self, material):
        """Persist a material, recomputing its cost per gram."""
        material.cost_per_gram = cost_per_gram(
            material.total_cost or 0.0, material.total_quantity or 0.0, material.unit
        )
        return super().save(material)

    def delete(self, material):
        # Recipe lines keep their material_name and cost 0 from now on
        self.session.query(RecipeIngredient).filter_by(material_id=material.id).update(
            {'material_id': None}, synchronize_session='fetch'
        )
        super().delete(material)

    def by_id(self):
        return {m.id: m for m in self.query().all()}


class PackagingRepository(BaseRepository):
    model = PackagingItem

    def get_many(self, ids):
        if not ids:
            return []
        return self.query().filter(PackagingItem.id.in_(ids)).all()


class InventoryRepository(BaseRepository):
    model = InventoryItem


class PriceRecordRepository(BaseRepository):
    model = PriceRecord
    order_by = 'created_at'

    def list(self):
        return self.query().order_by(PriceRecord.created_at.desc(), PriceRecord.id.desc()).all()

    def save_breakdown(self, breakdown, product_name, recipe=None, notes=''):
        """Store a PriceBreakdown as a PriceRecord."""
        record = PriceRecord(
            product_name=product_name,
            recipe_id=recipe.id if recipe is not None else None,
            actual_cost=breakdown.actual_cost,
            packaging_cost=breakdown.packaging_cost,
            container_cost=breakdown.container_cost,
            profit_margin=breakdown.profit_margin,
            total_cost=breakdown.total_cost,
            profit_amount=breakdown.profit_amount,
            final_price=breakdown.final_price,
            number_of_units=breakdown.number_of_units,
            cost_per_unit=breakdown.cost_per_unit,
            price_per_unit=breakdown.price_per_unit,
            profit_per_unit=breakdown.profit_per_unit,
            notes=notes,
        )
        return self.save(record)


class RecipeRepository(BaseRepository):
    model = Recipe

    def __init__(self, session, user_id):
        super().__init__(session, user_id)
        self.materials = MaterialRepository(session, user_id)

    def aggregate(self, recipe):
        """Live aggregation against this user's current materials."""
        return aggregate_recipe(recipe, self.materials.by_id())

    def aggregate_many(self, recipes):
        """Live aggregations for several recipes, loading materials once."""
        materials = self.materials.by_id()
        return [aggregate_recipe(recipe, materials) for recipe in recipes]


    def refresh_totals(self, recipe, reset_basis=False):
        """
        Rewrite the cached line weights/costs and recipe totals.

        With reset_basis (the composition or batch size changed) the
        scaling basis becomes the explicit batch size, else the current
        total weight.
        """
        aggregated = self.aggregate(recipe)
        for line, resolved in zip(recipe.ingredients, aggregated.lines):
            line.amount_in_grams = resolved.amount_in_grams
            line.cost = resolved.cost
            if not resolved.missing:
                line.material_name = resolved.material_name

        recipe.total_cost = aggregated.total_cost
        recipe.cost_per_unit = aggregated.cost_per_unit
        if reset_basis or not recipe.original_batch_size:
            recipe.original_batch_size = recipe.batch_size or aggregated.total_weight or None
        return aggregated

    def create(self, **fields):
        recipe = Recipe(**fields)
        recipe.original_batch_size = recipe.batch_size
        recipe.user_id = self.user_id
        self.session.add(recipe)
        self.refresh_totals(recipe)
        return self.save(recipe)

    def update(self, recipe, **fields):
        for key, value in fields.items():
            setattr(recipe, key, value)
        self.refresh_totals(recipe, reset_basis=True)
        return self.save(recipe)

    def add_ingredient(self, recipe, material, amount, unit):
        line = RecipeIngredient(
            material_id=material.id,
            material_name=material.name,
            amount=amount,
            unit=unit,
            position=len(recipe.ingredients),
        )
        recipe.ingredients.append(line)
        self.refresh_totals(recipe, reset_basis=True)
        self.save(recipe)
        return line

    def get_ingredient(self, recipe, line_id):
        for line in recipe.ingredients:
            if line.id == line_id:
                return line
        return None

    def update_ingredient(self, recipe, line, material=None, amount=None, unit=None):
        if material is not None:
            line.material_id = material.id
            line.material_name = material.name
        if amount is not None:
            line.amount = amount
        if unit is not None:
            line.unit = unit
        self.refresh_totals(recipe, reset_basis=True)
        return self.save(recipe)

    def remove_ingredient(self, recipe, line):
        recipe.ingredients.remove(line)
        for position, remaining in enumerate(recipe.ingredients):
            remaining.position = position
        self.refresh_totals(recipe, reset_basis=True)
        return self.save(recipe)

    def apply_scaled(self, recipe, scaled):
        """
        Persist a ScaledRecipe over the recipe it was scaled from.

        Identity, name and packaging stay; lines and totals are replaced.
        The stored basis becomes the new batch size, since the saved
        amounts now describe that weight.
        """
        for line, scaled_line in zip(recipe.ingredients, scaled.ingredients):
            line.amount = scaled_line.amount
            line.amount_in_grams = scaled_line.amount_in_grams
            line.cost = scaled_line.cost
        recipe.batch_size = scaled.batch_size
        recipe.total_cost = scaled.total_cost
        recipe.cost_per_unit = scaled.cost_per_unit
        recipe.original_batch_size = scaled.batch_size
        logger.info('Scaled recipe %s by %.4f', recipe.id, scaled.scaling_factor)
        return self.save(recipe)

    def set_packaging(self, recipe, packaging_ids):
        recipe.packaging = PackagingRepository(self.session, self.user_id).get_many(packaging_ids)
        return self.save(recipe)

    def list_versions(self, recipe):
        return sorted(recipe.versions, key=lambda v: v.version_number, reverse=True)

    def get_version(self, recipe, version_id):
        for version in recipe.versions:
            if version.id == version_id:
                return version
        return None

    def create_version(self, recipe, name='', notes=''):
        """Snapshot the recipe's current lines as the next version number."""
        latest = max((v.version_number for v in recipe.versions), default=0)
        version = RecipeVersion(
            version_number=latest + 1,
            name=name or f"Version {latest + 1}",
            notes=notes,
            batch_size=recipe.batch_size,
            number_of_units=recipe.number_of_units,
            original_batch_size=recipe.original_batch_size,
            total_cost=recipe.total_cost,
            ingredients=[
                {
                    'material_id': line.material_id,
                    'material_name': line.material_name,
                    'amount': line.amount,
                    'unit': line.unit,
                }
                for line in recipe.ingredients
            ],
        )
        recipe.versions.append(version)
        self.save(recipe)
        return version

    def revert_to_version(self, recipe, version):
        """Replace the recipe's lines and batch fields with a snapshot."""
        known = self.materials.by_id()
        recipe.ingredients.clear()
        for position, item in enumerate(version.ingredients or []):
            material_id = item.get('material_id')
            recipe.ingredients.append(RecipeIngredient(
                material_id=material_id if material_id in known else None,
                material_name=item.get('material_name', ''),
                amount=item['amount'],
                unit=item.get('unit', 'g'),
                position=position,
            ))
        recipe.batch_size = version.batch_size
        recipe.number_of_units = version.number_of_units
        recipe.original_batch_size = version.original_batch_size
        self.refresh_totals(recipe)
        logger.info('Reverted recipe %s to version %s', recipe.id, version.version_number)
        return self.save(recipe)
