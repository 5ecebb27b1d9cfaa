"""
Recipe Models

Contains the Recipe, RecipeIngredient and RecipeVersion models.

Line weights/costs and recipe totals stored here are caches written on
every save; display and scaling always re-aggregate against the live
materials.
"""

from .base import db, TimestampMixin
from .packaging import recipe_packaging


class Recipe(TimestampMixin, db.Model):
    """Formulation with batch information and ordered ingredient lines."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), default='Other')
    description = db.Column(db.Text, default='')
    instructions = db.Column(db.Text, default='')

    batch_size = db.Column(db.Float, nullable=True)  # grams
    number_of_units = db.Column(db.Integer, nullable=True)
    original_batch_size = db.Column(db.Float, nullable=True)  # scaling basis, grams

    # Cached totals (USD)
    total_cost = db.Column(db.Float, default=0.0)
    cost_per_unit = db.Column(db.Float, nullable=True)

    ingredients = db.relationship(
        'RecipeIngredient', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='RecipeIngredient.position',
    )
    packaging = db.relationship('PackagingItem', secondary=recipe_packaging, lazy=True)
    versions = db.relationship(
        'RecipeVersion', backref='recipe', lazy=True,
        cascade='all, delete-orphan', order_by='RecipeVersion.version_number.desc()',
    )

    @property
    def total_packaging_cost(self):
        return sum(item.cost for item in self.packaging)


class RecipeIngredient(db.Model):
    """One material used in a recipe, in insertion order."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    material_id = db.Column(db.Integer, db.ForeignKey('raw_material.id', ondelete='SET NULL'), nullable=True, index=True)
    position = db.Column(db.Integer, default=0, nullable=False)
    amount = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(10), default='g', nullable=False)
    material_name = db.Column(db.String(200), default='')  # kept if the material is deleted

    # Cached at last save
    amount_in_grams = db.Column(db.Float, default=0.0)
    cost = db.Column(db.Float, default=0.0)

    material = db.relationship('RawMaterial')


class RecipeVersion(TimestampMixin, db.Model):
    """Numbered snapshot of a recipe's lines and batch fields."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    version_number = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(200), default='')
    notes = db.Column(db.Text, default='')
    batch_size = db.Column(db.Float, nullable=True)
    number_of_units = db.Column(db.Integer, nullable=True)
    original_batch_size = db.Column(db.Float, nullable=True)
    total_cost = db.Column(db.Float, default=0.0)
    # [{'material_id', 'material_name', 'amount', 'unit'}, ...]
    ingredients = db.Column(db.JSON, default=list)
