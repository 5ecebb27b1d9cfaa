"""
Price Record Model

A saved pricing calculation. Every amount is stored in USD.
"""

from .base import db, TimestampMixin


class PriceRecord(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id', ondelete='SET NULL'), nullable=True, index=True)
    product_name = db.Column(db.String(200), nullable=False)

    actual_cost = db.Column(db.Float, default=0.0)
    packaging_cost = db.Column(db.Float, default=0.0)
    container_cost = db.Column(db.Float, default=0.0)
    profit_margin = db.Column(db.Float, default=0.0)  # percent

    total_cost = db.Column(db.Float, default=0.0)
    profit_amount = db.Column(db.Float, default=0.0)
    final_price = db.Column(db.Float, default=0.0)

    number_of_units = db.Column(db.Integer, nullable=True)
    cost_per_unit = db.Column(db.Float, nullable=True)
    price_per_unit = db.Column(db.Float, nullable=True)
    profit_per_unit = db.Column(db.Float, nullable=True)
    notes = db.Column(db.Text, default='')

    recipe = db.relationship('Recipe')
