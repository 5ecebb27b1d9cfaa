"""
Packaging Models

Containers, labels and other packaging with a per-item cost, and the
association table linking packaging to recipes.
"""

from .base import db, TimestampMixin


recipe_packaging = db.Table(
    'recipe_packaging',
    db.Column('recipe_id', db.Integer, db.ForeignKey('recipe.id', ondelete='CASCADE'), primary_key=True),
    db.Column('packaging_item_id', db.Integer, db.ForeignKey('packaging_item.id', ondelete='CASCADE'), primary_key=True),
)


class PackagingItem(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    cost = db.Column(db.Float, default=0.0, nullable=False)  # USD
    category = db.Column(db.String(20), default='container', nullable=False)
    supplier = db.Column(db.String(200), default='')
    description = db.Column(db.Text, default='')
