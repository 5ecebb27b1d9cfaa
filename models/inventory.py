"""
Inventory Model

Stock on hand. Quantities keep the unit they were recorded in; volume
and count units (ml, l, pcs) are not converted to grams.
"""

from .base import db, TimestampMixin


class InventoryItem(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    quantity = db.Column(db.Float, default=0.0, nullable=False)
    unit = db.Column(db.String(10), default='g', nullable=False)
    minimum_level = db.Column(db.Float, default=0.0, nullable=False)  # alert threshold, same unit
    notes = db.Column(db.Text, default='')

    @property
    def out_of_stock(self):
        return (self.quantity or 0.0) <= (self.minimum_level or 0.0)

    @property
    def stock_status(self):
        return 'Out of Stock' if self.out_of_stock else 'In Stock'
