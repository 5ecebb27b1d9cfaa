"""
Raw Material Model

A purchased ingredient. cost_per_gram is derived from total_cost and
total_quantity and recomputed whenever either changes.
"""

from .base import db, TimestampMixin


class RawMaterial(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)

    # Purchase data, cost in USD
    total_cost = db.Column(db.Float, default=0.0, nullable=False)
    total_quantity = db.Column(db.Float, default=0.0, nullable=False)
    unit = db.Column(db.String(10), default='g', nullable=False)

    # USD per gram
    cost_per_gram = db.Column(db.Float, default=0.0, nullable=False)

    supplier_name = db.Column(db.String(200), nullable=True)
    supplier_contact = db.Column(db.String(200), nullable=True)
    last_purchase_date = db.Column(db.Date, nullable=True)
    purchase_notes = db.Column(db.Text, default='')
    usage_notes = db.Column(db.Text, default='')
    typical_monthly_usage = db.Column(db.Float, nullable=True)  # grams
