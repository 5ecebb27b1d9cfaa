"""
User Model

Owner of every material, recipe, packaging item, inventory row and
price record.
"""

from .base import db, TimestampMixin


class User(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
