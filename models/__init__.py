"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .user import User
from .material import RawMaterial
from .packaging import PackagingItem, recipe_packaging
from .recipe import Recipe, RecipeIngredient, RecipeVersion
from .pricing import PriceRecord
from .inventory import InventoryItem

__all__ = [
    'db',
    'User',
    'RawMaterial',
    'PackagingItem',
    'recipe_packaging',
    'Recipe',
    'RecipeIngredient',
    'RecipeVersion',
    'PriceRecord',
    'InventoryItem',
]
