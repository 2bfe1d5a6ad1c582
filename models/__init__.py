"""
Models Package

Exports the costing records and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import IngredientRecord
from .recipe import RecipeLine, FixedCosts, SavedRecipe
from .collection import StoredCollection

__all__ = [
    'db',
    'IngredientRecord',
    'RecipeLine',
    'FixedCosts',
    'SavedRecipe',
    'StoredCollection',
]
