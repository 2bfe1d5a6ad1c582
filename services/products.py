"""
Saved Product Store

Holds the saved products (SavedRecipe snapshots), newest first. Like the
inventory store, every mutation returns a new store.
"""

import logging

from models import SavedRecipe
from .cost import recalculate_saved_recipes

logger = logging.getLogger(__name__)


class RecipeNotFound(KeyError):
    """Raised when removing a saved product id the store doesn't hold."""


class SavedRecipeStore:
    """Newest-first collection of SavedRecipes."""

    def __init__(self, recipes=()):
        self._recipes = tuple(recipes)

    def __iter__(self):
        return iter(self._recipes)

    def __len__(self):
        return len(self._recipes)

    def __eq__(self, other):
        return isinstance(other, SavedRecipeStore) and self._recipes == other._recipes

    def __repr__(self):
        return f'SavedRecipeStore({len(self._recipes)} products)'

    def get(self, recipe_id):
        return next((recipe for recipe in self._recipes if recipe.id == recipe_id), None)

    def referencing(self, ingredient_id):
        """Saved products with at least one line pointing at ingredient_id."""
        return [recipe for recipe in self._recipes if recipe.references(ingredient_id)]

    def save(self, recipe):
        logger.info("Saving product %s (%s), total cost %s", recipe.id, recipe.name, recipe.total_cost)
        return SavedRecipeStore((recipe,) + self._recipes)

    def remove(self, recipe_id):
        if self.get(recipe_id) is None:
            raise RecipeNotFound(recipe_id)
        logger.info("Removing product %s", recipe_id)
        return SavedRecipeStore(recipe for recipe in self._recipes if recipe.id != recipe_id)

    def recalculate(self, inventory):
        """Refresh the cost fields of every saved product against inventory."""
        recipes = recalculate_saved_recipes(self._recipes, inventory)
        changed = sum(1 for old, new in zip(self._recipes, recipes) if old != new)
        logger.info("Recalculated %d saved products, %d changed", len(recipes), changed)
        return SavedRecipeStore(recipes)

    def to_list(self):
        return [recipe.to_dict() for recipe in self._recipes]

    @classmethod
    def from_list(cls, data):
        return cls(SavedRecipe.from_dict(item) for item in data or ())
