"""
Workspace Service

Owns the inventory and the saved products together with their storage.
Editing or deleting an ingredient recalculates every saved product before
either collection is persisted, so stored cost fields never lag behind the
inventory they were computed from.
"""

import logging

from constants import INVENTORY_KEY, PRODUCTS_KEY
from .cost import build_saved_recipe, compute_margin, compute_recipe_cost
from .inventory import InventoryStore
from .products import SavedRecipeStore

logger = logging.getLogger(__name__)


class Workspace:
    """
    The calculator's state: inventory + saved products + storage.

    Args:
        storage: object with load(key) and save(key, items), e.g.
            services.storage.DatabaseStorage or MemoryStorage
    """

    def __init__(self, storage):
        self.storage = storage
        self.inventory = InventoryStore.from_list(storage.load(INVENTORY_KEY))
        self.products = SavedRecipeStore.from_list(storage.load(PRODUCTS_KEY))
        logger.debug("Workspace loaded: %r, %r", self.inventory, self.products)

    # ---- ingredients ----

    def add_ingredient(self, record):
        """Add an ingredient. New ingredients can't be referenced yet, so nothing is recalculated."""
        self.inventory = self.inventory.add(record)
        self._persist_inventory()
        return record

    def update_ingredient(self, ingredient_id, **changes):
        inventory = self.inventory.update(ingredient_id, **changes)
        self._commit_inventory_change(inventory, ingredient_id)
        return self.inventory.get(ingredient_id)

    def remove_ingredient(self, ingredient_id):
        """Delete an ingredient. Lines that referenced it stay and cost 0 from now on."""
        inventory = self.inventory.remove(ingredient_id)
        self._commit_inventory_change(inventory, ingredient_id)

    # ---- calculator ----

    def quote(self, lines, fixed_costs, sale_price):
        """
        Cost a recipe without saving it.

        Returns:
            (RecipeCost, Margin)
        """
        cost = compute_recipe_cost(lines, self.inventory, fixed_costs)
        return cost, compute_margin(cost.total_cost, sale_price)

    def save_recipe(self, name, lines, fixed_costs, sale_price):
        recipe = build_saved_recipe(name, lines, fixed_costs, sale_price, self.inventory)
        self.products = self.products.save(recipe)
        self._persist_products()
        return recipe

    def remove_recipe(self, recipe_id):
        self.products = self.products.remove(recipe_id)
        self._persist_products()

    # ---- internals ----

    def _commit_inventory_change(self, inventory, ingredient_id):
        products = self.products.recalculate(inventory)
        affected = len(self.products.referencing(ingredient_id))
        logger.info("Ingredient %s changed, %d saved products reference it", ingredient_id, affected)
        # Swap both only once every product has been recalculated
        self.inventory, self.products = inventory, products
        self._persist_inventory()
        self._persist_products()

    def _persist_inventory(self):
        self.storage.save(INVENTORY_KEY, self.inventory.to_list())

    def _persist_products(self):
        self.storage.save(PRODUCTS_KEY, self.products.to_list())
