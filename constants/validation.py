"""
Validation Constants

Contains whitelist values and limits for validating user input
before it reaches the costing engine.
"""

from decimal import Decimal

from .units import BASE_FACTORS

# Valid values for purchase_unit / usage_unit fields (whitelist)
VALID_UNITS = frozenset(BASE_FACTORS)

DEFAULT_PURCHASE_UNIT = 'kg'
DEFAULT_USAGE_UNIT = 'g'

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 200,
}

# Upper bound for any price or quantity typed into a form
MAX_AMOUNT = 10 ** 9

# Smallest step a typed amount keeps; anything finer rounds to 0
AMOUNT_PLACES = Decimal('0.0001')

# Storage keys for the two persisted collections
INVENTORY_KEY = 'costoExactoInventory'
PRODUCTS_KEY = 'costoExactoProducts'
